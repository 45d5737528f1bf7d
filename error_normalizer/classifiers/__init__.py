from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.classifiers.factory import ClassifierFactory

__all__ = ["BaseClassifier", "ClassifierFactory"]
