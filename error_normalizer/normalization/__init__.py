from error_normalizer.normalization.factory import NormalizerFactory
from error_normalizer.normalization.normalizer import ErrorNormalizer, normalize_error

__all__ = ["ErrorNormalizer", "NormalizerFactory", "normalize_error"]
