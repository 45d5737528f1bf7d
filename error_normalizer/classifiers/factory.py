from error_normalizer.classifiers.axios_classifier import AxiosClassifier
from error_normalizer.classifiers.base import BaseClassifier
from error_normalizer.classifiers.fetch_classifier import FetchClassifier
from error_normalizer.classifiers.graphql_classifier import GraphQLClassifier
from error_normalizer.classifiers.rest_classifier import RestClassifier
from error_normalizer.classifiers.runtime_classifier import CustomClassifier, RuntimeClassifier


class ClassifierFactory:
    """Resolves an error source tag to its classifier."""

    ADAPTERS: dict[str, type[BaseClassifier]] = {
        "axios": AxiosClassifier,
        "fetch": FetchClassifier,
        "graphql": GraphQLClassifier,
        "rest": RestClassifier,
        "runtime": RuntimeClassifier,
        "custom": CustomClassifier,
    }

    @classmethod
    def supports(cls, source: str) -> bool:
        return source in cls.ADAPTERS

    @classmethod
    def create(cls, source: str) -> BaseClassifier:
        """Return the classifier for ``source``; unsupported sources use runtime rules."""
        adapter_cls = cls.ADAPTERS.get(source, RuntimeClassifier)
        return adapter_cls()
