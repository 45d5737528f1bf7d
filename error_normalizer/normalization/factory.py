from error_normalizer.classifiers.factory import ClassifierFactory
from error_normalizer.config.settings import Settings
from error_normalizer.logging.logger import Log
from error_normalizer.normalization.normalizer import ErrorNormalizer


class NormalizerFactory:
    """Creates an ErrorNormalizer from application settings."""

    @classmethod
    def create(cls, settings: Settings) -> ErrorNormalizer:
        source = cls._resolve_source(settings)
        Log.info(
            f"Error normalizer configured (source override: {source or 'detect'})"
        )
        return ErrorNormalizer(
            source=source,  # type: ignore[arg-type]
            default_retryable=settings.error_default_retryable,
        )

    @classmethod
    def _resolve_source(cls, settings: Settings) -> str | None:
        source = (settings.error_source_override or "").strip().lower()
        if not source:
            return None
        if not ClassifierFactory.supports(source):
            raise ValueError(
                f"Unknown error source '{source}'. "
                f"Choose from: {list(ClassifierFactory.ADAPTERS)}"
            )
        return source
