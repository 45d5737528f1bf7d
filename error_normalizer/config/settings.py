from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Normalizer configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    error_source_override: str | None = None
    error_default_retryable: bool | None = None
