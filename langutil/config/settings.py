"""Configuration settings for langutil."""

from pydantic_settings import BaseSettings

from langutil.models import LanguageCode, MissingFallbackPolicy


class Settings(BaseSettings):
    """Settings loaded from ``LANGUTIL_*`` environment variables."""

    # Registry Configuration
    default_language: LanguageCode = LanguageCode.EN
    missing_fallback_policy: MissingFallbackPolicy = MissingFallbackPolicy.RAISE

    # Tracing Configuration
    tracing_enabled: bool = True
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LANGUTIL_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
