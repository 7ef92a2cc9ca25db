"""Settings tests."""

from langutil.config import Settings
from langutil.models import LanguageCode, MissingFallbackPolicy


def test_defaults(monkeypatch):
    """Test settings defaults without environment overrides."""
    for name in (
        "LANGUTIL_DEFAULT_LANGUAGE",
        "LANGUTIL_MISSING_FALLBACK_POLICY",
        "LANGUTIL_TRACING_ENABLED",
        "LANGUTIL_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_language == LanguageCode.EN
    assert settings.missing_fallback_policy == MissingFallbackPolicy.RAISE
    assert settings.tracing_enabled is True
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    """Test LANGUTIL_* environment variables are read."""
    monkeypatch.setenv("LANGUTIL_DEFAULT_LANGUAGE", "FR")
    monkeypatch.setenv("LANGUTIL_MISSING_FALLBACK_POLICY", "source_language")
    monkeypatch.setenv("LANGUTIL_TRACING_ENABLED", "false")
    monkeypatch.setenv("LANGUTIL_LOG_LEVEL", "FINE")

    settings = Settings(_env_file=None)

    assert settings.default_language == LanguageCode.FR
    assert settings.missing_fallback_policy == MissingFallbackPolicy.SOURCE_LANGUAGE
    assert settings.tracing_enabled is False
    assert settings.log_level == "FINE"
