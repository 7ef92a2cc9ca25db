"""Bootstrap tests."""

import pytest

from langutil.bootstrap import install_string_registry
from langutil.config import Settings
from langutil.hooks import HostLanguage, LanguageGetHook
from langutil.models import LanguageCode, MissingFallbackPolicy
from langutil.registry import MissingFallbackConfigurationError


@pytest.fixture
def quiet_settings():
    """Settings that leave logging configuration alone."""
    return Settings(tracing_enabled=False)


class TestInstallStringRegistry:
    """install_string_registry unit tests."""

    def test_subscribes_registry_to_hook(self, quiet_settings):
        """Test the registry handler is attached to the hook."""
        hook = LanguageGetHook()
        registry = install_string_registry(
            hook, HostLanguage().current_language, quiet_settings
        )

        assert hook.handlers == [registry.handle_host_lookup]

    def test_scenario_through_hook(self, quiet_settings):
        """Test the French dialogue scenario end to end."""
        hook = LanguageGetHook()
        registry = install_string_registry(
            hook, HostLanguage().current_language, quiet_settings
        )
        registry.add_string("Bonjour", "greeting", "dialogue", LanguageCode.FR)
        registry.add_fallback_language_for_sheet("dialogue", LanguageCode.EN)
        registry.add_language_source_for_sheet("dialogue", lambda: LanguageCode.FR)

        assert hook.invoke("greeting", "dialogue", "Hello") == "Bonjour"
        assert hook.invoke("farewell", "dialogue", "Goodbye") == "Goodbye"

    def test_settings_are_applied(self):
        """Test default language and fallback policy come from settings."""
        settings = Settings(
            tracing_enabled=False,
            default_language=LanguageCode.FR,
            missing_fallback_policy=MissingFallbackPolicy.SOURCE_LANGUAGE,
        )
        registry = install_string_registry(
            LanguageGetHook(), HostLanguage().current_language, settings
        )
        registry.add_string("Oui", "yes", "menu")
        registry.add_language_source_for_sheet("menu", lambda: LanguageCode.DE)

        assert registry.list_languages() == [LanguageCode.FR]
        assert registry.resolve_language("menu") == LanguageCode.DE

    def test_default_policy_raises(self, quiet_settings):
        """Test the default settings raise on a missing fallback."""
        registry = install_string_registry(
            LanguageGetHook(), HostLanguage().current_language, quiet_settings
        )
        registry.add_language_source_for_sheet("menu", lambda: LanguageCode.DE)

        with pytest.raises(MissingFallbackConfigurationError):
            registry.resolve_language("menu")
