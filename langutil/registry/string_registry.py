"""String Registry for overriding the host game's language strings."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Mapping

from langutil.models import LanguageCode, LanguageSource, MissingFallbackPolicy
from langutil.tracing import log_fine

logger = logging.getLogger(__name__)


class MissingFallbackConfigurationError(LookupError):
    """Raised when a sheet needs its fallback language but none was registered."""

    def __init__(self, sheet: str, language: LanguageCode):
        self.sheet = sheet
        self.language = language
        super().__init__(
            f"Sheet '{sheet}' has no strings for '{_language_name(language)}' "
            "and no fallback language registered"
        )


def _describe_source(source: Callable) -> str:
    return getattr(source, "__qualname__", None) or repr(source)


def _language_name(language) -> str:
    # Sources and host queries may hand back plain strings that equal a LanguageCode.
    return str(getattr(language, "value", language))


class StringRegistry:
    """Registry for replacement strings, keyed by language, sheet and key.

    Mods register strings, per-sheet fallback languages and per-sheet
    language sources. The host calls ``handle_host_lookup`` for every string
    it displays and gets back either an override or its own original value.
    """

    def __init__(
        self,
        current_language: Callable[[], LanguageCode],
        default_language: LanguageCode = LanguageCode.EN,
        missing_fallback_policy: MissingFallbackPolicy = MissingFallbackPolicy.RAISE,
    ):
        """Initialize the registry.

        Args:
            current_language: Host query for the globally active language.
            default_language: Language used by ``add_string`` when none is given.
            missing_fallback_policy: Behavior when a fallback is needed but unset.
        """
        self._current_language = current_language
        self.default_language = default_language
        self.missing_fallback_policy = missing_fallback_policy
        self._strings: dict[LanguageCode, dict[str, dict[str, str]]] = {}
        self._fallback_languages: dict[str, LanguageCode] = {}
        self._language_sources: dict[str, LanguageSource] = {}
        self._lock = threading.RLock()

    def add_string(
        self,
        message: str,
        key: str,
        sheet: str,
        language: LanguageCode | None = None,
    ) -> None:
        """Add a language string, replacing any previous one for the same key.

        Args:
            message: The string.
            key: The key of the string.
            sheet: The sheet the key is contained in.
            language: The language of the string (default: registry default).
        """
        language = language or self.default_language
        logger.debug(
            "Adding string '%s'/'%s'/'%s'", _language_name(language), sheet, key
        )
        with self._lock:
            self._strings.setdefault(language, {}).setdefault(sheet, {})[key] = message

    def add_strings(
        self,
        strings: Mapping[str, str],
        sheet: str,
        language: LanguageCode | None = None,
    ) -> None:
        """Add every key/message pair of ``strings`` to one sheet."""
        for key, message in strings.items():
            self.add_string(message, key, sheet, language)

    def add_fallback_language_for_sheet(
        self, sheet: str, fallback_language: LanguageCode
    ) -> None:
        """Set the language used when the sheet's source language has no strings.

        Args:
            sheet: The sheet the fallback is for.
            fallback_language: The language to fall back to.
        """
        logger.debug(
            "Adding fallback language '%s' to '%s'",
            _language_name(fallback_language),
            sheet,
        )
        with self._lock:
            self._fallback_languages[sheet] = fallback_language

    def add_language_source_for_sheet(
        self, sheet: str, language_source: LanguageSource
    ) -> None:
        """Set the callable that picks the active language for a sheet.

        The source is only called at lookup time.

        Args:
            sheet: The sheet the source is for.
            language_source: Zero-argument callable returning a LanguageCode.
        """
        logger.debug(
            "Adding language source '%s' to '%s'",
            _describe_source(language_source),
            sheet,
        )
        with self._lock:
            self._language_sources[sheet] = language_source

    def has_sheet(self, language: LanguageCode, sheet: str) -> bool:
        """Check if any string is registered for the sheet in the language."""
        log_fine(
            logger, "Checking if '%s'/'%s' exists", _language_name(language), sheet
        )
        with self._lock:
            return sheet in self._strings.get(language, {})

    def resolve_language(self, sheet: str) -> LanguageCode:
        """Resolve the language whose strings should be used for a sheet.

        Without a language source the host's current language is used. With
        one, the source's language is used if it has strings for the sheet,
        otherwise the sheet's fallback language.

        Args:
            sheet: The sheet being looked up.

        Returns:
            The language to look strings up in.

        Raises:
            MissingFallbackConfigurationError: If the fallback is needed, none
                is registered and the policy is ``RAISE``.
        """
        log_fine(logger, "Looking up language for sheet '%s'", sheet)
        with self._lock:
            source = self._language_sources.get(sheet)
        if source is None:
            return self._current_language()

        # Called outside the lock; sources may query the registry themselves.
        language = source()
        if self.has_sheet(language, sheet):
            return language

        with self._lock:
            fallback = self._fallback_languages.get(sheet)
        if fallback is not None:
            return fallback

        if self.missing_fallback_policy == MissingFallbackPolicy.SOURCE_LANGUAGE:
            logger.warning(
                "No fallback language for sheet '%s'; keeping '%s'",
                sheet,
                _language_name(language),
            )
            return language
        raise MissingFallbackConfigurationError(sheet, language)

    def resolve_string(
        self,
        language: LanguageCode,
        key: str,
        sheet: str,
        original_value: str,
    ) -> str:
        """Resolve a string, falling back to the host's original value.

        Args:
            language: The language to look in.
            key: The key of the string.
            sheet: The sheet the key is contained in.
            original_value: The host's own string.

        Returns:
            The registered override, or ``original_value`` if there is none.
        """
        log_fine(
            logger,
            "Looking up string for '%s'/'%s'/'%s' with orig '%s'",
            _language_name(language),
            sheet,
            key,
            original_value,
        )
        if not self.has_sheet(language, sheet):
            return original_value
        with self._lock:
            return self._strings[language][sheet].get(key, original_value)

    def handle_host_lookup(self, key: str, sheet: str, original_value: str) -> str:
        """Hook handler for the host's string lookups."""
        return self.resolve_string(
            self.resolve_language(sheet), key, sheet, original_value
        )

    def fallback_language_for(self, sheet: str) -> LanguageCode | None:
        """Get the fallback language of a sheet, or None if unset."""
        with self._lock:
            return self._fallback_languages.get(sheet)

    def list_languages(self) -> list[LanguageCode]:
        """List languages with at least one registered string."""
        with self._lock:
            return list(self._strings.keys())

    def list_sheets(self, language: LanguageCode) -> list[str]:
        """List sheets with strings in a language."""
        with self._lock:
            return list(self._strings.get(language, {}).keys())

    def __len__(self) -> int:
        with self._lock:
            return sum(
                len(keys)
                for sheets in self._strings.values()
                for keys in sheets.values()
            )

    def __contains__(self, entry: tuple[LanguageCode, str, str]) -> bool:
        language, sheet, key = entry
        with self._lock:
            return key in self._strings.get(language, {}).get(sheet, {})
