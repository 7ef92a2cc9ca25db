"""The host's global language setting."""

from __future__ import annotations

from langutil.config import settings
from langutil.models import LanguageCode


class HostLanguage:
    """Mutable current-language setting owned by the host.

    Starts at ``settings.default_language`` unless a language is given.
    """

    def __init__(self, language: LanguageCode | None = None):
        self._language = language or settings.default_language

    def current_language(self) -> LanguageCode:
        return self._language

    def set_language(self, language: LanguageCode) -> None:
        self._language = language
