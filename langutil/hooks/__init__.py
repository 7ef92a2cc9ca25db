"""Host-side hooks the string registry plugs into."""

from .host_language import HostLanguage
from .language_hook import LanguageGetHandler, LanguageGetHook

__all__ = [
    "HostLanguage",
    "LanguageGetHandler",
    "LanguageGetHook",
]
