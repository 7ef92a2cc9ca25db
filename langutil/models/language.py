"""Language models shared by the registry and the host hooks."""

from enum import Enum
from typing import Callable


class LanguageCode(str, Enum):
    """Languages supported by the host game."""

    EN = "EN"  # English
    DE = "DE"  # German
    ES = "ES"  # Spanish
    FR = "FR"  # French
    IT = "IT"  # Italian
    JA = "JA"  # Japanese
    KO = "KO"  # Korean
    PT = "PT"  # Portuguese (Brazil)
    RU = "RU"  # Russian
    ZH = "ZH"  # Simplified Chinese


class MissingFallbackPolicy(str, Enum):
    """What to do when a sheet's source language has no strings and no fallback is set."""

    RAISE = "raise"  # Raise MissingFallbackConfigurationError
    SOURCE_LANGUAGE = "source_language"  # Keep the language the source returned


# Zero-argument query for the language a sheet should currently use.
LanguageSource = Callable[[], LanguageCode]
