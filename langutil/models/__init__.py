"""Domain models for langutil."""

from langutil.models.language import (
    LanguageCode,
    LanguageSource,
    MissingFallbackPolicy,
)

__all__ = [
    "LanguageCode",
    "LanguageSource",
    "MissingFallbackPolicy",
]
