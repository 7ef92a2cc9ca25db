"""Registry of replacement language strings."""

from langutil.registry.string_registry import (
    MissingFallbackConfigurationError,
    StringRegistry,
)

__all__ = [
    "MissingFallbackConfigurationError",
    "StringRegistry",
]
