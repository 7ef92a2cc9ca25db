"""Bootstrap helpers for wiring the string registry into the host."""

from __future__ import annotations

import logging
from typing import Callable

from langutil.config import Settings, settings as default_settings
from langutil.hooks import LanguageGetHook
from langutil.models import LanguageCode
from langutil.registry import StringRegistry
from langutil.tracing import setup_tracing

logger = logging.getLogger(__name__)


def install_string_registry(
    hook: LanguageGetHook,
    current_language: Callable[[], LanguageCode],
    settings: Settings | None = None,
) -> StringRegistry:
    """Create the process-wide string registry and subscribe it to the host hook.

    Call once at startup and hand the returned registry to every mod that
    registers strings. The subscription is never removed.

    Args:
        hook: The host's string-lookup hook.
        current_language: Host query for the globally active language.
        settings: Settings to build from (default: environment settings).

    Returns:
        The installed registry.
    """
    settings = settings or default_settings
    if settings.tracing_enabled:
        setup_tracing(settings.log_level)

    registry = StringRegistry(
        current_language,
        default_language=settings.default_language,
        missing_fallback_policy=settings.missing_fallback_policy,
    )
    logger.debug("Hooking string registry into the language lookup hook")
    hook.subscribe(registry.handle_host_lookup)
    return registry
