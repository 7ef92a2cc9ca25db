"""Host string-lookup hook that mods subscribe to."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

# (key, sheet, orig) -> replacement string
LanguageGetHandler = Callable[[str, str, str], str]


class LanguageGetHook:
    """Multicast hook fired for every string the host looks up.

    Handlers run in subscription order. Each one receives the value returned
    by the previous handler as its original string. A handler that raises is
    logged and skipped; the lookup carries on with the value it had.
    """

    def __init__(self):
        self._handlers: list[LanguageGetHandler] = []

    def subscribe(self, handler: LanguageGetHandler) -> None:
        """Subscribe a handler for the lifetime of the hook.

        Args:
            handler: Callable taking (key, sheet, orig) and returning a string.
        """
        self._handlers.append(handler)

    def invoke(self, key: str, sheet: str, orig: str) -> str:
        """Run every handler for one lookup.

        Args:
            key: The key of the string.
            sheet: The sheet the key is contained in.
            orig: The host's own string.

        Returns:
            The string the host should display.
        """
        value = orig
        for handler in self._handlers:
            try:
                value = handler(key, sheet, value)
            except Exception:
                logger.exception(
                    "Language handler failed for '%s'/'%s'; keeping '%s'",
                    sheet,
                    key,
                    value,
                )
        return value

    @property
    def handlers(self) -> list[LanguageGetHandler]:
        """Subscribed handlers, in call order."""
        return self._handlers.copy()

    def __len__(self) -> int:
        return len(self._handlers)
