"""Tracing and logging for langutil."""

from .logger import FINE, log_fine, setup_tracing

__all__ = [
    "FINE",
    "log_fine",
    "setup_tracing",
]
