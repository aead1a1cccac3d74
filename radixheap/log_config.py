"""
Logging configuration helper for command-line entry points.

The library modules only create module loggers; nothing is configured on
import. Call `configure_logging` once from a process entry point.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

# Environment variable consulted when no explicit level is given
LOG_LEVEL_ENV = "RADIXHEAP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LOGGING_CONFIGURED = False


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name (or the environment default) to a logging level."""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    value = getattr(logging, name, None)
    return value if isinstance(value, int) else logging.WARNING


def configure_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
