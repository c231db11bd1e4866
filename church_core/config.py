# church_core/config.py
"""
Environment-driven switches.

Flags are read once at import and never raise. Tests flip the module
attributes directly (monkeypatch.setattr(config, "CHECKED_OBJECTS_ENABLED",
True)); library code always reads them through the module so that works.

    CHURCH_CHECKED_OBJECTS=1      shape-check SEND / GET (objects.py)
    CHURCH_RECURSION_LIMIT=<int>  host recursion limit for the CLI / demo,
                                  read when the limit is applied
    CHURCH_LOG_LEVEL=<name>       default CLI log level
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_logger = logging.getLogger(__name__)

CHECKED_OBJECTS_ENABLED = os.environ.get("CHURCH_CHECKED_OBJECTS", "0") == "1"

LOG_LEVEL = os.environ.get("CHURCH_LOG_LEVEL", "WARNING").upper()


def _int_from_env(var: str) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{var} must be > 0, got {value}")
    return value


def recursion_limit_from_env() -> Optional[int]:
    """CHURCH_RECURSION_LIMIT, or None when unset or invalid (with a warning)."""
    try:
        return _int_from_env("CHURCH_RECURSION_LIMIT")
    except ValueError as e:
        _logger.warning("ignoring %s", e)
        return None


def apply_recursion_limit(limit: Optional[int] = None) -> int:
    """
    Raise the host recursion limit to `limit` (or CHURCH_RECURSION_LIMIT).

    Never lowers the current limit. Returns the limit in effect.
    """
    wanted = limit if limit is not None else recursion_limit_from_env()
    current = sys.getrecursionlimit()
    if wanted is not None and wanted > current:
        sys.setrecursionlimit(wanted)
        return wanted
    return current


def log_level(verbose: bool = False) -> int:
    """DEBUG when verbose, else LOG_LEVEL; unknown names fall back to WARNING."""
    if verbose:
        return logging.DEBUG
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.WARNING
