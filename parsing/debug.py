"""Step-by-step trace output shared by the parser modules."""

from __future__ import annotations

import logging
from typing import Optional

from parsing.config import get_settings

logger = logging.getLogger("parsing")

_DEBUG = get_settings().debug


def set_debug(enabled: bool) -> None:
    """Toggle step-by-step debug output for the parser."""
    global _DEBUG
    _DEBUG = enabled
    logger.setLevel(logging.DEBUG if enabled else logging.NOTSET)


def is_debug() -> bool:
    return _DEBUG


def _debug(step: str, detail: Optional[str] = None) -> None:
    """Emit a debug record when debugging is enabled."""
    if not _DEBUG:
        return
    if detail:
        logger.debug("[parser] %s: %s", step, detail)
    else:
        logger.debug("[parser] %s", step)
