"""Environment-driven settings for the parser and its loaders.

Values come from the process environment. A ``.env`` file at the project root
is read once and only fills variables that are not already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_PAGES = 10
DEFAULT_LOG_LEVEL = "WARNING"

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"
_ENV_LOADED = False


def _load_local_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    if ENV_PATH.exists():
        for raw_line in ENV_PATH.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip().strip("\"'"))
    _ENV_LOADED = True


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    max_pages: int = DEFAULT_MAX_PAGES
    debug: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    """Read settings from the environment (after loading ``.env`` once)."""
    _load_local_env()
    return Settings(
        max_pages=max(1, _env_int("FOLIO_MAX_PAGES", DEFAULT_MAX_PAGES)),
        debug=_env_flag("FOLIO_PARSER_DEBUG"),
        log_level=(os.getenv("FOLIO_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )


__all__ = ["DEFAULT_MAX_PAGES", "Settings", "get_settings"]
