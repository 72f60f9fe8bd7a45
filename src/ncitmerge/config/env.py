"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from .errors import ConfigurationError

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def env_path(name: str, default: str) -> Path:
    """Return the path stored in ``name``, falling back to ``default`` when missing/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return Path(default)
    return Path(value.strip())


def env_flag(name: str, *, default: bool) -> bool:
    """Interpret an environment variable as a boolean switch."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
