"""Application configuration helpers."""

from __future__ import annotations

from .env import env_flag, env_path
from .errors import ConfigurationError
from .logging import configure_logging
from .reconcile import (
    DEFAULT_CODE_SYSTEM_PATH,
    DEFAULT_NEW_CODES_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_THESAURUS_PATH,
    ReconcileConfig,
    get_reconcile_config,
)

__all__ = [
    "DEFAULT_CODE_SYSTEM_PATH",
    "DEFAULT_NEW_CODES_PATH",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_THESAURUS_PATH",
    "ConfigurationError",
    "ReconcileConfig",
    "configure_logging",
    "env_flag",
    "env_path",
    "get_reconcile_config",
]
