"""Logging setup for the ncitmerge command line."""

from __future__ import annotations

import logging
import sys


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Send reconciliation diagnostics to stderr.

    Stdout is left to the statistics report, so the two can be redirected
    separately (``ncitmerge > stats.txt 2> warnings.txt``).
    """

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)-7s [%(name)s] %(message)s",
        force=force,
    )
