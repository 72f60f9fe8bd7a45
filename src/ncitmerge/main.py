#!/usr/bin/env python3

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ncitmerge.app import merge_new_codes
from ncitmerge.config import ConfigurationError, configure_logging, get_reconcile_config
from ncitmerge.domain.errors import ReconciliationError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Merge proposed codes into the NCIt CodeSystem fragment",
    )
    parser.add_argument(
        "--thesaurus",
        type=Path,
        help="Path to the NCIt Thesaurus.txt flat file (defaults to $THESAURUS)",
    )
    parser.add_argument(
        "--new-codes",
        type=Path,
        help="Path to the proposed CodeSystem JSON (defaults to $NEW_CODES)",
    )
    parser.add_argument(
        "--suppress-info",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Hide INFO diagnostics for codes already present (defaults to $SUPPRESS_INFO)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        config = get_reconcile_config().with_overrides(
            thesaurus_path=parsed_args.thesaurus,
            new_codes_path=parsed_args.new_codes,
            suppress_info=parsed_args.suppress_info,
        )
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)

    try:
        result = merge_new_codes(config)
    except ReconciliationError:
        log.exception("Fatal error during merge")
        sys.exit(1)

    print(result.tally.render(), end="")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def cli() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    cli()
