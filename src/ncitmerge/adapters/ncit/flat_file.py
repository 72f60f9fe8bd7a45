"""Reader for the NCIt ``Thesaurus.FLAT`` export (``Thesaurus.txt``).

The file is tab-delimited, has no header row and uses no quoting; fields may
contain literal double quotes. Definitions can run past the ``csv`` module's
default field cap, so rows are read with :data:`FIELD_SIZE_LIMIT`.
"""

from __future__ import annotations

import csv
from logging import getLogger
from typing import TYPE_CHECKING, Final

from ncitmerge.domain.errors import InputUnavailableError, MalformedThesaurusRowError
from ncitmerge.domain.thesaurus import build_thesaurus

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from ncitmerge.domain.thesaurus import Thesaurus


log = getLogger(__name__)

FIELD_SIZE_LIMIT: Final[int] = 16 * 1024 * 1024


def iter_thesaurus_rows(
    lines: Iterable[str],
    *,
    field_size_limit: int = FIELD_SIZE_LIMIT,
) -> Iterator[list[str]]:
    """Yield non-blank tab-separated rows.

    Parser failures surface as :class:`MalformedThesaurusRowError` numbered by
    physical line. ``csv.field_size_limit`` is process-wide, so the previous
    value is restored once iteration ends.
    """

    previous_limit = csv.field_size_limit(field_size_limit)
    reader = csv.reader(lines, delimiter="\t", quoting=csv.QUOTE_NONE)
    try:
        for row in reader:
            if row:
                yield row
    except csv.Error as exc:
        raise MalformedThesaurusRowError(reader.line_num, str(exc)) from exc
    finally:
        csv.field_size_limit(previous_limit)


def read_thesaurus(path: Path) -> Thesaurus:
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            thesaurus = build_thesaurus(iter_thesaurus_rows(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(f"Cannot read thesaurus {path}: {exc}") from exc
    log.info("Loaded %s NCIt records from %s", len(thesaurus), path)
    return thesaurus
