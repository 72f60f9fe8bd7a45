"""NCI Thesaurus lookup table.

Records are built once from the rows of the NCIt ``Thesaurus.FLAT`` export and
are read-only afterwards. Column order of that export:

    code, iri, parents, synonyms, definition, display_name, concept_status,
    semantic_type, concept_in_subset

``parents``, ``synonyms`` and ``concept_in_subset`` are pipe-delimited. The
first synonym is always the NCIt preferred term.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .errors import MalformedThesaurusRowError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


log = getLogger(__name__)

THESAURUS_COLUMNS: Final[tuple[str, ...]] = (
    "code",
    "iri",
    "parents",
    "synonyms",
    "definition",
    "display_name",
    "concept_status",
    "semantic_type",
    "concept_in_subset",
)
PIPE: Final[str] = "|"


@dataclass(frozen=True, slots=True, kw_only=True)
class ThesaurusRecord:
    code: str
    iri: str
    parents: tuple[str, ...]
    synonyms: tuple[str, ...]
    definition: str
    display_name: str | None
    concept_status: str | None
    semantic_type: str
    concept_in_subset: tuple[str, ...]

    @property
    def preferred_term(self) -> str:
        return self.synonyms[0]


class Thesaurus(Mapping[str, ThesaurusRecord]):
    """Immutable mapping from NCIt code to its record."""

    __slots__ = ("_records",)

    def __init__(self, records: Mapping[str, ThesaurusRecord] | None = None) -> None:
        self._records: dict[str, ThesaurusRecord] = dict(records or {})

    def __getitem__(self, code: str) -> ThesaurusRecord:
        return self._records[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def lookup(self, code: str) -> ThesaurusRecord | None:
        """Exact, case-sensitive lookup; ``code`` is never trimmed or normalized."""

        return self._records.get(code)


def build_thesaurus(rows: Iterable[Sequence[str]]) -> Thesaurus:
    """Build a :class:`Thesaurus` from raw tab-separated rows.

    Later rows overwrite earlier rows with the same code. Any malformed row
    aborts the whole build.
    """

    records: dict[str, ThesaurusRecord] = {}
    for row_number, row in enumerate(rows, start=1):
        record = parse_thesaurus_row(row, row_number=row_number)
        if record.code in records:
            log.warning(
                "Duplicate thesaurus code %s at row %s, keeping last",
                record.code,
                row_number,
            )
        records[record.code] = record
    log.debug("Built thesaurus with %s records", len(records))
    return Thesaurus(records)


def parse_thesaurus_row(row: Sequence[str], *, row_number: int) -> ThesaurusRecord:
    if len(row) != len(THESAURUS_COLUMNS):
        raise MalformedThesaurusRowError(
            row_number,
            f"expected {len(THESAURUS_COLUMNS)} columns, got {len(row)}",
        )
    (
        code,
        iri,
        parents,
        synonyms,
        definition,
        display_name,
        concept_status,
        semantic_type,
        concept_in_subset,
    ) = row
    if not synonyms:
        raise MalformedThesaurusRowError(row_number, f"code {code!r} has no preferred term")
    return ThesaurusRecord(
        code=code,
        iri=iri,
        parents=_split_pipes(parents),
        synonyms=tuple(synonyms.split(PIPE)),
        definition=definition,
        display_name=display_name or None,
        concept_status=concept_status or None,
        semantic_type=semantic_type,
        concept_in_subset=_split_pipes(concept_in_subset),
    )


def _split_pipes(value: str) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(value.split(PIPE))
