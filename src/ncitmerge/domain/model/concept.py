"""Terminology concepts and their designations.

A concept's ``code`` is its identity and never changes. Designations are
append-only: nothing here removes or reorders them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Final

SNOMED_SYSTEM: Final[str] = "http://snomed.info/sct"
SYNONYM_SNOMED_CODE: Final[str] = "900000000000013009"


@dataclass(frozen=True, slots=True, kw_only=True)
class DesignationUse:
    """Coding that classifies a designation (for example as a synonym)."""

    system: str
    code: str
    display: str | None = None


SYNONYM_USE: Final[DesignationUse] = DesignationUse(
    system=SNOMED_SYSTEM,
    code=SYNONYM_SNOMED_CODE,
)


@dataclass(slots=True, kw_only=True)
class Designation:
    value: str
    use: DesignationUse | None = None
    language: str | None = None

    @classmethod
    def synonym(cls, value: str) -> Designation:
        return cls(value=value, use=SYNONYM_USE)


@dataclass(slots=True, kw_only=True)
class Concept:
    code: str
    display: str
    designation: list[Designation] | None = None
    definition: str | None = None
    concept: list[Concept] | None = field(default=None, repr=False)

    def __str__(self) -> str:
        return f'{self.code} "{self.display}"'

    def add_designation(self, designation: Designation) -> None:
        if self.designation is None:
            self.designation = [designation]
        else:
            self.designation.append(designation)

    def add_synonym(self, value: str) -> None:
        self.add_designation(Designation.synonym(value))

    def has_designation_value(self, value: str) -> bool:
        """Return whether ``value`` already appears as a designation, ignoring case."""

        if not self.designation:
            return False
        wanted = value.casefold()
        return any(entry.value.casefold() == wanted for entry in self.designation)

    def with_display(self, display: str) -> Concept:
        """Copy with ``display`` replaced and the definition dropped.

        The copy owns its designation list, so appending to it leaves ``self``
        untouched.
        """

        return replace(
            self,
            display=display,
            definition=None,
            designation=list(self.designation) if self.designation is not None else None,
        )


def same_term(left: str, right: str) -> bool:
    """Case-insensitive term comparison used throughout reconciliation."""

    return left.casefold() == right.casefold()
