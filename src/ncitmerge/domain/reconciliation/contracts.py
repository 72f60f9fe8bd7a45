"""Shared reconciliation contract components.

This module intentionally holds only the value types passed between the
engine and its callers:
- resolution and severity enums
- diagnostics and per-concept decisions
- run settings
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ncitmerge.domain.model import Concept


class Resolution(StrEnum):
    """Terminal state of one proposed concept."""

    PRE_EXISTING_UNCHANGED = "pre_existing_unchanged"
    PRE_EXISTING_SYNONYM_ADDED = "pre_existing_synonym_added"
    NEWLY_ADDED = "newly_added"
    REJECTED = "rejected"


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True, kw_only=True)
class Diagnostic:
    """Event raised while reconciling one code, for the caller to report."""

    severity: Severity
    code: str
    message: str


@dataclass(frozen=True, slots=True)
class ReconcileSettings:
    suppress_info: bool = True


@dataclass(slots=True, kw_only=True)
class ConceptDecision:
    """Outcome for one proposed concept.

    ``concept`` is the concept held by the code system after the decision
    (the pre-existing or the newly added one), or ``None`` when rejected.
    """

    code: str
    resolution: Resolution
    concept: Concept | None
    diagnostics: tuple[Diagnostic, ...] = ()
