"""Reconciliation of proposed concepts against a code system and NCIt.

Each proposed concept ends in exactly one :class:`Resolution`:

- code already present, same display (ignoring case) or display already a
  designation -> ``PRE_EXISTING_UNCHANGED``
- code already present, new display -> display added as a synonym,
  ``PRE_EXISTING_SYNONYM_ADDED``
- code absent, known to NCIt -> appended with the NCIt preferred term as its
  display, ``NEWLY_ADDED``
- code absent, unknown to NCIt -> ``REJECTED``

For pre-existing codes only the proposed display is looked at; its
designations, definition and child concepts are dropped.

Proposed concepts are processed strictly in input order and a concept added
early in a batch is visible to later ones, so the loop must stay sequential.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .apply import add_display_as_synonym, adopt_authoritative_display
from .contracts import ConceptDecision, Diagnostic, ReconcileSettings, Resolution, Severity
from .tally import OutcomeTally

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from ncitmerge.domain.model import CodeSystem, Concept
    from ncitmerge.domain.thesaurus import Thesaurus


@dataclass(slots=True)
class ReconciliationResult:
    tally: OutcomeTally = field(default_factory=OutcomeTally)
    decisions: list[ConceptDecision] = field(default_factory=list[ConceptDecision])

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(
            diagnostic for decision in self.decisions for diagnostic in decision.diagnostics
        )


def reconcile_concept(
    code_system: CodeSystem,
    proposed: Concept,
    *,
    thesaurus: Thesaurus,
    settings: ReconcileSettings | None = None,
) -> ConceptDecision:
    """Decide and apply the resolution for one proposed concept.

    Mutates ``code_system`` (appending a concept or a synonym); never prints.
    """

    effective_settings = settings or ReconcileSettings()
    existing = code_system.get(proposed.code)
    if existing is not None:
        return _reconcile_existing(existing, proposed, settings=effective_settings)

    record = thesaurus.lookup(proposed.code)
    if record is None:
        return ConceptDecision(
            code=proposed.code,
            resolution=Resolution.REJECTED,
            concept=None,
            diagnostics=(
                Diagnostic(
                    severity=Severity.ERROR,
                    code=proposed.code,
                    message=f"non-NCIT code: {proposed}",
                ),
            ),
        )

    adopted, mismatch = adopt_authoritative_display(proposed, record.preferred_term)
    code_system.add_concept(adopted)
    return ConceptDecision(
        code=proposed.code,
        resolution=Resolution.NEWLY_ADDED,
        concept=adopted,
        diagnostics=(mismatch,) if mismatch is not None else (),
    )


def _reconcile_existing(
    existing: Concept,
    proposed: Concept,
    *,
    settings: ReconcileSettings,
) -> ConceptDecision:
    mismatch = add_display_as_synonym(existing, proposed)
    if mismatch is not None:
        return ConceptDecision(
            code=existing.code,
            resolution=Resolution.PRE_EXISTING_SYNONYM_ADDED,
            concept=existing,
            diagnostics=(mismatch,),
        )

    diagnostics: tuple[Diagnostic, ...] = ()
    if not settings.suppress_info:
        diagnostics = (
            Diagnostic(
                severity=Severity.INFO,
                code=existing.code,
                message=f"code {existing.code!r} already present with correct display",
            ),
        )
    return ConceptDecision(
        code=existing.code,
        resolution=Resolution.PRE_EXISTING_UNCHANGED,
        concept=existing,
        diagnostics=diagnostics,
    )


def iter_decisions(
    code_system: CodeSystem,
    proposed: Iterable[Concept],
    *,
    thesaurus: Thesaurus,
    settings: ReconcileSettings | None = None,
) -> Iterator[ConceptDecision]:
    """Lazily reconcile ``proposed`` in order, yielding each decision as it is applied."""

    for concept in proposed:
        yield reconcile_concept(code_system, concept, thesaurus=thesaurus, settings=settings)


def reconcile(
    code_system: CodeSystem,
    proposed: Iterable[Concept],
    *,
    thesaurus: Thesaurus,
    settings: ReconcileSettings | None = None,
    on_decision: Callable[[ConceptDecision], None] | None = None,
) -> ReconciliationResult:
    """Reconcile a whole batch and tally the outcome.

    ``on_decision`` is called with every decision right after it is applied,
    so callers can report diagnostics in input order while the batch runs.
    """

    result = ReconciliationResult()
    for decision in iter_decisions(
        code_system,
        proposed,
        thesaurus=thesaurus,
        settings=settings,
    ):
        result.tally.record(decision.resolution)
        result.decisions.append(decision)
        if on_decision is not None:
            on_decision(decision)
    return result
