"""Concept mutations applied by reconciliation decisions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ncitmerge.domain.model import same_term

from .contracts import Diagnostic, Severity

if TYPE_CHECKING:
    from ncitmerge.domain.model import Concept


def adopt_authoritative_display(
    concept: Concept,
    authoritative_display: str,
) -> tuple[Concept, Diagnostic | None]:
    """Return a copy of ``concept`` displaying the NCIt preferred term.

    The definition is never carried over. When the proposed display differs
    from the preferred term (ignoring case) it is kept as a synonym and a
    warning is returned alongside the copy. ``concept`` itself is left as is.
    """

    adopted = concept.with_display(authoritative_display)
    if same_term(concept.display, authoritative_display):
        return adopted, None

    adopted.add_synonym(concept.display)
    diagnostic = Diagnostic(
        severity=Severity.WARNING,
        code=concept.code,
        message=(
            "proposed term does not match NCIt preferred term: "
            f"code={concept.code}, proposed={concept.display!r}, "
            f"ncit={authoritative_display!r}"
        ),
    )
    return adopted, diagnostic


def add_display_as_synonym(
    existing: Concept,
    proposed: Concept,
) -> Diagnostic | None:
    """Record ``proposed.display`` as a synonym of ``existing`` when it is new.

    Returns the mismatch warning when a synonym was added, ``None`` when the
    display already matches or is already present among the designations.
    """

    if same_term(existing.display, proposed.display):
        return None
    if existing.has_designation_value(proposed.display):
        return None

    old_display = existing.display
    existing.add_synonym(proposed.display)
    return Diagnostic(
        severity=Severity.WARNING,
        code=existing.code,
        message=(
            f"mismatched displays for code {existing.code!r}: "
            f"old={old_display!r}, new={proposed.display!r}"
        ),
    )

