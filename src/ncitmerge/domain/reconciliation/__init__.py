"""Reconciliation of proposed NCIt concepts into an existing code system.

Flow per proposed concept:
1) look the code up in the existing code system
2) pre-existing: add the proposed display as a synonym when it is new
3) otherwise: look the code up in the NCI Thesaurus
4) known to NCIt: append it with the NCIt preferred term as display
5) unknown: reject
"""

from __future__ import annotations

from .apply import add_display_as_synonym, adopt_authoritative_display
from .contracts import ConceptDecision, Diagnostic, ReconcileSettings, Resolution, Severity
from .engine import ReconciliationResult, iter_decisions, reconcile, reconcile_concept
from .tally import OutcomeTally

__all__ = [
    "ConceptDecision",
    "Diagnostic",
    "OutcomeTally",
    "ReconcileSettings",
    "ReconciliationResult",
    "Resolution",
    "Severity",
    "add_display_as_synonym",
    "adopt_authoritative_display",
    "iter_decisions",
    "reconcile",
    "reconcile_concept",
]
