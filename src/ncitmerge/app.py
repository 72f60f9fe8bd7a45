"""Application orchestration entry points."""

from __future__ import annotations

import logging
from logging import getLogger
from typing import TYPE_CHECKING, Final

from ncitmerge.adapters.fhir import read_code_system, read_concepts, write_code_system
from ncitmerge.adapters.ncit import read_thesaurus
from ncitmerge.config import get_reconcile_config
from ncitmerge.domain.reconciliation import ReconcileSettings, Severity, reconcile

if TYPE_CHECKING:
    from ncitmerge.config import ReconcileConfig
    from ncitmerge.domain.reconciliation import ConceptDecision, ReconciliationResult


log = getLogger(__name__)

_LOG_LEVELS: Final[dict[Severity, int]] = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


def report_decision(decision: ConceptDecision) -> None:
    for diagnostic in decision.diagnostics:
        log.log(_LOG_LEVELS[diagnostic.severity], "%s", diagnostic.message)


def merge_new_codes(config: ReconcileConfig | None = None) -> ReconciliationResult:
    """Merge the proposed codes into the existing CodeSystem and write the result.

    All three inputs are read before anything is reconciled, and the output is
    only written once every proposed concept has been processed.
    """

    effective_config = config or get_reconcile_config()
    log.info(
        "Starting merge: code_system=%s, new_codes=%s, thesaurus=%s",
        effective_config.code_system_path,
        effective_config.new_codes_path,
        effective_config.thesaurus_path,
    )

    thesaurus = read_thesaurus(effective_config.thesaurus_path)
    code_system = read_code_system(effective_config.code_system_path)
    proposed = read_concepts(effective_config.new_codes_path)

    result = reconcile(
        code_system,
        proposed,
        thesaurus=thesaurus,
        settings=ReconcileSettings(suppress_info=effective_config.suppress_info),
        on_decision=report_decision,
    )

    write_code_system(code_system, effective_config.output_path)
    log.info(
        f"Finished merge: new={result.tally.new_code}, "
        f"wrong_display={result.tally.wrong_display}, "
        f"rejected={result.tally.not_ncit_code}, output={effective_config.output_path}"
    )
    return result
