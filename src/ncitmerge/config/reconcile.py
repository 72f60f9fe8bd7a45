"""Reconciliation run configuration values."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from .env import env_flag, env_path

if TYPE_CHECKING:
    from pathlib import Path

DEFAULT_THESAURUS_PATH: Final[str] = "Thesaurus.txt"
DEFAULT_NEW_CODES_PATH: Final[str] = "new-codes.json"
DEFAULT_CODE_SYSTEM_PATH: Final[str] = (
    "./packages/fhir.tx.support.r4/package/CodeSystem-nciThesaurus-fragment.json"
)
DEFAULT_OUTPUT_PATH: Final[str] = "output.json"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    """Locations of the run's inputs and output, plus the INFO suppression toggle."""

    thesaurus_path: Path
    new_codes_path: Path
    code_system_path: Path
    output_path: Path
    suppress_info: bool = True

    def with_overrides(
        self,
        *,
        thesaurus_path: Path | None = None,
        new_codes_path: Path | None = None,
        suppress_info: bool | None = None,
    ) -> ReconcileConfig:
        return replace(
            self,
            thesaurus_path=thesaurus_path or self.thesaurus_path,
            new_codes_path=new_codes_path or self.new_codes_path,
            suppress_info=self.suppress_info if suppress_info is None else suppress_info,
        )


def get_reconcile_config() -> ReconcileConfig:
    return ReconcileConfig(
        thesaurus_path=env_path("THESAURUS", DEFAULT_THESAURUS_PATH),
        new_codes_path=env_path("NEW_CODES", DEFAULT_NEW_CODES_PATH),
        code_system_path=env_path("CODE_SYSTEM", DEFAULT_CODE_SYSTEM_PATH),
        output_path=env_path("OUTPUT", DEFAULT_OUTPUT_PATH),
        suppress_info=env_flag("SUPPRESS_INFO", default=True),
    )
