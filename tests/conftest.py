from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from ncitmerge.config import ReconcileConfig
from ncitmerge.domain.model import CodeSystem, Concept
from ncitmerge.domain.thesaurus import build_thesaurus

if TYPE_CHECKING:
    from ncitmerge.domain.thesaurus import Thesaurus

DATA_DIR = Path(__file__).resolve().parent / "data"

for _name in ("THESAURUS", "NEW_CODES", "CODE_SYSTEM", "OUTPUT", "SUPPRESS_INFO"):
    os.environ.pop(_name, None)


def thesaurus_row(
    code: str,
    synonyms: str,
    *,
    parents: str = "C1908",
    display_name: str = "",
    concept_status: str = "",
    concept_in_subset: str = "",
) -> list[str]:
    return [
        code,
        f"http://ncicb.nci.nih.gov/xml/owl/EVS/Thesaurus.owl#{code}",
        parents,
        synonyms,
        f"Definition of {code}.",
        display_name,
        concept_status,
        "Pharmacologic Substance",
        concept_in_subset,
    ]


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def thesaurus() -> Thesaurus:
    return build_thesaurus(
        [
            thesaurus_row("C123", "Neoplasm|Tumor"),
            thesaurus_row("C555", "Kidney Failure|Renal Failure"),
            thesaurus_row("C42953", "Capsule|CAP"),
        ]
    )


@pytest.fixture
def code_system() -> CodeSystem:
    return CodeSystem.from_concepts(
        [Concept(code="C123", display="Tumor")],
        header={"resourceType": "CodeSystem", "id": "nciThesaurus-fragment"},
    )


@pytest.fixture
def run_config(tmp_path: Path) -> ReconcileConfig:
    return ReconcileConfig(
        thesaurus_path=DATA_DIR / "thesaurus.txt",
        new_codes_path=DATA_DIR / "new_codes.json",
        code_system_path=DATA_DIR / "code_system_fragment.json",
        output_path=tmp_path / "output.json",
        suppress_info=True,
    )
