from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from ncitmerge.adapters.fhir import files as files_module
from ncitmerge.adapters.fhir import (
    dumps_code_system,
    read_code_system,
    read_concepts,
    write_code_system,
)
from ncitmerge.domain.errors import (
    InputUnavailableError,
    MalformedDocumentError,
    OutputUnwritableError,
)
from ncitmerge.domain.model import SYNONYM_USE, CodeSystem, Concept, Designation, DesignationUse

if TYPE_CHECKING:
    from pathlib import Path


def test_read_code_system_parses_concepts_and_header(data_dir: Path) -> None:
    code_system = read_code_system(data_dir / "code_system_fragment.json")

    assert [concept.code for concept in code_system] == ["C123", "C42998"]
    assert code_system.header["resourceType"] == "CodeSystem"
    assert code_system.header["caseSensitive"] is True
    assert "concept" not in code_system.header
    tablet = code_system.get("C42998")
    assert tablet is not None
    assert tablet.designation == [Designation(value="TAB", use=SYNONYM_USE)]
    assert tablet.definition == "A solid dosage form."
    assert tablet.concept == [Concept(code="C42927", display="Film Coated Tablet")]


def test_round_trip_preserves_collection(tmp_path: Path, data_dir: Path) -> None:
    code_system = read_code_system(data_dir / "code_system_fragment.json")
    tumor = code_system.get("C123")
    assert tumor is not None
    tumor.add_synonym("Neoplasm")
    tumor.add_designation(
        Designation(
            value="Tumeur",
            language="fr",
            use=DesignationUse(system="http://example.org", code="x", display="X"),
        )
    )
    code_system.add_concept(Concept(code="C555", display="Kidney Failure"))

    target = tmp_path / "output.json"
    write_code_system(code_system, target)

    assert read_code_system(target) == code_system


def test_written_document_omits_absent_fields_and_orders_keys(data_dir: Path) -> None:
    code_system = read_code_system(data_dir / "code_system_fragment.json")
    code_system.add_concept(Concept(code="C555", display="Kidney Failure"))

    document = json.loads(dumps_code_system(code_system))

    keys = list(document)
    assert keys[0] == "resourceType"
    assert keys[-1] == "concept"
    assert keys[1:-1] == [
        "id",
        "url",
        "name",
        "title",
        "status",
        "experimental",
        "date",
        "publisher",
        "description",
        "copyright",
        "caseSensitive",
        "content",
    ]
    assert document["concept"][0] == {"code": "C123", "display": "Tumor"}
    assert list(document["concept"][1]) == [
        "code",
        "display",
        "designation",
        "definition",
        "concept",
    ]
    assert document["concept"][-1] == {"code": "C555", "display": "Kidney Failure"}
    assert "null" not in dumps_code_system(code_system)


def test_non_ascii_text_is_written_verbatim() -> None:
    code_system = CodeSystem.from_concepts(
        [Concept(code="C1", display="Sjögren Syndrome")],
        header={"resourceType": "CodeSystem"},
    )

    assert "Sjögren Syndrome" in dumps_code_system(code_system)


def test_read_concepts_keeps_duplicates_in_order(tmp_path: Path) -> None:
    path = tmp_path / "new-codes.json"
    path.write_text(
        json.dumps(
            {
                "resourceType": "CodeSystem",
                "concept": [
                    {"code": "C1", "display": "A"},
                    {"code": "C2", "display": "B"},
                    {"code": "C1", "display": "a"},
                ],
            }
        )
    )

    concepts = read_concepts(path)

    assert [(c.code, c.display) for c in concepts] == [("C1", "A"), ("C2", "B"), ("C1", "a")]


def test_missing_file_is_input_unavailable(tmp_path: Path) -> None:
    with pytest.raises(InputUnavailableError):
        read_code_system(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"resourceType": "ValueSet", "concept": []}),
        json.dumps({"resourceType": "CodeSystem"}),
        json.dumps({"resourceType": "CodeSystem", "concept": [{"code": "C1"}]}),
    ],
)
def test_malformed_documents_are_rejected(tmp_path: Path, content: str) -> None:
    path = tmp_path / "broken.json"
    path.write_text(content)

    with pytest.raises(MalformedDocumentError):
        read_code_system(path)


def test_duplicate_codes_in_existing_document_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "dupes.json"
    path.write_text(
        json.dumps(
            {
                "resourceType": "CodeSystem",
                "concept": [{"code": "C1", "display": "A"}, {"code": "C1", "display": "B"}],
            }
        )
    )

    with pytest.raises(MalformedDocumentError, match="duplicate concept code: C1"):
        read_code_system(path)


def test_header_keys_keep_document_order(tmp_path: Path) -> None:
    path = tmp_path / "fragment.json"
    path.write_text(
        json.dumps(
            {
                "id": "nciThesaurus-fragment",
                "url": "http://ncicb.nci.nih.gov/xml/owl/EVS/Thesaurus.owl",
                "resourceType": "CodeSystem",
                "concept": [{"code": "C1", "display": "A"}],
                "content": "fragment",
            }
        )
    )

    code_system = read_code_system(path)
    document = json.loads(dumps_code_system(code_system))

    assert list(code_system.header) == ["id", "url", "resourceType", "content"]
    assert list(document) == ["id", "url", "resourceType", "content", "concept"]


def test_write_to_missing_directory_is_output_error(tmp_path: Path) -> None:
    code_system = CodeSystem.from_concepts(
        [Concept(code="C1", display="A")],
        header={"resourceType": "CodeSystem"},
    )
    target = tmp_path / "missing" / "output.json"

    with pytest.raises(OutputUnwritableError, match="Cannot write CodeSystem"):
        write_code_system(code_system, target)

    assert not target.parent.exists()


def test_failed_write_keeps_previous_output(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    target = tmp_path / "output.json"
    target.write_text("previous", encoding="utf-8")
    code_system = CodeSystem.from_concepts(
        [Concept(code="C1", display="A")],
        header={"resourceType": "CodeSystem"},
    )

    def failing_replace(_src: object, _dst: object) -> None:
        raise PermissionError("read-only target")

    monkeypatch.setattr(files_module.os, "replace", failing_replace)

    with pytest.raises(OutputUnwritableError):
        write_code_system(code_system, target)

    assert target.read_text(encoding="utf-8") == "previous"
    assert sorted(path.name for path in tmp_path.iterdir()) == ["output.json"]
