from __future__ import annotations

from ncitmerge.domain.model import SYNONYM_USE, Concept, Designation, DesignationUse, same_term


def test_add_designation_initialises_missing_list() -> None:
    concept = Concept(code="C1", display="Aspirin")
    assert concept.designation is None

    concept.add_designation(Designation(value="ASA"))

    assert concept.designation == [Designation(value="ASA")]


def test_add_synonym_appends_with_snomed_synonym_use() -> None:
    concept = Concept(
        code="C1",
        display="Aspirin",
        designation=[Designation(value="ASA", language="en")],
    )

    concept.add_synonym("Acetylsalicylic Acid")

    assert concept.designation is not None
    assert [entry.value for entry in concept.designation] == ["ASA", "Acetylsalicylic Acid"]
    assert concept.designation[-1].use == SYNONYM_USE
    assert SYNONYM_USE == DesignationUse(
        system="http://snomed.info/sct",
        code="900000000000013009",
    )


def test_has_designation_value_ignores_case() -> None:
    concept = Concept(code="C1", display="Aspirin")
    assert not concept.has_designation_value("asa")

    concept.add_synonym("ASA")

    assert concept.has_designation_value("asa")
    assert not concept.has_designation_value("Aspirin")


def test_with_display_drops_definition_and_copies_designations() -> None:
    child = Concept(code="C2", display="Baby Aspirin")
    original = Concept(
        code="C1",
        display="aspirin",
        designation=[Designation.synonym("ASA")],
        definition="Vendor definition",
        concept=[child],
    )

    updated = original.with_display("Aspirin")
    updated.add_synonym("aspirin")

    assert updated.code == "C1"
    assert updated.display == "Aspirin"
    assert updated.definition is None
    assert updated.concept == [child]
    assert original.display == "aspirin"
    assert original.definition == "Vendor definition"
    assert original.designation == [Designation.synonym("ASA")]


def test_concept_str_shows_code_and_display() -> None:
    assert str(Concept(code="C999", display="Widget")) == 'C999 "Widget"'


def test_same_term_is_case_insensitive() -> None:
    assert same_term("Renal Failure", "renal failure")
    assert not same_term("Renal Failure", "Kidney Failure")
