"""Translate FHIR CodeSystem payloads into domain entities and back."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from ncitmerge.domain.errors import MalformedDocumentError
from ncitmerge.domain.model import CodeSystem, Concept, Designation, DesignationUse

from .schema import (
    CodeSystemPayload,
    CodingPayload,
    ConceptPayload,
    DesignationPayload,
    dump_concept,
)

if TYPE_CHECKING:
    from collections.abc import Iterable


log = getLogger(__name__)


def parse_code_system(payload: CodeSystemPayload) -> CodeSystem:
    concepts = [parse_concept(concept) for concept in payload.concept]
    try:
        return CodeSystem.from_concepts(concepts, header=payload.header())
    except ValueError as exc:
        raise MalformedDocumentError(str(exc)) from exc


def parse_concept(payload: ConceptPayload) -> Concept:
    return Concept(
        code=payload.code,
        display=payload.display,
        designation=_parse_designations(payload.designation),
        definition=payload.definition,
        concept=(
            [parse_concept(child) for child in payload.concept]
            if payload.concept is not None
            else None
        ),
    )


def _parse_designations(
    payloads: Iterable[DesignationPayload] | None,
) -> list[Designation] | None:
    if payloads is None:
        return None
    return [
        Designation(
            value=entry.value,
            use=(
                DesignationUse(
                    system=entry.use.system,
                    code=entry.use.code,
                    display=entry.use.display,
                )
                if entry.use is not None
                else None
            ),
            language=entry.language,
        )
        for entry in payloads
    ]


def to_concept_payload(concept: Concept) -> ConceptPayload:
    return ConceptPayload(
        code=concept.code,
        display=concept.display,
        designation=(
            [_to_designation_payload(entry) for entry in concept.designation]
            if concept.designation is not None
            else None
        ),
        definition=concept.definition,
        concept=(
            [to_concept_payload(child) for child in concept.concept]
            if concept.concept is not None
            else None
        ),
    )


def _to_designation_payload(designation: Designation) -> DesignationPayload:
    use = designation.use
    return DesignationPayload(
        language=designation.language,
        use=(
            CodingPayload(system=use.system, code=use.code, display=use.display)
            if use is not None
            else None
        ),
        value=designation.value,
    )


def to_document(code_system: CodeSystem) -> dict[str, Any]:
    """Render ``code_system`` as a JSON-ready document with ``concept`` last."""

    document: dict[str, Any] = {
        key: value for key, value in code_system.header.items() if key != "concept"
    }
    document["concept"] = [dump_concept(to_concept_payload(concept)) for concept in code_system]
    log.debug("Rendered CodeSystem document with %s concepts", len(code_system))
    return document
