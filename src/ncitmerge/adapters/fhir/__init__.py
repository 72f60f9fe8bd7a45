"""Public interface for the FHIR CodeSystem adapter."""

from __future__ import annotations

from .files import dumps_code_system, read_code_system, read_concepts, write_code_system
from .schema import CodeSystemPayload, ConceptPayload
from .translator import parse_code_system, parse_concept, to_concept_payload, to_document

__all__ = [
    "CodeSystemPayload",
    "ConceptPayload",
    "dumps_code_system",
    "parse_code_system",
    "parse_concept",
    "read_code_system",
    "read_concepts",
    "to_concept_payload",
    "to_document",
    "write_code_system",
]
