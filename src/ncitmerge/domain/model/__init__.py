"""Domain model for terminology concepts."""

from __future__ import annotations

from .code_system import CodeSystem
from .concept import (
    SNOMED_SYSTEM,
    SYNONYM_SNOMED_CODE,
    SYNONYM_USE,
    Concept,
    Designation,
    DesignationUse,
    same_term,
)

__all__ = [
    "SNOMED_SYSTEM",
    "SYNONYM_SNOMED_CODE",
    "SYNONYM_USE",
    "CodeSystem",
    "Concept",
    "Designation",
    "DesignationUse",
    "same_term",
]
