"""Read and write FHIR CodeSystem JSON files."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ncitmerge.domain.errors import (
    InputUnavailableError,
    MalformedDocumentError,
    OutputUnwritableError,
)

from .schema import CodeSystemPayload
from .translator import parse_code_system, parse_concept, to_document

if TYPE_CHECKING:
    from ncitmerge.domain.model import CodeSystem, Concept


log = getLogger(__name__)


def _load_payload(path: Path) -> CodeSystemPayload:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(f"Cannot read CodeSystem {path}: {exc}") from exc

    try:
        return CodeSystemPayload.model_validate(json.loads(raw))
    except (ValueError, ValidationError) as exc:
        raise MalformedDocumentError(f"Invalid CodeSystem {path}: {exc}") from exc


def read_code_system(path: Path) -> CodeSystem:
    """Read an existing CodeSystem; duplicate top-level codes are rejected."""

    code_system = parse_code_system(_load_payload(path))
    log.info("Read %s concepts from %s", len(code_system), path)
    return code_system


def read_concepts(path: Path) -> list[Concept]:
    """Read the concepts of a CodeSystem document in order, duplicates included."""

    concepts = [parse_concept(concept) for concept in _load_payload(path).concept]
    log.info("Read %s proposed concepts from %s", len(concepts), path)
    return concepts


def dumps_code_system(code_system: CodeSystem) -> str:
    return json.dumps(to_document(code_system), indent=2, ensure_ascii=False)


def write_code_system(code_system: CodeSystem, path: Path) -> None:
    """Write ``code_system`` to ``path`` via a sibling temp file and an atomic rename.

    On failure ``path`` keeps whatever it held before and the temp file is removed.
    """

    content = dumps_code_system(code_system)
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(content)
        os.replace(temp_path, path)
    except OSError as exc:
        if temp_path is not None:
            with suppress(FileNotFoundError):
                temp_path.unlink()
        raise OutputUnwritableError(f"Cannot write CodeSystem {path}: {exc}") from exc
    log.info("Wrote %s concepts to %s", len(code_system), path)
