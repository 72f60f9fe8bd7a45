"""Public interface for the NCIt flat-file adapter."""

from __future__ import annotations

from .flat_file import iter_thesaurus_rows, read_thesaurus

__all__ = ["iter_thesaurus_rows", "read_thesaurus"]
