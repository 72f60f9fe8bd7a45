"""Fatal errors that abort a reconciliation run.

Input errors are raised before anything is reconciled; output errors leave
any previous output file untouched.
"""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for unrecoverable run failures."""


class ReconciliationInputError(ReconciliationError):
    """Base class for unrecoverable input problems."""


class InputUnavailableError(ReconciliationInputError):
    """Raised when an input source cannot be opened or read."""


class MalformedDocumentError(ReconciliationInputError):
    """Raised when a CodeSystem document does not have the expected shape."""


class MalformedThesaurusRowError(ReconciliationInputError):
    """Raised when a thesaurus row cannot be turned into a record."""

    def __init__(self, row_number: int, reason: str) -> None:
        super().__init__(f"Thesaurus row {row_number}: {reason}")
        self.row_number = row_number
        self.reason = reason


class OutputUnwritableError(ReconciliationError):
    """Raised when the merged CodeSystem cannot be written."""
