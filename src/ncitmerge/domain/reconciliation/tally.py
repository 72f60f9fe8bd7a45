"""Outcome counters for one reconciliation run."""

from __future__ import annotations

from dataclasses import dataclass

from .contracts import Resolution


@dataclass(slots=True)
class OutcomeTally:
    """Monotonic counters; ``already_exists`` covers both pre-existing resolutions."""

    already_exists: int = 0
    wrong_display: int = 0
    not_ncit_code: int = 0
    new_code: int = 0

    def record(self, resolution: Resolution) -> None:
        match resolution:
            case Resolution.PRE_EXISTING_UNCHANGED:
                self.already_exists += 1
            case Resolution.PRE_EXISTING_SYNONYM_ADDED:
                self.already_exists += 1
                self.wrong_display += 1
            case Resolution.NEWLY_ADDED:
                self.new_code += 1
            case Resolution.REJECTED:
                self.not_ncit_code += 1

    def render(self) -> str:
        return (
            "STATISTICS:\n"
            f"pre-existing codes:\t{self.already_exists}\n"
            f"wrong displays:\t\t{self.wrong_display}\n"
            f"non-NCIT codes:\t\t{self.not_ncit_code}\n"
            f"new codes:\t\t{self.new_code}\n"
        )

    def __str__(self) -> str:
        return self.render()
