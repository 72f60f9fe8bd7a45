"""In-memory code system: opaque header metadata plus an ordered concept list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .concept import Concept


@dataclass(eq=False)
class CodeSystem:
    """Ordered collection of concepts, unique by code.

    Only top-level concepts take part in code lookups; nested child concepts
    travel with their parent unchanged.
    """

    header: dict[str, Any] = field(default_factory=dict[str, Any])
    _concepts: list[Concept] = field(default_factory=list["Concept"], repr=False, init=False)
    _by_code: dict[str, Concept] = field(
        default_factory=dict[str, "Concept"], repr=False, init=False
    )

    @classmethod
    def from_concepts(
        cls,
        concepts: Iterable[Concept],
        *,
        header: dict[str, Any] | None = None,
    ) -> CodeSystem:
        code_system = cls(header=dict(header or {}))
        for concept in concepts:
            code_system.add_concept(concept)
        return code_system

    @property
    def concepts(self) -> tuple[Concept, ...]:
        return tuple(self._concepts)

    def __len__(self) -> int:
        return len(self._concepts)

    def __iter__(self) -> Iterator[Concept]:
        return iter(self._concepts)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeSystem):
            return NotImplemented
        return self.header == other.header and self._concepts == other._concepts

    def get(self, code: str) -> Concept | None:
        """Return the concept with exactly ``code`` (case-sensitive), if present."""

        return self._by_code.get(code)

    def add_concept(self, concept: Concept) -> None:
        if concept.code in self._by_code:
            raise ValueError(f"duplicate concept code: {concept.code}")
        self._concepts.append(concept)
        self._by_code[concept.code] = concept
