"""Pydantic models describing FHIR R4 ``CodeSystem`` documents.

Only the parts of the resource that reconciliation touches are modelled.
Top-level keys besides ``concept`` are kept as extras and written back
untouched and in their original order; unknown concept-level keys are
logged once and dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    model_validator,
)

log = logging.getLogger(__name__)


class FhirBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "CodeSystem %s: unmodeled keys dropped: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class CodingPayload(FhirBaseModel):
    system: str
    code: str
    display: str | None = None


class DesignationPayload(FhirBaseModel):
    language: str | None = None
    use: CodingPayload | None = None
    value: str


class ConceptPayload(FhirBaseModel):
    code: str
    display: str
    designation: list[DesignationPayload] | None = None
    definition: str | None = None
    concept: list[ConceptPayload] | None = None


class CodeSystemPayload(BaseModel):
    """Whole resource; header keys ride along as pydantic extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    resource_type: Literal["CodeSystem"] = Field(alias="resourceType")
    concept: list[ConceptPayload]

    _key_order: tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(
        cls,
        value: object,
        handler: ValidatorFunctionWrapHandler,
    ) -> CodeSystemPayload:
        payload: CodeSystemPayload = handler(value)
        if isinstance(value, Mapping):
            payload._key_order = tuple(str(key) for key in value)
        return payload

    def header(self) -> dict[str, Any]:
        """Every top-level key except ``concept``, in the order the document had them."""

        dumped = self.model_dump(mode="json", by_alias=True, exclude={"concept"})
        ordered = {key: dumped[key] for key in self._key_order if key in dumped}
        ordered.update((key, value) for key, value in dumped.items() if key not in ordered)
        return ordered


def dump_concept(payload: ConceptPayload) -> dict[str, Any]:
    """Serialise a concept in FHIR field order, omitting absent optional fields."""

    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
