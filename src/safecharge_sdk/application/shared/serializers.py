"""Shared Pydantic base used by every DTO that travels to or from the gateway."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Model whose wire representation uses the gateway's camelCase field names.

    Fields can be populated either by their Python name or by the wire alias,
    so the same class validates builder input and decoded JSON.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and unset values dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        field = cls.model_fields[field_name]
        return field.alias or field_name
