"""Index documents and search filters."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from pydantic import Field

from .base import DomainModel
from .enums import IndexFieldOperator, RecordDataType


def _new_document_id() -> str:
    return str(uuid4())


class Record(DomainModel):
    """A document stored in (or sent to) a vector index."""

    id: str = Field(default_factory=_new_document_id)
    data_type: RecordDataType = RecordDataType.TEXT
    value: str = ""
    uri: str | None = None
    attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def text(
        cls,
        text: str,
        *,
        attributes: dict[str, str] | None = None,
        id: str | None = None,
    ) -> Record:
        return cls(
            id=id or _new_document_id(),
            data_type=RecordDataType.TEXT,
            value=text,
            attributes=attributes or {},
        )

    @classmethod
    def image(
        cls,
        uri: str,
        *,
        attributes: dict[str, str] | None = None,
        id: str | None = None,
    ) -> Record:
        return cls(
            id=id or _new_document_id(),
            data_type=RecordDataType.IMAGE,
            uri=uri,
            attributes=attributes or {},
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "data": self.value,
            "dataType": self.data_type.value,
            "document_id": self.id,
            "uri": self.uri or "",
            "attributes": dict(self.attributes),
        }


class IndexFilter(DomainModel):
    """Metadata filter applied to an index search."""

    field: str
    operator: IndexFieldOperator
    value: str

    def to_payload(self) -> dict[str, str]:
        return {"field": self.field, "value": self.value, "operator": self.operator.value}


__all__ = ["IndexFilter", "Record"]
