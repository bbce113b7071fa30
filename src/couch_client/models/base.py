"""Document contract and the pydantic base model implementing it."""

from __future__ import annotations

import hashlib
from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from couch_client.errors import ProtocolInvariantError

_ID_LENGTH = 32
_PART_SEPARATOR = "\x1f"


def content_id(*parts: object) -> str:
    """Derive a stable 32-character hex id from content."""
    joined = _PART_SEPARATOR.join(str(part) for part in parts)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()[:_ID_LENGTH]


@runtime_checkable
class CouchDocument(Protocol):
    """Capabilities every persisted type provides to the client."""

    def derive_id(self) -> str: ...

    def identifier(self) -> str: ...

    def revision(self) -> str | None: ...

    def set_revision(self, rev: str) -> None: ...


def has_revision(document: CouchDocument) -> bool:
    return document.revision() is not None


class DocumentBase(BaseModel):
    """Base model for documents stored in the database.

    ``id`` and ``rev`` map to the reserved ``_id`` and ``_rev`` keys. Subclasses
    name the fields their id is derived from in ``id_fields``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id_fields: ClassVar[tuple[str, ...]] = ()

    id: str = Field(default="", alias="_id")
    rev: str | None = Field(default=None, alias="_rev")

    @classmethod
    def new(cls, **fields: Any) -> Self:
        """Build an unrevisioned document whose id is derived from its content."""
        document = cls(**fields)
        document.id = document.derive_id()
        return document

    def derive_id(self) -> str:
        if not self.id_fields:
            raise ProtocolInvariantError(f"{type(self).__name__} does not declare id_fields")
        return content_id(*(getattr(self, name) for name in self.id_fields))

    def identifier(self) -> str:
        return self.id or self.derive_id()

    def revision(self) -> str | None:
        return self.rev

    def set_revision(self, rev: str) -> None:
        self.rev = rev

    def to_document(self) -> dict[str, Any]:
        """Serialize to the wire shape, omitting ``_rev`` until one is known."""
        body = self.model_dump(mode="json", by_alias=True)
        body["_id"] = self.identifier()
        if self.rev is None:
            del body["_rev"]
        return body
