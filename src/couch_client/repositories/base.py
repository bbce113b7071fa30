"""Generic repository binding a document model to a client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from couch_client.errors import DatabaseError
from couch_client.models import DocumentBase, DocumentStatus

if TYPE_CHECKING:
    from couch_client.client import CouchClient

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DocumentBase)


class BaseRepository(Generic[T]):
    """CRUD for one document type; subclasses set ``model_class``."""

    model_class: ClassVar[type[DocumentBase]]

    def __init__(self, client: CouchClient) -> None:
        self._client = client

    def get(self, doc_id: str) -> T | None:
        """Fetch a document, returning None when it does not exist."""
        try:
            return self._client.get_object(doc_id, self.model_class)  # type: ignore[return-value]
        except DatabaseError as exc:
            if exc.is_not_found:
                return None
            raise

    def create(self, document: T) -> T:
        """Store a new document and record the revision it was assigned."""
        status = self._client.put_object(document, DocumentStatus)
        document.id = status.id
        document.set_revision(status.rev)
        return document

    def save(self, document: T) -> T:
        """Write an existing document and record its new revision."""
        status = self._client.update_object(document, DocumentStatus)
        document.set_revision(status.rev)
        logger.debug("Saved %s %s at %s", self.model_class.__name__, status.id, status.rev)
        return document

    def delete(self, document: T) -> DocumentStatus:
        return self._client.delete_object(document, DocumentStatus)

    def delete_by_id(self, doc_id: str) -> DocumentStatus:
        return self._client.delete_object_by_id(doc_id, DocumentStatus)
