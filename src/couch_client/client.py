"""Document lifecycle operations with revision reconciliation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import PydanticSchemaGenerationError, TypeAdapter
from pydantic_core import PydanticSerializationError

from couch_client.envelope import unwrap
from couch_client.errors import ProtocolInvariantError, SerializationError
from couch_client.models import DatabaseStatus, DocumentStatus
from couch_client.transport import Transport

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from couch_client.config import CouchConfig
    from couch_client.models import CouchDocument

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ETAG_HEADER = "etag"
_INVALID_ETAG = "Invalid etag header"


def serialize(document: Any) -> Any:
    """Return the JSON body for ``document``, omitting ``_rev`` until one is known."""
    to_document = getattr(document, "to_document", None)
    if callable(to_document):
        return to_document()
    try:
        body = TypeAdapter(type(document)).dump_python(document, mode="json", by_alias=True)
    except (PydanticSchemaGenerationError, PydanticSerializationError) as exc:
        raise SerializationError(f"Cannot serialize {type(document).__name__}: {exc}") from exc
    if isinstance(body, dict) and body.get("_rev", "") is None:
        del body["_rev"]
    return body


class CouchClient:
    """Synchronous client for one database.

    Update and delete calls must name the revision they are based on. When a
    document carries none, the current revision is probed with a ``HEAD``
    request first and the mutating call is issued once with it.
    """

    def __init__(self, config: CouchConfig, *, http_client: httpx.Client | None = None) -> None:
        self.config = config
        self._transport = Transport(config, client=http_client)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> CouchClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def transport(self) -> Transport:
        return self._transport

    def _unwrap(self, value: Any, target: type[T]) -> T:
        return unwrap(value, target, detect_error_envelope=self.config.detect_error_envelope)

    # Databases

    def create_db(self) -> DatabaseStatus:
        """Create the configured database."""
        return self._unwrap(self._transport.put(self.config.database_url), DatabaseStatus)

    def delete_db(self) -> DatabaseStatus:
        """Drop the configured database and every document in it."""
        return self._unwrap(self._transport.delete(self.config.database_url), DatabaseStatus)

    # Documents

    def put_object(self, body: Any, target: type[T] = DocumentStatus) -> T:
        """POST ``body`` as-is; no revision is looked up."""
        res = self._transport.post_json(self.config.database_url, serialize(body))
        return self._unwrap(res, target)

    def get_object(self, doc_id: str, target: type[T]) -> T:
        """Fetch a document by id."""
        res = self._transport.get(self.config.document_url(doc_id))
        return self._unwrap(res, target)

    def get_latest_revision(self, doc_id: str) -> str:
        """Probe the current revision of a document from its ``ETag`` header."""
        headers = self._unwrap(self._transport.head(self.config.document_url(doc_id)), dict[str, str])
        etag = headers.get(_ETAG_HEADER, "").strip('"')
        if not etag:
            raise ProtocolInvariantError(_INVALID_ETAG)
        logger.debug("Probed revision %s for document %s", etag, doc_id)
        return etag

    def ensure_revision(self, document: CouchDocument) -> str:
        """Return the document's revision, probing and recording it when absent."""
        rev = document.revision()
        if rev is not None:
            return rev
        doc_id = document.identifier()
        logger.info("Document %s has no revision, probing server", doc_id)
        rev = self.get_latest_revision(doc_id)
        document.set_revision(rev)
        return rev

    def update_object(self, document: CouchDocument, target: type[T] = DocumentStatus) -> T:
        """Write the full document, revision included."""
        self.ensure_revision(document)
        res = self._transport.post_json(self.config.database_url, serialize(document))
        return self._unwrap(res, target)

    def delete_object(self, document: CouchDocument, target: type[T] = DocumentStatus) -> T:
        """Delete the document at its current revision."""
        rev = self.ensure_revision(document)
        return self._delete(document.identifier(), rev, target)

    def delete_object_by_id(self, doc_id: str, target: type[T] = DocumentStatus) -> T:
        """Delete by id, always probing for the revision first."""
        rev = self.get_latest_revision(doc_id)
        return self._delete(doc_id, rev, target)

    def _delete(self, doc_id: str, rev: str, target: type[T]) -> T:
        res = self._transport.delete(self.config.document_url(doc_id), params={"rev": rev})
        return self._unwrap(res, target)

