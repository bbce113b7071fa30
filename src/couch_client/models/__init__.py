"""Document contract, base model and server reply models."""

from couch_client.models.base import CouchDocument, DocumentBase, content_id, has_revision
from couch_client.models.named_list import NamedList
from couch_client.models.responses import DatabaseStatus, DocumentStatus

__all__ = [
    "CouchDocument",
    "DatabaseStatus",
    "DocumentBase",
    "DocumentStatus",
    "NamedList",
    "content_id",
    "has_revision",
]
