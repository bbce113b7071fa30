"""Client for CouchDB-style document databases with revision reconciliation."""

from couch_client.client import CouchClient
from couch_client.config import CouchConfig, Settings, load_settings
from couch_client.envelope import unwrap
from couch_client.errors import (
    CouchError,
    DatabaseError,
    ProtocolInvariantError,
    SerializationError,
    TransportError,
)
from couch_client.models import CouchDocument, DatabaseStatus, DocumentBase, DocumentStatus
from couch_client.transport import Transport

__all__ = [
    "CouchClient",
    "CouchConfig",
    "CouchDocument",
    "CouchError",
    "DatabaseError",
    "DatabaseStatus",
    "DocumentBase",
    "DocumentStatus",
    "ProtocolInvariantError",
    "SerializationError",
    "Settings",
    "Transport",
    "TransportError",
    "load_settings",
    "unwrap",
]
