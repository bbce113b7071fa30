"""Exception hierarchy raised by the client.

Every failure surfaces as a subclass of :class:`CouchError` so callers can catch
one type or match on the concrete kind.
"""

from __future__ import annotations

NOT_FOUND = "not_found"
CONFLICT = "conflict"


class CouchError(Exception):
    """Base class for all client errors."""


class TransportError(CouchError):
    """Network, TLS, protocol or JSON decoding failure.

    The underlying exception is available as ``__cause__``.
    """


class DatabaseError(CouchError):
    """Structured rejection reported by the server as ``{"error", "reason"}``."""

    def __init__(self, code: str, reason: str) -> None:
        super().__init__(code, reason)
        self.code = code
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.code}, reason: {self.reason}"

    @property
    def is_not_found(self) -> bool:
        return self.code == NOT_FOUND

    @property
    def is_conflict(self) -> bool:
        return self.code == CONFLICT


class SerializationError(CouchError):
    """Payload did not match the requested shape."""


class ProtocolInvariantError(CouchError):
    """The server reply broke an assumption of the revision protocol."""
