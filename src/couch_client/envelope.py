"""Error-envelope detection and typed unwrapping of server replies."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from couch_client.errors import DatabaseError, SerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def is_error_envelope(value: object) -> bool:
    """Return True when ``value`` has the ``{"error", "reason"}`` shape."""
    return isinstance(value, dict) and "error" in value and "reason" in value


def _envelope_field(envelope: dict[str, Any], key: str) -> str:
    field = envelope[key]
    if not isinstance(field, str):
        raise SerializationError(f"Error envelope field {key!r} is not a string: {field!r}")
    return field


@lru_cache(maxsize=128)
def _adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def unwrap(value: Any, target: type[T], *, detect_error_envelope: bool = True) -> T:
    """Raise the server error carried by ``value`` or validate it into ``target``.

    The envelope check runs first: a document that happens to hold both an
    ``error`` and a ``reason`` field is reported as a :class:`DatabaseError`.
    Pass ``detect_error_envelope=False`` for databases whose documents use
    those field names.
    """
    if detect_error_envelope and is_error_envelope(value):
        error = DatabaseError(_envelope_field(value, "error"), _envelope_field(value, "reason"))
        logger.debug("Database rejected request: %s", error)
        raise error

    try:
        return _adapter(target).validate_python(value)
    except ValidationError as exc:
        raise SerializationError(str(exc)) from exc
