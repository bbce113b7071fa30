"""Typed repositories over the document client."""

from couch_client.repositories.base import BaseRepository
from couch_client.repositories.named_lists import NamedListRepository

__all__ = [
    "BaseRepository",
    "NamedListRepository",
]
