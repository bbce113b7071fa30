"""Models for the server's status replies."""

from __future__ import annotations

from pydantic import BaseModel


class DocumentStatus(BaseModel):
    """Reply to a document write or delete."""

    ok: bool = True
    id: str
    rev: str


class DatabaseStatus(BaseModel):
    """Reply to creating or dropping a database."""

    ok: bool
