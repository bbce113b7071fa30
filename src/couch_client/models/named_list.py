"""Named list document used by the example program."""

from __future__ import annotations

from pydantic import Field

from couch_client.models.base import DocumentBase


class NamedList(DocumentBase):
    """A list of strings stored under an id derived from its name."""

    id_fields = ("name",)

    name: str
    fields: list[str] = Field(default_factory=list)
