"""Repository for named list documents."""

from __future__ import annotations

from couch_client.models.named_list import NamedList
from couch_client.repositories.base import BaseRepository


class NamedListRepository(BaseRepository[NamedList]):
    model_class = NamedList

    def get_by_name(self, name: str) -> NamedList | None:
        """Fetch the list stored under the id derived from ``name``."""
        return self.get(NamedList(name=name).derive_id())

    def append(self, name: str, entry: str) -> NamedList:
        """Add an entry to a list, creating the list when it does not exist yet."""
        named_list = self.get_by_name(name)
        if named_list is None:
            return self.create(NamedList.new(name=name, fields=[entry]))
        named_list.fields.append(entry)
        return self.save(named_list)
