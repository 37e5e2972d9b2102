"""
models/schemas.py – Wire schema for the compatibility list JSON document.

The remote document is a JSON array of objects.  Only the keys the listing
needs are declared; everything else is ignored.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter

from models.compat_entry import CompatEntry, Release


class ReleaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: StrictStr


class EntryModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    compatibility: StrictInt
    releases: List[ReleaseModel] = Field(default_factory=list)

    def to_entry(self) -> CompatEntry:
        return CompatEntry(
            title=self.title,
            compatibility=self.compatibility,
            releases=tuple(Release(id=r.id) for r in self.releases),
        )


EntryListAdapter: TypeAdapter[List[EntryModel]] = TypeAdapter(List[EntryModel])
