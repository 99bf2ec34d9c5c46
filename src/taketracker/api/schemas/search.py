from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CatalogEntryResponse(BaseModel):
    id: str
    category: str
    required_keys: List[str] = Field(default_factory=list)


class SearchResponse(BaseModel):
    query: str
    total: int
    results: List[CatalogEntryResponse]


class CatalogResponse(BaseModel):
    total: int
    matchable: int
    entries: List[CatalogEntryResponse]
