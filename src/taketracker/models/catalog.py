"""Catalog entries and match results."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class CatalogEntry(BaseModel):
    """A category definition with its precomputed requirement set."""

    id: str = Field(..., min_length=1)
    category: str
    required_keys: Tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @property
    def matchable(self) -> bool:
        return bool(self.required_keys)


class MatchResult(BaseModel):
    id: str
    category: str
    required_keys: Tuple[str, ...]
    score: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_entry(cls, entry: CatalogEntry) -> "MatchResult":
        return cls(
            id=entry.id,
            category=entry.category,
            required_keys=entry.required_keys,
            score=len(entry.required_keys),
        )
