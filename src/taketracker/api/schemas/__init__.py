"""Pydantic models for API I/O."""

from .game import GameDetailResponse, GameResponse, MatchResponse, PlayerResponse, TeamResponse
from .search import CatalogEntryResponse, CatalogResponse, SearchResponse

__all__ = [
    "CatalogEntryResponse",
    "CatalogResponse",
    "GameDetailResponse",
    "GameResponse",
    "MatchResponse",
    "PlayerResponse",
    "SearchResponse",
    "TeamResponse",
]
