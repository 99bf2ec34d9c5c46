"""Canonical value objects shared across ingest, matching and the API."""

from .catalog import CatalogEntry, MatchResult
from .stats import (
    BoxScore,
    BoxScorePlayer,
    BoxScoreTeam,
    GameInfo,
    PlayerSummary,
    StatisticsRecord,
    TeamSummary,
)

__all__ = [
    "BoxScore",
    "BoxScorePlayer",
    "BoxScoreTeam",
    "CatalogEntry",
    "GameInfo",
    "MatchResult",
    "PlayerSummary",
    "StatisticsRecord",
    "TeamSummary",
]
