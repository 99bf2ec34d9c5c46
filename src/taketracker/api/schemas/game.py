from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class GameResponse(BaseModel):
    id: str
    name: str
    short_name: str
    status: str


class MatchResponse(BaseModel):
    id: str
    category: str
    score: int


class PlayerResponse(BaseModel):
    name: str
    jersey: str | None = None
    stats_summary: str
    matches: List[MatchResponse] = Field(default_factory=list)


class TeamResponse(BaseModel):
    team: str
    abbreviation: str | None = None
    color: str | None = None
    is_home: bool
    players: List[PlayerResponse]


class GameDetailResponse(BaseModel):
    game_id: str
    teams: List[TeamResponse]
