"""Per-player statistics and the summaries built from them."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from .catalog import MatchResult


class StatisticsRecord(BaseModel):
    """One player's game totals keyed by canonical statistic key.

    ``values`` drives classification. ``display`` optionally carries the raw
    provider text (``"4-6"`` for makes/attempts) and is only used for output.
    """

    values: Dict[str, int] = Field(default_factory=dict)
    display: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("values")
    @classmethod
    def _non_negative(cls, values: Dict[str, int]) -> Dict[str, int]:
        for key, value in values.items():
            if value < 0:
                raise ValueError(f"stat {key!r} must be >= 0, got {value}")
        return values

    def value(self, key: str) -> int:
        # Keys the provider did not report count as zero.
        return self.values.get(key, 0)

    def display_value(self, key: str) -> str:
        raw = self.display.get(key)
        if raw:
            return raw
        return str(self.value(key))


class BoxScorePlayer(BaseModel):
    name: str
    jersey: Optional[str] = None
    stats: StatisticsRecord = Field(default_factory=StatisticsRecord)

    model_config = ConfigDict(frozen=True)


class BoxScoreTeam(BaseModel):
    team: str
    abbreviation: Optional[str] = None
    color: Optional[str] = None
    is_home: bool = False
    players: List[BoxScorePlayer] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class BoxScore(BaseModel):
    game_id: str
    teams: List[BoxScoreTeam] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class GameInfo(BaseModel):
    id: str
    name: str
    short_name: str
    status: str

    model_config = ConfigDict(frozen=True)


class PlayerSummary(BaseModel):
    """Output unit per reported player."""

    name: str
    jersey: Optional[str] = None
    stats_summary: str = ""
    matches: List[MatchResult] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class TeamSummary(BaseModel):
    team: str
    abbreviation: Optional[str] = None
    color: Optional[str] = None
    is_home: bool = False
    players: List[PlayerSummary] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
