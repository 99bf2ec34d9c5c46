"""Stat rules for supported leagues."""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple


@dataclass(frozen=True)
class StatRules:
    league: str
    sport: str
    thresholds: Mapping[str, int]
    vocabulary: frozenset[str]
    display_order: Tuple[str, ...]
    short_labels: Mapping[str, str]
    stat_columns: Mapping[str, str]
    result_limit: int = 3
    fallback_points: int = 10

    def threshold_for(self, key: str) -> int | None:
        return self.thresholds.get(key)

    def short_label(self, key: str) -> str:
        return self.short_labels.get(key, key.lower())

    def with_thresholds(self, overrides: Mapping[str, int]) -> "StatRules":
        """Return a copy whose threshold table is updated with ``overrides``."""

        merged = dict(self.thresholds)
        for key, value in overrides.items():
            if value < 0:
                raise ValueError(f"threshold for {key!r} must be >= 0, got {value}")
            merged[key] = int(value)
        return replace(self, thresholds=MappingProxyType(merged))


BASKETBALL_THRESHOLDS: Mapping[str, int] = MappingProxyType(
    {
        "PTS": 8,
        "REBS": 5,
        "ASSTS": 4,
        "BLKS": 2,
        "STLS": 2,
        "3-PT FG": 3,
        "FG": 4,
        "FT": 4,
        "TO": 4,
        "MINS": 20,
    }
)

# Labels may name any of these; anything else in a label is descriptive text.
BASKETBALL_VOCABULARY = frozenset(
    {
        "PTS",
        "REBS",
        "ASSTS",
        "BLKS",
        "STLS",
        "FOULS",
        "FG",
        "FT",
        "3-PT FG",
        "TO",
        "MINS",
        "OFF REBS",
        "FGS",
        "TECHNICAL",
        "EJECTED",
        "BIO",
    }
)

BASKETBALL_DISPLAY_ORDER = ("PTS", "REBS", "ASSTS", "FG", "3-PT FG", "FT", "BLKS", "STLS")

BASKETBALL_SHORT_LABELS: Mapping[str, str] = MappingProxyType(
    {
        "REBS": "reb",
        "ASSTS": "ast",
        "BLKS": "blk",
        "STLS": "stl",
        "3-PT FG": "3pm",
    }
)

# ESPN box score column name -> canonical key
ESPN_BASKETBALL_COLUMNS: Mapping[str, str] = MappingProxyType(
    {
        "PTS": "PTS",
        "REB": "REBS",
        "AST": "ASSTS",
        "BLK": "BLKS",
        "STL": "STLS",
        "TO": "TO",
        "3PT": "3-PT FG",
        "FG": "FG",
        "FT": "FT",
        "MIN": "MINS",
        "OREB": "OFF REBS",
        "PF": "FOULS",
    }
)


def _basketball(league: str) -> StatRules:
    return StatRules(
        league=league,
        sport="basketball",
        thresholds=BASKETBALL_THRESHOLDS,
        vocabulary=BASKETBALL_VOCABULARY,
        display_order=BASKETBALL_DISPLAY_ORDER,
        short_labels=BASKETBALL_SHORT_LABELS,
        stat_columns=ESPN_BASKETBALL_COLUMNS,
    )


DEFAULT_LEAGUE = "mens-college-basketball"

_STAT_RULES: Dict[Tuple[str, str], StatRules] = {
    ("basketball", league): _basketball(league)
    for league in ("mens-college-basketball", "womens-college-basketball", "nba", "wnba")
}


def iter_rules() -> Iterable[StatRules]:
    """Return an iterator of all configured rule sets."""

    return _STAT_RULES.values()


def get_rules(league: str = DEFAULT_LEAGUE, sport: str = "basketball") -> StatRules:
    """Fetch rules for a sport/league pair, raising KeyError if missing."""

    key = (sport.lower(), league.lower())
    if key not in _STAT_RULES:
        raise KeyError(f"No stat rules configured for sport={sport!r}, league={league!r}")
    return _STAT_RULES[key]


def get_rules_by_key(league_key: str | Tuple[str, str]) -> StatRules:
    """Resolve rules using either "sport/league", a bare league or (sport, league)."""

    if isinstance(league_key, tuple):
        sport, league = league_key
        return get_rules(league, sport)

    if not isinstance(league_key, str):
        raise TypeError("league_key must be a str or (sport, league) tuple")

    if "/" in league_key:
        sport, league = league_key.split("/", 1)
        return get_rules(league, sport)
    return get_rules(league_key)
