"""Normalize ESPN scoreboard and summary payloads."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from taketracker.config import StatRules, get_rules
from taketracker.models import BoxScore, BoxScorePlayer, BoxScoreTeam, GameInfo, StatisticsRecord


logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*(\d+)")


class BoxScoreParseError(ValueError):
    """Raised when a provider payload does not have the expected shape."""


def parse_stat_value(raw: Any) -> Tuple[int, Optional[str]]:
    """Return ``(value, display)`` for a raw box score cell.

    ``"4-6"`` gives ``(4, "4-6")``; plain numbers give no display form and
    blanks or dashes read as zero.
    """

    if raw is None:
        return 0, None
    if isinstance(raw, bool):
        return 0, None
    if isinstance(raw, (int, float)):
        return max(0, int(raw)), None
    text = str(raw).strip()
    if not text:
        return 0, None
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else 0
    if "-" in text[1:] and match:
        return value, text
    return value, None


def _stat_columns(block: Mapping[str, Any]) -> List[str]:
    names = block.get("names") or block.get("labels") or []
    return [str(name).upper() for name in names]


def _parse_athlete(row: Mapping[str, Any], columns: List[str], rules: StatRules) -> BoxScorePlayer:
    athlete = row.get("athlete") or {}
    raw_stats = row.get("stats") or []
    values: Dict[str, int] = {key: 0 for key in rules.stat_columns.values()}
    display: Dict[str, str] = {}
    for index, column in enumerate(columns):
        key = rules.stat_columns.get(column)
        if key is None:
            logger.debug("Ignoring unmapped stat column %s", column)
            continue
        raw = raw_stats[index] if index < len(raw_stats) else None
        value, shown = parse_stat_value(raw)
        values[key] = value
        if shown is not None:
            display[key] = shown
    jersey = athlete.get("jersey")
    return BoxScorePlayer(
        name=athlete.get("displayName") or athlete.get("shortName") or "Unknown",
        jersey=str(jersey) if jersey not in (None, "") else None,
        stats=StatisticsRecord(values=values, display=display),
    )


def _home_away_by_team(payload: Mapping[str, Any]) -> Dict[str, bool]:
    sides: Dict[str, bool] = {}
    header = payload.get("header") or {}
    for competition in (header.get("competitions") or [])[:1]:
        for competitor in competition.get("competitors") or []:
            team_id = competitor.get("id") or (competitor.get("team") or {}).get("id")
            if team_id is not None and competitor.get("homeAway"):
                sides[str(team_id)] = competitor["homeAway"] == "home"
    if sides:
        return sides
    for team_block in (payload.get("boxscore") or {}).get("teams") or []:
        team_id = (team_block.get("team") or {}).get("id")
        if team_id is not None and team_block.get("homeAway"):
            sides[str(team_id)] = team_block["homeAway"] == "home"
    return sides


def parse_box_score(payload: Any, game_id: str, rules: StatRules | None = None) -> BoxScore:
    if not isinstance(payload, dict):
        raise BoxScoreParseError("summary payload must be a JSON object")
    rules = rules or get_rules()
    boxscore = payload.get("boxscore") or {}
    if not isinstance(boxscore, dict):
        raise BoxScoreParseError("'boxscore' must be a JSON object")
    sides = _home_away_by_team(payload)

    teams: List[BoxScoreTeam] = []
    for group in boxscore.get("players") or []:
        team = group.get("team") or {}
        players: List[BoxScorePlayer] = []
        stat_blocks = group.get("statistics") or []
        if stat_blocks:
            block = stat_blocks[0]
            columns = _stat_columns(block)
            players = [_parse_athlete(row, columns, rules) for row in block.get("athletes") or []]
        teams.append(
            BoxScoreTeam(
                team=team.get("displayName") or team.get("name") or "Unknown",
                abbreviation=team.get("abbreviation"),
                color=team.get("color"),
                is_home=sides.get(str(team.get("id")), False),
                players=players,
            )
        )
    return BoxScore(game_id=str(game_id), teams=teams)


def parse_scoreboard(payload: Any) -> List[GameInfo]:
    if not isinstance(payload, dict):
        raise BoxScoreParseError("scoreboard payload must be a JSON object")
    games: List[GameInfo] = []
    for event in payload.get("events") or []:
        status = ((event.get("status") or {}).get("type") or {}).get("shortDetail") or ""
        games.append(
            GameInfo(
                id=str(event.get("id", "")),
                name=event.get("name") or "",
                short_name=event.get("shortName") or event.get("name") or "",
                status=status,
            )
        )
    return games
