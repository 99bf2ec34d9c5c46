"""Per-player and per-game classification pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from taketracker.config import StatRules, get_rules
from taketracker.matching import NotableSet, classify, match_categories, qualifies, summarize
from taketracker.models import (
    BoxScore,
    BoxScorePlayer,
    CatalogEntry,
    MatchResult,
    PlayerSummary,
    StatisticsRecord,
    TeamSummary,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerEvaluation:
    notable: NotableSet
    matches: Tuple[MatchResult, ...]
    summary: str
    included: bool


def evaluate_player(
    stats: StatisticsRecord,
    catalog: Sequence[CatalogEntry],
    rules: StatRules | None = None,
) -> PlayerEvaluation:
    rules = rules or get_rules()
    notable = classify(stats, rules.thresholds)
    matches = match_categories(notable, catalog, limit=rules.result_limit)
    return PlayerEvaluation(
        notable=notable,
        matches=tuple(matches),
        summary=summarize(stats, matches, rules),
        included=qualifies(stats, matches, rules),
    )


def summarize_player(
    player: BoxScorePlayer,
    catalog: Sequence[CatalogEntry],
    rules: StatRules | None = None,
) -> Optional[PlayerSummary]:
    """Return the player's summary, or ``None`` when they do not qualify."""

    evaluation = evaluate_player(player.stats, catalog, rules)
    if not evaluation.included:
        return None
    return PlayerSummary(
        name=player.name,
        jersey=player.jersey,
        stats_summary=evaluation.summary,
        matches=list(evaluation.matches),
    )


def summarize_box_score(
    box: BoxScore,
    catalog: Sequence[CatalogEntry],
    rules: StatRules | None = None,
) -> List[TeamSummary]:
    rules = rules or get_rules()
    teams: List[TeamSummary] = []
    for team in box.teams:
        players = [
            summary
            for summary in (summarize_player(player, catalog, rules) for player in team.players)
            if summary is not None
        ]
        logger.debug("Game %s: %s reported %d of %d players", box.game_id, team.team, len(players), len(team.players))
        teams.append(
            TeamSummary(
                team=team.team,
                abbreviation=team.abbreviation,
                color=team.color,
                is_home=team.is_home,
                players=players,
            )
        )
    return teams
