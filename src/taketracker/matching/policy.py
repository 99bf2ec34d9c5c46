"""Business rules layered on top of the subset predicate."""

from __future__ import annotations

import re
from typing import Sequence

from taketracker.config import StatRules
from taketracker.models import MatchResult, StatisticsRecord


_PARTIAL_SCOPE_PATTERN = re.compile(r"\b(quarters?|qtrs?|halfs?|halves|since|seasons?|career)\b", re.IGNORECASE)


def is_full_game_scope(label: str) -> bool:
    """False for labels scoped to part of a game or to more than one game."""

    return _PARTIAL_SCOPE_PATTERN.search(label) is None


def qualifies(record: StatisticsRecord, matches: Sequence[MatchResult], rules: StatRules) -> bool:
    """A player is reported when something matched or they scored enough anyway."""

    return bool(matches) or record.value("PTS") >= rules.fallback_points
