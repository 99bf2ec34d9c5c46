"""Render the stats behind a player's matches as a short string."""

from __future__ import annotations

from typing import List, Sequence

from taketracker.config import StatRules, get_rules
from taketracker.models import MatchResult, StatisticsRecord


def _summary_keys(record: StatisticsRecord, matches: Sequence[MatchResult], rules: StatRules) -> List[str]:
    keys: List[str] = []
    for match in matches:
        for key in match.required_keys:
            if key not in keys:
                keys.append(key)
    if record.value("PTS") > 0 and "PTS" not in keys:
        keys.append("PTS")

    order = {key: position for position, key in enumerate(rules.display_order)}
    unranked = len(order)
    return sorted(keys, key=lambda key: order.get(key, unranked))


def summarize(
    record: StatisticsRecord,
    matches: Sequence[MatchResult],
    rules: StatRules | None = None,
) -> str:
    """Return e.g. ``"12 pts, 6 reb"``; empty when nothing is worth showing."""

    rules = rules or get_rules()
    parts: List[str] = []
    for key in _summary_keys(record, matches, rules):
        if key != "PTS" and record.value(key) == 0:
            continue
        part = f"{record.display_value(key)} {rules.short_label(key)}"
        if part not in parts:
            parts.append(part)
    return ", ".join(parts)
