"""Rank catalog entries whose requirement set is covered by the notable stats."""

from __future__ import annotations

from typing import AbstractSet, List, Sequence

from taketracker.models import CatalogEntry, MatchResult

from .policy import is_full_game_scope


DEFAULT_LIMIT = 3


def entry_satisfied(entry: CatalogEntry, notable: AbstractSet[str]) -> bool:
    return bool(entry.required_keys) and all(key in notable for key in entry.required_keys)


def match_categories(
    notable: AbstractSet[str],
    catalog: Sequence[CatalogEntry],
    *,
    limit: int = DEFAULT_LIMIT,
    exclude_partial_scope: bool = True,
) -> List[MatchResult]:
    """Return up to ``limit`` matches, most required keys first.

    Ties keep catalog order.
    """

    if not notable:
        return []

    matches: List[MatchResult] = []
    for entry in catalog:
        if not entry_satisfied(entry, notable):
            continue
        if exclude_partial_scope and not is_full_game_scope(entry.category):
            continue
        matches.append(MatchResult.from_entry(entry))

    matches.sort(key=lambda match: match.score, reverse=True)
    return matches[: max(0, limit)]
