"""Stat classification, category matching and summaries."""

from .classifier import NotableSet, classify
from .matcher import DEFAULT_LIMIT, entry_satisfied, match_categories
from .policy import is_full_game_scope, qualifies
from .summary import summarize

__all__ = [
    "DEFAULT_LIMIT",
    "NotableSet",
    "classify",
    "entry_satisfied",
    "is_full_game_scope",
    "match_categories",
    "qualifies",
    "summarize",
]
