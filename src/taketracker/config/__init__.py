"""Configuration helpers for stat thresholds and runtime settings."""

from .stats import DEFAULT_LEAGUE, StatRules, get_rules, get_rules_by_key, iter_rules

__all__ = [
    "DEFAULT_LEAGUE",
    "StatRules",
    "get_rules",
    "get_rules_by_key",
    "iter_rules",
]
