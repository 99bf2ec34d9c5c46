"""Input adapters that normalize raw provider data."""

from .boxscore import BoxScoreParseError, parse_box_score, parse_scoreboard, parse_stat_value

__all__ = [
    "BoxScoreParseError",
    "parse_box_score",
    "parse_scoreboard",
    "parse_stat_value",
]
