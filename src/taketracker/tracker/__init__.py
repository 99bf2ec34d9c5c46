"""Classification pipeline over whole players and games."""

from .service import PlayerEvaluation, evaluate_player, summarize_box_score, summarize_player

__all__ = ["PlayerEvaluation", "evaluate_player", "summarize_box_score", "summarize_player"]
