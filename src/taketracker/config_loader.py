"""Persist and load CLI tracker profiles."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from taketracker.config import StatRules, get_rules_by_key


@dataclass
class TrackerProfile:
    league: Optional[str] = None
    thresholds: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path) -> "TrackerProfile":
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls(
            league=data.get("league"),
            thresholds={str(key): int(value) for key, value in data.get("thresholds", {}).items()},
        )

    def save(self, path: Path) -> None:
        payload = {
            "league": self.league,
            "thresholds": self.thresholds,
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def resolve_rules(self, default_league: str) -> StatRules:
        rules = get_rules_by_key(self.league or default_league)
        if self.thresholds:
            rules = rules.with_thresholds(self.thresholds)
        return rules
