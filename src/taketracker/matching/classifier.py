"""Turn raw stat totals into the set of notable statistic keys."""

from __future__ import annotations

from typing import FrozenSet, Mapping

from taketracker.models import StatisticsRecord


NotableSet = FrozenSet[str]


def classify(record: StatisticsRecord, thresholds: Mapping[str, int]) -> NotableSet:
    """Return the keys whose value meets or exceeds their threshold.

    Keys without a configured threshold are never notable.
    """

    notable = set()
    for key, value in record.values.items():
        limit = thresholds.get(key)
        if limit is not None and value >= limit:
            notable.add(key)
    return frozenset(notable)
