import pytest

from taketracker.catalog import load_catalog
from taketracker.config import get_rules
from taketracker.matching import classify, is_full_game_scope, match_categories, qualifies, summarize
from taketracker.models import CatalogEntry, MatchResult, StatisticsRecord


THRESHOLDS = get_rules().thresholds


def _catalog():
    return load_catalog(
        [
            {"id": "X2", "category": "PTS"},
            {"id": "X1", "category": "PTS / REBS"},
            {"id": "X5", "category": "REBS"},
            {"id": "X6", "category": "PTS / REBS / ASSTS"},
            {"id": "X7", "category": "STARTING LINEUP"},
            {"id": "X8", "category": "PTS / REBS / 1ST HALF"},
            {"id": "X9", "category": "PTS / ASSTS"},
        ]
    )


def test_classify_scenario():
    record = StatisticsRecord(values={"PTS": 12, "REBS": 6, "ASSTS": 2})
    assert classify(record, THRESHOLDS) == {"PTS", "REBS"}


def test_classify_threshold_is_inclusive():
    record = StatisticsRecord(values={"PTS": 8, "BLKS": 1, "MINS": 20})
    assert classify(record, THRESHOLDS) == {"PTS", "MINS"}


def test_classify_ignores_keys_without_threshold():
    record = StatisticsRecord(values={"FOULS": 5, "OFF REBS": 9})
    assert classify(record, THRESHOLDS) == frozenset()


@pytest.mark.parametrize("key", sorted(THRESHOLDS))
def test_classify_each_key_at_boundary(key):
    limit = THRESHOLDS[key]
    assert key in classify(StatisticsRecord(values={key: limit}), THRESHOLDS)
    if limit > 0:
        assert key not in classify(StatisticsRecord(values={key: limit - 1}), THRESHOLDS)


def test_match_scenario_two_keys():
    matches = match_categories({"PTS", "REBS"}, _catalog())
    assert [match.id for match in matches] == ["X1", "X2", "X5"]
    assert matches[0].score == 2


def test_match_points_only():
    matches = match_categories({"PTS"}, _catalog())
    assert [(match.id, match.score) for match in matches] == [("X2", 1)]


def test_match_requires_every_key():
    matches = match_categories({"PTS", "REBS", "ASSTS"}, _catalog())
    assert all(set(match.required_keys) <= {"PTS", "REBS", "ASSTS"} for match in matches)
    assert [match.id for match in matches] == ["X6", "X1", "X9"]


def test_match_sorted_descending_and_stable():
    catalog = (
        CatalogEntry(id="a", category="PTS", required_keys=("PTS",)),
        CatalogEntry(id="b", category="REBS", required_keys=("REBS",)),
        CatalogEntry(id="c", category="PTS / REBS", required_keys=("PTS", "REBS")),
        CatalogEntry(id="d", category="REBS / PTS", required_keys=("REBS", "PTS")),
    )
    matches = match_categories({"PTS", "REBS"}, catalog)
    assert [match.id for match in matches] == ["c", "d", "a"]
    scores = [match.score for match in matches]
    assert scores == sorted(scores, reverse=True)


def test_match_caps_results():
    catalog = tuple(CatalogEntry(id=f"e{i}", category="PTS", required_keys=("PTS",)) for i in range(10))
    assert len(match_categories({"PTS"}, catalog)) == 3
    assert len(match_categories({"PTS"}, catalog, limit=5)) == 5


def test_match_empty_notable_set():
    assert match_categories(set(), _catalog()) == []


def test_match_skips_partial_scope_labels():
    ids = [match.id for match in match_categories({"PTS", "REBS"}, _catalog(), limit=10)]
    assert "X8" not in ids
    ids = [match.id for match in match_categories({"PTS", "REBS"}, _catalog(), limit=10, exclude_partial_scope=False)]
    assert "X8" in ids


def test_match_is_idempotent():
    catalog = _catalog()
    assert match_categories({"PTS", "REBS"}, catalog) == match_categories({"PTS", "REBS"}, catalog)


@pytest.mark.parametrize(
    "label, expected",
    [
        ("PTS / REBS", True),
        ("PTS / 1ST HALF", False),
        ("REBS / 2nd Quarter", False),
        ("PTS / SEASON HIGH", False),
        ("3-PT FG / since 2010", False),
        ("BLKS / CAREER HIGH", False),
        ("HALFTIME SHOW", True),
    ],
)
def test_is_full_game_scope(label, expected):
    assert is_full_game_scope(label) is expected


def test_qualifies_on_match_or_points():
    rules = get_rules()
    match = MatchResult(id="X2", category="PTS", required_keys=("PTS",), score=1)
    assert qualifies(StatisticsRecord(values={"PTS": 9}), [match], rules)
    assert qualifies(StatisticsRecord(values={"PTS": 10}), [], rules)
    assert not qualifies(StatisticsRecord(values={"PTS": 9}), [], rules)
    assert not qualifies(StatisticsRecord(values={"PTS": 0, "REBS": 0, "ASSTS": 0}), [], rules)


def test_summarize_scenario():
    record = StatisticsRecord(values={"PTS": 12, "REBS": 6, "ASSTS": 2})
    matches = match_categories(classify(record, THRESHOLDS), _catalog())
    assert summarize(record, matches) == "12 pts, 6 reb"


def test_summarize_always_includes_points():
    record = StatisticsRecord(values={"PTS": 4, "REBS": 7})
    match = MatchResult(id="X5", category="REBS", required_keys=("REBS",), score=1)
    assert summarize(record, [match]) == "4 pts, 7 reb"


def test_summarize_uses_display_priority_and_forms():
    record = StatisticsRecord(
        values={"PTS": 15, "3-PT FG": 3, "FG": 5, "STLS": 2, "ASSTS": 4},
        display={"3-PT FG": "3-5", "FG": "5-9"},
    )
    matches = [
        MatchResult(id="a", category="STLS / 3-PT FG", required_keys=("STLS", "3-PT FG"), score=2),
        MatchResult(id="b", category="FG / ASSTS", required_keys=("FG", "ASSTS"), score=2),
    ]
    assert summarize(record, matches) == "15 pts, 4 ast, 5-9 fg, 3-5 3pm, 2 stl"


def test_summarize_unordered_keys_sort_last():
    record = StatisticsRecord(values={"PTS": 9, "TO": 5})
    match = MatchResult(id="t", category="TO / PTS", required_keys=("TO", "PTS"), score=2)
    assert summarize(record, [match]) == "9 pts, 5 to"


def test_summarize_skips_zero_values():
    record = StatisticsRecord(values={"PTS": 0, "BLKS": 0})
    match = MatchResult(id="b", category="BLKS", required_keys=("BLKS",), score=1)
    assert summarize(record, [match]) == ""
    assert summarize(StatisticsRecord(), []) == ""


def test_summarize_without_matches_shows_points():
    assert summarize(StatisticsRecord(values={"PTS": 14, "REBS": 9}), []) == "14 pts"


def test_classify_and_summarize_are_idempotent():
    record = StatisticsRecord(values={"PTS": 12, "REBS": 6, "ASSTS": 2}, display={"FG": "4-6"})
    assert classify(record, THRESHOLDS) == classify(record, THRESHOLDS)
    matches = match_categories(classify(record, THRESHOLDS), _catalog())
    assert summarize(record, matches) == summarize(record, matches)
