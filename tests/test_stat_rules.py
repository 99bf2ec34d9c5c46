import pytest

from taketracker.config import get_rules, get_rules_by_key, iter_rules


def test_get_rules_handles_league_case():
    rules = get_rules("NBA")
    assert rules.league == "nba"
    assert rules.thresholds["PTS"] == 8
    assert rules.threshold_for("FOULS") is None


def test_get_rules_by_key_accepts_sport_prefix_and_tuple():
    assert get_rules_by_key("basketball/wnba").league == "wnba"
    assert get_rules_by_key(("basketball", "nba")).league == "nba"
    assert get_rules_by_key("mens-college-basketball").result_limit == 3


def test_get_rules_missing_raises():
    with pytest.raises(KeyError):
        get_rules("curling")


def test_with_thresholds_returns_copy():
    rules = get_rules("nba")
    stricter = rules.with_thresholds({"PTS": 20})
    assert stricter.thresholds["PTS"] == 20
    assert stricter.thresholds["REBS"] == 5
    assert rules.thresholds["PTS"] == 8


def test_with_thresholds_rejects_negative():
    with pytest.raises(ValueError):
        get_rules("nba").with_thresholds({"PTS": -1})


def test_every_threshold_key_is_in_vocabulary():
    for rules in iter_rules():
        assert set(rules.thresholds) <= rules.vocabulary
        assert set(rules.display_order) <= rules.vocabulary


def test_short_labels():
    rules = get_rules()
    assert rules.short_label("3-PT FG") == "3pm"
    assert rules.short_label("REBS") == "reb"
    assert rules.short_label("PTS") == "pts"
    assert rules.short_label("MINS") == "mins"
