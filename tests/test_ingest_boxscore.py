import pytest

from taketracker.ingest import BoxScoreParseError, parse_box_score, parse_scoreboard, parse_stat_value
from tests.espn_payloads import summary_payload, scoreboard_payload


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("4-6", (4, "4-6")),
        ("0-3", (0, "0-3")),
        ("12", (12, None)),
        (" 7 ", (7, None)),
        ("--", (0, None)),
        ("", (0, None)),
        (None, (0, None)),
        (9, (9, None)),
    ],
)
def test_parse_stat_value(raw, expected):
    assert parse_stat_value(raw) == expected


def test_parse_box_score_maps_columns_and_sides():
    box = parse_box_score(summary_payload(), "401")
    assert box.game_id == "401"
    owls, hawks = box.teams
    assert owls.team == "Visiting Owls"
    assert owls.is_home is False
    assert owls.color == "003366"
    assert hawks.is_home is True

    ava = owls.players[0]
    assert ava.name == "Ava Guard"
    assert ava.jersey == "3"
    assert ava.stats.value("PTS") == 12
    assert ava.stats.value("REBS") == 6
    assert ava.stats.value("ASSTS") == 2
    assert ava.stats.value("FG") == 4
    assert ava.stats.display_value("FG") == "4-6"
    assert ava.stats.value("3-PT FG") == 1
    assert ava.stats.value("MINS") == 31
    assert ava.stats.value("FOULS") == 2


def test_parse_box_score_player_without_stats_reads_zero():
    box = parse_box_score(summary_payload(), "401")
    did_not_play = box.teams[1].players[1]
    assert did_not_play.stats.value("PTS") == 0
    assert did_not_play.stats.value("MINS") == 0


def test_parse_box_score_falls_back_to_boxscore_teams_for_sides():
    payload = summary_payload()
    del payload["header"]
    payload["boxscore"]["teams"] = [
        {"team": {"id": "20"}, "homeAway": "home"},
        {"team": {"id": "10"}, "homeAway": "away"},
    ]
    box = parse_box_score(payload, "401")
    assert box.teams[0].is_home is True
    assert box.teams[1].is_home is False


def test_parse_box_score_without_boxscore_returns_no_teams():
    assert parse_box_score({}, "401").teams == []


def test_parse_box_score_rejects_non_object():
    with pytest.raises(BoxScoreParseError):
        parse_box_score(["nope"], "401")


def test_parse_scoreboard():
    games = parse_scoreboard(scoreboard_payload())
    assert [game.id for game in games] == ["401", "402"]
    assert games[0].short_name == "OWL @ HWK"
    assert games[0].status == "2nd Half 10:31"
