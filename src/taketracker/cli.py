"""Command-line interface for classifying players and searching the catalog."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from taketracker.catalog import load_catalog_or_empty, search_catalog
from taketracker.config import StatRules, settings
from taketracker.config_loader import TrackerProfile
from taketracker.ingest import BoxScoreParseError, parse_box_score, parse_scoreboard, parse_stat_value
from taketracker.models import StatisticsRecord
from taketracker.providers import ESPNClient, ProviderError
from taketracker.tracker import evaluate_player, summarize_box_score


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Match live box score stats to Take ID categories")
    parser.add_argument("--catalog", type=Path, default=None, help="Path to catalog JSON")
    parser.add_argument("--league", default=None, help="League key (e.g., nba, mens-college-basketball)")
    parser.add_argument(
        "--threshold",
        action="append",
        default=[],
        help="Override a stat threshold (e.g., PTS=10)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load threshold profile JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save threshold profile JSON", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    search = commands.add_parser("search", help="Search the catalog")
    search.add_argument("query", help="Free-text query, e.g. 'pts/reb'")

    classify = commands.add_parser("classify", help="Classify a stat line from a JSON file")
    classify.add_argument("stats", type=Path, help="JSON object of stat key -> value")

    commands.add_parser("games", help="List today's games")

    game = commands.add_parser("game", help="Classify every player in a live game")
    game.add_argument("game_id", help="Provider game id")
    game.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    serve = commands.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


def _parse_thresholds(entries: list[str]) -> dict[str, int]:
    thresholds: dict[str, int] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid threshold entry '{entry}', expected KEY=value")
        key, value = entry.split("=", 1)
        try:
            thresholds[key.strip()] = int(value.strip())
        except ValueError:
            raise ValueError(f"Threshold for '{key.strip()}' is not an integer: {value!r}") from None
    return thresholds


def _load_stats(path: Path) -> StatisticsRecord:
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a JSON object")
    if "values" in data:
        return StatisticsRecord.model_validate(data)
    values: dict[str, int] = {}
    display: dict[str, str] = {}
    for key, raw in data.items():
        value, shown = parse_stat_value(raw)
        values[key] = value
        if shown is not None:
            display[key] = shown
    return StatisticsRecord(values=values, display=display)


def _format_matches(matches) -> str:
    if not matches:
        return "-"
    return "; ".join(f"{match.category} [{match.id}]" for match in matches)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        overrides = _parse_thresholds(args.threshold)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    profile = TrackerProfile.load(args.load_profile) if args.load_profile else TrackerProfile()
    if args.league:
        profile.league = args.league
    profile.thresholds = profile.thresholds | overrides
    try:
        rules: StatRules = profile.resolve_rules(settings.league())
    except (KeyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    if args.save_profile:
        profile.save(args.save_profile)
        print(f"Saved tracker profile to {args.save_profile}")

    catalog = load_catalog_or_empty(args.catalog or settings.catalog_path(), rules)

    if args.command == "search":
        results = search_catalog(args.query, catalog)
        for entry in results:
            print(f"{entry.id}\t{entry.category}")
        print(f"{len(results)} result(s)")
        return

    if args.command == "classify":
        stats = _load_stats(args.stats)
        evaluation = evaluate_player(stats, catalog, rules)
        print(f"Notable: {', '.join(sorted(evaluation.notable)) or '-'}")
        print(f"Summary: {evaluation.summary or '-'}")
        print(f"Matches: {_format_matches(evaluation.matches)}")
        if not evaluation.included:
            print("Player would not be reported")
        return

    if args.command == "serve":
        import uvicorn

        from taketracker.api import create_app

        uvicorn.run(create_app(catalog=catalog, rules=rules), host=args.host, port=args.port)
        return

    with ESPNClient(rules.league, sport=rules.sport) as client:
        try:
            if args.command == "games":
                for info in parse_scoreboard(client.get_scoreboard()):
                    print(f"{info.id}\t{info.short_name} ({info.status})")
                return

            box = parse_box_score(client.get_summary(args.game_id), args.game_id, rules)
        except (ProviderError, BoxScoreParseError) as exc:
            raise SystemExit(f"Failed to fetch data: {exc}") from exc

    teams = summarize_box_score(box, catalog, rules)
    if args.json:
        print(json.dumps([team.model_dump() for team in teams], indent=2))
        return
    for team in teams:
        if not team.players:
            continue
        side = "HOME" if team.is_home else "AWAY"
        print(f"== {team.team} ({side})")
        for player in team.players:
            jersey = f"#{player.jersey} " if player.jersey else ""
            print(f"  {jersey}{player.name}: {player.stats_summary or '-'} | {_format_matches(player.matches)}")


if __name__ == "__main__":
    main()
