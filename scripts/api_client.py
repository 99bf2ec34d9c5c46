"""Lightweight REST client for the taketracker API."""

from __future__ import annotations

import argparse
import json
import time

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the taketracker REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--search", metavar="QUERY", help="Search the catalog and exit")
    parser.add_argument("--list-games", action="store_true", help="List games and exit")
    parser.add_argument("--game", metavar="GAME_ID", help="Fetch classifications for a game")
    parser.add_argument("--poll", type=float, default=None, help="Re-fetch the game every N seconds")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.search is not None:
            resp = client.get("/api/search", params={"q": args.search})
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return
        if args.list_games:
            resp = client.get("/api/games")
            resp.raise_for_status()
            for game in resp.json():
                print(f"{game['id']}\t{game['short_name']} ({game['status']})")
            return
        if not args.game:
            raise SystemExit("one of --search, --list-games or --game is required")

        while True:
            resp = client.get(f"/api/game/{args.game}")
            if resp.status_code == 502:
                print(f"Error fetching data: {resp.json().get('detail')}")
            else:
                resp.raise_for_status()
                print(json.dumps(resp.json()["teams"], indent=2))
            if args.poll is None:
                return
            time.sleep(args.poll)


if __name__ == "__main__":
    main()
