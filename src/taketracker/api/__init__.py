"""REST API for the live category tracker."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Protocol, Sequence

from fastapi import FastAPI, HTTPException, Query

from taketracker.api.schemas import (
    CatalogEntryResponse,
    CatalogResponse,
    GameDetailResponse,
    GameResponse,
    MatchResponse,
    PlayerResponse,
    SearchResponse,
    TeamResponse,
)
from taketracker.catalog import load_catalog_or_empty, search_catalog
from taketracker.config import StatRules, get_rules, settings
from taketracker.ingest import BoxScoreParseError, parse_box_score, parse_scoreboard
from taketracker.models import CatalogEntry, TeamSummary
from taketracker.providers import ESPNClient, ProviderError
from taketracker.tracker import summarize_box_score


logger = logging.getLogger(__name__)


class StatsProvider(Protocol):
    def get_scoreboard(self) -> Any: ...

    def get_summary(self, game_id: str) -> Any: ...


def _entry_to_response(entry: CatalogEntry) -> CatalogEntryResponse:
    return CatalogEntryResponse(id=entry.id, category=entry.category, required_keys=list(entry.required_keys))


def _team_to_response(team: TeamSummary) -> TeamResponse:
    return TeamResponse(
        team=team.team,
        abbreviation=team.abbreviation,
        color=team.color,
        is_home=team.is_home,
        players=[
            PlayerResponse(
                name=player.name,
                jersey=player.jersey,
                stats_summary=player.stats_summary,
                matches=[MatchResponse(id=m.id, category=m.category, score=m.score) for m in player.matches],
            )
            for player in team.players
        ],
    )


def create_app(
    *,
    provider: StatsProvider | None = None,
    catalog: Sequence[CatalogEntry] | None = None,
    rules: StatRules | None = None,
) -> FastAPI:
    rules = rules or get_rules(settings.league())
    if catalog is None:
        catalog = load_catalog_or_empty(settings.catalog_path(), rules)
    catalog = tuple(catalog)

    owned_client: ESPNClient | None = None
    if provider is None:
        owned_client = ESPNClient(rules.league, sport=rules.sport)
        provider = owned_client

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            # Injected providers belong to the caller.
            if owned_client is not None:
                owned_client.close()

    app = FastAPI(title="taketracker", lifespan=lifespan)
    app.state.catalog = catalog
    app.state.rules = rules
    app.state.provider = provider

    def get_provider() -> StatsProvider:
        return app.state.provider

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/games", response_model=list[GameResponse])
    def games() -> list[GameResponse]:
        try:
            payload = get_provider().get_scoreboard()
            infos = parse_scoreboard(payload)
        except (ProviderError, BoxScoreParseError) as exc:
            logger.error("Error fetching scoreboard: %s", exc)
            raise HTTPException(status_code=502, detail="Failed to fetch games") from exc
        return [GameResponse(**info.model_dump()) for info in infos]

    @app.get("/api/game/{game_id}", response_model=GameDetailResponse)
    def game(game_id: str) -> GameDetailResponse:
        try:
            payload = get_provider().get_summary(game_id)
        except ProviderError as exc:
            logger.error("Error fetching game %s: %s", game_id, exc)
            raise HTTPException(status_code=502, detail="Failed to fetch game") from exc
        try:
            box = parse_box_score(payload, game_id, rules)
        except BoxScoreParseError as exc:
            logger.error("Error processing game %s: %s", game_id, exc)
            raise HTTPException(status_code=502, detail="Failed to process game") from exc
        teams = summarize_box_score(box, catalog, rules)
        return GameDetailResponse(game_id=box.game_id, teams=[_team_to_response(team) for team in teams])

    @app.get("/api/search", response_model=SearchResponse)
    async def search(q: str = Query("", max_length=200)) -> SearchResponse:
        results = search_catalog(q, catalog)
        return SearchResponse(query=q, total=len(results), results=[_entry_to_response(e) for e in results])

    @app.get("/api/catalog", response_model=CatalogResponse)
    async def catalog_listing() -> CatalogResponse:
        return CatalogResponse(
            total=len(catalog),
            matchable=sum(1 for entry in catalog if entry.matchable),
            entries=[_entry_to_response(entry) for entry in catalog],
        )

    return app
