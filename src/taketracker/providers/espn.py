"""ESPN site API client.

Fetches raw scoreboard and game summary JSON; normalization lives in
``taketracker.ingest``.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Any

import httpx

from taketracker.config import settings


logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"

RETRY_BASE_DELAY = 0.5
RETRY_MAX_DELAY = 8.0
RETRY_JITTER = 0.3


class ProviderError(RuntimeError):
    """Raised when the statistics provider cannot be reached or answers badly."""


class ESPNClient:
    def __init__(
        self,
        league: str | None = None,
        *,
        sport: str = "basketball",
        timeout: float | None = None,
        retry_count: int | None = None,
        base_url: str = ESPN_BASE_URL,
        transport: httpx.BaseTransport | None = None,
        sleep=time.sleep,
    ):
        self.league = league or settings.league()
        self.sport = sport
        self._retry_count = retry_count if retry_count is not None else settings.espn_retries()
        self._sleep = sleep
        self._client = httpx.Client(
            base_url=f"{base_url}/{sport}/{self.league}",
            timeout=timeout if timeout is not None else settings.espn_timeout(),
            transport=transport,
        )

    def __enter__(self) -> "ESPNClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def _delay(self, attempt: int) -> float:
        capped = min(RETRY_BASE_DELAY * (2**attempt), RETRY_MAX_DELAY)
        jitter = capped * RETRY_JITTER * (2 * random.random() - 1)
        return max(0.1, capped + jitter)

    def _request(self, path: str, params: dict | None = None) -> Any:
        last_error: Exception | None = None
        for attempt in range(self._retry_count):
            try:
                response = self._client.get(path, params=params)
                response.raise_for_status()
                logger.debug("[ESPN] fetched %s %s", path, params or "")
                return response.json()
            except httpx.HTTPStatusError as exc:
                logger.warning("[ESPN] HTTP %d for %s", exc.response.status_code, path)
                last_error = exc
                if exc.response.status_code < 500 and exc.response.status_code != 429:
                    break
            except (httpx.RequestError, ValueError) as exc:
                logger.warning("[ESPN] Request failed for %s: %s", path, exc)
                last_error = exc
            if attempt < self._retry_count - 1:
                self._sleep(self._delay(attempt))
        raise ProviderError(f"ESPN request for {path} failed: {last_error}") from last_error

    def get_scoreboard(self) -> Any:
        return self._request("/scoreboard")

    def get_summary(self, game_id: str) -> Any:
        return self._request("/summary", params={"event": game_id})
