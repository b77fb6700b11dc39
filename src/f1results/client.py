"""HTTP clients for a JSON season-results feed."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from f1results._http import AsyncTransport, SyncTransport
from f1results._logging import log_io_call
from f1results.config import get_settings
from f1results.exceptions import FetchError
from f1results.sources import RawRecord, RawResultSource

_RAW_LIST = TypeAdapter(list[dict[str, Any]])


def _validate_payload(season: int, data: Any) -> list[RawRecord]:
    """Accept a JSON list of objects, or an object wrapping one under ``results``."""
    if isinstance(data, dict) and "results" in data:
        data = data["results"]
    try:
        return _RAW_LIST.validate_python(data)
    except ValidationError as exc:
        raise FetchError(
            f"Malformed results payload for season {season}: {exc.error_count()} errors",
        ) from exc


def _transport_args(base_url: str | None, timeout: float | None) -> dict[str, Any]:
    settings = get_settings()
    url = base_url or settings.results_base_url
    if not url:
        raise ValueError("No results feed URL; pass base_url or set F1RESULTS_RESULTS_BASE_URL")
    return {
        "base_url": url,
        "timeout": timeout if timeout is not None else settings.request_timeout,
    }


class ResultsFeedClient(RawResultSource):
    """Synchronous client for a ``GET /results?season=N`` feed.

    Usage:
        with ResultsFeedClient("https://example.com/api") as feed:
            rows = feed.fetch_season_results(2025)
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self._transport = SyncTransport(**_transport_args(base_url, timeout))

    def __enter__(self) -> ResultsFeedClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_io_call
    def fetch_season_results(self, season: int) -> list[RawRecord]:
        data = self._transport.get("/results", {"season": season})
        return _validate_payload(season, data)


class AsyncResultsFeedClient:
    """Asynchronous client for a ``GET /results?season=N`` feed.

    Usage:
        async with AsyncResultsFeedClient("https://example.com/api") as feed:
            rows = await feed.fetch_season_results(2025)
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self._transport = AsyncTransport(**_transport_args(base_url, timeout))

    async def __aenter__(self) -> AsyncResultsFeedClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def fetch_season_results(self, season: int) -> list[RawRecord]:
        data = await self._transport.get("/results", {"season": season})
        return _validate_payload(season, data)
