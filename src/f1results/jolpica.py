"""Raw result source backed by the Jolpica (Ergast-compatible) API."""

from __future__ import annotations

import threading
import time
from typing import Any

from f1results._http import SyncTransport
from f1results._logging import log_io_call
from f1results.config import get_settings
from f1results.exceptions import FetchError
from f1results.models.session import SessionKind
from f1results.sources import RawRecord, RawResultSource

# endpoint suffix -> (results key inside each race, session tag)
_SESSION_ENDPOINTS: dict[str, tuple[str, SessionKind]] = {
    "results": ("Results", SessionKind.RACE),
    "sprint": ("SprintResults", SessionKind.SPRINT),
}


def _driver_name(driver: dict[str, Any]) -> str | None:
    name = f"{driver.get('givenName') or ''} {driver.get('familyName') or ''}".strip()
    return name or None


def flatten_race(race: dict[str, Any], results_key: str, kind: SessionKind) -> list[RawRecord]:
    """Flatten one Jolpica race entry into raw result rows.

    Retired or disqualified drivers (non-numeric ``positionText``) are emitted
    without a position so they normalize as unclassified.
    """
    rows: list[RawRecord] = []
    for res in race.get(results_key) or []:
        driver = res.get("Driver") or {}
        lap_time = (res.get("FastestLap") or {}).get("Time") or {}
        position_text = str(res.get("positionText", ""))
        rows.append({
            "round": race.get("round"),
            "session_type": kind.value,
            "raceName": race.get("raceName"),
            "race_date": race.get("date"),
            "position": res.get("position") if position_text.isdigit() else None,
            "driverNumber": res.get("number") or driver.get("permanentNumber"),
            "Driver": _driver_name(driver),
            "Team": (res.get("Constructor") or {}).get("name"),
            "Fastest Lap": lap_time.get("time"),
            "Points": res.get("points"),
        })
    return rows


class JolpicaResultSource(RawResultSource):
    """Fetches race and sprint classifications for a season from Jolpica.

    Pages through ``/{season}/results.json`` and ``/{season}/sprint.json``
    with ``limit``/``offset`` and spaces requests to respect the rate limit.

    Usage:
        with JolpicaResultSource() as source:
            rows = source.fetch_season_results(2025)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        page_limit: int | None = None,
        min_request_interval: float | None = None,
    ) -> None:
        settings = get_settings()
        self._transport = SyncTransport(
            base_url=base_url or settings.jolpica_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )
        self._page_limit = page_limit or settings.jolpica_page_limit
        self._min_interval = (
            min_request_interval
            if min_request_interval is not None
            else settings.jolpica_min_request_interval
        )
        self._last_request_time = 0.0
        self._rate_limit_lock = threading.Lock()

    def __enter__(self) -> JolpicaResultSource:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def _rate_limit(self) -> None:
        """Sleep if needed to keep requests at least the minimum interval apart."""
        with self._rate_limit_lock:
            now = time.monotonic()
            elapsed = now - self._last_request_time
            if elapsed < self._min_interval:
                time.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()

    def _fetch_races(self, season: int, endpoint: str) -> list[dict[str, Any]]:
        races: list[dict[str, Any]] = []
        offset = 0
        while True:
            self._rate_limit()
            data = self._transport.get(
                f"/{season}/{endpoint}.json",
                {"limit": self._page_limit, "offset": offset},
            )
            try:
                mr_data = data["MRData"]
                page = mr_data["RaceTable"]["Races"]
                total = int(mr_data["total"])
            except (KeyError, TypeError, ValueError) as exc:
                raise FetchError(
                    f"Malformed Jolpica payload for {season}/{endpoint}: {exc!r}",
                ) from exc
            races.extend(page)
            offset += self._page_limit
            if not page or offset >= total:
                return races

    @log_io_call
    def fetch_season_results(self, season: int) -> list[RawRecord]:
        rows: list[RawRecord] = []
        for endpoint, (results_key, kind) in _SESSION_ENDPOINTS.items():
            for race in self._fetch_races(season, endpoint):
                try:
                    rows.extend(flatten_race(race, results_key, kind))
                except (AttributeError, TypeError) as exc:
                    raise FetchError(
                        f"Malformed Jolpica payload for {season}/{endpoint}: {exc!r}",
                    ) from exc
        return rows
