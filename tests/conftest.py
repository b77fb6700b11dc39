"""Shared test fixtures and sample source rows."""

from __future__ import annotations

import logging

import pytest

import f1results._logging as log_mod
from f1results.config import get_settings
from f1results.normalize import normalize_record

SEASON = 2025
FEED_URL = "https://results.example.com/api"
JOLPICA_URL = "https://api.jolpi.ca/ergast/f1"

DRIVERS: list[tuple[str, str]] = [
    ("Oscar Piastri", "McLaren"),
    ("Lando Norris", "McLaren"),
    ("George Russell", "Mercedes"),
    ("Max Verstappen", "Red Bull"),
    ("Esteban Ocon", "Haas F1 Team"),
    ("Andrea Kimi Antonelli", "Mercedes"),
    ("Alexander Albon", "Williams"),
    ("Oliver Bearman", "Haas F1 Team"),
    ("Lance Stroll", "Aston Martin"),
    ("Carlos Sainz", "Williams"),
    ("Isack Hadjar", "RB F1 Team"),
    ("Jack Doohan", "Alpine F1 Team"),
    ("Gabriel Bortoleto", "Sauber"),
    ("Liam Lawson", "Red Bull"),
    ("Yuki Tsunoda", "RB F1 Team"),
    ("Fernando Alonso", "Aston Martin"),
    ("Nico Hulkenberg", "Sauber"),
    ("Pierre Gasly", "Alpine F1 Team"),
    ("Charles Leclerc", "Ferrari"),
    ("Lewis Hamilton", "Ferrari"),
]

RACE_POINTS = [25, 18, 15, 12, 10, 8, 6, 4, 2, 1] + [0] * 10
SPRINT_POINTS = [8, 7, 6, 5, 4, 3, 2, 1] + [0] * 12

SAMPLE_RAW = {
    "round": "2",
    "session_type": "Race",
    "raceName": "Chinese Grand Prix",
    "race_date": "2025-03-23",
    "position": "1",
    "driverNumber": "81",
    "Driver": "Oscar Piastri",
    "Team": "McLaren",
    "Fastest Lap": "1:35.520",
    "Points": "25",
}

SAMPLE_RAW_SPARSE = {
    "round": 2,
    "raceName": "Chinese Grand Prix",
    "Driver": "Oscar Piastri",
}


def _make_raw(
    round: int | None = 1,
    kind: str | None = "Race",
    position: int | None = 1,
    driver: str | None = "Oscar Piastri",
    points: float | None = 25,
    event: str | None = "Australian Grand Prix",
    team: str | None = "McLaren",
    race_date: str | None = "2025-03-16",
) -> dict:
    raw: dict = {
        "round": round,
        "session_type": kind,
        "raceName": event,
        "race_date": race_date,
        "position": position,
        "Driver": driver,
        "Team": team,
        "Fastest Lap": "1:22.167",
        "Points": points,
    }
    return {k: v for k, v in raw.items() if v is not None}


def _make_record(season: int = SEASON, **kwargs):
    return normalize_record(_make_raw(**kwargs), season)


def _session_raws(round: int, kind: str, event: str, points: list[int]) -> list[dict]:
    return [
        _make_raw(
            round=round,
            kind=kind,
            position=i + 1,
            driver=name,
            team=team,
            points=points[i],
            event=event,
        )
        for i, (name, team) in enumerate(DRIVERS)
    ]


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging(tmp_path, monkeypatch):
    """Point the log file at tmp_path and drop cached settings and logger."""
    monkeypatch.setenv("F1RESULTS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("F1RESULTS_JOLPICA_MIN_REQUEST_INTERVAL", "0")
    get_settings.cache_clear()
    named_logger = logging.getLogger(log_mod.LOGGER_NAME)
    named_logger.handlers.clear()
    log_mod._logger = None

    yield tmp_path / "logs"

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    log_mod._logger = None
    get_settings.cache_clear()


@pytest.fixture
def make_raw():
    """Factory fixture for creating raw source rows."""
    return _make_raw


@pytest.fixture
def make_record():
    """Factory fixture for creating normalized records."""
    return _make_record


@pytest.fixture
def season_raws() -> list[dict]:
    """Round 1 race, round 2 sprint and race: 60 rows."""
    return (
        _session_raws(1, "Race", "Australian Grand Prix", RACE_POINTS)
        + _session_raws(2, "Sprint", "Chinese Grand Prix", SPRINT_POINTS)
        + _session_raws(2, "Race", "Chinese Grand Prix", RACE_POINTS)
    )
