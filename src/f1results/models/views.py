"""Derived read-time views: event sessions and driver standings."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict

from f1results.models.result import ResultRecord
from f1results.models.session import SessionKind


class EventView(BaseModel):
    """One event's records partitioned by session kind.

    ``sessions`` only holds non-empty buckets, in weekend order.
    """

    model_config = ConfigDict(frozen=True)

    event_name: str
    season: int | None = None
    sessions: dict[SessionKind, list[ResultRecord]] = {}

    @property
    def kinds(self) -> list[SessionKind]:
        return list(self.sessions)

    @property
    def race(self) -> list[ResultRecord]:
        return self.sessions.get(SessionKind.RACE, [])

    @property
    def sprint(self) -> list[ResultRecord]:
        return self.sessions.get(SessionKind.SPRINT, [])

    @property
    def is_empty(self) -> bool:
        return not self.sessions


class EventSummary(BaseModel):
    """An event as listed in an event picker."""

    model_config = ConfigDict(frozen=True)

    season: int
    round: int
    event_name: str
    event_date: date | None = None
    kinds: tuple[SessionKind, ...] = ()


class DriverStanding(BaseModel):
    """Season points total for one driver."""

    model_config = ConfigDict(frozen=True)

    driver_name: str
    team: str
    total_points: float
    sessions: int = 0
