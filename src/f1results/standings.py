"""Season standings with exactly-once points per session."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from f1results.models.result import ResultRecord
from f1results.models.session import SessionIdentifier
from f1results.models.views import DriverStanding


@dataclass
class StandingAccumulator:
    """Running total for one driver.

    ``seen_sessions`` holds every session already credited; a second physical
    record for the same session adds nothing.
    """

    team: str
    total_points: float = 0.0
    seen_sessions: set[SessionIdentifier] = field(default_factory=set)

    def add(self, record: ResultRecord) -> bool:
        """Fold *record* in. Returns False when its session was already counted."""
        self.team = record.team
        if record.session_id in self.seen_sessions:
            return False
        self.seen_sessions.add(record.session_id)
        self.total_points += record.points
        return True


def accumulate(
    records: Iterable[ResultRecord], *, season: int | None = None,
) -> dict[str, StandingAccumulator]:
    """Fold *records* into per-driver accumulators, in first-encounter order."""
    drivers: dict[str, StandingAccumulator] = {}
    for record in records:
        if season is not None and record.season != season:
            continue
        acc = drivers.get(record.driver_name)
        if acc is None:
            acc = drivers[record.driver_name] = StandingAccumulator(team=record.team)
        acc.add(record)
    return drivers


def compute_standings(
    records: Iterable[ResultRecord], *, season: int | None = None,
) -> list[DriverStanding]:
    """Return driver standings, highest total first.

    Ties keep the order in which drivers were first encountered.
    """
    standings = [
        DriverStanding(
            driver_name=name,
            team=acc.team,
            total_points=acc.total_points,
            sessions=len(acc.seen_sessions),
        )
        for name, acc in accumulate(records, season=season).items()
    ]
    return sorted(standings, key=lambda s: s.total_points, reverse=True)
