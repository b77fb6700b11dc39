"""Event grouping for display."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from f1results.models.result import ResultRecord
from f1results.models.session import SessionKind
from f1results.models.views import EventSummary, EventView


def _standing_key(record: ResultRecord) -> tuple[bool, int]:
    # Unclassified (standing 0) after every classified driver.
    return (not record.is_classified, record.standing)


def compute_event_view(
    records: Iterable[ResultRecord],
    event_name: str,
    *,
    season: int | None = None,
) -> EventView:
    """Partition one event's records by session kind.

    Kinds are taken as already canonical. Duplicate physical records are kept:
    the view shows what is stored.
    """
    buckets: dict[SessionKind, list[ResultRecord]] = {}
    for record in records:
        if record.event_name != event_name:
            continue
        if season is not None and record.season != season:
            continue
        buckets.setdefault(record.kind, []).append(record)

    sessions = {
        kind: sorted(buckets[kind], key=_standing_key)
        for kind in SessionKind
        if kind in buckets
    }
    return EventView(event_name=event_name, season=season, sessions=sessions)


def list_events(
    records: Iterable[ResultRecord], *, season: int | None = None,
) -> list[EventSummary]:
    """Return the distinct events in *records*, ordered by season and round."""
    kinds: dict[tuple[int, int, str], set[SessionKind]] = {}
    dates: dict[tuple[int, int, str], date | None] = {}
    for record in records:
        if season is not None and record.season != season:
            continue
        key = (record.season, record.round, record.event_name)
        kinds.setdefault(key, set()).add(record.kind)
        if dates.get(key) is None:
            dates[key] = record.event_date

    return [
        EventSummary(
            season=key[0],
            round=key[1],
            event_name=key[2],
            event_date=dates[key],
            kinds=tuple(k for k in SessionKind if k in kinds[key]),
        )
        for key in sorted(kinds, key=lambda k: (k[0], k[1]))
    ]
