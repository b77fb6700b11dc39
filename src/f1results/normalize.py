"""Raw record normalization.

Turns untyped source rows into ``ResultRecord``s with canonical session kinds
and every optional field defaulted. Pure functions, no shared state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from f1results._logging import get_logger
from f1results.exceptions import AmbiguousSessionKindError, MissingRoundError
from f1results.identity import canonicalize_kind, make_record_id, make_session_id
from f1results.models.raw import RawResult
from f1results.models.result import NOT_AVAILABLE, UNKNOWN_DRIVER, UNKNOWN_TEAM, ResultRecord


@dataclass(frozen=True)
class RejectedRecord:
    """A raw record excluded from a batch."""

    position: int
    reason: str
    raw: Mapping[str, Any]


@dataclass
class NormalizedBatch:
    records: list[ResultRecord] = field(default_factory=list)
    rejected: list[RejectedRecord] = field(default_factory=list)


def default_event_name(round: int) -> str:
    return f"Round {round}"


def normalize_record(
    raw: Mapping[str, Any],
    season: int,
    *,
    round_hint: int | None = None,
    strict_kind: bool = False,
    position: int | None = None,
) -> ResultRecord:
    """Normalize one raw source row.

    Args:
        raw: Untyped source mapping; any field may be missing.
        season: Season the row belongs to.
        round_hint: Round to use when the row carries none.
        strict_kind: Raise ``AmbiguousSessionKindError`` on unknown session tags
            instead of defaulting to Race.
        position: Source position, reported in ``MissingRoundError``.

    Raises:
        MissingRoundError: No usable round in the row or the hint.
    """
    return _build_record(
        RawResult.model_validate(dict(raw)), raw, season,
        round_hint=round_hint, strict_kind=strict_kind, position=position,
    )


def _build_record(
    parsed: RawResult,
    raw: Mapping[str, Any],
    season: int,
    *,
    round_hint: int | None,
    strict_kind: bool,
    position: int | None,
) -> ResultRecord:
    round_ = parsed.round if parsed.round is not None else round_hint
    if round_ is None or round_ < 1:
        raise MissingRoundError(position=position, raw=raw)

    kind = canonicalize_kind(parsed.session_type, strict=strict_kind)
    session_id = make_session_id(season, round_, kind)
    driver_name = parsed.driver or UNKNOWN_DRIVER

    return ResultRecord(
        record_id=make_record_id(session_id, driver_name),
        session_id=session_id,
        event_name=parsed.event_name or default_event_name(round_),
        event_date=parsed.event_date,
        standing=max(parsed.standing or 0, 0),
        driver_number=parsed.driver_number or NOT_AVAILABLE,
        driver_name=driver_name,
        team=parsed.team or UNKNOWN_TEAM,
        fastest_lap=parsed.fastest_lap or NOT_AVAILABLE,
        points=max(parsed.points or 0.0, 0.0),
    )


def _round_hints(parsed: list[RawResult]) -> dict[str, int]:
    """Map event name -> round from rows that carry both."""
    hints: dict[str, int] = {}
    for row in parsed:
        if row.event_name and row.round is not None and row.round >= 1:
            hints.setdefault(row.event_name, row.round)
    return hints


def normalize_batch(
    raws: Iterable[Mapping[str, Any]],
    season: int,
    *,
    strict_kind: bool = False,
) -> NormalizedBatch:
    """Normalize a batch, rejecting bad rows without aborting the rest.

    A row without a round is recovered from another row in the batch with the
    same event name. Rows that still fail are logged and returned in
    ``rejected`` with their source position.
    """
    rows = [(raw, RawResult.model_validate(dict(raw))) for raw in raws]
    hints = _round_hints([parsed for _, parsed in rows])
    logger = get_logger()
    batch = NormalizedBatch()

    for position, (raw, parsed) in enumerate(rows):
        try:
            record = _build_record(
                parsed,
                raw,
                season,
                round_hint=hints.get(parsed.event_name) if parsed.event_name else None,
                strict_kind=strict_kind,
                position=position,
            )
        except (MissingRoundError, AmbiguousSessionKindError) as exc:
            logger.warning("REJECT: season=%d position=%d: %s", season, position, exc)
            batch.rejected.append(RejectedRecord(position, str(exc), raw))
            continue
        batch.records.append(record)

    return batch
