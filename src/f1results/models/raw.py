"""Lenient model over an untyped raw source record."""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _to_int(value: Any) -> int | None:
    value = _blank_to_none(value)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


class RawResult(BaseModel):
    """Raw result row as delivered by a source.

    Every field is optional and validation never fails: unparseable values
    become ``None`` and are defaulted later by the normalizer.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    round: int | None = Field(
        default=None, validation_alias=AliasChoices("round", "Round", "round_number"),
    )
    session_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("session_type", "sessionType", "session", "kind"),
    )
    driver: str | None = Field(
        default=None, validation_alias=AliasChoices("Driver", "driver", "driverName", "driver_name"),
    )
    team: str | None = Field(
        default=None, validation_alias=AliasChoices("Team", "team", "Constructor", "constructor"),
    )
    fastest_lap: str | None = Field(
        default=None,
        validation_alias=AliasChoices("Fastest Lap", "fastest_lap", "fastestLap", "FastestLap"),
    )
    points: float | None = Field(
        default=None, validation_alias=AliasChoices("Points", "points"),
    )
    event_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("raceName", "eventName", "event_name", "Event"),
    )
    event_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("race_date", "date", "eventDate", "event_date"),
    )
    standing: int | None = Field(
        default=None,
        validation_alias=AliasChoices("position", "Position", "standing", "Pos"),
    )
    driver_number: str | None = Field(
        default=None,
        validation_alias=AliasChoices("driverNumber", "driver_number", "Number", "No"),
    )

    @field_validator("round", "standing", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> int | None:
        return _to_int(value)

    @field_validator("points", mode="before")
    @classmethod
    def _coerce_points(cls, value: Any) -> float | None:
        value = _blank_to_none(value)
        if value is None or isinstance(value, bool):
            return None
        try:
            points = float(value)
        except (TypeError, ValueError):
            return None
        return points if math.isfinite(points) else None

    @field_validator(
        "session_type", "driver", "team", "fastest_lap", "event_name", "driver_number",
        mode="before",
    )
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        value = _blank_to_none(value)
        if value is None or isinstance(value, (dict, list)):
            return None
        return str(value).strip() or None

    @field_validator("event_date", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any) -> date | None:
        value = _blank_to_none(value)
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            return datetime.fromisoformat(str(value)).date()
        except ValueError:
            return None
