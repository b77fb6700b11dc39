"""Normalized per-driver session result."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from f1results import identity
from f1results.models.session import SessionIdentifier, SessionKind

UNKNOWN_DRIVER = "Unknown Driver"
UNKNOWN_TEAM = "Unknown Team"
NOT_AVAILABLE = "N/A"


class ResultRecord(BaseModel):
    """One driver's classified result in one session.

    ``standing`` is 0 for unclassified drivers. ``record_id`` is derived from
    ``session_id`` and ``driver_name`` and is the upsert key in every store.
    """

    model_config = ConfigDict(frozen=True)

    record_id: str
    session_id: SessionIdentifier
    event_name: str
    event_date: date | None = None
    standing: int = Field(default=0, ge=0)
    driver_number: str = NOT_AVAILABLE
    driver_name: str = Field(default=UNKNOWN_DRIVER, min_length=1)
    team: str = UNKNOWN_TEAM
    fastest_lap: str = NOT_AVAILABLE
    points: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def _record_id_matches_identity(self) -> ResultRecord:
        expected = identity.make_record_id(self.session_id, self.driver_name)
        if self.record_id != expected:
            raise ValueError(f"record_id {self.record_id!r} does not match {expected!r}")
        return self

    @property
    def season(self) -> int:
        return self.session_id.season

    @property
    def round(self) -> int:
        return self.session_id.round

    @property
    def kind(self) -> SessionKind:
        return self.session_id.kind

    @property
    def is_classified(self) -> bool:
        """True when the driver has a finishing position."""
        return self.standing > 0
