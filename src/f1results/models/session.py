"""Session kind and composite session identifier."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SessionKind(str, Enum):
    """Canonical session kinds.

    Members are declared in weekend order; event views list buckets in this order.
    """

    SPRINT = "Sprint"
    RACE = "Race"


class SessionIdentifier(BaseModel):
    """Composite identity of one session: season, round and kind."""

    model_config = ConfigDict(frozen=True)

    season: int
    round: int = Field(ge=1)
    kind: SessionKind

    @property
    def key(self) -> str:
        """Partition key, e.g. ``'2025|2|Sprint'``."""
        return f"{self.season}|{self.round}|{self.kind.value}"

    def __str__(self) -> str:
        return self.key
