"""Raw result source interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

RawRecord = dict[str, Any]


class RawResultSource(ABC):
    """Bulk provider of raw, untyped result rows for a season."""

    @abstractmethod
    def fetch_season_results(self, season: int) -> list[RawRecord]:
        """Return every raw result row for *season*.

        Raises:
            FetchError: The source is unreachable or returned a malformed payload.
        """
