"""Custom exceptions for the results pipeline."""

from __future__ import annotations

from typing import Any


class F1ResultsError(Exception):
    """Base exception for all results pipeline errors."""


class FetchError(F1ResultsError):
    """Raised when the upstream source is unreachable or returns a malformed payload."""


class FetchConnectionError(FetchError):
    """Raised when the source cannot be reached."""


class FetchTimeoutError(FetchError):
    """Raised when a request to the source times out."""


class FetchAPIError(FetchError):
    """Raised when the source returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class MissingRoundError(F1ResultsError):
    """Raised when a raw record cannot be assigned a round."""

    def __init__(self, position: int | None = None, raw: Any = None) -> None:
        self.position = position
        self.raw = raw
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Cannot determine round for record{where}")


class StoreError(F1ResultsError):
    """Raised when a single upsert is rejected by the record store."""

    def __init__(self, record_id: str, message: str) -> None:
        self.record_id = record_id
        self.message = message
        super().__init__(f"Failed to store {record_id!r}: {message}")


class AmbiguousSessionKindError(F1ResultsError):
    """Raised in strict mode when a session kind tag is not recognised."""

    def __init__(self, raw_kind: object) -> None:
        self.raw_kind = raw_kind
        super().__init__(f"Unrecognised session kind: {raw_kind!r}")
