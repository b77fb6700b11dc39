"""Record store interface and in-memory implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from f1results._logging import log_io_call
from f1results.exceptions import StoreError
from f1results.identity import make_record_id
from f1results.models.result import ResultRecord


class RecordStore(ABC):
    """Persistence for normalized records, keyed by ``record_id``.

    ``upsert`` must replace any stored record with the same ``record_id`` in a
    single atomic operation.
    """

    @abstractmethod
    def upsert(self, record: ResultRecord) -> None: ...

    @abstractmethod
    def query_all(self) -> list[ResultRecord]: ...

    def query_by_event(self, event_name: str) -> list[ResultRecord]:
        """Return records for one event. Stores may override with an indexed query."""
        return [r for r in self.query_all() if r.event_name == event_name]


def check_record_id(record: ResultRecord) -> None:
    """Raise ``StoreError`` unless ``record_id`` matches the record's session and driver.

    ``model_copy(update=...)`` skips validation, so a copied record can carry
    the id of the record it was copied from.
    """
    expected = make_record_id(record.session_id, record.driver_name)
    if record.record_id != expected:
        raise StoreError(record.record_id, f"record_id does not match identity {expected!r}")


class InMemoryRecordStore(RecordStore):
    """Thread-safe store keyed by ``record_id``.

    Iteration order is first-insertion order; an upsert keeps the record's
    original slot.
    """

    def __init__(self) -> None:
        self._records: dict[str, ResultRecord] = {}
        self._lock = threading.Lock()

    @log_io_call
    def upsert(self, record: ResultRecord) -> None:
        check_record_id(record)
        with self._lock:
            self._records[record.record_id] = record

    @log_io_call
    def query_all(self) -> list[ResultRecord]:
        with self._lock:
            return list(self._records.values())

    @log_io_call
    def query_by_event(self, event_name: str) -> list[ResultRecord]:
        with self._lock:
            return [r for r in self._records.values() if r.event_name == event_name]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
