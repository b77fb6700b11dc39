"""Ingestion: fetch, normalize and upsert a season's results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from f1results._logging import get_logger, log_pipeline_call
from f1results.config import get_settings
from f1results.exceptions import StoreError
from f1results.models.result import ResultRecord
from f1results.normalize import RejectedRecord, normalize_batch
from f1results.sources import RawResultSource
from f1results.store import RecordStore


@dataclass(frozen=True)
class FailedWrite:
    record_id: str
    error: str


@dataclass
class IngestReport:
    """Outcome of one producer run.

    Failed and rejected records are expected to be retried by the next run;
    everything in ``written`` stays committed.
    """

    season: int | None = None
    fetched: int = 0
    written: list[str] = field(default_factory=list)
    rejected: list[RejectedRecord] = field(default_factory=list)
    failed: list[FailedWrite] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected and not self.failed


class IngestionWriter:
    """Writes normalized records to a store with upsert semantics."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def write(self, record: ResultRecord) -> None:
        """Upsert one record.

        Raises:
            StoreError: The store rejected the record.
        """
        self._store.upsert(record)

    def write_batch(self, records: Iterable[ResultRecord]) -> IngestReport:
        """Upsert every record, continuing past individual store failures."""
        report = IngestReport()
        for record in records:
            try:
                self.write(record)
            except StoreError as exc:
                get_logger().warning("WRITE FAILED: %s: %s", record.record_id, exc.message)
                report.failed.append(FailedWrite(record.record_id, exc.message))
                continue
            report.written.append(record.record_id)
        return report


@log_pipeline_call
def run_ingestion(
    source: RawResultSource,
    store: RecordStore,
    season: int,
    *,
    strict_kind: bool | None = None,
) -> IngestReport:
    """Fetch a season from *source*, normalize it and upsert into *store*.

    ``FetchError`` propagates before anything is written.
    """
    if strict_kind is None:
        strict_kind = get_settings().strict_session_kind

    raws = source.fetch_season_results(season)
    batch = normalize_batch(raws, season, strict_kind=strict_kind)

    report = IngestionWriter(store).write_batch(batch.records)
    report.season = season
    report.fetched = len(raws)
    report.rejected = batch.rejected
    return report
