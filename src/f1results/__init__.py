"""f1results — Session result normalization, deduplication and standings."""

from f1results.client import AsyncResultsFeedClient, ResultsFeedClient
from f1results.events import compute_event_view, list_events
from f1results.exceptions import (
    AmbiguousSessionKindError,
    F1ResultsError,
    FetchAPIError,
    FetchConnectionError,
    FetchError,
    FetchTimeoutError,
    MissingRoundError,
    StoreError,
)
from f1results.identity import canonicalize_kind, make_record_id, make_session_id
from f1results.ingest import IngestionWriter, IngestReport, run_ingestion
from f1results.jolpica import JolpicaResultSource
from f1results.models import (
    DriverStanding,
    EventSummary,
    EventView,
    ResultRecord,
    SessionIdentifier,
    SessionKind,
)
from f1results.normalize import normalize_batch, normalize_record
from f1results.sources import RawResultSource
from f1results.standings import compute_standings
from f1results.store import InMemoryRecordStore, RecordStore

__all__ = [
    "AmbiguousSessionKindError",
    "AsyncResultsFeedClient",
    "DriverStanding",
    "EventSummary",
    "EventView",
    "F1ResultsError",
    "FetchAPIError",
    "FetchConnectionError",
    "FetchError",
    "FetchTimeoutError",
    "InMemoryRecordStore",
    "IngestReport",
    "IngestionWriter",
    "JolpicaResultSource",
    "MissingRoundError",
    "RawResultSource",
    "RecordStore",
    "ResultRecord",
    "ResultsFeedClient",
    "SessionIdentifier",
    "SessionKind",
    "StoreError",
    "canonicalize_kind",
    "compute_event_view",
    "compute_standings",
    "list_events",
    "make_record_id",
    "make_session_id",
    "normalize_batch",
    "normalize_record",
    "run_ingestion",
]

__version__ = "0.1.0"
