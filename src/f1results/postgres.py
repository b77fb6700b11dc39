"""PostgreSQL record store built on psycopg."""

from __future__ import annotations

from typing import Any

import psycopg
from psycopg.rows import dict_row

from f1results._logging import log_io_call
from f1results.config import get_settings
from f1results.exceptions import StoreError
from f1results.models.result import ResultRecord
from f1results.models.session import SessionIdentifier, SessionKind
from f1results.store import RecordStore, check_record_id

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS session_result (
    record_id     text PRIMARY KEY,
    session_key   text NOT NULL,
    season        integer NOT NULL,
    round         integer NOT NULL CHECK (round >= 1),
    kind          text NOT NULL CHECK (kind IN ('Race', 'Sprint')),
    event_name    text NOT NULL,
    event_date    date,
    standing      integer NOT NULL DEFAULT 0 CHECK (standing >= 0),
    driver_number text NOT NULL,
    driver_name   text NOT NULL,
    team          text NOT NULL,
    fastest_lap   text NOT NULL,
    points        double precision NOT NULL DEFAULT 0 CHECK (points >= 0),
    updated_at    timestamptz NOT NULL DEFAULT now()
);
CREATE INDEX IF NOT EXISTS session_result_session_key_idx ON session_result (session_key);
CREATE INDEX IF NOT EXISTS session_result_event_name_idx ON session_result (event_name);
"""

UPSERT_SQL = """
INSERT INTO session_result (
    record_id, session_key, season, round, kind, event_name, event_date,
    standing, driver_number, driver_name, team, fastest_lap, points
)
VALUES (
    %(record_id)s, %(session_key)s, %(season)s, %(round)s, %(kind)s, %(event_name)s,
    %(event_date)s, %(standing)s, %(driver_number)s, %(driver_name)s, %(team)s,
    %(fastest_lap)s, %(points)s
)
ON CONFLICT (record_id) DO UPDATE SET
    event_name    = EXCLUDED.event_name,
    event_date    = EXCLUDED.event_date,
    standing      = EXCLUDED.standing,
    driver_number = EXCLUDED.driver_number,
    team          = EXCLUDED.team,
    fastest_lap   = EXCLUDED.fastest_lap,
    points        = EXCLUDED.points,
    updated_at    = now()
"""

_SELECT_SQL = """
SELECT record_id, season, round, kind, event_name, event_date, standing,
       driver_number, driver_name, team, fastest_lap, points
FROM session_result
"""

# Sprint sorts after Race alphabetically; DESC puts it first, in weekend order.
_ORDER_SQL = " ORDER BY season, round, kind DESC, standing = 0, standing, record_id"


def _record_params(record: ResultRecord) -> dict[str, Any]:
    return {
        "record_id": record.record_id,
        "session_key": record.session_id.key,
        "season": record.season,
        "round": record.round,
        "kind": record.kind.value,
        "event_name": record.event_name,
        "event_date": record.event_date,
        "standing": record.standing,
        "driver_number": record.driver_number,
        "driver_name": record.driver_name,
        "team": record.team,
        "fastest_lap": record.fastest_lap,
        "points": record.points,
    }


def _row_to_record(row: dict[str, Any]) -> ResultRecord:
    return ResultRecord(
        record_id=row["record_id"],
        session_id=SessionIdentifier(
            season=row["season"], round=row["round"], kind=SessionKind(row["kind"]),
        ),
        event_name=row["event_name"],
        event_date=row["event_date"],
        standing=row["standing"],
        driver_number=row["driver_number"],
        driver_name=row["driver_name"],
        team=row["team"],
        fastest_lap=row["fastest_lap"],
        points=row["points"],
    )


class PostgresRecordStore(RecordStore):
    """Record store over a ``session_result`` table.

    Usage:
        with psycopg.connect(dsn) as conn:
            store = PostgresRecordStore(conn)
            store.ensure_schema()
            store.upsert(record)
    """

    def __init__(self, conn: psycopg.Connection) -> None:
        self._conn = conn

    @classmethod
    def connect(cls, dsn: str | None = None) -> PostgresRecordStore:
        """Open a new connection to *dsn*, or to ``F1RESULTS_DATABASE_URL``."""
        dsn = dsn or get_settings().database_url
        if not dsn:
            raise ValueError("No database DSN; pass dsn or set F1RESULTS_DATABASE_URL")
        return cls(psycopg.connect(dsn))

    def close(self) -> None:
        self._conn.close()

    def ensure_schema(self) -> None:
        """Create the results table and indexes if missing."""
        with self._conn.transaction():
            self._conn.execute(SCHEMA_SQL)

    @log_io_call
    def upsert(self, record: ResultRecord) -> None:
        check_record_id(record)
        try:
            with self._conn.transaction():
                self._conn.execute(UPSERT_SQL, _record_params(record))
        except psycopg.Error as exc:
            raise StoreError(record.record_id, str(exc)) from exc

    @log_io_call
    def query_all(self) -> list[ResultRecord]:
        return self._select(_SELECT_SQL + _ORDER_SQL, None)

    @log_io_call
    def query_by_event(self, event_name: str) -> list[ResultRecord]:
        return self._select(
            _SELECT_SQL + " WHERE event_name = %(event_name)s" + _ORDER_SQL,
            {"event_name": event_name},
        )

    def _select(self, sql: str, params: dict[str, Any] | None) -> list[ResultRecord]:
        # A read outside a transaction block opens an implicit transaction that
        # later upsert blocks would only nest savepoints in.
        try:
            with self._conn.transaction(), self._conn.cursor(row_factory=dict_row) as cur:
                cur.execute(sql, params)
                rows = cur.fetchall()
        except psycopg.Error as exc:
            raise StoreError("*", f"query failed: {exc}") from exc
        return [_row_to_record(row) for row in rows]
