"""Ingest a season from Jolpica into an in-memory store and print the leaderboard."""

import sys

from f1results import InMemoryRecordStore, JolpicaResultSource, compute_standings, run_ingestion


def main(season: int) -> None:
    store = InMemoryRecordStore()
    with JolpicaResultSource() as source:
        report = run_ingestion(source, store, season)

    print(f"=== {season}: fetched {report.fetched}, wrote {len(report.written)} ===")
    for rejected in report.rejected:
        print(f"  rejected row {rejected.position}: {rejected.reason}")
    for failed in report.failed:
        print(f"  failed {failed.record_id}: {failed.error}")

    print("\n=== Drivers' standings ===")
    for pos, standing in enumerate(compute_standings(store.query_all()), start=1):
        print(f"  {pos:>2}. {standing.driver_name:<25} {standing.team:<20} {standing.total_points:g}")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 2025)
