"""Show the sprint and race classifications for every event of a season."""

import sys

from f1results import JolpicaResultSource, compute_event_view, list_events, normalize_batch


def main(season: int) -> None:
    with JolpicaResultSource() as source:
        batch = normalize_batch(source.fetch_season_results(season), season)
    records = batch.records

    for event in list_events(records, season=season):
        print(f"\n=== Round {event.round}: {event.event_name} ({event.event_date or 'date unknown'}) ===")
        view = compute_event_view(records, event.event_name, season=season)
        for kind, results in view.sessions.items():
            print(f"  -- {kind.value} --")
            for r in results[:3]:
                pos = r.standing if r.is_classified else "NC"
                print(f"    {pos:>2} {r.driver_name:<25} {r.team:<20} {r.points:g} pts")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 2025)
