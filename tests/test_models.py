"""Tests for Pydantic model parsing and coercion."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from f1results.models import (
    DriverStanding,
    EventView,
    RawResult,
    ResultRecord,
    SessionIdentifier,
    SessionKind,
)
from tests.conftest import SAMPLE_RAW


class TestRawResult:
    def test_parse_source_labels(self) -> None:
        raw = RawResult.model_validate(SAMPLE_RAW)
        assert raw.round == 2
        assert raw.session_type == "Race"
        assert raw.event_name == "Chinese Grand Prix"
        assert raw.event_date == date(2025, 3, 23)
        assert raw.standing == 1
        assert raw.driver == "Oscar Piastri"
        assert raw.team == "McLaren"
        assert raw.fastest_lap == "1:35.520"
        assert raw.points == 25.0
        assert raw.driver_number == "81"

    def test_alternate_labels(self) -> None:
        raw = RawResult.model_validate({
            "Round": 4,
            "kind": "sprint",
            "eventName": "Bahrain Grand Prix",
            "date": "2025-04-13T15:00:00",
            "Position": 3,
            "driverName": "Lando Norris",
            "Constructor": "McLaren",
            "points": 15.0,
            "Number": 4,
        })
        assert raw.round == 4
        assert raw.session_type == "sprint"
        assert raw.event_date == date(2025, 4, 13)
        assert raw.driver_number == "4"
        assert raw.team == "McLaren"

    def test_empty_mapping(self) -> None:
        raw = RawResult.model_validate({})
        assert raw.round is None
        assert raw.driver is None
        assert raw.points is None

    @pytest.mark.parametrize("value", ["", "  ", "abc", None, True, {"x": 1}])
    def test_bad_round_becomes_none(self, value) -> None:
        assert RawResult.model_validate({"round": value}).round is None

    @pytest.mark.parametrize("value", ["", "DNF", "nan", "inf", None])
    def test_bad_points_become_none(self, value) -> None:
        assert RawResult.model_validate({"Points": value}).points is None

    def test_bad_date_becomes_none(self) -> None:
        assert RawResult.model_validate({"race_date": "next sunday"}).event_date is None

    def test_blank_strings_become_none(self) -> None:
        raw = RawResult.model_validate({"Driver": "   ", "Team": "", "Fastest Lap": " "})
        assert raw.driver is None
        assert raw.team is None
        assert raw.fastest_lap is None

    def test_unknown_keys_ignored(self) -> None:
        raw = RawResult.model_validate({"round": 1, "grid": 5, "status": "Finished"})
        assert raw.round == 1


class TestSessionIdentifier:
    def test_frozen(self) -> None:
        sid = SessionIdentifier(season=2025, round=1, kind=SessionKind.RACE)
        with pytest.raises(Exception):
            sid.round = 2  # type: ignore[misc]

    def test_kind_from_value(self) -> None:
        sid = SessionIdentifier.model_validate({"season": 2025, "round": 1, "kind": "Sprint"})
        assert sid.kind is SessionKind.SPRINT

    def test_round_zero_rejected(self) -> None:
        with pytest.raises(Exception):
            SessionIdentifier(season=2025, round=0, kind=SessionKind.RACE)

    def test_str_is_key(self) -> None:
        sid = SessionIdentifier(season=2025, round=3, kind=SessionKind.RACE)
        assert str(sid) == "2025|3|Race"


class TestResultRecord:
    def test_defaults_and_properties(self) -> None:
        sid = SessionIdentifier(season=2025, round=1, kind=SessionKind.SPRINT)
        record = ResultRecord(
            record_id="2025|1|Sprint|Unknown Driver", session_id=sid, event_name="Round 1",
        )
        assert record.driver_name == "Unknown Driver"
        assert record.team == "Unknown Team"
        assert record.fastest_lap == "N/A"
        assert record.driver_number == "N/A"
        assert record.points == 0
        assert record.standing == 0
        assert not record.is_classified
        assert (record.season, record.round, record.kind) == (2025, 1, SessionKind.SPRINT)

    def test_negative_points_rejected(self) -> None:
        sid = SessionIdentifier(season=2025, round=1, kind=SessionKind.RACE)
        with pytest.raises(Exception):
            ResultRecord(
                record_id="2025|1|Race|Unknown Driver", session_id=sid, event_name="e", points=-1,
            )

    def test_frozen(self, make_record) -> None:
        record = make_record()
        with pytest.raises(Exception):
            record.points = 99  # type: ignore[misc]

    def test_record_id_must_match_identity(self) -> None:
        sid = SessionIdentifier(season=2025, round=1, kind=SessionKind.RACE)
        with pytest.raises(ValidationError, match="does not match"):
            ResultRecord(
                record_id="2025|2|Race|Oscar Piastri",
                session_id=sid,
                event_name="Australian Grand Prix",
                driver_name="Oscar Piastri",
            )

    def test_record_id_escapes_driver_name(self) -> None:
        sid = SessionIdentifier(season=2025, round=1, kind=SessionKind.RACE)
        record = ResultRecord(
            record_id="2025|1|Race|A\\|B", session_id=sid, event_name="e", driver_name="A|B",
        )
        assert record.driver_name == "A|B"

    def test_revalidated_copy_rejects_stale_id(self, make_record) -> None:
        record = make_record(round=1)
        data = record.model_dump()
        data["session_id"]["round"] = 2
        with pytest.raises(ValidationError):
            ResultRecord.model_validate(data)


class TestViews:
    def test_empty_event_view(self) -> None:
        view = EventView(event_name="Monaco Grand Prix")
        assert view.is_empty
        assert view.race == []
        assert view.sprint == []
        assert view.kinds == []

    def test_driver_standing(self) -> None:
        standing = DriverStanding(driver_name="Lando Norris", team="McLaren", total_points=44)
        assert standing.total_points == 44.0
        assert standing.sessions == 0
