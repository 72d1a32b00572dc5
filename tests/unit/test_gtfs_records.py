from __future__ import annotations

from datetime import date

import pytest

from src.app.services.gtfs_records import (
    CalendarDateRecord,
    CalendarRecord,
    RouteRecord,
    ShapeRecord,
    StopTimeRecord,
    TripRecord,
    decode_record,
    numeric_bool,
    parse_gtfs_date,
    parse_gtfs_time,
)
from src.domain.exceptions import DecodingError
from src.domain.models import Direction, ExceptionKind, LineKind


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(1, True), (0, False), ("1", True), (" 0 ", False)],
)
def test_numeric_bool_accepts_zero_and_one(raw: object, expected: bool) -> None:
    assert numeric_bool(raw) is expected


def test_numeric_bool_rejects_other_integers() -> None:
    with pytest.raises(ValueError) as exc_info:
        numeric_bool(2)
    assert str(exc_info.value) == "invalid value 2, expected either 0 or 1"


@pytest.mark.parametrize("raw", ["", "yes", "true", True, -1, 1.0])
def test_numeric_bool_rejects_non_numeric_values(raw: object) -> None:
    with pytest.raises(ValueError):
        numeric_bool(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("05:00:00", 18000),
        ("7:05:09", 25509),
        ("25:10:00", 90600),
        ("-0:01:00", -60),
    ],
)
def test_parse_gtfs_time(raw: str, expected: int) -> None:
    assert parse_gtfs_time(raw) == expected


@pytest.mark.parametrize("raw", ["12:60:00", "8:5:00", "noon", "12:00"])
def test_parse_gtfs_time_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_gtfs_time(raw)


def test_parse_gtfs_date() -> None:
    assert parse_gtfs_date("20190107") == date(2019, 1, 7)
    with pytest.raises(ValueError):
        parse_gtfs_date("2019-01-07")


def _calendar_row(**overrides: str) -> dict[str, str]:
    row = {
        "service_id": "mon_fri",
        "monday": "1",
        "tuesday": "1",
        "wednesday": "1",
        "thursday": "1",
        "friday": "1",
        "saturday": "0",
        "sunday": "0",
        "start_date": "20190101",
        "end_date": "20191231",
    }
    row.update(overrides)
    return row


def test_decode_calendar_record() -> None:
    record = decode_record(CalendarRecord, _calendar_row())
    assert record.service_id == "mon_fri"
    assert record.weekdays == (True, True, True, True, True, False, False)
    assert record.start_date == date(2019, 1, 1)
    assert record.end_date == date(2019, 12, 31)


def test_decode_error_reports_table_line_and_field() -> None:
    with pytest.raises(DecodingError) as exc_info:
        decode_record(CalendarRecord, _calendar_row(monday="2"), line=3)

    err = exc_info.value
    assert err.table == "calendar.txt"
    assert err.line == 3
    assert "monday" in str(err)
    assert str(err).startswith("calendar.txt:3: ")


def test_empty_flag_is_a_decoding_error() -> None:
    with pytest.raises(DecodingError):
        decode_record(CalendarRecord, _calendar_row(sunday=""))


def test_decode_calendar_date_record() -> None:
    record = decode_record(
        CalendarDateRecord,
        {"service_id": "mon_fri", "date": "20190105", "exception_type": "1"},
    )
    assert record.date == date(2019, 1, 5)
    assert record.exception_type is ExceptionKind.ADDED

    with pytest.raises(DecodingError):
        decode_record(
            CalendarDateRecord,
            {"service_id": "mon_fri", "date": "20190105", "exception_type": "3"},
        )


def test_decode_trip_record_direction_and_optional_shape() -> None:
    record = decode_record(
        TripRecord,
        {
            "trip_id": "u4_0",
            "route_id": "u4",
            "service_id": "mon_fri",
            "shape_id": "",
            "direction_id": "1",
        },
    )
    assert record.direction_id is Direction.DOWNSTREAM
    assert record.shape_id is None


def test_trip_direction_must_be_a_flag() -> None:
    with pytest.raises(DecodingError):
        decode_record(
            TripRecord,
            {
                "trip_id": "u4_0",
                "route_id": "u4",
                "service_id": "mon_fri",
                "direction_id": "2",
            },
        )


def test_decode_route_record_kind_and_name() -> None:
    record = decode_record(
        RouteRecord,
        {
            "route_id": "s1",
            "agency_id": "bvg",
            "route_short_name": "",
            "route_long_name": "S1 Wannsee",
            "route_type": "109",
        },
    )
    assert record.route_type is LineKind.SUBURBAN_RAILWAY
    assert record.name == "S1 Wannsee"


@pytest.mark.parametrize(
    "row",
    [
        {"route_id": "x", "route_short_name": "X", "route_type": "1700"},
        {"route_id": "x", "route_short_name": "X", "route_type": "bus"},
        {"route_id": "x", "route_short_name": "", "route_type": "3"},
    ],
)
def test_invalid_route_records(row: dict[str, str]) -> None:
    with pytest.raises(DecodingError):
        decode_record(RouteRecord, row)


def test_stop_time_falls_back_to_the_other_time() -> None:
    record = decode_record(
        StopTimeRecord,
        {
            "trip_id": "u4_0",
            "stop_id": "nollendorfplatz",
            "arrival_time": "",
            "departure_time": "24:10:00",
        },
    )
    assert record.arrival_s == 87000
    assert record.departure_s == 87000


@pytest.mark.parametrize(
    ("arrival", "departure"),
    [("", ""), ("8:5:00", "08:05:00")],
)
def test_invalid_stop_times(arrival: str, departure: str) -> None:
    with pytest.raises(DecodingError):
        decode_record(
            StopTimeRecord,
            {
                "trip_id": "u4_0",
                "stop_id": "nollendorfplatz",
                "arrival_time": arrival,
                "departure_time": departure,
            },
        )


def test_shape_record_rejects_out_of_range_latitude() -> None:
    with pytest.raises(DecodingError):
        decode_record(
            ShapeRecord,
            {"shape_id": "1", "shape_pt_lat": "91.0", "shape_pt_lon": "13.0"},
        )


def test_extra_columns_are_ignored() -> None:
    record = decode_record(
        ShapeRecord,
        {
            "shape_id": "1",
            "shape_pt_lat": "52.526",
            "shape_pt_lon": "13.369",
            "shape_pt_sequence": "1",
            "shape_dist_traveled": "",
        },
    )
    assert record.shape_pt_lat == 52.526


def test_stop_time_departure_falls_back_to_arrival() -> None:
    record = decode_record(
        StopTimeRecord,
        {
            "trip_id": "u4_0",
            "stop_id": "innsbrucker_platz",
            "arrival_time": "05:04:00",
            "departure_time": "",
        },
    )
    assert record.departure_s == 18240
    assert record.arrival_s == 18240
