from __future__ import annotations

import re
from datetime import date
from typing import Annotated, Any, ClassVar, Mapping, TypeVar, cast

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from src.domain.exceptions import DecodingError
from src.domain.models import Direction, ExceptionKind, LineKind

_TIME_RE = re.compile(r"^(-)?(\d+):([0-5]\d):([0-5]\d)$")


def numeric_bool(value: Any) -> bool:
    """GTFS 0/1 flag. Any other value, including an empty one, is rejected."""

    raw = value
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1):
        return value == 1
    raise ValueError(f"invalid value {raw!r}, expected either 0 or 1")


def parse_gtfs_time(value: Any) -> int:
    """Parse H:MM:SS (hours may exceed 23) into seconds since service day start."""

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _TIME_RE.match(str(value).strip())
    if match is None:
        raise ValueError(f"invalid time {value!r}, expected H:MM:SS")
    sign, hh, mm, ss = match.groups()
    seconds = int(hh) * 3600 + int(mm) * 60 + int(ss)
    return -seconds if sign else seconds


def parse_gtfs_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    raw = str(value).strip()
    if len(raw) != 8 or not raw.isdigit():
        raise ValueError(f"invalid date {value!r}, expected YYYYMMDD")
    return date(int(raw[:4]), int(raw[4:6]), int(raw[6:8]))


def _line_kind(value: Any) -> LineKind:
    if isinstance(value, LineKind):
        return value
    return LineKind.from_route_type(int(str(value).strip()))


def _direction(value: Any) -> Direction:
    if isinstance(value, Direction):
        return value
    return Direction.from_flag(numeric_bool(value))


def _exception_kind(value: Any) -> ExceptionKind:
    if isinstance(value, int):
        return ExceptionKind(value)
    return ExceptionKind(int(str(value).strip()))


NumericBool = Annotated[bool, BeforeValidator(numeric_bool)]
GtfsTime = Annotated[int, BeforeValidator(parse_gtfs_time)]
GtfsDate = Annotated[date, BeforeValidator(parse_gtfs_date)]
RouteKind = Annotated[LineKind, BeforeValidator(_line_kind)]
DirectionFlag = Annotated[Direction, BeforeValidator(_direction)]
ExceptionType = Annotated[ExceptionKind, BeforeValidator(_exception_kind)]


class GtfsRecord(BaseModel):
    """One decoded row. Empty CSV cells count as missing fields."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    table: ClassVar[str]

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_cells(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {
            key.strip(): value
            for key, value in data.items()
            if key is not None and not (isinstance(value, str) and not value.strip())
        }


class AgencyRecord(GtfsRecord):
    table: ClassVar[str] = "agency.txt"

    agency_id: str = ""
    agency_name: str


class CalendarRecord(GtfsRecord):
    table: ClassVar[str] = "calendar.txt"

    service_id: str
    monday: NumericBool
    tuesday: NumericBool
    wednesday: NumericBool
    thursday: NumericBool
    friday: NumericBool
    saturday: NumericBool
    sunday: NumericBool
    start_date: GtfsDate
    end_date: GtfsDate

    @property
    def weekdays(self) -> tuple[bool, bool, bool, bool, bool, bool, bool]:
        return (
            self.monday,
            self.tuesday,
            self.wednesday,
            self.thursday,
            self.friday,
            self.saturday,
            self.sunday,
        )


class CalendarDateRecord(GtfsRecord):
    table: ClassVar[str] = "calendar_dates.txt"

    service_id: str
    date: GtfsDate
    exception_type: ExceptionType


class RouteRecord(GtfsRecord):
    table: ClassVar[str] = "routes.txt"

    route_id: str
    agency_id: str | None = None
    route_short_name: str | None = None
    route_long_name: str | None = None
    route_type: RouteKind

    @model_validator(mode="after")
    def _require_name(self) -> "RouteRecord":
        if not self.name:
            raise ValueError("route needs route_short_name or route_long_name")
        return self

    @property
    def name(self) -> str:
        return self.route_short_name or self.route_long_name or ""


class ShapeRecord(GtfsRecord):
    table: ClassVar[str] = "shapes.txt"

    shape_id: str
    shape_pt_lat: float = Field(..., ge=-90.0, le=90.0)
    shape_pt_lon: float = Field(..., ge=-180.0, le=180.0)


class LocationRecord(GtfsRecord):
    table: ClassVar[str] = "stops.txt"

    stop_id: str
    stop_name: str = ""
    stop_lat: float = Field(..., ge=-90.0, le=90.0)
    stop_lon: float = Field(..., ge=-180.0, le=180.0)
    parent_station: str | None = None


class TripRecord(GtfsRecord):
    table: ClassVar[str] = "trips.txt"

    trip_id: str
    route_id: str
    service_id: str
    shape_id: str | None = None
    direction_id: DirectionFlag


class StopTimeRecord(GtfsRecord):
    table: ClassVar[str] = "stop_times.txt"

    trip_id: str
    stop_id: str
    arrival_time: GtfsTime | None = None
    departure_time: GtfsTime | None = None

    @model_validator(mode="after")
    def _require_a_time(self) -> "StopTimeRecord":
        if self.arrival_time is None and self.departure_time is None:
            raise ValueError("stop time needs arrival_time or departure_time")
        return self

    @property
    def arrival_s(self) -> int:
        return self.arrival_time if self.arrival_time is not None else self.departure_s

    @property
    def departure_s(self) -> int:
        if self.departure_time is not None:
            return self.departure_time
        # The model validator guarantees at least one of the two times.
        return cast(int, self.arrival_time)


R = TypeVar("R", bound=GtfsRecord)


def decode_record(
    record_type: type[R], row: Mapping[str, Any], *, line: int | None = None
) -> R:
    try:
        return record_type.model_validate(row)
    except ValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'row'}: {err['msg']}"
            for err in exc.errors()
        )
        raise DecodingError(record_type.table, line, detail) from exc
