from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .calendar import Service
from .location import Location
from .shape import Shape


class Direction(str, Enum):
    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"

    @staticmethod
    def from_flag(flag: bool) -> "Direction":
        # GTFS direction_id: 0 = one direction, 1 = the opposite one.
        return Direction.DOWNSTREAM if flag else Direction.UPSTREAM


@dataclass(frozen=True, slots=True)
class StopVisit:
    """One stop of a trip. Times are seconds since service day start (may exceed 24h)."""

    location: Location
    arrival_s: int
    departure_s: int


@dataclass(frozen=True, slots=True)
class ScheduledTrip:
    """A realised trip; `schedule` holds (arrival, departure) offsets from `departure_s`."""

    direction: Direction
    departure_s: int
    schedule: tuple[tuple[int, int], ...]


@dataclass(slots=True)
class TripBuffer:
    line: int
    service: Service
    shape_id: str | None
    direction: Direction
    stops: list[StopVisit] = field(default_factory=list)

    def add_stop(self, location: Location, arrival_s: int, departure_s: int) -> None:
        self.stops.append(
            StopVisit(location=location, arrival_s=arrival_s, departure_s=departure_s)
        )

    @property
    def span_s(self) -> int:
        if len(self.stops) < 2:
            return 0
        return self.stops[-1].arrival_s - self.stops[0].arrival_s

    def stations(self) -> tuple[Location, ...]:
        return tuple(stop.location.resolved_station() for stop in self.stops)

    def finish(self) -> ScheduledTrip:
        if not self.stops:
            raise ValueError("Cannot finish a trip without stops")
        start = self.stops[0].departure_s
        return ScheduledTrip(
            direction=self.direction,
            departure_s=start,
            schedule=tuple(
                (stop.arrival_s - start, stop.departure_s - start)
                for stop in self.stops
            ),
        )


@dataclass(frozen=True, slots=True)
class Route:
    """A path variant of a line shared by all trips with the same shape and stations."""

    shape: Shape | None
    stops: tuple[StopVisit, ...]
    trips: tuple[ScheduledTrip, ...] = ()
