from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .geo import Point
from .line import Color, LineKind
from .trip import Direction


@dataclass(frozen=True, slots=True)
class StoredStation:
    name: str
    position: Point


@dataclass(frozen=True, slots=True)
class StoredNode:
    """Path node; `station` indexes the network station table."""

    position: Point
    station: int | None = None


@dataclass(frozen=True, slots=True)
class Schedule:
    """(arrival, departure) offsets in seconds from a train's departure, one per station."""

    times: tuple[tuple[int, int], ...]


@dataclass(frozen=True, slots=True)
class StoredTrain:
    """A train referencing the schedule table and a [start, end) node range of its line."""

    direction: Direction
    departure_s: int
    schedule: int
    nodes: tuple[int, int]


@dataclass(frozen=True, slots=True)
class StoredLine:
    name: str
    color: Color
    kind: LineKind
    nodes: tuple[StoredNode, ...] = ()
    trains: tuple[StoredTrain, ...] = ()

    def add_to_station_kinds(self, station_kinds: list[list[LineKind]]) -> None:
        for node in self.nodes:
            if node.station is None:
                continue
            kinds = station_kinds[node.station]
            if self.kind not in kinds:
                kinds.append(self.kind)


@dataclass(frozen=True, slots=True)
class StoredAgency:
    name: str
    lines: tuple[StoredLine, ...] = ()


@dataclass(frozen=True, slots=True)
class StoredNetwork:
    """Durable, serialisable network snapshot. All references are dense indices."""

    service_date: date
    stations: tuple[StoredStation, ...] = ()
    schedules: tuple[Schedule, ...] = ()
    agencies: tuple[StoredAgency, ...] = ()

    def lines(self) -> list[StoredLine]:
        return [line for agency in self.agencies for line in agency.lines]
