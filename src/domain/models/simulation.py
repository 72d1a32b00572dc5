from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .geo import Point
from .line import Color, LineKind
from .trip import Direction


@dataclass(frozen=True, slots=True)
class Station:
    index: int
    name: str
    position: Point


@dataclass(frozen=True, slots=True)
class Node:
    position: Point
    station: Station | None = None


@dataclass(frozen=True, slots=True)
class TrainStop:
    """Absolute stop times; `node` indexes the owning train's path."""

    node: int
    arrival_s: int
    departure_s: int


@dataclass(frozen=True, slots=True)
class Train:
    kind: LineKind
    direction: Direction
    departure_s: int
    path: tuple[Node, ...]
    stops: tuple[TrainStop, ...]

    @property
    def arrival_s(self) -> int:
        return self.stops[-1].arrival_s if self.stops else self.departure_s


@dataclass(frozen=True, slots=True)
class Line:
    name: str
    color: Color
    kind: LineKind
    nodes: tuple[Node, ...]
    trains: tuple[Train, ...]


@dataclass(frozen=True, slots=True)
class Agency:
    name: str
    lines: tuple[Line, ...]


@dataclass(frozen=True, slots=True)
class Network:
    """Live network handed to the simulation engine."""

    service_date: date
    stations: tuple[Station, ...]
    agencies: tuple[Agency, ...]
    station_kinds: tuple[tuple[LineKind, ...], ...]

    def lines(self) -> list[Line]:
        return [line for agency in self.agencies for line in agency.lines]
