from __future__ import annotations

from dataclasses import dataclass

from .geo import Point


@dataclass(slots=True)
class Location:
    """A stop, platform or station from stops.txt.

    `station` points at the root of the parent_station chain and is set once
    every location of the feed is known. A location without a parent is its
    own station.
    """

    id: str
    name: str
    position: Point
    parent_id: str | None = None
    station: Location | None = None

    def resolved_station(self) -> Location:
        return self.station if self.station is not None else self
