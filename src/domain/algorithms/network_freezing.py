from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from src.domain.models.line import AssembledLine
from src.domain.models.location import Location
from src.domain.models.storage import (
    Schedule,
    StoredAgency,
    StoredLine,
    StoredNetwork,
    StoredNode,
    StoredStation,
    StoredTrain,
)

from .paths import build_route_path


@dataclass(slots=True)
class NetworkFreezer:
    """Builds the durable network: dense station and schedule tables plus lines.

    Stations are numbered in the order lines visit them; identical schedules
    share one table entry.
    """

    service_date: date
    station_ids: dict[str, int] = field(default_factory=dict)
    stations: list[StoredStation] = field(default_factory=list)
    schedule_ids: dict[tuple[tuple[int, int], ...], int] = field(default_factory=dict)
    schedules: list[Schedule] = field(default_factory=list)
    agencies: list[StoredAgency] = field(default_factory=list)

    def station_id(self, location: Location) -> int:
        station = location.resolved_station()
        index = self.station_ids.get(station.id)
        if index is None:
            index = len(self.stations)
            self.station_ids[station.id] = index
            self.stations.append(
                StoredStation(name=station.name, position=station.position)
            )
        return index

    def schedule_id(self, times: tuple[tuple[int, int], ...]) -> int:
        index = self.schedule_ids.get(times)
        if index is None:
            index = len(self.schedules)
            self.schedule_ids[times] = index
            self.schedules.append(Schedule(times=times))
        return index

    def add_agency(self, name: str, lines: Iterable[AssembledLine]) -> None:
        frozen = tuple(self.freeze_line(line) for line in lines)
        if frozen:
            self.agencies.append(StoredAgency(name=name, lines=frozen))

    def freeze_line(self, line: AssembledLine) -> StoredLine:
        nodes: list[StoredNode] = []
        trains: list[StoredTrain] = []
        for route in line.routes:
            for stop in route.stops:
                self.station_id(stop.location)

            start = len(nodes)
            nodes.extend(build_route_path(route, self.station_ids))
            end = len(nodes)

            for trip in route.trips:
                trains.append(
                    StoredTrain(
                        direction=trip.direction,
                        departure_s=trip.departure_s,
                        schedule=self.schedule_id(trip.schedule),
                        nodes=(start, end),
                    )
                )

        return StoredLine(
            name=line.name,
            color=line.color,
            kind=line.kind,
            nodes=tuple(nodes),
            trains=tuple(trains),
        )

    def network(self) -> StoredNetwork:
        return StoredNetwork(
            service_date=self.service_date,
            stations=tuple(self.stations),
            schedules=tuple(self.schedules),
            agencies=tuple(self.agencies),
        )
