from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from src.domain.algorithms.network_freezing import NetworkFreezer
from src.domain.algorithms.projection import project
from src.domain.exceptions import DecodingError, UnresolvedReferenceError
from src.domain.models import (
    AssembledLine,
    Color,
    IncompleteLine,
    LineKind,
    Location,
    Route,
    Service,
    Shape,
    TripBuffer,
    begin_line,
)
from src.domain.models.storage import StoredNetwork

from .gtfs_records import (
    AgencyRecord,
    CalendarDateRecord,
    CalendarRecord,
    LocationRecord,
    RouteRecord,
    ShapeRecord,
    StopTimeRecord,
    TripRecord,
)


@dataclass(frozen=True, slots=True)
class ImportSummary:
    trips: int
    kept_trips: int
    dropped_short_trips: int


@dataclass(slots=True)
class FeedImporter:
    """Registries and trip buffers for a single feed import.

    Each `import_*` method applies one decoded record. Defining records
    (agencies, services, routes, shapes, stops) must be applied before the
    trips and stop times that reference them; a reference to an unknown id
    raises UnresolvedReferenceError. Stop times are appended in the order
    they are applied.
    """

    colors: Mapping[str, Color] = field(default_factory=dict)

    agencies: dict[str, str] = field(default_factory=dict)
    services: dict[str, Service] = field(default_factory=dict)
    shapes: dict[str, Shape] = field(default_factory=dict)
    locations: dict[str, Location] = field(default_factory=dict)
    lines: list[IncompleteLine] = field(default_factory=list)
    line_ids: dict[tuple[str, str, LineKind], int] = field(default_factory=dict)
    route_lines: dict[str, int] = field(default_factory=dict)
    trips: dict[str, TripBuffer] = field(default_factory=dict)

    summary: ImportSummary | None = None

    def import_agency(self, record: AgencyRecord) -> None:
        if record.agency_id in self.agencies:
            raise DecodingError(
                record.table, None, f"duplicate agency_id {record.agency_id!r}"
            )
        self.agencies[record.agency_id] = record.agency_name

    def import_calendar(self, record: CalendarRecord) -> None:
        if record.service_id in self.services:
            raise DecodingError(
                record.table, None, f"duplicate service_id {record.service_id!r}"
            )
        self.services[record.service_id] = Service(
            start=record.start_date, end=record.end_date, weekdays=record.weekdays
        )

    def import_calendar_date(self, record: CalendarDateRecord) -> None:
        service = self.services.get(record.service_id)
        if service is None:
            service = Service.exceptions_only(record.date)
            self.services[record.service_id] = service
        service.add_exception_date(record.date, record.exception_type)

    def import_route(self, record: RouteRecord) -> int:
        if record.route_id in self.route_lines:
            raise DecodingError(
                record.table, None, f"duplicate route_id {record.route_id!r}"
            )
        agency_id = self._resolve_agency(record)
        line = begin_line(agency_id, record.name, record.route_type)

        index = self.line_ids.get(line.key)
        if index is None:
            line.add_color_when_applicable(self.colors)
            index = len(self.lines)
            self.lines.append(line)
            self.line_ids[line.key] = index

        self.route_lines[record.route_id] = index
        return index

    def _resolve_agency(self, record: RouteRecord) -> str:
        if record.agency_id is not None and record.agency_id in self.agencies:
            return record.agency_id
        # agency_id may be omitted when the feed has exactly one agency.
        if record.agency_id is None and len(self.agencies) == 1:
            return next(iter(self.agencies))
        raise UnresolvedReferenceError(record.table, "agency", record.agency_id)

    def import_shape_point(self, record: ShapeRecord) -> None:
        self.shapes.setdefault(record.shape_id, Shape()).append(
            project(record.shape_pt_lat, record.shape_pt_lon)
        )

    def import_location(self, record: LocationRecord) -> None:
        if record.stop_id in self.locations:
            raise DecodingError(
                record.table, None, f"duplicate stop_id {record.stop_id!r}"
            )
        self.locations[record.stop_id] = Location(
            id=record.stop_id,
            name=record.stop_name or record.stop_id,
            position=project(record.stop_lat, record.stop_lon),
            parent_id=record.parent_station,
        )

    def resolve_locations(self) -> None:
        """Link every location to the root of its parent_station chain."""

        for location in self.locations.values():
            seen = {location.id}
            current = location
            while current.parent_id is not None:
                parent = self.locations.get(current.parent_id)
                if parent is None:
                    raise UnresolvedReferenceError(
                        LocationRecord.table, "parent station", current.parent_id
                    )
                if parent.id in seen:
                    raise DecodingError(
                        LocationRecord.table,
                        None,
                        f"parent_station cycle through {parent.id!r}",
                    )
                seen.add(parent.id)
                current = parent
            location.station = current if current is not location else None

    def import_trip(self, record: TripRecord) -> TripBuffer:
        if record.trip_id in self.trips:
            raise DecodingError(
                record.table, None, f"duplicate trip_id {record.trip_id!r}"
            )
        line = self.route_lines.get(record.route_id)
        if line is None:
            raise UnresolvedReferenceError(record.table, "route", record.route_id)
        service = self.services.get(record.service_id)
        if service is None:
            raise UnresolvedReferenceError(record.table, "service", record.service_id)
        if record.shape_id is not None and record.shape_id not in self.shapes:
            raise UnresolvedReferenceError(record.table, "shape", record.shape_id)

        buffer = TripBuffer(
            line=line,
            service=service,
            shape_id=record.shape_id,
            direction=record.direction_id,
        )
        self.trips[record.trip_id] = buffer
        return buffer

    def import_stop_time(self, record: StopTimeRecord) -> None:
        buffer = self.trips.get(record.trip_id)
        if buffer is None:
            raise UnresolvedReferenceError(record.table, "trip", record.trip_id)
        location = self.locations.get(record.stop_id)
        if location is None:
            raise UnresolvedReferenceError(record.table, "stop", record.stop_id)
        buffer.add_stop(location, record.arrival_s, record.departure_s)

    def assemble(self, service_date: date) -> dict[str, list[AssembledLine]]:
        """Group the trips running on `service_date` into lines and route variants."""

        variants: dict[int, dict[tuple, list[TripBuffer]]] = {}
        kept = short = 0
        for buffer in self.trips.values():
            if not buffer.service.available_at(service_date):
                continue
            if len(buffer.stops) < 2:
                short += 1
                continue
            kept += 1
            key = (buffer.shape_id, tuple(s.id for s in buffer.stations()))
            variants.setdefault(buffer.line, {}).setdefault(key, []).append(buffer)

        self.summary = ImportSummary(
            trips=len(self.trips), kept_trips=kept, dropped_short_trips=short
        )

        lines: dict[str, list[AssembledLine]] = {}
        for index, line in enumerate(self.lines):
            groups = variants.get(index)
            if not groups:
                continue
            routes = [
                Route(
                    shape=self.shapes.get(shape_id) if shape_id is not None else None,
                    stops=tuple(buffers[0].stops),
                    trips=tuple(buffer.finish() for buffer in buffers),
                )
                for (shape_id, _), buffers in groups.items()
            ]
            line.finish(routes, lines)
        return lines

    def finish(self, service_date: date) -> StoredNetwork:
        lines = self.assemble(service_date)
        freezer = NetworkFreezer(service_date=service_date)
        for agency_id, name in self.agencies.items():
            freezer.add_agency(name, lines.get(agency_id, ()))
        return freezer.network()
