from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from src.app.ports.output import (
    IGtfsRepository,
    ILineColorRepository,
    INetworkRepository,
)
from src.domain.algorithms.network_loading import load_network
from src.domain.exceptions import DecodingError
from src.domain.models.storage import StoredNetwork

from .feed_importer import FeedImporter
from .gtfs_records import (
    AgencyRecord,
    CalendarDateRecord,
    CalendarRecord,
    LocationRecord,
    R,
    RouteRecord,
    ShapeRecord,
    StopTimeRecord,
    TripRecord,
    decode_record,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NetworkImportService:
    """Batch import of one GTFS dataset into a durable network snapshot.

    Tables are read so that every defining table precedes the tables that
    reference it. Any decoding or reference error aborts the import and
    nothing is persisted.
    """

    gtfs_repository: IGtfsRepository
    color_repository: ILineColorRepository | None = None
    network_repository: INetworkRepository | None = None

    def import_network(self, *, service_date: date) -> StoredNetwork:
        colors = self.color_repository.load_colors() if self.color_repository else {}
        importer = FeedImporter(colors=colors)

        self._read(AgencyRecord, importer.import_agency)
        self._read(CalendarRecord, importer.import_calendar, optional=True)
        self._read(CalendarDateRecord, importer.import_calendar_date, optional=True)
        self._read(RouteRecord, importer.import_route)
        self._read(ShapeRecord, importer.import_shape_point, optional=True)
        self._read(LocationRecord, importer.import_location)
        importer.resolve_locations()
        self._read(TripRecord, importer.import_trip)
        self._read(StopTimeRecord, importer.import_stop_time)

        network = importer.finish(service_date)

        summary = importer.summary
        if summary is not None and summary.dropped_short_trips:
            logger.warning(
                "Dropped %d trips with fewer than two stops",
                summary.dropped_short_trips,
            )
        lines = network.lines()
        logger.info(
            "Imported network for %s: %d lines, %d trains, %d stations, %d schedules",
            service_date.isoformat(),
            len(lines),
            sum(len(line.trains) for line in lines),
            len(network.stations),
            len(network.schedules),
        )

        # A snapshot that cannot be loaded is never persisted.
        load_network(network)
        if self.network_repository is not None:
            self.network_repository.save(network)
        return network

    def _read(
        self,
        record_type: type[R],
        apply: Callable[[R], object],
        *,
        optional: bool = False,
    ) -> int:
        table = record_type.table
        if optional and not self.gtfs_repository.has_table(table):
            logger.info("Skipping missing optional table %s", table)
            return 0

        count = 0
        for line, row in self.gtfs_repository.rows(table):
            record = decode_record(record_type, row, line=line)
            try:
                apply(record)
            except DecodingError as exc:
                if exc.line is not None:
                    raise
                raise DecodingError(exc.table, line, exc.detail) from exc
            count += 1
        logger.info("Read %d rows from %s", count, table)
        return count

