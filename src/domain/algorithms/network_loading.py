from __future__ import annotations

from typing import Sequence

from src.domain.exceptions import NetworkConsistencyError
from src.domain.models.line import LineKind
from src.domain.models.simulation import (
    Agency,
    Line,
    Network,
    Node,
    Station,
    Train,
    TrainStop,
)
from src.domain.models.storage import (
    Schedule,
    StoredLine,
    StoredNetwork,
    StoredNode,
    StoredTrain,
)


def load_network(stored: StoredNetwork) -> Network:
    """Resolve a durable network into the live representation.

    The transform is total for networks written by the importer; any
    dangling index raises NetworkConsistencyError.
    """

    stations = tuple(
        Station(index=i, name=s.name, position=s.position)
        for i, s in enumerate(stored.stations)
    )
    agencies = tuple(
        Agency(
            name=agency.name,
            lines=tuple(
                load_line(line, stations, stored.schedules) for line in agency.lines
            ),
        )
        for agency in stored.agencies
    )
    return Network(
        service_date=stored.service_date,
        stations=stations,
        agencies=agencies,
        station_kinds=tuple(tuple(kinds) for kinds in station_kinds(stored)),
    )


def station_kinds(stored: StoredNetwork) -> list[list[LineKind]]:
    """Per station, the kinds of the lines stopping there (each kind once)."""

    kinds: list[list[LineKind]] = [[] for _ in stored.stations]
    for line in stored.lines():
        for node in line.nodes:
            _check_station(node, len(kinds), line)
        line.add_to_station_kinds(kinds)
    return kinds


def load_line(
    line: StoredLine, stations: Sequence[Station], schedules: Sequence[Schedule]
) -> Line:
    nodes = tuple(_load_node(node, stations, line) for node in line.nodes)
    trains = tuple(
        _load_train(train, line, nodes, schedules) for train in line.trains
    )
    return Line(
        name=line.name, color=line.color, kind=line.kind, nodes=nodes, trains=trains
    )


def _check_station(node: StoredNode, station_count: int, line: StoredLine) -> None:
    if node.station is not None and not (0 <= node.station < station_count):
        raise NetworkConsistencyError(
            f"Line {line.name!r} references missing station {node.station}"
        )


def _load_node(node: StoredNode, stations: Sequence[Station], line: StoredLine) -> Node:
    _check_station(node, len(stations), line)
    station = stations[node.station] if node.station is not None else None
    return Node(position=node.position, station=station)


def _load_train(
    train: StoredTrain,
    line: StoredLine,
    nodes: tuple[Node, ...],
    schedules: Sequence[Schedule],
) -> Train:
    if not (0 <= train.schedule < len(schedules)):
        raise NetworkConsistencyError(
            f"Line {line.name!r} references missing schedule {train.schedule}"
        )
    start, end = train.nodes
    if not (0 <= start < end <= len(nodes)):
        raise NetworkConsistencyError(
            f"Line {line.name!r} has train node range {train.nodes} "
            f"outside of {len(nodes)} nodes"
        )

    path = nodes[start:end]
    station_positions = [i for i, node in enumerate(path) if node.station is not None]
    times = schedules[train.schedule].times
    if len(station_positions) != len(times):
        raise NetworkConsistencyError(
            f"Line {line.name!r}: schedule {train.schedule} has {len(times)} stops "
            f"but the train path has {len(station_positions)} stations"
        )

    stops = tuple(
        TrainStop(
            node=i,
            arrival_s=train.departure_s + arrival,
            departure_s=train.departure_s + departure,
        )
        for i, (arrival, departure) in zip(station_positions, times)
    )
    return Train(
        kind=line.kind,
        direction=train.direction,
        departure_s=train.departure_s,
        path=path,
        stops=stops,
    )
