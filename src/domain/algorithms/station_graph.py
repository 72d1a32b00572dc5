from __future__ import annotations

import networkx as nx

from src.domain.models.simulation import Network


def build_station_graph(network: Network) -> nx.DiGraph:
    """Station connectivity graph of a live network.

    Nodes are station indices (attributes: name, x, y, kinds). An edge joins
    two consecutive stops of any train and carries the serving line names and
    the shortest scheduled ride time in seconds.
    """

    g = nx.DiGraph()
    for station in network.stations:
        g.add_node(
            station.index,
            name=station.name,
            x=station.position.x,
            y=station.position.y,
            kinds=[kind.value for kind in network.station_kinds[station.index]],
        )

    for line in network.lines():
        for train in line.trains:
            for a, b in zip(train.stops, train.stops[1:]):
                u = train.path[a.node].station
                v = train.path[b.node].station
                if u is None or v is None or u.index == v.index:
                    continue
                ride_s = b.arrival_s - a.departure_s
                data = g.get_edge_data(u.index, v.index)
                if data is None:
                    g.add_edge(u.index, v.index, lines={line.name}, ride_s=ride_s)
                    continue
                data["lines"].add(line.name)
                data["ride_s"] = min(data["ride_s"], ride_s)

    return g
