from __future__ import annotations

from typing import Mapping, Sequence

from src.domain.models.geo import Point
from src.domain.models.storage import StoredNode
from src.domain.models.trip import Route


def snap_indices(waypoints: Sequence[Point], targets: Sequence[Point]) -> list[int]:
    """Snap each target to the nearest waypoint at or after the previous snap.

    The search window for target k leaves one waypoint for every later
    target, so `waypoints` must hold at least as many points as `targets`.
    """

    if len(waypoints) < len(targets):
        raise ValueError("Not enough waypoints to snap every target")

    out: list[int] = []
    cursor = 0
    for k, target in enumerate(targets):
        upper = len(waypoints) - (len(targets) - k) + 1
        best_i = cursor
        best_d2 = float("inf")
        for i in range(cursor, upper):
            d2 = waypoints[i].distance2(target)
            if d2 < best_d2:
                best_d2 = d2
                best_i = i
        out.append(best_i)
        cursor = best_i + 1
    return out


def build_route_path(route: Route, station_ids: Mapping[str, int]) -> list[StoredNode]:
    """Turn a route variant into path nodes: shape points between snapped station nodes."""

    def station_node(index: int) -> StoredNode:
        location = route.stops[index].location
        return StoredNode(
            position=location.position,
            station=station_ids[location.resolved_station().id],
        )

    if route.shape is None or not len(route.shape):
        return [station_node(i) for i in range(len(route.stops))]

    waypoints = route.shape.points(max(len(route.shape), len(route.stops)))
    snaps = snap_indices(waypoints, [stop.location.position for stop in route.stops])

    nodes: list[StoredNode] = []
    previous: int | None = None
    for i, snapped in enumerate(snaps):
        if previous is not None:
            nodes.extend(StoredNode(position=p) for p in waypoints[previous + 1 : snapped])
        nodes.append(station_node(i))
        previous = snapped
    return nodes
