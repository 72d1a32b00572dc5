from __future__ import annotations

from dataclasses import dataclass, field

from .geo import Point


@dataclass(slots=True)
class Shape:
    """Polyline of projected points, kept in source order."""

    waypoints: list[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.waypoints)

    def append(self, point: Point) -> None:
        self.waypoints.append(point)

    def points(self, count: int | None = None) -> tuple[Point, ...]:
        """Return `count` points, repeating the last point when the shape is shorter."""

        if count is None:
            return tuple(self.waypoints)
        if count < 0:
            raise ValueError(f"Invalid point count: {count}")
        if not self.waypoints:
            raise ValueError("Cannot pad an empty shape")
        padding = max(0, count - len(self.waypoints))
        return tuple(self.waypoints[:count]) + (self.waypoints[-1],) * padding
