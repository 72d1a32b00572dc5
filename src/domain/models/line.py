from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from .trip import Route


@dataclass(frozen=True, slots=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not (0 <= channel <= 255):
                raise ValueError(f"Invalid color channel: {channel}")

    @staticmethod
    def from_hex(raw: str) -> "Color":
        value = raw.strip().lstrip("#")
        if len(value) != 6:
            raise ValueError(f"Invalid hex color: {raw!r}")
        return Color(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))

    @property
    def hex(self) -> str:
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"


class LineKind(str, Enum):
    RAILWAY = "railway"
    SUBURBAN_RAILWAY = "suburban_railway"
    URBAN_RAILWAY = "urban_railway"
    BUS = "bus"
    TRAM = "tram"
    WATER_TRANSPORT = "water_transport"
    AERIAL_LIFT = "aerial_lift"
    FUNICULAR = "funicular"

    @property
    def is_rail(self) -> bool:
        return self in _RAIL_KINDS

    @property
    def color(self) -> Color:
        return _DEFAULT_COLORS[self]

    @staticmethod
    def from_route_type(code: int) -> "LineKind":
        """Map a GTFS route_type (basic or extended) onto a line kind."""

        if code in _BASIC_ROUTE_TYPES:
            return _BASIC_ROUTE_TYPES[code]
        if code == 109 or 300 <= code < 400:
            return LineKind.SUBURBAN_RAILWAY
        for lower, upper, kind in _EXTENDED_ROUTE_TYPES:
            if lower <= code < upper:
                return kind
        raise ValueError(f"Unsupported route_type: {code}")


_RAIL_KINDS = frozenset(
    {LineKind.RAILWAY, LineKind.SUBURBAN_RAILWAY, LineKind.URBAN_RAILWAY}
)

_DEFAULT_COLORS = {
    LineKind.RAILWAY: Color(227, 0, 15),
    LineKind.SUBURBAN_RAILWAY: Color(0, 141, 79),
    LineKind.URBAN_RAILWAY: Color(17, 93, 145),
    LineKind.BUS: Color(153, 51, 153),
    LineKind.TRAM: Color(204, 10, 34),
    LineKind.WATER_TRANSPORT: Color(0, 128, 186),
    LineKind.AERIAL_LIFT: Color(96, 96, 96),
    LineKind.FUNICULAR: Color(128, 80, 32),
}

_BASIC_ROUTE_TYPES = {
    0: LineKind.TRAM,
    1: LineKind.URBAN_RAILWAY,
    2: LineKind.RAILWAY,
    3: LineKind.BUS,
    4: LineKind.WATER_TRANSPORT,
    5: LineKind.TRAM,
    6: LineKind.AERIAL_LIFT,
    7: LineKind.FUNICULAR,
    11: LineKind.BUS,
    12: LineKind.URBAN_RAILWAY,
}

# Extended (HVT) route types, half-open ranges.
_EXTENDED_ROUTE_TYPES = (
    (100, 200, LineKind.RAILWAY),
    (200, 300, LineKind.BUS),
    (400, 700, LineKind.URBAN_RAILWAY),
    (700, 900, LineKind.BUS),
    (900, 1000, LineKind.TRAM),
    (1000, 1100, LineKind.WATER_TRANSPORT),
    (1200, 1300, LineKind.WATER_TRANSPORT),
    (1300, 1400, LineKind.AERIAL_LIFT),
    (1400, 1500, LineKind.FUNICULAR),
)


@dataclass(frozen=True, slots=True)
class AssembledLine:
    """A logical line with its route variants, ready to be frozen."""

    name: str
    color: Color
    kind: LineKind
    routes: tuple["Route", ...] = ()


@dataclass(slots=True)
class IncompleteLine:
    """Accumulator for one (agency, name, kind) line while routes.txt is read."""

    agency_id: str
    name: str
    kind: LineKind
    color: Color | None = None

    @property
    def key(self) -> tuple[str, str, LineKind]:
        return (self.agency_id, self.name, self.kind)

    def add_color_when_applicable(self, colors: Mapping[str, Color]) -> None:
        # Only rail systems carry brand colours; the rest use kind defaults.
        if self.kind.is_rail:
            self.color = colors.get(self.name)

    def finish(
        self, routes: list["Route"], lines: dict[str, list[AssembledLine]]
    ) -> AssembledLine:
        line = AssembledLine(
            name=self.name,
            color=self.color or self.kind.color,
            kind=self.kind,
            routes=tuple(routes),
        )
        lines.setdefault(self.agency_id, []).append(line)
        return line


def begin_line(agency_id: str, name: str, kind: LineKind) -> IncompleteLine:
    return IncompleteLine(agency_id=agency_id, name=name, kind=kind)
