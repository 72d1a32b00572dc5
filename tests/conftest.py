from __future__ import annotations

from datetime import date

import pytest

from src.domain.models import Color, Direction, LineKind, Point
from src.domain.models.storage import (
    Schedule,
    StoredAgency,
    StoredLine,
    StoredNetwork,
    StoredNode,
    StoredStation,
    StoredTrain,
)


@pytest.fixture()
def stored_network() -> StoredNetwork:
    """Three stations A-B-C: tram 12 (A-B-C), tram 13 (A-B), bus 147 (A-C)."""

    a = Point(x=13.388, y=105.05)
    b = Point(x=13.390, y=105.04)
    c = Point(x=13.396, y=105.038)

    tram_12 = StoredLine(
        name="12",
        color=LineKind.TRAM.color,
        kind=LineKind.TRAM,
        nodes=(
            StoredNode(position=a, station=0),
            StoredNode(position=Point(x=13.389, y=105.045)),
            StoredNode(position=b, station=1),
            StoredNode(position=Point(x=13.393, y=105.039)),
            StoredNode(position=c, station=2),
        ),
        trains=(
            StoredTrain(
                direction=Direction.UPSTREAM,
                departure_s=3600,
                schedule=0,
                nodes=(0, 5),
            ),
            StoredTrain(
                direction=Direction.UPSTREAM,
                departure_s=4200,
                schedule=0,
                nodes=(0, 5),
            ),
        ),
    )
    tram_13 = StoredLine(
        name="13",
        color=Color(255, 0, 0),
        kind=LineKind.TRAM,
        nodes=(StoredNode(position=a, station=0), StoredNode(position=b, station=1)),
        trains=(
            StoredTrain(
                direction=Direction.DOWNSTREAM,
                departure_s=7200,
                schedule=2,
                nodes=(0, 2),
            ),
        ),
    )
    bus_147 = StoredLine(
        name="147",
        color=LineKind.BUS.color,
        kind=LineKind.BUS,
        nodes=(StoredNode(position=a, station=0), StoredNode(position=c, station=2)),
        trains=(
            StoredTrain(
                direction=Direction.UPSTREAM,
                departure_s=3700,
                schedule=1,
                nodes=(0, 2),
            ),
        ),
    )

    return StoredNetwork(
        service_date=date(2019, 1, 7),
        stations=(
            StoredStation(name="A", position=a),
            StoredStation(name="B", position=b),
            StoredStation(name="C", position=c),
        ),
        schedules=(
            Schedule(times=((0, 0), (120, 150), (300, 300))),
            Schedule(times=((0, 0), (600, 600))),
            Schedule(times=((0, 0), (90, 90))),
        ),
        agencies=(
            StoredAgency(name="BVG", lines=(tram_12, tram_13)),
            StoredAgency(name="BVG Bus", lines=(bus_147,)),
        ),
    )
