from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_network
from src.adapters.api.schemas.network import (
    LineSchema,
    NetworkSummarySchema,
    StationSchema,
)
from src.domain.models.simulation import Network

router = APIRouter(prefix="/network", tags=["network"])


@router.get("", response_model=NetworkSummarySchema)
def get_summary(network: Network = Depends(get_network)) -> NetworkSummarySchema:
    lines = network.lines()
    return NetworkSummarySchema(
        service_date=network.service_date.isoformat(),
        agencies=len(network.agencies),
        lines=len(lines),
        trains=sum(len(line.trains) for line in lines),
        stations=len(network.stations),
    )


@router.get("/lines", response_model=list[LineSchema])
def list_lines(network: Network = Depends(get_network)) -> list[LineSchema]:
    return [
        LineSchema(
            agency=agency.name,
            name=line.name,
            kind=line.kind.value,
            color=line.color.hex,
            node_count=len(line.nodes),
            train_count=len(line.trains),
        )
        for agency in network.agencies
        for line in agency.lines
    ]


@router.get("/stations", response_model=list[StationSchema])
def list_stations(network: Network = Depends(get_network)) -> list[StationSchema]:
    return [
        StationSchema(
            index=station.index,
            name=station.name,
            x=station.position.x,
            y=station.position.y,
            kinds=[kind.value for kind in network.station_kinds[station.index]],
        )
        for station in network.stations
    ]
