from __future__ import annotations

from pydantic import BaseModel


class LineSchema(BaseModel):
    agency: str
    name: str
    kind: str
    color: str  # hex without '#'
    node_count: int
    train_count: int


class StationSchema(BaseModel):
    index: int
    name: str
    x: float
    y: float
    kinds: list[str] = []


class NetworkSummarySchema(BaseModel):
    service_date: str
    agencies: int
    lines: int
    trains: int
    stations: int
