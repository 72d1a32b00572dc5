from __future__ import annotations

from src.domain.models.geo import Point

# Stretches latitude so distances look right at mid-European latitudes
# (cos 60° = 0.5) without a per-feed reference point.
LATITUDE_SCALE = 2.0


def project(lat: float, lon: float) -> Point:
    """Map WGS84 latitude/longitude onto the planar simulation frame."""

    return Point(x=float(lon), y=LATITUDE_SCALE * float(lat))
