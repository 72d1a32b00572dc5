from .gtfs_repository import IGtfsRepository
from .line_color_repository import ILineColorRepository
from .network_repository import INetworkRepository

__all__ = [
    "IGtfsRepository",
    "ILineColorRepository",
    "INetworkRepository",
]
