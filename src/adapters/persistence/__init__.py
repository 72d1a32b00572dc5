from .local_gtfs_repository import LocalGtfsRepository
from .local_line_color_repository import LocalLineColorRepository
from .local_network_repository import LocalNetworkRepository
from .s3_network_repository import S3NetworkRepository

__all__ = [
    "LocalGtfsRepository",
    "LocalLineColorRepository",
    "LocalNetworkRepository",
    "S3NetworkRepository",
]
