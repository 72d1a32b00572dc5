from __future__ import annotations

import logging
import os

from src.adapters.persistence import (
    LocalGtfsRepository,
    LocalLineColorRepository,
    LocalNetworkRepository,
    S3NetworkRepository,
)
from src.adapters.settings import ImportSettings
from src.app.ports.output import INetworkRepository
from src.app.services.network_import_service import NetworkImportService

logger = logging.getLogger(__name__)


def build_service(settings: ImportSettings) -> NetworkImportService:
    network_repository: INetworkRepository
    if settings.network_bucket:
        network_repository = S3NetworkRepository(
            bucket=settings.network_bucket, key=settings.network_key
        )
    else:
        network_repository = LocalNetworkRepository(path=settings.network_path)

    return NetworkImportService(
        gtfs_repository=LocalGtfsRepository(base_path=settings.gtfs_path),
        color_repository=LocalLineColorRepository(path=settings.line_colors_path),
        network_repository=network_repository,
    )


def main() -> None:
    logging.basicConfig(
        level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = ImportSettings.from_env()
    service = build_service(settings)

    network = service.import_network(service_date=settings.service_date)
    logger.info(
        "Network snapshot for %s written", network.service_date.isoformat()
    )


if __name__ == "__main__":
    main()
