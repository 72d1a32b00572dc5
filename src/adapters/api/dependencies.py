from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.persistence import LocalNetworkRepository, S3NetworkRepository
from src.app.ports.output import INetworkRepository
from src.domain.algorithms.network_loading import load_network
from src.domain.models.simulation import Network


def get_network_repository() -> INetworkRepository:
    if os.getenv("NETWORK_BUCKET"):
        return S3NetworkRepository()
    return LocalNetworkRepository()


@lru_cache(maxsize=1)
def get_network() -> Network:
    # Snapshots are immutable once written, so one load per process is enough.
    return load_network(get_network_repository().load())
