from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import INetworkRepository
from src.domain.models.storage import StoredNetwork

from .network_codec import decode_network, encode_network


@dataclass(slots=True)
class LocalNetworkRepository(INetworkRepository):
    """Stores the durable network as a JSON file.

    Env vars:
      - NETWORK_PATH: snapshot file (default: data/network.json)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        return Path(self.path or os.getenv("NETWORK_PATH") or "data/network.json")

    def save(self, network: StoredNetwork) -> None:
        path = self._path()
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_bytes(encode_network(network))
        tmp.replace(path)

    def load(self) -> StoredNetwork:
        return decode_network(self._path().read_bytes())
