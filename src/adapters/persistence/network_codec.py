from __future__ import annotations

from pydantic import TypeAdapter

from src.domain.models.storage import StoredNetwork

_ADAPTER = TypeAdapter(StoredNetwork)


def encode_network(network: StoredNetwork) -> bytes:
    return _ADAPTER.dump_json(network)


def decode_network(payload: bytes | str) -> StoredNetwork:
    return _ADAPTER.validate_json(payload)
