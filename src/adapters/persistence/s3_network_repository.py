from __future__ import annotations

import os
from dataclasses import dataclass

from src.adapters.aws import s3_client
from src.app.ports.output import INetworkRepository
from src.domain.models.storage import StoredNetwork

from .network_codec import decode_network, encode_network


@dataclass(slots=True)
class S3NetworkRepository(INetworkRepository):
    """Network snapshots stored as JSON objects in S3.

    Env vars:
      - NETWORK_BUCKET: bucket name
      - NETWORK_KEY: object key (default: networks/network.json)
      - ENDPOINT_URL: preferred LocalStack endpoint (e.g. http://localhost:4566)
      - AWS_REGION: defaults to eu-west-1
    """

    bucket: str | None = None
    key: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("NETWORK_BUCKET")
        if not value:
            raise RuntimeError("Missing NETWORK_BUCKET")
        return value

    def _key(self) -> str:
        return self.key or os.getenv("NETWORK_KEY") or "networks/network.json"

    def save(self, network: StoredNetwork) -> None:
        s3_client().put_object(
            Bucket=self._bucket(),
            Key=self._key(),
            Body=encode_network(network),
            ContentType="application/json",
        )

    def load(self) -> StoredNetwork:
        obj = s3_client().get_object(Bucket=self._bucket(), Key=self._key())
        return decode_network(obj["Body"].read())
