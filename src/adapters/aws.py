from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = BaseClient  # type: ignore[misc,assignment]

DEFAULT_REGION = "eu-west-1"
DEFAULT_LOCALSTACK_URL = "http://localhost:4566"


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True, slots=True)
class AwsRuntimeConfig:
    """boto3 settings for the snapshot store.

    Env vars:
      - AWS_REGION: defaults to eu-west-1
      - ENDPOINT_URL: explicit endpoint, wins over everything else
      - USE_LOCALSTACK / LOCALSTACK_ENDPOINT_URL: LocalStack without ENDPOINT_URL
    """

    region: str
    endpoint_url: str | None

    @staticmethod
    def from_env() -> "AwsRuntimeConfig":
        endpoint_url = (os.getenv("ENDPOINT_URL") or "").strip() or None
        if endpoint_url is None and _env_bool("USE_LOCALSTACK"):
            endpoint_url = os.getenv("LOCALSTACK_ENDPOINT_URL", DEFAULT_LOCALSTACK_URL)

        return AwsRuntimeConfig(
            region=os.getenv("AWS_REGION", DEFAULT_REGION),
            endpoint_url=endpoint_url,
        )


def s3_client(config: AwsRuntimeConfig | None = None) -> S3Client:
    cfg = config or AwsRuntimeConfig.from_env()
    session = boto3.session.Session(region_name=cfg.region)
    return session.client("s3", endpoint_url=cfg.endpoint_url)
