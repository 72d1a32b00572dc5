from __future__ import annotations

from uuid import uuid4

import pytest
from botocore.exceptions import ClientError

from src.adapters.aws import s3_client
from src.adapters.persistence import S3NetworkRepository
from src.domain.algorithms.network_loading import load_network
from src.domain.models.storage import StoredNetwork


@pytest.mark.integration
def test_s3_network_repository_save_and_load(
    network_bucket: str, stored_network: StoredNetwork
) -> None:
    key = f"networks-test/{uuid4()}.json"
    repo = S3NetworkRepository(bucket=network_bucket, key=key)

    repo.save(stored_network)
    head = s3_client().head_object(Bucket=network_bucket, Key=key)
    assert head["ContentType"] == "application/json"

    loaded = repo.load()
    assert loaded == stored_network
    assert load_network(loaded) == load_network(stored_network)


@pytest.mark.integration
def test_s3_network_repository_reads_env(
    network_bucket: str,
    stored_network: StoredNetwork,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("NETWORK_BUCKET", network_bucket)
    monkeypatch.setenv("NETWORK_KEY", f"networks-test/{uuid4()}.json")

    S3NetworkRepository().save(stored_network)
    assert S3NetworkRepository().load().service_date == stored_network.service_date


@pytest.mark.integration
def test_s3_network_repository_missing_snapshot(network_bucket: str) -> None:
    repo = S3NetworkRepository(bucket=network_bucket, key=f"missing/{uuid4()}.json")
    with pytest.raises(ClientError):
        repo.load()

