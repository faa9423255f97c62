from __future__ import annotations

from typing import Any

import pytest

from proto_store.storage import s3 as s3_module
from tests.utils_s3 import FakeS3Client


@pytest.fixture()
def fake_client(monkeypatch: pytest.MonkeyPatch) -> FakeS3Client:
    client = FakeS3Client()

    def _create_client(address, access_key, access_secret, session_token, secure, region):
        client.created.append(
            {
                "address": address,
                "access_key": access_key,
                "access_secret": access_secret,
                "session_token": session_token,
                "secure": secure,
                "region": region,
            }
        )
        client.meta.region_name = region
        return client

    monkeypatch.setattr(s3_module, "_create_client", _create_client)
    return client


@pytest.fixture()
def store(fake_client: FakeS3Client) -> s3_module.S3Store:
    return s3_module.S3Store("records", "localhost:9000", "minio", "minio123")
