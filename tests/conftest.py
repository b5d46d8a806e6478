"""Test configuration and fixtures for b2fs."""

import boto3
import pytest
from moto import mock_aws

from b2fs.adapter import BackblazeAdapter
from b2fs.objectstorage.clients import B2ClientConfig, B2StorageClient
from b2fs.schemas import RemoteObject

BUCKET = "test-bucket"

# Keys as B2 would hold them; moto lists them in lexicographic order
SAMPLE_OBJECTS = {
    "readme.txt": b"hello",
    "docs/a.md": b"# A",
    "docs/sub/b.md": b"# B, nested",
    "images/logo.png": b"\x89PNG",
}


@pytest.fixture
def sample_names():
    """Flat listing used by the directory emulation examples."""
    return ["readme.txt", "docs/a.md", "docs/sub/b.md", "images/logo.png"]


@pytest.fixture
def sample_objects(sample_names):
    """RemoteObjects for the sample listing, in the given order."""
    return [
        RemoteObject(name=name, size=10 * i, upload_timestamp=1700000000123 + i)
        for i, name in enumerate(sample_names)
    ]


@pytest.fixture
def aws_credentials(monkeypatch):
    """Keep boto3 away from any real credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def b2_config():
    """Client config pointed at an endpoint moto intercepts."""
    return B2ClientConfig(
        application_key_id="test_key",
        application_key="test_secret",
        region_name="us-east-1",
        endpoint_url="https://s3.amazonaws.com",
    )


@pytest.fixture
def mocked_bucket(aws_credentials):
    """Create a mocked bucket holding SAMPLE_OBJECTS."""
    with mock_aws():
        s3_client = boto3.client("s3", region_name="us-east-1")
        s3_client.create_bucket(Bucket=BUCKET)
        for key, body in SAMPLE_OBJECTS.items():
            s3_client.put_object(Bucket=BUCKET, Key=key, Body=body)
        yield s3_client


@pytest.fixture
def storage_client(mocked_bucket, b2_config):
    return B2StorageClient(b2_config, BUCKET)


@pytest.fixture
def adapter(storage_client):
    return BackblazeAdapter(storage_client, BUCKET)


@pytest.fixture
def bucket_name():
    return BUCKET


@pytest.fixture
def sample_contents():
    """Keys and bodies stored in the mocked bucket."""
    return dict(SAMPLE_OBJECTS)
