"""B2 client configuration and the storage operations the adapter delegates to.

Backblaze B2 exposes an S3-compatible API, so the client here is a boto3 ``s3``
client pointed at ``https://s3.<region>.backblazeb2.com``. Authentication,
retries and request signing stay inside boto3.

Authentication Methods Supported:
    1. Application keys (application_key_id, application_key)
    2. Named profiles from the shared credentials file (profile)
    3. Environment variables / default credential chain (no explicit keys)
"""

from datetime import datetime
from typing import IO, Any, Dict, Optional, Union

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, ConfigDict, Field

from b2fs.core import get_logger
from b2fs.core.exceptions import ObjectNotFoundError, StorageOperationError
from b2fs.schemas import RemoteObject

logger = get_logger(__name__)

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


class B2ClientConfig(BaseModel):
    """Configuration for B2 client connections.

    Authentication Priority:
        1. If profile is provided, use profile-based authentication
        2. If application keys are provided, use them
        3. Otherwise, fall back to the default credential chain

    Example:
        # Application key
        config = B2ClientConfig(
            application_key_id="0041234567890ab0000000001",
            application_key="K004abcdefghijklmnopqrstuvwxyz0",
            region_name="us-west-004",
        )

        # Named profile
        config = B2ClientConfig(profile="b2")
    """

    model_config = ConfigDict(extra="forbid")

    application_key_id: Optional[str] = Field(None, description="B2 application key ID")
    application_key: Optional[str] = Field(None, description="B2 application key")
    region_name: str = Field("us-west-004", description="B2 region, e.g. us-west-004")
    endpoint_url: Optional[str] = Field(
        None, description="S3-compatible endpoint; derived from region_name if unset"
    )
    profile: Optional[str] = Field(
        None, description="Shared credentials profile name to use for credentials"
    )

    @property
    def resolved_endpoint_url(self) -> str:
        """Endpoint URL, defaulting to the region's B2 S3 endpoint."""
        if self.endpoint_url:
            return self.endpoint_url
        return f"https://s3.{self.region_name}.backblazeb2.com"


class B2ClientManager:
    """Manages the boto3 client connection for a B2 account."""

    def __init__(self, config: B2ClientConfig):
        self.config = config
        self._client = None
        logger.info(
            "B2 client manager initialized",
            region=config.region_name,
            endpoint=config.resolved_endpoint_url,
        )

    @property
    def client(self):
        """Get or create the boto3 client instance."""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """Create a boto3 S3 client for the B2 endpoint."""
        kwargs: Dict[str, Any] = {
            "region_name": self.config.region_name,
            "endpoint_url": self.config.resolved_endpoint_url,
        }

        if self.config.profile:
            session = boto3.Session(profile_name=self.config.profile)
            client = session.client("s3", **kwargs)  # type: ignore
            logger.info("B2 client created with profile", profile=self.config.profile)
        else:
            if self.config.application_key_id and self.config.application_key:
                kwargs.update(
                    {
                        "aws_access_key_id": self.config.application_key_id,
                        "aws_secret_access_key": self.config.application_key,
                    }
                )
                logger.info("B2 client created with application key")
            else:
                logger.info("B2 client created with default credential chain")

            client = boto3.client("s3", **kwargs)  # type: ignore

        return client


def _to_millis(value: Optional[datetime]) -> Optional[int]:
    if value is None:
        return None
    return int(value.timestamp() * 1000)


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") in NOT_FOUND_CODES


class B2StorageClient:
    """Storage operations on a single B2 bucket.

    Every method is one request (or one paginated listing) against the
    S3-compatible endpoint. botocore errors are translated into
    ObjectNotFoundError for missing keys and StorageOperationError otherwise.
    """

    def __init__(self, config: B2ClientConfig, bucket_name: str):
        self.client_manager = B2ClientManager(config)
        self.bucket_name = bucket_name

    @property
    def client(self):
        return self.client_manager.client

    def _fail(self, action: str, name: str, error: Exception) -> StorageOperationError:
        if isinstance(error, ClientError) and _is_not_found(error):
            return ObjectNotFoundError(
                f"Object not found in bucket '{self.bucket_name}': {name}"
            )
        error_msg = f"Failed to {action} '{name}' in bucket '{self.bucket_name}': {error}"
        logger.error(error_msg, error=str(error))
        return StorageOperationError(error_msg)

    def upload(
        self,
        name: str,
        body: Union[bytes, IO[bytes]],
        content_type: Optional[str] = None,
    ) -> RemoteObject:
        """Store an object and return its metadata as recorded by B2."""
        kwargs: Dict[str, Any] = {"Bucket": self.bucket_name, "Key": name, "Body": body}
        if content_type:
            kwargs["ContentType"] = content_type

        try:
            self.client.put_object(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise self._fail("upload", name, e) from e

        logger.info("Object uploaded", bucket=self.bucket_name, name=name)
        return self.get_file(name)

    def download(self, name: str) -> bytes:
        """Return the full contents of an object."""
        body = self.download_stream(name)
        try:
            return body.read()
        finally:
            body.close()

    def download_stream(self, name: str):
        """Return the streaming body of an object; the caller closes it."""
        try:
            response = self.client.get_object(Bucket=self.bucket_name, Key=name)
        except (ClientError, BotoCoreError) as e:
            raise self._fail("download", name, e) from e

        logger.debug("Object download started", bucket=self.bucket_name, name=name)
        return response["Body"]

    def get_file(self, name: str) -> RemoteObject:
        """Fetch the metadata of a single object."""
        try:
            response = self.client.head_object(Bucket=self.bucket_name, Key=name)
        except (ClientError, BotoCoreError) as e:
            raise self._fail("get metadata for", name, e) from e

        return RemoteObject(
            name=name,
            size=response.get("ContentLength", 0),
            upload_timestamp=_to_millis(response.get("LastModified")),
            content_type=response.get("ContentType"),
            id=response.get("VersionId"),
        )

    def delete_file(self, name: str) -> None:
        """Delete an object."""
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=name)
        except (ClientError, BotoCoreError) as e:
            raise self._fail("delete", name, e) from e

        logger.info("Object deleted", bucket=self.bucket_name, name=name)

    def file_exists(self, name: str) -> bool:
        """Return True if an object with this exact key exists."""
        try:
            self.client.head_object(Bucket=self.bucket_name, Key=name)
            return True
        except ClientError as e:
            if _is_not_found(e):
                return False
            raise self._fail("check existence of", name, e) from e
        except BotoCoreError as e:
            raise self._fail("check existence of", name, e) from e

    def prefix_exists(self, prefix: str) -> bool:
        """Return True if at least one object key starts with the prefix."""
        try:
            response = self.client.list_objects_v2(
                Bucket=self.bucket_name, Prefix=prefix, MaxKeys=1
            )
        except (ClientError, BotoCoreError) as e:
            raise self._fail("list prefix", prefix, e) from e

        return response.get("KeyCount", len(response.get("Contents", []))) > 0

    def list_files(self) -> list[RemoteObject]:
        """Return the complete flat listing of the bucket.

        All pages are fetched before returning, so callers always receive a
        fully materialized sequence.
        """
        logger.info("Listing bucket", bucket=self.bucket_name)

        objects = []
        try:
            paginator = self.client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket_name):
                for obj in page.get("Contents", []):
                    objects.append(
                        RemoteObject(
                            name=obj["Key"],
                            size=obj.get("Size", 0),
                            upload_timestamp=_to_millis(obj.get("LastModified")),
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            raise self._fail("list", self.bucket_name, e) from e

        logger.info("Bucket listed", bucket=self.bucket_name, object_count=len(objects))
        return objects

    def copy_file(self, source: str, destination: str) -> RemoteObject:
        """Copy an object server-side and return the new object's metadata."""
        try:
            self.client.copy_object(
                Bucket=self.bucket_name,
                Key=destination,
                CopySource={"Bucket": self.bucket_name, "Key": source},
            )
        except (ClientError, BotoCoreError) as e:
            raise self._fail("copy", source, e) from e

        logger.info(
            "Object copied",
            bucket=self.bucket_name,
            source=source,
            destination=destination,
        )
        return self.get_file(destination)
