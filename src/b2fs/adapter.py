"""Filesystem adapter over a Backblaze B2 bucket.

Each operation delegates to B2StorageClient and reshapes the result into
NormalizedAttributes. Directories are never stored; they are inferred from
key prefixes when listing, and ``create_directory`` writes the same
``.bzEmpty`` placeholder the B2 web console uses for folders.

Errors raised by the storage client (ObjectNotFoundError,
StorageOperationError) propagate unchanged.
"""

from typing import IO, Optional, Union

from b2fs.core import get_logger, get_tracer
from b2fs.core.exceptions import UnsupportedOperationError, ValidationError
from b2fs.objectstorage.clients import B2StorageClient
from b2fs.objectstorage.listing import PathListingFilter, normalize_attributes
from b2fs.schemas import NormalizedAttributes

logger = get_logger(__name__)
tracer = get_tracer(__name__)

DIRECTORY_PLACEHOLDER = ".bzEmpty"


def _directory_key(path: Optional[str]) -> str:
    """Strip slashes from a directory path; the bucket root is not a directory."""
    directory = (path or "").strip("/")
    if not directory:
        raise ValidationError(
            f"Refusing to operate on the bucket root as a directory: {path!r}"
        )
    return directory


class BackblazeAdapter:
    """Filesystem-style operations on one B2 bucket."""

    def __init__(
        self,
        client: B2StorageClient,
        bucket_name: str,
        bucket_id: Optional[str] = None,
    ):
        self.client = client
        self.bucket_name = bucket_name
        self.bucket_id = bucket_id
        self.listing_filter = PathListingFilter()
        logger.info(
            "Backblaze adapter initialized", bucket=bucket_name, bucket_id=bucket_id
        )

    # Existence
    def file_exists(self, path: str) -> bool:
        with tracer.start_as_current_span("b2fs.file_exists"):
            return self.client.file_exists(path)

    def directory_exists(self, path: str) -> bool:
        """Return True if any object lives under the emulated directory."""
        with tracer.start_as_current_span("b2fs.directory_exists"):
            return self.client.prefix_exists(path.strip("/") + "/")

    # Writing
    def write(
        self,
        path: str,
        contents: Union[bytes, str],
        content_type: Optional[str] = None,
    ) -> NormalizedAttributes:
        """Store contents at path, replacing any existing object."""
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        with tracer.start_as_current_span("b2fs.write"):
            stored = self.client.upload(path, contents, content_type=content_type)
            return normalize_attributes(stored)

    def write_stream(
        self,
        path: str,
        stream: IO[bytes],
        content_type: Optional[str] = None,
    ) -> NormalizedAttributes:
        """Store the contents of a binary file-like object at path."""
        with tracer.start_as_current_span("b2fs.write_stream"):
            stored = self.client.upload(path, stream, content_type=content_type)
            return normalize_attributes(stored)

    # Older API names kept for callers written against them
    update = write
    update_stream = write_stream

    # Reading
    def read(self, path: str) -> bytes:
        """Return the full contents of the file at path."""
        with tracer.start_as_current_span("b2fs.read"):
            remote = self.client.get_file(path)
            return self.client.download(remote.name)

    def read_stream(self, path: str):
        """Return a readable binary stream; the caller closes it."""
        with tracer.start_as_current_span("b2fs.read_stream"):
            return self.client.download_stream(path)

    # Copy, move and delete
    def copy(self, path: str, new_path: str) -> NormalizedAttributes:
        with tracer.start_as_current_span("b2fs.copy"):
            return normalize_attributes(self.client.copy_file(path, new_path))

    def move(self, path: str, new_path: str) -> NormalizedAttributes:
        """Rename by copying to the new key and deleting the old one."""
        with tracer.start_as_current_span("b2fs.move"):
            attributes = self.copy(path, new_path)
            self.delete(path)
            logger.info("File moved", source=path, destination=new_path)
            return attributes

    def delete(self, path: str) -> None:
        with tracer.start_as_current_span("b2fs.delete"):
            self.client.delete_file(path)

    # Directories
    def create_directory(self, path: str) -> NormalizedAttributes:
        """Create an emulated directory by writing an empty placeholder object.

        Raises:
            ValidationError: If path names the bucket root
        """
        placeholder = f"{_directory_key(path)}/{DIRECTORY_PLACEHOLDER}"
        with tracer.start_as_current_span("b2fs.create_directory"):
            return normalize_attributes(self.client.upload(placeholder, b""))

    def delete_directory(self, path: str) -> None:
        """Delete every object under the emulated directory, at any depth.

        Raises:
            ValidationError: If path names the bucket root
        """
        directory = _directory_key(path)
        with tracer.start_as_current_span("b2fs.delete_directory"):
            descendants = self.listing_filter(
                self.client.list_files(), directory, recursive=True
            )
            for obj in descendants:
                self.client.delete_file(obj.name)
            logger.info(
                "Directory deleted", directory=path, object_count=len(descendants)
            )

    def list_contents(
        self, directory: str = "", recursive: bool = False
    ) -> list[NormalizedAttributes]:
        """List the files in an emulated directory.

        Args:
            directory: Directory to list; "" is the bucket root
            recursive: Include files in nested directories

        Returns:
            Normalized attributes of every matching file, in listing order.
            The bucket listing carries no content type, so ``mime_type`` is
            always None here; use ``get_metadata`` for a file's MIME type.

        Raises:
            InvalidQueryError: If directory or recursive have the wrong type
        """
        with tracer.start_as_current_span("b2fs.list_contents"):
            objects = self.client.list_files()
            contents = self.listing_filter.list_attributes(
                objects, directory, recursive
            )
            logger.info(
                "Contents listed",
                directory=directory,
                recursive=recursive,
                count=len(contents),
            )
            return contents

    # Metadata
    def get_metadata(self, path: str) -> NormalizedAttributes:
        with tracer.start_as_current_span("b2fs.get_metadata"):
            return normalize_attributes(self.client.get_file(path))

    def mime_type(self, path: str) -> NormalizedAttributes:
        return self.get_metadata(path)

    def last_modified(self, path: str) -> NormalizedAttributes:
        return self.get_metadata(path)

    def file_size(self, path: str) -> NormalizedAttributes:
        return self.get_metadata(path)

    def get_file_info(self, path: str) -> dict:
        """Return the ``type/path/timestamp/size`` mapping of the older API."""
        return self.get_metadata(path).model_dump(
            include={"type", "path", "timestamp", "size"}
        )

    def get_mimetype(self, path: str) -> Optional[str]:
        return self.get_metadata(path).mime_type

    # Older API names kept for callers written against them
    create_dir = create_directory
    delete_dir = delete_directory
    get_size = get_file_info
    get_timestamp = get_file_info

    # Visibility
    def visibility(self, path: str) -> NormalizedAttributes:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support visibility. Path: {path}"
        )

    def set_visibility(self, path: str, visibility: str) -> None:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support visibility. "
            f"Path: {path}, visibility: {visibility}"
        )
