"""Filesystem adapter for Backblaze B2 cloud object storage.

This package lets filesystem-style code (exists, read, write, delete, list,
move/copy, metadata) operate against a B2 bucket. B2 has no directories, so
listing emulates them from key prefixes over the bucket's flat listing.

Recommended Usage:

    >>> from b2fs import B2ClientConfig, B2StorageClient, BackblazeAdapter
    >>> config = B2ClientConfig(
    ...     application_key_id="keyId", application_key="key", region_name="us-west-004"
    ... )
    >>> adapter = BackblazeAdapter(B2StorageClient(config, "my-bucket"), "my-bucket")
    >>> adapter.list_contents("docs", recursive=False)

Advanced Usage:
    The listing filter can be used on any flat listing:

    >>> from b2fs.objectstorage import filter_objects, normalize_attributes
"""

__version__ = "0.1.0"

from .adapter import BackblazeAdapter
from .objectstorage import (
    B2ClientConfig,
    B2ClientManager,
    B2StorageClient,
    PathListingFilter,
    filter_objects,
    normalize_attributes,
)
from .schemas import ListingQuery, NormalizedAttributes, RemoteObject

__all__ = [
    "BackblazeAdapter",
    # Client
    "B2ClientConfig",
    "B2ClientManager",
    "B2StorageClient",
    # Listing
    "PathListingFilter",
    "filter_objects",
    "normalize_attributes",
    # Data model
    "ListingQuery",
    "NormalizedAttributes",
    "RemoteObject",
]
