"""Object storage operations for Backblaze B2."""

from .clients import B2ClientConfig, B2ClientManager, B2StorageClient
from .listing import PathListingFilter, filter_objects, normalize_attributes

__all__ = [
    "B2ClientConfig",
    "B2ClientManager",
    "B2StorageClient",
    "PathListingFilter",
    "filter_objects",
    "normalize_attributes",
]
