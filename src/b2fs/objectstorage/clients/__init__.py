"""B2 client management and configuration."""

from .b2_client import B2ClientConfig, B2ClientManager, B2StorageClient

__all__ = ["B2ClientConfig", "B2ClientManager", "B2StorageClient"]
