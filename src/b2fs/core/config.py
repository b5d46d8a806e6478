"""Configuration management for b2fs."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "console"
    otel_enabled: bool = False
    otel_service_name: str = "b2fs"
    otel_exporter_endpoint: str = "http://localhost:4317"

    # Defaults for the CLI when options are omitted
    application_key_id: Optional[str] = None
    application_key: Optional[str] = None
    bucket_name: Optional[str] = None
    region_name: str = "us-west-004"
    endpoint_url: Optional[str] = None

    model_config = {
        "env_prefix": "B2FS_",
        "case_sensitive": False,
    }


settings = Settings()
