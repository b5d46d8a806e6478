"""Data model shared by the storage client, listing filter and adapter."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RemoteObject(BaseModel):
    """One stored object as reported by the storage client."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Full slash-delimited object key")
    size: int = Field(..., ge=0, description="Object size in bytes")
    upload_timestamp: Optional[int] = Field(
        default=None, description="Upload time in milliseconds since epoch"
    )
    content_type: Optional[str] = Field(default=None, description="MIME type")
    id: Optional[str] = Field(default=None, description="B2 file id")


class ListingQuery(BaseModel):
    """Directory and recursion flag for a single listing call."""

    model_config = ConfigDict(frozen=True, strict=True)

    directory: str = Field(default="", description="Emulated directory, no slashes")
    recursive: bool = Field(default=False, description="Include all descendants")

    @field_validator("directory", mode="before")
    @classmethod
    def _normalize_directory(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip("/")
        return value


class NormalizedAttributes(BaseModel):
    """Filesystem-facing projection of a RemoteObject."""

    model_config = ConfigDict(frozen=True)

    type: Literal["file"] = "file"
    path: str
    timestamp: Optional[int] = Field(
        default=None, description="Upload time in whole seconds since epoch"
    )
    size: int
    mime_type: Optional[str] = None
