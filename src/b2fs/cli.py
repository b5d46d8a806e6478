"""Command-line interface for b2fs.

Commands:
    - ls: List files in an emulated directory
    - cat: Print a file's contents
    - put: Upload a local file
    - rm: Delete a file
    - mv / cp: Move or copy a file within the bucket
    - stat: Show a file's metadata
    - exists: Check whether a file exists
    - mkdir / rmdir: Create or delete an emulated directory

Connection options fall back to B2FS_* environment variables.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from . import __version__
from .adapter import BackblazeAdapter
from .cli_params import (
    BucketOption,
    EndpointUrlOption,
    KeyIdOption,
    KeyOption,
    ProfileOption,
    RecursiveOption,
    RegionOption,
)
from .core import settings
from .core.exceptions import ValidationError
from .objectstorage import B2ClientConfig, B2StorageClient
from .schemas import NormalizedAttributes

app = typer.Typer(
    name="b2fs",
    help="Filesystem-style access to Backblaze B2 buckets.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"b2fs {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    b2fs: filesystem-style access to Backblaze B2 buckets.
    """
    pass


def _create_adapter(
    bucket: Optional[str] = None,
    key_id: Optional[str] = None,
    key: Optional[str] = None,
    region: Optional[str] = None,
    endpoint_url: Optional[str] = None,
    profile: Optional[str] = None,
) -> BackblazeAdapter:
    """Build an adapter from CLI options, falling back to settings."""
    bucket_name = bucket or settings.bucket_name
    if not bucket_name:
        raise ValidationError("A bucket is required: pass --bucket or set B2FS_BUCKET_NAME")

    config = B2ClientConfig(
        application_key_id=key_id or settings.application_key_id,
        application_key=key or settings.application_key,
        region_name=region or settings.region_name,
        endpoint_url=endpoint_url or settings.endpoint_url,
        profile=profile,
    )
    return BackblazeAdapter(B2StorageClient(config, bucket_name), bucket_name)


def _format_attributes(attributes: NormalizedAttributes) -> str:
    timestamp = "-" if attributes.timestamp is None else str(attributes.timestamp)
    return f"{attributes.size:>12,}  {timestamp:>10}  {attributes.path}"


@app.command("ls")
def ls_cmd(
    directory: Annotated[str, typer.Argument(help="Directory to list")] = "",
    recursive: RecursiveOption = False,
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """
    List files in an emulated directory.

    Examples:
        b2fs ls docs --bucket my-bucket
        b2fs ls --recursive --bucket my-bucket
    """
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        contents = adapter.list_contents(directory, recursive=recursive)

        if contents:
            for attributes in contents:
                typer.echo(_format_attributes(attributes))
        else:
            typer.echo("No files found.")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("cat")
def cat_cmd(
    path: Annotated[str, typer.Argument(help="File to print")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Print a file's contents to stdout."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        typer.echo(adapter.read(path), nl=False)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("put")
def put_cmd(
    local_file: Annotated[
        Path, typer.Argument(help="Local file to upload", exists=True, dir_okay=False)
    ],
    path: Annotated[str, typer.Argument(help="Destination path in the bucket")],
    content_type: Annotated[
        Optional[str], typer.Option("--content-type", help="MIME type to store")
    ] = None,
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Upload a local file."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        with local_file.open("rb") as stream:
            attributes = adapter.write_stream(path, stream, content_type=content_type)

        typer.echo(f"Uploaded {attributes.path} ({attributes.size:,} bytes)")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rm")
def rm_cmd(
    path: Annotated[str, typer.Argument(help="File to delete")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Delete a file."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        adapter.delete(path)
        typer.echo(f"Deleted {path}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("mv")
def mv_cmd(
    source: Annotated[str, typer.Argument(help="File to move")],
    destination: Annotated[str, typer.Argument(help="New path")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Move a file (copy, then delete the source)."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        adapter.move(source, destination)
        typer.echo(f"Moved {source} -> {destination}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("cp")
def cp_cmd(
    source: Annotated[str, typer.Argument(help="File to copy")],
    destination: Annotated[str, typer.Argument(help="Path of the copy")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Copy a file within the bucket."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        adapter.copy(source, destination)
        typer.echo(f"Copied {source} -> {destination}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("stat")
def stat_cmd(
    path: Annotated[str, typer.Argument(help="File to describe")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Show a file's metadata."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        attributes = adapter.get_metadata(path)

        typer.echo(f"Path: {attributes.path}")
        typer.echo(f"Type: {attributes.type}")
        typer.echo(f"Size: {attributes.size:,} bytes")
        typer.echo(f"Timestamp: {attributes.timestamp if attributes.timestamp is not None else '-'}")
        typer.echo(f"MIME type: {attributes.mime_type or '-'}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("exists")
def exists_cmd(
    path: Annotated[str, typer.Argument(help="File to check")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Check whether a file exists; exits with status 1 if it does not."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        found = adapter.file_exists(path)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if found:
        typer.echo(f"✓ {path} exists")
    else:
        typer.echo(f"✗ {path} does not exist", err=True)
        raise typer.Exit(1)


@app.command("mkdir")
def mkdir_cmd(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Create an emulated directory."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        attributes = adapter.create_directory(path)
        typer.echo(f"Created {attributes.path}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("rmdir")
def rmdir_cmd(
    path: Annotated[str, typer.Argument(help="Directory to delete")],
    bucket: BucketOption = None,
    key_id: KeyIdOption = None,
    key: KeyOption = None,
    region: RegionOption = None,
    endpoint_url: EndpointUrlOption = None,
    profile: ProfileOption = None,
) -> None:
    """Delete an emulated directory and everything under it."""
    try:
        adapter = _create_adapter(bucket, key_id, key, region, endpoint_url, profile)
        adapter.delete_directory(path)
        typer.echo(f"Deleted directory {path}")

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
