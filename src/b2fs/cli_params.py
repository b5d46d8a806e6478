"""Shared CLI parameter definitions.

Every command connects to a bucket the same way, so the connection options
are declared once here as ``Annotated`` aliases and reused in each command
signature. Options left unset fall back to ``B2FS_*`` environment settings.

Usage:

    @app.command()
    def my_command(bucket: BucketOption = None, region: RegionOption = None):
        pass
"""

from typing import Annotated, Optional

import typer

BucketOption = Annotated[
    Optional[str],
    typer.Option("--bucket", "-b", help="Bucket name (default: B2FS_BUCKET_NAME)"),
]

KeyIdOption = Annotated[
    Optional[str],
    typer.Option(
        "--key-id", help="B2 application key ID (default: B2FS_APPLICATION_KEY_ID)"
    ),
]

KeyOption = Annotated[
    Optional[str],
    typer.Option("--key", help="B2 application key (default: B2FS_APPLICATION_KEY)"),
]

RegionOption = Annotated[
    Optional[str],
    typer.Option("--region", help="B2 region, e.g. us-west-004 (default: B2FS_REGION_NAME)"),
]

EndpointUrlOption = Annotated[
    Optional[str],
    typer.Option("--endpoint-url", help="Custom S3-compatible endpoint URL"),
]

ProfileOption = Annotated[
    Optional[str],
    typer.Option("--profile", help="Shared credentials profile name"),
]

RecursiveOption = Annotated[
    bool,
    typer.Option("--recursive", "-r", help="Include files in nested directories"),
]
