"""Command definitions for the imgdl CLI.

This module defines the ``image-downloader`` command using the Typer
framework.
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from . import __version__
from .cleanup import setup_signal_handlers
from .config import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_OUTPUT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    DownloadConfig,
)
from .console import console, err_console
from .download import download_image
from .http import build_headers, create_session, debug_print
from .size import format_size

app = typer.Typer(
    name="image-downloader",
    help="Downloads an image with a progress bar",
)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"image-downloader {__version__}")
        raise typer.Exit()


@app.command()
def download(
    url: str = typer.Option(
        ..., "--url", "-u", help="URL of the image to download (required)"
    ),
    output: Path = typer.Option(
        DEFAULT_OUTPUT, "--output", "-o", help="Output filename"
    ),
    user_agent: str = typer.Option(
        DEFAULT_USER_AGENT, "--user-agent", help="User-Agent header to send"
    ),
    referer: Optional[str] = typer.Option(
        None,
        "--referer",
        help="Referer header to send (defaults to the origin of --url)",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT, "--timeout", "-t", help="Connect and read timeout in seconds"
    ),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE, "--chunk-size", help="Read buffer size in bytes"
    ),
    debug: bool = typer.Option(
        False, "--debug", help="Show request details and proxy settings"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Download an image to a local file with a live progress bar.

    The request is sent with browser-like headers. Only a 200 response is
    saved; the output file is replaced once the whole image has arrived.
    """
    try:
        config = DownloadConfig(
            url=url,
            output=output,
            user_agent=user_agent,
            referer=referer,
            timeout=timeout,
            chunk_size=chunk_size,
        )
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            err_console.error(f"Error: invalid --{field.replace('_', '-')}: {error['msg']}")
        raise typer.Exit(code=1)

    setup_signal_handlers()
    session = create_session(debug=debug)
    for name, value in build_headers(config).items():
        debug_print(f"{name}: {value}", debug)

    with session:
        result = download_image(config, session=session, console=console)

    if not result.ok:
        err_console.error(f"Download failed: {result.message}")
        raise typer.Exit(code=1)

    console.success(
        f"Downloaded successfully to {result.path} ({format_size(result.bytes_written)})"
    )
