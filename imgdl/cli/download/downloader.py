"""Image download utilities."""

import os
from pathlib import Path
from typing import Optional

import requests
from rich.console import Console
from rich.markup import escape

from imgdl.cli.cleanup import register_temp_file, unregister_temp_file
from imgdl.cli.config import DownloadConfig
from imgdl.cli.download.progress import ProgressListener, ProgressTracker
from imgdl.cli.download.result import DownloadResult, DownloadStatus
from imgdl.cli.http import build_request, create_session

default_console = Console()

# Raised by requests when it has no way to send the URL at all
_UNUSABLE_URL_ERRORS = (
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
)


def download_image(
    config: DownloadConfig,
    session: Optional[requests.Session] = None,
    console: Optional[Console] = None,
    on_progress: Optional[ProgressListener] = None,
) -> DownloadResult:
    """
    Download an image from a URL with a progress bar using Rich.

    Failures are returned as a :class:`DownloadResult` rather than raised. The
    destination is only replaced once the whole body has been received.

    Args:
        config: The download configuration
        session: Session to send the request with (a new one is created and
            closed if not given)
        console: Console to report on
        on_progress: Called with the progress fraction after every chunk

    Returns:
        DownloadResult: The outcome of the download
    """
    console = console or default_console

    try:
        request = build_request(config)
    except (requests.exceptions.RequestException, ValueError) as e:
        return _failure(
            config, DownloadStatus.REQUEST_ERROR, f"Invalid request for {config.url}: {e}"
        )

    owns_session = session is None
    if session is None:
        session = create_session()

    try:
        console.print(f"[dim]URL: {escape(config.url)}[/dim]")
        try:
            response = session.send(request, stream=True, timeout=config.timeout)
        except _UNUSABLE_URL_ERRORS as e:
            return _failure(
                config,
                DownloadStatus.REQUEST_ERROR,
                f"Invalid request for {config.url}: {e}",
            )
        except requests.exceptions.RequestException as e:
            error_type = type(e).__name__.replace("Exception", "")
            return _failure(
                config,
                DownloadStatus.TRANSPORT_ERROR,
                f"Network error: {error_type}: {e}" if str(e) else f"Network error: {error_type}",
            )

        with response:
            if response.status_code != 200:
                return _failure(
                    config,
                    DownloadStatus.HTTP_ERROR,
                    f"HTTP {response.status_code}: {response.reason}",
                    status_code=response.status_code,
                    reason=response.reason,
                )

            total = content_length(response)
            if total is None:
                console.print(
                    "[yellow]Warning: Content length not provided by server, progress is indeterminate[/]"
                )
            return _save_body(config, response, total, console, on_progress)
    finally:
        if owns_session:
            session.close()


def content_length(response: requests.Response) -> Optional[int]:
    """
    Get the expected body size of a response.

    Args:
        response: The HTTP response

    Returns:
        Optional[int]: The Content-Length value, or None if it is missing or
            not a valid size
    """
    value = response.headers.get("content-length")
    if value is None:
        return None
    try:
        size = int(value)
    except ValueError:
        return None
    return size if size >= 0 else None


def partial_path(destination: Path) -> Path:
    """Get the path the body is written to before it is complete."""
    return destination.with_name(f".{destination.name}.part")


def _save_body(
    config: DownloadConfig,
    response: requests.Response,
    total: Optional[int],
    console: Console,
    on_progress: Optional[ProgressListener],
) -> DownloadResult:
    destination = config.output
    if destination.is_dir():
        return _failure(
            config,
            DownloadStatus.FILE_ERROR,
            f"Cannot create output file {destination}: it is a directory",
            status_code=response.status_code,
            total=total,
        )

    temp_path = partial_path(destination)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        temp_file = open(temp_path, "wb")
    except OSError as e:
        return _failure(
            config,
            DownloadStatus.FILE_ERROR,
            f"Cannot create output file {destination}: {e}",
            status_code=response.status_code,
            total=total,
        )

    register_temp_file(temp_path)
    written = 0
    try:
        with temp_file, ProgressTracker(
            f"Downloading {destination.name}", total, console=console, listener=on_progress
        ) as progress:
            try:
                for chunk in response.iter_content(chunk_size=config.chunk_size):
                    if chunk:  # filter out keep-alive new chunks
                        temp_file.write(chunk)
                        written += len(chunk)
                        progress.update(len(chunk))
            except OSError as e:
                # requests exceptions derive from OSError, so this covers
                # both reading the body and writing the file
                return _failure(
                    config,
                    DownloadStatus.TRANSFER_ERROR,
                    f"Transfer interrupted after {written} bytes: {type(e).__name__}: {e}",
                    status_code=response.status_code,
                    total=total,
                    bytes_written=written,
                )

            if total is not None and written < total:
                return _failure(
                    config,
                    DownloadStatus.TRANSFER_ERROR,
                    f"Transfer incomplete: received {written} of {total} bytes",
                    status_code=response.status_code,
                    total=total,
                    bytes_written=written,
                )
            progress.finish()

        try:
            os.replace(temp_path, destination)
        except OSError as e:
            return _failure(
                config,
                DownloadStatus.FILE_ERROR,
                f"Cannot write output file {destination}: {e}",
                status_code=response.status_code,
                total=total,
                bytes_written=written,
            )

        return DownloadResult(
            status=DownloadStatus.SUCCESS,
            url=config.url,
            path=destination,
            bytes_written=written,
            total=total,
            status_code=response.status_code,
            reason=response.reason,
        )
    finally:
        unregister_temp_file(temp_path)
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as e:
            console.print(
                f"[yellow]Warning: Could not delete temporary file {escape(str(temp_path))}: {escape(str(e))}[/]"
            )


def _failure(
    config: DownloadConfig, status: DownloadStatus, message: str, **fields: object
) -> DownloadResult:
    return DownloadResult(
        status=status, url=config.url, path=config.output, message=message, **fields
    )
