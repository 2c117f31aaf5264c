"""HTTP client utilities."""

import os

import requests
from rich.console import Console

from imgdl.cli.config import DownloadConfig

console = Console()

ACCEPT_IMAGES = "image/avif,image/webp,image/apng,image/svg+xml,image/*,*/*;q=0.8"


def debug_print(msg: str, debug: bool = False) -> None:
    """Print debug message if debug mode is enabled."""
    if debug:
        console.print(f"DEBUG: {msg}", markup=False)


def build_headers(config: DownloadConfig) -> dict[str, str]:
    """
    Build the browser-like header set sent with the image request.

    ``Accept-Encoding`` is pinned to ``identity`` so the bytes written to disk
    are exactly the bytes counted by ``Content-Length``.

    Args:
        config: The download configuration

    Returns:
        dict[str, str]: Request headers
    """
    headers = {
        "User-Agent": config.user_agent,
        "Accept": ACCEPT_IMAGES,
        "Accept-Encoding": "identity",
    }
    referer = config.effective_referer
    if referer:
        headers["Referer"] = referer
    return headers


def build_request(config: DownloadConfig) -> requests.PreparedRequest:
    """
    Build the GET request for an image download.

    Args:
        config: The download configuration

    Returns:
        requests.PreparedRequest: The request, ready to be sent

    Raises:
        requests.exceptions.RequestException: If the URL cannot be used to
            build a request (missing scheme, missing host, ...)
    """
    request = requests.Request("GET", config.url, headers=build_headers(config))
    return request.prepare()


def create_session(debug: bool = False) -> requests.Session:
    """Create a requests session with proxy support if needed.

    This function respects HTTP_PROXY, HTTPS_PROXY, and NO_PROXY environment
    variables through the session's ``trust_env`` setting.

    Args:
        debug: Whether to print debug information

    Returns:
        requests.Session: A configured session with trust_env=True
    """
    https_proxy = os.environ.get("HTTPS_PROXY") or os.environ.get("https_proxy")
    http_proxy = os.environ.get("HTTP_PROXY") or os.environ.get("http_proxy")
    no_proxy = os.environ.get("NO_PROXY") or os.environ.get("no_proxy")

    if https_proxy or http_proxy:
        debug_print(f"Using proxies - HTTP: {http_proxy}, HTTPS: {https_proxy}", debug)
        if no_proxy:
            debug_print(f"NO_PROXY: {no_proxy}", debug)
    else:
        debug_print("No proxies configured", debug)

    session = requests.Session()
    session.trust_env = True
    return session
