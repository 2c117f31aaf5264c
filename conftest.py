"""Global pytest configuration.

Shared fixtures for building HTTP responses without a network.
"""

import io
from typing import Callable, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from rich.console import Console


class FlakyStream(io.RawIOBase):
    """A response body that fails after delivering some bytes."""

    def __init__(self, data: bytes, error: Exception):
        self._data = io.BytesIO(data)
        self._error = error

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        chunk = self._data.read(size)
        if not chunk:
            raise self._error
        return chunk


@pytest.fixture
def quiet_console() -> Console:
    """A console that renders into memory instead of the terminal."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    """Factory for real requests.Response objects backed by in-memory bodies."""

    def _make(
        status_code: int = 200,
        body: bytes = b"",
        headers: Optional[dict] = None,
        reason: str = "OK",
        raw: Optional[io.IOBase] = None,
    ) -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response.headers = CaseInsensitiveDict(headers or {})
        response.raw = raw if raw is not None else io.BytesIO(body)
        response.url = "http://example.com/image.jpg"
        return response

    return _make
