"""Outcome of a download attempt."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DownloadStatus(str, Enum):
    """How a download attempt ended."""

    SUCCESS = "success"
    REQUEST_ERROR = "request_error"
    TRANSPORT_ERROR = "transport_error"
    HTTP_ERROR = "http_error"
    FILE_ERROR = "file_error"
    TRANSFER_ERROR = "transfer_error"


class DownloadResult(BaseModel):
    """Model representing the result of a single download."""

    model_config = ConfigDict(frozen=True)

    status: DownloadStatus
    url: str
    path: Path
    bytes_written: int = 0
    total: Optional[int] = None
    status_code: Optional[int] = None
    reason: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Whether the image was saved."""
        return self.status == DownloadStatus.SUCCESS
