"""Download configuration."""

from pathlib import Path
from typing import Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OUTPUT = Path("output.jpg")
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0
DEFAULT_CHUNK_SIZE = 32 * 1024


class DownloadConfig(BaseModel):
    """Settings for a single image download."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    output: Path = DEFAULT_OUTPUT
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    referer: Optional[str] = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)

    @property
    def effective_referer(self) -> str:
        """Get the Referer to send.

        Falls back to the origin of the download URL, which is what a browser
        sends when an image is embedded in a page of the same site.
        """
        if self.referer:
            return self.referer
        return origin_of(self.url)


def origin_of(url: str) -> str:
    """
    Return the ``scheme://host/`` origin of a URL.

    Args:
        url: The URL to inspect

    Returns:
        str: The origin with a trailing slash, or an empty string if the URL
            has no scheme or host
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return ""
    return f"{parts.scheme}://{parts.netloc}/"
