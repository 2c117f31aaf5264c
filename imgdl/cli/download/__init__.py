"""Image download utilities."""

from .downloader import download_image
from .progress import ProgressTracker
from .result import DownloadResult, DownloadStatus

__all__ = ["download_image", "ProgressTracker", "DownloadResult", "DownloadStatus"]
