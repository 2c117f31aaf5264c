"""imgdl CLI package.

A command-line tool for downloading an image with a live progress bar.
"""

from importlib.metadata import version

try:
    __version__ = version("imgdl")
except ImportError:
    # Package is not installed
    __version__ = "0.1.0"

# Export the app for external use
from .cli import app

__all__ = ["app", "__version__"]
