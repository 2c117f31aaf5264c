"""Cleanup and signal handling module."""

import signal
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

console = Console(stderr=True)

# Partial downloads that must not outlive an interrupted run
_temp_files: set[Path] = set()


def register_temp_file(file_path: Path) -> None:
    """
    Register a partial download for cleanup.

    Args:
        file_path: Path to the temporary file
    """
    _temp_files.add(file_path)


def unregister_temp_file(file_path: Path) -> None:
    """
    Forget a temporary file that has been moved or removed.

    Args:
        file_path: Path to the temporary file
    """
    _temp_files.discard(file_path)


def cleanup() -> None:
    """Remove every registered temporary file."""
    for temp_file in list(_temp_files):
        try:
            temp_file.unlink(missing_ok=True)
        except OSError as e:
            console.print(
                f"[yellow]Warning: Could not delete temporary file {temp_file}: {str(e)}[/]"
            )
        else:
            _temp_files.discard(temp_file)


def signal_handler(signum: int, frame: Any) -> None:
    """
    Handle interrupt signals.

    Args:
        signum: Signal number
        frame: Current stack frame
    """
    console.print("\n[yellow]Download interrupted. Cleaning up...[/]")
    cleanup()
    sys.exit(1)


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful cleanup."""
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
