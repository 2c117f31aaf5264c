"""Progress tracking utilities."""

from typing import Any, Callable, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

default_console = Console()

ProgressListener = Callable[[Optional[float]], None]


class ProgressTracker:
    """A context manager for tracking download progress.

    The Rich live display redraws on its own refresh thread; the copy loop
    only pushes the running byte count into it. When ``total`` is unknown the
    bar is indeterminate until :meth:`finish` is called.
    """

    def __init__(
        self,
        description: str,
        total: Optional[int],
        console: Optional[Console] = None,
        listener: Optional[ProgressListener] = None,
    ):
        """
        Initialize the progress tracker.

        Args:
            description: Description of the download
            total: Expected size in bytes, or None if unknown
            console: Console to render on (defaults to the module console)
            listener: Called with the current fraction after every change
        """
        self.total = total
        self.completed = 0
        self.finished = False
        self.listener = listener
        self.progress = Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(complete_style="#00ffcc", finished_style="#0066ff"),
            TaskProgressColumn(),
            DownloadColumn(),
            TransferSpeedColumn(),
            TimeRemainingColumn(),
            console=console or default_console,
        )
        self.task = self.progress.add_task(description, total=total)

    def __enter__(self) -> "ProgressTracker":
        """Start the progress tracking."""
        self.progress.start()
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: Any
    ) -> None:
        """Stop the progress tracking."""
        self.progress.stop()

    @property
    def fraction(self) -> Optional[float]:
        """Fraction of the expected bytes received, None if indeterminate."""
        if self.finished:
            return 1.0
        if not self.total:
            return None
        return min(self.completed / self.total, 1.0)

    def update(self, advance: int) -> None:
        """
        Advance the progress by a number of bytes.

        Args:
            advance: Bytes received since the last update

        Raises:
            ValueError: If advance is negative
        """
        if advance < 0:
            raise ValueError("Progress cannot go backwards")
        self.completed += advance
        self.progress.update(self.task, advance=advance)
        self._notify()

    def finish(self) -> None:
        """Mark the transfer as complete and show the bar at 100%."""
        if self.total is None or self.completed > self.total:
            self.total = self.completed
        self.finished = True
        self.progress.update(self.task, total=self.total, completed=self.total)
        self._notify()

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener(self.fraction)
