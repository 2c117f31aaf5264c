"""Console utilities for the imgdl CLI.

This module provides a custom console implementation based on Rich's Console
with the styles used for download reporting.
"""

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.theme import Theme


class ImgdlConsole(RichConsole):
    """Custom console for the imgdl CLI.

    Extends Rich's Console with a theme for download status messages.
    """

    def __init__(self, **kwargs: Any) -> None:
        """Initialize the console with the imgdl theme.

        Args:
            **kwargs: Additional arguments to pass to the Rich Console
        """
        theme = Theme(
            {
                "error": "bold #FF5555",
                "success": "bold #50FA7B",
            }
        )
        # Keep long paths and URLs on one line
        kwargs.setdefault("soft_wrap", True)
        super().__init__(theme=theme, **kwargs)

    def error(self, message: str) -> None:
        """Print an error message.

        Markup in the message is escaped, since server reason phrases and
        exception text are not under our control.
        """
        self.print(f"[error]{escape(message)}[/]")

    def success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[success]{escape(message)}[/]")


# Create default console instances for easy import
console = ImgdlConsole()
err_console = ImgdlConsole(stderr=True)
