# utils/progress_tracker.py
"""Console output and progress tracking utilities."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    Progress,
    BarColumn,
    TextColumn,
    TimeElapsedColumn,
    MofNCompleteColumn,
)


class ProgressTracker:
    """Manages progress bar configurations and user-facing messages."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize progress tracker with console."""
        self.console = console or Console()

    def create_progress_bar(self) -> Progress:
        """
        Create configured Progress instance.

        Returns:
            Configured Progress instance for context manager use
        """
        return Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            "•",
            MofNCompleteColumn(),
            "•",
            TimeElapsedColumn(),
            console=self.console,
            expand=True
        )

    def show_error_message(self, message: str):
        """Display an error to the user."""
        self.console.print(
            Panel(message, title="[bold red]Error[/bold red]", border_style="red")
        )

    def print_header(self, message: str):
        """Print formatted header message."""
        self.console.print(f"🚀 [bold magenta]{message}[/bold magenta]\n")

    def print_info(self, message: str):
        """Print information message."""
        self.console.print(message)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"❌ {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"⚠️  {message}")
