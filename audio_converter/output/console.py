"""Console-based output handler for Audio Converter."""

from rich.console import Console


class ConsoleOutputHandler:
    """Rich Console-based output handler.

    With ``quiet=True`` progress messages (``print``/``info``/``success``) are
    dropped while warnings and errors still reach the console. ``batch`` uses
    this so per-file chatter does not break up the progress bar.
    """

    def __init__(self, console: Console | None = None, *, quiet: bool = False) -> None:
        self.console = console or Console()
        self.quiet = quiet

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        if not self.quiet:
            self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def success(self, message: str) -> None:
        """Print a completion message."""
        self.print(f"[green]{message}[/green]")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red]Error:[/red] {message}")
