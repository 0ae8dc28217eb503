"""Output protocols for Audio Converter."""

from pathlib import Path
from typing import Protocol, runtime_checkable

from audio_converter.config import OutputSettings
from audio_converter.processing import ConversionResult


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for user-facing messages (console, logging, etc.)."""

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def warning(self, message: str) -> None:
        """Print a warning message."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...


class ArrayWriter(Protocol):
    """Protocol for rendering a ConversionResult to a file."""

    def render(self, result: ConversionResult, settings: OutputSettings) -> bytes:
        """Return the file content for ``result``."""
        ...

    def write(self, result: ConversionResult, output_path: Path, settings: OutputSettings) -> None:
        """Render ``result`` and write it to ``output_path``."""
        ...
