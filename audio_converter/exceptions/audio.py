"""Audio input/output exceptions for Audio Converter."""

from pathlib import Path

from audio_converter.exceptions.base import ConverterError


class AudioProcessingError(ConverterError):
    """Raised when audio file operations fail.

    This exception is raised for issues such as:
    - Missing or unreadable input files
    - External tool (ffmpeg/ffprobe) failures
    - File system errors during reading/writing
    """


class AudioDecodeError(AudioProcessingError):
    """Raised when an input file cannot be decoded into samples."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to decode {path}: {reason}")
        self.path = path
        self.reason = reason


class OutputWriteError(AudioProcessingError):
    """Raised when the rendered array cannot be written to disk."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
