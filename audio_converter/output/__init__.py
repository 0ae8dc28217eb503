"""Output handling package for Audio Converter."""
from audio_converter.output.protocols import OutputHandler, ArrayWriter
from audio_converter.output.console import ConsoleOutputHandler
from audio_converter.output.writers import (
    SourceArrayWriter,
    JsonArrayWriter,
    NpyArrayWriter,
    get_writer,
)

__all__ = [
    "OutputHandler",
    "ArrayWriter",
    "ConsoleOutputHandler",
    "SourceArrayWriter",
    "JsonArrayWriter",
    "NpyArrayWriter",
    "get_writer",
]
