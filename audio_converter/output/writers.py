"""Array writers: render a ConversionResult as source text, JSON or .npy."""

import io
import json
import logging
import tempfile
from pathlib import Path
from typing import Any, cast

import numpy as np

from audio_converter.config import OutputSettings
from audio_converter.exceptions import OutputWriteError
from audio_converter.output.protocols import ArrayWriter
from audio_converter.processing import ConversionResult, get_quantizer

logger = logging.getLogger(__name__)


def build_metadata(result: ConversionResult) -> dict[str, Any]:
    """Return the metadata block embedded next to the samples."""
    return {
        "sample_rate": result.descriptor.sample_rate,
        "channels": result.descriptor.channel_count,
        "length": result.length,
        "format": result.format.value,
    }


def format_values(result: ConversionResult, precision: int) -> list[str]:
    """Format every sample as text; floats get ``precision`` decimal places."""
    if result.format.is_integer:
        return [str(int(value)) for value in result.buffer]
    return [f"{float(value):.{precision}f}" for value in result.buffer]


def write_atomic(output_path: Path, content: bytes) -> None:
    """Write ``content`` to a temp file beside ``output_path``, then rename it into place.

    Raises:
        OutputWriteError: If the directory cannot be created or written to
    """
    temp_path: Path | None = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
        temp_path.replace(output_path)
    except OSError as e:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)
        raise OutputWriteError(output_path, str(e)) from e


class _BaseWriter:
    def render(self, result: ConversionResult, settings: OutputSettings) -> bytes:
        raise NotImplementedError

    def write(self, result: ConversionResult, output_path: Path, settings: OutputSettings) -> None:
        """Render ``result`` and write it atomically to ``output_path``."""
        write_atomic(output_path, self.render(result, settings))
        logger.debug(f"Wrote {result.length} samples to {output_path}")


class SourceArrayWriter(_BaseWriter):
    """Render a Rust-style constant array declaration.

    Example output::

        // Audio metadata: {"sample_rate":44100,"channels":2,"length":2,"format":"i16"}
        // Sample array (i16 format)
        const AUDIO_SAMPLES: [i16; 2] = [
            3276,
            -3276
        ];
    """

    def render(self, result: ConversionResult, settings: OutputSettings) -> bytes:
        type_name = get_quantizer(result.format).type_name
        lines = []
        if settings.include_metadata:
            metadata = json.dumps(build_metadata(result), separators=(",", ":"))
            lines.append(f"// Audio metadata: {metadata}")
        lines.append(f"// Sample array ({type_name} format)")
        lines.append(f"const {settings.array_name}: [{type_name}; {result.length}] = [")
        values = format_values(result, settings.precision)
        if values:
            lines.append(",\n".join(f"    {value}" for value in values))
        lines.append("];")
        return ("\n".join(lines) + "\n").encode("utf-8")


class JsonArrayWriter(_BaseWriter):
    """Render ``{"metadata": {...}, "samples": [...]}``."""

    def render(self, result: ConversionResult, settings: OutputSettings) -> bytes:
        if result.format.is_integer:
            samples: list = [int(value) for value in result.buffer]
        else:
            samples = [round(float(value), settings.precision) for value in result.buffer]
        document: dict[str, Any] = {"name": settings.array_name}
        if settings.include_metadata:
            document["metadata"] = build_metadata(result)
        document["samples"] = samples
        return (json.dumps(document, indent=2) + "\n").encode("utf-8")


class NpyArrayWriter(_BaseWriter):
    """Write the encoded buffer as a NumPy ``.npy`` binary file."""

    def render(self, result: ConversionResult, settings: OutputSettings) -> bytes:
        stream = io.BytesIO()
        np.save(stream, result.buffer, allow_pickle=False)
        return stream.getvalue()


def get_writer(output_path: Path) -> ArrayWriter:
    """Pick a writer from the output file suffix.

    ``.json`` and ``.npy`` get their own writers; anything else is rendered
    as source text.
    """
    writers = {
        ".json": JsonArrayWriter(),
        ".npy": NpyArrayWriter(),
    }
    return cast(ArrayWriter, writers.get(output_path.suffix.lower(), SourceArrayWriter()))
