"""File-level conversion orchestration for Audio Converter."""

import logging
from pathlib import Path

from rich.console import Console

from audio_converter.audio import AudioDecoder
from audio_converter.config import ConverterConfig
from audio_converter.output import OutputHandler, ConsoleOutputHandler, get_writer
from audio_converter.processing import ConversionResult, SamplePipeline

logger = logging.getLogger(__name__)


class AudioConverter:
    """Decode an audio file, transform its samples and write the array.

    Each call to :meth:`convert_file` is an independent pipeline run; the
    converter keeps no state between files.
    """

    def __init__(
        self,
        config: ConverterConfig,
        *,
        decoder: AudioDecoder | None = None,
        console: Console | None = None,
        output_handler: OutputHandler | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            config: Validated transform and output settings
            decoder: Audio decoder (a default AudioDecoder if None)
            console: Optional Rich console used by the default output handler
            output_handler: Optional output handler for dependency injection
        """
        self.config = config
        self.decoder = decoder or AudioDecoder()
        self.pipeline = SamplePipeline(config.transform)
        self._output_handler = output_handler or ConsoleOutputHandler(console)

    def convert_file(
        self,
        input_path: Path,
        output_path: Path,
        *,
        start_time: float | None = None,
        duration: float | None = None,
    ) -> ConversionResult:
        """Convert ``input_path`` and write the rendered array to ``output_path``.

        Args:
            input_path: Audio file to decode
            output_path: Destination; the suffix selects the writer
            start_time: Optional offset in seconds
            duration: Optional window length in seconds

        Returns:
            The ConversionResult that was written

        Raises:
            AudioDecodeError: If the input cannot be decoded
            TransformError: If a pipeline stage fails
            OutputWriteError: If the output cannot be written
        """
        self._output_handler.info(f"Decoding audio file: {input_path}")
        decoded = self.decoder.decode(input_path, start_time=start_time, duration=duration)
        source = decoded.descriptor
        self._output_handler.info(
            f"Decoded: sample_rate={source.sample_rate}Hz, channels={source.channel_count}, "
            f"samples={len(decoded.samples)}"
        )

        result = self.pipeline.run(decoded.samples, source)
        self._output_handler.info(
            f"Converted: sample_rate={result.descriptor.sample_rate}Hz, "
            f"channels={result.descriptor.channel_count}, samples={result.length}"
        )

        get_writer(output_path).write(result, output_path, self.config.output)
        self._output_handler.info(f"Array written to {output_path}")
        return result
