"""Sample transformation pipeline for Audio Converter."""

import logging
from dataclasses import dataclass

import numpy as np

from audio_converter.config import OutputFormat, TransformConfig
from audio_converter.exceptions import NonFiniteSampleError
from audio_converter.processing.channels import remap_channels, remapped_channel_count
from audio_converter.processing.gain import apply_gain
from audio_converter.processing.normalize import normalize
from audio_converter.processing.quantizers import get_quantizer
from audio_converter.processing.resample import resample
from audio_converter.types import AudioStreamDescriptor, EncodedBuffer, SampleBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Self-describing output of one pipeline run."""

    buffer: EncodedBuffer
    descriptor: AudioStreamDescriptor
    format: OutputFormat

    @property
    def length(self) -> int:
        return len(self.buffer)

    @property
    def frames(self) -> int:
        return self.descriptor.frame_count(self.length)


class SamplePipeline:
    """Apply gain, resampling, channel remapping, normalization and quantization.

    The stage order is fixed. Gain and quantization always run; resampling and
    remapping run only when a target is configured and differs from the
    source, and normalization only when enabled. Peak normalization therefore
    always sees the final rate and channel layout.

    The pipeline holds no per-run state, so one instance can serve several
    runs, including runs on different threads.
    """

    def __init__(self, config: TransformConfig) -> None:
        """Initialize the pipeline.

        Args:
            config: Read-only transform settings
        """
        self.config = config
        self._quantizer = get_quantizer(config.output_format)

    def run(self, samples: SampleBuffer, descriptor: AudioStreamDescriptor) -> ConversionResult:
        """Transform ``samples`` and return the encoded result.

        Args:
            samples: Interleaved samples as produced by the decoder
            descriptor: Source sample rate and channel count

        Returns:
            ConversionResult describing the final rate, channels and format

        Raises:
            DegenerateParameterError: If the gain overflows or resampling is
                requested from a zero source rate
            NonFiniteSampleError: If the buffer holds NaN or infinite values
                after gain or remap, or overflows the float output format
        """
        config = self.config
        # Work on a float64 copy; the caller's buffer is never modified
        buffer = np.array(samples, dtype=np.float64).reshape(-1)
        current = descriptor

        buffer = apply_gain(buffer, config.gain_db)
        self._check_finite(buffer, "gain")
        logger.debug(f"Gain {config.gain_db:+.2f} dB applied to {len(buffer)} samples")

        target_rate = config.target_sample_rate
        if target_rate is not None and target_rate != current.sample_rate:
            before = len(buffer)
            buffer = resample(
                buffer, current, target_rate, channel_aware=config.channel_aware_resampling
            )
            current = current._replace(sample_rate=target_rate)
            logger.debug(f"Resampled to {target_rate} Hz: {before} -> {len(buffer)} samples")

        target_channels = config.target_channel_count
        if target_channels is not None and target_channels != current.channel_count:
            before = len(buffer)
            buffer = remap_channels(buffer, current.channel_count, target_channels)
            resulting = remapped_channel_count(current.channel_count, target_channels)
            if resulting != target_channels:
                logger.warning(
                    f"Cannot remap {current.channel_count} channel(s) to {target_channels}; "
                    "keeping the source layout"
                )
            current = current._replace(channel_count=resulting)
            # (L + R) / 2 overflows for samples near the float64 limit
            self._check_finite(buffer, "remap")
            logger.debug(f"Remapped to {resulting} channel(s): {before} -> {len(buffer)} samples")

        if config.normalize:
            buffer = normalize(buffer)
            logger.debug("Peak-normalized buffer")

        encoded = self._quantizer.convert(buffer)
        if not config.output_format.is_integer:
            self._check_finite(encoded, "quantize")
        logger.debug(f"Quantized {len(encoded)} samples to {self._quantizer.type_name}")

        return ConversionResult(buffer=encoded, descriptor=current, format=config.output_format)

    @staticmethod
    def _check_finite(buffer: np.ndarray, stage: str) -> None:
        finite = np.isfinite(buffer)
        if not finite.all():
            raise NonFiniteSampleError(stage, int(buffer.size - np.count_nonzero(finite)))


def run(
    samples: SampleBuffer,
    descriptor: AudioStreamDescriptor,
    config: TransformConfig,
) -> ConversionResult:
    """Run the pipeline once with ``config``."""
    return SamplePipeline(config).run(samples, descriptor)
