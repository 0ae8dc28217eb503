"""Linear-interpolation sample-rate conversion.

Two modes are provided. The default works on the raw interleaved stream
index by index, so on multi-channel input neighbouring samples of different
channels are blended together. ``channel_aware=True`` resamples every
channel's strided subsequence on its own and re-interleaves the result.
"""

import logging

import numpy as np

from audio_converter.exceptions import DegenerateParameterError
from audio_converter.types import AudioStreamDescriptor, SampleBuffer

logger = logging.getLogger(__name__)


def _interpolate(data: np.ndarray, ratio: float) -> np.ndarray:
    """Resample a single sequence by ``ratio`` (target / source).

    Output index ``i`` reads source position ``i / ratio``. Positions with a
    right neighbour are interpolated, the last valid index is copied and
    anything past the end is dropped.
    """
    length = len(data)
    output_length = int(np.floor(length * ratio))
    if output_length <= 0 or length == 0:
        return np.empty(0, dtype=data.dtype)

    positions = np.arange(output_length, dtype=np.float64) / ratio
    indices = np.floor(positions).astype(np.int64)
    indices = indices[indices < length]
    positions = positions[: len(indices)]
    frac = positions - indices

    right = np.minimum(indices + 1, length - 1)
    has_right = indices + 1 < length
    out = np.where(
        has_right,
        data[indices] * (1.0 - frac) + data[right] * frac,
        data[indices],
    )
    return out.astype(data.dtype, copy=False)


def resample(
    samples: SampleBuffer,
    descriptor: AudioStreamDescriptor,
    target_rate: int,
    *,
    channel_aware: bool = False,
) -> SampleBuffer:
    """Convert ``samples`` from ``descriptor.sample_rate`` to ``target_rate``.

    The channel count is unchanged.

    Args:
        samples: Interleaved input buffer
        descriptor: Rate and channel count of ``samples``
        target_rate: Desired sample rate in Hz; 0 yields an empty buffer
        channel_aware: Resample each channel independently

    Returns:
        A new buffer whose length is a whole number of frames

    Raises:
        DegenerateParameterError: If the source rate is 0 (or negative) and
            differs from ``target_rate``
    """
    source_rate = descriptor.sample_rate
    if target_rate == source_rate:
        return samples
    if target_rate < 0:
        raise DegenerateParameterError("target_sample_rate", target_rate)
    if target_rate == 0:
        return np.empty(0, dtype=samples.dtype)
    if source_rate <= 0:
        raise DegenerateParameterError("source_sample_rate", source_rate)

    ratio = target_rate / source_rate
    channels = descriptor.channel_count

    if channel_aware and channels > 1:
        frames = len(samples) // channels
        per_channel = samples[: frames * channels].reshape(frames, channels)
        columns = [_interpolate(per_channel[:, ch], ratio) for ch in range(channels)]
        return np.column_stack(columns).reshape(-1)

    out = _interpolate(samples, ratio)
    if channels > 1:
        whole = len(out) - len(out) % channels
        if whole != len(out):
            logger.debug(f"Dropping {len(out) - whole} trailing sample(s) of a partial frame")
        out = out[:whole]
    return out
