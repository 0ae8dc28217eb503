"""Channel-count remapping between mono and stereo."""

import numpy as np

from audio_converter.types import SampleBuffer


def stereo_to_mono(samples: SampleBuffer) -> SampleBuffer:
    """Average each (L, R) pair; a trailing unpaired sample is dropped."""
    pairs = len(samples) // 2
    frames = samples[: pairs * 2].reshape(pairs, 2)
    return (frames[:, 0] + frames[:, 1]) / 2.0


def mono_to_stereo(samples: SampleBuffer) -> SampleBuffer:
    """Duplicate every sample into an (s, s) frame."""
    return np.repeat(samples, 2)


def remap_channels(samples: SampleBuffer, from_channels: int, to_channels: int) -> SampleBuffer:
    """Convert ``samples`` from ``from_channels`` to ``to_channels``.

    Only stereo->mono and mono->stereo change the data; every other pair
    passes through unchanged. Layouts beyond mono/stereo are not remapped.
    """
    if (from_channels, to_channels) == (2, 1):
        return stereo_to_mono(samples)
    if (from_channels, to_channels) == (1, 2):
        return mono_to_stereo(samples)
    return samples


def remapped_channel_count(from_channels: int, to_channels: int) -> int:
    """Return the channel count of the buffer :func:`remap_channels` produces.

    For pairs passed through unchanged this is still ``from_channels``.
    """
    if (from_channels, to_channels) in ((2, 1), (1, 2)):
        return to_channels
    return from_channels
