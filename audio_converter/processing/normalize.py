"""Peak normalization."""

import numpy as np

from audio_converter.types import SampleBuffer


def peak_amplitude(samples: SampleBuffer) -> float:
    """Return max(|s|), or 0.0 for an empty buffer."""
    if samples.size == 0:
        return 0.0
    return float(np.max(np.abs(samples)))


def normalize(samples: SampleBuffer) -> SampleBuffer:
    """Rescale ``samples`` so the peak absolute value is 1.0.

    Silent and empty buffers are returned unchanged.
    """
    peak = peak_amplitude(samples)
    if peak == 0.0:
        return samples
    return samples * (1.0 / peak)
