"""Decibel gain stage."""

import numpy as np

from audio_converter.exceptions import DegenerateParameterError
from audio_converter.types import SampleBuffer


def db_to_linear(gain_db: float) -> float:
    """Convert a decibel gain to a linear amplitude factor.

    Gains too large for a float come back as ``inf`` rather than raising.
    """
    with np.errstate(over="ignore"):
        return float(np.power(10.0, gain_db / 20.0))


def apply_gain(samples: SampleBuffer, gain_db: float) -> SampleBuffer:
    """Scale every sample by the linear factor of ``gain_db``.

    0 dB returns ``samples`` itself. No clamping is done here; values outside
    [-1, 1] are resolved by the quantizer.

    Raises:
        DegenerateParameterError: If ``gain_db`` is not finite or its linear
            factor overflows
    """
    if gain_db == 0.0:
        return samples
    factor = db_to_linear(gain_db)
    if not np.isfinite(factor):
        raise DegenerateParameterError("gain_db", gain_db)
    return np.multiply(samples, factor)
