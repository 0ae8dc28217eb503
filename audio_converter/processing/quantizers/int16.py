"""16-bit integer quantizer for Audio Converter."""

import numpy as np

from audio_converter.config import OutputFormat
from audio_converter.constants import INT16_FULL_SCALE


class Int16Quantizer:
    """Quantizer for 16-bit integer output."""

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.INT16

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.int16)

    @property
    def type_name(self) -> str:
        return "i16"

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert to 16-bit integer range."""
        float_data = np.asarray(data, dtype=np.float64)
        # Clamp before scaling: [-1, 1] -> [-32767, 32767], truncated toward zero
        scaled = np.trunc(np.clip(float_data, -1.0, 1.0) * INT16_FULL_SCALE)
        return scaled.astype(self.numpy_dtype)
