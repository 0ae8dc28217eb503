"""64-bit float quantizer for Audio Converter."""

import numpy as np

from audio_converter.config import OutputFormat


class WideFloatQuantizer:
    """Quantizer for 64-bit float output."""

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.WIDE_FLOAT

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float64)

    @property
    def type_name(self) -> str:
        return "f64"

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Widen to 64-bit float (no clamping, no scaling)."""
        return np.asarray(data).astype(self.numpy_dtype)
