"""32-bit integer quantizer for Audio Converter."""

import numpy as np

from audio_converter.config import OutputFormat
from audio_converter.constants import INT32_FULL_SCALE


class Int32Quantizer:
    """Quantizer for 32-bit integer output."""

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.INT32

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.int32)

    @property
    def type_name(self) -> str:
        return "i32"

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert to 32-bit integer range."""
        # float64 holds 2^31 - 1 exactly; float32 would round it up past the int32 range
        float_data = np.asarray(data, dtype=np.float64)
        scaled = np.trunc(np.clip(float_data, -1.0, 1.0) * INT32_FULL_SCALE)
        return scaled.astype(self.numpy_dtype)
