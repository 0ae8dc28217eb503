"""32-bit float quantizer for Audio Converter."""

import numpy as np

from audio_converter.config import OutputFormat


class NarrowFloatQuantizer:
    """Quantizer for 32-bit float output."""

    @property
    def output_format(self) -> OutputFormat:
        return OutputFormat.NARROW_FLOAT

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(np.float32)

    @property
    def type_name(self) -> str:
        return "f32"

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert to 32-bit float (no clamping, no scaling).

        Values beyond the float32 range become ``inf``.
        """
        with np.errstate(over="ignore"):
            return np.asarray(data).astype(self.numpy_dtype)
