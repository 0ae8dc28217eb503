"""Quantizer protocols for Audio Converter."""

from typing import Protocol

import numpy as np

from audio_converter.config import OutputFormat


class Quantizer(Protocol):
    """Protocol for output-format quantization strategies."""

    @property
    def output_format(self) -> OutputFormat:
        """Return the output format this quantizer produces."""
        ...

    @property
    def numpy_dtype(self) -> np.dtype:
        """Return the NumPy dtype of the encoded buffer."""
        ...

    @property
    def type_name(self) -> str:
        """Return the element type name used in rendered arrays (e.g. "i16")."""
        ...

    def convert(self, data: np.ndarray) -> np.ndarray:
        """Convert floating-point samples to this representation."""
        ...
