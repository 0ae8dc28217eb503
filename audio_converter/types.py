"""Shared types for Audio Converter."""
from typing import NamedTuple, TypeAlias

import numpy as np

SampleBuffer: TypeAlias = np.ndarray  # 1-D, interleaved frame-major when channels > 1
EncodedBuffer: TypeAlias = np.ndarray  # dtype decided by the output format


class AudioStreamDescriptor(NamedTuple):
    """Interpretation of a sample buffer: rate in Hz and interleaved channel count."""
    sample_rate: int
    channel_count: int

    def frame_count(self, length: int) -> int:
        """Return the number of whole frames in a buffer of ``length`` samples."""
        if self.channel_count <= 0:
            return length
        return length // self.channel_count
