"""Factory functions for output-format quantizers."""

from typing import cast

import numpy as np

from audio_converter.config import OutputFormat
from audio_converter.processing.quantizers.protocols import Quantizer
from audio_converter.processing.quantizers.narrow_float import NarrowFloatQuantizer
from audio_converter.processing.quantizers.wide_float import WideFloatQuantizer
from audio_converter.processing.quantizers.int16 import Int16Quantizer
from audio_converter.processing.quantizers.int32 import Int32Quantizer


def get_quantizer(output_format: OutputFormat) -> Quantizer:
    """Factory function to get the quantizer for the given output format.

    Args:
        output_format: The target output format

    Returns:
        Quantizer: The appropriate quantizer instance
    """
    quantizers = {
        OutputFormat.NARROW_FLOAT: NarrowFloatQuantizer(),
        OutputFormat.WIDE_FLOAT: WideFloatQuantizer(),
        OutputFormat.INT16: Int16Quantizer(),
        OutputFormat.INT32: Int32Quantizer(),
    }
    return cast(Quantizer, quantizers[output_format])


def quantize(samples: np.ndarray, output_format: OutputFormat) -> np.ndarray:
    """Map the final float buffer into ``output_format``'s representation."""
    return get_quantizer(output_format).convert(samples)
