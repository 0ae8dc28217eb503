"""Sample transformation package for Audio Converter."""

from audio_converter.processing.gain import apply_gain, db_to_linear
from audio_converter.processing.resample import resample
from audio_converter.processing.channels import remap_channels
from audio_converter.processing.normalize import normalize, peak_amplitude
from audio_converter.processing.quantizers import quantize, get_quantizer
from audio_converter.processing.pipeline import SamplePipeline, ConversionResult, run

__all__ = [
    "apply_gain",
    "db_to_linear",
    "resample",
    "remap_channels",
    "normalize",
    "peak_amplitude",
    "quantize",
    "get_quantizer",
    "SamplePipeline",
    "ConversionResult",
    "run",
]
