"""Output-format quantization strategies."""
from audio_converter.processing.quantizers.protocols import Quantizer
from audio_converter.processing.quantizers.factory import get_quantizer, quantize

__all__ = ["Quantizer", "get_quantizer", "quantize"]
