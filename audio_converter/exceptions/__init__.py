"""Exception hierarchy for Audio Converter."""
from audio_converter.exceptions.base import ConverterError, ConfigError
from audio_converter.exceptions.config import ConfigValidationError, YAMLConfigError
from audio_converter.exceptions.audio import AudioProcessingError, AudioDecodeError, OutputWriteError
from audio_converter.exceptions.transform import (
    TransformError,
    DegenerateParameterError,
    NonFiniteSampleError,
)

__all__ = [
    "ConverterError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "AudioProcessingError",
    "AudioDecodeError",
    "OutputWriteError",
    "TransformError",
    "DegenerateParameterError",
    "NonFiniteSampleError",
]
