"""Audio Converter - turn decoded audio into sample arrays for source files."""

from audio_converter.constants import VERSION

__version__ = VERSION
