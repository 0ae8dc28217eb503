"""Audio input package for Audio Converter."""

from audio_converter.audio.decoder import AudioDecoder, DecodedAudio, trim_frames
from audio_converter.audio.discovery import AudioFileDiscovery

__all__ = [
    "AudioDecoder",
    "DecodedAudio",
    "trim_frames",
    "AudioFileDiscovery",
]
