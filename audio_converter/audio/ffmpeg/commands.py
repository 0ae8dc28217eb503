"""FFmpeg command builders for Audio Converter."""

from pathlib import Path
from typing import List


class FFmpegCommandBuilder:
    """Build FFmpeg/FFprobe commands for decoding operations."""

    @staticmethod
    def build_stream_info_command(input_path: Path) -> List[str]:
        """Build FFprobe command that reports stream information as JSON.

        Args:
            input_path: Input audio file path

        Returns:
            FFprobe command as list of strings
        """
        return [
            'ffprobe', '-v', 'quiet', '-print_format', 'json',
            '-show_streams', '-select_streams', 'a:0', str(input_path)
        ]

    @staticmethod
    def build_decode_command(input_path: Path) -> List[str]:
        """Build FFmpeg command that decodes the first audio stream to raw float32.

        The samples are written interleaved, little-endian, to stdout.

        Args:
            input_path: Input audio file path

        Returns:
            FFmpeg command as list of strings
        """
        return [
            'ffmpeg', '-v', 'error', '-nostdin', '-i', str(input_path),
            '-map', '0:a:0', '-f', 'f32le', '-acodec', 'pcm_f32le', 'pipe:1'
        ]
