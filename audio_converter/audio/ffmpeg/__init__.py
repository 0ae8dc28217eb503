"""FFmpeg fallback decoding helpers."""
from audio_converter.audio.ffmpeg.commands import FFmpegCommandBuilder
from audio_converter.audio.ffmpeg.executor import FFmpegExecutor

__all__ = ["FFmpegCommandBuilder", "FFmpegExecutor"]
