"""Audio decoding for Audio Converter."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import soundfile as sf

from audio_converter.audio.ffmpeg import FFmpegCommandBuilder, FFmpegExecutor
from audio_converter.exceptions import AudioDecodeError, AudioProcessingError
from audio_converter.types import AudioStreamDescriptor, SampleBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedAudio:
    """Interleaved float32 samples paired with their stream descriptor."""

    samples: SampleBuffer
    descriptor: AudioStreamDescriptor

    @property
    def frames(self) -> int:
        return self.descriptor.frame_count(len(self.samples))

    @property
    def duration_seconds(self) -> float:
        if self.descriptor.sample_rate <= 0:
            return 0.0
        return self.frames / self.descriptor.sample_rate


def trim_frames(
    frames: np.ndarray,
    sample_rate: int,
    start_time: float | None = None,
    duration: float | None = None,
) -> np.ndarray:
    """Cut a (frames, channels) array to ``[start_time, start_time + duration)`` seconds.

    Whole frames only. A start past the end gives an empty array.

    Raises:
        ValueError: If ``start_time`` or ``duration`` is negative
    """
    if start_time is not None and start_time < 0:
        raise ValueError(f"start_time must be >= 0, got {start_time}")
    if duration is not None and duration < 0:
        raise ValueError(f"duration must be >= 0, got {duration}")

    start = int((start_time or 0.0) * sample_rate)
    stop = len(frames) if duration is None else start + int(duration * sample_rate)
    return frames[start:stop]


class AudioDecoder:
    """Decode an audio file into an interleaved float32 buffer.

    libsndfile (through soundfile) handles WAV, FLAC, OGG, AIFF and friends.
    Anything it cannot open is handed to ffmpeg, which covers MP3 and AAC.
    """

    def __init__(
        self,
        *,
        command_builder: FFmpegCommandBuilder | None = None,
        executor: FFmpegExecutor | None = None,
        use_ffmpeg_fallback: bool = True,
    ) -> None:
        """Initialize the decoder.

        Args:
            command_builder: Builder for ffmpeg/ffprobe commands
            executor: Runner for ffmpeg/ffprobe commands
            use_ffmpeg_fallback: Try ffmpeg when soundfile cannot read the file
        """
        self.command_builder = command_builder or FFmpegCommandBuilder()
        self.executor = executor or FFmpegExecutor()
        self.use_ffmpeg_fallback = use_ffmpeg_fallback

    def decode(
        self,
        path: Path,
        *,
        start_time: float | None = None,
        duration: float | None = None,
    ) -> DecodedAudio:
        """Decode ``path`` and optionally keep only a time window.

        Args:
            path: Audio file to decode
            start_time: Offset in seconds of the first kept frame
            duration: Length in seconds of the kept window

        Returns:
            DecodedAudio with interleaved float32 samples

        Raises:
            AudioDecodeError: If the file is missing, empty or cannot be decoded
        """
        path = Path(path)
        if not path.exists():
            raise AudioDecodeError(path, "file does not exist")
        if not path.is_file():
            raise AudioDecodeError(path, "not a regular file")
        if path.stat().st_size == 0:
            raise AudioDecodeError(path, "file is empty")

        frames, sample_rate = self._read(path)
        channels = frames.shape[1]

        try:
            frames = trim_frames(frames, sample_rate, start_time, duration)
        except ValueError as e:
            raise AudioDecodeError(path, str(e)) from e

        samples = np.ascontiguousarray(frames, dtype=np.float32).reshape(-1)
        decoded = DecodedAudio(samples=samples, descriptor=AudioStreamDescriptor(sample_rate, channels))
        logger.debug(
            f"Decoded {path.name}: {sample_rate} Hz, {channels} channel(s), {len(samples)} samples "
            f"({decoded.duration_seconds:.3f} s)"
        )
        return decoded

    def _read(self, path: Path) -> tuple[np.ndarray, int]:
        """Return a (frames, channels) float32 array and the sample rate."""
        try:
            data, sample_rate = sf.read(str(path), dtype="float32", always_2d=True)
            return data, int(sample_rate)
        except RuntimeError as e:  # soundfile.LibsndfileError is a RuntimeError
            if not self.use_ffmpeg_fallback:
                raise AudioDecodeError(path, str(e)) from e
            logger.debug(f"soundfile could not read {path.name} ({e}); trying ffmpeg")
            try:
                return self._read_ffmpeg(path)
            except AudioProcessingError as ffmpeg_e:
                raise AudioDecodeError(
                    path, f"soundfile: {e}, ffmpeg: {ffmpeg_e}"
                ) from ffmpeg_e

    def _read_ffmpeg(self, path: Path) -> tuple[np.ndarray, int]:
        """Decode with ffmpeg after reading the stream layout with ffprobe."""
        stream_info = self.executor.execute(self.command_builder.build_stream_info_command(path), path)
        try:
            streams = json.loads(stream_info).get("streams") or []
        except json.JSONDecodeError as e:
            raise AudioProcessingError(f"ffprobe returned invalid JSON: {e}") from e
        if not streams:
            raise AudioProcessingError("no audio stream found")

        stream = streams[0]
        sample_rate = int(stream.get("sample_rate", 0))
        channels = int(stream.get("channels", 0))
        if sample_rate <= 0 or channels <= 0:
            raise AudioProcessingError(
                f"unusable stream parameters: {sample_rate} Hz, {channels} channel(s)"
            )

        raw = self.executor.execute(self.command_builder.build_decode_command(path), path)
        samples = np.frombuffer(raw, dtype="<f4")
        whole = len(samples) - len(samples) % channels
        return samples[:whole].astype(np.float32).reshape(-1, channels), sample_rate
