"""FFmpeg execution wrapper for Audio Converter."""

import logging
import subprocess
from pathlib import Path
from typing import List

from audio_converter.exceptions import AudioProcessingError

logger = logging.getLogger(__name__)


class FFmpegExecutor:
    """Execute FFmpeg/FFprobe commands with error handling and logging."""

    def execute(self, command: List[str], input_path: Path) -> bytes:
        """Execute a command and return its standard output.

        Args:
            command: Command as list of strings
            input_path: Input file path (for error messages)

        Returns:
            Raw bytes written to stdout

        Raises:
            AudioProcessingError: If the tool is missing or exits with an error
        """
        logger.debug(f"Running: {' '.join(command)}")
        try:
            result = subprocess.run(command, check=True, capture_output=True)
        except FileNotFoundError as e:
            raise AudioProcessingError(f"{command[0]} is not installed or not on PATH") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.decode(errors="replace").strip() if e.stderr else str(e)
            logger.debug(f"{command[0]} failed for file {input_path}: {error_msg}")
            raise AudioProcessingError(f"{command[0]} command failed: {error_msg}") from e
        return result.stdout
