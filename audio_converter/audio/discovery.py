"""Audio file discovery for batch conversion."""

import re
from pathlib import Path
from typing import List

from audio_converter.constants import SUPPORTED_EXTENSIONS


class AudioFileDiscovery:
    """Discover and sort audio files in a directory.

    Files are ordered by the first number in their name, then by name, so
    numbered takes come out in sequence.
    """

    def __init__(self, input_dir: Path, extensions: tuple[str, ...] = SUPPORTED_EXTENSIONS) -> None:
        """Initialize the file discovery.

        Args:
            input_dir: Directory to search for audio files
            extensions: Accepted file extensions, lower-case without dot
        """
        self.input_dir = input_dir
        self.extensions = {ext.lower() for ext in extensions}

    def discover_files(self) -> List[Path]:
        """Discover and sort audio files in the input directory.

        Returns:
            Sorted list of audio file paths
        """
        files = [
            path for path in self.input_dir.iterdir()
            if path.is_file() and path.suffix.lower().lstrip(".") in self.extensions
        ]
        files.sort(key=self._sort_key)
        return files

    def _sort_key(self, path: Path) -> tuple[int | float, str]:
        """Generate sort key based on the numeric sequence in the filename.

        Args:
            path: File path to generate sort key for

        Returns:
            Tuple of (numeric_value, filename)
        """
        filename = path.stem
        match = re.search(r'\d+', filename)
        if match:
            num = int(match.group())
        else:
            num = float('inf')  # Put files without numbers at the end
        return (num, filename)
