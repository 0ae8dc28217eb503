"""Configuration path resolution for Audio Converter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Looked up in this order; the first existing file wins
DEFAULT_CONFIG_NAMES = (
    "audio_converter.yaml",
    "audio_converter.yml",
    "audio_converter.json",
)


class ConfigResolver:
    """Decide which configuration file a command should read.

    Resolution order (first match wins):
    1. The path given with ``--config``
    2. One of ``DEFAULT_CONFIG_NAMES`` in the search directory (the CWD by default)
    3. None, meaning the built-in defaults
    """

    def __init__(self, explicit_path: Path | None = None, *, search_dir: Path | None = None) -> None:
        """Initialize the config resolver.

        Args:
            explicit_path: Path given on the command line (highest priority)
            search_dir: Directory searched for a default config file
        """
        self.explicit_path = explicit_path
        self.search_dir = search_dir

    def candidates(self) -> list[Path]:
        """Return the default file names as paths in the search directory."""
        directory = self.search_dir or Path.cwd()
        return [directory / name for name in DEFAULT_CONFIG_NAMES]

    def resolve(self) -> Path | None:
        """Return the configuration file to load, or None for built-in defaults.

        Raises:
            FileNotFoundError: If ``explicit_path`` is missing or not a regular file
        """
        if self.explicit_path is not None:
            if not self.explicit_path.is_file():
                reason = "is not a file" if self.explicit_path.exists() else "not found"
                raise FileNotFoundError(f"Configuration file {reason}: {self.explicit_path}")
            logger.debug(f"Using configuration from --config: {self.explicit_path}")
            return self.explicit_path

        for candidate in self.candidates():
            if candidate.is_file():
                logger.debug(f"Found configuration file {candidate}")
                return candidate

        logger.debug("No configuration file found; using built-in defaults")
        return None

    @staticmethod
    def get_default_path(search_dir: Path | None = None) -> Path:
        """Return where ``init-config`` writes a new file when no path is given."""
        return (search_dir or Path.cwd()) / DEFAULT_CONFIG_NAMES[0]
