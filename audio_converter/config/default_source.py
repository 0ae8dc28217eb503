"""Default configuration source for Audio Converter."""

from typing import Any

from audio_converter.config.defaults import TRANSFORM, OUTPUT
from audio_converter.config.protocols import CURRENT_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide built-in default configuration.

    Implements the ConfigSource protocol using the Python defaults
    defined in audio_converter/config/defaults.py.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load the built-in default configuration.

        Returns:
            Tuple of (config_data, schema_version)
        """
        return {"transform": dict(TRANSFORM), "output": dict(OUTPUT)}, CURRENT_SCHEMA_VERSION
