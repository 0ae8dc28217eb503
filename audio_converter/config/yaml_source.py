"""YAML configuration source for Audio Converter."""

from pathlib import Path
from typing import Any

import yaml

from audio_converter.config.protocols import CURRENT_SCHEMA_VERSION
from audio_converter.exceptions import YAMLConfigError


class YAMLConfigSource:
    """Load configuration from YAML files.

    JSON is a subset of YAML, so ``.json`` configuration files load through
    the same parser.
    """

    def __init__(self, config_path: Path) -> None:
        """Initialize the YAML config source.

        Args:
            config_path: Path to the configuration file

        Raises:
            YAMLConfigError: If the file does not exist
        """
        self._config_path = config_path
        if not config_path.exists():
            raise YAMLConfigError(f"Configuration file not found: {config_path}")
        if not config_path.is_file():
            raise YAMLConfigError(f"Configuration path is not a file: {config_path}")

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return f"YAML file: {self._config_path}"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load and parse the configuration file.

        Returns:
            Tuple of (config_data, schema_version)

        Raises:
            YAMLConfigError: If parsing fails or structure is invalid
        """
        try:
            with open(self._config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Failed to parse YAML configuration: {e}"
            if hasattr(e, 'problem_mark') and e.problem_mark is not None:
                mark = e.problem_mark
                error_msg += f" (line {mark.line + 1}, column {mark.column + 1})"
            raise YAMLConfigError(error_msg) from e

        if data is None:
            raise YAMLConfigError("Configuration file is empty")

        if not isinstance(data, dict):
            raise YAMLConfigError(
                f"Configuration must be a YAML mapping, got {type(data).__name__}"
            )

        return self._extract_config(data)

    def _extract_config(self, data: dict[str, Any]) -> tuple[dict[str, Any], int]:
        """Split the schema version from the configuration sections.

        Args:
            data: Parsed YAML data as a dictionary

        Returns:
            Tuple of (config_data, schema_version)

        Raises:
            YAMLConfigError: If the schema version or a section is invalid
        """
        config = dict(data)
        schema_version = config.pop('schema_version', 1)
        if not isinstance(schema_version, int) or isinstance(schema_version, bool):
            raise YAMLConfigError(
                f"'schema_version' must be an integer, got {type(schema_version).__name__}"
            )
        if schema_version > CURRENT_SCHEMA_VERSION:
            raise YAMLConfigError(
                f"Configuration schema version {schema_version} is not supported. "
                f"Maximum supported version is {CURRENT_SCHEMA_VERSION}. "
                "Please update Audio Converter."
            )

        for section in ('transform', 'output', 'output_settings'):
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise YAMLConfigError(
                    f"'{section}' must be a mapping, got {type(value).__name__}"
                )

        return config, schema_version
