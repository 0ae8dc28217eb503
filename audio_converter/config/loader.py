"""Configuration loader for Audio Converter."""

import logging
from pathlib import Path

from pydantic import ValidationError

from audio_converter.config.default_source import DefaultConfigSource
from audio_converter.config.models import ConverterConfig, CliOverrides
from audio_converter.config.protocols import ConfigSource
from audio_converter.config.yaml_source import YAMLConfigSource
from audio_converter.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load and validate the converter configuration.

    The loader reads raw data from a ConfigSource, validates it into a
    ConverterConfig and merges explicitly given command-line values on top.

    Attributes:
        _source: Where the raw configuration data comes from
    """

    def __init__(self, source: ConfigSource | None = None) -> None:
        """Initialize the configuration loader.

        Args:
            source: Configuration source (built-in defaults if None)
        """
        self._source = source or DefaultConfigSource()

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ConfigLoader":
        """Create a loader reading from a YAML or JSON file.

        Raises:
            YAMLConfigError: If the file does not exist
        """
        return cls(YAMLConfigSource(config_path))

    @classmethod
    def from_path(cls, config_path: Path | None) -> "ConfigLoader":
        """Create a loader for ``config_path``, or for the defaults when it is None."""
        if config_path is None:
            return cls()
        return cls.from_yaml(config_path)

    @property
    def source_description(self) -> str:
        return self._source.source_description

    def load(self) -> ConverterConfig:
        """Return the validated configuration.

        Raises:
            ConfigValidationError: If the configuration data is invalid
        """
        data, schema_version = self._source.load()
        logger.debug(f"Loading configuration from {self.source_description} (schema v{schema_version})")
        try:
            return ConverterConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid configuration in {self.source_description}: {e}", errors=e
            ) from e

    def merge_overrides(self, config: ConverterConfig, overrides: CliOverrides) -> ConverterConfig:
        """Apply command-line values on top of the loaded configuration.

        Only values that were explicitly given take precedence; everything
        else keeps the configuration file value.

        Args:
            config: Configuration loaded from the source
            overrides: Values given on the command line

        Returns:
            A new ConverterConfig; ``config`` is left untouched

        Raises:
            ConfigValidationError: If the merged configuration is invalid
        """
        transform_data = config.transform.model_dump()
        transform_data.update(overrides.transform_updates())
        output_data = config.output.model_dump()
        if overrides.array_name is not None:
            output_data["array_name"] = overrides.array_name

        for key, value in overrides.transform_updates().items():
            logger.debug(f"Command line overrides {key}={value}")

        try:
            return ConverterConfig.model_validate({"transform": transform_data, "output": output_data})
        except ValidationError as e:
            raise ConfigValidationError(f"Invalid command-line options: {e}", errors=e) from e
