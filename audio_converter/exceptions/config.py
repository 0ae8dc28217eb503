"""Configuration-related exceptions for Audio Converter."""

from pydantic import ValidationError

from audio_converter.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user data.

    This exception is raised when the transform or output settings fail
    validation due to incorrect data types, unknown output formats or
    constraint violations defined in the Pydantic models.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML (or JSON) configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (wrong section types)
    - Unsupported schema version
    """
    pass
