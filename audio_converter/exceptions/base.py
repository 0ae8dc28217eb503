"""Base exception classes for Audio Converter."""


class ConverterError(Exception):
    """Base class for user-facing errors.

    Every error the CLI reports to the user inherits from this class so that
    command handlers can catch a single type and exit cleanly.
    """


class ConfigError(ConverterError):
    """Base class for user-facing configuration errors.

    All configuration-related exceptions inherit from this class to ensure
    consistent error handling and user messaging throughout the application.
    """
