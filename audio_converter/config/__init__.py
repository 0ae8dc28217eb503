"""Configuration package for Audio Converter."""

# Re-export enums
from audio_converter.config.enums import OutputFormat

# Re-export models
from audio_converter.config.models import TransformConfig, OutputSettings, ConverterConfig, CliOverrides

# Re-export sources and loader
from audio_converter.config.default_source import DefaultConfigSource
from audio_converter.config.yaml_source import YAMLConfigSource
from audio_converter.config.loader import ConfigLoader
from audio_converter.config.resolver import ConfigResolver
from audio_converter.config.generator import ConfigGenerator

__all__ = [
    # Enums
    "OutputFormat",
    # Models
    "TransformConfig",
    "OutputSettings",
    "ConverterConfig",
    "CliOverrides",
    # Loading
    "DefaultConfigSource",
    "YAMLConfigSource",
    "ConfigLoader",
    "ConfigResolver",
    "ConfigGenerator",
]
