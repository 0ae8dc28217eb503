"""Configuration file generator for Audio Converter."""

from pathlib import Path

import yaml

from audio_converter.config.defaults import TRANSFORM, OUTPUT
from audio_converter.config.protocols import CURRENT_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# Audio Converter Configuration File
# ==================================
#
# This file controls how decoded audio is transformed and written as an array.
# Command-line options override the values below when given explicitly.
#
# TRANSFORM SECTION
# -----------------
#   gain_db:                  Gain in decibels applied first (0.0 = unchanged)
#   target_sample_rate:       Resample to this rate in Hz (null = keep source rate)
#   target_channel_count:     1 = mono, 2 = stereo (null = keep source layout)
#                             Only stereo<->mono conversions change the data.
#   normalize:                Scale the result so the peak amplitude is 1.0
#   output_format:            One of:
#                             - f32: 32-bit float (default)
#                             - f64: 64-bit float
#                             - i16: 16-bit signed integer (clamped)
#                             - i32: 32-bit signed integer (clamped)
#   channel_aware_resampling: Resample each channel on its own instead of the
#                             raw interleaved stream (only matters for stereo)
#
# OUTPUT SECTION
# --------------
#   array_name:       Identifier of the emitted array
#   include_metadata: Emit a metadata comment (rate, channels, length, format)
#   precision:        Decimal places used for float formats

"""


class ConfigGenerator:
    """Generate example YAML configuration files."""

    def __init__(
        self,
        transform: dict | None = None,
        output: dict | None = None,
    ) -> None:
        """Initialize the config generator.

        Args:
            transform: Transform settings (uses defaults if None)
            output: Output settings (uses defaults if None)
        """
        self.transform = transform if transform is not None else TRANSFORM
        self.output = output if output is not None else OUTPUT

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {
            'schema_version': CURRENT_SCHEMA_VERSION,
            'transform': self.transform,
            'output': self.output,
        }

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
