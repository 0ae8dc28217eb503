"""Pydantic models for Audio Converter configuration."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from audio_converter.config.enums import OutputFormat
from audio_converter.constants import DEFAULT_ARRAY_NAME


class TransformConfig(BaseModel):
    """Settings for one run of the sample transformation pipeline.

    Immutable once built; the pipeline only reads it.
    """

    model_config = ConfigDict(frozen=True)

    gain_db: float = Field(0.0, description="Gain applied before any other stage, in decibels")
    target_sample_rate: int | None = Field(None, ge=1, description="Resample to this rate in Hz")
    target_channel_count: int | None = Field(None, ge=0, description="Remap to this channel count")
    normalize: bool = Field(False, description="Scale the final buffer to a peak of 1.0")
    output_format: OutputFormat = OutputFormat.NARROW_FLOAT
    channel_aware_resampling: bool = Field(
        False, description="Resample each channel separately instead of the raw interleaved stream"
    )

    @field_validator("output_format", mode="before")
    @classmethod
    def validate_output_format(cls, value) -> OutputFormat:
        if isinstance(value, str):
            return OutputFormat.parse(value)
        return value


class OutputSettings(BaseModel):
    """Presentation settings for the array writer."""

    array_name: str = Field(DEFAULT_ARRAY_NAME, description="Identifier of the emitted array")
    include_metadata: bool = Field(True, description="Emit the metadata comment above the array")
    precision: int = Field(6, ge=1, le=17, description="Decimal places for float formats")

    @field_validator("array_name")
    @classmethod
    def validate_array_name(cls, value: str) -> str:
        value = value.strip()
        if not value.isidentifier():
            raise ValueError(f"Array name must be a valid identifier, got {value!r}")
        return value


class ConverterConfig(BaseModel):
    """Complete file-level configuration."""

    transform: TransformConfig = Field(default_factory=TransformConfig)
    output: OutputSettings = Field(default_factory=OutputSettings)

    @model_validator(mode="before")
    @classmethod
    def accept_flat_layout(cls, data: Any) -> Any:
        """Map the flat key layout (``gain``, ``sample_rate``, ...) onto the nested one."""
        if not isinstance(data, dict):
            return data
        flat_keys = {
            "output_format": "output_format",
            "sample_rate": "target_sample_rate",
            "channels": "target_channel_count",
            "gain": "gain_db",
            "normalize": "normalize",
        }
        if not any(key in data for key in (*flat_keys, "output_settings")):
            return data

        converted = dict(data)
        transform = dict(converted.get("transform") or {})
        for flat, nested in flat_keys.items():
            if flat in converted:
                transform[nested] = converted.pop(flat)
        converted["transform"] = transform
        if "output_settings" in converted:
            settings = dict(converted.pop("output_settings") or {})
            # array_type and compress have no effect on rendering
            settings.pop("array_type", None)
            settings.pop("compress", None)
            converted["output"] = {**settings, **(converted.get("output") or {})}
        return converted


class CliOverrides(BaseModel):
    """Values given explicitly on the command line.

    ``None`` means "not given" and leaves the configuration file value alone.
    """

    output_format: OutputFormat | None = None
    target_sample_rate: int | None = Field(None, ge=1)
    target_channel_count: int | None = Field(None, ge=0)
    gain_db: float | None = None
    normalize: bool | None = None
    channel_aware_resampling: bool | None = None
    array_name: str | None = None

    def transform_updates(self) -> dict[str, Any]:
        """Return the transform fields that were explicitly set."""
        fields = (
            "output_format",
            "target_sample_rate",
            "target_channel_count",
            "gain_db",
            "normalize",
            "channel_aware_resampling",
        )
        return {name: getattr(self, name) for name in fields if getattr(self, name) is not None}
