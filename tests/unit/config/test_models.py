"""Unit tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from audio_converter.config.enums import OutputFormat
from audio_converter.config.models import CliOverrides, ConverterConfig, OutputSettings, TransformConfig


@pytest.mark.pydantic
class TestTransformConfig:
    """Tests for TransformConfig."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = TransformConfig()
        assert config.gain_db == 0.0
        assert config.target_sample_rate is None
        assert config.target_channel_count is None
        assert config.normalize is False
        assert config.output_format is OutputFormat.NARROW_FLOAT
        assert config.channel_aware_resampling is False

    @pytest.mark.parametrize("value,expected", [
        ("i16", OutputFormat.INT16),
        ("I16", OutputFormat.INT16),
        ("INT32", OutputFormat.INT32),
        ("F64", OutputFormat.WIDE_FLOAT),
        (OutputFormat.NARROW_FLOAT, OutputFormat.NARROW_FLOAT),
    ])
    def test_output_format_parsing(self, value, expected: OutputFormat) -> None:
        """Test output_format accepts values and names in any case."""
        assert TransformConfig(output_format=value).output_format is expected

    def test_invalid_output_format(self) -> None:
        """Test unknown formats are rejected."""
        with pytest.raises(ValidationError, match="Invalid output format"):
            TransformConfig(output_format="u8")

    @pytest.mark.parametrize("rate", [0, -44100])
    def test_target_sample_rate_must_be_positive(self, rate: int) -> None:
        """Test non-positive target rates are rejected."""
        with pytest.raises(ValidationError):
            TransformConfig(target_sample_rate=rate)

    def test_target_channel_count_allows_zero(self) -> None:
        """Test a zero channel count is accepted."""
        assert TransformConfig(target_channel_count=0).target_channel_count == 0

    def test_negative_channel_count_rejected(self) -> None:
        """Test negative channel counts are rejected."""
        with pytest.raises(ValidationError):
            TransformConfig(target_channel_count=-1)

    def test_frozen(self) -> None:
        """Test the config cannot be mutated."""
        config = TransformConfig()
        with pytest.raises(ValidationError):
            config.gain_db = 3.0  # type: ignore[misc]


@pytest.mark.pydantic
class TestOutputSettings:
    """Tests for OutputSettings."""

    def test_defaults(self) -> None:
        """Test default values."""
        settings = OutputSettings()
        assert settings.array_name == "AUDIO_SAMPLES"
        assert settings.include_metadata is True
        assert settings.precision == 6

    def test_array_name_trimmed(self) -> None:
        """Test surrounding whitespace is removed."""
        assert OutputSettings(array_name="  KICK ").array_name == "KICK"

    @pytest.mark.parametrize("name", ["1KICK", "my-array", "", "two words"])
    def test_invalid_array_name(self, name: str) -> None:
        """Test names that are not identifiers are rejected."""
        with pytest.raises(ValidationError, match="valid identifier"):
            OutputSettings(array_name=name)

    @pytest.mark.parametrize("precision", [0, 18])
    def test_precision_range(self, precision: int) -> None:
        """Test precision outside 1..17 is rejected."""
        with pytest.raises(ValidationError):
            OutputSettings(precision=precision)


@pytest.mark.pydantic
class TestConverterConfig:
    """Tests for ConverterConfig."""

    def test_nested_layout(self) -> None:
        """Test the transform/output section layout."""
        config = ConverterConfig.model_validate({
            "transform": {"gain_db": 3.0, "output_format": "i16"},
            "output": {"array_name": "KICK"},
        })
        assert config.transform.gain_db == 3.0
        assert config.transform.output_format is OutputFormat.INT16
        assert config.output.array_name == "KICK"

    def test_flat_layout(self) -> None:
        """Test the flat key layout maps onto the nested model."""
        config = ConverterConfig.model_validate({
            "output_format": "I16",
            "sample_rate": 22050,
            "channels": 1,
            "gain": 3.0,
            "normalize": True,
            "output_settings": {"array_type": "Vec", "include_metadata": False, "compress": False},
        })
        assert config.transform.output_format is OutputFormat.INT16
        assert config.transform.target_sample_rate == 22050
        assert config.transform.target_channel_count == 1
        assert config.transform.gain_db == 3.0
        assert config.transform.normalize is True
        assert config.output.include_metadata is False

    def test_flat_layout_with_nulls(self) -> None:
        """Test null optional values in the flat layout."""
        config = ConverterConfig.model_validate({"output_format": "F32", "sample_rate": None, "channels": None})
        assert config.transform.target_sample_rate is None
        assert config.transform.target_channel_count is None

    def test_empty_mapping_uses_defaults(self) -> None:
        """Test an empty mapping produces the defaults."""
        config = ConverterConfig.model_validate({})
        assert config.transform == TransformConfig()
        assert config.output == OutputSettings()


class TestCliOverrides:
    """Tests for CliOverrides."""

    def test_only_given_values_are_updates(self) -> None:
        """Test None values are not reported as updates."""
        overrides = CliOverrides(gain_db=0.0, output_format=OutputFormat.INT32)
        assert overrides.transform_updates() == {"output_format": OutputFormat.INT32, "gain_db": 0.0}

    def test_no_values(self) -> None:
        """Test an empty override set."""
        assert CliOverrides().transform_updates() == {}

    def test_false_flag_is_an_update(self) -> None:
        """Test an explicit False is kept."""
        assert CliOverrides(normalize=False).transform_updates() == {"normalize": False}
