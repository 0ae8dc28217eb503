"""Unit tests for CLI app configuration."""

from __future__ import annotations

import typer
from typer.testing import CliRunner

from audio_converter.cli.app import app
from audio_converter.cli.commands import batch, convert, init_config, validate_config

runner = CliRunner()


class TestAppConfiguration:
    """Tests for Typer app configuration."""

    def test_app_is_typer_instance(self) -> None:
        """Test that app is a Typer instance."""
        assert isinstance(app, typer.Typer)

    def test_registered_command_names(self) -> None:
        """Test every command is registered under its CLI name."""
        names = {cmd.name for cmd in app.registered_commands}
        assert names == {"convert", "batch", "init-config", "validate-config"}

    def test_callbacks_are_command_functions(self) -> None:
        """Test the registered callbacks are the command implementations."""
        callbacks = {cmd.name: cmd.callback for cmd in app.registered_commands}
        assert callbacks["convert"] is convert
        assert callbacks["batch"] is batch
        assert callbacks["init-config"] is init_config
        assert callbacks["validate-config"] is validate_config

    def test_help_lists_commands(self) -> None:
        """Test the top-level help output."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "convert" in result.output
        assert "batch" in result.output

    def test_convert_without_args_shows_usage(self) -> None:
        """Test convert with no arguments prints usage."""
        result = runner.invoke(app, ["convert"])
        assert "Usage" in result.output

    def test_version(self) -> None:
        """Test --version prints the version and exits cleanly."""
        result = runner.invoke(app, ["convert", "--version"])

        assert result.exit_code == 0
        assert "Audio Converter v" in result.output
