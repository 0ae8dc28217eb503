"""CLI application definition for Audio Converter."""

import typer

from audio_converter.cli.commands import convert, batch, init_config, validate_config

app = typer.Typer(
    add_completion=False,
    help="AudioConverter - convert audio files into sample arrays for source code.",
    no_args_is_help=True,
)

# Register commands
app.command(name="convert", help="Convert an audio file into an array", no_args_is_help=True)(convert)
app.command(name="batch", help="Convert every audio file in a directory", no_args_is_help=True)(batch)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
