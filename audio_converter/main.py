"""Entry point for the Audio Converter CLI.

This module exposes a Typer-powered command-line interface that decodes audio
files, runs them through the sample transformation pipeline and writes the
result as an array declaration.
"""

from audio_converter.cli.app import app


if __name__ == "__main__":
    app()
