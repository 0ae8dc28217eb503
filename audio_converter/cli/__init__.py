"""Command-line interface for Audio Converter."""
