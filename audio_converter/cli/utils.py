"""CLI utility functions for Audio Converter."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from audio_converter.constants import DEFAULT_OUTPUT_SUFFIX


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _default_output_path(input_path: Path, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> Path:
    """Return a conflict-free output file path next to the input file."""

    base_dir = input_path.parent
    candidate = base_dir / f"{input_path.stem}{suffix}"

    version = 2
    while candidate.exists():
        candidate = base_dir / f"{input_path.stem}_v{version}{suffix}"
        version += 1
    return candidate


def _ensure_output_path(input_path: Path, override: Optional[Path]) -> Path:
    """Determine the effective output file, respecting user overrides."""

    if override:
        return _sanitize_path(override)
    return _default_output_path(input_path)


def _batch_output_path(input_path: Path, output_dir: Path, suffix: str) -> Path:
    """Return the output path for one file of a batch run."""

    normalized = suffix if suffix.startswith(".") else f".{suffix}"
    return output_dir / f"{input_path.stem}{normalized}"
