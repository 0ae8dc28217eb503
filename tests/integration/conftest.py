"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf
from typer.testing import CliRunner


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory so no stray configuration file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def stereo_wav(workspace: Path) -> Path:
    """Half a second of a 440 Hz stereo tone at 44.1 kHz."""
    path = workspace / "tone.wav"
    sample_rate = 44100
    t = np.arange(sample_rate // 2) / sample_rate
    tone = (0.5 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
    sf.write(str(path), np.column_stack([tone, tone]), sample_rate, subtype="FLOAT")
    return path


@pytest.fixture
def constant_wav(workspace: Path) -> Path:
    """Four mono frames of 0.25 at 8 kHz."""
    path = workspace / "constant.wav"
    sf.write(str(path), np.full(4, 0.25, dtype=np.float32), 8000, subtype="FLOAT")
    return path


@pytest.fixture
def batch_dir(workspace: Path) -> Path:
    """Directory with three short numbered takes."""
    audio_dir = workspace / "takes"
    audio_dir.mkdir()
    for i in range(1, 4):
        data = np.full(100, 0.1 * i, dtype=np.float32)
        sf.write(str(audio_dir / f"take_{i}.wav"), data, 8000, subtype="FLOAT")
    return audio_dir
