"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules. Fixtures here should be:
- Stateless or session-scoped
- Generic enough for reuse across different test categories
- Well-documented with clear purpose
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import soundfile as sf
from pytest_mock import MockerFixture


# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tmp_input_dir(tmp_path: Path) -> Path:
    """Create a temporary input directory for test files.

    Returns:
        Path to a clean temporary directory for input files.
    """
    input_dir = tmp_path / "input"
    input_dir.mkdir(parents=True, exist_ok=True)
    return input_dir


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Create a temporary output directory for generated arrays.

    Returns:
        Path to a clean temporary directory for output files.
    """
    output_dir = tmp_path / "output"
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


# =============================================================================
# Audio File Fixtures
# =============================================================================

@pytest.fixture
def create_wav_file(tmp_input_dir: Path):
    """Factory fixture for writing real WAV files with soundfile.

    The default content is a 440 Hz sine at half scale, identical on every
    channel.

    Returns:
        Callable that writes a WAV file and returns its path.
    """
    def _create(
        filename: str = "tone.wav",
        sample_rate: int = 44100,
        channels: int = 2,
        duration: float = 0.1,
        data: np.ndarray | None = None,
        subtype: str = "FLOAT",
    ) -> Path:
        file_path = tmp_input_dir / filename
        if data is None:
            frames = int(sample_rate * duration)
            t = np.arange(frames) / sample_rate
            tone = (0.5 * np.sin(2 * np.pi * 440.0 * t)).astype(np.float32)
            data = np.repeat(tone[:, None], channels, axis=1)
        sf.write(str(file_path), data, sample_rate, subtype=subtype)
        return file_path

    return _create


# =============================================================================
# Mock Console Fixtures
# =============================================================================

@pytest.fixture
def mock_console(mocker: MockerFixture):
    """Create a mock Rich Console for output testing.

    Returns:
        Mock object that mimics rich.console.Console interface.
    """
    return mocker.MagicMock(spec_set=["print", "log", "status"])


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection.

    Returns:
        Mock object implementing OutputHandler protocol.
    """
    handler = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.warning = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    handler.success = mocker.MagicMock()
    return handler


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
    config.addinivalue_line("markers", "ffmpeg: Tests involving FFmpeg")
    config.addinivalue_line("markers", "pydantic: Tests for Pydantic validation")
