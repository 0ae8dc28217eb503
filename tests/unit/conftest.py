"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on small buffers and fast execution.
"""

from __future__ import annotations

import numpy as np
import pytest

from audio_converter.config import TransformConfig
from audio_converter.types import AudioStreamDescriptor


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def stereo_samples() -> np.ndarray:
    """Two stereo frames: L R L R."""
    return np.array([0.1, 0.2, 0.3, 0.4], dtype=np.float64)


@pytest.fixture
def cd_stereo() -> AudioStreamDescriptor:
    """44.1 kHz stereo descriptor."""
    return AudioStreamDescriptor(sample_rate=44100, channel_count=2)


@pytest.fixture
def transform_config_factory():
    """Factory fixture for TransformConfig instances.

    Returns:
        Callable accepting TransformConfig field overrides.

    Example:
        >>> config = transform_config_factory(gain_db=6.0)
        >>> assert config.normalize is False
    """
    def _create(**overrides) -> TransformConfig:
        return TransformConfig(**overrides)

    return _create
