"""Pytest fixtures for imagevideo tests."""

import pytest
import numpy as np
from pathlib import Path

import sys
backend_src = Path(__file__).resolve().parent.parent / "src"
sys.path.insert(0, str(backend_src))

from imagevideo.domain.image import Image
from imagevideo.services.logging_service import LoggingService


@pytest.fixture
def volume():
    """Synthetic 4x5x6 volume where every voxel value is unique."""
    return np.arange(4 * 5 * 6, dtype=np.float32).reshape(4, 5, 6)


@pytest.fixture
def image(volume):
    """Image wrapping the 4x5x6 volume."""
    return Image.from_array(volume)


@pytest.fixture
def logger():
    return LoggingService()


@pytest.fixture
def temp_dir(tmp_path):
    """Temporary directory for output files."""
    return tmp_path
