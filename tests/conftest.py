"""Shared pytest fixtures for HTMX Gallery tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from htmx_gallery.api.main import app
from htmx_gallery.core.config import GalleryConfig
from htmx_gallery.core.counter import ImageCounter


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> GalleryConfig:
    """Create a test configuration with a temporary static directory.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        GalleryConfig instance for testing
    """
    return GalleryConfig(
        static_dir=str(temp_dir / "static"),
        _env_file=None,
    )


@pytest.fixture
def counter() -> ImageCounter:
    """Fresh image counter with a short, predictable base URL."""
    return ImageCounter("images")


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """TestClient against the real application.

    Entering the client runs the lifespan handler, so every test starts
    with a fresh counter on ``app.state``.
    """
    with TestClient(app) as client:
        yield client
