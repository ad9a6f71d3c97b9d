"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pixelcam.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test.

    This fixture runs automatically before each test to configure settings
    and resets them after the test completes.

    Yields:
        None
    """
    settings.configure(
        CAMERA_SMOOTHING_ENABLED=True,
        CAMERA_FOLLOW_SPEED=5.0,
        CAMERA_CLAMP_LERP_FRACTION=True,
        CAMERA_PIXEL_SNAP_ENABLED=True,
        CAMERA_PIXEL_SIZE=1.0,
        CAMERA_BASE_OFFSET=(0.0, 0.0),
        CAMERA_USE_LIMITS=False,
        CAMERA_LIMIT_LEFT=-10_000_000.0,
        CAMERA_LIMIT_RIGHT=10_000_000.0,
        CAMERA_LIMIT_TOP=-10_000_000.0,
        CAMERA_LIMIT_BOTTOM=10_000_000.0,
        LOG_LEVEL="INFO",
    )
    yield
    # Reset settings after test
    settings._wrapped = None
