"""Helper functions for wiring pixelcam into an Arcade game.

This module provides logging setup and a one-call way to build an Arcade
camera together with a configured CameraFollower.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import arcade
from rich.logging import RichHandler

from pixelcam.camera import CameraFollower, FollowConfig
from pixelcam.conf import settings

if TYPE_CHECKING:
    from pixelcam.types import FollowTarget


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the game.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to settings.LOG_LEVEL.

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def create_follower(
    target: FollowTarget | None = None,
    camera: arcade.camera.Camera2D | None = None,
    **config_overrides: Any,  # noqa: ANN401
) -> CameraFollower:
    """Create an initialized CameraFollower for an Arcade window.

    Builds the follow configuration from settings (plus overrides), creates
    an arcade.camera.Camera2D for the active window when none is given,
    binds the target and calls initialize() so the first frame is already
    in place.

    Args:
        target: Sprite to follow, or None to start idle.
        camera: Camera to drive. A new Camera2D is created when None, which
            requires an open arcade.Window.
        **config_overrides: FollowConfig fields that take precedence over
            settings.

    Returns:
        The initialized follower.

    Raises:
        CameraConfigError: If the configuration is invalid.

    Example:
        >>> follower = create_follower(target=player_sprite, pixel_size=2.0)
        >>> follower.tick(1 / 60)
    """
    config = FollowConfig.from_settings(**config_overrides)
    if camera is None:
        camera = arcade.camera.Camera2D()
    follower = CameraFollower(camera, config)
    follower.set_follow_target(target, snap=False)
    follower.initialize()
    return follower
