"""Custom types and enumerations."""

from enum import Enum, auto
from typing import Protocol

Vec2 = tuple[float, float]
"""A 2D position or offset in world units."""


class FollowState(Enum):
    """Follow state of a camera follower."""

    IDLE = auto()
    FOLLOWING = auto()


class FollowTarget(Protocol):
    """Anything the camera can follow, typically an arcade.Sprite."""

    center_x: float
    center_y: float


class CameraLike(Protocol):
    """Anything the follower can position, typically an arcade.camera.Camera2D."""

    position: Vec2

    def use(self) -> None:
        """Activate the camera for rendering."""
        ...
