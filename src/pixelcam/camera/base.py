"""Base class for CameraFollower."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pixelcam.camera.config import FollowConfig
    from pixelcam.types import CameraLike, FollowTarget


class CameraFollowerBase(ABC):
    """Base class for CameraFollower."""

    @abstractmethod
    def set_camera(self, camera: CameraLike | None) -> None:
        """Set the camera to position."""
        ...

    @abstractmethod
    def configure(self, **changes: Any) -> FollowConfig:  # noqa: ANN401
        """Install a new configuration built from the current one."""
        ...

    @abstractmethod
    def initialize(self) -> None:
        """Seed the smoothed position and apply it without interpolation."""
        ...

    @abstractmethod
    def tick(self, delta_time: float) -> None:
        """Advance the smoothed position by one frame."""
        ...

    @abstractmethod
    def snap_to_target(self) -> None:
        """Jump straight to the followed target."""
        ...

    @abstractmethod
    def set_follow_target(self, target: FollowTarget | None, *, snap: bool = True) -> None:
        """Change the followed target, or stop following with None."""
        ...

    @abstractmethod
    def use(self) -> None:
        """Activate the camera for rendering."""
        ...
