"""Camera system for smooth, pixel-perfect camera following.

This package provides:
- CameraFollower: Follows a target with sub-pixel smoothing and pixel snapping
- FollowConfig: Validated, immutable follower configuration
- CameraConfigError: Raised for invalid configuration values

The follower interpolates a high-precision position toward its target every
frame, optionally clamps it to a limit box and snaps only the rendered
position to the pixel grid.
"""

from pixelcam.camera.config import CameraConfigError, FollowConfig
from pixelcam.camera.follower import CameraFollower

__all__ = [
    "CameraConfigError",
    "CameraFollower",
    "FollowConfig",
]
