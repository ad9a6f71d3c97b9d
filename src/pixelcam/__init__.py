"""pixelcam - Pixel-perfect smooth camera following for Arcade games.

This package keeps a camera trailing a target in a 2D pixel-art game:
- Frame-rate independent smoothing
- Pixel-grid snapping of the rendered position
- Optional limit box to keep the camera inside the map
- Instant snapping for scene transitions
- Django-like settings for project-wide defaults

Quick start:
    # Create a settings.py file in your project root:
    # CAMERA_FOLLOW_SPEED = 8.0
    # CAMERA_PIXEL_SIZE = 2.0

    from pixelcam import CameraFollower

    follower = CameraFollower(camera)
    follower.set_follow_target(player_sprite)
    follower.initialize()

    def on_update(self, delta_time):
        follower.tick(delta_time)

Alternative usage:
    # Build the Arcade camera and follower in one call
    from pixelcam.helpers import create_follower

    follower = create_follower(target=player_sprite, pixel_size=2.0)

    # Or customize settings programmatically
    from pixelcam.conf import settings

    settings.configure(CAMERA_FOLLOW_SPEED=12.0)
"""

__version__ = "0.1.0"

from pixelcam.camera import CameraConfigError, CameraFollower, FollowConfig
from pixelcam.conf import settings
from pixelcam.types import FollowState

__all__ = [
    "CameraConfigError",
    "CameraFollower",
    "FollowConfig",
    "FollowState",
    "__version__",
    "settings",
]
