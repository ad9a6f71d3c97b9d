"""Default settings for pixelcam.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    CAMERA_FOLLOW_SPEED = 8.0
    CAMERA_PIXEL_SIZE = 3.0
    CAMERA_USE_LIMITS = True
    CAMERA_LIMIT_LEFT = 0.0
    CAMERA_LIMIT_RIGHT = 1600.0
    CAMERA_LIMIT_TOP = 0.0
    CAMERA_LIMIT_BOTTOM = 1280.0
"""

# Smoothing settings
CAMERA_SMOOTHING_ENABLED = True
"""Interpolate toward the target each frame. False snaps to it instantly."""

CAMERA_FOLLOW_SPEED = 5.0
"""Interpolation rate per second. Higher values catch up faster (about 1 to 30)."""

CAMERA_CLAMP_LERP_FRACTION = True
"""Cap follow_speed * delta_time at 1.0 so long frames cannot overshoot the target."""

# Pixel grid settings
CAMERA_PIXEL_SNAP_ENABLED = True
"""Snap the rendered camera position to the pixel grid."""

CAMERA_PIXEL_SIZE = 1.0
"""World units per screen pixel (greater than 0, at most 64 in practice)."""

# Offset settings
CAMERA_BASE_OFFSET = (0.0, 0.0)
"""Constant world-space offset added to the target position."""

# Limit settings
CAMERA_USE_LIMITS = False
"""Clamp the camera position to the limit box below."""

CAMERA_LIMIT_LEFT = -10_000_000.0
"""Minimum camera x."""

CAMERA_LIMIT_RIGHT = 10_000_000.0
"""Maximum camera x."""

CAMERA_LIMIT_TOP = -10_000_000.0
"""Minimum camera y."""

CAMERA_LIMIT_BOTTOM = 10_000_000.0
"""Maximum camera y."""

# Logging settings
LOG_LEVEL = "INFO"
"""Default level used by pixelcam.helpers.setup_logging()."""
