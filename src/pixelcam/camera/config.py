"""Camera follow configuration.

FollowConfig holds every tunable parameter of the camera follower. It is a
frozen dataclass: a follower never sees its configuration change halfway
through a tick, and changes are made by building a new instance with
dataclasses.replace() (see CameraFollower.configure()).

Every instance is validated when it is created, so a bad pixel size or an
inverted limit box is reported to whoever sets it instead of surfacing later
as NaN or infinite camera positions.

Example:
    config = FollowConfig(follow_speed=8.0, pixel_size=2.0)

    # Build from the project's settings module
    config = FollowConfig.from_settings()

    # Rejected immediately
    FollowConfig(pixel_size=0.0)  # raises CameraConfigError
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self

from pixelcam.conf import settings

if TYPE_CHECKING:
    from pixelcam.types import Vec2

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10_000_000.0

NUMERIC_FIELDS = ("follow_speed", "pixel_size", "limit_left", "limit_right", "limit_top", "limit_bottom")


def is_number(value: Any) -> bool:  # noqa: ANN401
    """True for int and float values; bool is rejected even though it is an int."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class CameraConfigError(ValueError):
    """Raised when a camera configuration value is invalid.

    Attributes:
        field: Name of the offending configuration field.
        value: The rejected value.
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:  # noqa: ANN401
        """Initialize the error with the field, value and reason."""
        self.field = field
        self.value = value
        super().__init__(f"Invalid camera config {field}={value!r}: {reason}")


@dataclass(frozen=True)
class FollowConfig:
    """Immutable camera follower configuration.

    Attributes:
        smoothing_enabled: Interpolate toward the target. False snaps instantly.
        follow_speed: Interpolation rate per second, greater than zero.
        pixel_snap_enabled: Snap the rendered position to the pixel grid.
        pixel_size: World units per pixel, greater than zero.
        base_offset: World-space offset added to the target position.
        use_limits: Clamp the smoothed position to the limit box.
        limit_left: Minimum x. Must be less than limit_right.
        limit_right: Maximum x.
        limit_top: Minimum y. Must be less than limit_bottom.
        limit_bottom: Maximum y.
        clamp_lerp_fraction: Cap follow_speed * delta_time at 1.0.
    """

    smoothing_enabled: bool = True
    follow_speed: float = 5.0
    pixel_snap_enabled: bool = True
    pixel_size: float = 1.0
    base_offset: Vec2 = (0.0, 0.0)
    use_limits: bool = False
    limit_left: float = -DEFAULT_LIMIT
    limit_right: float = DEFAULT_LIMIT
    limit_top: float = -DEFAULT_LIMIT
    limit_bottom: float = DEFAULT_LIMIT
    clamp_lerp_fraction: bool = True

    def __post_init__(self) -> None:
        """Normalize the offset and validate every field."""
        try:
            components = tuple(self.base_offset)
        except TypeError:
            raise CameraConfigError("base_offset", self.base_offset, "must be an (x, y) pair") from None
        if len(components) != 2:  # noqa: PLR2004
            raise CameraConfigError("base_offset", self.base_offset, "must have exactly two components")
        if not all(is_number(v) for v in components):
            raise CameraConfigError("base_offset", self.base_offset, "components must be numbers")
        offset = (float(components[0]), float(components[1]))
        # Frozen dataclass, so bypass __setattr__ to store the normalized tuple
        object.__setattr__(self, "base_offset", offset)
        self.validate()

    def validate(self) -> None:
        """Check every field, raising CameraConfigError on the first problem.

        Raises:
            CameraConfigError: If follow_speed or pixel_size is not a finite
                positive number, if the offset or a limit is not finite, or if
                a limit range is empty or inverted.
        """
        for name in NUMERIC_FIELDS:
            if not is_number(getattr(self, name)):
                raise CameraConfigError(name, getattr(self, name), "must be a number")
        if not math.isfinite(self.follow_speed) or self.follow_speed <= 0:
            raise CameraConfigError("follow_speed", self.follow_speed, "must be a finite number greater than 0")
        if not math.isfinite(self.pixel_size) or self.pixel_size <= 0:
            raise CameraConfigError("pixel_size", self.pixel_size, "must be a finite number greater than 0")
        if not all(math.isfinite(v) for v in self.base_offset):
            raise CameraConfigError("base_offset", self.base_offset, "components must be finite")
        for name in ("limit_left", "limit_right", "limit_top", "limit_bottom"):
            if not math.isfinite(getattr(self, name)):
                raise CameraConfigError(name, getattr(self, name), "must be finite")
        if self.limit_left >= self.limit_right:
            raise CameraConfigError(
                "limit_left", self.limit_left, f"must be less than limit_right ({self.limit_right})"
            )
        if self.limit_top >= self.limit_bottom:
            raise CameraConfigError(
                "limit_top", self.limit_top, f"must be less than limit_bottom ({self.limit_bottom})"
            )

    @property
    def limits(self) -> tuple[float, float, float, float]:
        """Limit box as (left, right, top, bottom)."""
        return (self.limit_left, self.limit_right, self.limit_top, self.limit_bottom)

    @classmethod
    def from_settings(cls, **overrides: Any) -> Self:  # noqa: ANN401
        """Create a FollowConfig from pixelcam.conf.settings.

        Args:
            **overrides: Field values that take precedence over settings.

        Returns:
            A validated FollowConfig.

        Raises:
            CameraConfigError: If the combined values are invalid.
        """
        values: dict[str, Any] = {
            "smoothing_enabled": settings.CAMERA_SMOOTHING_ENABLED,
            "follow_speed": settings.CAMERA_FOLLOW_SPEED,
            "pixel_snap_enabled": settings.CAMERA_PIXEL_SNAP_ENABLED,
            "pixel_size": settings.CAMERA_PIXEL_SIZE,
            "base_offset": settings.CAMERA_BASE_OFFSET,
            "use_limits": settings.CAMERA_USE_LIMITS,
            "limit_left": settings.CAMERA_LIMIT_LEFT,
            "limit_right": settings.CAMERA_LIMIT_RIGHT,
            "limit_top": settings.CAMERA_LIMIT_TOP,
            "limit_bottom": settings.CAMERA_LIMIT_BOTTOM,
            "clamp_lerp_fraction": settings.CAMERA_CLAMP_LERP_FRACTION,
        }
        values.update(overrides)
        return cls(**values)


# Tiled map property name -> (config field, accepted types)
TILED_PROPERTIES: dict[str, tuple[str, tuple[type, ...]]] = {
    "camera_smooth": ("smoothing_enabled", (bool,)),
    "camera_follow_speed": ("follow_speed", (int, float)),
    "camera_pixel_snap": ("pixel_snap_enabled", (bool,)),
    "camera_pixel_size": ("pixel_size", (int, float)),
}


def changes_from_properties(properties: dict[str, Any], current: FollowConfig) -> dict[str, Any]:
    """Translate Tiled map properties into FollowConfig field changes.

    Supported Properties:
        - camera_smooth (bool): Enable smoothing.
        - camera_follow_speed (float): Interpolation rate.
        - camera_pixel_snap (bool): Enable pixel snapping.
        - camera_pixel_size (float): World units per pixel.
        - camera_offset_x / camera_offset_y (float): Base offset components.
          A missing component keeps its current value.

    Properties with the wrong type are logged and ignored. Value ranges are
    not checked here; the resulting FollowConfig validates them.

    Args:
        properties: The map's custom properties.
        current: Configuration the changes will be applied to.

    Returns:
        Field changes suitable for dataclasses.replace().
    """
    changes: dict[str, Any] = {}

    for prop, (field_name, types) in TILED_PROPERTIES.items():
        if prop not in properties:
            continue
        value = properties[prop]
        # bool is an int subclass, so numeric properties reject it explicitly
        if not isinstance(value, types) or (bool not in types and isinstance(value, bool)):
            logger.warning("Invalid %s property type: %s, ignoring", prop, type(value).__name__)
            continue
        changes[field_name] = float(value) if bool not in types else value

    offset_x, offset_y = current.base_offset
    offset_changed = False
    for prop in ("camera_offset_x", "camera_offset_y"):
        if prop not in properties:
            continue
        value = properties[prop]
        if not is_number(value):
            logger.warning("Invalid %s property type: %s, ignoring", prop, type(value).__name__)
            continue
        if prop == "camera_offset_x":
            offset_x = float(value)
        else:
            offset_y = float(value)
        offset_changed = True
    if offset_changed:
        changes["base_offset"] = (offset_x, offset_y)

    return changes
