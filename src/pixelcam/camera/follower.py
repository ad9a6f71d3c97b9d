"""Pixel-perfect camera following with sub-pixel smoothing.

This module provides the CameraFollower, which keeps a camera trailing a
target (usually the player sprite) in a 2D pixel-art game. The follower keeps
a high-precision "smooth" position between frames and only rounds the final
rendered position to the pixel grid, so slow camera motion stays smooth
while sprites stay crisp.

Key Features:
    - Frame-rate independent smoothing using linear interpolation (lerp)
    - Pixel-grid snapping of the rendered position only
    - Optional limit box to keep the camera inside the map
    - Instant snap for scene transitions and respawns
    - Weak reference to the target; a destroyed target just stops following

Camera Behavior:
    Each tick the camera covers a fraction of the remaining distance to the
    target. The fraction is follow_speed * delta_time, so at 60 FPS with
    follow_speed=5.0 it moves about 8% of the way per frame:
    - Lower follow_speed (e.g., 2.0): Slower, more dramatic camera
    - Higher follow_speed (e.g., 15.0): Faster, more responsive camera
    - smoothing_enabled=False: Instant following (no smoothing)

Order of Operations:
    1. desired = target position + base_offset
    2. smooth_position moves toward desired (or jumps there)
    3. smooth_position is clamped to the limit box, if enabled
    4. The rendered position is smooth_position snapped to the pixel grid

    Clamping happens before snapping, so the rendered position is never more
    than half a pixel outside the limit box.

Usage Example:
    follower = CameraFollower(camera, FollowConfig(follow_speed=8.0, pixel_size=2.0))
    follower.set_follow_target(player_sprite)
    follower.initialize()

    # Each frame
    follower.tick(delta_time)

    # When drawing
    follower.use()

Integration:
    - Created once the camera exists (see pixelcam.helpers.create_follower)
    - tick() (or update()) called every frame from on_update()
    - snap_to_target() called after teleports and scene changes
"""

from __future__ import annotations

import dataclasses
import logging
import math
import weakref
from typing import TYPE_CHECKING, Any

from pixelcam.camera.base import CameraFollowerBase
from pixelcam.camera.config import CameraConfigError, FollowConfig, changes_from_properties
from pixelcam.camera.grid import clamp01, clamp_to_limits, lerp, snap_to_grid
from pixelcam.types import FollowState

if TYPE_CHECKING:
    from collections.abc import Callable

    import arcade

    from pixelcam.types import CameraLike, FollowTarget, Vec2

logger = logging.getLogger(__name__)

# Camera attribute used by hosts that ship their own position smoothing
HOST_SMOOTHING_ATTRIBUTE = "position_smoothing_enabled"


class CameraFollower(CameraFollowerBase):
    """Smoothly follows a target and snaps the rendered position to pixels.

    Attributes:
        camera: Camera whose position is written, or None. Anything with a
            settable ``position`` works; arcade.camera.Camera2D is the usual one.
        smooth_position: High-precision position carried between frames.
            Only the follower writes it.
        rendered_position: Last position written to the camera.
    """

    def __init__(
        self,
        camera: CameraLike | None = None,
        config: FollowConfig | None = None,
        target: FollowTarget | None = None,
    ) -> None:
        """Initialize the camera follower.

        Args:
            camera: The camera to position. Can be None if the camera will be
                set later via set_camera().
            config: Follow configuration. Defaults to FollowConfig.from_settings().
            target: Optional target to follow. It is bound without snapping;
                call initialize() to seed the position.
        """
        self.camera: CameraLike | None = camera
        self._config = config if config is not None else FollowConfig.from_settings()
        self._target_ref: Callable[[], FollowTarget | None] | None = None
        self.smooth_position: Vec2 = (0.0, 0.0)
        self.rendered_position: Vec2 = (0.0, 0.0)
        if target is not None:
            self._target_ref = self._make_ref(target)

    @property
    def config(self) -> FollowConfig:
        """Current configuration."""
        return self._config

    @config.setter
    def config(self, config: FollowConfig) -> None:
        # Instances validate themselves on creation
        self._config = config
        logger.debug("Camera config replaced: %s", config)

    @property
    def target(self) -> FollowTarget | None:
        """The followed target, or None if there is none or it was destroyed."""
        if self._target_ref is None:
            return None
        target = self._target_ref()
        if target is None:
            logger.info("Camera target was destroyed, camera is now idle")
            self._target_ref = None
        return target

    @property
    def state(self) -> FollowState:
        """FOLLOWING while a live target is bound, IDLE otherwise."""
        return FollowState.IDLE if self.target is None else FollowState.FOLLOWING

    def set_camera(self, camera: CameraLike | None) -> None:
        """Set the camera to position.

        Args:
            camera: The camera to manage, or None to detach.
        """
        self.camera = camera

    def configure(self, **changes: Any) -> FollowConfig:  # noqa: ANN401
        """Replace selected configuration fields.

        The new configuration is validated before it is installed. If it is
        invalid the current configuration stays in place.

        Args:
            **changes: FollowConfig field names and their new values.

        Returns:
            The installed configuration.

        Raises:
            CameraConfigError: If the resulting configuration is invalid.

        Example:
            follower.configure(pixel_size=2.0, use_limits=True)
        """
        unknown = sorted(set(changes) - {f.name for f in dataclasses.fields(FollowConfig)})
        if unknown:
            raise CameraConfigError(", ".join(unknown), changes, "unknown configuration field")
        config = dataclasses.replace(self._config, **changes)
        self.config = config
        return config

    def initialize(self) -> None:
        """Seed the smoothed position and show it on the first frame.

        Disables the host camera's own position smoothing, if it has any, so
        two smoothing passes never stack. The smoothed position starts at the
        target (plus offset) when there is one, otherwise at the camera's
        current position, and is applied right away so the first frame does
        not slide in from the origin.
        """
        if self.camera is not None and getattr(self.camera, HOST_SMOOTHING_ATTRIBUTE, False):
            setattr(self.camera, HOST_SMOOTHING_ATTRIBUTE, False)
            logger.debug("Disabled host camera position smoothing")

        desired = self._desired_position()
        if desired is not None:
            self.smooth_position = desired
        elif self.camera is not None:
            x, y = self.camera.position
            self.smooth_position = (float(x), float(y))
        self._apply_position(self.smooth_position)
        logger.debug("Camera initialized at %s", self.smooth_position)

    def tick(self, delta_time: float) -> None:
        """Advance the smoothed position by one frame.

        Does nothing while there is no target; the camera keeps its last
        position.

        Args:
            delta_time: Seconds since the last frame. Must be finite and not
                negative.

        Raises:
            ValueError: If delta_time is negative, NaN or infinite.
        """
        if not math.isfinite(delta_time) or delta_time < 0:
            msg = f"delta_time must be a finite, non-negative number, got {delta_time}"
            raise ValueError(msg)

        desired = self._desired_position()
        if desired is None:
            return

        config = self._config
        if config.smoothing_enabled:
            weight = config.follow_speed * delta_time
            if config.clamp_lerp_fraction:
                weight = clamp01(weight)
            position = lerp(self.smooth_position, desired, weight)
        else:
            position = desired

        if config.use_limits:
            position = clamp_to_limits(position, *config.limits)

        self.smooth_position = position
        self._apply_position(position)

    def update(self, delta_time: float) -> None:
        """Alias of tick() for hosts that call update() every frame."""
        self.tick(delta_time)

    def snap_to_target(self) -> None:
        """Jump straight to the target, skipping interpolation.

        Use after teleports, respawns and scene transitions, where sliding
        in from the previous position would look wrong. Does nothing when
        there is no target.
        """
        desired = self._desired_position()
        if desired is None:
            return
        self.smooth_position = desired
        self._apply_position(desired)
        logger.debug("Camera snapped to target at %s", desired)

    def set_follow_target(self, target: FollowTarget | None, *, snap: bool = True) -> None:
        """Change the followed target.

        Args:
            target: New target, or None to stop following. The follower holds
                only a weak reference to it, so the game must keep its own
                reference (usually a SpriteList does).
            snap: If True, jump to the new target now. If False, the camera
                glides there from its current position over the next ticks.
        """
        self._target_ref = None if target is None else self._make_ref(target)
        logger.debug("Camera follow target set to %r (snap=%s)", target, snap)
        if snap:
            self.snap_to_target()

    def set_bounds(
        self,
        map_width: float,
        map_height: float,
        viewport_width: float,
        viewport_height: float,
    ) -> None:
        """Set and enable limits that keep the viewport inside the map.

        The camera position is the viewport center, so the limits are half a
        viewport in from each map edge. On an axis where the map is smaller
        than the viewport the camera is held within a quarter pixel of the map
        center.

        Args:
            map_width: Total width of the map in world units.
            map_height: Total height of the map in world units.
            viewport_width: Width of the viewport in world units.
            viewport_height: Height of the viewport in world units.

        Raises:
            CameraConfigError: If the resulting limits are invalid.

        Example:
            # 50x40 tile map with 32px tiles on a 1024x768 window
            follower.set_bounds(50 * 32, 40 * 32, 1024, 768)
            # Camera x stays in 512..1088, y in 384..896
        """
        margin = self._config.pixel_size / 4
        left, right = _axis_limits(map_width, viewport_width, margin)
        top, bottom = _axis_limits(map_height, viewport_height, margin)
        self.configure(
            use_limits=True,
            limit_left=left,
            limit_right=right,
            limit_top=top,
            limit_bottom=bottom,
        )

    def load_from_tiled(self, tile_map: arcade.TileMap) -> None:
        """Apply camera properties from a Tiled map.

        Map Property Configuration in Tiled:
            1. Click on the map name in Layers panel (deselect any layers)
            2. Open Properties panel (View -> Properties)
            3. Add custom properties as needed

        Supported Properties:
            camera_smooth: false          # Instant following
            camera_follow_speed: 10.0     # Faster catch-up
            camera_pixel_snap: true
            camera_pixel_size: 2.0
            camera_offset_x: 0.0
            camera_offset_y: 32.0         # Look a little ahead

        Args:
            tile_map: Loaded TileMap. Maps without properties leave the
                configuration unchanged.

        Raises:
            CameraConfigError: If a property has the right type but an
                invalid value.
        """
        properties = getattr(tile_map, "properties", None)
        if not properties:
            logger.debug("TileMap does not have camera properties, keeping config")
            return
        changes = changes_from_properties(properties, self._config)
        if changes:
            self.configure(**changes)
            logger.info("Camera config loaded from map properties: %s", changes)

    def use(self) -> None:
        """Activate the camera for rendering.

        A thin wrapper around arcade.camera.Camera2D.use(). Does nothing when
        no camera is set.
        """
        if self.camera is not None:
            self.camera.use()

    def cleanup(self) -> None:
        """Drop the target and camera when the scene unloads."""
        self._target_ref = None
        self.camera = None
        logger.debug("CameraFollower cleanup complete")

    def _desired_position(self) -> Vec2 | None:
        target = self.target
        if target is None:
            return None
        offset_x, offset_y = self._config.base_offset
        return (target.center_x + offset_x, target.center_y + offset_y)

    def _apply_position(self, world_pos: Vec2) -> None:
        """Write world_pos to the camera after limits and pixel snapping."""
        config = self._config
        position = world_pos
        if config.use_limits:
            position = clamp_to_limits(position, *config.limits)
        if config.pixel_snap_enabled:
            position = snap_to_grid(position, config.pixel_size)
        self.rendered_position = position
        if self.camera is not None:
            self.camera.position = position

    @staticmethod
    def _make_ref(target: FollowTarget) -> Callable[[], FollowTarget | None]:
        try:
            return weakref.ref(target)
        except TypeError:
            logger.debug("%r does not support weak references, holding a strong reference", target)
            return lambda: target


def _axis_limits(map_size: float, viewport_size: float, margin: float) -> tuple[float, float]:
    low = viewport_size / 2
    high = map_size - viewport_size / 2
    if high <= low:
        # Map smaller than the viewport: hold the camera at the map center
        center = map_size / 2
        return (center - margin, center + margin)
    return (low, high)
