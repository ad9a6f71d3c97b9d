"""Unit tests for FollowConfig and map property loading."""

import dataclasses
import unittest

import pytest

from pixelcam.camera.config import CameraConfigError, FollowConfig, changes_from_properties
from pixelcam.conf import settings


class TestFollowConfigValidation(unittest.TestCase):
    """Test that invalid configuration is rejected when it is set."""

    def test_defaults_are_valid(self) -> None:
        config = FollowConfig()
        assert config.smoothing_enabled is True
        assert config.pixel_size == 1.0
        assert config.base_offset == (0.0, 0.0)
        assert config.use_limits is False

    def test_zero_pixel_size_rejected(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(pixel_size=0.0)
        assert exc_info.value.field == "pixel_size"

    def test_negative_pixel_size_rejected(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(pixel_size=-2.0)

    def test_non_finite_pixel_size_rejected(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(pixel_size=float("nan"))
        with pytest.raises(CameraConfigError):
            FollowConfig(pixel_size=float("inf"))

    def test_follow_speed_must_be_positive(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(follow_speed=0.0)
        assert exc_info.value.field == "follow_speed"
        with pytest.raises(CameraConfigError):
            FollowConfig(follow_speed=-1.0)

    def test_inverted_horizontal_limits_rejected(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(limit_left=100.0, limit_right=0.0)
        assert exc_info.value.field == "limit_left"

    def test_equal_horizontal_limits_rejected(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(limit_left=50.0, limit_right=50.0)

    def test_inverted_vertical_limits_rejected(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(limit_top=10.0, limit_bottom=-10.0)
        assert exc_info.value.field == "limit_top"

    def test_non_finite_limit_rejected(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(limit_right=float("inf"))

    def test_offset_normalized_to_float_tuple(self) -> None:
        config = FollowConfig(base_offset=[3, -4])
        assert config.base_offset == (3.0, -4.0)
        assert isinstance(config.base_offset, tuple)

    def test_offset_must_have_two_components(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(base_offset=(1.0, 2.0, 3.0))

    def test_non_finite_offset_rejected(self) -> None:
        with pytest.raises(CameraConfigError):
            FollowConfig(base_offset=(float("nan"), 0.0))

    def test_non_numeric_fields_rejected(self) -> None:
        for field, value in (("pixel_size", "2"), ("follow_speed", None), ("limit_left", "0")):
            with self.subTest(field=field), pytest.raises(CameraConfigError) as exc_info:
                FollowConfig(**{field: value})
            assert exc_info.value.field == field

    def test_bool_pixel_size_rejected(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(pixel_size=True)
        assert exc_info.value.field == "pixel_size"

    def test_offset_must_be_a_pair(self) -> None:
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig(base_offset=5)
        assert exc_info.value.field == "base_offset"

    def test_non_numeric_offset_rejected(self) -> None:
        for offset in (("a", 0.0), "ab", (None, 1.0)):
            with self.subTest(offset=offset), pytest.raises(CameraConfigError) as exc_info:
                FollowConfig(base_offset=offset)
            assert exc_info.value.field == "base_offset"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="pixel_size"):
            FollowConfig(pixel_size=0)

    def test_config_is_frozen(self) -> None:
        config = FollowConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.pixel_size = 2.0  # type: ignore[misc]

    def test_replace_revalidates(self) -> None:
        config = FollowConfig()
        with pytest.raises(CameraConfigError):
            dataclasses.replace(config, pixel_size=0.0)

    def test_limits_property(self) -> None:
        config = FollowConfig(limit_left=0.0, limit_right=10.0, limit_top=1.0, limit_bottom=5.0)
        assert config.limits == (0.0, 10.0, 1.0, 5.0)


class TestFollowConfigFromSettings(unittest.TestCase):
    """Test building configuration from settings."""

    def test_reads_settings(self) -> None:
        settings.configure(CAMERA_FOLLOW_SPEED=12.0, CAMERA_PIXEL_SIZE=3.0, CAMERA_BASE_OFFSET=(0.0, 16.0))
        config = FollowConfig.from_settings()
        assert config.follow_speed == 12.0
        assert config.pixel_size == 3.0
        assert config.base_offset == (0.0, 16.0)

    def test_overrides_take_precedence(self) -> None:
        settings.configure(CAMERA_PIXEL_SIZE=3.0)
        config = FollowConfig.from_settings(pixel_size=4.0, use_limits=True)
        assert config.pixel_size == 4.0
        assert config.use_limits is True

    def test_invalid_settings_rejected(self) -> None:
        settings.configure(CAMERA_LIMIT_LEFT=10.0, CAMERA_LIMIT_RIGHT=-10.0)
        with pytest.raises(CameraConfigError):
            FollowConfig.from_settings()

    def test_string_setting_rejected(self) -> None:
        settings.configure(CAMERA_PIXEL_SIZE="2")
        with pytest.raises(CameraConfigError) as exc_info:
            FollowConfig.from_settings()
        assert exc_info.value.field == "pixel_size"


class TestChangesFromProperties(unittest.TestCase):
    """Test translating Tiled map properties into config changes."""

    def test_all_supported_properties(self) -> None:
        properties = {
            "camera_smooth": False,
            "camera_follow_speed": 10,
            "camera_pixel_snap": True,
            "camera_pixel_size": 2.0,
            "camera_offset_x": 4,
            "camera_offset_y": -8.0,
        }
        changes = changes_from_properties(properties, FollowConfig())
        assert changes == {
            "smoothing_enabled": False,
            "follow_speed": 10.0,
            "pixel_snap_enabled": True,
            "pixel_size": 2.0,
            "base_offset": (4.0, -8.0),
        }

    def test_unrelated_properties_ignored(self) -> None:
        assert changes_from_properties({"music": "town.ogg"}, FollowConfig()) == {}

    def test_wrong_types_ignored_with_warning(self) -> None:
        properties = {"camera_smooth": "yes", "camera_follow_speed": True, "camera_offset_x": "far"}
        with self.assertLogs("pixelcam.camera.config", level="WARNING") as logs:
            changes = changes_from_properties(properties, FollowConfig())
        assert changes == {}
        assert len(logs.records) == 3

    def test_single_offset_component_keeps_other(self) -> None:
        changes = changes_from_properties({"camera_offset_y": 32}, FollowConfig(base_offset=(5.0, 0.0)))
        assert changes == {"base_offset": (5.0, 32.0)}


if __name__ == "__main__":
    unittest.main()
