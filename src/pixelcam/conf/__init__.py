"""Lazily loaded settings for pixelcam.

Framework defaults live in pixelcam.conf.global_settings. A game overrides
them from its own settings module, named by the PIXELCAM_SETTINGS_MODULE
environment variable (a top-level ``settings`` module when unset). Only
upper-case names are read.

Usage:
    # In your game project's settings.py
    CAMERA_FOLLOW_SPEED = 8.0
    CAMERA_PIXEL_SIZE = 2.0
    CAMERA_USE_LIMITS = True

    # In your game code
    from pixelcam.conf import settings

    print(settings.CAMERA_FOLLOW_SPEED)  # 8.0
    print(settings.CAMERA_PIXEL_SNAP_ENABLED)  # True (framework default)
"""

import importlib
import logging
import os
from types import ModuleType
from typing import Any

from pixelcam.conf import global_settings

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "PIXELCAM_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "settings"


def _setting_names(module: ModuleType) -> dict[str, Any]:
    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


def _load_overrides(module_name: str) -> dict[str, Any]:
    """Read the upper-case names of the game's settings module.

    A missing module means no overrides. An import error raised from inside
    an existing module is not hidden.
    """
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if e.name != module_name:
            raise
        logger.debug("No settings module %r, using pixelcam defaults", module_name)
        return {}
    overrides = _setting_names(module)
    logger.debug("Loaded %d settings from %r", len(overrides), module_name)
    return overrides


class Settings:
    """Attribute bag holding every setting, seeded with the framework defaults."""

    def __init__(self, **overrides: Any) -> None:  # noqa: ANN401
        self.update(_setting_names(global_settings))
        self.update(overrides)

    def update(self, values: dict[str, Any]) -> None:
        """Set several settings at once."""
        for name, value in values.items():
            setattr(self, name, value)

    def __repr__(self) -> str:
        return f"<Settings: {len(vars(self))} values>"


class LazySettings:
    """Proxy that builds the Settings object on first use.

    Reading or writing any setting triggers the load: defaults first, then
    the game's settings module on top. configure() skips the settings module
    entirely, which is what tests want.
    """

    def __init__(self) -> None:
        self._wrapped: Settings | None = None

    @property
    def settings_module(self) -> str:
        """Name of the module overrides are read from."""
        return os.environ.get(SETTINGS_MODULE_ENV, DEFAULT_SETTINGS_MODULE)

    def _resolve(self) -> Settings:
        if self._wrapped is None:
            self._wrapped = Settings(**_load_overrides(self.settings_module))
        return self._wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        # Only reached for names not found on the proxy itself
        return getattr(self._resolve(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        if name == "_wrapped":
            self.__dict__[name] = value
            return
        setattr(self._resolve(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Set settings directly, without reading the settings module.

        Values already loaded are kept unless overridden here.

        Example:
            settings.configure(
                CAMERA_FOLLOW_SPEED=10.0,
                CAMERA_PIXEL_SIZE=4.0,
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings(**options)
        else:
            self._wrapped.update(options)

    def is_configured(self) -> bool:
        """True once settings have been loaded or configured."""
        return self._wrapped is not None


settings = LazySettings()

__all__ = ["DEFAULT_SETTINGS_MODULE", "SETTINGS_MODULE_ENV", "LazySettings", "Settings", "global_settings", "settings"]
