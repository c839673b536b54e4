from __future__ import annotations
from PySide6.QtCore import QSettings

from rulerkit.config import RulerConfig
from rulerkit.errors import InvalidSettingError
from rulerkit.logging import get_logger

log = get_logger(__name__)

_KEY_TYPES = {
    "desired_width": int,
    "desired_height": int,
    "major_tick_length": float,
    "min_major_tick_spacing": int,
    "tick_width": int,
}


def load_config(settings: QSettings, group: str = "ruler") -> RulerConfig:
    """
    Build a RulerConfig from QSettings. Missing keys keep their defaults;
    stored values that fail validation are logged and skipped.
    """
    config = RulerConfig()
    settings.beginGroup(group)
    try:
        for key, value_type in _KEY_TYPES.items():
            if not settings.contains(key):
                continue
            raw = settings.value(key)
            try:
                value = value_type(raw)
            except (TypeError, ValueError):
                log.warning("Ignoring unreadable setting %s/%s=%r", group, key, raw)
                continue
            try:
                _apply(config, key, value)
            except InvalidSettingError as exc:
                log.warning("Ignoring stored setting %s/%s: %s", group, key, exc)
    finally:
        settings.endGroup()
    return config


def save_config(config: RulerConfig, settings: QSettings, group: str = "ruler") -> None:
    settings.beginGroup(group)
    for key, value in config.to_dict().items():
        settings.setValue(key, value)
    settings.endGroup()
    settings.sync()


def _apply(config: RulerConfig, key: str, value) -> None:
    if key == "desired_width":
        config.set_desired_width(value)
    elif key == "desired_height":
        config.set_desired_height(value)
    elif key == "major_tick_length":
        config.set_major_tick_length(value)
    elif key == "min_major_tick_spacing":
        config.set_min_major_tick_spacing(value)
    elif key == "tick_width":
        if value < 1:
            raise InvalidSettingError("tick_width", value, "an integer >= 1")
        config.tick_width = value
