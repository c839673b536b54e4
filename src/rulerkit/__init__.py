"""rulerkit public API."""

from .config import RulerConfig
from .settings import load_config, save_config
from .errors import RulerError, InvalidRangeError, InvalidSettingError
from .rulers import NumberRuler, Orientation, TickSpec, select_interval, to_pixel, pixel_spacing
from .renderers import NumberRulerRenderer
from .widgets import NumberRulerWidget, bind_scrollbar

__all__ = [
    "RulerConfig",
    "load_config",
    "save_config",
    "RulerError",
    "InvalidRangeError",
    "InvalidSettingError",
    "NumberRuler",
    "Orientation",
    "TickSpec",
    "select_interval",
    "to_pixel",
    "pixel_spacing",
    "NumberRulerRenderer",
    "NumberRulerWidget",
    "bind_scrollbar",
]
