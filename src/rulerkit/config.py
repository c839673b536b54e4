from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from rulerkit.errors import InvalidSettingError

# Valid major tick intervals are { x * 10^n | x in VALID_INTERVALS, n >= 0 }
VALID_INTERVALS = (1, 5, 10, 25, 50, 100)
DEFAULT_INTERVAL = 1

DEFAULT_MIN_MAJOR_TICK_SPACING = 80  # pixels between major ticks
MIN_MINOR_TICK_SPACING = 5           # pixels a segment needs before it is subdivided
MAX_TICK_DEPTH = 2                   # subdivision levels below a major tick

DEFAULT_MAJOR_TICK_LENGTH = 0.8      # fraction of the ruler thickness
MIN_MAJOR_TICK_LENGTH = 0.1
MAX_MAJOR_TICK_LENGTH = 1.0

DEFAULT_DESIRED_SIZE = 25
DEFAULT_TICK_WIDTH = 1
LABEL_FONT_FAMILY = "sans-serif"
LABEL_FONT_PIXEL_SIZE = 11

DEFAULT_LOWER = 0.0
DEFAULT_UPPER = 10.0


@dataclass
class RulerConfig:
    """Tuning knobs and size hints of a ruler.

    Setters validate their input, raise InvalidSettingError when it is out of range
    and return True only if the stored value actually changed.
    """
    desired_width: int = DEFAULT_DESIRED_SIZE
    desired_height: int = DEFAULT_DESIRED_SIZE
    major_tick_length: float = DEFAULT_MAJOR_TICK_LENGTH
    min_major_tick_spacing: int = DEFAULT_MIN_MAJOR_TICK_SPACING
    tick_width: int = DEFAULT_TICK_WIDTH

    def __post_init__(self) -> None:
        # Route construct-time values through the same validation as the setters
        _validate_size("desired_width", self.desired_width)
        _validate_size("desired_height", self.desired_height)
        _validate_tick_length(self.major_tick_length)
        _validate_spacing(self.min_major_tick_spacing)
        if self.tick_width < 1:
            raise InvalidSettingError("tick_width", self.tick_width, "an integer >= 1")

    def set_desired_width(self, width: int) -> bool:
        _validate_size("desired_width", width)
        return self._assign("desired_width", int(width))

    def set_desired_height(self, height: int) -> bool:
        _validate_size("desired_height", height)
        return self._assign("desired_height", int(height))

    def set_major_tick_length(self, length_percent: float) -> bool:
        _validate_tick_length(length_percent)
        return self._assign("major_tick_length", float(length_percent))

    def set_min_major_tick_spacing(self, min_spacing: int) -> bool:
        _validate_spacing(min_spacing)
        return self._assign("min_major_tick_spacing", int(min_spacing))

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def _assign(self, name: str, value: Any) -> bool:
        if getattr(self, name) == value:
            return False
        setattr(self, name, value)
        return True


def _validate_size(name: str, value: Optional[int]) -> None:
    if value is None or value < 0:
        raise InvalidSettingError(name, value, "an integer >= 0")


def _validate_tick_length(value: float) -> None:
    if not MIN_MAJOR_TICK_LENGTH <= value <= MAX_MAJOR_TICK_LENGTH:
        raise InvalidSettingError("major_tick_length", value, f"a fraction in [{MIN_MAJOR_TICK_LENGTH}, {MAX_MAJOR_TICK_LENGTH}]")


def _validate_spacing(value: int) -> None:
    if value < 1:
        raise InvalidSettingError("min_major_tick_spacing", value, "an integer >= 1")
