class RulerError(Exception):
    """Base class for all ruler errors."""


class InvalidRangeError(RulerError, ValueError):
    """Raised when a range does not satisfy lower < upper."""

    def __init__(self, lower: float, upper: float) -> None:
        self.lower = lower
        self.upper = upper
        super().__init__(f"Invalid ruler range [{lower}, {upper}): limits must be finite and lower must be smaller than upper")


class InvalidSettingError(RulerError, ValueError):
    """Raised when a tuning knob or size hint is outside its allowed range."""

    def __init__(self, name: str, value, allowed: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid value {value!r} for {name}: expected {allowed}")
