import math

from rulerkit.errors import InvalidRangeError


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (round(2.5) == 3, round(-2.5) == -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def check_range(lower: float, upper: float) -> None:
    """Raise InvalidRangeError unless lower < upper and both limits are finite."""
    if not (lower < upper and math.isfinite(lower) and math.isfinite(upper)):
        raise InvalidRangeError(lower, upper)


def to_pixel(lower: float, upper: float, pos: float, span: int) -> int:
    """Convert ruler value pos to a pixel offset within span pixels. Not clamped to [0, span]."""
    check_range(lower, upper)
    scale = span / (upper - lower)
    return round_half_away(scale * (pos - lower))


def pixel_spacing(lower: float, upper: float, pos_a: float, pos_b: float, span: int) -> int:
    """Pixel distance from pos_a to pos_b. Negative when pos_b lies before pos_a."""
    return to_pixel(lower, upper, pos_b, span) - to_pixel(lower, upper, pos_a, span)


def to_value(lower: float, upper: float, pixel: float, span: int) -> float:
    """Convert a pixel offset back to a ruler value."""
    if span <= 0:
        raise ValueError(f"Pixel span must be positive, got {span}")
    return lower + (pixel / span) * (upper - lower)
