import math

import numpy as np

from rulerkit.config import DEFAULT_INTERVAL, VALID_INTERVALS
from rulerkit.logging import get_logger

log = get_logger(__name__)


def select_interval(pixel_span: int, min_spacing: int, range_size: float) -> int:
    """
    Pick the smallest interval between major ticks such that the ticks are at least
    min_spacing pixels apart when range_size units are drawn over pixel_span pixels.

    The result is always VALID_INTERVALS[i] * 10^n for some n >= 0. The calculation is
    the same for both orientations; pixel_span is the length of the active axis.
    """
    if pixel_span <= 0 or min_spacing <= 0 or not 0 < range_size < math.inf:
        log.warning(
            "Cannot select interval for pixel_span=%s, min_spacing=%s, range_size=%s; using %d",
            pixel_span, min_spacing, range_size, DEFAULT_INTERVAL,
        )
        return DEFAULT_INTERVAL

    max_segments = max(1, pixel_span // min_spacing)
    smallest_interval = math.ceil(range_size / max_segments)
    magnitude = int(max(0, np.ceil(np.log10(float(smallest_interval))) - 1))
    scale = 10 ** magnitude

    for candidate in VALID_INTERVALS:
        interval = candidate * scale
        if interval >= smallest_interval:
            return interval

    # Only reachable through float error in log10; fall back to the top of the ladder
    interval = VALID_INTERVALS[-1] * scale
    log.debug("Interval ladder exhausted for smallest interval %s, using %d", smallest_interval, interval)
    return interval
