from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional
import math

import numpy as np

from rulerkit.config import MAX_TICK_DEPTH, MIN_MINOR_TICK_SPACING

# Major ticks sit one level above the first subdivision
MAJOR_DEPTH = -1


@dataclass(frozen=True)
class TickSpec:
    """A single tick produced by a planning pass.

    position is in ruler space, length is a fraction of the ruler thickness.
    Only major ticks carry a label.
    """
    position: float
    is_major: bool
    depth: int
    length: float
    label: Optional[str] = None


def first_tick(lower: float, interval: int) -> int:
    """Largest multiple of interval that does not exceed lower."""
    return int(math.floor(lower / interval)) * interval


def major_positions(lower: float, upper: float, interval: int) -> List[int]:
    """Multiples of interval starting at first_tick(lower) and strictly below upper."""
    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval}")
    # For integer positions p, p < upper is the same as p < ceil(upper)
    return np.arange(first_tick(lower, interval), math.ceil(upper), interval).tolist()


class TickPlanner:
    """
    Produces the ordered ticks of a ruler: every major tick followed by its minor ticks.

    Minor ticks come from recursive bisection of each major segment. A segment is only
    split if its two ends are at least min_minor_spacing pixels apart, and never more
    than max_depth levels deep. Each level halves the tick length.

    pixel_spacing(pos_a, pos_b) must return the pixel distance between two ruler
    positions for the ruler's current range, allocation and orientation.
    """

    def __init__(self, pixel_spacing: Callable[[float, float], int], major_tick_length: float, min_minor_spacing: int = MIN_MINOR_TICK_SPACING, max_depth: int = MAX_TICK_DEPTH) -> None:
        self.pixel_spacing = pixel_spacing
        self.major_tick_length = major_tick_length
        self.min_minor_spacing = min_minor_spacing
        self.max_depth = max_depth

    def plan(self, lower: float, upper: float, interval: int) -> List[TickSpec]:
        ticks: List[TickSpec] = []
        for pos in major_positions(lower, upper, interval):
            ticks.append(TickSpec(pos, True, MAJOR_DEPTH, self.major_tick_length, str(pos)))
            ticks.extend(self.minor_ticks(pos, pos + interval, 0, 0.5 * self.major_tick_length))
        return ticks

    def minor_ticks(self, lower: float, upper: float, depth: int, tick_length: float) -> Iterator[TickSpec]:
        """Yield minor ticks for [lower, upper] in pre-order: midpoint, left half, right half."""
        if depth > self.max_depth - 1:
            return
        if self.pixel_spacing(lower, upper) < self.min_minor_spacing:
            return

        tick_pos = lower + (upper - lower) / 2
        yield TickSpec(tick_pos, False, depth, tick_length)

        yield from self.minor_ticks(lower, tick_pos, depth + 1, 0.5 * tick_length)
        yield from self.minor_ticks(tick_pos, upper, depth + 1, 0.5 * tick_length)
