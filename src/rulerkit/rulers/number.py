from typing import List, Optional, Union

from rulerkit.config import DEFAULT_LOWER, DEFAULT_UPPER, RulerConfig
from rulerkit.logging import get_logger
from rulerkit.rulers.interval import select_interval
from rulerkit.rulers.mapping import check_range, to_value
from rulerkit.rulers.orientation import Orientation, OrientationStrategy, strategy_for
from rulerkit.rulers.ticks import TickPlanner, TickSpec, first_tick

log = get_logger(__name__)


class NumberRuler:
    """Numeric ruler with a linear mapping of [lower, upper) onto the allocated pixels.

    Holds the visible range, the allocation handed down by the host, the orientation
    and the tuning knobs. The major tick interval is recomputed whenever the range,
    the allocation or the minimum major tick spacing changes, and stays None until
    the active axis has a positive size.
    """

    def __init__(self, orientation: Union[Orientation, str] = Orientation.HORIZONTAL, lower: float = DEFAULT_LOWER, upper: float = DEFAULT_UPPER, config: Optional[RulerConfig] = None) -> None:
        check_range(lower, upper)
        self.lower: float = lower
        self.upper: float = upper
        self.width: int = 0
        self.height: int = 0
        self.interval: Optional[int] = None
        self.config: RulerConfig = config if config is not None else RulerConfig()
        self._strategy: OrientationStrategy = strategy_for(orientation)

    @property
    def orientation(self) -> Orientation:
        return self._strategy.orientation

    @property
    def strategy(self) -> OrientationStrategy:
        return self._strategy

    @property
    def length(self) -> int:
        """Allocated pixels along the ruler axis."""
        return self._strategy.axis_length(self.width, self.height)

    @property
    def range_size(self) -> float:
        return self.upper - self.lower

    def set_range(self, lower: float, upper: float) -> bool:
        """Replace the visible range. Raises InvalidRangeError and keeps the old range unless lower < upper and both are finite."""
        check_range(lower, upper)
        if (lower, upper) == (self.lower, self.upper):
            return False
        self.lower = lower
        self.upper = upper
        self.update_interval()
        return True

    def set_allocation(self, width: int, height: int) -> bool:
        if (width, height) == (self.width, self.height):
            return False
        self.width = width
        self.height = height
        self.update_interval()
        return True

    def set_desired_size(self, width: Optional[int] = None, height: Optional[int] = None) -> bool:
        """Update the size hints used by the host layout. Has no effect on tick placement."""
        changed = False
        if width is not None:
            changed = self.config.set_desired_width(width) or changed
        if height is not None:
            changed = self.config.set_desired_height(height) or changed
        return changed

    def set_orientation(self, orientation: Union[Orientation, str]) -> bool:
        """Switch the active geometry strategy. Returns True if the orientation changed."""
        strategy = strategy_for(orientation)
        if strategy is self._strategy:
            return False
        self._strategy = strategy
        return True

    def set_major_tick_length(self, length_percent: float) -> bool:
        return self.config.set_major_tick_length(length_percent)

    def set_min_major_tick_spacing(self, min_spacing: int) -> bool:
        changed = self.config.set_min_major_tick_spacing(min_spacing)
        if changed:
            self.update_interval()
        return changed

    def transform(self, value: float) -> int:
        """Convert ruler value to pixel position along the axis."""
        return self._strategy.draw_pos(self.lower, self.upper, value, self.width, self.height)

    def get_value_at(self, x: float) -> float:
        """Convert pixel position along the axis to ruler value."""
        return to_value(self.lower, self.upper, x, self.length)

    def pixel_spacing(self, pos_a: float, pos_b: float) -> int:
        return self._strategy.pixel_spacing(self.lower, self.upper, pos_a, pos_b, self.width, self.height)

    def first_tick(self) -> Optional[int]:
        if self.interval is None:
            return None
        return first_tick(self.lower, self.interval)

    def plan(self) -> List[TickSpec]:
        """Ticks to draw for the current state. Empty until an interval is known."""
        if self.interval is None:
            return []
        planner = TickPlanner(self.pixel_spacing, self.config.major_tick_length)
        return planner.plan(self.lower, self.upper, self.interval)

    def get_visible_range_str(self) -> str:
        """Get string representation of current visible range."""
        return f"{self.lower} - {self.upper}"

    def update_interval(self) -> None:
        """Recompute the major tick interval from the range and the allocated axis length."""
        length = self.length
        if length > 0:
            self.interval = select_interval(length, self.config.min_major_tick_spacing, self.range_size)
            log.debug("Interval for range [%s, %s) over %d px: %d", self.lower, self.upper, length, self.interval)
