from .number import NumberRuler
from .orientation import Orientation, OrientationStrategy, HorizontalStrategy, VerticalStrategy, strategy_for
from .interval import select_interval
from .mapping import to_pixel, pixel_spacing, to_value
from .ticks import TickSpec, TickPlanner, first_tick, major_positions

__all__ = [
    'NumberRuler',
    'Orientation',
    'OrientationStrategy',
    'HorizontalStrategy',
    'VerticalStrategy',
    'strategy_for',
    'select_interval',
    'to_pixel',
    'pixel_spacing',
    'to_value',
    'TickSpec',
    'TickPlanner',
    'first_tick',
    'major_positions',
]
