from enum import Enum
from typing import List, NamedTuple, Tuple

from rulerkit.rulers.mapping import pixel_spacing, round_half_away, to_pixel

# Offset applied to line coordinates so 1px strokes land on whole pixels
LINE_COORD_OFFSET = 0.5

# Distance between a tick and its label along the ruler axis
LABEL_OFFSET = 4

# Where across the tick the label sits, as a fraction of the tick length
LABEL_ALIGN = 0.65

TEXT_ANCHOR = 0.5

Line = Tuple[float, float, float, float]


class LabelPlacement(NamedTuple):
    """Baseline origin of a label and its rotation in degrees."""
    x: float
    y: float
    rotation: float


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class OrientationStrategy:
    """Geometry of a ruler that depends on which axis the ruler runs along.

    There are exactly two implementations, one per Orientation. Both are stateless;
    use strategy_for() to get the shared instance.
    """
    orientation: Orientation

    def axis_length(self, width: int, height: int) -> int:
        raise NotImplementedError

    def thickness(self, width: int, height: int) -> int:
        raise NotImplementedError

    def draw_pos(self, lower: float, upper: float, pos: float, width: int, height: int) -> int:
        return to_pixel(lower, upper, pos, self.axis_length(width, height))

    def pixel_spacing(self, lower: float, upper: float, pos_a: float, pos_b: float, width: int, height: int) -> int:
        return pixel_spacing(lower, upper, pos_a, pos_b, self.axis_length(width, height))

    def tick_length(self, length_percent: float, width: int, height: int) -> int:
        return round_half_away(self.thickness(width, height) * length_percent)

    def outline(self, width: int, height: int, tick_width: int) -> List[Line]:
        raise NotImplementedError

    def tick(self, draw_pos: int, length_percent: float, width: int, height: int, tick_width: int) -> Tuple[Line, int]:
        raise NotImplementedError

    def label_placement(self, draw_pos: int, tick_length: int, text_width: float, text_height: float, width: int, height: int) -> LabelPlacement:
        raise NotImplementedError


class HorizontalStrategy(OrientationStrategy):
    """Ruler along the x axis: ticks grow up from the bottom edge, labels to their right."""
    orientation = Orientation.HORIZONTAL

    def axis_length(self, width: int, height: int) -> int:
        return width

    def thickness(self, width: int, height: int) -> int:
        return height

    def outline(self, width: int, height: int, tick_width: int) -> List[Line]:
        offset = tick_width * LINE_COORD_OFFSET
        return [
            (offset, 0, offset, height),                   # left
            (width - offset, 0, width - offset, height),   # right
            (0, height - offset, width, height - offset),  # bottom
        ]

    def tick(self, draw_pos: int, length_percent: float, width: int, height: int, tick_width: int) -> Tuple[Line, int]:
        tick_length = self.tick_length(length_percent, width, height)
        x = draw_pos + tick_width * LINE_COORD_OFFSET
        return (x, height, x, height - tick_length), tick_length

    def label_placement(self, draw_pos: int, tick_length: int, text_width: float, text_height: float, width: int, height: int) -> LabelPlacement:
        return LabelPlacement(
            draw_pos + LABEL_OFFSET,
            height - LABEL_ALIGN * tick_length + TEXT_ANCHOR * text_height,
            0.0,
        )


class VerticalStrategy(OrientationStrategy):
    """Ruler along the y axis: ticks grow left from the right edge, labels rotated above them."""
    orientation = Orientation.VERTICAL

    def axis_length(self, width: int, height: int) -> int:
        return height

    def thickness(self, width: int, height: int) -> int:
        return width

    def outline(self, width: int, height: int, tick_width: int) -> List[Line]:
        offset = tick_width * LINE_COORD_OFFSET
        return [
            (0, offset, width, offset),                    # top
            (0, height - offset, width, height - offset),  # bottom
            (width - offset, 0, width - offset, height),   # right
        ]

    def tick(self, draw_pos: int, length_percent: float, width: int, height: int, tick_width: int) -> Tuple[Line, int]:
        tick_length = self.tick_length(length_percent, width, height)
        y = draw_pos + tick_width * LINE_COORD_OFFSET
        return (width, y, width - tick_length, y), tick_length

    def label_placement(self, draw_pos: int, tick_length: int, text_width: float, text_height: float, width: int, height: int) -> LabelPlacement:
        # Text is rotated a quarter turn counter-clockwise, so it reads bottom to top
        return LabelPlacement(
            width - LABEL_ALIGN * tick_length + TEXT_ANCHOR * text_height,
            draw_pos + LABEL_OFFSET + text_width,
            -90.0,
        )


_STRATEGIES = {
    Orientation.HORIZONTAL: HorizontalStrategy(),
    Orientation.VERTICAL: VerticalStrategy(),
}


def strategy_for(orientation: Orientation) -> OrientationStrategy:
    return _STRATEGIES[Orientation(orientation)]
