from PySide6.QtCore import QLineF, QPointF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen

from rulerkit.config import LABEL_FONT_FAMILY, LABEL_FONT_PIXEL_SIZE
from rulerkit.rulers.number import NumberRuler


def label_font() -> QFont:
    font = QFont(LABEL_FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    font.setPixelSize(LABEL_FONT_PIXEL_SIZE)
    return font


class NumberRulerRenderer:
    """Draws a NumberRuler's outline, ticks and labels with a QPainter."""

    def __init__(self, ruler: NumberRuler) -> None:
        self.ruler = ruler

    def draw_ruler(self, painter: QPainter, width: int, height: int, color: QColor) -> None:
        ruler = self.ruler
        strategy = ruler.strategy
        tick_width = ruler.config.tick_width

        pen = QPen(color, tick_width)
        pen.setCapStyle(Qt.PenCapStyle.SquareCap)
        painter.setPen(pen)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)

        for line in strategy.outline(width, height, tick_width):
            painter.drawLine(QLineF(*line))

        # Labels ignore the widget font
        painter.setFont(label_font())
        metrics = painter.fontMetrics()
        for tick in ruler.plan():
            draw_pos = strategy.draw_pos(ruler.lower, ruler.upper, tick.position, width, height)
            line, tick_length = strategy.tick(draw_pos, tick.length, width, height, tick_width)
            painter.drawLine(QLineF(*line))

            if tick.label is None:
                continue
            bounds = metrics.boundingRect(tick.label)
            x, y, rotation = strategy.label_placement(draw_pos, tick_length, bounds.width(), bounds.height(), width, height)
            painter.save()
            painter.translate(x, y)
            painter.rotate(rotation)
            painter.drawText(QPointF(0, 0), tick.label)
            painter.restore()
