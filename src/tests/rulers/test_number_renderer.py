import os
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QRect
from PySide6.QtGui import QColor, QFont
from PySide6.QtWidgets import QApplication

from rulerkit.config import LABEL_FONT_FAMILY, LABEL_FONT_PIXEL_SIZE
from rulerkit.renderers.number import NumberRulerRenderer
from rulerkit.rulers.number import NumberRuler
from rulerkit.rulers.orientation import Orientation


class FakeMetrics:
    def boundingRect(self, text):
        return QRect(0, 0, 6 * len(text), 10)


class FakePainter:
    """Records the calls the renderer makes instead of drawing."""

    def __init__(self):
        self.lines = []
        self.texts = []
        self._offset = (0, 0)
        self.font = None
        self._rotation = 0

    def setPen(self, pen):
        self.pen = pen

    def setRenderHint(self, hint, on=True):
        pass

    def setFont(self, font):
        self.font = font

    def fontMetrics(self):
        return FakeMetrics()

    def drawLine(self, line):
        self.lines.append((line.x1(), line.y1(), line.x2(), line.y2()))

    def save(self):
        self._saved = (self._offset, self._rotation)

    def restore(self):
        self._offset, self._rotation = self._saved

    def translate(self, x, y):
        self._offset = (x, y)

    def rotate(self, angle):
        self._rotation = angle

    def drawText(self, point, text):
        self.texts.append((self._offset, self._rotation, text))


class TestNumberRulerRenderer(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])

    def render(self, ruler, width, height):
        ruler.set_allocation(width, height)
        painter = FakePainter()
        NumberRulerRenderer(ruler).draw_ruler(painter, width, height, QColor("white"))
        return painter

    def test_horizontal(self):
        ruler = NumberRuler(Orientation.HORIZONTAL, 0, 10)
        painter = self.render(ruler, 200, 25)

        self.assertEqual(ruler.interval, 5)
        # 3 outline lines, 2 major ticks with 3 minor ticks each
        self.assertEqual(len(painter.lines), 3 + 2 * 4)
        self.assertEqual(painter.lines[3], (0.5, 25, 0.5, 5))
        self.assertEqual(painter.texts, [((4, 17), 0.0, "0"), ((104, 17), 0.0, "5")])
        self.assertEqual(painter.pen.width(), 1)

    def test_vertical(self):
        ruler = NumberRuler(Orientation.VERTICAL, 0, 10)
        painter = self.render(ruler, 25, 200)

        self.assertEqual(len(painter.lines), 3 + 2 * 4)
        self.assertEqual(painter.lines[3], (25, 0.5, 5, 0.5))
        self.assertEqual([t[1] for t in painter.texts], [-90.0, -90.0])
        self.assertEqual([t[0] for t in painter.texts], [(17, 10), (17, 110)])

    def test_nothing_but_outline_without_interval(self):
        painter = FakePainter()
        NumberRulerRenderer(NumberRuler()).draw_ruler(painter, 200, 25, QColor("white"))
        self.assertEqual(len(painter.lines), 3)
        self.assertEqual(painter.texts, [])

    def test_labels_use_fixed_font(self):
        painter = self.render(NumberRuler(Orientation.HORIZONTAL, 0, 10), 200, 25)
        self.assertEqual(painter.font.family(), LABEL_FONT_FAMILY)
        self.assertEqual(painter.font.pixelSize(), LABEL_FONT_PIXEL_SIZE)
        self.assertEqual(painter.font.styleHint(), QFont.StyleHint.SansSerif)


if __name__ == '__main__':
    unittest.main()
