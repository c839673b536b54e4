from typing import Optional, Union
from PySide6.QtWidgets import QAbstractSlider, QWidget
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QPainter, QPalette

from rulerkit.errors import InvalidRangeError, InvalidSettingError
from rulerkit.logging import get_logger
from rulerkit.renderers.number import NumberRulerRenderer
from rulerkit.rulers.number import NumberRuler
from rulerkit.rulers.orientation import Orientation

log = get_logger(__name__)

_QT_ORIENTATIONS = {
    Qt.Orientation.Horizontal: Orientation.HORIZONTAL,
    Qt.Orientation.Vertical: Orientation.VERTICAL,
}


def to_orientation(orientation: Union[Orientation, Qt.Orientation, str]) -> Orientation:
    if isinstance(orientation, Qt.Orientation):
        return _QT_ORIENTATIONS[orientation]
    return Orientation(orientation)


class NumberRulerWidget(QWidget):
    """
    Widget showing a NumberRuler.

    The widget owns the host side of the ruler: it forwards its size on every resize,
    paints the tick plan with the palette's window and text colours, and exposes the
    ruler's setters as slots. Invalid input to a slot is logged and ignored.
    """

    def __init__(self, ruler: Optional[NumberRuler] = None, orientation: Union[Orientation, Qt.Orientation, str, None] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.ruler: NumberRuler = ruler if ruler is not None else NumberRuler()
        if orientation is not None:
            self.ruler.set_orientation(to_orientation(orientation))
        self.renderer = NumberRulerRenderer(self.ruler)

    def sizeHint(self) -> QSize:
        return QSize(self.ruler.config.desired_width, self.ruler.config.desired_height)

    def minimumSizeHint(self) -> QSize:
        return QSize(1, 1)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.ruler.set_allocation(self.width(), self.height())

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.palette().color(QPalette.ColorRole.Window))
        self.renderer.draw_ruler(painter, self.width(), self.height(), self.palette().color(QPalette.ColorRole.WindowText))
        painter.end()

    def set_range(self, lower: float, upper: float) -> bool:
        try:
            changed = self.ruler.set_range(lower, upper)
        except InvalidRangeError as exc:
            log.warning("Ignoring range update: %s", exc)
            return False
        if changed:
            self.update()
        return changed

    def set_orientation(self, orientation: Union[Orientation, Qt.Orientation, str]) -> bool:
        changed = self.ruler.set_orientation(to_orientation(orientation))
        if changed:
            # The active axis changed, so the interval must follow the current size
            self.ruler.update_interval()
            self.updateGeometry()
            self.update()
        return changed

    def set_desired_size(self, width: Optional[int] = None, height: Optional[int] = None) -> bool:
        try:
            changed = self.ruler.set_desired_size(width, height)
        except InvalidSettingError as exc:
            log.warning("Ignoring size hint: %s", exc)
            return False
        if changed:
            self.updateGeometry()
        return changed

    def set_major_tick_length(self, length_percent: float) -> bool:
        try:
            changed = self.ruler.set_major_tick_length(length_percent)
        except InvalidSettingError as exc:
            log.warning("Ignoring major tick length: %s", exc)
            return False
        if changed:
            self.update()
        return changed

    def set_min_major_tick_spacing(self, min_spacing: int) -> bool:
        try:
            changed = self.ruler.set_min_major_tick_spacing(min_spacing)
        except InvalidSettingError as exc:
            log.warning("Ignoring minimum major tick spacing: %s", exc)
            return False
        if changed:
            self.update()
        return changed


def bind_scrollbar(widget: NumberRulerWidget, slider: QAbstractSlider) -> None:
    """Keep the ruler range at [value, value + pageStep) of a scroll bar or other slider."""
    def update_ruler(*_args) -> None:
        lower = slider.value()
        widget.set_range(lower, lower + slider.pageStep())

    slider.valueChanged.connect(update_ruler)
    slider.rangeChanged.connect(update_ruler)
    update_ruler()
