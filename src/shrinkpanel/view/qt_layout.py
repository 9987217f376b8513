"""Qt layout that stacks items and shrinks one of them to fit.

``ShrinkingLayout`` behaves like a ``QBoxLayout`` without stretch: every item
gets its size hint along the stacking direction. When the items do not fit,
the item at ``shrinkIndex`` gives up the missing space. Put a scrolling
widget (a list or a scroll area) at that index to keep the items after it
visible until the scrolling widget needs all the room.
"""

import math

from PyQt6.QtCore import QRect, QSize, Qt, pyqtSignal
from PyQt6.QtWidgets import QLayout, QLayoutItem

from shrinkpanel.layout.axis import Orientation, cross_of, make_size
from shrinkpanel.layout.engine import AxisLayoutEngine, LayoutConfig
from shrinkpanel.layout.geometry import Rect, Size


def _to_orientation(orientation: Qt.Orientation) -> Orientation:
    if orientation == Qt.Orientation.Horizontal:
        return Orientation.HORIZONTAL
    return Orientation.VERTICAL


class ShrinkingLayout(QLayout):
    """QLayout driven by the axis layout engine."""

    # Signals
    orientation_changed = pyqtSignal(Qt.Orientation)
    shrink_index_changed = pyqtSignal(int)

    def __init__(
        self,
        parent=None,
        orientation: Qt.Orientation = Qt.Orientation.Vertical,
        shrink_index: int = 0,
    ) -> None:
        """Initialize the layout.

        Args:
            parent: Parent widget (optional)
            orientation: Stacking direction
            shrink_index: Index of the item that shrinks on overflow
        """
        super().__init__(parent)
        self._items: list[QLayoutItem] = []
        self._orientation = orientation
        self._shrink_index = shrink_index
        self._desired: dict[int, Size] = {}

    # QLayout interface

    def addItem(self, item: QLayoutItem) -> None:
        self._items.append(item)
        self.invalidate()

    def count(self) -> int:
        return len(self._items)

    def itemAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def takeAt(self, index: int) -> QLayoutItem | None:
        if 0 <= index < len(self._items):
            item = self._items.pop(index)
            self.invalidate()
            return item
        return None

    def expandingDirections(self) -> Qt.Orientation:
        return Qt.Orientation(0)

    def sizeHint(self) -> QSize:
        size = self._engine().measure(self._indices(), Size.unbounded(), self._measure_item)
        return self._with_margins(size)

    def minimumSize(self) -> QSize:
        orientation = _to_orientation(self._orientation)

        def measure_item(index: int, constraint: Size) -> Size:
            size = self._item_size(index)
            if index == self._shrink_index:
                return make_size(0.0, cross_of(size, orientation), orientation)
            return size

        size = self._engine().measure(self._indices(), Size.unbounded(), measure_item)
        return self._with_margins(size)

    def setGeometry(self, rect: QRect) -> None:
        super().setGeometry(rect)
        margins = self.contentsMargins()
        contents = rect.adjusted(margins.left(), margins.top(), -margins.right(), -margins.bottom())
        available = Size(max(0, contents.width()), max(0, contents.height()))

        def place_item(index: int, placement: Rect) -> None:
            left = round(placement.min_x)
            top = round(placement.min_y)
            self._items[index].setGeometry(QRect(
                contents.x() + left,
                contents.y() + top,
                round(placement.max_x) - left,
                round(placement.max_y) - top,
            ))

        engine = self._engine()
        indices = self._indices()
        self._desired.clear()
        engine.measure(indices, available, self._measure_item)
        engine.arrange(indices, available, self._desired.__getitem__, place_item)

    # Properties

    def orientation(self) -> Qt.Orientation:
        return self._orientation

    def setOrientation(self, orientation: Qt.Orientation) -> None:
        if orientation == self._orientation:
            return
        self._orientation = orientation
        self.invalidate()
        self.orientation_changed.emit(orientation)

    def shrinkIndex(self) -> int:
        return self._shrink_index

    def setShrinkIndex(self, index: int) -> None:
        if index == self._shrink_index:
            return
        self._shrink_index = index
        self.invalidate()
        self.shrink_index_changed.emit(index)

    # Helpers

    def _engine(self) -> AxisLayoutEngine:
        return AxisLayoutEngine(LayoutConfig(
            orientation=_to_orientation(self._orientation),
            shrink_index=self._shrink_index,
        ))

    def _indices(self) -> list[int]:
        return list(range(len(self._items)))

    def _item_size(self, index: int) -> Size:
        """Size hint of an item; hidden widgets take no space."""
        item = self._items[index]
        if item.widget() is not None and item.isEmpty():
            return Size()
        hint = item.sizeHint()
        return Size(max(0, hint.width()), max(0, hint.height()))

    def _measure_item(self, index: int, constraint: Size) -> Size:
        self._desired[index] = self._item_size(index).clamp_to(constraint)
        return self._desired[index]

    def _with_margins(self, size: Size) -> QSize:
        margins = self.contentsMargins()
        return QSize(
            math.ceil(size.width) + margins.left() + margins.right(),
            math.ceil(size.height) + margins.top() + margins.bottom(),
        )
