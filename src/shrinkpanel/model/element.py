"""Element classes forming a retained layout tree.

Elements remember the size they asked for during measurement
(``desired_size``) and the rectangle they were given during arrangement
(``bounds``), which is what the layout engine expects from its host.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Self

from shrinkpanel.errors import LayoutError
from shrinkpanel.layout.axis import Orientation
from shrinkpanel.layout.engine import AxisLayoutEngine, LayoutConfig
from shrinkpanel.layout.geometry import Rect, Size


@dataclass(eq=False)
class Element:
    """Base node of the layout tree.

    Attributes:
        name: Name used to find and report the element
        parent: Containing panel (None for the root)
        desired_size: Size recorded by the last measurement
        bounds: Rectangle assigned by the last arrangement, in root coordinates
    """

    name: str
    parent: "ShrinkingPanel | None" = field(default=None, repr=False, kw_only=True)
    desired_size: Size | None = field(default=None, repr=False, kw_only=True)
    bounds: Rect | None = field(default=None, repr=False, kw_only=True)

    @property
    def children(self) -> list["Element"]:
        """Child elements (always empty for leaves)."""
        return []

    @property
    def depth(self) -> int:
        """Get the depth of this element in the tree (root = 0)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def measure(self, available_size: Size) -> Size:
        """Measure this element and record its desired size.

        Args:
            available_size: Space offered by the parent

        Returns:
            Desired size, clamped into ``[0, available_size]``
        """
        self.desired_size = self._measure_override(available_size).clamp_to(available_size)
        return self.desired_size

    def arrange(self, rect: Rect) -> None:
        """Record the final rectangle of this element and arrange its content.

        Raises:
            LayoutError: If the element has never been measured
        """
        if self.desired_size is None:
            raise LayoutError(f"element '{self.name}' arranged before it was measured")
        self.bounds = rect
        self._arrange_override(rect)

    def _measure_override(self, available_size: Size) -> Size:
        return Size()

    def _arrange_override(self, rect: Rect) -> None:
        pass

    def walk(self) -> Iterator["Element"]:
        """Yield this element and all its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> "Element | None":
        """Find an element in this subtree by name.

        Args:
            name: Name of the element to find

        Returns:
            The first matching element in pre-order, None if not found
        """
        for element in self.walk():
            if element.name == name:
                return element
        return None


@dataclass(eq=False)
class Box(Element):
    """Leaf element with a fixed preferred size."""

    width: float = 0.0
    height: float = 0.0

    @property
    def preferred_size(self) -> Size:
        return Size(self.width, self.height)

    def _measure_override(self, available_size: Size) -> Size:
        return self.preferred_size

    def __repr__(self) -> str:
        return f"Box({self.name}, w={self.width:.2f}, h={self.height:.2f})"


@dataclass(eq=False)
class ShrinkingPanel(Element):
    """Container stacking its children and shrinking one of them to fit.

    Attributes:
        orientation: Direction in which children are stacked
        shrink_index: Index of the child that gives up space on overflow
    """

    orientation: Orientation = Orientation.VERTICAL
    shrink_index: int = 0
    items: list[Element] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        for child in self.items:
            child.parent = self

    @property
    def children(self) -> list[Element]:
        return self.items

    @property
    def engine(self) -> AxisLayoutEngine:
        """Engine configured from this panel's current settings."""
        return AxisLayoutEngine(LayoutConfig(orientation=self.orientation, shrink_index=self.shrink_index))

    def add_child(self, child: Element) -> Self:
        """Append a child element, detaching it from any previous panel.

        Args:
            child: Element to add

        Returns:
            This panel, for chaining
        """
        if isinstance(child.parent, ShrinkingPanel):
            child.parent.remove_child(child)
        child.parent = self
        self.items.append(child)
        return self

    def remove_child(self, child: Element) -> bool:
        """Remove a child element.

        Args:
            child: Element to remove

        Returns:
            True if child was removed, False if not found
        """
        try:
            self.items.remove(child)
        except ValueError:
            return False
        child.parent = None
        return True

    def _measure_override(self, available_size: Size) -> Size:
        return self.engine.measure(self.items, available_size, _measure_child)

    def _arrange_override(self, rect: Rect) -> None:
        def place_child(child: Element, child_rect: Rect) -> None:
            child.arrange(child_rect.translate(rect.x, rect.y))

        self.engine.arrange(self.items, rect.size, _desired_size, place_child)

    def __repr__(self) -> str:
        return (
            f"ShrinkingPanel({self.name}, {self.orientation.value}, "
            f"shrink_index={self.shrink_index}, children={len(self.items)})"
        )


def _measure_child(child: Element, constraint: Size) -> Size:
    return child.measure(constraint)


def _desired_size(child: Element) -> Size:
    if child.desired_size is None:
        raise LayoutError(f"element '{child.name}' arranged before it was measured")
    return child.desired_size


def layout_tree(root: Element, available_size: Size) -> Size:
    """Measure and arrange a whole tree.

    The root is arranged at the origin into ``available_size``; an
    unbounded axis falls back to the root's desired size.

    Args:
        root: Root of the tree
        available_size: Space offered to the root

    Returns:
        Final size of the root
    """
    desired = root.measure(available_size)
    final_size = Size(
        available_size.width if math.isfinite(available_size.width) else desired.width,
        available_size.height if math.isfinite(available_size.height) else desired.height,
    )
    root.arrange(Rect(0.0, 0.0, final_size.width, final_size.height))
    return final_size
