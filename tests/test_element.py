"""Unit tests for the element tree hosting the layout engine."""

import math
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shrinkpanel.errors import LayoutError
from shrinkpanel.layout.axis import Orientation
from shrinkpanel.layout.geometry import Rect, Size
from shrinkpanel.model.element import Box, ShrinkingPanel, layout_tree


def make_panel(shrink_index: int = 1, orientation: Orientation = Orientation.VERTICAL) -> ShrinkingPanel:
    """Panel with three 80 wide children of height 50, 100 and 50."""
    panel = ShrinkingPanel("root", orientation=orientation, shrink_index=shrink_index)
    panel.add_child(Box("header", 80, 50))
    panel.add_child(Box("list", 80, 100))
    panel.add_child(Box("footer", 80, 50))
    return panel


def test_box_measure_clamps():
    """Test that a box reports its preferred size clamped to the constraint."""
    box = Box("box", 80, 100)

    assert box.measure(Size(100, 60)) == Size(80, 60)
    assert box.desired_size == Size(80, 60)
    assert box.measure(Size.unbounded()) == Size(80, 100)


def test_arrange_before_measure():
    """Test that arranging an unmeasured element fails."""
    with pytest.raises(LayoutError):
        Box("box", 10, 10).arrange(Rect(0, 0, 10, 10))


def test_layout_overflow():
    """Test the overflow scenario through the tree."""
    panel = make_panel()

    size = layout_tree(panel, Size(100, 150))

    assert size == Size(100, 150)
    assert panel.bounds == Rect(0, 0, 100, 150)
    assert panel.find("header").bounds == Rect(0, 0, 80, 50)
    assert panel.find("list").bounds == Rect(0, 50, 80, 50)
    assert panel.find("footer").bounds == Rect(0, 100, 80, 50)


def test_layout_fits():
    """Test that nothing shrinks when there is room."""
    panel = make_panel()

    size = layout_tree(panel, Size(100, 300))

    assert panel.desired_size == Size(80, 200)
    assert size == Size(100, 300)
    assert panel.find("list").bounds == Rect(0, 50, 80, 100)


def test_layout_unbounded():
    """Test that an unbounded root takes its desired size."""
    panel = make_panel()

    assert layout_tree(panel, Size.unbounded()) == Size(80, 200)


def test_layout_out_of_range_index():
    """Test that an out-of-range index leaves every child at its size."""
    panel = make_panel(shrink_index=5)

    layout_tree(panel, Size(100, 150))

    assert [child.bounds.height for child in panel.children] == [50, 100, 50]
    assert panel.find("footer").bounds.y == 150


def test_nested_panels():
    """Test that a nested panel passes its shrinking on to its own children."""
    inner = ShrinkingPanel("inner", orientation=Orientation.HORIZONTAL, shrink_index=0)
    inner.add_child(Box("a", 60, 100))
    inner.add_child(Box("b", 40, 30))

    outer = ShrinkingPanel("outer", shrink_index=1)
    outer.add_child(Box("top", 100, 20))
    outer.add_child(inner)
    outer.add_child(Box("bottom", 100, 20))

    layout_tree(outer, Size(100, 90))

    # inner is offered 50 after the first round of measurement
    assert inner.bounds == Rect(0, 20, 100, 50)
    assert outer.find("a").bounds == Rect(0, 20, 60, 50)
    assert outer.find("b").bounds == Rect(60, 20, 40, 30)
    assert outer.find("bottom").bounds == Rect(0, 70, 100, 20)


def test_nested_panel_offset():
    """Test that children of a nested panel are placed in root coordinates."""
    inner = ShrinkingPanel("inner", items=[Box("x", 10, 10), Box("y", 10, 10)])
    outer = ShrinkingPanel("outer", orientation=Orientation.HORIZONTAL, items=[Box("left", 30, 20), inner])

    layout_tree(outer, Size.unbounded())

    assert inner.parent is outer
    assert outer.find("x").bounds == Rect(30, 0, 10, 10)
    assert outer.find("y").bounds == Rect(30, 10, 10, 10)


def test_tree_navigation():
    """Test walking, finding and depth."""
    panel = make_panel()
    inner = ShrinkingPanel("inner")
    inner.add_child(Box("leaf", 1, 1))
    panel.add_child(inner)

    names = [element.name for element in panel.walk()]

    assert names == ["root", "header", "list", "footer", "inner", "leaf"]
    assert panel.find("leaf").depth == 2
    assert panel.find("missing") is None
    assert panel.depth == 0


def test_remove_child():
    """Test removing children from a panel."""
    panel = make_panel()
    header = panel.find("header")

    assert panel.remove_child(header)
    assert header.parent is None
    assert not panel.remove_child(header)
    assert [child.name for child in panel.children] == ["list", "footer"]


def test_add_child_moves_between_panels():
    """Test that adding a child to a second panel detaches it from the first."""
    first = make_panel()
    second = ShrinkingPanel("second")
    header = first.find("header")

    second.add_child(header)

    assert header.parent is second
    assert [child.name for child in first.children] == ["list", "footer"]
    assert second.children == [header]

    second.add_child(header)
    assert second.children == [header]


def test_empty_panel():
    """Test that an empty panel wants no space."""
    panel = ShrinkingPanel("empty")

    assert panel.measure(Size(50, 50)) == Size(0, 0)
    panel.arrange(Rect(0, 0, 50, 50))
    assert panel.bounds == Rect(0, 0, 50, 50)


def test_zero_available():
    """Test layout into a zero-sized box."""
    panel = make_panel()

    size = layout_tree(panel, Size(0, 0))

    assert size == Size(0, 0)
    assert panel.find("list").bounds.height == 0
    assert not math.isnan(panel.find("footer").bounds.y)
