"""Layout engine for stacking panels.

This module contains the two-pass layout algorithm that stacks
children along one axis and shrinks a single child on overflow.
"""

from shrinkpanel.layout.axis import Axis, Orientation
from shrinkpanel.layout.engine import AxisLayoutEngine, LayoutConfig, LayoutResult, arrange, measure
from shrinkpanel.layout.geometry import Point, Rect, Size

__all__ = [
    "Axis",
    "AxisLayoutEngine",
    "LayoutConfig",
    "LayoutResult",
    "Orientation",
    "Point",
    "Rect",
    "Size",
    "arrange",
    "measure",
]
