"""shrinkpanel - stack layout with a single shrinking child.

Children are stacked along one axis at their preferred size; when they do
not fit, one designated child shrinks by the missing amount.
"""

from shrinkpanel.layout import (
    AxisLayoutEngine,
    LayoutConfig,
    LayoutResult,
    Orientation,
    Rect,
    Size,
    arrange,
    measure,
)

__version__ = "0.1.0"

__all__ = [
    "AxisLayoutEngine",
    "LayoutConfig",
    "LayoutResult",
    "Orientation",
    "Rect",
    "Size",
    "arrange",
    "measure",
]
