"""Orientation and axis projection helpers.

A stack is laid out along its primary (extent) axis, where child sizes add
up, and its cross axis, where the largest child wins. The orientation
decides which of width and height plays each role.
"""

from enum import Enum

from shrinkpanel.layout.geometry import Point, Size


class Orientation(Enum):
    """Direction in which children are stacked."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @classmethod
    def parse(cls, value: "str | Orientation") -> "Orientation":
        """Convert a name such as ``"vertical"`` into an Orientation.

        Raises:
            ValueError: If the name is not a known orientation
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


class Axis(Enum):
    """Role of a dimension in a stack."""

    PRIMARY = "primary"  # additive, the extent
    CROSS = "cross"  # maximum across children

    def dimension(self, orientation: Orientation) -> str:
        """Name of the Size attribute this axis maps to for an orientation."""
        vertical = orientation is Orientation.VERTICAL
        if self is Axis.PRIMARY:
            return "height" if vertical else "width"
        return "width" if vertical else "height"


def extent_of(size: Size, orientation: Orientation) -> float:
    """Component of ``size`` along the stacking axis."""
    return getattr(size, Axis.PRIMARY.dimension(orientation))


def cross_of(size: Size, orientation: Orientation) -> float:
    """Component of ``size`` across the stacking axis."""
    return getattr(size, Axis.CROSS.dimension(orientation))


def make_size(extent: float, cross: float, orientation: Orientation) -> Size:
    """Build a Size from its extent and cross components."""
    return Size(**{
        Axis.PRIMARY.dimension(orientation): extent,
        Axis.CROSS.dimension(orientation): cross,
    })


def make_point(extent: float, cross: float, orientation: Orientation) -> Point:
    """Build a Point from its extent and cross coordinates."""
    if orientation is Orientation.VERTICAL:
        return Point(x=cross, y=extent)
    return Point(x=extent, y=cross)
