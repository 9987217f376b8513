"""Size, point and rectangle classes for 2D layout."""

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Size:
    """2D size.

    Either component may be ``math.inf`` to mean the bound is unconstrained.

    Attributes:
        width: Size along the X axis
        height: Size along the Y axis
    """

    width: float = 0.0
    height: float = 0.0

    @classmethod
    def unbounded(cls) -> "Size":
        """Create a size that is unconstrained on both axes."""
        return cls(math.inf, math.inf)

    @property
    def is_bounded(self) -> bool:
        """Whether both components are finite."""
        return math.isfinite(self.width) and math.isfinite(self.height)

    def clamp_to(self, bound: "Size") -> "Size":
        """Clamp this size into ``[0, bound]`` on each axis."""
        return Size(
            max(0.0, min(self.width, bound.width)),
            max(0.0, min(self.height, bound.height)),
        )

    def __iter__(self) -> Iterator[float]:
        yield self.width
        yield self.height

    def __repr__(self) -> str:
        return f"Size(w={self.width:.2f}, h={self.height:.2f})"


@dataclass(frozen=True)
class Point:
    """2D point."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left origin and its size.

    Attributes:
        x: X coordinate of the origin
        y: Y coordinate of the origin
        width: Width of the rectangle
        height: Height of the rectangle
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_origin(cls, origin: Point, size: Size) -> "Rect":
        """Create a rectangle from an origin point and a size."""
        return cls(origin.x, origin.y, size.width, size.height)

    @property
    def origin(self) -> Point:
        """Top-left corner."""
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        """Width and height as a Size."""
        return Size(self.width, self.height)

    @property
    def min_x(self) -> float:
        """Minimum X coordinate."""
        return self.x

    @property
    def max_x(self) -> float:
        """Maximum X coordinate."""
        return self.x + self.width

    @property
    def min_y(self) -> float:
        """Minimum Y coordinate."""
        return self.y

    @property
    def max_y(self) -> float:
        """Maximum Y coordinate."""
        return self.y + self.height

    def translate(self, dx: float, dy: float) -> "Rect":
        """Create a new rectangle translated by the given amounts."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def contains_point(self, px: float, py: float) -> bool:
        """Check if a point is inside this rectangle."""
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y

    def intersects(self, other: "Rect") -> bool:
        """Check if this rectangle overlaps another.

        Rectangles that only share an edge do not intersect, so children
        placed back to back never report an overlap.

        Args:
            other: Other rectangle to check intersection with

        Returns:
            True if the rectangles overlap, False otherwise
        """
        return (
            self.min_x < other.max_x
            and self.max_x > other.min_x
            and self.min_y < other.max_y
            and self.max_y > other.min_y
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"Rect(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
