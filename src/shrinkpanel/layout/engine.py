"""Layout engine for stacking children along one axis with a shrinking child.

Children are stacked along the primary axis at their preferred size. When
they do not fit, the child at ``shrink_index`` gives up exactly the amount of
space that is missing, down to zero; every other child keeps its preferred
size.
"""

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

import numpy as np

from shrinkpanel.layout.axis import Orientation, cross_of, extent_of, make_point, make_size
from shrinkpanel.layout.geometry import Rect, Size

logger = logging.getLogger(__name__)

T = TypeVar("T")

MeasureChild = Callable[[T, Size], Size]
DesiredSize = Callable[[T], Size]
PlaceChild = Callable[[T, Rect], None]


@dataclass
class LayoutConfig:
    """Configuration for the layout engine.

    Attributes:
        orientation: Direction in which children are stacked
        shrink_index: Index of the child that absorbs overflow. Indices
            outside the child list disable shrinking.
    """

    orientation: Orientation = Orientation.VERTICAL
    shrink_index: int = 0


@dataclass
class LayoutResult:
    """Result of a full layout operation.

    Attributes:
        size: Occupied size reported by the arrangement pass
        placements: Placement rectangle of each child, in child order
        overflow: Amount by which the children exceeded the final extent
    """

    size: Size = field(default_factory=Size)
    placements: list[Rect] = field(default_factory=list)
    overflow: float = 0.0

    def to_array(self) -> np.ndarray:
        """Placements as an ``(n, 4)`` array of ``x, y, width, height``."""
        if not self.placements:
            return np.zeros((0, 4), dtype=np.float64)
        return np.array([(*r.origin, *r.size) for r in self.placements], dtype=np.float64)


class AxisLayoutEngine:
    """Two-pass (measure, arrange) layout of a stack with one shrinking child.

    The engine keeps no state between calls. Hosts own the children and
    talk to the engine through callbacks, so the same engine instance can be
    used for nested containers.
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize the layout engine.

        Args:
            config: Layout configuration (uses defaults if None)
        """
        self.config = config or LayoutConfig()

    @property
    def orientation(self) -> Orientation:
        return self.config.orientation

    @property
    def shrink_index(self) -> int:
        return self.config.shrink_index

    def _shrink_target(self, count: int) -> int | None:
        """Return the shrink index if it addresses one of ``count`` children."""
        index = self.config.shrink_index
        if 0 <= index < count:
            return index
        return None

    def _aggregate(self, sizes: Sequence[Size]) -> tuple[float, float]:
        """Sum of extents and maximum of cross sizes."""
        extent_total = 0.0
        cross_max = 0.0
        for size in sizes:
            extent_total += extent_of(size, self.orientation)
            cross_max = max(cross_max, cross_of(size, self.orientation))
        return extent_total, cross_max

    def measure(
        self,
        children: Sequence[T],
        available_size: Size,
        measure_child: MeasureChild,
    ) -> Size:
        """Measure the children and return the size the stack wants.

        Every child is measured against the full available size. If the
        stacked extent does not fit, the shrink target is measured a second
        time with its extent reduced by the overflow. That second result only
        affects the child; the returned size is computed from the first
        round of measurements.

        Args:
            children: Children in stacking order
            available_size: Space offered to the stack, possibly unbounded
            measure_child: Callback returning a child's preferred size for a
                constraint

        Returns:
            Desired size, never larger than ``available_size``
        """
        desired, _ = self._measure(children, available_size, measure_child)
        return desired

    def _measure(
        self,
        children: Sequence[T],
        available_size: Size,
        measure_child: MeasureChild,
    ) -> tuple[Size, float]:
        """Measurement sweep. Returns the desired size and the overflow."""
        orientation = self.orientation
        sizes = [measure_child(child, available_size) for child in children]
        extent_total, cross_max = self._aggregate(sizes)

        available_extent = extent_of(available_size, orientation)
        available_cross = cross_of(available_size, orientation)

        overflow = 0.0
        if extent_total > available_extent:
            overflow = extent_total - available_extent
            target = self._shrink_target(len(children))
            if target is None:
                logger.debug(
                    f"Overflow of {overflow:.2f} with shrink index {self.shrink_index} "
                    f"out of range for {len(children)} children"
                )
            else:
                reduced = max(0.0, extent_of(sizes[target], orientation) - overflow)
                logger.debug(f"Measure overflow {overflow:.2f}: re-measuring child {target} to extent {reduced:.2f}")
                measure_child(children[target], make_size(reduced, available_cross, orientation))

        desired = make_size(
            min(extent_total, available_extent),
            min(cross_max, available_cross),
            orientation,
        )
        return desired, overflow

    def arrange(
        self,
        children: Sequence[T],
        final_size: Size,
        desired_size: DesiredSize,
        place_child: PlaceChild,
    ) -> Size:
        """Place the children back to back inside ``final_size``.

        Sizes are read through ``desired_size``, the value each child
        recorded while being measured; children are never measured here.

        Args:
            children: Children in stacking order
            final_size: Space allotted to the stack
            desired_size: Callback returning a child's recorded desired size
            place_child: Callback receiving each child's placement rectangle

        Returns:
            ``final_size``, unchanged
        """
        orientation = self.orientation
        sizes = [desired_size(child) for child in children]
        extent_total, _ = self._aggregate(sizes)
        overflow = max(0.0, extent_total - extent_of(final_size, orientation))
        target = self._shrink_target(len(children))
        if overflow > 0 and target is not None:
            logger.debug(f"Arrange overflow {overflow:.2f} absorbed by child {target}")
        elif overflow > 0:
            logger.debug(f"Arrange overflow {overflow:.2f} not absorbed, shrink index {self.shrink_index}")

        cursor = 0.0
        for i, (child, size) in enumerate(zip(children, sizes)):
            if i == target and overflow > 0:
                size = make_size(
                    max(0.0, extent_of(size, orientation) - overflow),
                    cross_of(size, orientation),
                    orientation,
                )
            place_child(child, Rect.from_origin(make_point(cursor, 0.0, orientation), size))
            cursor += extent_of(size, orientation)
        return final_size

    def compute_layout(self, sizes: Sequence[Size], available_size: Size) -> LayoutResult:
        """Run both passes over a list of fixed preferred sizes.

        Each child reports its preferred size clamped to the constraint it is
        offered, and remembers the last answer for the arrangement pass.
        Unbounded axes of ``available_size`` are arranged at the desired size.

        Args:
            sizes: Preferred size of each child, in stacking order
            available_size: Space offered to the stack

        Returns:
            LayoutResult with the occupied size and one placement per child
        """
        indices = list(range(len(sizes)))
        desired: dict[int, Size] = {}
        placements: dict[int, Rect] = {}

        def measure_child(i: int, constraint: Size) -> Size:
            desired[i] = sizes[i].clamp_to(constraint)
            return desired[i]

        measured, overflow = self._measure(indices, available_size, measure_child)
        final_size = Size(
            available_size.width if math.isfinite(available_size.width) else measured.width,
            available_size.height if math.isfinite(available_size.height) else measured.height,
        )
        self.arrange(indices, final_size, desired.__getitem__, placements.__setitem__)
        return LayoutResult(
            size=final_size,
            placements=[placements[i] for i in indices],
            overflow=overflow,
        )


def measure(
    children: Sequence[Any],
    available_size: Size,
    measure_child: MeasureChild,
    orientation: Orientation = Orientation.VERTICAL,
    shrink_index: int = 0,
) -> Size:
    """Measurement pass with an explicit configuration.

    See :meth:`AxisLayoutEngine.measure`.
    """
    engine = AxisLayoutEngine(LayoutConfig(orientation=orientation, shrink_index=shrink_index))
    return engine.measure(children, available_size, measure_child)


def arrange(
    children: Sequence[Any],
    final_size: Size,
    desired_size: DesiredSize,
    place_child: PlaceChild,
    orientation: Orientation = Orientation.VERTICAL,
    shrink_index: int = 0,
) -> Size:
    """Arrangement pass with an explicit configuration.

    See :meth:`AxisLayoutEngine.arrange`.
    """
    engine = AxisLayoutEngine(LayoutConfig(orientation=orientation, shrink_index=shrink_index))
    return engine.arrange(children, final_size, desired_size, place_child)
