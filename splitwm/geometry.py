"""
Geometry Primitives

Points, rectangles and the pure functions the tiling engine builds on.
All values are pixels. Nothing in this module holds state except Bounds.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar
import math

T = TypeVar("T")


class Axis(str, Enum):
    """Axis a split is applied along."""

    X = "x"  # left-to-right
    Y = "y"  # top-to-bottom

    @property
    def other(self) -> "Axis":
        return Axis.Y if self is Axis.X else Axis.X


def round_half_up(value: float) -> int:
    """Round .5 away from negative infinity (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Point2d:
    """A position or an extent in logical pixels."""

    x: float = 0
    y: float = 0

    def __getitem__(self, axis: Axis) -> float:
        return getattr(self, Axis(axis).value)

    def with_axis(self, axis: Axis, value: float) -> "Point2d":
        return replace(self, **{Axis(axis).value: value})


@dataclass(frozen=True)
class Rect:
    """Rectangle with a position and a size."""

    pos: Point2d = Point2d()
    size: Point2d = Point2d()

    @classmethod
    def of(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(Point2d(x, y), Point2d(width, height))


@dataclass(frozen=True)
class RectDelta:
    """
    Difference between two rectangles.

    Returned by move_rect_within() instead of a rectangle so callers have to
    apply it explicitly.
    """

    pos: Point2d = Point2d()
    size: Point2d = Point2d()

    @classmethod
    def zero(cls) -> "RectDelta":
        return cls()

    def apply_to(self, rect) -> Rect:
        return add_diff_to_rect(rect, self)

    def __add__(self, other: "RectDelta") -> "RectDelta":
        return RectDelta(point_add(self.pos, other.pos), point_add(self.size, other.size))


class Bounds:
    """
    The display region a layout fills.

    Shared by reference between a LayoutState, its TileCollection and its
    splits. update() pulls the current region from the provider, if any.
    """

    def __init__(self, rect: Rect, provider: Optional[Callable[[], Rect]] = None):
        self.pos = rect.pos
        self.size = rect.size
        self._provider = provider

    @property
    def rect(self) -> Rect:
        return Rect(self.pos, self.size)

    def set_rect(self, rect: Rect):
        self.pos = rect.pos
        self.size = rect.size

    def update(self):
        """Refresh from the live display state."""
        if self._provider is not None:
            self.set_rect(self._provider())

    def __repr__(self) -> str:
        return f"Bounds(pos={self.pos!r}, size={self.size!r})"


def copy_rect(rect) -> Rect:
    return Rect(rect.pos, rect.size)


def split_rect(
    rect, axis: Axis, padding: float, partitions: int, ratio: float = 0.5
) -> List[Rect]:
    """
    Split a rectangle into adjacent partitions along an axis.

    `ratio` is the share the first partition would get if there were exactly
    two partitions. With more partitions the first one keeps that relative
    size and all following partitions share the rest equally.

    Args:
        rect: Rectangle to split
        axis: Axis to split along
        padding: Gap left at the trailing edge of every partition
        partitions: Number of partitions
        ratio: First partition share, between 0 and 1

    Returns:
        List of `partitions` rectangles, first partition first
    """
    if ratio > 1 or ratio < 0:
        raise ValueError(f"invalid ratio: {ratio} (must be between 0 and 1)")
    if partitions < 0:
        raise ValueError(f"invalid partition count: {partitions}")
    if partitions == 0:
        return []
    if partitions == 1:
        return [rect if isinstance(rect, Rect) else copy_rect(rect)]

    axis = Axis(axis)
    extent = rect.size[axis]
    # ratio is first / (first + second), so scale as if there were two
    size_left_two = extent * 2 / partitions
    size_leftmost = round_half_up(size_left_two * ratio)
    size_others = round_half_up(size_left_two) - size_leftmost
    if size_leftmost + (partitions - 1) * size_others > extent:
        # ratios below one half would push the last partitions off the rect
        size_others = math.floor((extent - size_leftmost) / (partitions - 1))
    padding = min(
        math.floor(size_leftmost / 2), math.floor(size_others / 2), round_half_up(padding)
    )

    rects = [Rect(rect.pos, rect.size.with_axis(axis, size_leftmost - padding))]
    for i in range(partitions - 1):
        pos = rect.pos[axis] + size_leftmost + i * size_others + padding
        rects.append(
            Rect(
                rect.pos.with_axis(axis, pos),
                rect.size.with_axis(axis, size_others - padding),
            )
        )
    return rects


def add_diff_to_rect(rect, diff) -> Rect:
    return Rect(point_add(rect.pos, diff.pos), point_add(rect.size, diff.size))


def ensure_rect_exists(rect) -> Rect:
    return Rect(rect.pos, Point2d(max(1, rect.size.x), max(1, rect.size.y)))


def is_zero_point(point: Point2d) -> bool:
    return point.x == 0 and point.y == 0


def is_zero_rect(rect) -> bool:
    return is_zero_point(rect.pos) and is_zero_point(rect.size)


def zero_rect() -> Rect:
    return Rect()


def intersect(a, b) -> Optional[Rect]:
    """Overlapping region of two rectangles, or None if they are apart."""
    if (
        a.pos.x + a.size.x < b.pos.x  # b right of a
        or a.pos.y + a.size.y < b.pos.y  # b below a
        or b.pos.x + b.size.x < a.pos.x  # a right of b
        or b.pos.y + b.size.y < a.pos.y  # a below b
    ):
        return None

    x = max(a.pos.x, b.pos.x)
    y = max(a.pos.y, b.pos.y)
    w = min(a.pos.x + a.size.x, b.pos.x + b.size.x) - x
    h = min(a.pos.y + a.size.y, b.pos.y + b.size.y) - y
    return Rect.of(x, y, w, h)


def shrink(rect, border_px: float) -> Rect:
    """Inset a rectangle by border_px on every side."""
    return Rect(
        Point2d(rect.pos.x + border_px, rect.pos.y + border_px),
        Point2d(
            max(0, rect.size.x - 2 * border_px),
            max(0, rect.size.y - 2 * border_px),
        ),
    )


def minmax(a: float, b: float) -> Tuple[float, float]:
    return min(a, b), max(a, b)


def midpoint(a: float, b: float) -> int:
    lo, hi = minmax(a, b)
    return round_half_up(lo + (hi - lo) / 2)


def within(val: float, a: float, b: float) -> bool:
    """Open-interval containment."""
    lo, hi = minmax(a, b)
    return lo < val < hi


def move_rect_within(original_rect, bounds) -> RectDelta:
    """
    Delta that moves (and if needed shrinks) original_rect into bounds.

    The size is clamped to the bounds first, then the position is pushed in
    from the leading edges and pulled back from the trailing edges.
    """
    size = Point2d(
        min(original_rect.size.x, bounds.size.x),
        min(original_rect.size.y, bounds.size.y),
    )
    pos = Point2d(
        max(original_rect.pos.x, bounds.pos.x),
        max(original_rect.pos.y, bounds.pos.y),
    )

    def overshoot(axis: Axis) -> float:
        return max(0, (pos[axis] + size[axis]) - (bounds.pos[axis] + bounds.size[axis]))

    pos = Point2d(pos.x - overshoot(Axis.X), pos.y - overshoot(Axis.Y))
    return RectDelta(
        point_diff(original_rect.pos, pos),
        point_diff(original_rect.size, size),
    )


def point_diff(a: Point2d, b: Point2d) -> Point2d:
    """Vector from a to b."""
    return Point2d(b.x - a.x, b.y - a.y)


def point_add(a: Point2d, b: Point2d) -> Point2d:
    return Point2d(a.x + b.x, a.y + b.y)


def rect_center(rect) -> Point2d:
    return Point2d(
        midpoint(rect.pos.x, rect.pos.x + rect.size.x),
        midpoint(rect.pos.y, rect.pos.y + rect.size.y),
    )


def point_is_within(point: Point2d, rect) -> bool:
    return within(point.x, rect.pos.x, rect.pos.x + rect.size.x) and within(
        point.y, rect.pos.y, rect.pos.y + rect.size.y
    )


def point_eq(a: Point2d, b: Point2d) -> bool:
    return a.x == b.x and a.y == b.y


def rect_eq(a, b) -> bool:
    return point_eq(a.pos, b.pos) and point_eq(a.size, b.size)


def join_rects(a, b) -> Rect:
    """Smallest rectangle covering both a and b."""
    pos = Point2d(min(a.pos.x, b.pos.x), min(a.pos.y, b.pos.y))
    size = Point2d(
        max(a.pos.x + a.size.x - pos.x, b.pos.x + b.size.x - pos.x),
        max(a.pos.y + a.size.y - pos.y, b.pos.y + b.size.y - pos.y),
    )
    return Rect(pos, size)


def divide_after(num: int, items: Sequence[T]) -> Tuple[List[T], List[T]]:
    return list(items[:num]), list(items[num:])


def move_item(items: List[T], start: int, end: int) -> List[T]:
    items.insert(end, items.pop(start))
    return items
