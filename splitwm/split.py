"""
Split State

Ratios and partition counts used to divide the layout bounds.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from .geometry import Axis, Rect, divide_after, split_rect, within

logger = logging.getLogger(__name__)

T = TypeVar("T")

HALF = 0.5


class Split:
    """A single adjustable ratio along one axis."""

    def __init__(self, axis: Axis, ratio: float = HALF):
        self.axis = Axis(axis)
        self.ratio = ratio
        self.last_size: Optional[float] = None

    def adjust_ratio(self, diff: float):
        """Move the ratio by diff, clamped to [0, 1]."""
        self.ratio = min(1, max(0, self.ratio + diff))

    def save_last_rect(self, rect):
        self.last_size = rect.size[self.axis]

    def adjust_ratio_px(self, diff: float):
        """
        Move the split point by diff pixels.

        Pixels are converted using the extent seen by the last split.

        Raises:
            ValueError: If no split happened yet or the new ratio leaves (0, 1)
        """
        logger.debug("adjusting ratio %s by %s px", self.ratio, diff)
        if diff == 0:
            return
        if not self.last_size:
            raise ValueError(f"cannot adjust {self!r} by pixels before a split")
        current_px = self.ratio * self.last_size
        new_ratio = (current_px + diff) / self.last_size
        if not within(new_ratio, 0, 1):
            raise ValueError(f"failed ratio: {new_ratio}")
        logger.debug("new ratio %s (last size %s)", new_ratio, self.last_size)
        self.ratio = new_ratio

    def __repr__(self) -> str:
        return f"{type(self).__name__}(axis={self.axis.value!r}, ratio={self.ratio})"


class MultiSplit(Split):
    """
    Splits windows into partitions along an axis.

    The first partition holds `primary_windows` windows (at least one), each
    following partition holds one more, and the last partition takes whatever
    is left. Zero and negative primary counts are allowed.
    """

    def __init__(self, axis: Axis, primary_windows: int, max_partitions: int):
        super().__init__(axis)
        if max_partitions < 1:
            raise ValueError(f"max_partitions must be >= 1, got {max_partitions}")
        self.primary_windows = primary_windows
        self.max_partitions = max_partitions

    def split(
        self, bounds, windows: Sequence[T], padding: float
    ) -> List[Tuple[Rect, List[T]]]:
        """Pair each partition rectangle with the windows it holds."""
        self.save_last_rect(bounds)
        partitioned = self.partition_windows(windows)
        rects = split_rect(bounds, self.axis, padding, len(partitioned), self.ratio)
        return list(zip(rects, partitioned))

    def partition_windows(self, windows: Sequence[T]) -> List[List[T]]:
        partitioned = []
        remaining = list(windows)
        # every partition but the last one
        for i in range(self.max_partitions - 1):
            if not remaining:
                break
            take = max(1, self.primary_windows + i)
            taken, remaining = divide_after(take, remaining)
            partitioned.append(taken)
        if remaining:
            partitioned.append(remaining)
        return partitioned

    def in_primary_partition(self, idx: int) -> bool:
        return idx < self.primary_windows or idx == 0

    def __repr__(self) -> str:
        return (
            f"MultiSplit(axis={self.axis.value!r}, ratio={self.ratio}, "
            f"primary_windows={self.primary_windows}, "
            f"max_partitions={self.max_partitions})"
        )
