"""
Tile Collections

Ordered tile storage with the filtering, sorting and cycling rules the
layouts rely on. Insertion order is the tiling order.
"""

from __future__ import annotations
import logging
import math
from typing import (
    TYPE_CHECKING,
    Callable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from .geometry import Point2d, is_zero_point, point_diff, rect_center

if TYPE_CHECKING:
    from .tiles import BaseTile

logger = logging.getLogger(__name__)

IndexedTile = Tuple[int, "BaseTile"]
SortOrder = Callable[["TileCollection", "BaseTile", Point2d], float]

TAU = math.pi * 2


def classification_sort_order(
    collection: "TileCollection", tile: "BaseTile", screen_midpoint: Point2d
) -> float:
    """Tiled tiles first, then visible untiled ones, then the rest."""
    if collection.is_tiled(tile):
        return 0
    if collection.is_visible(tile):
        return 1
    return 2


def angular_sort_order(
    collection: "TileCollection", tile: "BaseTile", screen_midpoint: Point2d
) -> float:
    """
    Clockwise angle of the tile centre around the screen centre.

    The order starts just below due left, so a ring of windows cycles
    left, up, right, down. Hidden tiles sort after every visible one.
    """
    if not collection.is_visible(tile):
        return math.inf
    vector = point_diff(screen_midpoint, rect_center(tile.desired_rect()))
    if is_zero_point(vector):
        # due up
        angle = -math.pi / 2
    else:
        # -pi (due left) through +pi, clockwise in screen coordinates
        angle = math.atan2(vector.y, vector.x)

    angle += math.pi
    if angle > (31 / 32) * TAU:
        angle -= TAU
    logger.debug("sort order for %s: angle=%s vector=%s", tile, angle, vector)
    return angle


class TileCollection:
    """
    Ordered sequence of tiles, unique by window id.

    Tiles are classified as visible (not minimized), minimized, tiled
    (managed and visible) and visible-but-untiled. Cycling works on a
    stable sorted view given by the sort order strategy.
    """

    def __init__(self, bounds, sort_order: SortOrder = classification_sort_order):
        self.items: List["BaseTile"] = []
        self.bounds = bounds
        self._sort_order = sort_order

    def __iter__(self) -> Iterator["BaseTile"]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, idx: int) -> "BaseTile":
        return self.items[idx]

    # Classification
    def is_visible(self, tile: "BaseTile") -> bool:
        return not tile.is_minimized()

    def is_minimized(self, tile: "BaseTile") -> bool:
        return tile.is_minimized()

    def is_tiled(self, tile: "BaseTile") -> bool:
        return tile.managed and self.is_visible(tile)

    def is_visible_and_untiled(self, tile: "BaseTile") -> bool:
        return not self.is_tiled(tile) and self.is_visible(tile)

    def is_active(self, tile: "BaseTile") -> bool:
        return tile.is_active()

    def num_tiled(self) -> int:
        return sum(1 for _ in self.each_tiled())

    def sort_order(self, tile: "BaseTile", screen_midpoint: Point2d) -> float:
        return self._sort_order(self, tile, screen_midpoint)

    def sorted_with_indexes(self) -> List[IndexedTile]:
        """All tiles in sort order; equal ranks keep insertion order."""
        screen_midpoint = rect_center(self.bounds)
        ranked = [
            (self.sort_order(tile, screen_midpoint), idx, tile)
            for idx, tile in enumerate(self.items)
        ]
        ranked.sort(key=lambda entry: (entry[0], entry[1]))
        return [(idx, tile) for _, idx, tile in ranked]

    def sorted_view(self, predicate: Callable[["BaseTile"], bool]) -> List[IndexedTile]:
        return [entry for entry in self.sorted_with_indexes() if predicate(entry[1])]

    @staticmethod
    def wrap_index(idx: int, length: int) -> int:
        return idx % length

    def _with_active_and_neighbor(
        self,
        predicate: Callable[["BaseTile"], bool],
        diff: int,
        callback: Callable[[IndexedTile, IndexedTile], None],
    ) -> bool:
        filtered = self.sorted_view(predicate)
        active_idx = next(
            (i for i, (_, tile) in enumerate(filtered) if self.is_active(tile)), None
        )
        if active_idx is None:
            logger.debug("active tile not found")
            return False
        new_idx = self.wrap_index(active_idx + diff, len(filtered))
        logger.debug(
            "active tile found at index %d, neighbor index %d", active_idx, new_idx
        )
        callback(filtered[active_idx], filtered[new_idx])
        return True

    def select_cycle(self, diff: int) -> bool:
        """
        Activate the visible tile diff steps away from the active one.

        Returns:
            True if an active tile was found to cycle from
        """
        cycled = self._with_active_and_neighbor(
            self.is_visible, diff, lambda active, neighbor: neighbor[1].activate()
        )
        if not cycled:
            # nothing active: fall back to the first visible tile
            visible = [tile for tile in self.items if self.is_visible(tile)]
            if visible:
                visible[0].activate()
        return cycled

    def cycle(self, diff: int) -> bool:
        """
        Swap the active tile with its neighbour diff steps away.

        The active tile is either tiled or visible-untiled, so only one of the
        two views can match.
        """

        def swap(active: IndexedTile, neighbor: IndexedTile):
            self.swap_at(active[0], neighbor[0])

        done = self._with_active_and_neighbor(self.is_tiled, diff, swap)
        if not done:
            done = self._with_active_and_neighbor(self.is_visible_and_untiled, diff, swap)
        return done

    def most_recently_minimized(self) -> Optional["BaseTile"]:
        minimized = [tile for tile in self.items if self.is_minimized(tile)]
        if not minimized:
            return None
        return max(minimized, key=lambda tile: tile.minimized_order)

    # Mutation
    def swap_at(self, idx1: int, idx2: int):
        w1 = self.items[idx1]
        w2 = self.items[idx2]
        self.items[idx1] = w2
        self.items[idx2] = w1
        w1.swapped_with(w2)
        w2.swapped_with(w1)

    def contains(self, item) -> bool:
        return self.index_of(item) != -1

    def index_of(self, item) -> int:
        """Index of the tile whose window id matches item.id(), or -1."""
        item_id = item.id()
        for idx, tile in enumerate(self.items):
            if tile.id() == item_id:
                return idx
        return -1

    def push(self, tile: "BaseTile"):
        if self.contains(tile):
            return
        self.items.append(tile)

    def remove_at(self, idx: int) -> "BaseTile":
        return self.items.pop(idx)

    def insert_at(self, idx: int, tile: "BaseTile"):
        if self.contains(tile):
            return
        self.items.insert(idx, tile)

    # Queries
    def each_tiled(self) -> Iterator[IndexedTile]:
        for idx, tile in enumerate(self.items):
            if self.is_tiled(tile):
                yield idx, tile

    def active(self) -> Optional[IndexedTile]:
        for idx, tile in enumerate(self.items):
            if self.is_active(tile):
                return idx, tile
        return None

    def main(self) -> Optional[IndexedTile]:
        """The first tiled tile."""
        return next(self.each_tiled(), None)

    def for_layout(self) -> List["BaseTile"]:
        return [tile for tile in self.items if self.is_tiled(tile)]


class FloatingTileCollection(TileCollection):
    """Collection that cycles clockwise around the screen centre."""

    def __init__(self, bounds):
        super().__init__(bounds, sort_order=angular_sort_order)
