"""
Tiling Layout

Main/secondary partition tiling along a vertical or horizontal main axis.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Optional

from .layout_base import BaseLayout, LayoutState
from ..geometry import Axis, Rect, point_is_within, shrink, split_rect
from ..tiles import TiledTile

if TYPE_CHECKING:
    from ..split import Split
    from ..tiles import BaseTile
    from ..window import Window

logger = logging.getLogger(__name__)


class BaseTiledLayout(BaseLayout):
    """
    Partition tiling layout.

    The main split cuts the bounds into partitions along the main axis, the
    first holding the primary windows. Each partition is then divided evenly
    along the other axis between the windows it holds.
    """

    tiles_by_default = True

    def __init__(self, axis: Axis, state: LayoutState, **kwargs):
        super().__init__(state, **kwargs)
        self.main_axis = Axis(axis)
        self.main_split = state.splits[self.main_axis]

    @property
    def name(self) -> str:
        return f"tiled-{self.main_axis.value}"

    def create_tile(self, win: "Window") -> TiledTile:
        return TiledTile(
            win, self.state, host=self.host, enforce_delay_ms=self.enforce_delay_ms
        )

    def layout(self):
        self.bounds.update()
        padding = self.state.padding
        layout_tiles = self.tiles.for_layout()
        logger.debug("laying out %d windows", len(layout_tiles))

        for rect, group in self.main_split.split(self.bounds, layout_tiles, padding):
            self._layout_side(rect, group, padding)

    def _layout_side(self, rect: Rect, tiles: List["BaseTile"], padding: int):
        rects = split_rect(rect, self.main_axis.other, padding, len(tiles))
        for tile_rect, tile in zip(rects, tiles):
            tile.set_rect(tile_rect)

    def get_main_window_count(self) -> int:
        return self.main_split.primary_windows

    def set_main_window_count(self, count: int):
        # zero and negative counts are valid, see MultiSplit
        self.main_split.primary_windows = count
        self.layout()

    def add_main_window_count(self, diff: int):
        self.set_main_window_count(self.get_main_window_count() + diff)

    def get_partition_count(self) -> int:
        return self.main_split.max_partitions

    def set_partition_count(self, count: int):
        self.main_split.max_partitions = max(1, count)
        self.layout()

    def add_partition_count(self, diff: int):
        self.set_partition_count(self.get_partition_count() + diff)

    def adjust_main_window_area(self, diff: float):
        self.main_split.adjust_ratio(diff)
        self.layout()

    def adjust_current_window_size(self, diff: float):
        entry = self.active_tile()
        if entry is None:
            return
        self.adjust_split_for_tile(entry[1], self.main_axis.other, diff_ratio=diff)
        self.layout()

    def adjust_split_for_tile(
        self,
        tile: "BaseTile",
        axis: Axis,
        diff_ratio: Optional[float] = None,
        diff_px: Optional[float] = None,
    ):
        """
        Resize a tile by moving the split next to it.

        On the main axis this moves the main split, inverted for tiles outside
        the primary partition. On the other axis it moves the tile's own
        bottom split, or failing that its top split (inverted).
        """

        def adjust(split: "Split", inverted: bool):
            if diff_px is not None:
                split.adjust_ratio_px(-diff_px if inverted else diff_px)
            elif diff_ratio is not None:
                split.adjust_ratio(-diff_ratio if inverted else diff_ratio)

        if Axis(axis) is self.main_axis:
            idx = self.tiles.index_of(tile)
            adjust(self.main_split, not self.main_split.in_primary_partition(idx))
        elif tile.bottom_split is not None:
            adjust(tile.bottom_split, False)
        elif tile.top_split is not None:
            adjust(tile.top_split, True)

    def activate_main_window(self):
        entry = self.tiles.main()
        if entry is not None:
            entry[1].activate()

    def swap_active_with_main(self):
        active = self.tiles.active()
        main = self.tiles.main()
        if active is None or main is None:
            return
        self.tiles.swap_at(active[0], main[0])
        self.layout()

    def on_window_moved(self, win: "Window") -> bool:
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("couldn't find tile for moved window %s", win)
            return False
        idx, tile = entry
        moved = False
        if tile.managed:
            moved = self._swap_moved_tile_if_necessary(tile, idx)
        if not moved:
            tile.update_desired_rect()
        self.layout()
        return True

    def on_window_resized(self, win: "Window") -> bool:
        entry = self.managed_tile_for(win)
        if entry is None:
            return False
        entry[1].update_desired_rect()
        self.layout()
        return True

    def override_external_change(self, win: "Window", delayed: bool = False):
        # the window resized itself, put it back
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("override_external_change called for unknown window %s", win)
            return
        entry[1].enforce_layout(delayed)

    def _swap_moved_tile_if_necessary(self, tile: "BaseTile", idx: int) -> bool:
        """Swap a dropped tile with the tile under the pointer, if any."""
        if not self.tiles.is_tiled(tile) or self.host is None:
            return False
        mouse_pos = self.host.pointer_position()
        for swap_idx, candidate in self.each_tiled():
            if swap_idx == idx or candidate.rect is None:
                continue
            target_rect = shrink(candidate.rect, self.drag_swap_border)
            if point_is_within(mouse_pos, target_rect):
                logger.debug("swapping idx %d and %d", idx, swap_idx)
                self.tiles.swap_at(idx, swap_idx)
                return True
        return False


class VerticalTiledLayout(BaseTiledLayout):
    """Partitions side by side, windows stacked vertically inside them."""

    def __init__(self, state: LayoutState, **kwargs):
        super().__init__(Axis.X, state, **kwargs)

    @property
    def name(self) -> str:
        return "vertical"


class HorizontalTiledLayout(BaseTiledLayout):
    """Partitions on top of each other, windows side by side inside them."""

    def __init__(self, state: LayoutState, **kwargs):
        super().__init__(Axis.Y, state, **kwargs)

    @property
    def name(self) -> str:
        return "horizontal"
