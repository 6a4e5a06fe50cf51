"""
Window Layout Base Classes

Provides the shared layout state and the BaseLayout interface every layout
variant implements.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, Optional, Type

from ..collection import IndexedTile, TileCollection
from ..config import Defaults
from ..geometry import Axis, Bounds
from ..split import MultiSplit

if TYPE_CHECKING:
    from ..tiles import BaseTile
    from ..window import Host, Window

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class LayoutState:
    """
    State shared by every layout type used on one workspace.

    Holds a split for both axes so switching between layout types keeps
    the ratios and counts the user chose.
    """

    bounds: Bounds
    padding: int = 0
    primary_windows: int = Defaults.primary_windows
    max_partitions: int = Defaults.num_partitions
    splits: Dict[Axis, MultiSplit] = field(init=False)

    def __post_init__(self):
        object.__setattr__(
            self,
            "splits",
            {
                axis: MultiSplit(axis, self.primary_windows, self.max_partitions)
                for axis in Axis
            },
        )

    def empty_copy(self) -> "LayoutState":
        """Same bounds and padding, fresh splits."""
        return LayoutState(
            self.bounds,
            padding=self.padding,
            primary_windows=self.primary_windows,
            max_partitions=self.max_partitions,
        )


class BaseLayout(ABC):
    """
    Abstract base class for layouts.

    A layout owns one TileCollection and reads its splits from a shared
    LayoutState. Operations that only make sense for tiled layouts are
    no-ops here, so callers can use any layout without type checks.
    """

    collection_class: Type[TileCollection] = TileCollection

    # whether new windows are tiled when they have no stored preference
    tiles_by_default = False

    def __init__(
        self,
        state: LayoutState,
        host: Optional["Host"] = None,
        drag_swap_border: int = 20,
        enforce_delay_ms: int = 100,
    ):
        self.state = state
        self.bounds = state.bounds
        self.host = host
        self.drag_swap_border = drag_swap_border
        self.enforce_delay_ms = enforce_delay_ms
        self.tiles = self.collection_class(self.bounds)

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    @abstractmethod
    def create_tile(self, win: "Window") -> "BaseTile":
        pass

    @abstractmethod
    def layout(self):
        """Recompute and apply the rectangle of every tiled window."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} tiles={len(self.tiles)}>"

    def each_tiled(self) -> Iterator[IndexedTile]:
        return self.tiles.each_tiled()

    def contains(self, win: "Window") -> bool:
        return self.tiles.contains(win)

    def tile_for(self, win: Optional["Window"]) -> Optional[IndexedTile]:
        """Index and tile for a window, or None if it is not in this layout."""
        if win is None:
            logger.warning("tile_for(None)")
            return None
        idx = self.tiles.index_of(win)
        if idx == -1:
            return None
        return idx, self.tiles[idx]

    def managed_tile_for(self, win: "Window") -> Optional[IndexedTile]:
        """Like tile_for(), but ignores floating windows."""
        entry = self.tile_for(win)
        if entry is not None and self.tiles.is_tiled(entry[1]):
            return entry
        return None

    def active_tile(self) -> Optional[IndexedTile]:
        return self.tiles.active()

    def add(self, win: "Window", active_win: Optional["Window"] = None) -> bool:
        """
        Add a window next to the active one.

        Args:
            win: Window to add
            active_win: Currently active window; the new tile goes right after it

        Returns:
            False if the window was already in this layout
        """
        if self.contains(win):
            return False
        tile = self.create_tile(win)
        found = self.tile_for(active_win) if active_win is not None else None
        if found is not None:
            self.tiles.insert_at(found[0] + 1, tile)
            logger.debug("inserted %s at index %d", tile, found[0] + 1)
        else:
            self.tiles.push(tile)
        return True

    def remove(self, win: "Window") -> bool:
        """Drop the tile of a window that went away."""
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("remove called for unknown window %s", win)
            return False
        self.tiles.remove_at(entry[0])
        self.layout()
        return True

    def tile(self, win: "Window") -> bool:
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("tile called for unknown window %s", win)
            return False
        entry[1].tile()
        self.layout()
        return True

    def untile(self, win: "Window") -> bool:
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("untile called for unknown window %s", win)
            return False
        entry[1].release()
        self.layout()
        return True

    def select_cycle(self, offset: int) -> bool:
        return self.tiles.select_cycle(offset)

    def cycle(self, diff: int) -> bool:
        done = self.tiles.cycle(diff)
        self.layout()
        return done

    def restore_original_positions(self):
        """
        Move every tiled window back to where it was before tiling.

        Tiles are not released, so tiling can resume later.
        """
        for _, tile in self.each_tiled():
            tile.restore_original_position()

    def minimize_window(self):
        entry = self.active_tile()
        if entry is not None:
            entry[1].minimize()
            self.layout()

    def unminimize_last_window(self):
        tile = self.tiles.most_recently_minimized()
        if tile is not None:
            tile.unminimize()
            self.layout()

    def toggle_maximize(self):
        """Toggle maximize on the active tile and unmaximize all others."""
        entry = self.active_tile()
        if entry is None:
            logger.debug("toggle_maximize: no active tile")
            return
        active = entry[1]
        for tile in self.tiles:
            if tile is active:
                logger.debug("toggling maximize for %s", tile)
                tile.toggle_maximize()
            else:
                tile.unmaximize()

    def on_window_moved(self, win: "Window") -> bool:
        return self.on_window_resized(win)

    def on_window_resized(self, win: "Window") -> bool:
        entry = self.tile_for(win)
        if entry is None:
            logger.warning("couldn't find tile for window %s", win)
            return False
        entry[1].update_desired_rect()
        return True

    def override_external_change(self, win: "Window", delayed: bool = False):
        pass

    def scale_current_window(self, amount: float, axis: Optional[Axis] = None):
        entry = self.active_tile()
        if entry is None:
            return
        tile = entry[1]
        tile.update_desired_rect()
        tile.scale_by(amount, axis)
        tile.center_window()
        tile.ensure_within(self.bounds)
        tile.layout()

    # Tiled-layout operations. No-ops unless a subclass supports them.

    def on_split_resize_start(self, win: "Window"):
        pass

    def get_main_window_count(self) -> int:
        raise NotImplementedError(f"{self.name} layout has no main windows")

    def set_main_window_count(self, count: int):
        pass

    def add_main_window_count(self, diff: int):
        pass

    def get_partition_count(self) -> int:
        raise NotImplementedError(f"{self.name} layout has no partitions")

    def set_partition_count(self, count: int):
        pass

    def add_partition_count(self, diff: int):
        pass

    def adjust_main_window_area(self, diff: float):
        pass

    def adjust_current_window_size(self, diff: float):
        pass

    def adjust_split_for_tile(
        self,
        tile: "BaseTile",
        axis: Axis,
        diff_ratio: Optional[float] = None,
        diff_px: Optional[float] = None,
    ):
        pass

    def activate_main_window(self):
        pass

    def swap_active_with_main(self):
        pass
