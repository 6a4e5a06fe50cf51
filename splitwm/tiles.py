"""
Window Tiles

A tile wraps one host window and tracks whether it takes part in tiling.
Tiles are created by layouts and owned by exactly one TileCollection.
"""

from __future__ import annotations
import itertools
import logging
from typing import TYPE_CHECKING, Optional

from .geometry import (
    Axis,
    Point2d,
    Rect,
    RectDelta,
    ensure_rect_exists,
    move_rect_within,
    point_diff,
    rect_center,
    round_half_up,
)

if TYPE_CHECKING:
    from .layouts.layout_base import LayoutState
    from .split import Split
    from .window import Host, Window

logger = logging.getLogger(__name__)

# shared by all tiles so the newest minimize always has the highest order
_minimize_counter = itertools.count(1)


class BaseTile:
    """
    Common tile behaviour.

    Without a layout-assigned slot a tile behaves like a floating window: its
    desired rect is the live window rect, optionally overridden by scale or
    move requests made through the engine.
    """

    def __init__(self, window: "Window", state: "LayoutState"):
        self.window = window
        self.state = state
        self.managed = False
        self.maximized = False
        self.minimized_order = 0
        # secondary-axis split references used by adjust_split_for_tile
        self.top_split: Optional["Split"] = None
        self.bottom_split: Optional["Split"] = None
        self._desired: Optional[Rect] = None
        self._unmaximized_rect: Optional[Rect] = None

    def id(self) -> int:
        return self.window.id()

    def is_active(self) -> bool:
        return self.window.is_active()

    def activate(self):
        self.window.activate()

    def is_minimized(self) -> bool:
        return self.window.is_minimized()

    def minimize(self):
        self.window.minimize()
        self.minimized_order = next(_minimize_counter)

    def unminimize(self):
        self.window.unminimize()

    def tile(self):
        self.managed = True

    def release(self):
        self.managed = False

    def desired_rect(self) -> Rect:
        if self._desired is not None:
            return self._desired
        return self.window.rect()

    def _set_desired(self, rect: Rect):
        self._desired = rect

    def update_desired_rect(self):
        self._desired = self.window.rect()

    def scale_by(self, amount: float, axis: Optional[Axis] = None):
        """Grow (or shrink, for negative amounts) about the rect centre."""
        desired = self.desired_rect()
        pos, size = desired.pos, desired.size
        for ax in [Axis(axis)] if axis else list(Axis):
            old = size[ax]
            new = round_half_up(old * (1 + amount))
            size = size.with_axis(ax, new)
            pos = pos.with_axis(ax, pos[ax] - round_half_up((new - old) / 2))
        self._set_desired(Rect(pos, size))

    def center_window(self):
        pass

    def ensure_within(self, bounds):
        desired = self.desired_rect()
        self._set_desired(move_rect_within(desired, bounds).apply_to(desired))

    def layout(self):
        if self._desired is not None:
            self.window.move_resize(ensure_rect_exists(self._desired))

    def toggle_maximize(self):
        if self.maximized:
            self.unmaximize()
            return
        self._unmaximized_rect = self.window.rect()
        self.maximized = True
        self.window.maximize()

    def unmaximize(self):
        if not self.maximized:
            return
        self.maximized = False
        if self._unmaximized_rect is not None:
            self.window.move_resize(self._unmaximized_rect)

    def swapped_with(self, other: "BaseTile"):
        pass

    def restore_original_position(self):
        pass

    def __str__(self) -> str:
        return f"<{type(self).__name__} {self.window}>"


class FloatingTile(BaseTile):
    """Tile used by layouts that never assign slots."""


class TiledTile(BaseTile):
    """
    Tile that receives a slot from a tiled layout.

    The slot is set with set_rect(). Manual moves and resizes of the window
    are kept as an offset on top of the slot, so the next relayout leaves
    the window where the user put it. release() puts the window back where
    it was before tile().
    """

    def __init__(
        self,
        window: "Window",
        state: "LayoutState",
        host: Optional["Host"] = None,
        enforce_delay_ms: int = 100,
    ):
        super().__init__(window, state)
        self.host = host
        self.enforce_delay_ms = enforce_delay_ms
        self.rect: Optional[Rect] = None
        self.offset = RectDelta.zero()
        self.original_rect: Optional[Rect] = None

    def _in_slot(self) -> bool:
        return self.managed and self.rect is not None

    def tile(self):
        if self.managed:
            return
        self.original_rect = self.window.rect()
        self.offset = RectDelta.zero()
        self.managed = True

    def release(self):
        if not self.managed:
            return
        self.managed = False
        self.maximized = False
        self.rect = None
        self.offset = RectDelta.zero()
        self.restore_original_position()

    def restore_original_position(self):
        if self.original_rect is not None:
            self.window.move_resize(self.original_rect)

    def set_rect(self, rect: Rect):
        self.rect = rect
        self.layout()

    def desired_rect(self) -> Rect:
        if self._in_slot():
            return self.offset.apply_to(self.rect)
        return super().desired_rect()

    def _set_desired(self, rect: Rect):
        if self._in_slot():
            self.offset = RectDelta(
                point_diff(self.rect.pos, rect.pos),
                point_diff(self.rect.size, rect.size),
            )
        else:
            super()._set_desired(rect)

    def update_desired_rect(self):
        if self.managed and self.maximized:
            return
        self._set_desired(self.window.rect())

    def center_window(self):
        if not self._in_slot():
            return
        desired = self.desired_rect()
        center = rect_center(self.rect)
        pos = Point2d(
            center.x - round_half_up(desired.size.x / 2),
            center.y - round_half_up(desired.size.y / 2),
        )
        self._set_desired(Rect(pos, desired.size))

    def layout(self):
        if self.managed and self.maximized:
            target = self.state.bounds.rect
        elif self._in_slot():
            target = self.desired_rect()
        else:
            super().layout()
            return
        self.window.move_resize(ensure_rect_exists(target))

    def toggle_maximize(self):
        if not self.managed:
            super().toggle_maximize()
            return
        self.maximized = not self.maximized
        self.layout()

    def unmaximize(self):
        if not self.managed:
            super().unmaximize()
            return
        if self.maximized:
            self.maximized = False
            self.layout()

    def swapped_with(self, other: BaseTile):
        # an offset only makes sense relative to the slot it was made in
        self.offset = RectDelta.zero()

    def enforce_layout(self, delayed: bool = False):
        """Put the window back into its slot after it moved itself."""
        if delayed and self.host is not None:
            logger.debug("enforcing layout of %s in %sms", self, self.enforce_delay_ms)
            self.host.call_later(self.enforce_delay_ms, self.layout)
        else:
            self.layout()
