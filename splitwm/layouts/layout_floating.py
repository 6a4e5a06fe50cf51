"""
Floating Layout

Traditional floating windows with manual positioning.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .layout_base import BaseLayout
from ..collection import FloatingTileCollection
from ..tiles import FloatingTile

if TYPE_CHECKING:
    from ..window import Window


class NonTiledLayout(BaseLayout):
    """Layout whose tiles never get slots."""

    def create_tile(self, win: "Window") -> FloatingTile:
        return FloatingTile(win, self.state)

    def layout(self):
        pass


class FloatingLayout(NonTiledLayout):
    """
    Floating layout - windows keep their current positions.

    Cycling goes clockwise around the screen centre instead of following
    insertion order.
    """

    collection_class = FloatingTileCollection

    @property
    def name(self) -> str:
        return "floating"

    def restore_original_positions(self):
        pass
