"""
Fullscreen Layout

Every tiled window maximized and stacked - only the active one is seen.
"""

from __future__ import annotations

from .layout_floating import NonTiledLayout


class FullScreenLayout(NonTiledLayout):
    """
    Fullscreen layout - all tiled windows fill the bounds.
    """

    tiles_by_default = True

    @property
    def name(self) -> str:
        return "fullscreen"

    def layout(self):
        for _, tile in self.each_tiled():
            tile.window.maximize()
