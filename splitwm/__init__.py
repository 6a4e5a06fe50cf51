"""
splitwm - a partition tiling engine

Computes non-overlapping window rectangles for a display region and keeps
them up to date as windows come and go, move, resize or get reordered.

This package provides:
- Geometry primitives and the rectangle splitting algorithm
- Split state (ratio, primary window count, partition count)
- Ordered tile collections with cycling rules
- Layouts (vertical, horizontal, fullscreen, floating) sharing one state
- A LayoutManager wiring layouts to a Pypubsub event bus

Example usage:
    from pubsub import pub
    from splitwm import LayoutManager, TilingConfig, topics

    manager = LayoutManager(
        bus=pub,
        host=my_host,
        bounds_provider=my_host.work_area,
        config=TilingConfig(padding=8),
    )
    pub.sendMessage(topics.WINDOW_CREATED, window=my_window)
"""

__version__ = "0.1.0"

from .geometry import (
    Axis,
    Point2d,
    Rect,
    RectDelta,
    Bounds,
    split_rect,
    move_rect_within,
    join_rects,
    move_item,
)

from .split import Split, MultiSplit

from .collection import TileCollection, FloatingTileCollection

from .window import Window, Host

from .tiles import BaseTile, FloatingTile, TiledTile

from .config import TilingConfig, Defaults

from .layouts import (
    BaseLayout,
    LayoutState,
    BaseTiledLayout,
    VerticalTiledLayout,
    HorizontalTiledLayout,
    FloatingLayout,
    FullScreenLayout,
    LAYOUTS,
    create_layout,
)

from .layout_manager import LayoutManager, Workspace

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Axis",
    "Point2d",
    "Rect",
    "RectDelta",
    "Bounds",
    "split_rect",
    "move_rect_within",
    "join_rects",
    "move_item",
    # Splits
    "Split",
    "MultiSplit",
    # Collections
    "TileCollection",
    "FloatingTileCollection",
    # Host interfaces
    "Window",
    "Host",
    # Tiles
    "BaseTile",
    "FloatingTile",
    "TiledTile",
    # Configuration
    "TilingConfig",
    "Defaults",
    # Layouts
    "BaseLayout",
    "LayoutState",
    "BaseTiledLayout",
    "VerticalTiledLayout",
    "HorizontalTiledLayout",
    "FloatingLayout",
    "FullScreenLayout",
    "LAYOUTS",
    "create_layout",
    # Manager
    "LayoutManager",
    "Workspace",
    # Event topics
    "topics",
]
