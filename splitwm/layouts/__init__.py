"""
Layout System

Provides the layout variants and the state they share.
"""

from typing import Dict, Type

from .layout_base import BaseLayout, LayoutState
from .layout_tiling import (
    BaseTiledLayout,
    VerticalTiledLayout,
    HorizontalTiledLayout,
)
from .layout_floating import NonTiledLayout, FloatingLayout
from .layout_fullscreen import FullScreenLayout

LAYOUTS: Dict[str, Type[BaseLayout]] = {
    "vertical": VerticalTiledLayout,
    "horizontal": HorizontalTiledLayout,
    "fullscreen": FullScreenLayout,
    "floating": FloatingLayout,
}


def create_layout(name: str, state: LayoutState, **kwargs) -> BaseLayout:
    """Create a registered layout by name."""
    try:
        layout_class = LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown layout: {name}. Available: {', '.join(sorted(LAYOUTS))}"
        ) from None
    return layout_class(state, **kwargs)


__all__ = [
    # Base classes
    "BaseLayout",
    "LayoutState",
    "NonTiledLayout",
    "BaseTiledLayout",
    # Layout implementations
    "VerticalTiledLayout",
    "HorizontalTiledLayout",
    "FloatingLayout",
    "FullScreenLayout",
    # Registry
    "LAYOUTS",
    "create_layout",
]
