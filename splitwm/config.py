"""
Tiling Configuration
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


class Defaults:
    """Initial split state for a new workspace."""

    primary_windows = 1
    num_partitions = 2


# Ratio step for keyboard resizing of the main split
BORDER_RESIZE_INCREMENT = 0.05
# Step for resizing a single window
WINDOW_ONLY_RESIZE_INCREMENT = BORDER_RESIZE_INCREMENT * 2


@dataclass
class TilingConfig:
    """Tiling engine configuration."""

    # Gap between tiles, in pixels
    padding: int = 0

    # Initial split state
    primary_windows: int = Defaults.primary_windows
    max_partitions: int = Defaults.num_partitions

    # Dropping a dragged tile within this many pixels of another tile's edge
    # does not swap them
    drag_swap_border: int = 20

    # Delay before re-applying a slot to a window that resized itself
    enforce_delay_ms: int = 100

    border_resize_increment: float = BORDER_RESIZE_INCREMENT
    window_only_resize_increment: float = WINDOW_ONLY_RESIZE_INCREMENT

    num_workspaces: int = 4

    # Layouts to cycle through; the first one is used for new workspaces
    layouts: List[str] = field(
        default_factory=lambda: ["vertical", "horizontal", "fullscreen", "floating"]
    )

    def __post_init__(self):
        """Validate values."""
        from .layouts import LAYOUTS

        if self.padding < 0:
            raise ValueError(f"padding must be >= 0, got {self.padding}")
        if self.max_partitions < 1:
            raise ValueError(f"max_partitions must be >= 1, got {self.max_partitions}")
        if self.drag_swap_border < 0:
            raise ValueError(
                f"drag_swap_border must be >= 0, got {self.drag_swap_border}"
            )
        if self.num_workspaces < 1:
            raise ValueError(f"num_workspaces must be >= 1, got {self.num_workspaces}")
        for increment in (self.border_resize_increment, self.window_only_resize_increment):
            if not 0 < increment <= 1:
                raise ValueError(f"resize increments must be in (0, 1], got {increment}")
        if not self.layouts:
            raise ValueError("at least one layout is required")
        unknown = [name for name in self.layouts if name not in LAYOUTS]
        if unknown:
            raise ValueError(
                f"Unknown layouts: {', '.join(unknown)}. "
                f"Available: {', '.join(sorted(LAYOUTS))}"
            )

    @property
    def default_layout(self) -> str:
        return self.layouts[0]
