"""
Window and Host Interfaces

The engine never creates windows. The host (compositor or shell) implements
these interfaces and hands window objects to the layouts.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional

from .geometry import Point2d, Rect


class Window(ABC):
    """A host-owned window."""

    @abstractmethod
    def id(self) -> int:
        """Stable unique identifier."""
        pass

    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def activate(self):
        pass

    @abstractmethod
    def is_minimized(self) -> bool:
        pass

    @abstractmethod
    def minimize(self):
        pass

    @abstractmethod
    def unminimize(self):
        pass

    @abstractmethod
    def maximize(self):
        pass

    @abstractmethod
    def move_resize(self, rect: Rect):
        """Move and resize the window on screen."""
        pass

    @abstractmethod
    def rect(self) -> Rect:
        """Current on-screen geometry."""
        pass

    @abstractmethod
    def get_title(self) -> str:
        pass

    @abstractmethod
    def get_tile_preference(self) -> Optional[bool]:
        """
        Persisted tiling preference.

        Returns:
            True/False if the user chose, None to use the layout default
        """
        pass

    @abstractmethod
    def set_tile_preference(self, preference: Optional[bool]):
        pass

    def __str__(self) -> str:
        return f"<{type(self).__name__} #{self.id()} {self.get_title()!r}>"


class Host(ABC):
    """Environment queries the layouts need from the host."""

    @abstractmethod
    def pointer_position(self) -> Point2d:
        """Current pointer position."""
        pass

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]):
        """Run callback once after delay_ms, on the event loop thread."""
        pass
