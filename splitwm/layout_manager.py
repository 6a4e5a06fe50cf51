"""
Layout Manager

Connects the layouts to the event bus and keeps one layout per workspace.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from pubsub import pub

from . import topics
from .config import TilingConfig
from .geometry import Axis, Bounds, Rect
from .layouts import BaseLayout, LayoutState, create_layout

if TYPE_CHECKING:
    from .window import Host, Window

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    """A workspace: its bounds, its split state and its current layout."""

    name: str
    state: LayoutState
    layout: BaseLayout


class LayoutManager:
    """
    Manages the layouts of all workspaces.

    This component subscribes to window notifications and tiling command
    events and forwards them to the layout of the right workspace. It
    publishes LAYOUT_CHANGED and WORKSPACE_SWITCHED events.

    Responsibilities:
    - Add new windows to the active workspace, tiled or floating according to
      their stored preference
    - Drop closed windows and relayout
    - Translate drag/resize notifications into layout changes
    - CMD_TILE_WINDOW / CMD_UNTILE_WINDOW / CMD_TOGGLE_TILE
    - CMD_SELECT_NEXT/PREV, CMD_CYCLE_NEXT/PREV
    - Main window count, partition count and split ratio commands
    - CMD_SET_LAYOUT / CMD_CYCLE_LAYOUT / CMD_RESET_LAYOUT
    - CMD_SWITCH_WORKSPACE / CMD_MOVE_TO_WORKSPACE
    """

    def __init__(
        self,
        bus,
        host: "Host",
        bounds_provider: Callable[[], Rect],
        config: Optional[TilingConfig] = None,
    ):
        """Initialize layout manager.

        Args:
            bus: Event bus instance (Pypubsub)
            host: Host used for pointer queries and deferred calls
            bounds_provider: Returns the current display region
            config: Tiling configuration
        """
        self.bus = bus
        self.host = host
        self.config = config or TilingConfig()
        self._bounds_provider = bounds_provider

        self.workspaces: Dict[int, Workspace] = {}
        self.active_workspace = 1
        self.window_workspace: Dict[int, int] = {}  # window id -> workspace id
        for i in range(1, self.config.num_workspaces + 1):
            self.workspaces[i] = self._create_workspace(i)

        self._subscriptions: List[Tuple[Callable, str]] = []
        if os.getenv("SPLITWM_DEBUG"):
            self._subscribe(self.debug_event_logger, pub.ALL_TOPICS)
        self._setup_subscriptions()

    def _subscribe(self, listener: Callable, topic: str):
        self.bus.subscribe(listener, topic)
        self._subscriptions.append((listener, topic))

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        # Notification events
        self._subscribe(self._on_window_created, topics.WINDOW_CREATED)
        self._subscribe(self._on_window_closed, topics.WINDOW_CLOSED)
        self._subscribe(self._on_window_moved, topics.WINDOW_MOVED)
        self._subscribe(self._on_window_resized, topics.WINDOW_RESIZED)
        self._subscribe(self._on_window_external_change, topics.WINDOW_EXTERNAL_CHANGE)
        self._subscribe(self._on_window_minimized, topics.WINDOW_MINIMIZED)
        self._subscribe(self._on_window_unminimized, topics.WINDOW_UNMINIMIZED)
        self._subscribe(self._on_bounds_changed, topics.BOUNDS_CHANGED)

        # Tiling command events
        self._subscribe(self._on_tile_window, topics.CMD_TILE_WINDOW)
        self._subscribe(self._on_untile_window, topics.CMD_UNTILE_WINDOW)
        self._subscribe(self._on_toggle_tile, topics.CMD_TOGGLE_TILE)
        self._subscribe(self._on_select_next, topics.CMD_SELECT_NEXT)
        self._subscribe(self._on_select_prev, topics.CMD_SELECT_PREV)
        self._subscribe(self._on_cycle_next, topics.CMD_CYCLE_NEXT)
        self._subscribe(self._on_cycle_prev, topics.CMD_CYCLE_PREV)
        self._subscribe(self._on_activate_main, topics.CMD_ACTIVATE_MAIN)
        self._subscribe(self._on_swap_with_main, topics.CMD_SWAP_WITH_MAIN)
        self._subscribe(self._on_add_main_window_count, topics.CMD_ADD_MAIN_WINDOW_COUNT)
        self._subscribe(self._on_add_partition_count, topics.CMD_ADD_PARTITION_COUNT)
        self._subscribe(self._on_adjust_main_area, topics.CMD_ADJUST_MAIN_AREA)
        self._subscribe(self._on_adjust_window_size, topics.CMD_ADJUST_WINDOW_SIZE)
        self._subscribe(self._on_scale_window, topics.CMD_SCALE_WINDOW)
        self._subscribe(self._on_toggle_maximize, topics.CMD_TOGGLE_MAXIMIZE)
        self._subscribe(self._on_minimize, topics.CMD_MINIMIZE)
        self._subscribe(self._on_unminimize_last, topics.CMD_UNMINIMIZE_LAST)

        # Layout command events
        self._subscribe(self._on_set_layout, topics.CMD_SET_LAYOUT)
        self._subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self._subscribe(self._on_reset_layout, topics.CMD_RESET_LAYOUT)
        self._subscribe(self._on_restore_positions, topics.CMD_RESTORE_POSITIONS)

        # Workspace command events
        self._subscribe(self._on_switch_workspace, topics.CMD_SWITCH_WORKSPACE)
        self._subscribe(self._on_move_to_workspace, topics.CMD_MOVE_TO_WORKSPACE)

    def close(self):
        """Unsubscribe from the bus and put tiled windows back."""
        for listener, topic in self._subscriptions:
            self.bus.unsubscribe(listener, topic)
        self._subscriptions = []
        for workspace in self.workspaces.values():
            workspace.layout.restore_original_positions()

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        logger.debug("EVENT: %s | %s", topic.getName(), data_str)

    def _create_workspace(self, workspace_id: int) -> Workspace:
        bounds = Bounds(self._bounds_provider(), provider=self._bounds_provider)
        state = LayoutState(
            bounds,
            padding=self.config.padding,
            primary_windows=self.config.primary_windows,
            max_partitions=self.config.max_partitions,
        )
        layout = self._make_layout(self.config.default_layout, state)
        return Workspace(name=str(workspace_id), state=state, layout=layout)

    def _make_layout(self, name: str, state: LayoutState) -> BaseLayout:
        return create_layout(
            name,
            state,
            host=self.host,
            drag_swap_border=self.config.drag_swap_border,
            enforce_delay_ms=self.config.enforce_delay_ms,
        )

    @property
    def workspace(self) -> Workspace:
        """The active workspace."""
        return self.workspaces[self.active_workspace]

    @property
    def layout(self) -> BaseLayout:
        """Layout of the active workspace."""
        return self.workspace.layout

    def _layout_for(self, window: "Window") -> Optional[BaseLayout]:
        ws_id = self.window_workspace.get(window.id())
        if ws_id is None:
            logger.warning("window %s is not managed", window)
            return None
        return self.workspaces[ws_id].layout

    def _should_tile(self, window: "Window", layout: BaseLayout) -> bool:
        preference = window.get_tile_preference()
        if preference is None:
            return layout.tiles_by_default
        return preference

    @staticmethod
    def _active_window(layout: BaseLayout) -> Optional["Window"]:
        entry = layout.active_tile()
        return entry[1].window if entry is not None else None

    # Window lifecycle

    def add_window(self, window: "Window", workspace_id: Optional[int] = None):
        """Add a window to a workspace (the active one by default)."""
        ws_id = workspace_id or self.active_workspace
        layout = self.workspaces[ws_id].layout
        if not layout.add(window, self._active_window(layout)):
            return
        self.window_workspace[window.id()] = ws_id
        if self._should_tile(window, layout):
            layout.tile(window)

    def remove_window(self, window: "Window"):
        """Remove a window from its workspace."""
        ws_id = self.window_workspace.pop(window.id(), None)
        if ws_id is None:
            logger.warning("remove_window called for unknown window %s", window)
            return
        self.workspaces[ws_id].layout.remove(window)

    def set_active_tiled(self, tiled: bool):
        """Tile or float the active window and remember the choice."""
        layout = self.layout
        entry = layout.active_tile()
        if entry is None:
            return
        window = entry[1].window
        window.set_tile_preference(tiled)
        if tiled:
            layout.tile(window)
        else:
            layout.untile(window)

    # Layout switching

    def set_layout(self, name: str, workspace_id: Optional[int] = None):
        """
        Switch a workspace to another layout type.

        The workspace's LayoutState is handed to the new layout, so ratios and
        counts survive the switch. Windows keep their order.

        Raises:
            ValueError: If the layout name is unknown
        """
        workspace = self.workspaces[workspace_id or self.active_workspace]
        if workspace.layout.name == name:
            return
        new_layout = self._make_layout(name, workspace.state)
        if not new_layout.tiles_by_default:
            workspace.layout.restore_original_positions()
        logger.debug(
            "workspace %s: layout %s -> %s", workspace.name, workspace.layout.name, name
        )
        self._transfer(workspace.layout, new_layout)
        workspace.layout = new_layout
        new_layout.layout()
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout_name=name)

    def cycle_layout(self, direction: int = 1):
        """Switch the active workspace to the next configured layout."""
        names = self.config.layouts
        current = self.layout.name
        idx = names.index(current) if current in names else -1
        self.set_layout(names[(idx + direction) % len(names)])

    def reset_layout(self):
        """Start the active workspace over with fresh splits."""
        workspace = self.workspace
        logger.debug(
            "workspace %s: resetting %s layout", workspace.name, workspace.layout.name
        )
        workspace.state = workspace.state.empty_copy()
        new_layout = self._make_layout(workspace.layout.name, workspace.state)
        self._transfer(workspace.layout, new_layout)
        workspace.layout = new_layout
        new_layout.layout()

    def _transfer(self, old: BaseLayout, new: BaseLayout):
        for old_tile in old.tiles:
            window = old_tile.window
            new.add(window)
            if not self._should_tile(window, new):
                continue
            _, new_tile = new.tile_for(window)
            new_tile.tile()
            original_rect = getattr(old_tile, "original_rect", None)
            if original_rect is not None and hasattr(new_tile, "original_rect"):
                new_tile.original_rect = original_rect

    # Workspaces

    def switch_workspace(self, workspace_id: int):
        """Switch to a different workspace."""
        if workspace_id not in self.workspaces:
            logger.warning("no workspace %s", workspace_id)
            return
        old_workspace = self.active_workspace
        if old_workspace == workspace_id:
            return
        self.active_workspace = workspace_id
        logger.debug("switched to workspace %s", self.workspace.name)
        self.workspace.state.bounds.update()
        self.layout.layout()
        self.bus.sendMessage(
            topics.WORKSPACE_SWITCHED,
            current_workspace=workspace_id,
            old_workspace=old_workspace,
        )

    def move_window_to_workspace(self, window: "Window", workspace_id: int):
        """Move a window to a different workspace."""
        if workspace_id not in self.workspaces:
            logger.warning("no workspace %s", workspace_id)
            return
        old_ws_id = self.window_workspace.get(window.id())
        if old_ws_id is None:
            logger.warning("move_window_to_workspace called for unknown window %s", window)
            return
        if old_ws_id == workspace_id:
            return
        self.remove_window(window)
        self.add_window(window, workspace_id)

    # Notification handlers

    def _on_window_created(self, window: "Window"):
        """Handle WINDOW_CREATED event."""
        self.add_window(window)

    def _on_window_closed(self, window: "Window"):
        """Handle WINDOW_CLOSED event."""
        self.remove_window(window)

    def _on_window_moved(self, window: "Window"):
        """Handle WINDOW_MOVED event."""
        layout = self._layout_for(window)
        if layout is not None:
            layout.on_window_moved(window)

    def _on_window_resized(self, window: "Window"):
        """Handle WINDOW_RESIZED event."""
        layout = self._layout_for(window)
        if layout is not None:
            layout.on_window_resized(window)

    def _on_window_external_change(self, window: "Window", delayed: bool):
        """Handle WINDOW_EXTERNAL_CHANGE event."""
        layout = self._layout_for(window)
        if layout is not None:
            layout.override_external_change(window, delayed)

    def _on_window_minimized(self, window: "Window"):
        """Handle WINDOW_MINIMIZED event."""
        layout = self._layout_for(window)
        if layout is not None:
            layout.layout()

    def _on_window_unminimized(self, window: "Window"):
        """Handle WINDOW_UNMINIMIZED event."""
        layout = self._layout_for(window)
        if layout is not None:
            layout.layout()

    def _on_bounds_changed(self):
        """Handle BOUNDS_CHANGED event."""
        self.workspace.state.bounds.update()
        self.layout.layout()

    # Command handlers

    def _on_tile_window(self):
        """Handle CMD_TILE_WINDOW command."""
        self.set_active_tiled(True)

    def _on_untile_window(self):
        """Handle CMD_UNTILE_WINDOW command."""
        self.set_active_tiled(False)

    def _on_toggle_tile(self):
        """Handle CMD_TOGGLE_TILE command."""
        entry = self.layout.active_tile()
        if entry is not None:
            self.set_active_tiled(not self.layout.tiles.is_tiled(entry[1]))

    def _on_select_next(self):
        self.layout.select_cycle(1)

    def _on_select_prev(self):
        self.layout.select_cycle(-1)

    def _on_cycle_next(self):
        self.layout.cycle(1)

    def _on_cycle_prev(self):
        self.layout.cycle(-1)

    def _on_activate_main(self):
        self.layout.activate_main_window()

    def _on_swap_with_main(self):
        self.layout.swap_active_with_main()

    def _on_add_main_window_count(self, diff: int):
        self.layout.add_main_window_count(diff)

    def _on_add_partition_count(self, diff: int):
        self.layout.add_partition_count(diff)

    def _on_adjust_main_area(self, direction: int):
        self.layout.adjust_main_window_area(
            direction * self.config.border_resize_increment
        )

    def _on_adjust_window_size(self, direction: int):
        self.layout.adjust_current_window_size(
            direction * self.config.border_resize_increment
        )

    def _on_scale_window(self, direction: int, axis: Optional[str] = None):
        self.layout.scale_current_window(
            direction * self.config.window_only_resize_increment,
            Axis(axis) if axis else None,
        )

    def _on_toggle_maximize(self):
        self.layout.toggle_maximize()

    def _on_minimize(self):
        self.layout.minimize_window()

    def _on_unminimize_last(self):
        self.layout.unminimize_last_window()

    def _on_set_layout(self, layout_name: str):
        """Handle CMD_SET_LAYOUT command."""
        self.set_layout(layout_name)

    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(1)

    def _on_reset_layout(self):
        """Handle CMD_RESET_LAYOUT command."""
        self.reset_layout()

    def _on_restore_positions(self):
        """Handle CMD_RESTORE_POSITIONS command."""
        self.layout.restore_original_positions()

    def _on_switch_workspace(self, workspace_id: int):
        """Handle CMD_SWITCH_WORKSPACE command."""
        self.switch_workspace(workspace_id)

    def _on_move_to_workspace(self, workspace_id: int):
        """Handle CMD_MOVE_TO_WORKSPACE command.

        Args:
            workspace_id: The workspace to move the active window to
        """
        window = self._active_window(self.layout)
        if window is not None:
            self.move_window_to_workspace(window, workspace_id)
