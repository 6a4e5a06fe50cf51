"""
Event Topics for the splitwm tiling engine

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>

The host publishes window notifications and commands (usually from key
bindings); the LayoutManager reacts to them and publishes layout
notifications.
"""

# Window notifications (published by the host)
WINDOW_CREATED = "window.created"
"""Published when a window appears. Params: window"""

WINDOW_CLOSED = "window.closed"
"""Published when a window is destroyed. Params: window"""

WINDOW_MOVED = "window.moved"
"""Published when the user finished moving a window. Params: window"""

WINDOW_RESIZED = "window.resized"
"""Published when the user finished resizing a window. Params: window"""

WINDOW_EXTERNAL_CHANGE = "window.external_change"
"""Published when a window resized itself. Params: window, delayed"""

WINDOW_MINIMIZED = "window.minimized"
"""Published when the host minimized a window. Params: window"""

WINDOW_UNMINIMIZED = "window.unminimized"
"""Published when the host restored a minimized window. Params: window"""

# Display notifications
BOUNDS_CHANGED = "bounds.changed"
"""Published when the display region changed (monitor, panels)."""

# Layout notifications (published by the LayoutManager)
LAYOUT_CHANGED = "layout.changed"
"""Published when the active workspace switched layout. Params: layout_name"""

WORKSPACE_SWITCHED = "workspace.switched"
"""Published when switching between workspaces. Params: current_workspace, old_workspace"""

# Command events (imperative - tell components to do something)

# Tiling commands, all act on the active window
CMD_TILE_WINDOW = "cmd.tile_window"
"""Command: Tile the active window."""

CMD_UNTILE_WINDOW = "cmd.untile_window"
"""Command: Float the active window."""

CMD_TOGGLE_TILE = "cmd.toggle_tile"
"""Command: Tile the active window if floating, float it otherwise."""

# Focus and ordering commands
CMD_SELECT_NEXT = "cmd.select_next"
"""Command: Activate the next window."""

CMD_SELECT_PREV = "cmd.select_prev"
"""Command: Activate the previous window."""

CMD_CYCLE_NEXT = "cmd.cycle_next"
"""Command: Swap the active window with the next one."""

CMD_CYCLE_PREV = "cmd.cycle_prev"
"""Command: Swap the active window with the previous one."""

CMD_ACTIVATE_MAIN = "cmd.activate_main"
"""Command: Activate the first tiled window."""

CMD_SWAP_WITH_MAIN = "cmd.swap_with_main"
"""Command: Swap the active window with the first tiled window."""

# Split commands
CMD_ADD_MAIN_WINDOW_COUNT = "cmd.add_main_window_count"
"""Command: Change the number of primary windows. Params: diff"""

CMD_ADD_PARTITION_COUNT = "cmd.add_partition_count"
"""Command: Change the number of partitions. Params: diff"""

CMD_ADJUST_MAIN_AREA = "cmd.adjust_main_area"
"""Command: Grow (+1) or shrink (-1) the primary partition. Params: direction"""

CMD_ADJUST_WINDOW_SIZE = "cmd.adjust_window_size"
"""Command: Grow (+1) or shrink (-1) the active window. Params: direction"""

CMD_SCALE_WINDOW = "cmd.scale_window"
"""Command: Scale the active window. Params: direction, axis (None for both)"""

# Window state commands
CMD_TOGGLE_MAXIMIZE = "cmd.toggle_maximize"
"""Command: Toggle maximize for the active window."""

CMD_MINIMIZE = "cmd.minimize"
"""Command: Minimize the active window."""

CMD_UNMINIMIZE_LAST = "cmd.unminimize_last"
"""Command: Restore the most recently minimized window."""

# Layout commands
CMD_SET_LAYOUT = "cmd.set_layout"
"""Command: Switch the active workspace to a layout. Params: layout_name"""

CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_RESET_LAYOUT = "cmd.reset_layout"
"""Command: Forget ratios and counts of the active workspace."""

CMD_RESTORE_POSITIONS = "cmd.restore_positions"
"""Command: Move tiled windows back to their pre-tiling positions."""

# Workspace commands
CMD_SWITCH_WORKSPACE = "cmd.switch_workspace"
"""Command: Switch to a workspace. Params: workspace_id"""

CMD_MOVE_TO_WORKSPACE = "cmd.move_to_workspace"
"""Command: Move the active window to a workspace. Params: workspace_id"""
