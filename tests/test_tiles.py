"""
Unit tests for window tiles.
"""

import pytest

from splitwm.geometry import Axis, Point2d, Rect, RectDelta
from splitwm.layouts import LayoutState
from splitwm.tiles import FloatingTile, TiledTile


@pytest.fixture
def state(standard_bounds):
    return LayoutState(standard_bounds)


@pytest.mark.unit
class TestFloatingTile:
    """Test tiles without a slot."""

    def test_delegates_to_window(self, mock_window, state):
        window = mock_window(object_id=7)
        tile = FloatingTile(window, state)

        assert tile.id() == 7
        tile.activate()
        assert tile.is_active()
        tile.minimize()
        assert tile.is_minimized()
        tile.unminimize()
        assert not tile.is_minimized()

    def test_minimize_order_increases(self, mock_window, state):
        a = FloatingTile(mock_window(object_id=1), state)
        b = FloatingTile(mock_window(object_id=2), state)
        a.minimize()
        b.minimize()
        assert b.minimized_order > a.minimized_order > 0

    def test_tile_and_release_toggle_managed(self, mock_window, state):
        tile = FloatingTile(mock_window(), state)
        tile.tile()
        assert tile.managed
        tile.release()
        assert not tile.managed

    def test_desired_rect_is_window_rect(self, mock_window, state):
        window = mock_window(rect=Rect.of(10, 20, 300, 200))
        tile = FloatingTile(window, state)
        assert tile.desired_rect() == Rect.of(10, 20, 300, 200)

    def test_layout_without_request_leaves_window(self, mock_window, state):
        window = mock_window()
        FloatingTile(window, state).layout()
        assert window.moves == []

    def test_scale_by_keeps_center(self, mock_window, state):
        window = mock_window(rect=Rect.of(100, 100, 800, 600))
        tile = FloatingTile(window, state)

        tile.scale_by(0.1)
        tile.layout()

        assert window.rect() == Rect.of(60, 70, 880, 660)

    def test_scale_by_single_axis(self, mock_window, state):
        window = mock_window(rect=Rect.of(100, 100, 800, 600))
        tile = FloatingTile(window, state)

        tile.scale_by(0.1, Axis.X)

        assert tile.desired_rect() == Rect.of(60, 100, 880, 600)

    def test_ensure_within_bounds(self, mock_window, state, standard_bounds):
        window = mock_window(rect=Rect.of(100, 100, 800, 600))
        tile = FloatingTile(window, state)

        tile.scale_by(1)
        tile.ensure_within(standard_bounds)

        assert tile.desired_rect() == Rect.of(0, 0, 1200, 800)

    def test_toggle_maximize_restores_rect(self, mock_window, state):
        window = mock_window(rect=Rect.of(10, 20, 300, 200))
        tile = FloatingTile(window, state)

        tile.toggle_maximize()
        assert tile.maximized
        assert window.maximize_calls == 1

        window.move_resize(Rect.of(0, 0, 1200, 800))
        tile.toggle_maximize()
        assert not tile.maximized
        assert window.rect() == Rect.of(10, 20, 300, 200)

    def test_unmaximize_when_not_maximized(self, mock_window, state):
        window = mock_window()
        FloatingTile(window, state).unmaximize()
        assert window.moves == []


@pytest.mark.unit
class TestTiledTile:
    """Test tiles placed into layout slots."""

    SLOT = Rect.of(0, 0, 600, 800)

    @pytest.fixture
    def window(self, mock_window):
        return mock_window(rect=Rect.of(100, 100, 800, 600))

    @pytest.fixture
    def tile(self, window, state):
        tile = TiledTile(window, state)
        tile.tile()
        return tile

    def test_set_rect_moves_window(self, tile, window):
        tile.set_rect(self.SLOT)
        assert window.rect() == self.SLOT
        assert tile.desired_rect() == self.SLOT

    def test_release_restores_original_rect(self, tile, window):
        tile.set_rect(self.SLOT)
        tile.release()

        assert not tile.managed
        assert tile.rect is None
        assert window.rect() == Rect.of(100, 100, 800, 600)

    def test_tile_twice_keeps_first_original(self, tile, window):
        tile.set_rect(self.SLOT)
        tile.tile()
        assert tile.original_rect == Rect.of(100, 100, 800, 600)

    def test_manual_move_kept_as_offset(self, tile, window):
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(10, 10, 600, 800))
        tile.update_desired_rect()

        assert tile.offset == RectDelta(Point2d(10, 10), Point2d(0, 0))

        tile.set_rect(Rect.of(600, 0, 600, 400))
        assert window.rect() == Rect.of(610, 10, 600, 400)

    def test_swapped_with_resets_offset(self, tile, window, mock_window, state):
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(10, 10, 600, 800))
        tile.update_desired_rect()

        tile.swapped_with(TiledTile(mock_window(object_id=2), state))
        assert tile.offset == RectDelta.zero()

    def test_toggle_maximize_fills_bounds(self, tile, window, standard_area):
        tile.set_rect(self.SLOT)

        tile.toggle_maximize()
        assert window.rect() == standard_area

        tile.toggle_maximize()
        assert window.rect() == self.SLOT

    def test_maximized_ignores_window_changes(self, tile, window, standard_area):
        tile.set_rect(self.SLOT)
        tile.toggle_maximize()

        window.move_resize(Rect.of(5, 5, 50, 50))
        tile.update_desired_rect()
        tile.unmaximize()

        assert tile.offset == RectDelta.zero()
        assert window.rect() == self.SLOT

    def test_center_window_in_slot(self, tile, window):
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(0, 0, 500, 400))
        tile.update_desired_rect()

        tile.center_window()

        assert tile.desired_rect() == Rect.of(50, 200, 500, 400)

    def test_unmanaged_behaves_like_floating(self, window, state):
        tile = TiledTile(window, state)
        tile.scale_by(0.1)
        tile.layout()
        assert window.rect() == Rect.of(60, 70, 880, 660)

    def test_enforce_layout_now(self, tile, window):
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(0, 0, 20, 20))

        tile.enforce_layout()

        assert window.rect() == self.SLOT

    def test_enforce_layout_delayed(self, window, state, mock_host):
        tile = TiledTile(window, state, host=mock_host, enforce_delay_ms=250)
        tile.tile()
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(0, 0, 20, 20))

        tile.enforce_layout(delayed=True)

        assert [delay for delay, _ in mock_host.scheduled] == [250]
        assert window.rect() == Rect.of(0, 0, 20, 20)
        mock_host.run_scheduled()
        assert window.rect() == self.SLOT

    def test_enforce_layout_delayed_without_host(self, tile, window):
        tile.set_rect(self.SLOT)
        window.move_resize(Rect.of(0, 0, 20, 20))

        tile.enforce_layout(delayed=True)

        assert window.rect() == self.SLOT

    def test_zero_sized_slot_is_clamped(self, tile, window):
        tile.set_rect(Rect.of(0, 0, 0, 0))
        assert window.rect() == Rect.of(0, 0, 1, 1)
