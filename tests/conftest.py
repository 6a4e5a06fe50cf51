"""
Shared pytest fixtures for splitwm tests.
"""

import pytest
from pubsub import pub

from splitwm.geometry import Bounds, Point2d, Rect
from splitwm.window import Host, Window


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a host")


@pytest.fixture(autouse=True)
def bus():
    """Pypubsub bus, cleared after every test."""
    yield pub
    pub.unsubAll()


@pytest.fixture
def mock_window():
    """Factory fixture for creating mock window objects.

    Windows created from the same factory share one focus, like windows on
    one screen.
    """

    class MockWindow(Window):
        active = None

        def __init__(
            self, object_id=1, title="test", rect=None, tile_preference=None
        ):
            self.object_id = object_id
            self.title = title
            self._rect = rect or Rect.of(100, 100, 800, 600)
            self.tile_preference = tile_preference
            self.minimized = False
            self.maximize_calls = 0
            self.moves = []

        def id(self):
            return self.object_id

        def is_active(self):
            return MockWindow.active is self

        def activate(self):
            MockWindow.active = self

        def is_minimized(self):
            return self.minimized

        def minimize(self):
            self.minimized = True
            if MockWindow.active is self:
                MockWindow.active = None

        def unminimize(self):
            self.minimized = False

        def maximize(self):
            self.maximize_calls += 1

        def move_resize(self, rect):
            self._rect = rect
            self.moves.append(rect)

        def rect(self):
            return self._rect

        def get_title(self):
            return self.title

        def get_tile_preference(self):
            return self.tile_preference

        def set_tile_preference(self, preference):
            self.tile_preference = preference

        def __hash__(self):
            return hash(self.object_id)

        def __eq__(self, other):
            if not isinstance(other, MockWindow):
                return False
            return self.object_id == other.object_id

    return MockWindow


@pytest.fixture
def mock_host():
    """Host with a settable pointer and a manual deferred-call queue."""

    class MockHost(Host):
        def __init__(self):
            self.pointer = Point2d(0, 0)
            self.scheduled = []

        def pointer_position(self):
            return self.pointer

        def call_later(self, delay_ms, callback):
            self.scheduled.append((delay_ms, callback))

        def run_scheduled(self):
            scheduled, self.scheduled = self.scheduled, []
            for _, callback in scheduled:
                callback()

    return MockHost()


@pytest.fixture
def standard_area():
    """1200x800 display region."""
    return Rect.of(0, 0, 1200, 800)


@pytest.fixture
def standard_bounds(standard_area):
    return Bounds(standard_area)
