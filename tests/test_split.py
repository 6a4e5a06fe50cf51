"""
Unit tests for split state.
"""

import pytest

from splitwm.geometry import Axis, Rect
from splitwm.split import MultiSplit, Split


@pytest.mark.unit
class TestSplit:
    """Test a single ratio split."""

    def test_defaults(self):
        split = Split(Axis.X)
        assert split.ratio == 0.5
        assert split.last_size is None

    def test_adjust_ratio_is_clamped(self):
        split = Split(Axis.X)
        split.adjust_ratio(0.2)
        assert split.ratio == pytest.approx(0.7)
        split.adjust_ratio(1)
        assert split.ratio == 1
        split.adjust_ratio(-3)
        assert split.ratio == 0

    def test_save_last_rect_uses_axis(self, standard_area):
        split = Split(Axis.Y)
        split.save_last_rect(standard_area)
        assert split.last_size == 800

    def test_adjust_ratio_px(self, standard_area):
        split = Split(Axis.X)
        split.save_last_rect(standard_area)
        split.adjust_ratio_px(120)
        assert split.ratio == pytest.approx(0.6)
        split.adjust_ratio_px(-360)
        assert split.ratio == pytest.approx(0.3)

    def test_adjust_ratio_px_zero_is_noop(self):
        split = Split(Axis.X)
        split.adjust_ratio_px(0)
        assert split.ratio == 0.5

    def test_adjust_ratio_px_before_split(self):
        split = Split(Axis.X)
        with pytest.raises(ValueError):
            split.adjust_ratio_px(10)

    def test_adjust_ratio_px_out_of_range(self, standard_area):
        split = Split(Axis.X)
        split.save_last_rect(standard_area)
        with pytest.raises(ValueError, match="failed ratio"):
            split.adjust_ratio_px(600)
        assert split.ratio == 0.5


@pytest.mark.unit
class TestMultiSplit:
    """Test partitioning windows."""

    def test_invalid_max_partitions(self):
        with pytest.raises(ValueError):
            MultiSplit(Axis.X, 1, 0)

    def test_one_primary_two_partitions(self):
        split = MultiSplit(Axis.X, 1, 2)
        groups = split.partition_windows([1, 2, 3, 4, 5])
        assert groups == [[1], [2, 3, 4, 5]]

    def test_each_partition_holds_one_more(self):
        split = MultiSplit(Axis.X, 2, 3)
        groups = split.partition_windows([1, 2, 3, 4, 5])
        assert groups == [[1, 2], [3, 4, 5]]

    def test_leftovers_go_to_last_partition(self):
        split = MultiSplit(Axis.X, 1, 3)
        groups = split.partition_windows(list(range(8)))
        assert groups == [[0], [1, 2], [3, 4, 5, 6, 7]]

    def test_zero_primary_windows_still_takes_one(self):
        split = MultiSplit(Axis.X, 0, 3)
        groups = split.partition_windows(["a", "b", "c", "d"])
        assert groups == [["a"], ["b"], ["c", "d"]]

    def test_single_partition(self):
        split = MultiSplit(Axis.X, 1, 1)
        assert split.partition_windows([1, 2, 3]) == [[1, 2, 3]]

    def test_no_windows(self):
        split = MultiSplit(Axis.X, 1, 2)
        assert split.partition_windows([]) == []

    def test_fewer_windows_than_partitions(self):
        split = MultiSplit(Axis.X, 1, 4)
        assert split.partition_windows(["a"]) == [["a"]]

    def test_split_pairs_rects_with_groups(self, standard_bounds):
        split = MultiSplit(Axis.X, 1, 2)
        result = split.split(standard_bounds, ["a", "b", "c"], 0)

        assert result == [
            (Rect.of(0, 0, 600, 800), ["a"]),
            (Rect.of(600, 0, 600, 800), ["b", "c"]),
        ]
        assert split.last_size == 1200

    def test_split_single_group_fills_bounds(self, standard_bounds, standard_area):
        split = MultiSplit(Axis.X, 1, 2)
        result = split.split(standard_bounds, ["a"], 10)
        assert result == [(standard_area, ["a"])]

    def test_in_primary_partition(self):
        split = MultiSplit(Axis.X, 2, 2)
        assert split.in_primary_partition(0)
        assert split.in_primary_partition(1)
        assert not split.in_primary_partition(2)

        split.primary_windows = 0
        assert split.in_primary_partition(0)
        assert not split.in_primary_partition(1)
