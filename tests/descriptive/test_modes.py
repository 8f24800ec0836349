"""
Tests for mode() and modes().

Covers both counting algorithms: bounded (integer range, array counts)
and general (any hashable values, dict counts).
"""

import warnings

import numpy as np
import pandas as pd
import pytest

from scalarstats.core.exceptions import EmptyInputError, ValidationError
from scalarstats.descriptive import mode, modes


class TestGeneralMode:
    """mode() without a range."""

    def test_clear_winner(self):
        assert mode([1, 2, 2, 3, 3, 3]) == 3

    def test_first_to_reach_count_wins(self):
        """1 reaches count 3 last, but 3 > 2 so it still wins."""
        assert mode([1, 2, 2, 3, 3, 1, 1]) == 1

    def test_tie_keeps_first_to_reach_maximum(self):
        """2 reaches count 2 before 1 does; 1 only ties and does not replace it."""
        assert mode([1, 2, 2, 1]) == 2
        assert mode([1, 1, 2, 2]) == 1

    def test_all_distinct_returns_first(self):
        assert mode([4, 9, 7]) == 4

    def test_strings(self):
        assert mode(["a", "b", "b", "c"]) == "b"

    def test_numpy_input_returns_python_scalar(self):
        result = mode(np.array([1.5, 2.5, 2.5]))
        assert result == 2.5
        assert type(result) is float

    def test_pandas_series(self):
        assert mode(pd.Series([3, 1, 3])) == 3

    def test_generator(self):
        assert mode(x % 3 for x in range(10)) == 0

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError, match="mode"):
            mode([])

    def test_empty_numpy_raises(self):
        with pytest.raises(EmptyInputError):
            mode(np.array([]))


class TestGeneralModes:
    """modes() without a range. Output order is not specified."""

    def test_single_mode(self):
        assert modes([1, 2, 2, 3, 3, 1, 1]) == [1]

    def test_ties_as_set(self):
        result = modes([5, 5, 6, 6, 7])
        assert len(result) == 2
        assert set(result) == {5, 6}

    def test_all_distinct(self):
        assert set(modes([3, 1, 2])) == {1, 2, 3}

    def test_mixed_hashables(self):
        assert set(modes(["x", ("t", 1), ("t", 1), "x"])) == {"x", ("t", 1)}

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError, match="modes"):
            modes([])


class TestBoundedMode:
    """mode() over an inclusive integer range."""

    def test_tie_break_strict(self):
        assert mode([1, 1, 2, 2], range(1, 3)) == 1

    def test_clear_winner(self):
        assert mode([1, 2, 2, 3, 3, 3], range(1, 4)) == 3

    def test_out_of_range_ignored(self):
        """9 is the most common value overall but lies outside the range."""
        assert mode([9, 9, 9, 2, 2, 3], range(1, 5)) == 2

    def test_negative_range(self):
        assert mode([-3, -1, -1, 0], range(-3, 1)) == -1

    def test_numpy_int_input(self):
        result = mode(np.array([4, 5, 5], dtype=np.int16), range(4, 6))
        assert result == 5
        assert type(result) is int

    def test_nothing_in_range_returns_start(self):
        with pytest.warns(UserWarning, match="No sample value"):
            assert mode([10, 11], range(1, 4)) == 1

    def test_no_warning_when_counted(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            mode([1, 2, 2], range(1, 3))

    def test_agrees_with_general_variant(self, rng):
        data = rng.integers(0, 20, size=500)
        assert mode(data, range(0, 20)) == mode(data)

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError, match="mode"):
            mode([], range(1, 3))

    def test_float_sample_rejected(self):
        with pytest.raises(ValidationError, match="integer"):
            mode([1.0, 2.0], range(1, 3))

    def test_stepped_range_rejected(self):
        with pytest.raises(ValidationError, match="step 1"):
            mode([1, 3], range(1, 5, 2))

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError, match="non-empty"):
            mode([1, 2], range(3, 3))

    def test_non_range_rejected(self):
        with pytest.raises(ValidationError, match="expected a range"):
            mode([1, 2], (1, 2))


class TestBoundedModes:
    """modes() over an inclusive integer range. Output is ascending."""

    def test_ties_ascending(self):
        assert modes([6, 6, 5, 5, 7], range(5, 8)) == [5, 6]

    def test_single(self):
        assert modes([1, 2, 2, 3, 3, 1, 1], range(1, 4)) == [1]

    def test_out_of_range_ignored(self):
        assert modes([0, 0, 0, 1, 2], range(1, 3)) == [1, 2]

    def test_nothing_in_range_returns_whole_range(self):
        with pytest.warns(UserWarning):
            assert modes([10], range(1, 4)) == [1, 2, 3]

    def test_matches_sorted_general_variant(self, rng):
        data = rng.integers(0, 6, size=60)
        assert modes(data, range(0, 6)) == sorted(modes(data))

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError, match="modes"):
            modes([], range(1, 3))


class TestNaNCounting:
    """NaNs count as one value, whatever the container."""

    def test_modes_list_and_array_agree(self):
        nan = float("nan")
        as_list = modes([nan, float("nan"), 1.0])
        as_array = modes(np.array([np.nan, np.nan, 1.0]))
        assert len(as_list) == 1
        assert len(as_array) == 1
        assert np.isnan(as_list[0])
        assert np.isnan(as_array[0])

    def test_mode_counts_repeated_nan(self):
        assert np.isnan(mode(np.array([1.0, np.nan, np.nan])))
        assert np.isnan(mode([1.0, float("nan"), float("nan")]))

    def test_single_nan_does_not_win(self):
        assert mode(np.array([np.nan, 2.0, 2.0])) == 2.0
        assert modes(np.array([np.nan, 2.0, 2.0])) == [2.0]

    def test_nan_ties_with_number(self):
        result = modes(np.array([np.nan, 3.0, np.nan, 3.0]))
        assert len(result) == 2
        assert 3.0 in result
        assert sum(np.isnan(v) for v in result) == 1
