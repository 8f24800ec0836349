"""
Tests for summarystats(), describe(), SampleDesign and Weights.
"""

import io

import numpy as np
import pandas as pd
import pytest

from scalarstats.core.exceptions import DimensionError, EmptyInputError, ValidationError
from scalarstats.descriptive import (
    SampleDesign, SummaryStats, Weights, describe, skewness, summarystats,
)


EXPECTED_REPORT = (
    "Summary Stats:\n"
    "Mean:         3.000000\n"
    "Minimum:      1.000000\n"
    "1st Quartile: 2.000000\n"
    "Median:       3.000000\n"
    "3rd Quartile: 4.000000\n"
    "Maximum:      5.000000"
)


class TestSampleDesign:
    """SampleDesign construction and validation."""

    def test_from_list(self):
        design = SampleDesign.from_array([1, 2, 3])
        assert design.n == 3
        assert design.data.dtype == np.float64
        assert design.weights is None
        assert not design.is_weighted

    def test_float_array_not_copied(self):
        x = np.array([1.0, 2.0])
        assert SampleDesign.from_array(x).data is x

    def test_from_series_uses_values(self):
        design = SampleDesign.from_array(pd.Series([1.0, 2.0], name="height"))
        np.testing.assert_array_equal(design.data, [1.0, 2.0])
        assert not hasattr(design, "name")

    def test_with_weights(self):
        design = SampleDesign.from_array([1.0, 2.0], weights=[0.5, 1.5])
        assert design.is_weighted
        assert design.weights.sum == 2.0

    def test_rewrap_with_weights(self):
        base = SampleDesign.from_array([1.0, 2.0])
        assert SampleDesign.from_array(base) is base
        weighted = SampleDesign.from_array(base, weights=[1.0, 1.0])
        assert weighted.is_weighted

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            SampleDesign.from_array([[1.0, 2.0], [3.0, 4.0]])

    def test_rejects_empty(self):
        with pytest.raises(EmptyInputError, match="skewness"):
            SampleDesign.from_array([], operation="skewness")

    def test_rejects_length_mismatch(self):
        with pytest.raises(DimensionError) as exc:
            SampleDesign.from_array([1.0, 2.0, 3.0], weights=[1.0])
        assert exc.value.expected == 3
        assert exc.value.actual == 1

    def test_has_missing(self):
        assert SampleDesign.from_array([1.0, np.nan]).has_missing

    def test_repr(self):
        r = repr(SampleDesign.from_array([1.0, 2.0], weights=[1.0, 1.0]))
        assert "n=2" in r
        assert "weighted" in r

    def test_design_accepted_by_statistics(self):
        design = SampleDesign.from_array([1.0, 2.0, 7.0], weights=[1.0, 2.0, 1.0])
        assert skewness(design) == skewness([1.0, 2.0, 7.0], weights=[1.0, 2.0, 1.0])


class TestWeights:

    def test_sum_and_len(self):
        w = Weights.from_array([1, 2, 3])
        assert len(w) == 3
        assert w.sum == 6.0

    def test_values_read_only(self):
        w = Weights.from_array([1.0, 2.0])
        with pytest.raises(ValueError):
            w.values[0] = 5.0

    def test_copies_input(self):
        src = np.array([1.0, 2.0])
        w = Weights.from_array(src)
        src[0] = 9.0
        assert w.values[0] == 1.0

    def test_passthrough(self):
        w = Weights.from_array([1.0])
        assert Weights.from_array(w) is w

    def test_rejects_negative(self):
        with pytest.raises(ValidationError, match="non-negative"):
            Weights.from_array([1.0, -2.0])

    def test_rejects_inf(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Weights.from_array([1.0, np.inf])

    def test_rejects_2d(self):
        with pytest.raises(DimensionError):
            Weights.from_array([[1.0], [2.0]])


class TestSummaryStats:

    def test_one_to_five_exact(self):
        s = summarystats([1, 2, 3, 4, 5])
        assert s == SummaryStats(mean=3.0, min=1.0, q25=2.0, median=3.0, q75=4.0, max=5.0)

    def test_unsorted_input(self, rng):
        x = rng.permutation(np.arange(1.0, 6.0))
        assert summarystats(x) == summarystats([1, 2, 3, 4, 5])

    def test_immutable(self):
        s = summarystats([1.0, 2.0])
        with pytest.raises(AttributeError):
            s.mean = 0.0

    def test_fields_are_floats(self):
        s = summarystats(np.array([1, 2, 3], dtype=np.int32))
        assert all(isinstance(v, float) for v in (s.mean, s.min, s.q25, s.median, s.q75, s.max))

    def test_report_format(self):
        assert summarystats([1, 2, 3, 4, 5]).summary() == EXPECTED_REPORT
        assert str(summarystats([1, 2, 3, 4, 5])) == EXPECTED_REPORT

    def test_report_six_decimals(self):
        text = summarystats([0.1234567, 2.0]).summary()
        assert "Minimum:      0.123457" in text

    def test_nan_propagates(self):
        s = summarystats([1.0, np.nan, 3.0])
        assert np.isnan(s.mean)
        assert np.isnan(s.median)

    def test_empty(self):
        with pytest.raises(EmptyInputError, match="summarystats"):
            summarystats([])


class TestDescribe:

    def test_prints_to_stdout(self, capsys):
        describe([1, 2, 3, 4, 5])
        assert capsys.readouterr().out == EXPECTED_REPORT + "\n"

    def test_prints_to_file(self):
        buf = io.StringIO()
        result = describe([5, 4, 3, 2, 1], file=buf)
        assert buf.getvalue() == EXPECTED_REPORT + "\n"
        assert result.median == 3.0
