"""
Public entry points for one-dimensional descriptive statistics.

Moments:     mean(), skewness(), kurtosis()
Dispersion:  variation(), sem(), mad(), mad_inplace()
Extrema:     middle(), midrange(), sample_range()
Quantiles:   median(), quantile(), nquantile(), percentile(), iqr()
Frequency:   mode(), modes()
Summary:     summarystats(), describe()

Numeric anomalies (constant samples, zero mean, zero total weight) are
returned as NaN or inf, never raised.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Hashable, TextIO
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scalarstats.core.exceptions import ValidationError
from scalarstats.core.validation import (
    check_array, check_1d, check_nonempty, check_integer_dtype,
)
from scalarstats.descriptive.design import SampleDesign
from scalarstats.descriptive.weights import Weights
from scalarstats.descriptive.solution import SummaryStats
from scalarstats.descriptive._moments import (
    skewness_about, weighted_skewness_about,
    kurtosis_about, weighted_kurtosis_about,
)
from scalarstats.descriptive._modes import (
    bounded_mode, bounded_modes, general_mode, general_modes,
)
from scalarstats.descriptive._quantile_types import (
    DEFAULT_QUANTILE_TYPE, check_quantile_type, sorted_quantile,
)


# Consistency constant: MAD * 1.4826 estimates sigma for normal data
MAD_NORMAL_SCALE = 1.4826

SUMMARY_PROBS = (0.0, 0.25, 0.5, 0.75, 1.0)


def _ensure_design(
    data: ArrayLike | SampleDesign,
    weights: ArrayLike | Weights | None = None,
    operation: str | None = None,
) -> SampleDesign:
    """Convert raw array to SampleDesign if needed."""
    return SampleDesign.from_array(data, weights=weights, operation=operation)


def _design_mean(design: SampleDesign) -> float:
    if design.weights is None:
        return float(np.mean(design.data))
    w = design.weights
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.sum(w.values * design.data) / np.float64(w.sum))


def _as_numeric_1d(x, operation: str) -> NDArray:
    """1D numeric array that keeps integer dtypes (for extrema)."""
    if hasattr(x, 'values'):
        x = x.values
    arr = np.asarray(x)
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        arr = check_array(arr, "x")
    check_1d(arr, "x")
    check_nonempty(arr, "x", operation)
    return arr


def _is_integer(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, (bool, np.bool_))


# --- Moments ---

def mean(
    x: ArrayLike | SampleDesign,
    *,
    weights: ArrayLike | Weights | None = None,
) -> float:
    """
    Arithmetic mean, or the weighted mean sum(w*x)/sum(w).

    A zero total weight gives NaN.
    """
    return _design_mean(_ensure_design(x, weights, 'mean'))


def skewness(
    x: ArrayLike | SampleDesign,
    *,
    weights: ArrayLike | Weights | None = None,
    center: float | None = None,
) -> float:
    """
    Skewness m3 / m2^1.5 (Joanes & Gill type 1, no bias adjustment).

    Parameters
    ----------
    x : array-like or SampleDesign
        1D sample, non-empty.
    weights : array-like or Weights, optional
        Non-negative weights, one per observation. Moments are then
        normalized by the total weight instead of n.
    center : float, optional
        Center of the moments. Default: the (weighted) mean.

    Returns
    -------
    float
        NaN for a constant sample.

    Raises
    ------
    DimensionError
        If weights and x differ in length (checked before any computation).
    """
    design = _ensure_design(x, weights, 'skewness')
    m = _design_mean(design) if center is None else center

    if design.weights is None:
        return skewness_about(design.data, m)
    w = design.weights
    return weighted_skewness_about(design.data, w.values, w.sum, m)


def kurtosis(
    x: ArrayLike | SampleDesign,
    *,
    weights: ArrayLike | Weights | None = None,
    center: float | None = None,
) -> float:
    """
    Excess kurtosis m4 / m2^2 - 3 (Joanes & Gill type 1).

    Normal data gives values near 0. Parameters and failure modes
    are those of skewness().
    """
    design = _ensure_design(x, weights, 'kurtosis')
    m = _design_mean(design) if center is None else center

    if design.weights is None:
        return kurtosis_about(design.data, m)
    w = design.weights
    return weighted_kurtosis_about(design.data, w.values, w.sum, m)


# --- Dispersion ---

def _stdm(data: NDArray, m: float) -> np.float64:
    """Sample standard deviation about m, n-1 denominator."""
    d = data - m
    return np.sqrt(np.sum(d * d) / np.float64(len(data) - 1))


def variation(x: ArrayLike | SampleDesign, center: float | None = None) -> float:
    """
    Coefficient of variation: standard deviation about center / center.

    center defaults to the mean. A zero center gives inf or NaN.
    """
    design = _ensure_design(x, operation='variation')
    m = np.float64(np.mean(design.data) if center is None else center)
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(_stdm(design.data, m) / m)


def sem(x: ArrayLike | SampleDesign) -> float:
    """Standard error of the mean: sqrt(var / n), var with n-1 denominator."""
    data = _ensure_design(x, operation='sem').data
    n = len(data)
    with np.errstate(divide='ignore', invalid='ignore'):
        d = data - np.mean(data)
        var = np.sum(d * d) / np.float64(n - 1)
        return float(np.sqrt(var / n))


def mad_inplace(x: NDArray[np.floating[Any]], center: float | None = None) -> float:
    """
    Median absolute deviation, overwriting x.

    On return x holds the absolute deviations |x - center| (partially
    reordered by the median selection). x is consumed: calling this
    again on the same array measures the deviations, not the original
    sample.

    Parameters
    ----------
    x : NDArray
        Writable 1D floating array, non-empty.
    center : float, optional
        Default: the median of x.

    Returns
    -------
    float
        1.4826 * median(|x - center|).
    """
    if not isinstance(x, np.ndarray):
        raise ValidationError(
            f"x: in-place MAD needs a numpy array, got {type(x).__name__}"
        )
    if not np.issubdtype(x.dtype, np.floating):
        raise ValidationError(
            f"x: in-place MAD needs a floating array, got dtype {x.dtype}"
        )
    if not x.flags.writeable:
        raise ValidationError("x: in-place MAD needs a writable array")
    check_1d(x, "x")
    check_nonempty(x, "x", 'mad_inplace')

    if center is None:
        center = np.median(x, overwrite_input=True)
    np.subtract(x, center, out=x)
    np.abs(x, out=x)
    return float(MAD_NORMAL_SCALE * np.median(x, overwrite_input=True))


def mad(x: ArrayLike | SampleDesign, center: float | None = None) -> float:
    """
    Median absolute deviation, scaled for consistency with sigma.

    1.4826 * median(|x - center|), center defaulting to the median.
    x is not modified; see mad_inplace() for the destructive variant.
    """
    data = _ensure_design(x, operation='mad').data
    return mad_inplace(np.array(data, dtype=np.float64), center)


# --- Extrema ---

def middle(a, b):
    """
    Midpoint of two numbers.

    Two integers give the midpoint truncated toward zero (an int);
    anything else gives (a + b) / 2.
    """
    if _is_integer(a) and _is_integer(b):
        s = int(a) + int(b)
        half = abs(s) // 2
        return half if s >= 0 else -half
    return (a + b) / 2


def midrange(x: ArrayLike) -> float | int:
    """Midpoint of the minimum and maximum, middle(min(x), max(x))."""
    arr = _as_numeric_1d(x, 'midrange')
    return middle(arr.min().item(), arr.max().item())


def sample_range(x: ArrayLike) -> float | int:
    """Spread max(x) - min(x). Integer samples give an int."""
    arr = _as_numeric_1d(x, 'sample_range')
    return arr.max().item() - arr.min().item()


# --- Quantiles ---

def _check_probs(probs: NDArray, name: str, upper: float) -> None:
    if np.any(np.isnan(probs)) or np.any(probs < 0) or np.any(probs > upper):
        raise ValidationError(
            f"{name}: must lie in [0, {upper:g}], got {probs.tolist()}"
        )


def _sample_quantile(design: SampleDesign, probs: NDArray, qtype: int) -> NDArray:
    if design.has_missing:
        return np.full(len(probs), np.nan)
    return sorted_quantile(np.sort(design.data), probs, qtype)


def quantile(
    x: ArrayLike | SampleDesign,
    probs: ArrayLike | float | None = None,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> NDArray[np.floating[Any]] | float:
    """
    Sample quantiles (Hyndman & Fan types 1-9).

    Parameters
    ----------
    x : array-like or SampleDesign
        1D sample, non-empty.
    probs : float or array-like, optional
        Probabilities in [0, 1]. Default (0, 0.25, 0.5, 0.75, 1.0).
    type : int
        Quantile definition 1-9. Default 7.

    Returns
    -------
    float for scalar probs, NDArray otherwise. A sample containing NaN
    gives NaN quantiles.
    """
    check_quantile_type(type)
    design = _ensure_design(x, operation='quantile')

    if probs is None:
        probs = SUMMARY_PROBS
    q_probs = np.asarray(probs, dtype=np.float64)
    scalar = q_probs.ndim == 0
    q_probs = np.atleast_1d(q_probs)
    _check_probs(q_probs, "probs", 1.0)

    result = _sample_quantile(design, q_probs, type)
    return float(result[0]) if scalar else result


def nquantile(
    x: ArrayLike | SampleDesign,
    n: int,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> NDArray[np.floating[Any]]:
    """Quantiles at 0, 1/n, ..., 1: the n+1 points splitting x into n groups."""
    if not _is_integer(n) or n < 1:
        raise ValidationError(f"n: must be a positive integer, got {n!r}")
    return quantile(x, np.arange(n + 1) / n, type=type)


def percentile(
    x: ArrayLike | SampleDesign,
    p: ArrayLike | float,
    *,
    type: int = DEFAULT_QUANTILE_TYPE,
) -> NDArray[np.floating[Any]] | float:
    """Quantile at percent p (0-100): quantile(x, p / 100)."""
    pct = np.asarray(p, dtype=np.float64)
    _check_probs(np.atleast_1d(pct), "p", 100.0)
    return quantile(x, pct * 0.01, type=type)


def median(x: ArrayLike | SampleDesign) -> float:
    """Sample median."""
    return quantile(x, 0.5)


def iqr(x: ArrayLike | SampleDesign, *, type: int = DEFAULT_QUANTILE_TYPE) -> float:
    """Inter-quartile range Q3 - Q1."""
    q = quantile(x, [0.25, 0.75], type=type)
    return float(q[1] - q[0])


# --- Frequency ---

def _mode_input(x, operation: str, rng: range | None):
    """
    Validate mode/modes input.

    Returns (array, r0, r1) for the bounded variant and (list, None, None)
    for the general variant.
    """
    if hasattr(x, 'values') and not isinstance(x, dict):
        x = x.values
    if not isinstance(x, (np.ndarray, Sequence)):
        x = list(x)
    if rng is None:
        if isinstance(x, np.ndarray):
            check_1d(x, "x")
            x = x.tolist()
        check_nonempty(x, "x", operation)
        return x, None, None

    if not isinstance(rng, range):
        raise ValidationError(
            f"rng: expected a range, got {type(rng).__name__}"
        )
    if rng.step != 1 or len(rng) == 0:
        raise ValidationError(
            f"rng: expected a non-empty range with step 1, got {rng!r}"
        )
    arr = np.asarray(x)
    check_1d(arr, "x")
    check_nonempty(arr, "x", operation)
    check_integer_dtype(arr, "x")
    return arr, rng[0], rng[-1]


def mode(x: Sequence[Hashable] | ArrayLike, rng: range | None = None) -> Any:
    """
    Most frequent value.

    Parameters
    ----------
    x : sequence
        Non-empty sample. With rng, integer valued; otherwise any
        hashable values.
    rng : range, optional
        Inclusive integer value range (step 1), e.g. range(1, 7) for
        values 1..6. Counts are kept in an array over the range and
        values outside it are ignored. If no value falls inside, the
        first value of the range is returned (with a UserWarning).

    Ties go to the value that first reached the maximum count.

    Raises
    ------
    EmptyInputError
        If x is empty.
    """
    data, r0, r1 = _mode_input(x, 'mode', rng)
    if rng is None:
        return general_mode(data)
    return bounded_mode(data, r0, r1)


def modes(x: Sequence[Hashable] | ArrayLike, rng: range | None = None) -> list[Any]:
    """
    All values sharing the maximum count.

    With rng the result is in ascending order. Without it the order is
    NOT specified; sort or compare as a set if order matters.

    Raises
    ------
    EmptyInputError
        If x is empty.
    """
    data, r0, r1 = _mode_input(x, 'modes', rng)
    if rng is None:
        return general_modes(data)
    return bounded_modes(data, r0, r1)


# --- Summary ---

def summarystats(x: ArrayLike | SampleDesign) -> SummaryStats:
    """
    Mean and quartiles (type 7) of a sample.

    Returns
    -------
    SummaryStats with mean, min, q25, median, q75, max.
    """
    design = _ensure_design(x, operation='summarystats')
    m = _design_mean(design)
    qs = _sample_quantile(design, np.array(SUMMARY_PROBS), DEFAULT_QUANTILE_TYPE)
    return SummaryStats(
        mean=float(m),
        min=float(qs[0]),
        q25=float(qs[1]),
        median=float(qs[2]),
        q75=float(qs[3]),
        max=float(qs[4]),
    )


def describe(x: ArrayLike | SampleDesign, *, file: TextIO | None = None) -> SummaryStats:
    """
    Print the summary report of x (to stdout by default).

    Returns the SummaryStats that was printed.
    """
    stats = summarystats(x)
    print(stats.summary(), file=file)
    return stats
