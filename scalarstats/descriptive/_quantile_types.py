"""
The nine sample quantile definitions of Hyndman & Fan (1996).

Types 1-3 are discontinuous (step functions).
Types 4-9 interpolate linearly between order statistics, differing in
the plotting position p(k) = (k - a) / (n + 1 - a - b).

Type 7 is the default: p(k) = (k - 1) / (n - 1), the definition used by
most statistical environments, which returns exact order statistics at
probabilities that land on them (e.g. quartiles of 1..5).

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from scalarstats.core.exceptions import ValidationError

DEFAULT_QUANTILE_TYPE = 7

# (a, b) plotting-position constants for the continuous types
_CONTINUOUS_AB = {
    4: (0.0, 1.0),
    5: (0.5, 0.5),
    6: (0.0, 0.0),
    7: (1.0, 1.0),
    8: (1.0 / 3.0, 1.0 / 3.0),
    9: (3.0 / 8.0, 3.0 / 8.0),
}

# Guards floor() against representation error in n * p
_FUZZ = 4.0 * np.finfo(np.float64).eps


def check_quantile_type(qtype: int) -> None:
    if qtype not in range(1, 10):
        raise ValidationError(f"Quantile type must be 1-9, got {qtype}")


def _discontinuous(xs: NDArray, p: float, qtype: int) -> float:
    n = len(xs)
    nppm = n * p - 0.5 if qtype == 3 else n * p
    j = int(math.floor(nppm + _FUZZ))
    on_point = abs(nppm - j) < _FUZZ

    if qtype == 1:
        h = 1.0 if nppm > j + _FUZZ else 0.0
    elif qtype == 2:
        h = 0.5 if on_point else (1.0 if nppm > j else 0.0)
    else:
        # nearest even order statistic on exact hits
        h = 0.0 if on_point and j % 2 == 0 else 1.0

    # order statistic k (1-based) sits at xs[k - 1], clamped to [1, n]
    lo = xs[min(max(j, 1), n) - 1]
    hi = xs[min(max(j + 1, 1), n) - 1]
    return (1.0 - h) * lo + h * hi


def _continuous(xs: NDArray, p: float, qtype: int) -> float:
    n = len(xs)
    a, b = _CONTINUOUS_AB[qtype]
    nppm = a + p * (n + 1.0 - a - b)
    j = int(math.floor(nppm + _FUZZ))
    h = nppm - j
    if abs(h) < _FUZZ:
        h = 0.0
    elif abs(h - 1.0) < _FUZZ:
        h = 1.0

    if j < 1:
        return xs[0]
    if j >= n:
        return xs[n - 1]
    return (1.0 - h) * xs[j - 1] + h * xs[j]


def sorted_quantile(xs: NDArray, probs: NDArray, qtype: int = DEFAULT_QUANTILE_TYPE) -> NDArray:
    """
    Quantiles of a sorted sample.

    Parameters
    ----------
    xs : NDArray
        1D sorted float64 array, non-empty. NaN is not allowed here;
        the caller handles it.
    probs : NDArray
        1D array of probabilities in [0, 1].
    qtype : int
        Hyndman & Fan type 1-9.

    Returns
    -------
    NDArray
        One value per probability.
    """
    check_quantile_type(qtype)
    probs = np.asarray(probs, dtype=np.float64)

    if len(xs) == 1:
        return np.full(len(probs), xs[0], dtype=np.float64)

    step = _discontinuous if qtype <= 3 else _continuous
    return np.array([step(xs, float(p), qtype) for p in probs], dtype=np.float64)
