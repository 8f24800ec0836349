"""
Centered-moment accumulation for skewness and kurtosis.

Type 1 definitions of Joanes and Gill (1998):

    skewness = m3 / m2^1.5
    kurtosis = m4 / m2^2 - 3      (excess)

where mk is the k-th centered moment about a supplied center, normalized
by n (unweighted) or by the total weight (weighted). Each statistic is a
single pass that accumulates two running sums; no centered copy of the
sample is materialized.

Reference:
    Joanes, D.N. and Gill, C.A. (1998) "Comparing measures of sample
    skewness and kurtosis", The Statistician, 47(1), 183-189.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def _finish_skewness(cm2: float, cm3: float, norm: float) -> float:
    cm2 = np.float64(cm2) / norm
    cm3 = np.float64(cm3) / norm
    # cm2 * cm2 * cm2 under the root is faster than cm2 ** 1.5
    return float(cm3 / np.sqrt(cm2 * cm2 * cm2))


def _finish_kurtosis(cm2: float, cm4: float, norm: float) -> float:
    cm2 = np.float64(cm2) / norm
    cm4 = np.float64(cm4) / norm
    return float(cm4 / (cm2 * cm2) - 3.0)


def skewness_about(x: NDArray, m: float) -> float:
    """
    Skewness of x about center m.

    Parameters
    ----------
    x : NDArray
        1D float64 sample, non-empty.
    m : float
        Center (usually the mean).

    Returns
    -------
    float
        NaN for a constant sample (0/0).
    """
    n = len(x)
    m = float(m)
    cm2 = 0.0  # empirical 2nd centered moment
    cm3 = 0.0  # empirical 3rd centered moment
    for x_i in x.tolist():
        z = x_i - m
        z2 = z * z
        cm2 += z2
        cm3 += z2 * z

    with np.errstate(divide='ignore', invalid='ignore'):
        return _finish_skewness(cm2, cm3, n)


def weighted_skewness_about(x: NDArray, w: NDArray, sw: float, m: float) -> float:
    """
    Weighted skewness of x about center m.

    Parameters
    ----------
    x : NDArray
        1D float64 sample, non-empty.
    w : NDArray
        Non-negative weights, same length as x (checked by the caller).
    sw : float
        Total weight, sum(w).
    m : float
        Center (usually the weighted mean).
    """
    m = float(m)
    cm2 = 0.0
    cm3 = 0.0
    for x_i, w_i in zip(x.tolist(), w.tolist()):
        z = x_i - m
        z2w = z * z * w_i
        cm2 += z2w
        cm3 += z2w * z

    with np.errstate(divide='ignore', invalid='ignore'):
        return _finish_skewness(cm2, cm3, sw)


def kurtosis_about(x: NDArray, m: float) -> float:
    """
    Excess kurtosis of x about center m.

    Returns NaN for a constant sample (0/0).
    """
    n = len(x)
    m = float(m)
    cm2 = 0.0  # empirical 2nd centered moment
    cm4 = 0.0  # empirical 4th centered moment
    for x_i in x.tolist():
        z = x_i - m
        z2 = z * z
        cm2 += z2
        cm4 += z2 * z2

    with np.errstate(divide='ignore', invalid='ignore'):
        return _finish_kurtosis(cm2, cm4, n)


def weighted_kurtosis_about(x: NDArray, w: NDArray, sw: float, m: float) -> float:
    """Weighted excess kurtosis of x about center m."""
    m = float(m)
    cm2 = 0.0
    cm4 = 0.0
    for x_i, w_i in zip(x.tolist(), w.tolist()):
        z = x_i - m
        z2 = z * z
        z2w = z2 * w_i
        cm2 += z2w
        cm4 += z2w * z2

    with np.errstate(divide='ignore', invalid='ignore'):
        return _finish_kurtosis(cm2, cm4, sw)
