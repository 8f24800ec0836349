"""
Descriptive statistics for one-dimensional samples.

Public API:
    skewness(x), kurtosis(x)     - Moment shape statistics, optionally weighted
    variation(x), sem(x), mad(x) - Dispersion
    midrange(x), sample_range(x) - Extrema
    quantile(x), percentile(x)   - Quantiles (9 Hyndman & Fan types)
    mode(x), modes(x)            - Most frequent value(s)
    summarystats(x), describe(x) - Mean and five-number summary
"""

from scalarstats.descriptive.design import SampleDesign
from scalarstats.descriptive.weights import Weights
from scalarstats.descriptive.solution import SummaryStats
from scalarstats.descriptive.solvers import (
    mean,
    skewness,
    kurtosis,
    variation,
    sem,
    mad,
    mad_inplace,
    middle,
    midrange,
    sample_range,
    median,
    quantile,
    nquantile,
    percentile,
    iqr,
    mode,
    modes,
    summarystats,
    describe,
    MAD_NORMAL_SCALE,
)

__all__ = [
    "mean",
    "skewness",
    "kurtosis",
    "variation",
    "sem",
    "mad",
    "mad_inplace",
    "middle",
    "midrange",
    "sample_range",
    "median",
    "quantile",
    "nquantile",
    "percentile",
    "iqr",
    "mode",
    "modes",
    "summarystats",
    "describe",
    "MAD_NORMAL_SCALE",
    "SampleDesign",
    "Weights",
    "SummaryStats",
]
