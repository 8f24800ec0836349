"""
scalarstats: descriptive statistics for one-dimensional numeric samples.

Moment shape statistics (optionally weighted), dispersion, extrema,
quantiles, mode detection and a five-number summary report.

Submodules:
    descriptive: the statistics
    core: exceptions and input validation
"""

__version__ = "0.1.0"

from scalarstats import descriptive
from scalarstats.descriptive import (
    skewness,
    kurtosis,
    mode,
    modes,
    summarystats,
    describe,
)

__all__ = [
    "__version__",
    "descriptive",
    "skewness",
    "kurtosis",
    "mode",
    "modes",
    "summarystats",
    "describe",
]
