"""
SampleDesign: data wrapper for one-dimensional descriptive statistics.

Wraps a validated sample and an optional weight vector. Follows the
Design pattern: build once through a classmethod, read through properties.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scalarstats.core.validation import (
    check_array, check_1d, check_nonempty, check_consistent_length,
)
from scalarstats.descriptive.weights import Weights


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for one-dimensional descriptive statistics.

    Wraps a non-empty 1D sample of reals, optionally paired with a
    Weights vector of the same length. NaN is allowed and propagates
    through the statistics. Immutable after construction.

    Construction:
        SampleDesign.from_array(x)
        SampleDesign.from_array(x, weights=w)
    """
    _data: NDArray[np.floating[Any]]
    _weights: Weights | None

    @classmethod
    def from_array(
        cls,
        data,
        *,
        weights: ArrayLike | Weights | None = None,
        operation: str | None = None,
    ) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. Can be a list, numpy array, pandas Series, or any
            array-like with a .values attribute.
        weights : array-like or Weights, optional
            Non-negative weights, one per observation.
        operation : str, optional
            Calling operation, used in error messages.

        Raises
        ------
        EmptyInputError
            If the sample is empty.
        DimensionError
            If the sample is not 1D or the weights do not match its length.
        """
        if isinstance(data, SampleDesign):
            if weights is None:
                return data
            data = data.data

        if hasattr(data, 'values'):
            data = data.values

        arr = check_array(data, "x")
        check_1d(arr, "x")
        check_nonempty(arr, "x", operation)
        if arr.dtype != np.float64:
            arr = arr.astype(np.float64)

        wv = None
        if weights is not None:
            wv = Weights.from_array(weights)
            check_consistent_length(arr, wv.values, names=("x", "weights"))

        return cls(_data=arr, _weights=wv)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Sample values (n,)."""
        return self._data

    @property
    def weights(self) -> Weights | None:
        """Weights paired with the sample, or None."""
        return self._weights

    @property
    def n(self) -> int:
        """Number of observations."""
        return len(self._data)

    @property
    def is_weighted(self) -> bool:
        return self._weights is not None

    @property
    def has_missing(self) -> bool:
        """Whether the sample has any NaN values."""
        return bool(np.any(np.isnan(self._data)))

    def __repr__(self) -> str:
        weighted = ", weighted" if self.is_weighted else ""
        missing = ", missing" if self.has_missing else ""
        return f"SampleDesign(n={self.n}{weighted}{missing})"
