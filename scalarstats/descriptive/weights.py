"""
Weights: a validated, non-negative weight vector.

Pairs one-to-one with a sample for the weighted moment statistics.
Immutable after construction; the total weight is computed once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from scalarstats.core.validation import check_array, check_1d, check_nonnegative


@dataclass(frozen=True)
class Weights:
    """
    Non-negative weight vector.

    Construction:
        Weights.from_array([1.0, 2.0, 0.5])
    """
    _values: NDArray[np.floating[Any]]
    _sum: float

    @classmethod
    def from_array(cls, values: ArrayLike | Weights) -> Weights:
        """
        Build Weights from array-like data.

        Parameters
        ----------
        values : array-like or Weights
            1D sequence of finite, non-negative reals. A pandas Series
            (anything with a .values attribute) is accepted. An existing
            Weights instance is returned as is.
        """
        if isinstance(values, Weights):
            return values
        if hasattr(values, 'values'):
            values = values.values

        arr = np.array(check_array(values, "weights"), dtype=np.float64)
        check_1d(arr, "weights")
        check_nonnegative(arr, "weights")
        arr.flags.writeable = False

        return cls(_values=arr, _sum=float(np.sum(arr)))

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Weight values, read-only."""
        return self._values

    @property
    def sum(self) -> float:
        """Total weight."""
        return self._sum

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Weights(n={len(self._values)}, sum={self._sum:g})"
