"""
Mode and modes by frequency counting.

Two distinct algorithms:

    bounded: integer sample with a known inclusive value range [r0, r1].
             Counts live in an array indexed by x - r0. O(len(range) + n).
    general: any hashable values. Counts live in a dict. O(n).

Tie rule for mode: the first value to reach a new maximum count wins.
A later value that only equals the maximum does not replace it (strict >).
Values are visited in sample order, so "first" means first in the sample
to attain the count.
"""

from __future__ import annotations

import warnings
from typing import Any, Hashable, Sequence
import numpy as np
from numpy.typing import NDArray


def _count_in_range(a: NDArray, r0: int, r1: int) -> tuple[NDArray, int, int | None]:
    """
    Count occurrences of each value of a inside [r0, r1].

    Returns
    -------
    cnts : NDArray
        Counts, cnts[k] is the count of value r0 + k.
    mc : int
        Maximum count (0 if nothing fell inside the range).
    mv : int or None
        First value to reach mc, or None if mc == 0.
    """
    cnts = np.zeros(r1 - r0 + 1, dtype=np.intp)
    mc = 0
    mv = None

    for x in a.tolist():
        if r0 <= x <= r1:
            k = x - r0
            cnts[k] += 1
            c = int(cnts[k])
            if c > mc:
                mc = c
                mv = x

    if mc == 0:
        warnings.warn(
            f"No sample value lies inside range [{r0}, {r1}]; "
            f"all counts are zero",
            UserWarning,
            stacklevel=4,
        )
    return cnts, mc, mv


def bounded_mode(a: NDArray, r0: int, r1: int) -> int:
    """
    Mode of an integer sample restricted to [r0, r1].

    Values outside the range are skipped. If nothing falls inside,
    returns r0.
    """
    _, _, mv = _count_in_range(a, r0, r1)
    return r0 if mv is None else mv


def bounded_modes(a: NDArray, r0: int, r1: int) -> list[int]:
    """
    All values in [r0, r1] attaining the maximum count, ascending.
    """
    cnts, mc, _ = _count_in_range(a, r0, r1)
    return [r0 + int(k) for k in np.flatnonzero(cnts == mc)]


_NAN = float('nan')


def _count_key(x: Any) -> Any:
    """Map every float NaN to one key so NaNs are counted together."""
    if isinstance(x, (float, np.floating)) and x != x:
        return _NAN
    return x


def _frequency_table(a: Sequence[Hashable]) -> tuple[dict[Any, int], int, Any]:
    """
    Build value -> count in one pass, tracking the first value to reach
    the running maximum.

    `a` must be non-empty (checked by the caller). All NaNs share one
    entry, keyed by a single canonical NaN.
    """
    it = iter(a)
    mv = _count_key(next(it))
    mc = 1
    cnts: dict[Any, int] = {mv: 1}

    for x in it:
        x = _count_key(x)
        if x in cnts:
            c = cnts[x] + 1
            cnts[x] = c
            if c > mc:
                mc = c
                mv = x
        else:
            # count 1 can never exceed mc >= 1
            cnts[x] = 1

    return cnts, mc, mv


def general_mode(a: Sequence[Hashable]) -> Any:
    """Most frequent value of a (strict > tie break)."""
    _, _, mv = _frequency_table(a)
    return mv


def general_modes(a: Sequence[Hashable]) -> list[Any]:
    """
    Every value of a attaining the maximum count.

    The order of the returned list is NOT specified.
    """
    cnts, mc, _ = _frequency_table(a)
    return [x for x, c in cnts.items() if c == mc]
