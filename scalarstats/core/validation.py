"""
Input validation utilities for scalarstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from scalarstats.core.exceptions import (
    ValidationError, DimensionError, EmptyInputError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a floating numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Floating input is returned without a copy.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}",
            expected=1,
            actual=array.ndim,
        )


def check_nonempty(array: Any, name: str, operation: str | None = None) -> None:
    """
    Verify a sample holds at least one element.

    Args:
        array: Sized input (array or sequence)
        name: Parameter name for error messages
        operation: Calling operation, reported in the message

    Raises:
        EmptyInputError: If the input is empty
    """
    if len(array) == 0:
        prefix = f"{operation}: " if operation else ""
        raise EmptyInputError(
            f"{prefix}{name} cannot be empty", operation=operation
        )


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Args:
        *arrays: Arrays to check
        names: Parameter names for error messages, one per array

    Raises:
        DimensionError: If arrays have inconsistent lengths
    """
    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(
            f"Inconsistent lengths: {details}",
            expected=lengths[0],
            actual=next(n for n in lengths if n != lengths[0]),
        )


def check_nonnegative(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array holds only finite, non-negative values.

    Raises:
        ValidationError: If any value is negative, NaN or infinite
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )
    negative = np.where(array < 0)[0]
    if len(negative) > 0:
        raise ValidationError(
            f"{name}: must be non-negative, found {len(negative)} negative "
            f"value(s) (first at index {negative[0]})"
        )


def check_integer_dtype(array: NDArray[Any], name: str) -> None:
    """
    Verify array has an integer dtype.

    Raises:
        ValidationError: If the dtype is not an integer type
    """
    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.integer):
        raise ValidationError(
            f"{name}: expected integer data, got dtype {array.dtype}"
        )
