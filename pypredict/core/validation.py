"""
Input validation utilities for PyPredict.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No silent truncation or padding of vectors
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pypredict.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

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

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_length(array: NDArray[np.floating[Any]], length: int, name: str) -> None:
    """
    Verify the first dimension of an array has exactly the given size.

    Args:
        array: Array to check
        length: Required size of the first dimension
        name: Parameter name for error messages

    Raises:
        DimensionError: If the size differs, with expected/actual attached
    """
    actual = array.shape[0]
    if actual != length:
        raise DimensionError(
            f"{name}: expected length {length}, got {actual}",
            expected=length,
            actual=actual,
        )


def check_columns(array: NDArray[np.floating[Any]], n_columns: int, name: str) -> None:
    """
    Verify a 2D array has exactly the given number of columns.

    Raises:
        DimensionError: If the column count differs
    """
    actual = array.shape[1]
    if actual != n_columns:
        raise DimensionError(
            f"{name}: expected {n_columns} columns, got {actual} "
            f"(shape {array.shape})",
            expected=n_columns,
            actual=actual,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If the array is not square
    """
    check_2d(array, name)
    rows, cols = array.shape
    if rows != cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {array.shape}",
            expected=(rows, rows),
            actual=array.shape,
        )


def check_non_negative(value: float, name: str) -> None:
    """
    Verify a scalar is finite and >= 0.

    Raises:
        ValidationError: If value is negative, NaN or infinite
    """
    if not math.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be finite and >= 0, got {value}")


def check_alpha(alpha: float, name: str = 'alpha') -> float:
    """
    Verify a significance level lies strictly inside (0, 1).

    Args:
        alpha: Significance level
        name: Parameter name for error messages

    Returns:
        alpha as a Python float

    Raises:
        ValidationError: If alpha is not a real number in (0, 1)
    """
    try:
        value = float(alpha)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name}: must be a real number, got {alpha!r}") from e

    if not (0.0 < value < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {value}")
    return value
