"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - bool is never accepted where a number is expected
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    NonFiniteValueWarning,
    SizeMismatchError,
    TypeMismatchError,
)
from pylinalg.core.precision import DTYPE


def check_instance(value: Any, cls: type, name: str) -> None:
    """
    Verify value is an instance of cls.

    Args:
        value: Object to check
        cls: Required type
        name: Parameter name for error messages

    Raises:
        TypeMismatchError: If value is not an instance of cls
    """
    if not isinstance(value, cls):
        raise TypeMismatchError(
            f"{name}: expected {cls.__name__}, got {type(value).__name__}"
        )


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Args:
        value: Scalar to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        TypeMismatchError: If value is not a real number (bool included)
        InvalidArgumentError: If value is an integer too large for float64
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeMismatchError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError as e:
        raise InvalidArgumentError(
            f"{name}: integer is too large to represent as a float"
        ) from e


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer and return it as int.

    Raises:
        TypeMismatchError: If value is not an integer (bool included)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise TypeMismatchError(
            f"{name}: expected an integer, got {type(value).__name__}"
        )
    return int(value)


def check_size(value: Any, name: str) -> int:
    """
    Verify value is a non-negative integer size.

    Args:
        value: Size to check
        name: Parameter name for error messages

    Returns:
        The size as a Python int

    Raises:
        TypeMismatchError: If value is not an integer
        InvalidArgumentError: If value is negative
    """
    size = check_integer(value, name)
    if size < 0:
        raise InvalidArgumentError(f"{name}: must not be negative, got {size}")
    return size


def check_index(value: Any, bound: int, name: str) -> int:
    """
    Verify value is an index in [0, bound).

    Args:
        value: Index to check
        bound: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a Python int

    Raises:
        TypeMismatchError: If value is not an integer
        IndexOutOfRangeError: If value lies outside [0, bound)
    """
    index = check_integer(value, name)
    if index < 0 or index >= bound:
        raise IndexOutOfRangeError(
            f"{name}: index {index} is outside the valid range [0, {bound})",
            index=index,
            bound=bound,
        )
    return index


def check_region(
    x: Any,
    y: Any,
    w: int,
    h: int,
    width: int,
    height: int,
    name: str,
) -> tuple[int, int]:
    """
    Verify a w x h region at column x, row y fits inside width x height.

    Args:
        x: Column offset of the region
        y: Row offset of the region
        w: Region width (already validated as a size)
        h: Region height (already validated as a size)
        width: Width of the enclosing matrix
        height: Height of the enclosing matrix
        name: Description of the region for error messages

    Returns:
        (x, y) as Python ints

    Raises:
        TypeMismatchError: If x or y is not an integer
        IndexOutOfRangeError: If any part of the region lies outside
    """
    x = check_integer(x, f"{name} x")
    y = check_integer(y, f"{name} y")
    if x < 0 or y < 0 or x + w > width or y + h > height:
        raise IndexOutOfRangeError(
            f"{name}: region {w}x{h} at (x={x}, y={y}) does not fit "
            f"inside a {width}x{height} matrix",
            index=(x, y),
            bound=(width, height),
        )
    return x, y


def check_same_size(expected: Any, actual: Any, name: str) -> None:
    """
    Verify two sizes (ints or shape tuples) are equal.

    Raises:
        SizeMismatchError: If the sizes differ
    """
    if expected != actual:
        raise SizeMismatchError(
            f"{name}: expected size {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


def check_array(array: ArrayLike, ndim: int, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert input to a fresh float64 array with the given dimensionality.

    The result never shares memory with the input, so callers may store it
    without exposing their internal state.

    Args:
        array: Input to validate
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        TypeMismatchError: If input is not real numeric data
        SizeMismatchError: If input has the wrong number of dimensions
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise TypeMismatchError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise TypeMismatchError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # An empty sequence has no dtype to speak of
    if result.size > 0:
        if not np.issubdtype(result.dtype, np.number):
            raise TypeMismatchError(
                f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
            )
        if np.issubdtype(result.dtype, np.complexfloating):
            raise TypeMismatchError(
                f"{name}: complex dtype {result.dtype}, expected real data"
            )

    if result.ndim != ndim:
        raise SizeMismatchError(
            f"{name}: expected {ndim}D data, got {result.ndim}D with shape {result.shape}",
            expected=ndim,
            actual=result.ndim,
        )

    return result.astype(DTYPE, copy=False)


def warn_if_not_finite(array: NDArray[np.floating[Any]] | float, name: str) -> None:
    """
    Warn when values contain NaN or Inf.

    Non-finite values are legal, they just tend to be a mistake.

    Args:
        array: Array or scalar to check
        name: Parameter name for the warning message
    """
    values = np.asarray(array)
    if not np.all(np.isfinite(values)):
        n_nan = int(np.sum(np.isnan(values)))
        n_inf = int(np.sum(np.isinf(values)))
        warnings.warn(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            NonFiniteValueWarning,
            stacklevel=3,
        )
