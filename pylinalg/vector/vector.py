"""
Vector: a fixed-size ordered sequence of real numbers.

The values live in a private float64 array. Nothing outside the instance
ever holds a reference to that array: the constructor copies its input and
every accessor returns a copy.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import TypeMismatchError
from pylinalg.core.formatting import format_tuple
from pylinalg.core.precision import DTYPE
from pylinalg.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_instance,
    check_real,
    check_same_size,
    check_size,
    warn_if_not_finite,
)


class Vector:
    """
    Ordered sequence of real numbers with a size fixed at construction.

    Construction:
        Vector(3)               zero-filled vector of size 3
        Vector([1, 2, 3])       vector holding a copy of the given values

    Add, scale and set mutate the vector in place; the size never changes.

    Examples:
        >>> v = Vector([1, 2, 3])
        >>> v.scalar_product(Vector([4, 5, 6]))
        32.0
        >>> v.scale(2)
        >>> str(v)
        '(2, 4, 6)'
    """

    __slots__ = ('_values',)

    def __init__(self, size_or_values: int | Iterable[float]):
        if isinstance(size_or_values, (str, bytes)):
            raise TypeMismatchError(
                f"size_or_values: expected a size or a sequence of numbers, "
                f"got {type(size_or_values).__name__}"
            )
        if isinstance(size_or_values, (np.ndarray, list, tuple)):
            values = check_array(size_or_values, 1, "values")
            warn_if_not_finite(values, "values")
        elif isinstance(size_or_values, Iterable):
            values = check_array(list(size_or_values), 1, "values")
            warn_if_not_finite(values, "values")
        else:
            values = np.zeros(check_size(size_or_values, "size"), dtype=DTYPE)
        self._values: NDArray[np.floating[Any]] = values

    @classmethod
    def _adopt(cls, values: NDArray[np.floating[Any]]) -> Vector:
        """Wrap an array the caller has already copied, skipping validation."""
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    # --- Arithmetic ---

    def add(self, other: Vector) -> None:
        """
        Add the values of a second vector of the same size to this one.

        Args:
            other: Vector to add

        Raises:
            TypeMismatchError: If other is not a Vector
            SizeMismatchError: If the sizes differ
        """
        check_instance(other, Vector, "other")
        check_same_size(self.size, other.size, "other")
        self._values += other._values

    def scale(self, factor: float) -> None:
        """
        Multiply every value by factor.

        Raises:
            TypeMismatchError: If factor is not a real number
        """
        self._values *= check_real(factor, "factor")

    def scalar_product(self, other: Vector) -> float:
        """
        Dot product with a second vector of the same size.

        Args:
            other: Vector to multiply with

        Returns:
            Sum of the elementwise products

        Raises:
            TypeMismatchError: If other is not a Vector
            SizeMismatchError: If the sizes differ
        """
        check_instance(other, Vector, "other")
        check_same_size(self.size, other.size, "other")
        return float(np.dot(self._values, other._values))

    def sum(self) -> float:
        """Sum of all values."""
        return float(np.sum(self._values))

    # --- Element access ---

    def get(self, position: int) -> float:
        """
        Value at position.

        Raises:
            IndexOutOfRangeError: If position is outside [0, size)
        """
        return float(self._values[check_index(position, self.size, "position")])

    def set(self, position: int, value: float) -> None:
        """
        Replace the value at position.

        Args:
            position: Index in [0, size)
            value: New value

        Raises:
            IndexOutOfRangeError: If position is outside [0, size)
            TypeMismatchError: If value is not a real number
        """
        position = check_index(position, self.size, "position")
        value = check_real(value, "value")
        warn_if_not_finite(value, "value")
        self._values[position] = value

    @property
    def size(self) -> int:
        return self._values.shape[0]

    @property
    def values(self) -> tuple[float, ...]:
        """Copy of the values as a tuple."""
        return tuple(self.to_list())

    def to_list(self) -> list[float]:
        return self._values.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the values as a float64 array."""
        return self._values.copy()

    # --- Comparison ---

    def allclose(self, other: Vector, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """
        Check whether other holds the same values within a tolerance tier.

        Vectors of different size are never close.

        Raises:
            TypeMismatchError: If other is not a Vector
        """
        check_instance(other, Vector, "other")
        if self.size != other.size:
            return False
        return bool(np.allclose(
            self._values, other._values, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # --- Python protocols ---

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_list())

    def __str__(self) -> str:
        return format_tuple(self._values)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"
