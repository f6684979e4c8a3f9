"""
Matrix: a row-major table of real numbers.

Addressing convention, used by every method:
    - x is a column offset, valid in [0, width)
    - y is a row offset, valid in [0, height)
    - get(x, y) reads row y, column x

Rows and columns are handed out as independent Vector copies; mutating one
never touches the matrix it came from. Like Vector, the backing float64
array is private and never aliased.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import (
    InvalidArgumentError,
    SizeMismatchError,
    TypeMismatchError,
)
from pylinalg.core.formatting import format_tuple
from pylinalg.core.precision import DTYPE
from pylinalg.core.tolerances import DEFAULT_TOLERANCE, ToleranceTier
from pylinalg.core.validation import (
    check_array,
    check_index,
    check_instance,
    check_real,
    check_region,
    check_same_size,
    check_size,
    warn_if_not_finite,
)
from pylinalg.vector import Vector


class Matrix:
    """
    Table of real numbers with a given width (columns) and height (rows).

    Construction:
        Matrix([[1, 2], [3, 4]])    rows given as nested sequences
        Matrix(3, 2)                zero-filled, width 3 and height 2

    Examples:
        >>> a = Matrix([[1, 2], [3, 4]])
        >>> print(a.multiply(Matrix.identity(2)))
        (1, 2)
        (3, 4)
    """

    __slots__ = ('_values',)

    def __init__(
        self,
        rows_or_width: Sequence[Sequence[float]] | NDArray[Any] | int,
        height: int | None = None,
    ):
        if isinstance(rows_or_width, (np.ndarray, list, tuple)):
            if height is not None:
                raise InvalidArgumentError(
                    "height: must not be given together with row data"
                )
            values = self._rows_to_array(rows_or_width)
            warn_if_not_finite(values, "rows")
        else:
            width = check_size(rows_or_width, "width")
            if height is None:
                raise InvalidArgumentError(
                    "height: required when the matrix is built from a width"
                )
            values = np.zeros((check_size(height, "height"), width), dtype=DTYPE)
        self._values: NDArray[np.floating[Any]] = values

    @staticmethod
    def _rows_to_array(rows: Sequence[Sequence[float]] | NDArray[Any]) -> NDArray[np.floating[Any]]:
        """Validate nested row data and copy it into a 2D float64 array."""
        if isinstance(rows, np.ndarray):
            return check_array(rows, 2, "rows")
        if len(rows) == 0:
            return np.zeros((0, 0), dtype=DTYPE)

        for i, row in enumerate(rows):
            if not isinstance(row, (np.ndarray, list, tuple)):
                raise TypeMismatchError(
                    f"rows[{i}]: expected a sequence of numbers, got {type(row).__name__}"
                )
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise SizeMismatchError(
                    f"rows[{i}]: every row must have {width} elements, got {len(row)}",
                    expected=width,
                    actual=len(row),
                )
        if width == 0:
            return np.zeros((len(rows), 0), dtype=DTYPE)
        return check_array(rows, 2, "rows")

    @classmethod
    def _adopt(cls, values: NDArray[np.floating[Any]]) -> Matrix:
        """Wrap an array the caller has already copied, skipping validation."""
        matrix = cls.__new__(cls)
        matrix._values = values
        return matrix

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """
        Create the size x size identity matrix.

        Args:
            size: Width and height of the matrix

        Returns:
            Matrix with ones on the diagonal and zeros elsewhere

        Raises:
            InvalidArgumentError: If size is negative
        """
        size = check_size(size, "size")
        return cls._adopt(np.eye(size, dtype=DTYPE))

    # --- Arithmetic ---

    def add(self, other: Matrix) -> None:
        """
        Add the values of a second matrix with the same bounds to this one.

        Raises:
            TypeMismatchError: If other is not a Matrix
            SizeMismatchError: If width or height differ
        """
        check_instance(other, Matrix, "other")
        check_same_size(self.shape, other.shape, "other")
        self._values += other._values

    def add_to_row(self, row: int, vector: Vector) -> None:
        """
        Add the values of a vector to one row.

        Args:
            row: Row index in [0, height)
            vector: Vector of size width

        Raises:
            IndexOutOfRangeError: If row is outside the matrix
            TypeMismatchError: If vector is not a Vector
            SizeMismatchError: If the vector size differs from the width
        """
        row = check_index(row, self.height, "row")
        self._values[row, :] += self._check_line(vector, self.width, "vector")

    def add_to_column(self, column: int, vector: Vector) -> None:
        """
        Add the values of a vector to one column.

        Args:
            column: Column index in [0, width)
            vector: Vector of size height

        Raises:
            IndexOutOfRangeError: If column is outside the matrix
            TypeMismatchError: If vector is not a Vector
            SizeMismatchError: If the vector size differs from the height
        """
        column = check_index(column, self.width, "column")
        self._values[:, column] += self._check_line(vector, self.height, "vector")

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product of this matrix with a second one.

        Cell (x, y) of the result is the scalar product of row y of this
        matrix with column x of other.

        Args:
            other: Matrix whose height equals this matrix's width

        Returns:
            New Matrix of width other.width and height self.height

        Raises:
            TypeMismatchError: If other is not a Matrix
            SizeMismatchError: If other.height != self.width
        """
        check_instance(other, Matrix, "other")
        if other.height != self.width:
            raise SizeMismatchError(
                f"other: height must equal this matrix's width {self.width} "
                f"when multiplying, got {other.height}",
                expected=self.width,
                actual=other.height,
            )

        result = Matrix(other.width, self.height)
        columns = [other.get_column(x) for x in range(other.width)]
        for y in range(self.height):
            row = self.get_row(y)
            for x, column in enumerate(columns):
                result._values[y, x] = row.scalar_product(column)
        return result

    def scale_row(self, row: int, factor: float) -> None:
        """
        Multiply every value of one row by factor.

        Raises:
            IndexOutOfRangeError: If row is outside the matrix
            TypeMismatchError: If factor is not a real number
        """
        row = check_index(row, self.height, "row")
        self._values[row, :] *= check_real(factor, "factor")

    def scale_column(self, column: int, factor: float) -> None:
        """
        Multiply every value of one column by factor.

        Raises:
            IndexOutOfRangeError: If column is outside the matrix
            TypeMismatchError: If factor is not a real number
        """
        column = check_index(column, self.width, "column")
        self._values[:, column] *= check_real(factor, "factor")

    def scale(self, factor: float) -> None:
        """Multiply every value by factor."""
        self._values *= check_real(factor, "factor")

    # --- Regions ---

    def resize(self, width: int, height: int) -> Matrix:
        """
        Copy of this matrix with a new size.

        Values in the overlapping top-left region are kept, new cells are
        zero and cells beyond the new bounds are dropped. This matrix is
        left unchanged.

        Raises:
            InvalidArgumentError: If width or height is negative
        """
        result = Matrix(width, height)
        h = min(self.height, result.height)
        w = min(self.width, result.width)
        result._values[:h, :w] = self._values[:h, :w]
        return result

    def copy(self, x: int, y: int, w: int, h: int) -> Matrix:
        """
        Copy a region of this matrix into a new one.

        Args:
            x: Column of the region's top-left cell
            y: Row of the region's top-left cell
            w: Width of the region
            h: Height of the region

        Returns:
            New w x h Matrix holding the region

        Raises:
            InvalidArgumentError: If w or h is negative
            IndexOutOfRangeError: If the region is not completely inside
        """
        w = check_size(w, "w")
        h = check_size(h, "h")
        x, y = check_region(x, y, w, h, self.width, self.height, "copy")
        return Matrix._adopt(self._values[y:y + h, x:x + w].copy())

    def paste(self, other: Matrix, x: int, y: int) -> None:
        """
        Overwrite the region at (x, y) with the values of other.

        Args:
            other: Matrix to paste
            x: Column offset in this matrix
            y: Row offset in this matrix

        Raises:
            TypeMismatchError: If other is not a Matrix
            IndexOutOfRangeError: If other does not fit at the given offset
        """
        check_instance(other, Matrix, "other")
        x, y = check_region(
            x, y, other.width, other.height, self.width, self.height, "paste"
        )
        warn_if_not_finite(other._values, "other")
        self._values[y:y + other.height, x:x + other.width] = other._values

    def paste_row(self, row: int, vector: Vector) -> None:
        """
        Overwrite one row with the values of a vector.

        Raises:
            IndexOutOfRangeError: If row is outside the matrix
            TypeMismatchError: If vector is not a Vector
            SizeMismatchError: If the vector size differs from the width
        """
        row = check_index(row, self.height, "row")
        values = self._check_line(vector, self.width, "vector")
        warn_if_not_finite(values, "vector")
        self._values[row, :] = values

    def paste_column(self, column: int, vector: Vector) -> None:
        """
        Overwrite one column with the values of a vector.

        Raises:
            IndexOutOfRangeError: If column is outside the matrix
            TypeMismatchError: If vector is not a Vector
            SizeMismatchError: If the vector size differs from the height
        """
        column = check_index(column, self.width, "column")
        values = self._check_line(vector, self.height, "vector")
        warn_if_not_finite(values, "vector")
        self._values[:, column] = values

    def concatenate(self, other: Matrix) -> None:
        """
        Append a second matrix on the right of this one.

        This matrix grows to width + other.width; its height stays.

        Raises:
            TypeMismatchError: If other is not a Matrix
            SizeMismatchError: If the heights differ
        """
        check_instance(other, Matrix, "other")
        if other.height != self.height:
            raise SizeMismatchError(
                f"other: matrices must have the same height when concatenating, "
                f"expected {self.height}, got {other.height}",
                expected=self.height,
                actual=other.height,
            )
        old_width = self.width
        result = self.resize(old_width + other.width, self.height)
        result._values[:, old_width:] = other._values
        self._values = result._values

    # --- Element access ---

    def get(self, x: int, y: int) -> float:
        """
        Value at column x, row y.

        Raises:
            IndexOutOfRangeError: If x or y is outside the matrix
        """
        x = check_index(x, self.width, "x")
        y = check_index(y, self.height, "y")
        return float(self._values[y, x])

    def set(self, x: int, y: int, value: float) -> None:
        """
        Replace the value at column x, row y.

        Raises:
            IndexOutOfRangeError: If x or y is outside the matrix
            TypeMismatchError: If value is not a real number
        """
        x = check_index(x, self.width, "x")
        y = check_index(y, self.height, "y")
        value = check_real(value, "value")
        warn_if_not_finite(value, "value")
        self._values[y, x] = value

    def get_row(self, row: int) -> Vector:
        """
        Copy of one row as a Vector of size width.

        Raises:
            IndexOutOfRangeError: If row is outside the matrix
        """
        row = check_index(row, self.height, "row")
        return Vector._adopt(self._values[row, :].copy())

    def get_column(self, column: int) -> Vector:
        """
        Copy of one column as a Vector of size height.

        Raises:
            IndexOutOfRangeError: If column is outside the matrix
        """
        column = check_index(column, self.width, "column")
        return Vector._adopt(self._values[:, column].copy())

    @staticmethod
    def _check_line(vector: Vector, size: int, name: str) -> NDArray[np.floating[Any]]:
        check_instance(vector, Vector, name)
        check_same_size(size, vector.size, name)
        return vector.to_numpy()

    @property
    def width(self) -> int:
        return self._values.shape[1]

    @property
    def height(self) -> int:
        return self._values.shape[0]

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), in numpy order."""
        return self._values.shape

    @property
    def values(self) -> tuple[tuple[float, ...], ...]:
        """Copy of the values as a tuple of row tuples."""
        return tuple(tuple(row) for row in self.to_list())

    def to_list(self) -> list[list[float]]:
        return self._values.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the values as a 2D float64 array."""
        return self._values.copy()

    # --- Comparison ---

    def allclose(self, other: Matrix, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """
        Check whether other holds the same values within a tolerance tier.

        Matrices of different shape are never close.

        Raises:
            TypeMismatchError: If other is not a Matrix
        """
        check_instance(other, Matrix, "other")
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._values, other._values, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # --- Python protocols ---

    def __str__(self) -> str:
        return '\n'.join(format_tuple(row) for row in self._values)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"
