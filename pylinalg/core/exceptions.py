"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. Every error signals a violated precondition on the
caller's side; none of them is recovered from inside the library.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided arguments fail validation checks. The concrete
    subclasses below say which kind of check failed.
    """
    pass


class InvalidArgumentError(ValidationError):
    """
    Argument has an unusable value.

    Raised for negative sizes and for argument combinations a constructor
    cannot interpret.
    """
    pass


class TypeMismatchError(ValidationError):
    """
    Argument is of the wrong kind.

    Raised when an operand is not a Vector/Matrix where one is required, or
    when a scalar or element value is not a real number.
    """
    pass


class SizeMismatchError(ValidationError):
    """
    Operand dimensions are incompatible.

    Attributes:
        expected: The size the operation required, if known
        actual: The size it received, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError):
    """
    Index or region lies outside the valid bounds.

    Attributes:
        index: The offending index (or region origin), if known
        bound: The exclusive upper bound it was checked against, if known
    """

    def __init__(
        self,
        message: str,
        index: int | tuple[int, ...] | None = None,
        bound: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NonFiniteValueWarning(UserWarning):
    """NaN or Inf values were stored into a Vector or Matrix."""
    pass
