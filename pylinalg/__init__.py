"""
pylinalg: small dense linear algebra for Python.

In-memory vectors and matrices of real numbers with elementwise arithmetic,
scaling, multiplication, and region copy/paste/concatenation.

Submodules:
    vector: Vector
    matrix: Matrix
    core: exceptions, validation, tolerances
"""

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    InvalidArgumentError,
    TypeMismatchError,
    SizeMismatchError,
    IndexOutOfRangeError,
    NonFiniteValueWarning,
)
from pylinalg.vector import Vector
from pylinalg.matrix import Matrix

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "PyLinalgError",
    "ValidationError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "NonFiniteValueWarning",
]
