"""
Core infrastructure for pylinalg.

This module provides the shared pieces used by the Vector and Matrix
components.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype and numeric constants
    tolerances: Tolerance tiers for approximate comparison
    formatting: Human-readable rendering of values
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    InvalidArgumentError,
    TypeMismatchError,
    SizeMismatchError,
    IndexOutOfRangeError,
    NonFiniteValueWarning,
)
from pylinalg.core.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    DEFAULT_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "InvalidArgumentError",
    "TypeMismatchError",
    "SizeMismatchError",
    "IndexOutOfRangeError",
    "NonFiniteValueWarning",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "DEFAULT_TOLERANCE",
    "select_tolerance",
]
