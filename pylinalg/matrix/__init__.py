"""
Matrix component.

Row-major tables of real numbers: elementwise arithmetic, row/column
operations, multiplication, and region copy/paste/resize/concatenation.
"""

from pylinalg.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
