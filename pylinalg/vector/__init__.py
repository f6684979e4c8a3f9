"""
Vector component.

Fixed-size ordered sequences of real numbers with elementwise arithmetic,
scaling and scalar products.
"""

from pylinalg.vector.vector import Vector

__all__ = [
    "Vector",
]
