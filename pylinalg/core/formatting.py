"""
Human-readable rendering of stored values.

Integral values print without a fractional part, so a vector built from
[1, 2, 3] renders as "(1, 2, 3)" even though storage is float64.
"""

import math
from typing import Iterable


def format_value(value: float) -> str:
    """Render one number: integral values as ints, others via repr."""
    value = float(value)
    if math.isnan(value):
        return 'nan'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_tuple(values: Iterable[float]) -> str:
    """Render a sequence of numbers as "(v0, v1, ..., vn)"."""
    return '(' + ', '.join(format_value(v) for v in values) + ')'
