"""
Tests for tolerance tiers and value formatting.
"""

from dataclasses import FrozenInstanceError

import pytest

from pylinalg.core.exceptions import InvalidArgumentError
from pylinalg.core.formatting import format_tuple, format_value
from pylinalg.core.tolerances import (
    DEFAULT_TOLERANCE,
    EXACT,
    FP64,
    ToleranceTier,
    select_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestToleranceTiers:

    def test_exact_has_no_slack(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_default_is_fp64(self):
        assert DEFAULT_TOLERANCE is FP64

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            FP64.rtol = 1.0

    def test_select_by_name(self):
        assert select_tolerance('exact') is EXACT
        assert select_tolerance('fp64') is FP64

    def test_select_unknown(self):
        with pytest.raises(InvalidArgumentError, match="Unknown tolerance tier 'fp16'"):
            select_tolerance('fp16')

    def test_custom_tier(self):
        tier = ToleranceTier(rtol=1e-3, atol=0.0, name='loose', description='Loose')
        assert tier.rtol == 1e-3


# ═══════════════════════════════════════════════════════════════════════
# Formatting
# ═══════════════════════════════════════════════════════════════════════


class TestFormatValue:
    """Integral values below 1e21 print like ints, everything else like repr."""

    @pytest.mark.parametrize("value, expected", [
        (1.0, "1"),
        (-3.0, "-3"),
        (0.0, "0"),
        (0.5, "0.5"),
        (1e-7, "1e-07"),
        (float("nan"), "nan"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1e22, "1e+22"),
        (-1e22, "-1e+22"),
        (1e300, "1e+300"),
    ])
    def test_format_value(self, value, expected):
        assert format_value(value) == expected

    def test_format_tuple(self):
        assert format_tuple([1.0, 2.5, 3.0]) == "(1, 2.5, 3)"

    def test_format_empty_tuple(self):
        assert format_tuple([]) == "()"
