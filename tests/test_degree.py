"""Tests for degree arithmetic."""

import pytest

from bivariate.degree import (
    MAX_EXPONENT,
    add_degrees,
    check_degree,
    divides,
    lcm_degree,
    subtract_degrees,
)
from bivariate.errors import AlgebraError, Kind, is_kind


class TestDegreeArithmetic:
    """Test addition, subtraction and divisibility of degrees."""

    def test_add(self) -> None:
        """Degrees add component-wise."""
        assert add_degrees((1, 2), (3, 4)) == (4, 6)

    def test_add_overflow(self) -> None:
        """Exceeding MAX_EXPONENT raises an Overflow-error."""
        with pytest.raises(AlgebraError) as excinfo:
            add_degrees((MAX_EXPONENT, 0), (1, 0))
        assert is_kind(Kind.OVERFLOW, excinfo.value)

    def test_add_at_limit(self) -> None:
        """MAX_EXPONENT itself is a valid exponent."""
        assert add_degrees((MAX_EXPONENT - 1, 0), (1, 0)) == (MAX_EXPONENT, 0)

    @pytest.mark.parametrize("deg1,deg2,expected", [
        ((3, 2), (1, 2), ((2, 0), True)),
        ((3, 2), (3, 2), ((0, 0), True)),
        ((3, 2), (4, 0), ((0, 0), False)),
        ((3, 2), (0, 3), ((0, 0), False)),
    ])
    def test_subtract(self, deg1, deg2, expected) -> None:
        """Subtraction reports whether the second degree divides the first."""
        assert subtract_degrees(deg1, deg2) == expected

    def test_divides_and_lcm(self) -> None:
        """Divisibility and lcm agree with component-wise comparisons."""
        assert divides((1, 2), (1, 3))
        assert not divides((2, 0), (1, 3))
        assert lcm_degree((2, 1), (1, 3)) == (2, 3)


class TestCheckDegree:
    """Test validation of user supplied degrees."""

    def test_list_is_accepted(self) -> None:
        """Any pair of integers is normalized to a tuple."""
        assert check_degree([2, 5]) == (2, 5)

    @pytest.mark.parametrize("deg", [(-1, 0), (0, -3), (1,), "ab", None])
    def test_malformed(self, deg) -> None:
        """Negative or malformed exponents are InputValue-errors."""
        with pytest.raises(AlgebraError) as excinfo:
            check_degree(deg)
        assert is_kind(Kind.INPUT_VALUE, excinfo.value)

    def test_too_large(self) -> None:
        """Exponents above MAX_EXPONENT are Overflow-errors."""
        with pytest.raises(AlgebraError) as excinfo:
            check_degree((MAX_EXPONENT + 1, 0))
        assert is_kind(Kind.OVERFLOW, excinfo.value)
