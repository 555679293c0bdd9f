"""Exponent pairs of bivariate monomials.

A degree ``(dx, dy)`` identifies the monomial X^dx * Y^dy. Exponents are
nonnegative integers bounded by ``MAX_EXPONENT``, the largest value of the
unsigned 64-bit exponents used in the representation.
"""

from typing import Tuple

import numpy as np

from bivariate.errors import AlgebraError, Kind, new_error

Degree = Tuple[int, int]

MAX_EXPONENT: int = int(np.iinfo(np.uint64).max)


def add_degrees(deg1: Degree, deg2: Degree) -> Degree:
    """Component-wise sum of deg1 and deg2.

    Raises:
        AlgebraError: Overflow-error if either component exceeds MAX_EXPONENT
    """
    total = (deg1[0] + deg2[0], deg1[1] + deg2[1])
    if total[0] > MAX_EXPONENT or total[1] > MAX_EXPONENT:
        raise new_error(
            "Adding degrees", Kind.OVERFLOW,
            "%s + %s overflows the exponent range", deg1, deg2,
        )
    return total


def subtract_degrees(deg1: Degree, deg2: Degree) -> Tuple[Degree, bool]:
    """Component-wise difference deg1 - deg2.

    The flag is False when some component of deg1 is smaller than the
    corresponding component of deg2, i.e. when X^deg2 does not divide X^deg1.
    The returned degree is then (0, 0) and must not be used.
    """
    if deg1[0] >= deg2[0] and deg1[1] >= deg2[1]:
        return (deg1[0] - deg2[0], deg1[1] - deg2[1]), True
    return (0, 0), False


def divides(deg1: Degree, deg2: Degree) -> bool:
    """Whether the monomial of deg1 divides the monomial of deg2."""
    return deg1[0] <= deg2[0] and deg1[1] <= deg2[1]


def lcm_degree(deg1: Degree, deg2: Degree) -> Degree:
    """Degree of the least common multiple of two monomials."""
    return (max(deg1[0], deg2[0]), max(deg1[1], deg2[1]))


def check_degree(deg) -> Degree:
    """Validate ``deg`` and return it as a tuple of two Python ints.

    Raises:
        AlgebraError: InputValue-error for negative or malformed exponents,
            Overflow-error for exponents above MAX_EXPONENT
    """
    op = "Validating degree"
    try:
        dx, dy = deg
        dx, dy = int(dx), int(dy)
    except (TypeError, ValueError) as e:
        raise AlgebraError(op, Kind.INPUT_VALUE, f"{deg!r} is not an exponent pair", e) from e
    if dx < 0 or dy < 0:
        raise new_error(op, Kind.INPUT_VALUE, "negative exponent in %s", (dx, dy))
    if dx > MAX_EXPONENT or dy > MAX_EXPONENT:
        raise new_error(op, Kind.OVERFLOW, "exponent in %s exceeds range", (dx, dy))
    return (dx, dy)
