"""Bivariate - polynomials in two variables over finite fields.

This package provides:
- Finite field coefficients (via galois)
- Monomial orderings (Lex, DegLex, DegRevLex and weighted variants)
- Sparse bivariate polynomials with chainable arithmetic and division
- Ideals, Gröbner bases (Buchberger's algorithm) and quotient rings

Usage:
    from bivariate import FiniteField, Lex, Ring

    ring = Ring(FiniteField(7), Lex(x_gt_y=True))
    f = ring.from_ints({(1, 2): 1, (0, 3): -1})
    g = ring.from_ints({(0, 3): 1, (0, 2): -1})
    gb = ring.new_ideal(f, g).groebner_basis()
    gb.reduce_basis()
"""

# Errors
from bivariate.errors import (
    AlgebraError,
    Kind,
    is_kind,
)

# Field arithmetic (via galois)
from bivariate.field import (
    Field,
    FiniteField,
    define_field,
)

# Degrees and orderings
from bivariate.degree import (
    MAX_EXPONENT,
    add_degrees,
    subtract_degrees,
)
from bivariate.orders import (
    CustomOrder,
    DegLex,
    DegRevLex,
    Lex,
    MonomialOrder,
    WDegLex,
    WDegRevLex,
)

# Polynomials, ideals and rings
from bivariate.polynomial import Polynomial
from bivariate.groebner import (
    monomial_lcm,
    s_polynomial,
)
from bivariate.ideal import Ideal, Tristate
from bivariate.ring import (
    DEFAULT_VAR_NAMES,
    QuotientRing,
    Ring,
    def_ring,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "AlgebraError",
    "Kind",
    "is_kind",
    # Field
    "Field",
    "FiniteField",
    "define_field",
    # Degrees
    "MAX_EXPONENT",
    "add_degrees",
    "subtract_degrees",
    # Orderings
    "MonomialOrder",
    "Lex",
    "DegLex",
    "DegRevLex",
    "WDegLex",
    "WDegRevLex",
    "CustomOrder",
    # Polynomials
    "Polynomial",
    "s_polynomial",
    "monomial_lcm",
    # Ideals and rings
    "Ideal",
    "Tristate",
    "Ring",
    "QuotientRing",
    "DEFAULT_VAR_NAMES",
    "def_ring",
]
