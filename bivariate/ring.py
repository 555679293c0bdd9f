"""Bivariate polynomial rings and their quotients.

Example:
    field = FiniteField(7)
    ring = Ring(field, Lex(x_gt_y=True))
    f = ring.from_ints({(2, 1): 1, (0, 3): -1})      # X^2Y + 6Y^3
    id = ring.new_ideal(ring.from_ints({(9, 0): 1, (1, 0): -1}))
    qring = ring.quotient(id)
    qring.from_ints({(10, 0): 1})                     # reduced to X^2

Polynomials of a quotient ring are reduced modulo its ideal when they are
constructed and after every multiplication. Internally the ideal is first turned
into the reduced Gröbner basis, so its generators need not be the ones given.
"""

import logging
from typing import Dict, Optional, Tuple, Union

import numpy as np

from bivariate.degree import Degree, check_degree
from bivariate.errors import AlgebraError, Kind, new_error
from bivariate.field import Element, FiniteField
from bivariate.ideal import Ideal, Tristate
from bivariate.orders import MonomialOrder
from bivariate.polynomial import Polynomial

_logger = logging.getLogger(__name__)

DEFAULT_VAR_NAMES: Tuple[str, str] = ("X", "Y")


class Ring:
    """Polynomial ring in two variables over a finite field.

    Attributes:
        field: Coefficient field
        order: Monomial ordering, fixed for the lifetime of the ring
        ideal: Ideal the ring is reduced modulo (None for a plain ring)
    """

    ideal: Optional[Ideal] = None

    def __init__(
        self,
        field: FiniteField,
        order: MonomialOrder,
        var_names: Tuple[str, str] = DEFAULT_VAR_NAMES,
    ):
        self.field = field
        self.order = order
        self._var_names = DEFAULT_VAR_NAMES
        self.set_var_names(*var_names)

    def __str__(self) -> str:
        return f"Bivariate polynomial ring over {self.field}"

    def __repr__(self) -> str:
        return f"Ring({self.field!r}, {self.order!r}, var_names={self._var_names!r})"

    @property
    def var_names(self) -> Tuple[str, str]:
        return self._var_names

    def set_var_names(self, x: str, y: str) -> None:
        """Set the names used for the two variables when printing."""
        if not x or not y or x == y:
            raise new_error(
                "Setting variable names", Kind.INPUT_VALUE,
                "variable names must be distinct and nonempty (got %r and %r)", x, y,
            )
        self._var_names = (x, y)

    # --- Polynomial construction ---

    def zero(self) -> Polynomial:
        return Polynomial(self)

    def one(self) -> Polynomial:
        return self.polynomial({(0, 0): self.field.one()})

    def monomial(self, deg: Degree, coef: Optional[Element] = None) -> Polynomial:
        """The polynomial coef * X^deg[0] * Y^deg[1] (coef defaults to one)."""
        if coef is None:
            coef = self.field.one()
        return self.polynomial({deg: coef})

    def polynomial(self, coefs: Dict[Degree, Union[Element, int]]) -> Polynomial:
        """Polynomial with the given coefficients.

        Coefficients may be field elements or integers; zero coefficients are
        dropped, and the result is reduced modulo the ring's ideal.

        Raises:
            AlgebraError: InputValue-error for malformed degrees or coefficients
                from another field
        """
        out = Polynomial(self)
        for deg, c in coefs.items():
            deg = check_degree(deg)
            out.increment_coef(deg, self._coerce(c))
        out._reduce()
        return out

    def from_ints(self, coefs: Dict[Degree, int]) -> Polynomial:
        """Polynomial with signed integer coefficients (reduced modulo the characteristic)."""
        return self.polynomial({d: int(c) for d, c in coefs.items()})

    def _coerce(self, c: Union[Element, int]) -> Element:
        if isinstance(c, (int, np.integer)):
            return self.field.element(int(c))
        if not self.field.contains(c):
            raise new_error(
                "Defining polynomial", Kind.INPUT_VALUE,
                "coefficient %r is not an element of %s", c, self.field,
            )
        return c

    def _failed(self, err: AlgebraError) -> Polynomial:
        """Zero polynomial carrying the failure err."""
        return Polynomial(self, err=err)

    # --- Ideals ---

    def new_ideal(self, *generators: Polynomial) -> Ideal:
        """Ideal generated by the given polynomials.

        Zero generators are dropped.

        Raises:
            AlgebraError: InputIncompatible-error if a generator belongs to
                another ring, InputValue-error if all generators are zero
        """
        op = "Defining ideal"
        gens = []
        for g in generators:
            if g.ring is not self:
                raise new_error(
                    op, Kind.INPUT_INCOMPATIBLE, "Generators defined over different rings",
                )
            if g.is_nonzero():
                gens.append(g.copy())
        if not gens:
            raise new_error(
                op, Kind.INPUT_VALUE,
                "Generators %s define the zero ideal", [str(g) for g in generators],
            )
        return Ideal(self, gens)

    def quotient(self, ideal: Ideal) -> 'QuotientRing':
        """Quotient of the ring modulo ideal.

        The ideal is not modified; the quotient ring keeps the reduced Gröbner
        basis of a copy.

        Raises:
            AlgebraError: InputIncompatible-error if the ideal is not an ideal
                of this ring
        """
        return QuotientRing(self, ideal)


class QuotientRing(Ring):
    """Ring of bivariate polynomials modulo a fixed ideal.

    The ideal's generators are always the reduced Gröbner basis, so every
    polynomial of the ring is kept in normal form.
    """

    def __init__(self, base: Ring, ideal: Ideal):
        """Quotient of base modulo ideal.

        The given ideal is left untouched; the ring keeps the reduced Gröbner
        basis of a copy, computed in base before the copy is attached.

        Raises:
            AlgebraError: InputValue-error if base is already a quotient ring,
                InputIncompatible-error if ideal is not an ideal of base
        """
        op = "Defining quotient ring"
        if base.ideal is not None:
            raise new_error(op, Kind.INPUT_VALUE, "Given ring is already reduced modulo an ideal")
        if ideal.ring is not base:
            raise new_error(
                op, Kind.INPUT_INCOMPATIBLE, "Input argument not ideal of ring '%s'", base,
            )
        for g in ideal._generators:
            if g.ring is not base:
                raise new_error(op, Kind.INPUT_INCOMPATIBLE, "Ideal member %s not in ring", g)

        if ideal._is_reduced == Tristate.TRUE:
            reduced = ideal.copy()
        else:
            if ideal._is_groebner == Tristate.TRUE:
                reduced = ideal.copy()
            else:
                reduced = ideal.groebner_basis()
            reduced.reduce_basis()
        reduced._groebner_cache = None
        _logger.debug("Quotient ring modulo %d generators", len(reduced))

        super().__init__(base.field, base.order, base.var_names)
        self.base_ring = base
        # The copied generators are re-owned by the quotient ring
        for g in reduced._generators:
            g._ring = self
        reduced._ring = self
        self.ideal = reduced

    def __str__(self) -> str:
        gens = ", ".join(str(g) for g in self.ideal._generators)
        return (
            f"Quotient ring of bivariate polynomials over {self.field} "
            f"modulo <{gens}>"
        )

    def quotient(self, ideal: Ideal) -> 'QuotientRing':
        """Quotient rings cannot be reduced further.

        Raises:
            AlgebraError: InputValue-error always
        """
        raise new_error(
            "Defining quotient ring", Kind.INPUT_VALUE,
            "Given ring is already reduced modulo an ideal",
        )


def def_ring(
    field: FiniteField,
    order: MonomialOrder,
    var_names: Tuple[str, str] = DEFAULT_VAR_NAMES,
) -> Ring:
    """Define the polynomial ring over field with the given ordering."""
    return Ring(field, order, var_names)
