"""Bivariate polynomials over a finite field.

A polynomial is a sparse map from degrees ``(dx, dy)`` to nonzero field
elements, owned by exactly one ring. Zero coefficients are removed as soon as
they appear, so the zero polynomial is the empty map.

Arithmetic comes in two flavours:
- in-place methods (``add``, ``sub``, ``mult``, ``set_scale``) modify the
  receiver and return it so that calls can be chained;
- allocating methods (``plus``, ``minus``, ``times``, ``neg``, ``scale``,
  ``pow``, ``normalize``) leave their operands untouched.

Arithmetic never raises for user-triggered failures. A failure (for instance an
exponent overflow, or operands from different rings) is stored in ``err`` of
the result, and any later operation involving a failed polynomial propagates
the first failure. Hence ``f.plus(g).mult(h).err`` is the only check needed.
"""

import functools
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from bivariate.degree import Degree, add_degrees, subtract_degrees
from bivariate.errors import AlgebraError, Kind, new_error, wrap
from bivariate.field import Element

if TYPE_CHECKING:
    from bivariate.field import FiniteField
    from bivariate.ring import Ring


class Polynomial:
    """Polynomial in two variables with coefficients in a finite field.

    Polynomials are created through their ring, e.g. ``ring.polynomial(...)`` or
    ``ring.from_ints(...)``; the constructor itself performs no reduction modulo
    the ring's ideal.

    Attributes:
        err: Sticky failure status, None while no failure has occurred
    """

    __hash__ = None
    # Make numpy defer to __rmul__ for ``element * polynomial``
    __array_ufunc__ = None

    def __init__(
        self,
        ring: 'Ring',
        coefs: Optional[Dict[Degree, Element]] = None,
        err: Optional[AlgebraError] = None,
    ):
        self._ring = ring
        self._coefs: Dict[Degree, Element] = {} if coefs is None else coefs
        self.err = err

    @property
    def ring(self) -> 'Ring':
        return self._ring

    @property
    def base_field(self) -> 'FiniteField':
        """The field over which the coefficients are defined."""
        return self._ring.field

    def clear_err(self) -> 'Polynomial':
        """Reset the failure status and return the polynomial."""
        self.err = None
        return self

    # --- Coefficient access ---

    def coef(self, deg: Degree) -> Element:
        """Coefficient of the monomial of degree deg (zero if absent)."""
        c = self._coefs.get(tuple(deg))
        if c is None:
            return self.base_field.zero()
        return c.copy()

    def set_coef(self, deg: Degree, val: Element) -> 'Polynomial':
        """Set the coefficient of the monomial of degree deg to a copy of val."""
        deg = tuple(deg)
        if self.base_field.is_zero(val):
            self._coefs.pop(deg, None)
        else:
            self._coefs[deg] = val.copy()
        return self

    def increment_coef(self, deg: Degree, val: Element) -> 'Polynomial':
        """Add val to the coefficient of the monomial of degree deg."""
        deg = tuple(deg)
        c = self._coefs.get(deg)
        if c is None:
            if not self.base_field.is_zero(val):
                self._coefs[deg] = val.copy()
            return self
        c = c + val
        if self.base_field.is_zero(c):
            del self._coefs[deg]
        else:
            self._coefs[deg] = c
        return self

    def decrement_coef(self, deg: Degree, val: Element) -> 'Polynomial':
        """Subtract val from the coefficient of the monomial of degree deg."""
        return self.increment_coef(deg, -val)

    def terms(self) -> Iterator[Tuple[Degree, Element]]:
        """Iterate over (degree, coefficient) pairs, largest degree first."""
        for d in self.sorted_degrees():
            yield d, self._coefs[d].copy()

    def copy(self) -> 'Polynomial':
        """Deep copy over the same ring, including the failure status."""
        return Polynomial(
            self._ring,
            {d: c.copy() for d, c in self._coefs.items()},
            self.err,
        )

    # --- Structural queries ---

    def sorted_degrees(self) -> List[Degree]:
        """Degrees in the support, sorted from largest to smallest."""
        key = functools.cmp_to_key(self._ring.order.compare)
        return sorted(self._coefs, key=key, reverse=True)

    def ld(self) -> Degree:
        """Leading degree. The zero polynomial reports (0, 0)."""
        if not self._coefs:
            return (0, 0)
        return self._ring.order.max(*self._coefs)

    def lc(self) -> Element:
        """Leading coefficient (zero for the zero polynomial)."""
        return self.coef(self.ld())

    def lt(self) -> 'Polynomial':
        """Leading term as a polynomial."""
        h = self._ring.zero()
        if self._coefs:
            ld = self.ld()
            h._coefs[ld] = self._coefs[ld].copy()
        return h

    def is_zero(self) -> bool:
        return len(self._coefs) == 0

    def is_nonzero(self) -> bool:
        return len(self._coefs) > 0

    def is_monomial(self) -> bool:
        """Whether f consists of exactly one term."""
        return len(self._coefs) == 1

    def __len__(self) -> int:
        return len(self._coefs)

    def equal(self, g: 'Polynomial') -> bool:
        """Whether f and g belong to the same ring and have equal coefficients."""
        if g._ring is not self._ring or len(g._coefs) != len(self._coefs):
            return False
        is_equal = self.base_field.equal
        for d, c in self._coefs.items():
            cg = g._coefs.get(d)
            if cg is None or not is_equal(c, cg):
                return False
        return True

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.equal(other)

    # --- Evaluation ---

    def eval(self, point: Tuple[Element, Element]) -> Element:
        """Evaluate f at (x, y).

        Raises:
            AlgebraError: If f carries a failure status
        """
        if self.err is not None:
            raise wrap("Evaluating polynomial", Kind.INHERIT, self.err)
        x, y = point
        out = self.base_field.zero()
        for (dx, dy), c in self._coefs.items():
            out = out + c * (x ** dx) * (y ** dy)
        return out

    def __call__(self, x: Element, y: Element) -> Element:
        return self.eval((x, y))

    # --- Additive arithmetic ---

    def plus(self, g: 'Polynomial') -> 'Polynomial':
        """Return f + g."""
        op = "Adding polynomials"
        err = _check_err_and_compatible(op, self, g)
        if err is not None:
            return self._ring._failed(err)
        h = self.copy()
        for d, c in g._coefs.items():
            h.increment_coef(d, c)
        return h

    def add(self, g: 'Polynomial') -> 'Polynomial':
        """Set f to f + g and return f."""
        op = "Adding polynomials"
        err = _check_err_and_compatible(op, self, g)
        if err is not None:
            return self._fail(err)
        for d, c in list(g._coefs.items()):
            self.increment_coef(d, c)
        return self

    def minus(self, g: 'Polynomial') -> 'Polynomial':
        """Return f - g."""
        op = "Subtracting polynomials"
        err = _check_err_and_compatible(op, self, g)
        if err is not None:
            return self._ring._failed(err)
        h = self.copy()
        for d, c in g._coefs.items():
            h.decrement_coef(d, c)
        return h

    def sub(self, g: 'Polynomial') -> 'Polynomial':
        """Set f to f - g and return f."""
        op = "Subtracting polynomials"
        err = _check_err_and_compatible(op, self, g)
        if err is not None:
            return self._fail(err)
        for d, c in list(g._coefs.items()):
            self.decrement_coef(d, c)
        return self

    def neg(self) -> 'Polynomial':
        """Return -f."""
        if self.err is not None:
            return self._ring._failed(wrap("Negating polynomial", Kind.INHERIT, self.err))
        return Polynomial(self._ring, {d: -c for d, c in self._coefs.items()})

    # --- Multiplicative arithmetic ---

    def _mult_no_reduce(self, g: 'Polynomial') -> 'Polynomial':
        """Product f * g without reduction modulo the ring's ideal."""
        op = "Multiplying polynomials"
        err = _check_err_and_compatible(op, self, g)
        if err is not None:
            return self._ring._failed(err)
        h = self._ring.zero()
        for df, cf in self._coefs.items():
            for dg, cg in g._coefs.items():
                try:
                    d = add_degrees(df, dg)
                except AlgebraError as e:
                    return self._ring._failed(wrap(op, Kind.INHERIT, e))
                h.increment_coef(d, cf * cg)
        return h

    def times(self, g: 'Polynomial') -> 'Polynomial':
        """Return f * g, reduced modulo the ring's ideal if it has one."""
        h = self._mult_no_reduce(g)
        if h.err is None:
            h._reduce()
        return h

    def mult(self, g: 'Polynomial') -> 'Polynomial':
        """Set f to f * g (reduced modulo the ring's ideal) and return f."""
        h = self._mult_no_reduce(g)
        self._coefs = h._coefs
        self.err = h.err
        if self.err is None:
            self._reduce()
        return self

    def scale(self, c: Element) -> 'Polynomial':
        """Return c * f for a field element c."""
        if self.err is not None:
            return self._ring._failed(wrap("Scaling polynomial", Kind.INHERIT, self.err))
        if self.base_field.is_zero(c):
            return self._ring.zero()
        return Polynomial(self._ring, {d: v * c for d, v in self._coefs.items()})

    def set_scale(self, c: Element) -> 'Polynomial':
        """Set f to c * f and return f."""
        if self.err is not None:
            return self
        if self.base_field.is_zero(c):
            self._coefs = {}
            return self
        for d in self._coefs:
            self._coefs[d] = self._coefs[d] * c
        return self

    def normalize(self) -> 'Polynomial':
        """Return f scaled so that its leading coefficient is one.

        A copy is returned for the zero polynomial.
        """
        if self.is_zero():
            return self.copy()
        return self.scale(self.base_field.inv(self.lc()))

    def pow(self, n: int) -> 'Polynomial':
        """Return f**n computed by repeated squaring.

        If the computation makes an exponent overflow, the result carries an
        Overflow-error.
        """
        op = "Computing polynomial power"
        if self.err is not None:
            return self._ring._failed(wrap(op, Kind.INHERIT, self.err))
        if n < 0:
            return self._ring._failed(new_error(
                op, Kind.INPUT_VALUE, "negative exponent %d", n,
            ))

        out = self._ring.one()
        g = self.copy()
        while n > 0:
            if n % 2 == 1:
                out.mult(g)
                if out.err is not None:
                    return self._ring._failed(wrap(op, Kind.INHERIT, out.err))
            n //= 2
            if n > 0:
                g.mult(g)
                if g.err is not None:
                    return self._ring._failed(wrap(op, Kind.INHERIT, g.err))
        return out

    # --- Division ---

    def quo_rem(self, *divisors: 'Polynomial') -> Tuple[List['Polynomial'], 'Polynomial']:
        """Divide f by the ordered list of divisors.

        Returns quotients q_1, ..., q_k and remainder r such that
        f = q_1*g_1 + ... + q_k*g_k + r and no term of r is divisible by the
        leading term of any g_i.

        Raises:
            AlgebraError: ArithmeticIncompat-error if the polynomials belong to
                different rings, or the inherited error if any of them carries one
        """
        return self._quo_rem_with_ignore(-1, *divisors)

    def rem(self, *divisors: 'Polynomial') -> 'Polynomial':
        """Remainder of f under division by the ordered list of divisors."""
        _, r = self._quo_rem_with_ignore(-1, *divisors)
        return r

    def _quo_rem_with_ignore(
        self,
        ignore_index: int,
        *divisors: 'Polynomial',
    ) -> Tuple[List['Polynomial'], 'Polynomial']:
        """As quo_rem, but the divisor at ignore_index is treated as absent.

        The quotient at ignore_index is always zero. Zero divisors are skipped.
        """
        op = "Computing polynomial quotient and remainder"
        err = _check_err_and_compatible(op, self, *divisors)
        if err is not None:
            raise err

        field = self.base_field
        ring = self._ring
        quotients = [ring.zero() for _ in divisors]
        r = ring.zero()
        p = self.copy()

        # Leading data of the active divisors, in order
        active = [
            (i, g, g.ld(), g.lc())
            for i, g in enumerate(divisors)
            if i != ignore_index and g.is_nonzero()
        ]

        while p._coefs:
            ld_p = p.ld()
            lc_p = p._coefs[ld_p]
            for i, g, ld_g, lc_g in active:
                shift, ok = subtract_degrees(ld_p, ld_g)
                if not ok:
                    continue
                c = lc_p if field.is_one(lc_g) else lc_p * field.inv(lc_g)
                quotients[i].increment_coef(shift, c)
                try:
                    p._sub_shifted(g, shift, c)
                except AlgebraError as e:
                    r.err = wrap(op, Kind.INHERIT, e)
                    return quotients, r
                assert ld_p not in p._coefs, "leading term survived its reduction"
                break
            else:
                # No divisor's leading term divides; move the term to r
                r._coefs[ld_p] = p._coefs.pop(ld_p)
        return quotients, r

    def _sub_shifted(self, g: 'Polynomial', shift: Degree, c: Element) -> None:
        """Set f to f - c * X^shift[0] * Y^shift[1] * g (no reduction)."""
        for d, cg in g._coefs.items():
            self.decrement_coef(add_degrees(d, shift), c * cg)

    def _monomial_divide_by(self, g: 'Polynomial') -> Tuple[Optional['Polynomial'], bool]:
        """Write f = q * g for monomials f and g if possible.

        Returns (q, True) when g divides f, and (None, False) otherwise.

        Raises:
            AlgebraError: InputValue-error if f or g is not a monomial
        """
        op = "Dividing monomials"
        if not self.is_monomial():
            raise new_error(op, Kind.INPUT_VALUE, "%s is not a monomial", self)
        if not g.is_monomial():
            raise new_error(op, Kind.INPUT_VALUE, "%s is not a monomial", g)
        ldf, ldg = self.ld(), g.ld()
        d, ok = subtract_degrees(ldf, ldg)
        if not ok:
            return None, False
        field = self.base_field
        q = self._ring.zero()
        q._coefs[d] = self._coefs[ldf] * field.inv(g._coefs[ldg])
        return q, True

    # --- Internal helpers ---

    def _reduce(self) -> None:
        """Reduce f in place modulo the ring's ideal, if any."""
        if self._ring.ideal is not None:
            self._ring.ideal.reduce(self)

    def _fail(self, err: AlgebraError) -> 'Polynomial':
        self._coefs = {}
        self.err = err
        return self

    # --- Operators ---

    def __add__(self, other: 'Polynomial') -> 'Polynomial':
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: 'Polynomial') -> 'Polynomial':
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other) -> 'Polynomial':
        if isinstance(other, Polynomial):
            return self.times(other)
        if isinstance(other, int):
            return self.scale(self.base_field.element(other))
        if self.base_field.contains(other):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other) -> 'Polynomial':
        return self.__mul__(other)

    def __neg__(self) -> 'Polynomial':
        return self.neg()

    def __pow__(self, n: int) -> 'Polynomial':
        return self.pow(n)

    # --- Formatting ---

    def __str__(self) -> str:
        if self.err is not None:
            return f"<failed polynomial: {self.err}>"
        degs = self.sorted_degrees()
        if not degs:
            return "0"
        x, y = self._ring.var_names
        parts = []
        for dx, dy in degs:
            c = self._coefs[(dx, dy)]
            term = ""
            if not self.base_field.is_one(c) or (dx, dy) == (0, 0):
                term += str(int(c))
            if dx == 1:
                term += x
            elif dx > 1:
                term += f"{x}^{dx}"
            if dy == 1:
                term += y
            elif dy > 1:
                term += f"{y}^{dy}"
            parts.append(term)
        return " + ".join(parts)

    def __repr__(self) -> str:
        return f"Polynomial({self})"


def _check_err_and_compatible(
    op: str,
    f: Polynomial,
    *others: Polynomial,
) -> Optional[AlgebraError]:
    """Return the error an operation on f and others must report, if any.

    An inherited failure takes precedence (first one found wins); otherwise an
    ArithmeticIncompat-error is returned if some polynomial belongs to a
    different ring than f.
    """
    for p in (f, *others):
        if p.err is not None:
            return wrap(op, Kind.INHERIT, p.err)
    for p in others:
        if p._ring is not f._ring:
            return new_error(
                op, Kind.ARITHMETIC_INCOMPAT,
                "%s and %s defined over different rings", f, p,
            )
    return None
