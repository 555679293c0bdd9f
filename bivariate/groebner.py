"""Gröbner basis computations on lists of generators.

The functions here work on plain lists of polynomials; ``Ideal`` wraps them and
keeps track of which properties of its generators have been established.

Buchberger's algorithm:
1. Start with a copy of the generators as basis G
2. For every pair (f, g) not yet examined, compute S(f, g) and its remainder
   under division by G
3. Append every nonzero remainder to G
4. Repeat until a pass over the pairs adds nothing

Termination follows from the ordering being compatible with multiplication: the
ideal generated by the leading terms grows strictly with every new element.
"""

import logging
from typing import List, Sequence

from bivariate.degree import lcm_degree, subtract_degrees
from bivariate.errors import Kind, new_error
from bivariate.polynomial import Polynomial, _check_err_and_compatible

_logger = logging.getLogger(__name__)


def monomial_lcm(f: Polynomial, g: Polynomial) -> Polynomial:
    """Least common multiple of two monomials, with coefficient one.

    Raises:
        AlgebraError: InputValue-error if f or g is not a monomial,
            ArithmeticIncompat-error if they belong to different rings
    """
    op = "Computing monomial lcm"
    err = _check_err_and_compatible(op, f, g)
    if err is not None:
        raise err
    if not f.is_monomial() or not g.is_monomial():
        raise new_error(op, Kind.INPUT_VALUE, "%s and %s must both be monomials", f, g)
    lcm = f.ring.zero()
    lcm.set_coef(lcm_degree(f.ld(), g.ld()), f.base_field.one())
    return lcm


def s_polynomial(f: Polynomial, g: Polynomial) -> Polynomial:
    """S-polynomial of f and g.

    With m = lcm(Lm(f), Lm(g)) this is (m / Lt(f)) * f - (m / Lt(g)) * g, which
    cancels the leading terms of both.

    Raises:
        AlgebraError: ArithmeticIncompat-error if f and g belong to different
            rings, InputValue-error if either is zero
    """
    op = "Computing S-polynomial"
    err = _check_err_and_compatible(op, f, g)
    if err is not None:
        raise err
    if f.is_zero() or g.is_zero():
        raise new_error(op, Kind.INPUT_VALUE, "S-polynomial of the zero polynomial")

    ltf, ltg = f.lt(), g.lt()
    lcm = monomial_lcm(ltf, ltg)
    q1, ok1 = lcm._monomial_divide_by(ltf)
    q2, ok2 = lcm._monomial_divide_by(ltg)
    assert ok1 and ok2, "leading term does not divide the lcm"
    return q1.times(f).minus(q2.times(g))


def buchberger(generators: Sequence[Polynomial]) -> List[Polynomial]:
    """Extend the generators to a Gröbner basis of the ideal they generate.

    The input polynomials are copied, never modified. After the first pass,
    only pairs involving a newly added element are examined; pairs from earlier
    passes already reduce to zero modulo the enlarged basis.
    """
    basis = [g.copy() for g in generators if g.is_nonzero()]
    n_examined = 0
    n_pass = 0
    while True:
        n_pass += 1
        n = len(basis)
        added = []
        for j in range(n):
            for i in range(j):
                if j < n_examined:
                    continue
                s = s_polynomial(basis[i], basis[j])
                r = s.rem(*basis, *added)
                if r.is_nonzero():
                    added.append(r)
        _logger.debug(
            "Buchberger pass %d: %d generators, %d new", n_pass, n, len(added)
        )
        if not added:
            return basis
        n_examined = n
        basis.extend(added)


def is_groebner_basis(generators: Sequence[Polynomial]) -> bool:
    """Whether every pairwise S-polynomial reduces to zero modulo the generators."""
    for j in range(len(generators)):
        for i in range(j):
            s = s_polynomial(generators[i], generators[j])
            if s.rem(*generators).is_nonzero():
                return False
    return True


def leading_terms_irredundant(generators: Sequence[Polynomial]) -> bool:
    """Whether no leading monomial divides the leading monomial of another generator."""
    lds = [g.ld() for g in generators]
    for i, d in enumerate(lds):
        for j, e in enumerate(lds):
            if i != j and subtract_degrees(d, e)[1]:
                return False
    return True


def is_interreduced(generators: Sequence[Polynomial]) -> bool:
    """Whether no term of any generator is divisible by another generator's leading monomial."""
    lds = [g.ld() for g in generators]
    for i, g in enumerate(generators):
        for d in g.sorted_degrees():
            for j, e in enumerate(lds):
                if i != j and subtract_degrees(d, e)[1]:
                    return False
    return True


def minimize(generators: List[Polynomial]) -> List[Polynomial]:
    """Normalize the generators and drop those with a redundant leading term.

    The leading term of each generator is divided by the leading terms of the
    others; a zero remainder marks the generator as redundant. The scan restarts
    after every removal and ends when a full pass removes nothing.
    """
    gens = [g.normalize() for g in generators]
    lts = [g.lt() for g in gens]
    i = 0
    while i < len(gens):
        _, r = lts[i]._quo_rem_with_ignore(i, *lts)
        if r.is_zero():
            _logger.debug("Dropping redundant generator %s", gens[i])
            del gens[i]
            del lts[i]
            i = 0
        else:
            i += 1
    return gens


def interreduce(generators: List[Polynomial]) -> List[Polynomial]:
    """Replace each generator by its remainder modulo all the other generators.

    Applied to a minimal Gröbner basis this gives the reduced Gröbner basis.
    """
    gens = list(generators)
    for i in range(len(gens)):
        _, gens[i] = gens[i]._quo_rem_with_ignore(i, *gens)
    return gens
