"""Polynomial ideals given by a finite list of generators.

An ``Ideal`` keeps three properties of its generator list: whether it is a
Gröbner basis, whether that basis is minimal, and whether it is reduced. Each
property starts out undecided and is settled by the first query or transform
that determines it; afterwards the answer is returned without recomputation.
The flags are a cache only: the generator list changes solely through
``minimize_basis`` and ``reduce_basis``, which keep the flags consistent, while
``groebner_basis`` returns a new ideal.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from bivariate import groebner
from bivariate.errors import Kind, new_error
from bivariate.polynomial import Polynomial

if TYPE_CHECKING:
    from bivariate.ring import Ring

_logger = logging.getLogger(__name__)


class Tristate(Enum):
    """Cached answer to a yes/no question that may not be settled yet."""
    UNKNOWN = 0
    TRUE = 1
    FALSE = -1

    @staticmethod
    def of(value: bool) -> 'Tristate':
        return Tristate.TRUE if value else Tristate.FALSE


class Ideal:
    """Ideal of a bivariate polynomial ring.

    Ideals are created with ``ring.new_ideal(*generators)``. The generators are
    copied, and the ideal is owned by the ring of the generators.
    """

    def __init__(
        self,
        ring: 'Ring',
        generators: List[Polynomial],
        is_groebner: Tristate = Tristate.UNKNOWN,
        is_minimal: Tristate = Tristate.UNKNOWN,
        is_reduced: Tristate = Tristate.UNKNOWN,
    ):
        self._ring = ring
        self._generators = generators
        self._is_groebner = is_groebner
        self._is_minimal = is_minimal
        self._is_reduced = is_reduced
        # Gröbner basis computed by reduce() when the generators are not one
        self._groebner_cache: Optional[List[Polynomial]] = None

    @property
    def ring(self) -> 'Ring':
        return self._ring

    @property
    def generators(self) -> List[Polynomial]:
        """Copies of the generators, in order."""
        return [g.copy() for g in self._generators]

    def __len__(self) -> int:
        return len(self._generators)

    def __str__(self) -> str:
        gens = ", ".join(str(g) for g in self._generators)
        return f"Ideal <{gens}> in {self._ring}"

    def __repr__(self) -> str:
        return f"Ideal(<{', '.join(str(g) for g in self._generators)}>)"

    def copy(self) -> 'Ideal':
        """Deep copy of the ideal, including the settled properties."""
        out = Ideal(
            self._ring,
            [g.copy() for g in self._generators],
            self._is_groebner,
            self._is_minimal,
            self._is_reduced,
        )
        if self._groebner_cache is not None:
            out._groebner_cache = [g.copy() for g in self._groebner_cache]
        return out

    # --- Reduction ---

    def reduce(self, f: Polynomial) -> Polynomial:
        """Set f to its normal form modulo the ideal and return f.

        If the generators are not known to be a Gröbner basis, a Gröbner basis
        is computed first. It is kept on the ideal for later reductions, while
        the generators themselves are left as they are.

        Raises:
            AlgebraError: ArithmeticIncompat-error if f is from another ring,
                or the inherited error if f carries one
        """
        if self._is_groebner == Tristate.TRUE:
            basis = self._generators
        else:
            if self._groebner_cache is None:
                _logger.debug("Computing Gröbner basis of %d generators for reduction",
                              len(self._generators))
                self._groebner_cache = groebner.buchberger(self._generators)
            basis = self._groebner_cache
        r = f.rem(*basis)
        f._coefs = r._coefs
        f.err = r.err
        return f

    def contains(self, f: Polynomial) -> bool:
        """Whether f is a member of the ideal."""
        return self.reduce(f.copy()).is_zero()

    def __contains__(self, f: Polynomial) -> bool:
        return self.contains(f)

    # --- Gröbner bases ---

    def groebner_basis(self) -> 'Ideal':
        """Return a new ideal whose generators form a Gröbner basis of this one.

        The receiver is not modified.
        """
        if self._groebner_cache is not None:
            gens = [g.copy() for g in self._groebner_cache]
        else:
            gens = groebner.buchberger(self._generators)
        return Ideal(
            self._ring, gens,
            is_groebner=Tristate.TRUE,
            is_minimal=Tristate.FALSE,
            is_reduced=Tristate.FALSE,
        )

    def is_groebner(self) -> bool:
        """Whether the generators form a Gröbner basis."""
        if self._is_groebner == Tristate.UNKNOWN:
            self._is_groebner = Tristate.of(groebner.is_groebner_basis(self._generators))
        return self._is_groebner == Tristate.TRUE

    def is_minimal(self) -> bool:
        """Whether the generators form a minimal Gröbner basis.

        That is, a Gröbner basis of monic polynomials none of whose leading
        monomials divides another.
        """
        if self._is_minimal == Tristate.UNKNOWN:
            field = self._ring.field
            self._is_minimal = Tristate.of(
                self.is_groebner()
                and all(field.is_one(g.lc()) for g in self._generators)
                and groebner.leading_terms_irredundant(self._generators)
            )
        return self._is_minimal == Tristate.TRUE

    def is_reduced(self) -> bool:
        """Whether the generators form the reduced Gröbner basis."""
        if self._is_reduced == Tristate.UNKNOWN:
            self._is_reduced = Tristate.of(
                self.is_minimal() and groebner.is_interreduced(self._generators)
            )
        return self._is_reduced == Tristate.TRUE

    def minimize_basis(self) -> None:
        """Transform the generators into a minimal Gröbner basis, in place.

        Raises:
            AlgebraError: InputValue-error if the generators are not a Gröbner
                basis
        """
        op = "Minimizing Gröbner basis"
        if not self.is_groebner():
            raise new_error(op, Kind.INPUT_VALUE, "Given ideal is not a Gröbner basis")

        n_before = len(self._generators)
        self._generators = groebner.minimize(self._generators)
        _logger.debug("Minimized basis from %d to %d generators",
                      n_before, len(self._generators))
        if self._is_minimal != Tristate.TRUE:
            self._is_reduced = Tristate.UNKNOWN
        self._is_minimal = Tristate.TRUE

    def reduce_basis(self) -> None:
        """Transform the generators into the reduced Gröbner basis, in place.

        Raises:
            AlgebraError: InputValue-error if the generators are not a Gröbner
                basis
        """
        op = "Reducing Gröbner basis"
        if not self.is_groebner():
            raise new_error(op, Kind.INPUT_VALUE, "Given ideal is not a Gröbner basis")
        if not self.is_minimal():
            self.minimize_basis()

        self._generators = groebner.interreduce(self._generators)
        self._is_reduced = Tristate.TRUE
