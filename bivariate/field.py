"""Finite fields GF(p^m) used as coefficient fields.

Uses galois library for all field arithmetic. Prime fields, extension fields and
binary fields are all ``galois.GF`` classes, so a single adapter covers them and
the polynomial code never distinguishes between them.

Elements are plain galois scalars and support ``+ - * / **`` and unary ``-``.
galois reports a failed inversion by raising ZeroDivisionError; the polynomial
code only ever inverts leading coefficients, which are nonzero.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Union

import galois
import numpy as np

from bivariate.errors import Kind, new_error

Element = galois.FieldArray
"""A scalar element of some ``galois.GF`` field."""


class Field(ABC):
    """Capabilities the polynomial core needs from a coefficient field."""

    @abstractmethod
    def zero(self) -> Element:
        pass

    @abstractmethod
    def one(self) -> Element:
        pass

    @abstractmethod
    def characteristic(self) -> int:
        pass

    @abstractmethod
    def cardinality(self) -> int:
        pass

    @abstractmethod
    def element(self, value: int) -> Element:
        pass

    @abstractmethod
    def is_zero(self, e: Element) -> bool:
        pass

    @abstractmethod
    def is_one(self, e: Element) -> bool:
        pass

    @abstractmethod
    def equal(self, a: Element, b: Element) -> bool:
        pass

    @abstractmethod
    def inv(self, e: Element) -> Element:
        pass


# --- Field Construction ---

class FiniteField(Field):
    """Finite field of ``order`` elements backed by ``galois.GF(order)``."""

    def __init__(self, order: int):
        try:
            self.gf = galois.GF(order)
        except (ValueError, TypeError) as e:
            raise new_error(
                "Defining finite field", Kind.INPUT_VALUE,
                "%r is not a prime power", order,
            ) from e

    def __repr__(self) -> str:
        return f"FiniteField({self.cardinality()})"

    def __str__(self) -> str:
        return f"Finite field of {self.cardinality()} elements"

    def __eq__(self, other) -> bool:
        return isinstance(other, FiniteField) and self.gf is other.gf

    def __hash__(self) -> int:
        return hash(self.gf)

    def characteristic(self) -> int:
        return int(self.gf.characteristic)

    def cardinality(self) -> int:
        return int(self.gf.order)

    def extension_degree(self) -> int:
        return int(self.gf.degree)

    def zero(self) -> Element:
        return self.gf(0)

    def one(self) -> Element:
        return self.gf(1)

    def element(self, value: int) -> Element:
        """Return ``value`` times the identity.

        Negative values are reduced to a nonnegative remainder modulo the
        characteristic, so ``element(-1)`` is the additive inverse of one in
        every field (including extension fields).
        """
        return self.gf(int(value) % self.characteristic())

    def element_from_coeffs(self, coeffs: List[int]) -> Element:
        """Construct element from ascending-order coefficients [a0, a1, ...].

        The coefficients are with respect to the polynomial basis of the
        extension; missing high-order coefficients are zero.
        """
        degree = self.extension_degree()
        if len(coeffs) > degree:
            raise new_error(
                "Defining element from coefficients", Kind.INPUT_VALUE,
                "%d coefficients given for extension of degree %d",
                len(coeffs), degree,
            )
        p = self.characteristic()
        padded = [int(c) % p for c in coeffs] + [0] * (degree - len(coeffs))
        # Galois uses descending order [a_{m-1}, ..., a0]
        return self.gf.Vector(padded[::-1])

    def elements(self) -> Iterator[Element]:
        """Iterate over all field elements."""
        for e in self.gf.elements:
            yield e

    def mult_generator(self) -> Element:
        """Generator of the multiplicative group."""
        return self.gf.primitive_element

    def random_element(
        self,
        rng: Optional[Union[int, np.random.Generator]] = None,
    ) -> Element:
        """Uniformly random element drawn from the given seed or generator."""
        return self.gf.Random(seed=rng)

    # --- Element predicates ---

    def is_zero(self, e: Element) -> bool:
        return bool(e == 0)

    def is_one(self, e: Element) -> bool:
        return bool(e == 1)

    def equal(self, a: Element, b: Element) -> bool:
        return bool(a == b)

    def inv(self, e: Element) -> Element:
        """Multiplicative inverse; raises ZeroDivisionError for zero."""
        return e ** -1

    def contains(self, e) -> bool:
        """Whether ``e`` is an element of this field."""
        return isinstance(e, self.gf)


def define_field(order: int) -> FiniteField:
    """Define the finite field with the given number of elements."""
    return FiniteField(order)
