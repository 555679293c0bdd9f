"""Monomial orderings for bivariate polynomial rings.

An ordering compares two degrees and returns -1, 0 or 1 meaning
``deg1 < deg2``, ``deg1 == deg2`` and ``deg1 > deg2``. For Buchberger's algorithm
to terminate the ordering must be total and compatible with multiplication:
``deg1 <= deg2`` implies ``deg1 + e <= deg2 + e`` for every degree ``e``.

Every built-in ordering takes ``x_gt_y`` which says whether X is the larger
variable. Additional orderings can be defined by subclassing ``MonomialOrder``
or by wrapping a plain function in ``CustomOrder``.

Example:
    ring = Ring(FiniteField(7), Lex(x_gt_y=True))
    ring.order((1, 0), (0, 5))   # 1, since X > Y^5 under Lex with X > Y
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

from bivariate.degree import Degree
from bivariate.errors import Kind, new_error


class MonomialOrder(ABC):
    """A total, multiplication-compatible ordering of degrees."""

    @abstractmethod
    def compare(self, deg1: Degree, deg2: Degree) -> int:
        """Return -1, 0 or 1 as deg1 is smaller than, equal to or larger than deg2."""

    def __call__(self, deg1: Degree, deg2: Degree) -> int:
        return self.compare(deg1, deg2)

    def max(self, *degrees: Degree) -> Degree:
        """Largest of the given degrees."""
        best = degrees[0]
        for d in degrees[1:]:
            if self.compare(d, best) > 0:
                best = d
        return best


def _lex(deg1: Degree, deg2: Degree) -> int:
    """Lexicographic comparison with the first component dominating."""
    if deg1 == deg2:
        return 0
    if deg1[0] != deg2[0]:
        return 1 if deg1[0] > deg2[0] else -1
    return 1 if deg1[1] > deg2[1] else -1


def _swap(deg: Degree) -> Degree:
    return (deg[1], deg[0])


@dataclass(frozen=True)
class Lex(MonomialOrder):
    """Lexicographical ordering."""
    x_gt_y: bool = True

    def compare(self, deg1: Degree, deg2: Degree) -> int:
        if self.x_gt_y:
            return _lex(deg1, deg2)
        return _lex(_swap(deg1), _swap(deg2))


@dataclass(frozen=True)
class WDegLex(MonomialOrder):
    """Weighted degree lexicographical ordering.

    Degrees are compared by ``dx * x_weight + dy * y_weight``; ties are broken
    with the lexicographical ordering.
    """
    x_weight: int
    y_weight: int
    x_gt_y: bool = True

    def __post_init__(self):
        _check_weights(self.x_weight, self.y_weight)

    def weight(self, deg: Degree) -> int:
        return deg[0] * self.x_weight + deg[1] * self.y_weight

    def compare(self, deg1: Degree, deg2: Degree) -> int:
        if deg1 == deg2:
            return 0
        w1, w2 = self.weight(deg1), self.weight(deg2)
        if w1 != w2:
            return 1 if w1 > w2 else -1
        return self.tiebreak(deg1, deg2)

    def tiebreak(self, deg1: Degree, deg2: Degree) -> int:
        return Lex(self.x_gt_y).compare(deg1, deg2)


@dataclass(frozen=True)
class WDegRevLex(WDegLex):
    """Weighted degree reverse lexicographical ordering.

    Ties in weighted degree are broken by the lexicographical ordering with the
    variables swapped, and the degree that is smaller under that comparison is
    considered the larger one.
    """

    def tiebreak(self, deg1: Degree, deg2: Degree) -> int:
        return -Lex(not self.x_gt_y).compare(deg1, deg2)


@dataclass(frozen=True)
class DegLex(MonomialOrder):
    """Total degree ordering with lexicographical tiebreak."""
    x_gt_y: bool = True

    def compare(self, deg1: Degree, deg2: Degree) -> int:
        return WDegLex(1, 1, self.x_gt_y).compare(deg1, deg2)


@dataclass(frozen=True)
class DegRevLex(MonomialOrder):
    """Total degree ordering with reverse lexicographical tiebreak."""
    x_gt_y: bool = True

    def compare(self, deg1: Degree, deg2: Degree) -> int:
        return WDegRevLex(1, 1, self.x_gt_y).compare(deg1, deg2)


@dataclass(frozen=True)
class CustomOrder(MonomialOrder):
    """User-defined ordering given as a function ``(deg1, deg2) -> {-1, 0, 1}``.

    The function must be pure. Its totality and compatibility with
    multiplication are the caller's responsibility.
    """
    func: Callable[[Degree, Degree], int]
    name: str = "custom"

    def compare(self, deg1: Degree, deg2: Degree) -> int:
        return self.func(deg1, deg2)


def _check_weights(x_weight: int, y_weight: int) -> None:
    if x_weight < 0 or y_weight < 0:
        raise new_error(
            "Defining weighted ordering", Kind.INPUT_VALUE,
            "weights must be nonnegative (got %d and %d)", x_weight, y_weight,
        )
