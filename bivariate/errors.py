"""Error kinds and the error type raised or attached by the algebra core.

Arithmetic on polynomials never raises for user-triggered failures. Instead the
failure is stored on the resulting polynomial (see ``Polynomial.err``) so that a
chain such as ``f.plus(g).mult(h)`` needs a single check at the end. Operations
that must fail before any work is done raise ``AlgebraError`` directly.

Wrapping with ``Kind.INHERIT`` records the operation that propagated a failure
while keeping the kind of the underlying cause, so ``is_kind`` looks through it.
"""

from enum import Enum
from typing import Optional


class Kind(Enum):
    """Semantic error kind."""
    INHERIT = 0             # Take the kind of the wrapped cause
    INPUT = 1               # General input error
    INPUT_VALUE = 2         # Input has the wrong value (e.g. empty ideal)
    INPUT_INCOMPATIBLE = 3  # Inputs incompatible with each other
    ARITHMETIC_INCOMPAT = 4 # Operands defined over different rings
    OVERFLOW = 5            # Exponent exceeds MAX_EXPONENT
    INTERNAL = 6            # Internal error


class AlgebraError(Exception):
    """Failure raised by, or attached to the results of, the algebra core.

    Attributes:
        op: Description of the operation that failed
        kind: Kind of failure (INHERIT defers to ``cause``)
        cause: Wrapped underlying error, if any
    """

    def __init__(
        self,
        op: str,
        kind: Kind,
        message: str = "",
        cause: Optional[BaseException] = None,
    ):
        self.op = op
        self.kind = kind
        self.message = message
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = []
        if self.op:
            parts.append(f"{self.op}: ")
        if self.message:
            parts.append(self.message)
        elif self.cause is not None:
            parts.append(str(self.cause))
        return "".join(parts)

    @property
    def resolved_kind(self) -> Kind:
        """Kind after following INHERIT links (INHERIT if the chain ends)."""
        return _resolve(self)


def new_error(op: str, kind: Kind, message: str, *args) -> AlgebraError:
    """Create an error; ``message`` may contain %-style directives for ``args``."""
    if args:
        message = message % args
    return AlgebraError(op, kind, message)


def wrap(op: str, kind: Kind, err: BaseException) -> AlgebraError:
    """Wrap an existing error in a new operation and kind."""
    return AlgebraError(op, kind, cause=err)


def is_kind(kind: Kind, err: Optional[BaseException]) -> bool:
    """Determine whether ``err`` has the given kind.

    Errors that are not ``AlgebraError`` never match.
    """
    if not isinstance(err, AlgebraError):
        return False
    return _resolve(err) == kind


def _resolve(err: AlgebraError) -> Kind:
    while err.kind == Kind.INHERIT:
        if not isinstance(err.cause, AlgebraError):
            return Kind.INHERIT
        err = err.cause
    return err.kind
