"""
Pytest configuration for bivariate tests.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to the path so absolute imports work
# (tests/ is inside the repository root)
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from bivariate.field import FiniteField  # noqa: E402
from bivariate.orders import Lex  # noqa: E402
from bivariate.ring import Ring  # noqa: E402


@pytest.fixture
def gf3() -> FiniteField:
    return FiniteField(3)


@pytest.fixture
def gf7() -> FiniteField:
    return FiniteField(7)


@pytest.fixture
def gf9() -> FiniteField:
    return FiniteField(9)


@pytest.fixture
def gf13() -> FiniteField:
    return FiniteField(13)


@pytest.fixture
def lex7(gf7: FiniteField) -> Ring:
    """GF(7)[X, Y] with the lexicographical ordering, X > Y."""
    return Ring(gf7, Lex(x_gt_y=True))
