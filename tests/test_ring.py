"""Tests for polynomial rings and quotient rings."""

import pytest

from bivariate.errors import AlgebraError, Kind, is_kind
from bivariate.field import FiniteField
from bivariate.orders import Lex, WDegLex
from bivariate.ring import QuotientRing, Ring, def_ring


@pytest.fixture
def frobenius_quotient(gf3: FiniteField) -> QuotientRing:
    """GF(3)[X, Y] modulo X^9 - X, under WDegLex(3, 4)."""
    ring = Ring(gf3, WDegLex(3, 4))
    ideal = ring.new_ideal(ring.from_ints({(9, 0): 1, (1, 0): 2}))
    return ring.quotient(ideal)


class TestRing:
    """Test ring construction and helpers."""

    def test_def_ring(self, gf7: FiniteField) -> None:
        """def_ring builds a ring with the given field and ordering."""
        ring = def_ring(gf7, Lex(x_gt_y=False))
        assert ring.field == gf7
        assert ring.order == Lex(x_gt_y=False)
        assert ring.ideal is None
        assert str(ring) == "Bivariate polynomial ring over Finite field of 7 elements"

    def test_var_names(self, gf7: FiniteField) -> None:
        """Variable names are used when printing."""
        ring = Ring(gf7, Lex(), var_names=("a", "b"))
        assert str(ring.from_ints({(2, 1): 3, (0, 1): 1})) == "3a^2b + b"
        ring.set_var_names("u", "v")
        assert ring.var_names == ("u", "v")
        assert str(ring.monomial((1, 1))) == "uv"

    @pytest.mark.parametrize("names", [("x", "x"), ("", "y")])
    def test_bad_var_names(self, gf7: FiniteField, names) -> None:
        """Variable names must be distinct and nonempty."""
        with pytest.raises(AlgebraError) as excinfo:
            Ring(gf7, Lex(), var_names=names)
        assert is_kind(Kind.INPUT_VALUE, excinfo.value)

    def test_zero_one_monomial(self, lex7: Ring) -> None:
        """Basic constants of the ring."""
        assert lex7.zero().is_zero()
        assert lex7.one().ld() == (0, 0)
        m = lex7.monomial((2, 3), lex7.field.element(5))
        assert m.is_monomial()
        assert m.lc() == lex7.field.element(5)


class TestQuotientRing:
    """Test quotient ring construction and reduction."""

    def test_construction_reduces(self, frobenius_quotient: QuotientRing) -> None:
        """X^12 Y^3 reduces to X^4 Y^3 modulo X^9 - X."""
        f = frobenius_quotient.from_ints({(12, 3): 1})
        assert f.ld() == (4, 3)
        assert f == frobenius_quotient.from_ints({(4, 3): 1})

    def test_multiplication_reduces(self, frobenius_quotient: QuotientRing) -> None:
        """X^5 * X^5 = X^2 in the quotient."""
        x5 = frobenius_quotient.monomial((5, 0))
        assert x5.times(x5) == frobenius_quotient.monomial((2, 0))
        x5.mult(x5)
        assert x5 == frobenius_quotient.monomial((2, 0))

    def test_pow_reduces(self, frobenius_quotient: QuotientRing) -> None:
        """X^9 = X in the quotient, so X^81 = X as well."""
        x = frobenius_quotient.monomial((1, 0))
        assert x.pow(81) == x

    def test_ideal_is_reduced_basis(self, gf7: FiniteField) -> None:
        """The quotient ring keeps the reduced Gröbner basis of the ideal."""
        ring = Ring(gf7, Lex())
        ideal = ring.new_ideal(
            ring.from_ints({(2, 0): 1, (0, 1): 1}),
            ring.from_ints({(1, 1): 1, (0, 0): 1}),
        )
        qr = ring.quotient(ideal)
        assert qr.ideal.ring is qr
        assert qr.ideal.is_reduced()
        assert all(g.ring is qr for g in qr.ideal.generators)
        assert sorted(str(g) for g in qr.ideal.generators) == ["X + 6Y^2", "Y^3 + 1"]
        # The given ideal is left alone
        assert len(ideal) == 2
        assert ideal.ring is ring

    def test_constructor_reduces_and_copies(self, gf7: FiniteField) -> None:
        """Building a QuotientRing directly keeps the caller's ideal as it was."""
        ring = Ring(gf7, Lex())
        ideal = ring.new_ideal(
            ring.from_ints({(2, 0): 1, (0, 1): 1}),
            ring.from_ints({(1, 1): 1, (0, 0): 1}),
        )
        qr = QuotientRing(ring, ideal)
        assert qr.ideal is not ideal
        assert ideal.ring is ring
        assert all(g.ring is ring for g in ideal.generators)
        assert qr.ideal.is_groebner()
        assert qr.ideal.is_reduced()
        assert sorted(str(g) for g in qr.ideal.generators) == ["X + 6Y^2", "Y^3 + 1"]
        assert not ideal.is_groebner()
        assert qr.from_ints({(2, 0): 1}) == qr.from_ints({(0, 1): -1})

    def test_constructor_rejects_quotient_base(self, frobenius_quotient: QuotientRing) -> None:
        """A quotient ring cannot serve as the base of another one."""
        ideal = frobenius_quotient.new_ideal(frobenius_quotient.monomial((0, 1)))
        with pytest.raises(AlgebraError) as excinfo:
            QuotientRing(frobenius_quotient, ideal)
        assert is_kind(Kind.INPUT_VALUE, excinfo.value)

    def test_quotient_of_quotient(self, frobenius_quotient: QuotientRing) -> None:
        """A quotient ring cannot be reduced again."""
        ideal = frobenius_quotient.new_ideal(frobenius_quotient.monomial((0, 1)))
        with pytest.raises(AlgebraError) as excinfo:
            frobenius_quotient.quotient(ideal)
        assert is_kind(Kind.INPUT_VALUE, excinfo.value)

    def test_foreign_ideal(self, gf7: FiniteField) -> None:
        """An ideal of another ring is an InputIncompatible-error."""
        r1 = Ring(gf7, Lex())
        r2 = Ring(gf7, Lex())
        ideal = r2.new_ideal(r2.monomial((1, 0)))
        with pytest.raises(AlgebraError) as excinfo:
            r1.quotient(ideal)
        assert is_kind(Kind.INPUT_INCOMPATIBLE, excinfo.value)

    def test_base_ring_polynomials_incompatible(self, frobenius_quotient: QuotientRing) -> None:
        """Quotient ring polynomials do not mix with base ring polynomials."""
        f = frobenius_quotient.base_ring.monomial((1, 0))
        g = frobenius_quotient.monomial((1, 0))
        assert is_kind(Kind.ARITHMETIC_INCOMPAT, f.plus(g).err)

    def test_str(self, frobenius_quotient: QuotientRing) -> None:
        """Quotient rings print their modulus."""
        assert str(frobenius_quotient) == (
            "Quotient ring of bivariate polynomials over Finite field of 3 elements "
            "modulo <X^9 + 2X>"
        )
