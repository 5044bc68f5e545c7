"""Tests for text rendering."""

from sci_calc import add, neg, mul, frac, literal, ZERO, PI, E


class TestToString:
    """str() of every node kind."""

    def test_leaves(self):
        """Literals render as decimals, constants as symbols."""
        assert str(literal(5)) == "5"
        assert str(ZERO) == "0"
        assert str(PI) == "π"
        assert str(E) == "e"

    def test_negation(self):
        """Negation wraps its operand."""
        assert str(neg(5)) == "-(5)"

    def test_sum_and_product(self):
        """Operands are parenthesized and joined."""
        assert str(add(1, 2, PI)) == "(1) + (2) + (π)"
        assert str(mul(2, E)) == "(2) * (e)"

    def test_fraction(self):
        """Numerator and denominator are parenthesized."""
        assert str(frac(1, 2)) == "(1)/(2)"

    def test_empty_variadics(self):
        """Empty sums and products render as their identities."""
        assert str(add()) == "0"
        assert str(mul()) == "1"


class TestRepr:
    """repr() reads as constructor calls."""

    def test_repr(self):
        """Nested constructors."""
        assert repr(add(literal(1), neg(literal(1)))) == "add(literal(1), neg(literal(1)))"
        assert repr(frac(PI, mul(2, E))) == "frac(PI, mul(literal(2), E))"
