"""Tests for the evaluator."""

import math
from sci_calc import add, neg, mul, frac, literal, ZERO, PI, E


class TestLeaves:
    """Leaf evaluation."""

    def test_constants(self):
        """Constants evaluate to their machine values."""
        assert ZERO.evaluate() == 0.0
        assert PI.evaluate() == math.pi
        assert E.evaluate() == math.e

    def test_literal(self):
        """Literals evaluate to their value."""
        assert literal(42).evaluate() == 42.0

    def test_huge_literal_saturates(self):
        """Magnitudes beyond the double range become infinity instead of raising."""
        assert literal(10 ** 400).evaluate() == math.inf

    def test_returns_python_float(self):
        """evaluate() returns a plain float."""
        assert type(add(1, PI).evaluate()) is float


class TestCompoundNodes:
    """Sums, products and fractions."""

    def test_product(self):
        """Products fold with multiplication, seed 1."""
        assert mul(2, 3, 4).evaluate() == 24.0
        assert mul().evaluate() == 1.0

    def test_fraction(self):
        """Fractions divide."""
        assert frac(3, 4).evaluate() == 0.75
        assert frac(PI, 2).evaluate() == math.pi / 2

    def test_nested(self):
        """Evaluation recurses through every kind."""
        tree = add(frac(mul(2, PI), 2), neg(PI), 1)
        assert math.isclose(tree.evaluate(), 1.0, rel_tol=1e-12)


class TestInvalidArithmetic:
    """Invalid arithmetic yields IEEE values and never raises."""

    def test_division_by_zero(self):
        """x/0 is a signed infinity."""
        assert frac(1, 0).evaluate() == math.inf
        assert frac(neg(1), 0).evaluate() == -math.inf

    def test_zero_over_zero(self):
        """0/0 is NaN."""
        assert math.isnan(frac(0, 0).evaluate())

    def test_infinity_minus_infinity(self):
        """inf - inf is NaN."""
        infinity = frac(1, 0)
        assert math.isnan(add(infinity, neg(infinity)).evaluate())

    def test_literal_past_the_string_conversion_limit(self):
        """A literal too long to render still evaluates to a signed infinity."""
        big = 10 ** 5000
        assert literal(big).evaluate() == math.inf
        assert neg(big).evaluate() == -math.inf
        assert math.isnan(add(big, neg(big)).evaluate())


class TestPurity:
    """Evaluation does not touch the tree."""

    def test_no_simplification(self):
        """Evaluating leaves the tree unreduced."""
        tree = add(1, neg(1))
        assert tree.evaluate() == 0.0
        assert tree == add(1, neg(1))
