"""Tests for the numeric primitives."""

import math
import pytest
from sci_calc import UnsupportedDomainError
from sci_calc.numeric import sqrt, cordic, ITERATIONS, MAX_ITERATIONS, SQRT_TOLERANCE, CORDIC_TOLERANCE


def radians(degrees):
    return degrees * math.pi / 180.0


class TestSqrt:
    """Newton square root."""

    @pytest.mark.parametrize("n", range(0, 101))
    def test_precision(self, n):
        """Within tolerance of the library square root on [0, 100]."""
        assert abs(sqrt(float(n)) - math.sqrt(n)) < SQRT_TOLERANCE

    def test_fractional_and_large(self):
        """Values below one and far above it converge too."""
        assert math.isclose(sqrt(0.25), 0.5, rel_tol=1e-15)
        assert math.isclose(sqrt(1e300), 1e150, rel_tol=1e-15)

    def test_special_values(self):
        """Zero and infinity are their own roots."""
        assert sqrt(0.0) == 0.0
        assert sqrt(math.inf) == math.inf

    def test_negative_rejected(self):
        """Negative input has no real root."""
        with pytest.raises(UnsupportedDomainError):
            sqrt(-1.0)

    def test_nan_rejected(self):
        """NaN is outside the domain."""
        with pytest.raises(UnsupportedDomainError):
            sqrt(math.nan)


class TestCordic:
    """CORDIC cosine and sine."""

    @pytest.mark.parametrize("theta", range(-90, 91, 15))
    def test_precision(self, theta):
        """Within tolerance on [-90, 90] degrees."""
        cos, sin = cordic(radians(theta))
        assert abs(cos - math.cos(radians(theta))) < CORDIC_TOLERANCE
        assert abs(sin - math.sin(radians(theta))) < CORDIC_TOLERANCE

    @pytest.mark.parametrize("theta", [math.pi, 3 * math.pi / 4, -2.5, 7.0, -100.0])
    def test_range_reduction(self, theta):
        """Angles outside [-pi/2, pi/2] are reduced first."""
        cos, sin = cordic(theta)
        assert abs(cos - math.cos(theta)) < 1e-11
        assert abs(sin - math.sin(theta)) < 1e-11

    def test_fewer_iterations_are_coarser(self):
        """Precision grows with the iteration count."""
        coarse, _ = cordic(0.3, iterations=8)
        fine, _ = cordic(0.3, iterations=ITERATIONS)
        assert abs(coarse - math.cos(0.3)) < 1e-2
        assert abs(fine - math.cos(0.3)) <= abs(coarse - math.cos(0.3))

    def test_iteration_bounds(self):
        """The iteration count must be in range."""
        with pytest.raises(ValueError):
            cordic(0.5, iterations=0)
        with pytest.raises(ValueError):
            cordic(0.5, iterations=MAX_ITERATIONS + 1)

    def test_non_finite_rejected(self):
        """Infinite or NaN angles are outside the domain."""
        with pytest.raises(UnsupportedDomainError):
            cordic(math.inf)
        with pytest.raises(UnsupportedDomainError):
            cordic(math.nan)
