"""Numeric primitives: a Newton square-root estimator and CORDIC sine/cosine.

The expression engine does not call these; they are leaf services for a
calculator built on top of it.
"""

import math
from functools import lru_cache
from typing import Tuple

import numba
import numpy as np

from .errors import UnsupportedDomainError
from .logging_system import log_debug

ITERATIONS = 48
MAX_ITERATIONS = 64

# Documented worst-case absolute errors
SQRT_TOLERANCE = 1e-14   # on [0, 100]
CORDIC_TOLERANCE = 1e-12  # on [-pi/2, pi/2]

_HALF_PI = np.pi / 2
_TWO_PI = 2 * np.pi


@numba.njit(cache=True)
def _newton_sqrt(value):
  # Start above the root; Newton then decreases monotonically until rounding stalls it
  estimate = value if value > 1.0 else 1.0
  while True:
    refined = 0.5 * (estimate + value / estimate)
    if refined >= estimate:
      return estimate
    estimate = refined


@numba.njit(cache=True)
def _cordic_rotate(theta, angles, gain):
  x = 1.0
  y = 0.0
  z = theta
  power = 1.0
  for i in range(angles.shape[0]):
    if z >= 0.0:
      x, y = x - y * power, y + x * power
      z -= angles[i]
    else:
      x, y = x + y * power, y - x * power
      z += angles[i]
    power *= 0.5
  return x * gain, y * gain


@lru_cache(maxsize=None)
def _cordic_table(iterations: int) -> Tuple[np.ndarray, float]:
  """Rotation angles atan(2^-i) and the inverse of the accumulated CORDIC gain"""
  exponents = np.arange(iterations)
  angles = np.arctan(np.power(0.5, exponents))
  gain = float(np.prod(1.0 / np.sqrt(1.0 + np.power(0.25, exponents))))
  return angles, gain


def sqrt(value: float) -> float:
  """Square root by Newton iteration.

  Raises UnsupportedDomainError for negative or NaN input; complex results
  are never produced.
  """
  value = float(value)
  if math.isnan(value) or value < 0.0:
    log_debug("sqrt rejected %s", value)
    raise UnsupportedDomainError(f"square root of {value} is not a real number")
  if value == 0.0 or math.isinf(value):
    return value
  return float(_newton_sqrt(value))


def cordic(theta: float, iterations: int = ITERATIONS) -> Tuple[float, float]:
  """
  Compute (cos(theta), sin(theta)) with the CORDIC rotation algorithm.

  Args:
      theta: Angle in radians. Any finite angle is accepted; it is reduced
          into [-pi/2, pi/2] before rotating.
      iterations: Number of micro-rotations (1 to MAX_ITERATIONS). Each one
          adds roughly one bit of precision.

  Returns:
      Tuple of (cosine, sine)
  """
  if not 1 <= iterations <= MAX_ITERATIONS:
    raise ValueError(f"iterations must be between 1 and {MAX_ITERATIONS}, got {iterations}")
  theta = float(theta)
  if not math.isfinite(theta):
    log_debug("cordic rejected %s", theta)
    raise UnsupportedDomainError(f"cannot rotate by non-finite angle {theta}")

  reduced = theta - _TWO_PI * round(theta / _TWO_PI)
  flip = False
  if reduced > _HALF_PI:
    reduced -= np.pi
    flip = True
  elif reduced < -_HALF_PI:
    reduced += np.pi
    flip = True

  angles, gain = _cordic_table(iterations)
  cos, sin = _cordic_rotate(reduced, angles, gain)
  if flip:
    return -float(cos), -float(sin)
  return float(cos), float(sin)
