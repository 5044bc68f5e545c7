import numpy as np
from enum import IntEnum
from functools import reduce
from typing import Iterable

class NodeType(IntEnum):
  LITERAL = 0
  NEGATION = 1
  SUM = 2
  PRODUCT = 3
  FRACTION = 4
  CONSTANT = 5

class Const(IntEnum):
  ZERO = 0
  PI = 1
  E = 2

# Mapping dictionaries
CONST_SYMBOLS = {Const.ZERO: '0', Const.PI: 'π', Const.E: 'e'}
CONST_VALUES = {Const.ZERO: np.float64(0.0), Const.PI: np.float64(np.pi), Const.E: np.float64(np.e)}

def evaluate_literal(value: int) -> np.float64:
  try:
    return np.float64(value)
  except OverflowError:
    # Magnitudes past the double range saturate
    return np.float64(np.inf) if value > 0 else np.float64(-np.inf)

def evaluate_constant(constant: Const) -> np.float64:
  return CONST_VALUES[constant]

def evaluate_negation(operand_val: np.float64) -> np.float64:
  return -operand_val

def evaluate_sum(operand_vals: Iterable[np.float64]) -> np.float64:
  return reduce(lambda acc, val: acc + val, operand_vals, np.float64(0.0))

def evaluate_product(operand_vals: Iterable[np.float64]) -> np.float64:
  return reduce(lambda acc, val: acc * val, operand_vals, np.float64(1.0))

def evaluate_fraction(numerator_val: np.float64, denominator_val: np.float64) -> np.float64:
  # IEEE semantics: x/0 -> +-inf, 0/0 -> nan. Callers run under np.errstate.
  return np.divide(np.float64(numerator_val), np.float64(denominator_val))
