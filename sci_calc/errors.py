"""Exceptions raised by the calculator."""

from typing import Optional


class CalculatorError(Exception):
  """Base class for every error raised by sci_calc"""


class UnsupportedSimplificationError(CalculatorError, NotImplementedError):
  """Raised when simplification is requested for a node kind that has no rules"""

  def __init__(self, node_type, message: Optional[str] = None):
    self.node_type = node_type
    if message is None:
      message = f"simplification of {node_type.name.lower()} nodes is not supported"
    super().__init__(message)


class UnsupportedDomainError(CalculatorError, ValueError):
  """Raised for inputs outside the real domain (negative roots, complex numbers, non-finite values)"""


class ExpressionParseError(CalculatorError, ValueError):
  """Raised when text cannot be converted into an expression tree"""
