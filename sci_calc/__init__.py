"""sci_calc

A small computer-algebra core for a scientific calculator: arithmetic
expression trees, a canonicalizing simplifier, a floating-point evaluator and
the numeric primitives (square root, CORDIC) a calculator composes with it.
"""

from .expression_tree import (
  Expression, Node, LiteralNode, NegationNode, SumNode, ProductNode,
  FractionNode, ConstantNode, NodeType, Const, from_number,
  literal, neg, add, mul, frac, constant,
  ZERO, PI, E,
  ExpressionSimplifier, ExpressionValidator, SymPyVerifier
)
from .errors import (
  CalculatorError, UnsupportedSimplificationError, UnsupportedDomainError, ExpressionParseError
)
from .numeric import sqrt, cordic, ITERATIONS
from .logging_system import LogLevel, get_logger, set_log_level, configure_logging

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "LiteralNode", "NegationNode", "SumNode", "ProductNode",
  "FractionNode", "ConstantNode", "NodeType", "Const", "from_number",
  "literal", "neg", "add", "mul", "frac", "constant",
  "ZERO", "PI", "E",
  "ExpressionSimplifier", "ExpressionValidator", "SymPyVerifier",
  "CalculatorError", "UnsupportedSimplificationError", "UnsupportedDomainError",
  "ExpressionParseError",
  "sqrt", "cordic", "ITERATIONS",
  "LogLevel", "get_logger", "set_log_level", "configure_logging"
]
