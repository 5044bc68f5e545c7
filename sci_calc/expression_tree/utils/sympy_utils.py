import sympy as sp
from sympy.parsing.sympy_parser import parse_expr
from tokenize import TokenError
from typing import List

from ..core.node import (
  Node, LiteralNode, NegationNode, SumNode, ProductNode, FractionNode, ConstantNode, from_number
)
from ..core.operators import Const
from ...errors import ExpressionParseError, UnsupportedDomainError
from ...logging_system import log_debug

# Names accepted in text besides SymPy's own (pi, E)
_PARSE_NAMESPACE = {'pi': sp.pi, 'π': sp.pi, 'e': sp.E, 'E': sp.E}


def parse_expression(text: str) -> Node:
  """Parse arithmetic text such as ``"pi + 1 - pi"`` into an expression tree"""
  try:
    sympy_expr = parse_expr(text, local_dict=dict(_PARSE_NAMESPACE), evaluate=False)
  except (SyntaxError, TokenError, TypeError, ValueError, sp.SympifyError) as e:
    log_debug("Failed to parse %r: %s", text, e)
    raise ExpressionParseError(f"cannot parse {text!r}: {e}") from e
  return sympy_to_node(sympy_expr)


def sympy_to_node(sympy_expr: sp.Expr) -> Node:
  """Convert an (unevaluated) sympy expression into our node structure"""
  if sympy_expr is sp.pi:
    return ConstantNode(Const.PI)
  if sympy_expr is sp.E:
    return ConstantNode(Const.E)
  if sympy_expr.has(sp.I):
    raise UnsupportedDomainError(f"complex numbers are not supported: {sympy_expr}")

  if sympy_expr.is_Integer:
    return from_number(int(sympy_expr))
  if sympy_expr.is_Rational:
    return FractionNode(from_number(int(sympy_expr.p)), LiteralNode(int(sympy_expr.q)))
  if sympy_expr.is_Float:
    return from_number(float(sympy_expr))

  if isinstance(sympy_expr, sp.Add):
    return SumNode([sympy_to_node(arg) for arg in _flatten_add(sympy_expr)])

  if isinstance(sympy_expr, sp.Mul):
    return _mul_to_node(list(sympy_expr.args))

  if isinstance(sympy_expr, sp.Pow):
    base, exponent = sympy_expr.args
    if exponent == -1:
      return FractionNode(LiteralNode(1), sympy_to_node(base))
    if exponent.is_Integer and exponent > 0:
      return ProductNode([sympy_to_node(base) for _ in range(int(exponent))])

  if sympy_expr.is_Symbol:
    raise ExpressionParseError(f"free symbol {sympy_expr} cannot be evaluated")

  raise ExpressionParseError(f"unsupported operation: {sympy_expr}")


def _flatten_add(sympy_expr: sp.Add) -> List[sp.Expr]:
  # Unevaluated parses can nest Add inside Add; a sum of terms is one SumNode
  terms = []
  for arg in sympy_expr.args:
    if isinstance(arg, sp.Add):
      terms.extend(_flatten_add(arg))
    else:
      terms.append(arg)
  return terms


def _mul_to_node(args: List[sp.Expr]) -> Node:
  if sp.S.NegativeOne in args:
    args.remove(sp.S.NegativeOne)
    return NegationNode(_mul_to_node(args))

  numerators = []
  denominators = []
  for arg in args:
    if isinstance(arg, sp.Pow) and arg.args[1] == -1:
      denominators.append(sympy_to_node(arg.args[0]))
    else:
      numerators.append(sympy_to_node(arg))

  numerator = _product_of(numerators)
  if not denominators:
    return numerator
  return FractionNode(numerator, _product_of(denominators))


def _product_of(factors: List[Node]) -> Node:
  if not factors:
    return LiteralNode(1)
  if len(factors) == 1:
    return factors[0]
  return ProductNode(factors)


class SymPyVerifier:
  """Cross-checks expression trees with SymPy's exact arithmetic"""

  def is_equivalent(self, left: Node, right: Node) -> bool:
    """True if both trees denote the same real number"""
    difference = sp.simplify(left.to_sympy() - right.to_sympy())
    return difference == 0

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(node.to_sympy())
