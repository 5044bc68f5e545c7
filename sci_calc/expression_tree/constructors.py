"""Constructor functions, one per node kind.

Construction is total: nothing is validated here. A zero denominator or a
nonsensical literal only shows up when the tree is evaluated. Plain numbers
passed as children are coerced with ``from_number`` so that ``add(1, neg(1))``
reads the way it is written.
"""

from .core.node import (
  Node, LiteralNode, NegationNode, SumNode, ProductNode, FractionNode,
  ConstantNode, from_number
)
from .core.operators import Const


def literal(value: int) -> LiteralNode:
  return LiteralNode(value)


def neg(operand) -> NegationNode:
  return NegationNode(from_number(operand))


def add(*operands) -> SumNode:
  return SumNode([from_number(op) for op in operands])


def mul(*operands) -> ProductNode:
  return ProductNode([from_number(op) for op in operands])


def frac(numerator, denominator) -> FractionNode:
  return FractionNode(from_number(numerator), from_number(denominator))


def constant(value: Const) -> ConstantNode:
  return ConstantNode(value)


__all__ = ['Node', 'literal', 'neg', 'add', 'mul', 'frac', 'constant', 'from_number']
