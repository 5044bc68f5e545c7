import numbers
from ..core.node import (
  Node, LiteralNode, NegationNode, SumNode, ProductNode, FractionNode, ConstantNode
)
from ..core.operators import Const
from .tree_utils import count_multiplicities


class ExpressionValidator:

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    """Structural validity: node kinds, child counts and the nonnegative-literal rule"""
    if isinstance(node, LiteralNode):
      return (isinstance(node.value, numbers.Integral)
              and not isinstance(node.value, bool)
              and node.value >= 0)

    elif isinstance(node, ConstantNode):
      return isinstance(node.constant, Const)

    elif isinstance(node, NegationNode):
      return (isinstance(node.operand, Node)
              and ExpressionValidator.is_valid_expression(node.operand))

    elif isinstance(node, (SumNode, ProductNode)):
      return all(isinstance(op, Node) and ExpressionValidator.is_valid_expression(op)
                 for op in node.operands)

    elif isinstance(node, FractionNode):
      return (isinstance(node.numerator, Node) and isinstance(node.denominator, Node)
              and ExpressionValidator.is_valid_expression(node.numerator)
              and ExpressionValidator.is_valid_expression(node.denominator))

    return False

  @staticmethod
  def is_canonical(node: Node) -> bool:
    """True if simplify() would have nothing left to do on node"""
    if not ExpressionValidator.is_valid_expression(node):
      return False
    return ExpressionValidator._is_canonical_recursive(node)

  @staticmethod
  def _is_canonical_recursive(node: Node) -> bool:
    if isinstance(node, (LiteralNode, ConstantNode)):
      return True

    elif isinstance(node, NegationNode):
      if isinstance(node.operand, NegationNode):
        return False
      return ExpressionValidator._is_canonical_recursive(node.operand)

    elif isinstance(node, SumNode):
      if len(node.operands) < 2:
        return False
      if sum(1 for op in node.operands if isinstance(op, LiteralNode)) > 1:
        return False
      if not all(ExpressionValidator._is_canonical_recursive(op) for op in node.operands):
        return False

      multiplicities, representatives = count_multiplicities(node.operands)
      for representative in representatives.values():
        if isinstance(representative, NegationNode):
          continue
        if NegationNode(representative).structural_key() in multiplicities:
          return False
      return True

    # Products and fractions have no canonical form
    return False
