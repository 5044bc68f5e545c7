from typing import List, Tuple
from collections import Counter
from ..core.node import (
  Node, LiteralNode, NegationNode, SumNode, ProductNode, FractionNode, ConstantNode
)
from ..core.operators import Const
from ..constants import get_constant
from .tree_utils import count_multiplicities
from ...errors import UnsupportedSimplificationError
from ...logging_system import LogLevel, log_debug, log_info


class ExpressionSimplifier:
  """Reduces expression trees to canonical form.

  Sums are simplified by cancelling every subtree against its negation
  (count-based, so repeated operands cancel pairwise) and by folding integer
  literals. Products and fractions have no rules yet and raise
  UnsupportedSimplificationError rather than pretending to be canonical.
  """

  @staticmethod
  def simplify(node: Node) -> Node:
    """Return the canonical form of node; node itself is left untouched"""
    if isinstance(node, (LiteralNode, ConstantNode)):
      return node

    if isinstance(node, NegationNode):
      return ExpressionSimplifier._simplify_negation(node)

    if isinstance(node, SumNode):
      return ExpressionSimplifier._simplify_sum(node)

    if isinstance(node, (ProductNode, FractionNode)):
      log_debug("Refusing to simplify a %s node", node.node_type.name.lower())
      raise UnsupportedSimplificationError(node.node_type)

    raise TypeError(f"Cannot simplify {type(node).__name__}")

  @staticmethod
  def _simplify_negation(node: NegationNode) -> Node:
    operand = ExpressionSimplifier.simplify(node.operand)
    if isinstance(operand, NegationNode):
      # operand is already canonical, so so is its child
      return operand.operand
    return NegationNode(operand)

  @staticmethod
  def _simplify_sum(node: SumNode) -> Node:
    operands = [ExpressionSimplifier.simplify(op) for op in node.operands]
    operands = ExpressionSimplifier._cancel_opposites(operands)
    operands, folded = ExpressionSimplifier._fold_literals(operands)
    if folded:
      # The folded literal may now cancel against a negated literal
      operands = ExpressionSimplifier._cancel_opposites(operands)
    log_info("Simplified a sum of %d operands to %d", len(node.operands), len(operands),
             level=LogLevel.DETAILED)
    return ExpressionSimplifier._collapse(operands)

  @staticmethod
  def _cancel_opposites(operands: List[Node]) -> List[Node]:
    multiplicities, representatives = count_multiplicities(operands)

    removals: Counter = Counter()
    for key, representative in representatives.items():
      # Negated classes are handled from their positive side
      if isinstance(representative, NegationNode):
        continue
      negated_key = NegationNode(representative).structural_key()
      pairs = min(multiplicities[key], multiplicities.get(negated_key, 0))
      if pairs:
        removals[key] += pairs
        removals[negated_key] += pairs
        log_debug("Cancelled %d pair(s) of %s operands", pairs, representative.node_type.name.lower())

    if not removals:
      return operands

    # Drop the leftmost occurrences of each cancelled class, keep the rest in order
    survivors = []
    for operand in operands:
      key = operand.structural_key()
      if removals[key] > 0:
        removals[key] -= 1
        continue
      survivors.append(operand)
    return survivors

  @staticmethod
  def _fold_literals(operands: List[Node]) -> Tuple[List[Node], bool]:
    first = next((i for i, op in enumerate(operands) if isinstance(op, LiteralNode)), None)
    if first is None:
      return operands, False

    total = operands[first].value
    survivors = operands[:first + 1]
    folded = 0
    for operand in operands[first + 1:]:
      if isinstance(operand, LiteralNode):
        total += operand.value
        folded += 1
      else:
        survivors.append(operand)

    if not folded:
      return operands, False

    survivors[first] = LiteralNode(total)
    log_debug("Folded %d literals into a %d-bit literal", folded + 1, total.bit_length())
    return survivors, True

  @staticmethod
  def _collapse(operands: List[Node]) -> Node:
    if not operands:
      return get_constant(Const.ZERO)
    if len(operands) == 1:
      return operands[0]
    return SumNode(operands)
