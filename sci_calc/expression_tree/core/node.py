import math
import numbers
from fractions import Fraction
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from .operators import (
  NodeType, Const, CONST_SYMBOLS,
  evaluate_literal, evaluate_constant, evaluate_negation,
  evaluate_sum, evaluate_product, evaluate_fraction
)
from ...errors import UnsupportedDomainError
from ...logging_system import log_debug

_SYMPY_CONSTANTS = {Const.ZERO: sp.S.Zero, Const.PI: sp.pi, Const.E: sp.E}


class Node(ABC):
  """Base node class for arithmetic expression trees.

  Nodes compare structurally against other nodes and numerically (through
  evaluate) against plain numbers. The arithmetic operators are cheap,
  single-step builders; use simplify() for canonical form.
  """

  __slots__ = ()

  node_type: NodeType

  @abstractmethod
  def _evaluate(self) -> np.float64:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def structural_key(self) -> tuple:
    """Hashable nested tuple identifying the tree up to syntactic equality"""
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def is_simplifiable(self) -> bool:
    pass

  def evaluate(self) -> float:
    """Recursively evaluates the expression without simplifying.

    Evaluating an unreduced tree accumulates rounding error at every node;
    for maximum precision simplify first. Never raises: invalid arithmetic
    yields inf or nan.
    """
    with np.errstate(all='ignore'):
      result = self._evaluate()
    if not np.isfinite(result):
      log_debug("Evaluation of a %s node produced %s", self.node_type.name.lower(), result)
    return float(result)

  def simplify(self) -> 'Node':
    """Reduce the expression to canonical form without mutating it"""
    from ..utils.simplifier import ExpressionSimplifier
    return ExpressionSimplifier.simplify(self)

  def size(self) -> int:
    return 1 + sum(child.size() for child in self.children())

  def __str__(self) -> str:
    return self.to_string()

  def __eq__(self, other) -> bool:
    if isinstance(other, Node):
      return self.structural_key() == other.structural_key()
    if isinstance(other, numbers.Real):
      return self.evaluate() == other
    return NotImplemented

  def __hash__(self) -> int:
    return hash(self.structural_key())

  # Ordering is only defined against plain numbers and is as approximate as evaluate()
  def __lt__(self, other) -> bool:
    if isinstance(other, numbers.Real):
      return self.evaluate() < other
    return NotImplemented

  def __le__(self, other) -> bool:
    if isinstance(other, numbers.Real):
      return self.evaluate() <= other
    return NotImplemented

  def __gt__(self, other) -> bool:
    if isinstance(other, numbers.Real):
      return self.evaluate() > other
    return NotImplemented

  def __ge__(self, other) -> bool:
    if isinstance(other, numbers.Real):
      return self.evaluate() >= other
    return NotImplemented

  def __float__(self) -> float:
    node = self.simplify() if self.is_simplifiable() else self
    return node.evaluate()

  def __add__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_sum(self, other)

  def __radd__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_sum(other, self)

  def __sub__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_sum(self, NegationNode(other))

  def __rsub__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_sum(other, NegationNode(self))

  def __mul__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_product(self, other)

  def __rmul__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return _combine_product(other, self)

  def __truediv__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return FractionNode(self, other)

  def __rtruediv__(self, other):
    other = _as_operand(other)
    if other is None:
      return NotImplemented
    return FractionNode(other, self)

  def __neg__(self) -> 'Node':
    return NegationNode(self)


class LiteralNode(Node):
  """Nonnegative exact integer; negative values are NegationNode(LiteralNode)"""

  __slots__ = ('value',)
  node_type = NodeType.LITERAL

  def __init__(self, value: int):
    self.value = value

  def _evaluate(self) -> np.float64:
    return evaluate_literal(self.value)

  def to_string(self) -> str:
    return str(self.value)

  def __repr__(self) -> str:
    return f"literal({self.value!r})"

  def copy(self) -> 'LiteralNode':
    return LiteralNode(self.value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def structural_key(self) -> tuple:
    return (NodeType.LITERAL, self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.Integer(self.value)

  def is_simplifiable(self) -> bool:
    return True


class NegationNode(Node):
  __slots__ = ('operand',)
  node_type = NodeType.NEGATION

  def __init__(self, operand: Node):
    self.operand = operand

  def _evaluate(self) -> np.float64:
    return evaluate_negation(self.operand._evaluate())

  def to_string(self) -> str:
    return f"-({self.operand.to_string()})"

  def __repr__(self) -> str:
    return f"neg({self.operand!r})"

  def copy(self) -> 'NegationNode':
    return NegationNode(self.operand.copy())

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def structural_key(self) -> tuple:
    return (NodeType.NEGATION, self.operand.structural_key())

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(sp.S.NegativeOne, self.operand.to_sympy())

  def is_simplifiable(self) -> bool:
    return self.operand.is_simplifiable()

  def __neg__(self) -> Node:
    # Single-level unwrap; simplify() performs the transitive elimination
    return self.operand


class _VariadicNode(Node):
  """Shared shape of Sum and Product: an ordered list of operands"""

  __slots__ = ('operands',)
  _separator = ''
  _empty_string = ''
  _constructor_name = ''

  def __init__(self, operands: Optional[List[Node]] = None):
    self.operands: List[Node] = list(operands) if operands is not None else []

  def to_string(self) -> str:
    if not self.operands:
      return self._empty_string
    return self._separator.join(f"({op.to_string()})" for op in self.operands)

  def __repr__(self) -> str:
    args = ', '.join(repr(op) for op in self.operands)
    return f"{self._constructor_name}({args})"

  def copy(self):
    return type(self)([op.copy() for op in self.operands])

  def children(self) -> Tuple[Node, ...]:
    return tuple(self.operands)

  def structural_key(self) -> tuple:
    return (self.node_type, tuple(op.structural_key() for op in self.operands))


class SumNode(_VariadicNode):
  __slots__ = ()
  node_type = NodeType.SUM
  _separator = ' + '
  _empty_string = '0'
  _constructor_name = 'add'

  def _evaluate(self) -> np.float64:
    return evaluate_sum(op._evaluate() for op in self.operands)

  def to_sympy(self) -> sp.Expr:
    return sp.Add(*[op.to_sympy() for op in self.operands])

  def is_simplifiable(self) -> bool:
    return all(op.is_simplifiable() for op in self.operands)


class ProductNode(_VariadicNode):
  __slots__ = ()
  node_type = NodeType.PRODUCT
  _separator = ' * '
  _empty_string = '1'
  _constructor_name = 'mul'

  def _evaluate(self) -> np.float64:
    return evaluate_product(op._evaluate() for op in self.operands)

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(*[op.to_sympy() for op in self.operands])

  def is_simplifiable(self) -> bool:
    return False


class FractionNode(Node):
  __slots__ = ('numerator', 'denominator')
  node_type = NodeType.FRACTION

  def __init__(self, numerator: Node, denominator: Node):
    self.numerator = numerator
    self.denominator = denominator

  def _evaluate(self) -> np.float64:
    return evaluate_fraction(self.numerator._evaluate(), self.denominator._evaluate())

  def to_string(self) -> str:
    return f"({self.numerator.to_string()})/({self.denominator.to_string()})"

  def __repr__(self) -> str:
    return f"frac({self.numerator!r}, {self.denominator!r})"

  def copy(self) -> 'FractionNode':
    return FractionNode(self.numerator.copy(), self.denominator.copy())

  def children(self) -> Tuple[Node, ...]:
    return (self.numerator, self.denominator)

  def structural_key(self) -> tuple:
    return (NodeType.FRACTION, self.numerator.structural_key(), self.denominator.structural_key())

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(self.numerator.to_sympy(), sp.Pow(self.denominator.to_sympy(), -1))

  def is_simplifiable(self) -> bool:
    return False


class ConstantNode(Node):
  __slots__ = ('constant',)
  node_type = NodeType.CONSTANT

  def __init__(self, constant: Const):
    self.constant = constant

  def _evaluate(self) -> np.float64:
    return evaluate_constant(self.constant)

  def to_string(self) -> str:
    return CONST_SYMBOLS[self.constant]

  def __repr__(self) -> str:
    return self.constant.name

  def copy(self) -> 'ConstantNode':
    return ConstantNode(self.constant)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def structural_key(self) -> tuple:
    return (NodeType.CONSTANT, self.constant)

  def to_sympy(self) -> sp.Expr:
    return _SYMPY_CONSTANTS[self.constant]

  def is_simplifiable(self) -> bool:
    return True


def from_number(value) -> Node:
  """Coerce a plain number into a tree, keeping literals nonnegative.

  Integers become literals (negated when negative), other finite reals
  become an exact fraction of integer literals. Nodes pass through.
  """
  if isinstance(value, Node):
    return value
  if isinstance(value, numbers.Integral):
    value = int(value)
    if value < 0:
      return NegationNode(LiteralNode(-value))
    return LiteralNode(value)
  if isinstance(value, numbers.Real):
    if not math.isfinite(value):
      log_debug("Rejected non-finite number %s", value)
      raise UnsupportedDomainError(f"cannot represent non-finite value {value} exactly")
    if isinstance(value, numbers.Rational):
      ratio = Fraction(value.numerator, value.denominator)
    else:
      ratio = Fraction(float(value))
    if ratio.denominator == 1:
      return from_number(ratio.numerator)
    return FractionNode(from_number(ratio.numerator), LiteralNode(ratio.denominator))
  if isinstance(value, numbers.Complex):
    log_debug("Rejected complex number %s", value)
    raise UnsupportedDomainError(f"complex numbers are not supported: {value}")
  raise TypeError(f"cannot convert {type(value).__name__} to an expression")


def _as_operand(value) -> Optional[Node]:
  if isinstance(value, (Node, numbers.Number)):
    return from_number(value)
  return None


def _combine_sum(left: Node, right: Node) -> Node:
  if isinstance(left, SumNode):
    return SumNode(left.operands + [right])
  if isinstance(right, SumNode):
    return SumNode(right.operands + [left])
  if isinstance(left, LiteralNode) and isinstance(right, LiteralNode):
    return LiteralNode(left.value + right.value)
  return SumNode([left, right])


def _combine_product(left: Node, right: Node) -> Node:
  if isinstance(left, ProductNode):
    return ProductNode(left.operands + [right])
  if isinstance(right, ProductNode):
    return ProductNode(right.operands + [left])
  return ProductNode([left, right])
