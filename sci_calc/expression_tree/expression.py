from typing import Optional
import sympy as sp
from .core.node import Node, from_number
from .utils.simplifier import ExpressionSimplifier
from .utils.sympy_utils import SymPyVerifier, parse_expression
from .utils.tree_utils import calculate_tree_depth
from .utils.validator import ExpressionValidator


class Expression:
  """Owned expression tree with cached rendering"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root):
    self.root: Node = from_number(root)
    self._string_cache: Optional[str] = None

  def evaluate(self) -> float:
    return self.root.evaluate()

  def simplify(self) -> 'Expression':
    return Expression(ExpressionSimplifier.simplify(self.root))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def copy(self) -> 'Expression':
    return Expression(self.root.copy())

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def is_canonical(self) -> bool:
    return ExpressionValidator.is_canonical(self.root)

  def clear_cache(self):
    """Clear cached values"""
    self._string_cache = None

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return SymPyVerifier().latex_representation(self.root)

  def is_equivalent(self, other) -> bool:
    """Exact (symbolic) value equality, unlike == which is structural"""
    other_root = other.root if isinstance(other, Expression) else from_number(other)
    return SymPyVerifier().is_equivalent(self.root, other_root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __float__(self) -> float:
    return float(self.root)

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if isinstance(other, Expression):
      return self.root == other.root
    return self.root == other

  @classmethod
  def from_string(cls, expr_str: str) -> 'Expression':
    """Parse arithmetic text; ``pi``/``π`` and ``e``/``E`` name the constants"""
    return cls(parse_expression(expr_str))
