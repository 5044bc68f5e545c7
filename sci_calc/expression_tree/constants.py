"""Named constant expressions.

Every member of Const is exposed as a module attribute holding its wrapped
ConstantNode (``constants.PI``). The table is built once, on first access,
and is read-only afterwards.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional
import threading

from .core.node import ConstantNode
from .core.operators import Const


def constant_name(member: Const) -> str:
  """UPPER_SNAKE name under which a constant is published"""
  return member.name.upper()


# Global instance - built lazily, read-only once published
_CONSTANT_TABLE: Optional[Mapping[Const, ConstantNode]] = None
_NAME_TABLE: Optional[Mapping[str, ConstantNode]] = None
_INITIALIZED = False
_TABLE_LOCK = threading.Lock()


def _build_tables():
  global _CONSTANT_TABLE, _NAME_TABLE, _INITIALIZED
  with _TABLE_LOCK:
    if not _INITIALIZED:
      by_member = {member: ConstantNode(member) for member in Const}
      _CONSTANT_TABLE = MappingProxyType(by_member)
      _NAME_TABLE = MappingProxyType({constant_name(member): node for member, node in by_member.items()})
      _INITIALIZED = True


def get_constant_table() -> Mapping[Const, ConstantNode]:
  """Get the process-wide table from Const member to its expression"""
  # Fast path - no locking needed once initialized
  if not _INITIALIZED:
    _build_tables()
  return _CONSTANT_TABLE


def get_named_constants() -> Mapping[str, ConstantNode]:
  if not _INITIALIZED:
    _build_tables()
  return _NAME_TABLE


def get_constant(member: Const) -> ConstantNode:
  return get_constant_table()[member]


def __getattr__(name: str) -> ConstantNode:
  table = get_named_constants()
  if name in table:
    return table[name]
  raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> List[str]:
  return sorted(list(globals()) + list(get_named_constants()))
