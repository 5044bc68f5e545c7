"""Utilities for expression trees."""

from .simplifier import ExpressionSimplifier
from .sympy_utils import SymPyVerifier, parse_expression, sympy_to_node
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, count_multiplicities
)

__all__ = [
    'ExpressionSimplifier', 'SymPyVerifier', 'ExpressionValidator',
    'parse_expression', 'sympy_to_node',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'count_multiplicities'
]
