"""Core expression tree components."""

from .node import (
    Node, LiteralNode, NegationNode, SumNode, ProductNode, FractionNode, ConstantNode,
    from_number
)
from .operators import (
    NodeType, Const, CONST_SYMBOLS, CONST_VALUES,
    evaluate_literal, evaluate_constant, evaluate_negation,
    evaluate_sum, evaluate_product, evaluate_fraction
)

__all__ = [
    'Node', 'LiteralNode', 'NegationNode', 'SumNode', 'ProductNode', 'FractionNode', 'ConstantNode',
    'from_number',
    'NodeType', 'Const', 'CONST_SYMBOLS', 'CONST_VALUES',
    'evaluate_literal', 'evaluate_constant', 'evaluate_negation',
    'evaluate_sum', 'evaluate_product', 'evaluate_fraction'
]
