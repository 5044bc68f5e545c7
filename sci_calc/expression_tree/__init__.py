"""Expression Tree Module

Arithmetic expression trees: construction, simplification and evaluation.
"""

from .expression import Expression
from .core.node import (
    Node,
    LiteralNode,
    NegationNode,
    SumNode,
    ProductNode,
    FractionNode,
    ConstantNode,
    from_number
)
from .core.operators import NodeType, Const, CONST_SYMBOLS, CONST_VALUES
from .constructors import literal, neg, add, mul, frac, constant
from .constants import get_constant, get_constant_table, get_named_constants, ZERO, PI, E
from .utils import ExpressionSimplifier, ExpressionValidator, SymPyVerifier, parse_expression

__all__ = [
    "Expression",
    "Node", "LiteralNode", "NegationNode", "SumNode", "ProductNode", "FractionNode", "ConstantNode",
    "from_number",
    "NodeType", "Const", "CONST_SYMBOLS", "CONST_VALUES",
    "literal", "neg", "add", "mul", "frac", "constant",
    "get_constant", "get_constant_table", "get_named_constants",
    "ZERO", "PI", "E",
    "ExpressionSimplifier", "ExpressionValidator", "SymPyVerifier", "parse_expression"
]
