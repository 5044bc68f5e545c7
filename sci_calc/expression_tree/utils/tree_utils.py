"""
Tree Utility Functions

Traversal and analysis helpers shared by the simplifier, the validator and
the Expression wrapper.
"""

from collections import Counter
from typing import Dict, Iterable, List, Tuple

from ..core.node import Node
from ..core.operators import NodeType


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    position = 0

    while position < len(nodes_to_visit):
        current_node = nodes_to_visit[position]
        position += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first traversal (recursive, pre-order)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Node, node_type: NodeType) -> List[Node]:
    """Find all nodes of a given kind, in breadth-first order"""
    return [n for n in get_all_nodes(node) if n.node_type == node_type]


def count_multiplicities(operands: Iterable[Node]) -> Tuple[Counter, Dict[tuple, Node]]:
    """
    Group operands into structural-equality classes.

    Returns:
        A Counter from structural key to multiplicity, and the first operand
        seen for every key. Keys are in first-occurrence order.
    """
    multiplicities: Counter = Counter()
    representatives: Dict[tuple, Node] = {}
    for operand in operands:
        key = operand.structural_key()
        multiplicities[key] += 1
        representatives.setdefault(key, operand)
    return multiplicities, representatives
