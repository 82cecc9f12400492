"""
Tree Utility Functions

Explicit-stack traversals for expression trees. The node classes evaluate and
render recursively, one Python frame per tree level; the functions here give
the same results without recursion so arbitrarily deep trees stay usable.
"""

from collections import deque
from typing import Any, Callable, Iterable, List, Sequence

import numpy as np

from ..core.bindings import ArrayBinding, Binding, Naming
from ..core.node import Node, BinaryOpNode, ConstantNode, SymbolNode
from ..core.operators import OpType, apply_binary_op, apply_binary_op_array


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
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            nodes_to_visit.append(current_node.left)
            nodes_to_visit.append(current_node.right)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left before right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)

        if isinstance(current_node, BinaryOpNode):
            stack.append(current_node.right)
            stack.append(current_node.left)

    return all_nodes


def get_symbols(node: Node) -> List[SymbolNode]:
    """
    Distinct symbols of the tree, in left-to-right order of first appearance.

    Symbols are distinct by tag: two SymbolNode objects sharing a tag count
    once.
    """
    seen = set()
    found = []
    for current_node in _depth_first_traversal(node):
        if isinstance(current_node, SymbolNode) and id(current_node.tag) not in seen:
            seen.add(id(current_node.tag))
            found.append(current_node)
    return found


def get_constants(node: Node) -> List[ConstantNode]:
    return [n for n in _depth_first_traversal(node) if isinstance(n, ConstantNode)]


def find_unresolved_symbols(node: Node, entries: Iterable[Any]) -> List[SymbolNode]:
    """
    Symbols whose tag has no entry in a binding or naming set.

    Args:
        node: Root node of the tree
        entries: Binding, Naming or ArrayBinding objects

    Returns:
        List of unresolved symbols in order of first appearance
    """
    known = {id(entry.tag) for entry in entries}
    return [symbol for symbol in get_symbols(node) if id(symbol.tag) not in known]


def reduce_tree(node: Node,
                leaf_value: Callable[[Node], Any],
                combine: Callable[[Any, Any, OpType], Any]) -> Any:
    """
    Post-order reduction with an explicit stack.

    Leaves are reduced left to right, the same order the recursive
    evaluators use, so the first failing leaf is the same in both.

    Args:
        node: Root node of the tree
        leaf_value: Called once per leaf (symbol or constant)
        combine: Called as combine(left, right, operator) per binary node

    Returns:
        The reduced value of the root
    """
    values = []
    stack = [(node, False)]

    while stack:
        current_node, expanded = stack.pop()
        if isinstance(current_node, BinaryOpNode):
            if expanded:
                right = values.pop()
                left = values.pop()
                values.append(combine(left, right, current_node.operator))
            else:
                stack.append((current_node, True))
                stack.append((current_node.right, False))
                stack.append((current_node.left, False))
        else:
            values.append(leaf_value(current_node))

    return values[0]


def evaluate_iterative(node: Node, bindings: Sequence[Binding]) -> float:
    """Non-recursive equivalent of ``node.evaluate(bindings)``."""
    return reduce_tree(node, lambda leaf: leaf.evaluate(bindings), apply_binary_op)


def evaluate_array_iterative(node: Node, columns: Sequence[ArrayBinding], n_samples: int) -> np.ndarray:
    """Non-recursive equivalent of ``node.evaluate_array(columns, n_samples)``."""
    return reduce_tree(node, lambda leaf: leaf.evaluate_array(columns, n_samples), apply_binary_op_array)


def render_iterative(node: Node, namings: Sequence[Naming]) -> str:
    """Non-recursive equivalent of ``node.render(namings)``."""
    parts = []
    stack = [node]

    while stack:
        current = stack.pop()
        if isinstance(current, str):
            parts.append(current)
        elif isinstance(current, BinaryOpNode):
            parts.append("(")
            stack.append(")")
            stack.append(current.right)
            stack.append(f" {current.symbol} ")
            stack.append(current.left)
        else:
            parts.append(current.render(namings))

    return "".join(parts)
