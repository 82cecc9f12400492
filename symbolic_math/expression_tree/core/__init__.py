"""Core expression tree components."""

from .tags import IdentityTag, mint, tag_equals
from .bindings import (
    Binding, Naming, ArrayBinding, EvaluationResult, UnresolvedSymbolError,
    lookup_value, lookup_name
)
from .node import (
    Node, SymbolNode, ConstantNode, BinaryOpNode,
    Symbol, Constant, symbols, as_node, compose
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS,
    evaluate_binary_op, evaluate_binary_op_array, apply_binary_op, apply_binary_op_array
)

__all__ = [
    'IdentityTag', 'mint', 'tag_equals',
    'Binding', 'Naming', 'ArrayBinding', 'EvaluationResult', 'UnresolvedSymbolError',
    'lookup_value', 'lookup_name',
    'Node', 'SymbolNode', 'ConstantNode', 'BinaryOpNode',
    'Symbol', 'Constant', 'symbols', 'as_node', 'compose',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS',
    'evaluate_binary_op', 'evaluate_binary_op_array', 'apply_binary_op', 'apply_binary_op_array'
]
