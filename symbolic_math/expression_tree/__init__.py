"""Expression Tree Module

Immutable arithmetic expression trees over identity-tagged symbols, with
numeric evaluation and fully parenthesized rendering.
"""

from .expression import Expression, DEFAULT_MAX_RECURSIVE_DEPTH
from .core.tags import IdentityTag, mint, tag_equals
from .core.bindings import (
    Binding, Naming, ArrayBinding, EvaluationResult, UnresolvedSymbolError
)
from .core.node import (
    Node,
    SymbolNode,
    ConstantNode,
    BinaryOpNode,
    Symbol,
    Constant,
    symbols
)
from .core.operators import NodeType, OpType, BINARY_OP_MAP
from .utils import (
    SymPyConverter, evaluate_iterative, render_iterative, get_all_nodes, get_symbols
)

__all__ = [
    "Expression", "DEFAULT_MAX_RECURSIVE_DEPTH",
    "IdentityTag", "mint", "tag_equals",
    "Binding", "Naming", "ArrayBinding", "EvaluationResult", "UnresolvedSymbolError",
    "Node", "SymbolNode", "ConstantNode", "BinaryOpNode",
    "Symbol", "Constant", "symbols",
    "NodeType", "OpType", "BINARY_OP_MAP",
    "SymPyConverter", "evaluate_iterative", "render_iterative", "get_all_nodes", "get_symbols"
]
