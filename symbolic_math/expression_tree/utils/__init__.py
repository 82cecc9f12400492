"""Utilities for expression trees."""

from .sympy_utils import SymPyConverter, to_sympy
from .tree_utils import (
    get_all_nodes, get_symbols, get_constants, find_unresolved_symbols,
    reduce_tree, evaluate_iterative, evaluate_array_iterative, render_iterative
)

__all__ = [
    'SymPyConverter', 'to_sympy',
    'get_all_nodes', 'get_symbols', 'get_constants', 'find_unresolved_symbols',
    'reduce_tree', 'evaluate_iterative', 'evaluate_array_iterative', 'render_iterative'
]
