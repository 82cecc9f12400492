import numpy as np
from typing import List, Sequence, Union
from .core.bindings import (
  Binding, Naming, ArrayBinding, EvaluationResult, UnresolvedSymbolError, check_entries
)
from .core.node import Node, SymbolNode, as_node
from .utils.tree_utils import (
  evaluate_iterative, evaluate_array_iterative, render_iterative,
  find_unresolved_symbols, get_symbols
)
from .utils.sympy_utils import to_sympy
from ..logging_system import log_debug, log_warning
import sympy as sp

# Python's default recursion limit is 1000 frames; stay well below it
DEFAULT_MAX_RECURSIVE_DEPTH = 256
TRAVERSALS = ('auto', 'recursive', 'iterative')


class Expression:
  """Root handle over an immutable expression tree.

  ``traversal`` picks how the tree is walked: 'recursive', 'iterative', or
  'auto', which goes iterative once the tree is deeper than
  ``max_recursive_depth``. Both walks give identical results.
  """

  __slots__ = ('root', 'traversal', 'max_recursive_depth', '_iterative')

  def __init__(self, root: Union[Node, float], traversal: str = 'auto',
               max_recursive_depth: int = DEFAULT_MAX_RECURSIVE_DEPTH):
    node = as_node(root)
    if node is None:
      raise TypeError(f"cannot build an expression from {type(root).__name__}")
    if traversal not in TRAVERSALS:
      raise ValueError(f"traversal must be one of {TRAVERSALS}, got {traversal!r}")
    self.root = node
    self.traversal = traversal
    self.max_recursive_depth = max_recursive_depth
    if traversal == 'auto':
      self._iterative = node.depth() > max_recursive_depth
      if self._iterative:
        log_debug(f"expression depth {node.depth()} exceeds {max_recursive_depth}, using iterative traversal")
    else:
      self._iterative = traversal == 'iterative'
      if traversal == 'recursive' and node.depth() > max_recursive_depth:
        log_warning(f"expression depth {node.depth()} exceeds {max_recursive_depth}, recursive traversal may hit the interpreter recursion limit")

  def evaluate(self, *bindings: Binding) -> EvaluationResult:
    """Evaluate against the bindings; an unresolved symbol is returned, not raised."""
    bindings = check_entries(bindings, Binding, 'evaluate')
    try:
      if self._iterative:
        value = evaluate_iterative(self.root, bindings)
      else:
        value = self.root.evaluate(bindings)
    except UnresolvedSymbolError as error:
      log_debug(f"evaluation failed: {error}")
      return EvaluationResult(error=error)
    return EvaluationResult(value=value)

  def __call__(self, *bindings: Binding) -> float:
    return self.evaluate(*bindings).unwrap()

  def render(self, *namings: Naming) -> str:
    namings = check_entries(namings, Naming, 'render')
    if self._iterative:
      return render_iterative(self.root, namings)
    return self.root.render(namings)

  def evaluate_array(self, X: np.ndarray, symbols: Sequence[SymbolNode]) -> np.ndarray:
    """Vectorized evaluation, column ``i`` of ``X`` binds ``symbols[i]``."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
      raise ValueError(f"X must be 2-dimensional (n_samples, n_symbols), got shape {X.shape}")
    symbols = tuple(symbols)
    if X.shape[1] != len(symbols):
      raise ValueError(f"X has {X.shape[1]} columns but {len(symbols)} symbols were given")
    for symbol in symbols:
      if not isinstance(symbol, SymbolNode):
        raise TypeError(f"evaluate_array() expects SymbolNode entries, got {type(symbol).__name__}")
    columns = tuple(ArrayBinding(symbol.tag, np.array(X[:, i], dtype=np.float64))
                    for i, symbol in enumerate(symbols))
    n_samples = X.shape[0]
    if self._iterative:
      return evaluate_array_iterative(self.root, columns, n_samples)
    return self.root.evaluate_array(columns, n_samples)

  def unresolved_symbols(self, *entries) -> List[SymbolNode]:
    return find_unresolved_symbols(self.root, entries)

  def symbols(self) -> List[SymbolNode]:
    return get_symbols(self.root)

  def to_sympy(self, *namings: Naming) -> sp.Expr:
    return to_sympy(self.root, check_entries(namings, Naming, 'to_sympy'))

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return self.root.depth()

  def __repr__(self) -> str:
    return f"Expression(size={self.size()}, depth={self.depth()}, traversal={self.traversal!r})"
