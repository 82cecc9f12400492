import sympy as sp
from typing import Dict, Sequence

from ..core.bindings import Naming, lookup_name
from ..core.node import Node, ConstantNode, SymbolNode
from ..core.operators import OpType
from .tree_utils import reduce_tree


class SymPyConverter:
  """Structural export of an expression tree to SymPy.

  Everything is built with ``evaluate=False`` so the SymPy object mirrors the
  tree; no simplification takes place. Symbols and constants named in the naming set
  become ``sp.Symbol(name)``. Unnamed symbols get one ``sp.Dummy`` per tag,
  unnamed constants stay ``sp.Float``.
  """

  def __init__(self, namings: Sequence[Naming] = ()):
    self.namings = tuple(namings)
    self._dummies: Dict[int, sp.Dummy] = {}

  def convert(self, node: Node) -> sp.Expr:
    return reduce_tree(node, self._leaf, self._combine)

  def _leaf(self, node: Node) -> sp.Expr:
    if isinstance(node, SymbolNode):
      name = lookup_name(node.tag, self.namings)
      if name:
        return sp.Symbol(name)
      key = id(node.tag)
      if key not in self._dummies:
        self._dummies[key] = sp.Dummy(node.label or 's')
      return self._dummies[key]
    if isinstance(node, ConstantNode):
      name = lookup_name(node.tag, self.namings) if node.tag is not None else None
      if name:
        return sp.Symbol(name)
      return sp.Float(node.value)
    raise RuntimeWarning(f"to_sympy reached unexpected leaf {type(node)}")

  @staticmethod
  def _combine(left: sp.Expr, right: sp.Expr, operator: OpType) -> sp.Expr:
    if operator == OpType.ADD:
      return sp.Add(left, right, evaluate=False)
    elif operator == OpType.SUB:
      return sp.Add(left, sp.Mul(sp.Integer(-1), right, evaluate=False), evaluate=False)
    elif operator == OpType.MUL:
      return sp.Mul(left, right, evaluate=False)
    elif operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, sp.Integer(-1), evaluate=False), evaluate=False)
    raise RuntimeWarning(f"to_sympy reached unexpected operation {operator!r}")


def to_sympy(node: Node, namings: Sequence[Naming] = ()) -> sp.Expr:
  return SymPyConverter(namings).convert(node)
