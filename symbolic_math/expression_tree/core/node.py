import numbers
import numpy as np
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence, Tuple, Union
from .bindings import Binding, Naming, ArrayBinding, lookup_value, lookup_name
from .operators import (
  NodeType, OpType, BINARY_OP_MAP,
  apply_binary_op, apply_binary_op_array, evaluate_constant, op_symbol
)
from .tags import IdentityTag, mint
from ...logging_system import log_debug

Operand = Union['Node', float, int]


class Node(ABC):
  """Base node class. Nodes are immutable once constructed.

  Size and depth are computed when the node is built so that neither needs a
  traversal later, which keeps very deep trees usable.
  """

  __slots__ = ('_size', '_depth')

  # numpy scalars must defer to our reflected operators
  __array_ufunc__ = None

  def _init_slot(self, name: str, value):
    object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __copy__(self) -> 'Node':
    return self

  def __deepcopy__(self, memo) -> 'Node':
    return self

  @property
  @abstractmethod
  def node_type(self) -> NodeType:
    pass

  @abstractmethod
  def evaluate(self, bindings: Sequence[Binding]) -> float:
    pass

  @abstractmethod
  def evaluate_array(self, columns: Sequence[ArrayBinding], n_samples: int) -> np.ndarray:
    pass

  @abstractmethod
  def render(self, namings: Sequence[Naming]) -> str:
    pass

  def size(self) -> int:
    """Node count"""
    return self._size

  def depth(self) -> int:
    """Levels in the tree, a leaf has depth 1"""
    return self._depth

  def __add__(self, other: Operand):
    return compose(OpType.ADD, self, other)

  def __radd__(self, other: Operand):
    return compose(OpType.ADD, other, self)

  def __sub__(self, other: Operand):
    return compose(OpType.SUB, self, other)

  def __rsub__(self, other: Operand):
    return compose(OpType.SUB, other, self)

  def __mul__(self, other: Operand):
    return compose(OpType.MUL, self, other)

  def __rmul__(self, other: Operand):
    return compose(OpType.MUL, other, self)

  def __truediv__(self, other: Operand):
    return compose(OpType.DIV, self, other)

  def __rtruediv__(self, other: Operand):
    return compose(OpType.DIV, other, self)


class SymbolNode(Node):
  __slots__ = ('tag', 'label')

  def __init__(self, label: Optional[str] = None, tag: Optional[IdentityTag] = None):
    if tag is not None and not isinstance(tag, IdentityTag):
      raise TypeError(f"tag must be an IdentityTag, got {type(tag).__name__}")
    self._init_slot('tag', tag if tag is not None else mint())
    self._init_slot('label', label)
    self._init_slot('_size', 1)
    self._init_slot('_depth', 1)

  @property
  def node_type(self) -> NodeType:
    return NodeType.SYMBOL

  def bind(self, value: Union[float, str]) -> Union[Binding, Naming]:
    """Binding for a number, Naming for a string."""
    if isinstance(value, str):
      return Naming(self.tag, value)
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
      return Binding(self.tag, value)
    raise TypeError(f"cannot bind {type(value).__name__} to a symbol; expected a number or a str")

  def evaluate(self, bindings: Sequence[Binding]) -> float:
    return lookup_value(self.tag, bindings, self.label)

  def evaluate_array(self, columns: Sequence[ArrayBinding], n_samples: int) -> np.ndarray:
    return lookup_value(self.tag, columns, self.label)

  def render(self, namings: Sequence[Naming]) -> str:
    name = lookup_name(self.tag, namings)
    if name is None:
      log_debug(f"no name for symbol {self.label or repr(self.tag)}, rendering as empty text")
      return ""
    return name

  def __repr__(self) -> str:
    return f"SymbolNode({self.label!r}, {self.tag!r})"


class ConstantNode(Node):
  __slots__ = ('tag', 'value')

  def __init__(self, value: float, nameable: bool = True, tag: Optional[IdentityTag] = None):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
      raise TypeError(f"constant value must be a real number, got {type(value).__name__}")
    if tag is None and nameable:
      tag = mint()
    self._init_slot('tag', tag)
    self._init_slot('value', float(value))
    self._init_slot('_size', 1)
    self._init_slot('_depth', 1)

  @property
  def node_type(self) -> NodeType:
    return NodeType.CONSTANT

  def bind(self, name: str) -> Naming:
    if self.tag is None:
      raise TypeError("an unnamed constant cannot be bound")
    if not isinstance(name, str):
      raise TypeError(f"a constant can only be bound to a display name, got {type(name).__name__}")
    return Naming(self.tag, name)

  def evaluate(self, bindings: Sequence[Binding]) -> float:
    return self.value

  def evaluate_array(self, columns: Sequence[ArrayBinding], n_samples: int) -> np.ndarray:
    return evaluate_constant(n_samples, self.value)

  def render(self, namings: Sequence[Naming]) -> str:
    if self.tag is not None:
      name = lookup_name(self.tag, namings)
      if name:
        return name
    return repr(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  def __init__(self, operator: Union[OpType, str], left: Node, right: Node):
    if isinstance(operator, str):
      if operator not in BINARY_OP_MAP:
        raise ValueError(f"unknown binary operator: {operator!r}")
      operator = BINARY_OP_MAP[operator]
    else:
      operator = OpType(operator)
    if not isinstance(left, Node) or not isinstance(right, Node):
      raise TypeError("binary operands must be nodes")
    self._init_slot('operator', operator)
    self._init_slot('left', left)
    self._init_slot('right', right)
    self._init_slot('_size', 1 + left.size() + right.size())
    self._init_slot('_depth', 1 + max(left.depth(), right.depth()))

  @property
  def node_type(self) -> NodeType:
    return NodeType.BINARY_OP

  @property
  def symbol(self) -> str:
    return op_symbol(self.operator)

  def evaluate(self, bindings: Sequence[Binding]) -> float:
    left_val = self.left.evaluate(bindings)
    right_val = self.right.evaluate(bindings)
    return apply_binary_op(left_val, right_val, self.operator)

  def evaluate_array(self, columns: Sequence[ArrayBinding], n_samples: int) -> np.ndarray:
    left_val = self.left.evaluate_array(columns, n_samples)
    right_val = self.right.evaluate_array(columns, n_samples)
    return apply_binary_op_array(left_val, right_val, self.operator)

  def render(self, namings: Sequence[Naming]) -> str:
    return f"({self.left.render(namings)} {self.symbol} {self.right.render(namings)})"

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.symbol!r}, size={self._size})"


def as_node(operand) -> Optional[Node]:
  """Wrap a bare number into an unnamed constant, pass nodes through."""
  if isinstance(operand, Node):
    return operand
  if isinstance(operand, numbers.Real) and not isinstance(operand, bool):
    return ConstantNode(operand, nameable=False)
  return None


def compose(operator: OpType, left: Operand, right: Operand):
  left_node = as_node(left)
  right_node = as_node(right)
  if left_node is None or right_node is None:
    return NotImplemented
  return BinaryOpNode(operator, left_node, right_node)


def symbols(names: Union[str, Iterable[str]]) -> Tuple[SymbolNode, ...]:
  """Declare several symbols at once: ``x, y = symbols("x y")``."""
  if isinstance(names, str):
    names = names.replace(',', ' ').split()
  return tuple(SymbolNode(name) for name in names)


# Declaration-site spellings
Symbol = SymbolNode
Constant = ConstantNode
