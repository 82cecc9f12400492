# Python

"""Symbolic Math Package

Build arithmetic expressions from identity-tagged symbols and constants with
ordinary operators, then evaluate them numerically or render them as text.

    x, y, z = symbols("x y z")
    pi = Constant(3.14159265358979323846)
    f = Expression(2.0 * x + (y - z) * pi)
    f.evaluate(x.bind(4.0), y.bind(2.0), z.bind(1.0)).value
    f.render(x.bind("x"), y.bind("y"), z.bind("z"), pi.bind("pi"))
"""

from .expression_tree import (
  Expression, Node, SymbolNode, ConstantNode, BinaryOpNode,
  Symbol, Constant, symbols,
  IdentityTag, mint, tag_equals,
  Binding, Naming, EvaluationResult, UnresolvedSymbolError,
  NodeType, OpType
)
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "SymbolNode", "ConstantNode", "BinaryOpNode",
  "Symbol", "Constant", "symbols",
  "IdentityTag", "mint", "tag_equals",
  "Binding", "Naming", "EvaluationResult", "UnresolvedSymbolError",
  "NodeType", "OpType",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
