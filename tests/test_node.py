"""Tests for expression nodes and operator composition."""

import copy

import pytest

from symbolic_math import (
    Symbol, Constant, symbols, Node, SymbolNode, ConstantNode, BinaryOpNode, NodeType, OpType
)


class TestDeclaration:
    """Tests for symbol and constant declaration."""

    def test_symbol_has_fresh_tag(self):
        x = Symbol("x")
        assert isinstance(x, SymbolNode)
        assert x.node_type == NodeType.SYMBOL
        assert x.label == "x"

    def test_symbol_can_share_a_tag(self):
        x = Symbol("x")
        alias = SymbolNode("other", tag=x.tag)
        assert alias.tag is x.tag

    def test_symbols_splits_names(self):
        x, y, z = symbols("x y z")
        assert [s.label for s in (x, y, z)] == ["x", "y", "z"]
        assert len({id(s.tag) for s in (x, y, z)}) == 3

    def test_symbols_accepts_commas_and_iterables(self):
        assert [s.label for s in symbols("a, b")] == ["a", "b"]
        assert [s.label for s in symbols(["p", "q"])] == ["p", "q"]

    def test_declared_constant_is_nameable(self):
        pi = Constant(3.14)
        assert isinstance(pi, ConstantNode)
        assert pi.node_type == NodeType.CONSTANT
        assert pi.tag is not None
        assert pi.value == 3.14

    def test_constant_value_is_float(self):
        assert isinstance(Constant(2).value, float)

    @pytest.mark.parametrize("value", ["1", None, True])
    def test_constant_rejects_non_numbers(self, value):
        with pytest.raises(TypeError):
            Constant(value)


class TestComposition:
    """Operators build BinaryOpNode trees."""

    @pytest.mark.parametrize("build, op", [
        (lambda x, y: x + y, OpType.ADD),
        (lambda x, y: x - y, OpType.SUB),
        (lambda x, y: x * y, OpType.MUL),
        (lambda x, y: x / y, OpType.DIV),
    ])
    def test_node_op_node(self, build, op):
        x, y = symbols("x y")
        node = build(x, y)
        assert isinstance(node, BinaryOpNode)
        assert node.node_type == NodeType.BINARY_OP
        assert node.operator == op
        assert node.left is x
        assert node.right is y

    def test_scalar_on_the_right_is_wrapped(self):
        x = Symbol("x")
        node = x * 2
        assert node.left is x
        assert isinstance(node.right, ConstantNode)
        assert node.right.value == 2.0
        assert node.right.tag is None

    def test_scalar_on_the_left_keeps_order(self):
        """Reflected operators keep the scalar as the left operand."""
        x = Symbol("x")
        for node in (2.0 + x, 2.0 * x, 2.0 - x, 2.0 / x):
            assert isinstance(node.left, ConstantNode)
            assert node.left.value == 2.0
            assert node.right is x

    def test_no_simplification(self):
        """x + 0 stays an Add node."""
        x = Symbol("x")
        node = x + 0
        assert isinstance(node, BinaryOpNode)
        assert node.operator == OpType.ADD
        assert node.size() == 3

    @pytest.mark.parametrize("other", ["a", None, True, [1]])
    def test_rejects_non_numeric_operands(self, other):
        x = Symbol("x")
        with pytest.raises(TypeError):
            x + other
        with pytest.raises(TypeError):
            other * x

    def test_operator_from_symbol_string(self):
        x, y = symbols("x y")
        assert BinaryOpNode('/', x, y).operator == OpType.DIV
        assert BinaryOpNode('-', x, y).symbol == '-'

    def test_unknown_operator_string(self):
        x, y = symbols("x y")
        with pytest.raises(ValueError):
            BinaryOpNode('^', x, y)

    def test_binary_operands_must_be_nodes(self):
        with pytest.raises(TypeError):
            BinaryOpNode(OpType.ADD, Symbol("x"), 1.0)


class TestShape:
    """Size and depth are known at construction."""

    def test_leaf_size_and_depth(self):
        assert Symbol().size() == 1
        assert Symbol().depth() == 1

    def test_composite_size_and_depth(self):
        x, y, z = symbols("x y z")
        node = 2.0 * x + (y - z) * Constant(3.0)
        assert node.size() == 9
        assert node.depth() == 4

    def test_deep_chain_builds_without_recursion(self):
        node = Symbol("x")
        for _ in range(5000):
            node = node + 1.0
        assert node.depth() == 5001
        assert node.size() == 10001


class TestImmutability:
    """Nodes cannot be changed after construction."""

    def test_attributes_are_read_only(self):
        x, y = symbols("x y")
        node = x + y
        with pytest.raises(AttributeError):
            node.left = y
        with pytest.raises(AttributeError):
            x.tag = y.tag
        with pytest.raises(AttributeError):
            Constant(1.0).value = 2.0

    def test_attributes_cannot_be_deleted(self):
        node = Symbol("x") + 1
        with pytest.raises(AttributeError):
            del node.right

    def test_copies_are_the_same_node(self):
        node = Symbol("x") * 3
        assert copy.copy(node) is node
        assert copy.deepcopy(node) is node

    def test_node_is_abstract(self):
        with pytest.raises(TypeError):
            Node()
