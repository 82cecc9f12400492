"""Tests for the SymPy export."""

import pytest
import sympy as sp

from symbolic_math import Expression, Symbol, Constant, symbols

PI = 3.14159265358979323846


class TestToSympy:
    """Expression.to_sympy()."""

    def test_named_symbols(self):
        x, y, z = symbols("x y z")
        pi = Constant(PI)
        f = Expression(2.0 * x + (y - z) * pi)
        expr = f.to_sympy(x.bind("x"), y.bind("y"), z.bind("z"))
        assert {str(s) for s in expr.free_symbols} == {"x", "y", "z"}
        value = expr.subs({sp.Symbol("x"): 4, sp.Symbol("y"): 2, sp.Symbol("z"): 1})
        assert float(value) == pytest.approx(2.0 * 4.0 + (2.0 - 1.0) * PI)

    def test_division(self):
        x, y = symbols("x y")
        expr = Expression(x / y).to_sympy(x.bind("x"), y.bind("y"))
        value = expr.subs({sp.Symbol("x"): 3, sp.Symbol("y"): 4})
        assert float(value) == pytest.approx(0.75)

    def test_unnamed_symbols_become_dummies(self):
        x, y = symbols("x y")
        expr = Expression(x * x + y).to_sympy()
        assert len(expr.free_symbols) == 2
        assert all(isinstance(s, sp.Dummy) for s in expr.free_symbols)

    def test_structure_is_not_simplified(self):
        x = Symbol("x")
        expr = Expression(x + 0).to_sympy(x.bind("x"))
        assert isinstance(expr, sp.Add)
        assert len(expr.args) == 2

    def test_rejects_bindings(self):
        x = Symbol("x")
        with pytest.raises(TypeError):
            Expression(x).to_sympy(x.bind(1.0))

    def test_named_constant_becomes_symbol(self):
        """A constant named in the naming set exports under that name."""
        x = Symbol("x")
        pi = Constant(PI)
        expr = Expression(pi * 2 + x).to_sympy(x.bind("x"), pi.bind("pi"))
        assert {str(s) for s in expr.free_symbols} == {"x", "pi"}

    def test_unnamed_constant_stays_numeric(self):
        pi = Constant(PI)
        expr = Expression(pi * 2).to_sympy()
        assert expr.free_symbols == set()
        assert float(expr) == pytest.approx(2 * PI)

    def test_empty_constant_name_stays_numeric(self):
        c = Constant(4.0)
        expr = Expression(c * 1).to_sympy(c.bind(""))
        assert expr.free_symbols == set()
