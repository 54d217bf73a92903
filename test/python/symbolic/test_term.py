# This code is a Qiskit project.
#
# (C) Copyright IBM 2026.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Tests for the normal form of polynomial expressions."""

import unittest

import numpy as np
import sympy
from ddt import ddt, data

from graphlc.exceptions import GraphLCError
from graphlc.symbolic import Block, Monomial, Term, Variable, simplified
from test import GraphLCTestCase

x, y, z = sympy.symbols("x y z")


@ddt
class TestSimplified(GraphLCTestCase):
    """Tests for simplified."""

    def test_constant(self):
        """Test a number becomes a constant term."""
        term = simplified(3)
        self.assertEqual(term.constant, 3)
        self.assertEqual(term.variables, {})
        self.assertEqual(term.products, ())
        self.assertEqual(term.degree, 0)
        self.assertTrue(term.is_linear)
        self.assertEqual(term, 3)

    def test_collects_linear(self):
        """Test first-degree coefficients are collected over the integers."""
        term = simplified(x + x + 2 * y - y + 1 + 4)
        self.assertEqual(term.variables, {x: 2, y: 1})
        self.assertEqual(term.constant, 5)
        self.assertTrue(term.is_linear)
        self.assertEqual(term.degree, 1)

    def test_cancellation(self):
        """Test cancelling terms disappear."""
        term = simplified(x - x)
        self.assertEqual(term.variables, {})
        self.assertEqual(term, 0)

    def test_rational_coefficient(self):
        """Test coefficients are exact."""
        term = simplified(x / 2)
        self.assertEqual(term.variables, {x: sympy.Rational(1, 2)})

    def test_products(self):
        """Test higher-degree monomials are kept separately."""
        term = simplified(x * y + 2 * x - 1)
        self.assertEqual(term.variables, {x: 2})
        self.assertEqual(term.constant, -1)
        self.assertEqual(term.products, (Monomial(1, [(x, 1), (y, 1)]),))
        self.assertFalse(term.is_linear)
        self.assertEqual(term.degree, 2)

    def test_expands(self):
        """Test products of sums are expanded."""
        term = simplified((x + 1) ** 2)
        self.assertEqual(term.constant, 1)
        self.assertEqual(term.variables, {x: 2})
        self.assertEqual(term.products, (Monomial(1, [(x, 2)]),))
        self.assertEqual(term.products[0].degree, 2)

    def test_degree_three(self):
        """Test the degree of a cubic term."""
        term = simplified(3 * x * y * z + x)
        self.assertEqual(term.degree, 3)
        self.assertEqual(term.products[0].coefficient, 3)
        self.assertEqual(term.products[0].symbols, (x, y, z))

    def test_idempotent(self):
        """Test a term is returned unchanged."""
        term = simplified(x * y + x)
        self.assertIs(simplified(term), term)
        self.assertEqual(simplified(term.to_expr()), term)

    @data(x * y + 2 * x - 1, (x + y) ** 3 - x, 0 * x + 7, (x + 1) * (y - 1) / 4)
    def test_value_preserving(self, expr):
        """Test the term equals the expanded expression."""
        term = simplified(expr)
        self.assertEqual(sympy.expand(term.to_expr() - expr), 0)

    @data(1 / x, sympy.sin(x), sympy.sqrt(x), x ** sympy.Rational(1, 2) + y)
    def test_not_polynomial(self, expr):
        """Test non-polynomial input raises."""
        with self.assertRaises(GraphLCError):
            simplified(expr)

    def test_array(self):
        """Test arrays are simplified elementwise."""
        array = np.array([[x + x, 0], [y * y, 1]], dtype=object)
        result = simplified(array)
        self.assertEqual(result.shape, (2, 2))
        self.assertEqual(result.dtype, object)
        for entry in result.flat:
            self.assertIsInstance(entry, Term)
        self.assertEqual(result[0, 0].variables, {x: 2})
        self.assertFalse(result[1, 0].is_linear)
        self.assertEqual(result[1, 1], 1)

    def test_symbols(self):
        """Test the symbols of a term."""
        self.assertEqual(simplified(x * y + z + 1).symbols, frozenset({x, y, z}))
        self.assertEqual(simplified(2).symbols, frozenset())


class TestTermArithmetic(GraphLCTestCase):
    """Tests for arithmetic on terms."""

    def test_add_sub(self):
        """Test addition and subtraction with terms and numbers."""
        first, second = simplified(x + 1), simplified(x - y)
        self.assertEqual(first + second, simplified(2 * x - y + 1))
        self.assertEqual(first - second, simplified(y + 1))
        self.assertEqual(first + 2, simplified(x + 3))
        self.assertEqual(2 + first, simplified(x + 3))
        self.assertEqual(1 - first, simplified(-x))
        self.assertEqual(-first, simplified(-x - 1))

    def test_mul(self):
        """Test multiplication yields products."""
        product = simplified(x + 1) * simplified(y)
        self.assertEqual(product, simplified(x * y + y))
        self.assertEqual(3 * simplified(x), simplified(3 * x))

    def test_invalid_operand(self):
        """Test unsupported operands raise TypeError."""
        with self.assertRaises(TypeError):
            _ = simplified(x) + "x"

    def test_hash(self):
        """Test equal terms hash equally."""
        self.assertEqual(hash(simplified(x + y)), hash(simplified(y + x)))

    def test_str(self):
        """Test str and repr."""
        self.assertEqual(str(simplified(2 * x)), "2*x")
        self.assertEqual(repr(simplified(2 * x)), "Term(2*x)")


class TestTermEvaluate(GraphLCTestCase):
    """Tests for Term.evaluate."""

    def test_evaluate(self):
        """Test evaluation with symbols and names as keys."""
        term = simplified(x * y + 2 * x - 1)
        self.assertEqual(term.evaluate({x: 1, "y": 3}), 4)

    def test_evaluate_variable_keys(self):
        """Test evaluation keyed by Variable."""
        axx0 = Variable(Block.XX, 0)
        term = simplified(2 * axx0.symbol + 1)
        self.assertEqual(term.evaluate({axx0: 1}), 3)

    def test_extra_values_ignored(self):
        """Test values of unrelated symbols are ignored."""
        self.assertEqual(simplified(x).evaluate({x: 2, y: 5}), 2)

    def test_missing_value(self):
        """Test a missing value raises."""
        with self.assertRaises(GraphLCError):
            simplified(x + y).evaluate({x: 1})


if __name__ == "__main__":
    unittest.main()
