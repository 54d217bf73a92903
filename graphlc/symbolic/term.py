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

"""
Normal form of polynomial expressions.

Expressions are built with ordinary :mod:`sympy` arithmetic on symbols and numbers.  Note that
this is arithmetic over the rationals, not over GF(2): ``x + x`` is ``2*x``.  The reduction
modulo 2 is imposed later, when each equation is required to be even.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

import numpy as np
import sympy

from graphlc.exceptions import GraphLCError
from .variable import Variable


def _symbol_name(symbol) -> str:
    return symbol.name


class Monomial:
    """A product of symbols of degree at least two with a numeric coefficient.

    ``factors`` holds ``(symbol, power)`` pairs sorted by symbol name.  A monomial never
    contains a sum.
    """

    __slots__ = ("coefficient", "factors")

    def __init__(self, coefficient, factors: Iterable[tuple[sympy.Symbol, int]]):
        self.coefficient = sympy.sympify(coefficient)
        self.factors = tuple(
            sorted(((symbol, int(power)) for symbol, power in factors), key=lambda f: f[0].name)
        )

    @property
    def degree(self) -> int:
        """Total degree."""
        return sum(power for _, power in self.factors)

    @property
    def symbols(self) -> tuple[sympy.Symbol, ...]:
        """The distinct symbols of the product."""
        return tuple(symbol for symbol, _ in self.factors)

    def to_expr(self) -> sympy.Expr:
        """The monomial as a sympy expression."""
        return self.coefficient * sympy.Mul(*(symbol**power for symbol, power in self.factors))

    def _key(self):
        return tuple((symbol.name, power) for symbol, power in self.factors)

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented
        return self.factors == other.factors and self.coefficient == other.coefficient

    def __hash__(self):
        return hash((self.coefficient, self.factors))

    def __repr__(self):
        return f"Monomial({self.to_expr()})"


class Term:
    """Simplified polynomial: a constant, linear coefficients and higher-degree products.

    Attributes:
        constant: sum of the numeric constants.
        variables: mapping from each first-degree symbol to its coefficient, sorted by name.
        products: tuple of :class:`Monomial` of degree two or more.

    A term with no ``products`` is linear, which is what a solver translation requires.
    Terms are compared structurally; construct them with :func:`simplified` so that equal
    polynomials have equal terms.
    """

    __slots__ = ("constant", "variables", "products")

    def __init__(self, constant=0, variables: Mapping | None = None, products=()):
        self.constant = sympy.sympify(constant)
        self.variables = {
            symbol: sympy.sympify(coefficient)
            for symbol, coefficient in sorted(
                (variables or {}).items(), key=lambda item: _symbol_name(item[0])
            )
            if coefficient != 0
        }
        self.products = tuple(
            sorted((p for p in products if p.coefficient != 0), key=Monomial._key)
        )

    @classmethod
    def from_expr(cls, expr) -> Term:
        """Reduce a sympy expression or number to its normal form.

        Raises:
            GraphLCError: if the expression is not a polynomial in its symbols.
        """
        expr = sympy.expand(sympy.sympify(expr))
        free_symbols = expr.free_symbols
        if free_symbols and not expr.is_polynomial(*free_symbols):
            raise GraphLCError(f"'{expr}' is not a polynomial in its symbols.")
        constant = sympy.Integer(0)
        variables = {}
        products = []
        for monomial, coefficient in expr.as_coefficients_dict().items():
            if monomial.is_number:
                constant += coefficient * monomial
                continue
            powers = monomial.as_powers_dict()
            if len(powers) == 1 and next(iter(powers.values())) == 1:
                (symbol,) = powers
                variables[symbol] = variables.get(symbol, 0) + coefficient
            else:
                products.append(Monomial(coefficient, powers.items()))
        return cls(constant, variables, products)

    def to_expr(self) -> sympy.Expr:
        """The term as a sympy expression."""
        return sympy.Add(
            self.constant,
            *(coefficient * symbol for symbol, coefficient in self.variables.items()),
            *(product.to_expr() for product in self.products),
        )

    @property
    def is_linear(self) -> bool:
        """True if the term has no products."""
        return not self.products

    @property
    def degree(self) -> int:
        """Polynomial degree, 0 for a constant term."""
        if self.products:
            return max(product.degree for product in self.products)
        return 1 if self.variables else 0

    @property
    def symbols(self) -> frozenset:
        """All symbols occurring in the term."""
        symbols = set(self.variables)
        for product in self.products:
            symbols.update(product.symbols)
        return frozenset(symbols)

    def evaluate(self, values: Mapping):
        """Evaluate the term.

        Args:
            values: values of all symbols of the term, keyed by symbol, symbol name or
                :class:`.Variable`.

        Returns:
            sympy.Number: the value of the term.

        Raises:
            GraphLCError: if a symbol of the term has no value.
        """
        substitutions = {}
        for key, value in values.items():
            if isinstance(key, Variable):
                key = key.symbol
            elif isinstance(key, str):
                key = sympy.Symbol(key)
            substitutions[key] = value
        missing = self.symbols - substitutions.keys()
        if missing:
            names = ", ".join(sorted(map(_symbol_name, missing)))
            raise GraphLCError(f"No value given for {names}.")
        return self.to_expr().xreplace({s: sympy.sympify(substitutions[s]) for s in self.symbols})

    @staticmethod
    def _operand(other):
        if isinstance(other, Term):
            return other.to_expr()
        if isinstance(other, (int, float, sympy.Basic)):
            return sympy.sympify(other)
        return None

    def __add__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return Term.from_expr(self.to_expr() + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return Term.from_expr(self.to_expr() - other)

    def __rsub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return Term.from_expr(other - self.to_expr())

    def __mul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        return Term.from_expr(self.to_expr() * other)

    __rmul__ = __mul__

    def __neg__(self):
        return Term.from_expr(-self.to_expr())

    def __eq__(self, other):
        if isinstance(other, Term):
            return (
                self.constant == other.constant
                and self.variables == other.variables
                and self.products == other.products
            )
        if isinstance(other, (int, float)):
            return not self.variables and not self.products and self.constant == other
        return NotImplemented

    def __hash__(self):
        return hash((self.constant, tuple(self.variables.items()), self.products))

    def __repr__(self):
        return f"Term({self.to_expr()})"

    def __str__(self):
        return str(self.to_expr())


def simplified(value):
    """Reduce an expression, or every entry of an array of expressions, to a :class:`Term`.

    ``simplified`` is idempotent: a :class:`Term` is returned unchanged.

    Args:
        value: a :class:`Term`, a sympy expression, a number or a :class:`numpy.ndarray` of any
            of these.

    Returns:
        Term or numpy.ndarray: the normal form, an object array of terms for array input.
    """
    if isinstance(value, Term):
        return value
    if isinstance(value, np.ndarray):
        out = np.empty(value.shape, dtype=object)
        for index, entry in np.ndenumerate(value):
            out[index] = simplified(entry)
        return out
    return Term.from_expr(value)
