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
Solver-agnostic description of an integer program.

The program only records variables and constraints by name.  The solver adapters translate it
into the model objects of their library, so the formulation of the synthesis problem does not
depend on any solver being installed.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Optional

import sympy

from graphlc.exceptions import GraphLCError


def _to_fraction(value) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, sympy.Basic):
        if not value.is_number:
            raise GraphLCError(f"Coefficient '{value}' is not a number.")
        return Fraction(str(value))
    return Fraction(value)


class VarType(enum.Enum):
    """Domain of a program variable."""

    BINARY = "binary"
    INTEGER = "integer"


@dataclass(frozen=True)
class ProgramVariable:
    """A named variable.  ``None`` bounds are unbounded."""

    name: str
    vartype: VarType
    lb: Optional[int] = None
    ub: Optional[int] = None

    def admits(self, value) -> bool:
        """Return True if ``value`` is an integer within the bounds."""
        if Fraction(value).denominator != 1:
            return False
        if self.lb is not None and value < self.lb:
            return False
        if self.ub is not None and value > self.ub:
            return False
        return True


class LinearExpression:
    """A linear combination of variable names with exact rational coefficients."""

    __slots__ = ("coefficients", "constant")

    def __init__(self, coefficients: Mapping | None = None, constant=0):
        self.coefficients: dict[str, Fraction] = {}
        for name, coefficient in (coefficients or {}).items():
            coefficient = _to_fraction(coefficient)
            if coefficient:
                self.coefficients[name] = coefficient
        self.constant = _to_fraction(constant)

    @property
    def variables(self) -> tuple[str, ...]:
        """Names of the variables with a non-zero coefficient."""
        return tuple(self.coefficients)

    def evaluate(self, values: Mapping) -> Fraction:
        """Value of the expression for the given variable values."""
        total = self.constant
        for name, coefficient in self.coefficients.items():
            total += coefficient * _to_fraction(values[name])
        return total

    def __add__(self, other):
        if isinstance(other, LinearExpression):
            coefficients = dict(self.coefficients)
            for name, coefficient in other.coefficients.items():
                coefficients[name] = coefficients.get(name, 0) + coefficient
            return LinearExpression(coefficients, self.constant + other.constant)
        try:
            other = _to_fraction(other)
        except (TypeError, ValueError, GraphLCError):
            return NotImplemented
        return LinearExpression(self.coefficients, self.constant + other)

    __radd__ = __add__

    def __neg__(self):
        return self * -1

    def __sub__(self, other):
        return self + (-other)

    def __rsub__(self, other):
        return (-self) + other

    def __mul__(self, other):
        try:
            other = _to_fraction(other)
        except (TypeError, ValueError, GraphLCError):
            return NotImplemented
        return LinearExpression(
            {name: coefficient * other for name, coefficient in self.coefficients.items()},
            self.constant * other,
        )

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, LinearExpression):
            return NotImplemented
        return self.coefficients == other.coefficients and self.constant == other.constant

    def __repr__(self):
        parts = [f"{coefficient}*{name}" for name, coefficient in self.coefficients.items()]
        if self.constant or not parts:
            parts.append(str(self.constant))
        return f"LinearExpression({' + '.join(parts)})"


@dataclass
class LinearConstraint:
    """``expression == rhs``."""

    name: str
    expression: LinearExpression
    rhs: Fraction = Fraction(0)

    def is_satisfied(self, values: Mapping) -> bool:
        return self.expression.evaluate(values) == self.rhs


@dataclass
class QuadraticConstraint:
    """``sum(c * x * y for (x, y), c in quadratic) + linear == rhs``."""

    name: str
    quadratic: dict = field(default_factory=dict)
    linear: LinearExpression = field(default_factory=LinearExpression)
    rhs: Fraction = Fraction(0)

    def is_satisfied(self, values: Mapping) -> bool:
        total = self.linear.evaluate(values)
        for (first, second), coefficient in self.quadratic.items():
            total += coefficient * _to_fraction(values[first]) * _to_fraction(values[second])
        return total == self.rhs


class IntegerProgram:
    """A feasibility problem over binary and integer variables.

    Constraints are equalities, linear or quadratic.  The objective is the constant zero, so any
    feasible point is optimal.

    Example::

        program = IntegerProgram("example")
        program.binary_var("a")
        program.integer_var("k")
        program.linear_constraint(LinearExpression({"a": 2, "k": -2}), name="even")
    """

    def __init__(self, name: str = "program"):
        self.name = name
        self._variables: dict[str, ProgramVariable] = {}
        self.linear_constraints: list[LinearConstraint] = []
        self.quadratic_constraints: list[QuadraticConstraint] = []

    def _add_variable(self, variable: ProgramVariable) -> ProgramVariable:
        if variable.name in self._variables:
            raise GraphLCError(f"Variable '{variable.name}' is already defined.")
        self._variables[variable.name] = variable
        return variable

    def binary_var(self, name: str) -> ProgramVariable:
        """Add a variable taking the values 0 and 1."""
        return self._add_variable(ProgramVariable(name, VarType.BINARY, 0, 1))

    def integer_var(self, name: str, lb: Optional[int] = None, ub: Optional[int] = None):
        """Add an integer variable, unbounded unless bounds are given."""
        return self._add_variable(ProgramVariable(name, VarType.INTEGER, lb, ub))

    def _check_names(self, names, constraint: str):
        unknown = [name for name in names if name not in self._variables]
        if unknown:
            raise GraphLCError(f"Constraint '{constraint}' uses undefined variables {unknown}.")

    def linear_constraint(
        self, expression: LinearExpression, rhs=0, name: Optional[str] = None
    ) -> LinearConstraint:
        """Add the constraint ``expression == rhs``.

        Raises:
            GraphLCError: if the expression uses a variable that was not added.
        """
        if name is None:
            name = f"c{len(self.linear_constraints)}"
        self._check_names(expression.variables, name)
        constraint = LinearConstraint(name, expression, _to_fraction(rhs))
        self.linear_constraints.append(constraint)
        return constraint

    def quadratic_constraint(
        self,
        quadratic: Mapping,
        linear: LinearExpression | None = None,
        rhs=0,
        name: Optional[str] = None,
    ) -> QuadraticConstraint:
        """Add the constraint ``sum(c * x * y) + linear == rhs``.

        Args:
            quadratic: mapping from pairs of variable names to coefficients.
            linear: optional linear part.
            rhs: right-hand side.
            name: constraint name.

        Raises:
            GraphLCError: if the constraint uses a variable that was not added.
        """
        if name is None:
            name = f"q{len(self.quadratic_constraints)}"
        linear = linear if linear is not None else LinearExpression()
        quadratic = {tuple(pair): _to_fraction(c) for pair, c in quadratic.items()}
        self._check_names([var for pair in quadratic for var in pair], name)
        self._check_names(linear.variables, name)
        constraint = QuadraticConstraint(name, quadratic, linear, _to_fraction(rhs))
        self.quadratic_constraints.append(constraint)
        return constraint

    @property
    def variables(self) -> tuple[ProgramVariable, ...]:
        """Variables in the order they were added."""
        return tuple(self._variables.values())

    def get_variable(self, name: str) -> ProgramVariable:
        """Return the variable called ``name``."""
        try:
            return self._variables[name]
        except KeyError:
            raise GraphLCError(f"Unknown variable '{name}'.") from None

    def is_feasible(self, values: Mapping) -> bool:
        """Return True if ``values`` assigns every variable and satisfies all constraints."""
        for variable in self._variables.values():
            if variable.name not in values or not variable.admits(values[variable.name]):
                return False
        return all(c.is_satisfied(values) for c in self.linear_constraints) and all(
            c.is_satisfied(values) for c in self.quadratic_constraints
        )

    def __repr__(self):
        return (
            f"<IntegerProgram '{self.name}': {len(self._variables)} variables, "
            f"{len(self.linear_constraints)} linear and "
            f"{len(self.quadratic_constraints)} quadratic constraints>"
        )
