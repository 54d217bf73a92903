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
==================================================
Solver adapters (:mod:`graphlc.synthesis.solvers`)
==================================================

.. currentmodule:: graphlc.synthesis.solvers

The synthesis equations are collected in an :class:`IntegerProgram`, which any
:class:`BaseSolver` can solve.  Solvers are looked up by name with :func:`get_solver`:

.. code-block:: python

    from graphlc.synthesis.solvers import get_solver

    solver = get_solver("z3", time_limit=10)
    result = solver.solve(program)
"""

from graphlc.exceptions import GraphLCError

from .program import (
    IntegerProgram,
    LinearConstraint,
    LinearExpression,
    ProgramVariable,
    QuadraticConstraint,
    VarType,
)
from .base import BaseSolver, SolverResult, SolverStatus
from .z3_solver import Z3Solver
from .gurobi_solver import GurobiSolver

SOLVERS = {
    Z3Solver.name: Z3Solver,
    GurobiSolver.name: GurobiSolver,
}

DEFAULT_SOLVER = Z3Solver.name


def get_solver(name=None, **options) -> BaseSolver:
    """Return a solver instance by name.

    Args:
        name (str): one of ``"z3"`` and ``"gurobi"``.  Defaults to ``"z3"``.
        options: keyword arguments of :class:`BaseSolver`.

    Returns:
        BaseSolver: the solver.

    Raises:
        GraphLCError: if there is no solver of that name.
    """
    name = DEFAULT_SOLVER if name is None else name
    try:
        solver_class = SOLVERS[name]
    except KeyError:
        valid = "', '".join(SOLVERS)
        raise GraphLCError(f"Unknown solver '{name}'. Choose from: '{valid}'") from None
    return solver_class(**options)


__all__ = [
    "IntegerProgram",
    "LinearConstraint",
    "LinearExpression",
    "ProgramVariable",
    "QuadraticConstraint",
    "VarType",
    "BaseSolver",
    "SolverResult",
    "SolverStatus",
    "Z3Solver",
    "GurobiSolver",
    "SOLVERS",
    "DEFAULT_SOLVER",
    "get_solver",
]
