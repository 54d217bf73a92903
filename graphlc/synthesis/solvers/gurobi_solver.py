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

"""Solve integer programs with Gurobi."""

from __future__ import annotations

import logging

from graphlc.exceptions import SolverError
from graphlc.utils import optionals as _optionals
from .base import BaseSolver, SolverResult, SolverStatus
from .program import IntegerProgram, LinearExpression, VarType

logger = logging.getLogger(__name__)


class GurobiSolver(BaseSolver):
    """Solver adapter for `gurobipy <https://www.gurobi.com>`__.

    The environment and the model are opened in ``with`` blocks, so both are disposed of, and
    the log file closed, on every exit path.  The per-qubit constraints are non-convex
    quadratic equalities, which requires ``NonConvex=2``.
    """

    name = "gurobi"

    @_optionals.HAS_GUROBI.require_in_call("GurobiSolver.solve")
    def solve(self, program: IntegerProgram) -> SolverResult:
        import gurobipy as gp
        from gurobipy import GRB

        try:
            with gp.Env(empty=True) as env:
                env.setParam("OutputFlag", int(bool(self.verbose)))
                if self.log_file:
                    env.setParam("LogFile", self.log_file)
                env.start()
                with gp.Model(program.name, env=env) as model:
                    model.setParam("NonConvex", 2)
                    if self.time_limit is not None:
                        model.setParam("TimeLimit", self.time_limit)
                    variables = self._add_variables(model, program, GRB)
                    self._add_constraints(model, program, variables, gp)
                    model.setObjective(gp.LinExpr(), GRB.MINIMIZE)

                    logger.debug("Solving %r with gurobi.", program)
                    model.optimize()
                    status = model.Status
                    log_level = logging.INFO if self.verbose else logging.DEBUG
                    logger.log(
                        log_level,
                        "gurobi finished with status %d in %.3f s.",
                        status,
                        model.Runtime,
                    )

                    if status == GRB.OPTIMAL:
                        values = {name: round(var.X) for name, var in variables.items()}
                        return SolverResult(SolverStatus.OPTIMAL, values)
                    if status in (GRB.INFEASIBLE, GRB.INF_OR_UNBD):
                        return SolverResult(
                            SolverStatus.INFEASIBLE, message="gurobi proved the program infeasible."
                        )
                    return SolverResult(
                        SolverStatus.UNKNOWN,
                        message=f"gurobi stopped with status code {status}.",
                    )
        except gp.GurobiError as err:
            raise SolverError(f"gurobi failed on {program.name}: {err}") from err

    @staticmethod
    def _add_variables(model, program: IntegerProgram, GRB):  # pylint: disable=invalid-name
        variables = {}
        for variable in program.variables:
            if variable.vartype is VarType.BINARY:
                var = model.addVar(vtype=GRB.BINARY, name=variable.name)
            else:
                var = model.addVar(
                    lb=-GRB.INFINITY if variable.lb is None else variable.lb,
                    ub=GRB.INFINITY if variable.ub is None else variable.ub,
                    vtype=GRB.INTEGER,
                    name=variable.name,
                )
            variables[variable.name] = var
        return variables

    @staticmethod
    def _add_constraints(model, program: IntegerProgram, variables, gp):
        def linear_expr(expression: LinearExpression):
            names = list(expression.coefficients)
            return gp.LinExpr(
                [float(expression.coefficients[name]) for name in names],
                [variables[name] for name in names],
            ) + float(expression.constant)

        for constraint in program.linear_constraints:
            model.addLConstr(
                linear_expr(constraint.expression),
                gp.GRB.EQUAL,
                float(constraint.rhs),
                name=constraint.name,
            )
        for constraint in program.quadratic_constraints:
            quadratic = gp.quicksum(
                float(coefficient) * variables[first] * variables[second]
                for (first, second), coefficient in constraint.quadratic.items()
            )
            model.addQConstr(
                quadratic + linear_expr(constraint.linear) == float(constraint.rhs),
                name=constraint.name,
            )
