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

"""Solve integer programs with the Z3 theorem prover."""

from __future__ import annotations

import logging
import math
import time

from graphlc.exceptions import SolverError
from graphlc.utils import optionals as _optionals
from .base import BaseSolver, SolverResult, SolverStatus
from .program import IntegerProgram, LinearExpression

logger = logging.getLogger(__name__)


def _scale(coefficients) -> int:
    # Common denominator turning all rational coefficients of a constraint into integers.
    return math.lcm(*(c.denominator for c in coefficients))


class Z3Solver(BaseSolver):
    """Solver adapter for `z3 <https://github.com/Z3Prover/z3>`__.

    Variables become ``z3.Int`` constants with their bounds as constraints.  Rational
    coefficients are scaled to integers per constraint, so no real arithmetic is involved.
    Quadratic constraints put the problem into non-linear integer arithmetic, which z3 decides
    for the bounded binary products that appear here.
    """

    name = "z3"

    @_optionals.HAS_Z3.require_in_call("Z3Solver.solve")
    def solve(self, program: IntegerProgram) -> SolverResult:
        import z3

        try:
            solver = z3.Solver()
            if self.time_limit is not None:
                solver.set("timeout", int(self.time_limit * 1000))

            variables = {}
            for variable in program.variables:
                var = z3.Int(variable.name)
                variables[variable.name] = var
                if variable.lb is not None:
                    solver.add(var >= variable.lb)
                if variable.ub is not None:
                    solver.add(var <= variable.ub)

            def linear_terms(expression: LinearExpression, scale: int):
                return [
                    int(coefficient * scale) * variables[name]
                    for name, coefficient in expression.coefficients.items()
                ]

            for constraint in program.linear_constraints:
                expression = constraint.expression
                scale = _scale(
                    [*expression.coefficients.values(), expression.constant, constraint.rhs]
                )
                lhs = z3.Sum(
                    linear_terms(expression, scale) + [z3.IntVal(int(expression.constant * scale))]
                )
                solver.add(lhs == int(constraint.rhs * scale))

            for constraint in program.quadratic_constraints:
                linear = constraint.linear
                scale = _scale(
                    [
                        *constraint.quadratic.values(),
                        *linear.coefficients.values(),
                        linear.constant,
                        constraint.rhs,
                    ]
                )
                products = [
                    int(coefficient * scale) * variables[first] * variables[second]
                    for (first, second), coefficient in constraint.quadratic.items()
                ]
                lhs = z3.Sum(
                    products
                    + linear_terms(linear, scale)
                    + [z3.IntVal(int(linear.constant * scale))]
                )
                solver.add(lhs == int(constraint.rhs * scale))

            logger.debug("Solving %r with z3.", program)
            start = time.time()
            outcome = solver.check()
            elapsed = time.time() - start

            log_level = logging.INFO if self.verbose else logging.DEBUG
            logger.log(log_level, "z3 finished with '%s' in %.3f s.", outcome, elapsed)
            if self.verbose:
                logger.info("z3 statistics:\n%s", solver.statistics())

            if outcome == z3.sat:
                model = solver.model()
                values = {
                    name: model.eval(var, model_completion=True).as_long()
                    for name, var in variables.items()
                }
                return SolverResult(SolverStatus.OPTIMAL, values)
            if outcome == z3.unsat:
                return SolverResult(
                    SolverStatus.INFEASIBLE, message="z3 proved the program infeasible."
                )
            return SolverResult(
                SolverStatus.UNKNOWN, message=f"z3 gave up: {solver.reason_unknown()}"
            )
        except z3.Z3Exception as err:
            raise SolverError(f"z3 failed on {program.name}: {err}") from err
