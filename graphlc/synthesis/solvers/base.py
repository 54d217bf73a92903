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

"""This module implements the abstract base class for solver adapters.

To add a solver, subclass :class:`BaseSolver` and implement :meth:`~BaseSolver.solve`, which
translates an :class:`.IntegerProgram` into the solver's model, runs it and reports the result
as a :class:`SolverResult`.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .program import IntegerProgram


class SolverStatus(enum.Enum):
    """Outcome of a solve."""

    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNKNOWN = "unknown"


@dataclass
class SolverResult:
    """Status and variable values returned by a solver.

    ``values`` maps variable names to numbers and is empty unless the status is
    :attr:`SolverStatus.OPTIMAL`.
    """

    status: SolverStatus
    values: dict = field(default_factory=dict)
    message: str = ""

    def __bool__(self):
        return self.status is SolverStatus.OPTIMAL


class BaseSolver(ABC):
    """Base class for solver adapters."""

    name = None

    def __init__(
        self,
        verbose: bool = False,
        time_limit: Optional[float] = None,
        log_file: Optional[str] = None,
    ):
        """
        Args:
            verbose: enable the solver library's own output.
            time_limit: wall-clock limit for one solve, in seconds.
            log_file: file the solver library writes its log to, where supported.
        """
        self.verbose = verbose
        self.time_limit = time_limit
        self.log_file = log_file

    @abstractmethod
    def solve(self, program: IntegerProgram) -> SolverResult:
        """Solve the program.

        Args:
            program: the program to solve.

        Returns:
            SolverResult: the status and, when a feasible point was found, its values.

        Raises:
            SolverError: if the solver library fails.
        """
        pass

    def __repr__(self):
        return (
            f"{type(self).__name__}(verbose={self.verbose}, time_limit={self.time_limit}, "
            f"log_file={self.log_file!r})"
        )
