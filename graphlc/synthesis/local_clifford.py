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
Synthesis of a layer of single-qubit Cliffords mapping a stabilizer state onto a graph state.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union

import numpy as np

from graphlc.exceptions import EquationError, GraphLCError, SolverError
from graphlc.quantum_info import BinaryCliffordGate, Graph, Pauli
from graphlc.symbolic import Block, SymbolTable, Term, Variable, simplified
from graphlc.user_config import get_config
from .solvers import (
    BaseSolver,
    IntegerProgram,
    LinearExpression,
    SolverResult,
    SolverStatus,
    get_solver,
)

logger = logging.getLogger(__name__)

StabilizerLike = Union[Pauli, str]


class SynthesisStatus(enum.Enum):
    """Outcome of :func:`synth_local_clifford`."""

    SUCCESS = "success"
    INFEASIBLE = "infeasible"
    SOLVER_ERROR = "solver_error"


@dataclass(frozen=True)
class LocalCliffordResult:
    """Result of a local Clifford synthesis.

    Attributes:
        status: the outcome.
        gates: one :class:`.BinaryCliffordGate` per qubit if the synthesis succeeded, else
            ``None``.
        message: explanation of a failure.

    The result is truthy only if the synthesis succeeded.
    """

    status: SynthesisStatus
    gates: Optional[tuple[BinaryCliffordGate, ...]] = None
    message: str = ""

    def __bool__(self):
        return self.status is SynthesisStatus.SUCCESS


def _as_paulis(stabilizers: Sequence[StabilizerLike], num_qubits: int) -> list[Pauli]:
    paulis = []
    for index, stabilizer in enumerate(stabilizers):
        if isinstance(stabilizer, Pauli):
            pauli = stabilizer
        elif isinstance(stabilizer, str):
            pauli = Pauli(stabilizer)
        else:
            raise GraphLCError(
                f"Stabilizer {index} must be a Pauli or a label, not {stabilizer!r}."
            )
        if pauli.num_qubits != num_qubits:
            raise GraphLCError(
                f"Stabilizer {index} ({pauli}) acts on {pauli.num_qubits} qubits, but the graph "
                f"has {num_qubits} vertices."
            )
        paulis.append(pauli)
    if not paulis:
        raise GraphLCError("At least one stabilizer generator is required.")
    return paulis


def _select_generators(
    graph: Graph, stabilizers: Sequence[StabilizerLike], num_qubits: Optional[int]
) -> list[Pauli]:
    stabilizers = list(stabilizers)
    num_vertices = graph.num_vertices
    if num_qubits is not None:
        if num_qubits != num_vertices:
            raise GraphLCError(
                f"num_qubits={num_qubits} does not match the {num_vertices} graph vertices."
            )
        # n independent generators fix the state; further ones add no constraints.
        if len(stabilizers) < num_qubits:
            raise GraphLCError(
                f"Expected at least {num_qubits} stabilizer generators, got {len(stabilizers)}."
            )
        stabilizers = stabilizers[:num_qubits]
    return _as_paulis(stabilizers, num_vertices)


def stabilizer_matrices(stabilizers: Sequence[Pauli]) -> tuple[np.ndarray, np.ndarray]:
    """Return the X and Z matrices of the generators, one column per generator.

    Args:
        stabilizers: generators on ``n`` qubits.

    Returns:
        tuple[np.ndarray, np.ndarray]: ``(R, S)`` with ``R[i, j] = stabilizers[j].x(i)`` and
        ``S[i, j] = stabilizers[j].z(i)``, both of shape ``(n, len(stabilizers))``.
    """
    num_qubits = stabilizers[0].num_qubits if stabilizers else 0
    r_matrix = np.zeros((num_qubits, len(stabilizers)), dtype=int)
    s_matrix = np.zeros((num_qubits, len(stabilizers)), dtype=int)
    for j, pauli in enumerate(stabilizers):
        for i in range(num_qubits):
            r_matrix[i, j] = pauli.x(i)
            s_matrix[i, j] = pauli.z(i)
    return r_matrix, s_matrix


def build_equations(
    graph: Graph,
    stabilizers: Sequence[StabilizerLike],
    symbols: Optional[SymbolTable] = None,
) -> np.ndarray:
    r"""Build the left-hand sides of the synthesis equations.

    With :math:`A_{xx}, A_{xz}, A_{zx}, A_{zz}` the diagonal matrices of the unknown entries of
    the per-qubit symplectic matrices, :math:`\Gamma` the adjacency matrix and :math:`R, S` the
    X and Z matrices of the generators, the transformed generators are stabilizers of the graph
    state if and only if

    .. math::

        \Gamma (A_{xx} R + A_{xz} S) + A_{zx} R + A_{zz} S \equiv 0 \pmod 2.

    The products are taken over the integers, so every entry is a linear polynomial whose
    value must be even.

    Args:
        graph: the target graph.
        stabilizers: generators, each acting on ``graph.num_vertices`` qubits.
        symbols: table to register the unknowns in.  A new table is used if omitted.

    Returns:
        np.ndarray: object array of :class:`.Term` with one row per qubit and one column per
        generator.

    Raises:
        GraphLCError: if a generator does not match the graph size.
    """
    paulis = _as_paulis(stabilizers, graph.num_vertices)
    symbols = SymbolTable() if symbols is None else symbols
    num_qubits = graph.num_vertices
    r_matrix, s_matrix = stabilizer_matrices(paulis)
    r_matrix = r_matrix.astype(object)
    s_matrix = s_matrix.astype(object)
    gamma = graph.adjacency_matrix.astype(object)

    axx = symbols.diag(Block.XX, num_qubits)
    axz = symbols.diag(Block.XZ, num_qubits)
    azx = symbols.diag(Block.ZX, num_qubits)
    azz = symbols.diag(Block.ZZ, num_qubits)

    lhs = gamma @ (axx @ r_matrix + axz @ s_matrix) + azx @ r_matrix + azz @ s_matrix
    return simplified(lhs)


def _linearize(term: Term, symbols: SymbolTable) -> LinearExpression:
    if not term.is_linear:
        raise EquationError(
            f"Equation '{term}' has product terms and cannot be passed to the solver as a "
            "linear constraint."
        )
    coefficients = {
        symbols.variable(symbol).name: coefficient
        for symbol, coefficient in term.variables.items()
    }
    return LinearExpression(coefficients, term.constant)


def _formulate(lhs: np.ndarray, symbols: SymbolTable, num_qubits: int) -> IntegerProgram:
    program = IntegerProgram(f"local_clifford_{lhs.shape[0]}x{lhs.shape[1]}")
    for qubit in range(num_qubits):
        axx, axz, azx, azz = (program.binary_var(Variable(block, qubit).name) for block in Block)
        program.quadratic_constraint(
            {(axx.name, azz.name): 1, (axz.name, azx.name): 1}, rhs=1, name=f"qc{qubit}"
        )
    for (i, j), term in np.ndenumerate(lhs):
        slack = program.integer_var(f"k{i}_{j}")
        expression = _linearize(term, symbols) * Fraction(1, 2) - LinearExpression({slack.name: 1})
        program.linear_constraint(expression, 0, name=f"eq{i}_{j}")
    return program


def formulate_local_clifford(
    graph: Graph,
    stabilizers: Sequence[StabilizerLike],
    num_qubits: Optional[int] = None,
) -> IntegerProgram:
    """Formulate the local Clifford synthesis as an integer program.

    The program has four binary variables ``axx{i}``, ``axz{i}``, ``azx{i}``, ``azz{i}`` per
    qubit, constrained by ``axx{i}*azz{i} + axz{i}*azx{i} == 1`` (``qc{i}``), so that each
    qubit's matrix is symplectic.  Every entry ``(i, j)`` of the equations of
    :func:`build_equations` is required to be even through an unbounded integer ``k{i}_{j}``
    and the constraint ``eq{i}_{j}``: ``0.5 * lhs[i, j] - k{i}_{j} == 0``.

    Args:
        graph: the target graph.
        stabilizers: generators, each acting on ``graph.num_vertices`` qubits.
        num_qubits: if given, only the first ``num_qubits`` generators are used.

    Returns:
        IntegerProgram: the program.

    Raises:
        GraphLCError: if the input is malformed.
        EquationError: if an equation is not linear.
    """
    paulis = _select_generators(graph, stabilizers, num_qubits)
    symbols = SymbolTable()
    lhs = build_equations(graph, paulis, symbols)
    return _formulate(lhs, symbols, graph.num_vertices)


def _decode(result: SolverResult, num_qubits: int) -> tuple[BinaryCliffordGate, ...]:
    return tuple(
        BinaryCliffordGate(*(result.values[Variable(block, qubit).name] for block in Block))
        for qubit in range(num_qubits)
    )


def synth_local_clifford(
    graph: Graph,
    stabilizers: Sequence[StabilizerLike],
    num_qubits: Optional[int] = None,
    *,
    solver: Union[str, BaseSolver, None] = None,
    verbose: Optional[bool] = None,
) -> LocalCliffordResult:
    """Find single-qubit Cliffords mapping a stabilizer state onto the graph state of ``graph``.

    The returned gate for qubit :math:`i` maps the X and Z components of the generators on that
    qubit, so that every transformed generator is an element of the stabilizer group of the
    graph state.  Phases of the generators are not taken into account; the gates are exact up
    to single-qubit Pauli corrections.

    Two call shapes are supported.  Without ``num_qubits`` every generator contributes
    equations.  With ``num_qubits`` equal to the number of vertices, the first ``num_qubits``
    generators are used, which suffices if they are independent.

    Args:
        graph: the target graph.
        stabilizers: generators as :class:`.Pauli` objects or labels, each acting on
            ``graph.num_vertices`` qubits.
        num_qubits: use only the first ``num_qubits`` generators.
        solver: a solver name (``"z3"`` or ``"gurobi"``) or a :class:`.BaseSolver`.  Defaults to
            the ``solver`` user setting, or ``"z3"``.
        verbose: enable the solver's output and log the equations at ``INFO`` level.  Defaults
            to the ``solver_verbose`` user setting.  A :class:`.BaseSolver` instance keeps its own
            output settings: ``verbose`` then only selects the log level, and defaults to the
            instance's ``verbose`` attribute.  The user settings are only read when ``solver``
            is not an instance.

    Returns:
        LocalCliffordResult: the gates, or the reason why there are none.

    Raises:
        GraphLCError: if the input is malformed or the solver is unknown.
        MissingOptionalLibraryError: if the requested solver is not installed.
        EquationError: if the equations could not be linearized.

    Example:

    .. code-block:: python

        from graphlc.quantum_info import Graph
        from graphlc.synthesis import synth_local_clifford

        graph = Graph.from_edges(2, [(0, 1)])
        result = synth_local_clifford(graph, ["XZ", "ZX"])
        if result:
            print([gate.gate_sequence() for gate in result.gates])
    """
    if isinstance(solver, BaseSolver):
        if verbose is None:
            verbose = solver.verbose
    else:
        config = get_config()
        if verbose is None:
            verbose = config.get("solver_verbose", False)
        if solver is None:
            solver = config.get("solver")
        solver = get_solver(
            solver,
            verbose=verbose,
            time_limit=config.get("solver_time_limit"),
            log_file=config.get("solver_log_file"),
        )
    log_level = logging.INFO if verbose else logging.DEBUG

    paulis = _select_generators(graph, stabilizers, num_qubits)
    if logger.isEnabledFor(log_level):
        r_matrix, s_matrix = stabilizer_matrices(paulis)
        logger.log(log_level, "R =\n%s", r_matrix)
        logger.log(log_level, "S =\n%s", s_matrix)

    symbols = SymbolTable()
    lhs = build_equations(graph, paulis, symbols)
    logger.log(log_level, "Equations:\n%s", lhs)
    program = _formulate(lhs, symbols, graph.num_vertices)

    try:
        result = solver.solve(program)
    except SolverError as err:
        logger.warning("Local Clifford synthesis with %r failed: %s", solver, err.message)
        return LocalCliffordResult(SynthesisStatus.SOLVER_ERROR, message=err.message)

    if result.status is SolverStatus.INFEASIBLE:
        logger.log(log_level, "No local Clifford maps the stabilizers onto the graph.")
        return LocalCliffordResult(
            SynthesisStatus.INFEASIBLE, message=result.message or "The program is infeasible."
        )
    if result.status is not SolverStatus.OPTIMAL:
        logger.warning("Solver %r did not finish: %s", solver, result.message)
        return LocalCliffordResult(SynthesisStatus.SOLVER_ERROR, message=result.message)

    try:
        gates = _decode(result, graph.num_vertices)
    except (GraphLCError, KeyError) as err:
        logger.warning("Could not decode the assignment of %r: %s", solver, err)
        return LocalCliffordResult(
            SynthesisStatus.SOLVER_ERROR, message=f"Invalid solver assignment: {err}"
        )
    invalid = [qubit for qubit, gate in enumerate(gates) if not gate.is_symplectic()]
    if invalid:
        message = f"Solver returned non-symplectic matrices on qubits {invalid}."
        logger.warning("%s", message)
        return LocalCliffordResult(SynthesisStatus.SOLVER_ERROR, message=message)

    logger.log(
        log_level,
        "Local Clifford layer: %s",
        " ".join(".".join(gate.gate_sequence()) or "id" for gate in gates),
    )
    return LocalCliffordResult(SynthesisStatus.SUCCESS, gates)


def check_local_clifford(
    graph: Graph,
    stabilizers: Sequence[StabilizerLike],
    gates: Sequence[BinaryCliffordGate],
) -> bool:
    """Return True if ``gates`` map every generator into the stabilizer group of ``graph``.

    The check evaluates the synthesis equations over GF(2) and requires every gate to be
    symplectic.  It does not involve a solver.

    Raises:
        GraphLCError: if the input is malformed or there is not one gate per qubit.
    """
    num_qubits = graph.num_vertices
    paulis = _as_paulis(stabilizers, num_qubits)
    if len(gates) != num_qubits:
        raise GraphLCError(f"Expected {num_qubits} gates, got {len(gates)}.")
    if not all(gate.is_symplectic() for gate in gates):
        return False
    r_matrix, s_matrix = stabilizer_matrices(paulis)
    entries = np.array([gate.to_tuple() for gate in gates], dtype=int).reshape(num_qubits, 4)
    x_bits = entries[:, [0]] * r_matrix + entries[:, [1]] * s_matrix
    z_bits = entries[:, [2]] * r_matrix + entries[:, [3]] * s_matrix
    syndrome = (graph.adjacency_matrix.astype(int) @ x_bits + z_bits) % 2
    return not syndrome.any()
