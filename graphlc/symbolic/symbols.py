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
Symbol vectors and diagonal symbol matrices.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import numpy as np
import sympy

from graphlc.exceptions import EquationError
from .variable import Block, Variable


def generate_symbol_vector(num_symbols: int, prefix: str) -> list[sympy.Symbol]:
    """Return the symbols ``prefix0, ..., prefix<num_symbols - 1>``."""
    return [sympy.Symbol(f"{prefix}{i}") for i in range(num_symbols)]


def diag(vector: Sequence) -> np.ndarray:
    """Return an object matrix with ``vector`` on the diagonal and integer 0 elsewhere."""
    size = len(vector)
    matrix = np.zeros((size, size), dtype=object)
    for i, entry in enumerate(vector):
        matrix[i, i] = entry
    return matrix


def symbol_diag(num_symbols: int, prefix: str) -> np.ndarray:
    """Return the diagonal matrix of the symbols ``prefix0, ..., prefix<num_symbols - 1>``."""
    return diag(generate_symbol_vector(num_symbols, prefix))


class SymbolTable:
    """The symbols of one synthesis problem and the variables they stand for.

    Every symbol created through the table is registered with its :class:`.Variable`, so a
    symbol found in an equation can be mapped back to its block and qubit without looking at
    its name.
    """

    def __init__(self):
        self._variables: dict[sympy.Symbol, Variable] = {}

    def symbol(self, variable: Variable) -> sympy.Symbol:
        """Return the symbol of ``variable``, registering it."""
        symbol = variable.symbol
        self._variables[symbol] = variable
        return symbol

    def symbol_vector(self, block: Block, num_qubits: int) -> list[sympy.Symbol]:
        """Return the symbols of ``block`` for qubits ``0..num_qubits-1``."""
        return [self.symbol(Variable(block, qubit)) for qubit in range(num_qubits)]

    def diag(self, block: Block, num_qubits: int) -> np.ndarray:
        """Return the diagonal matrix of the symbols of ``block``."""
        return diag(self.symbol_vector(block, num_qubits))

    def variable(self, symbol: sympy.Symbol) -> Variable:
        """Return the variable a symbol stands for.

        Raises:
            EquationError: if the symbol was not created by this table.
        """
        try:
            return self._variables[symbol]
        except KeyError:
            raise EquationError(f"Symbol '{symbol}' is not an unknown of this problem.") from None

    def __contains__(self, symbol):
        return symbol in self._variables

    def __iter__(self) -> Iterator[Variable]:
        return iter(sorted(self._variables.values()))

    def __len__(self):
        return len(self._variables)
