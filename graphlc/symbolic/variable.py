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

"""Unknown entries of the per-qubit symplectic matrices."""

from __future__ import annotations

import enum
import functools
from dataclasses import dataclass

import sympy


class Block(enum.Enum):
    """Entry of a 2x2 symplectic matrix that a variable stands for."""

    XX = "xx"
    XZ = "xz"
    ZX = "zx"
    ZZ = "zz"

    @property
    def prefix(self) -> str:
        """Symbol name prefix, e.g. ``"axz"``."""
        return "a" + self.value


@functools.total_ordering
@dataclass(frozen=True)
class Variable:
    """The unknown entry ``block`` of the symplectic matrix of ``qubit``.

    Variables are ordered by :attr:`name`.
    """

    block: Block
    qubit: int

    @property
    def name(self) -> str:
        """Name of the variable, e.g. ``"azx3"``."""
        return f"{self.block.prefix}{self.qubit}"

    @property
    def symbol(self) -> sympy.Symbol:
        """The sympy symbol of the same name."""
        return sympy.Symbol(self.name)

    def __lt__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return self.name < other.name

    def __str__(self):
        return self.name
