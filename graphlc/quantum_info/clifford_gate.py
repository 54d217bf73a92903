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

# pylint: disable=invalid-name

"""
Single-qubit Cliffords as binary symplectic matrices.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from graphlc.exceptions import GraphLCError
from .pauli import Pauli

# Representatives of the six cosets of the single-qubit Pauli group, as H/S sequences in
# circuit order, keyed by (axx, axz, azx, azz).
_GATE_SEQUENCES = {
    (1, 0, 0, 1): (),
    (0, 1, 1, 0): ("h",),
    (1, 0, 1, 1): ("s",),
    (1, 1, 0, 1): ("h", "s", "h"),
    (0, 1, 1, 1): ("h", "s"),
    (1, 1, 1, 0): ("s", "h"),
}


class BinaryCliffordGate:
    r"""The action of a single-qubit Clifford on the Pauli generators, up to phases.

    The gate is the binary matrix

    .. math::

        \begin{pmatrix} a_{xx} & a_{xz} \\ a_{zx} & a_{zz} \end{pmatrix}

    acting on the column :math:`(x, z)^T` of one qubit of a Pauli operator, i.e.
    :math:`x' = a_{xx} x + a_{xz} z` and :math:`z' = a_{zx} x + a_{zz} z` modulo 2.  It describes
    a Clifford only if it is invertible over GF(2), see :meth:`is_symplectic`.
    """

    __slots__ = ("axx", "axz", "azx", "azz")

    def __init__(self, axx=1, axz=0, azx=0, azz=1):
        """Create the gate from its four matrix entries.

        Entries may be given as floats as returned by a solver; they are rounded to the nearest
        integer.

        Raises:
            GraphLCError: if an entry does not round to 0 or 1.
        """
        entries = []
        for entry in (axx, axz, azx, azz):
            value = int(round(float(entry)))
            if value not in (0, 1):
                raise GraphLCError(f"Entries of a binary Clifford must be 0 or 1, not {entry}.")
            entries.append(value)
        self.axx, self.axz, self.azx, self.azz = entries

    @classmethod
    def identity(cls) -> BinaryCliffordGate:
        """The identity gate."""
        return cls(1, 0, 0, 1)

    @classmethod
    def hadamard(cls) -> BinaryCliffordGate:
        """The Hadamard gate, exchanging X and Z."""
        return cls(0, 1, 1, 0)

    @classmethod
    def phase(cls) -> BinaryCliffordGate:
        """The phase gate S, mapping X to Y."""
        return cls(1, 0, 1, 1)

    @property
    def matrix(self) -> np.ndarray:
        """The gate as a 2x2 ``uint8`` matrix."""
        return np.array([[self.axx, self.axz], [self.azx, self.azz]], dtype=np.uint8)

    def to_tuple(self) -> tuple[int, int, int, int]:
        """The entries as ``(axx, axz, azx, azz)``."""
        return (self.axx, self.axz, self.azx, self.azz)

    def is_symplectic(self) -> bool:
        """Return True if :math:`a_{xx} a_{zz} + a_{xz} a_{zx} \\equiv 1 \\pmod 2`."""
        return (self.axx * self.azz + self.axz * self.azx) % 2 == 1

    def apply(self, x: int, z: int) -> tuple[int, int]:
        """Map one qubit's ``(x, z)`` bits through the gate."""
        return (self.axx * x + self.axz * z) % 2, (self.azx * x + self.azz * z) % 2

    def compose(self, other: BinaryCliffordGate) -> BinaryCliffordGate:
        """Return the gate that applies ``self`` first and then ``other``."""
        return BinaryCliffordGate(*((other.matrix.astype(int) @ self.matrix) % 2).ravel())

    def gate_sequence(self) -> tuple[str, ...]:
        """A sequence of ``"h"`` and ``"s"`` gates, in circuit order, realizing this gate.

        The sequence is exact up to a Pauli correction, which does not change the binary matrix.

        Raises:
            GraphLCError: if the matrix is not symplectic.
        """
        if not self.is_symplectic():
            raise GraphLCError(f"{self!r} is not a symplectic matrix.")
        return _GATE_SEQUENCES[self.to_tuple()]

    def __eq__(self, other):
        if not isinstance(other, BinaryCliffordGate):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return f"BinaryCliffordGate(axx={self.axx}, axz={self.axz}, azx={self.azx}, azz={self.azz})"

    def __str__(self):
        return f"{self.axx} {self.axz}\n{self.azx} {self.azz}"


def apply_local_clifford(pauli: Pauli, gates: Sequence[BinaryCliffordGate]) -> Pauli:
    """Apply one binary Clifford per qubit to the bits of a Pauli operator.

    Phases are not tracked; the returned operator has phase +1.

    Args:
        pauli: the operator.
        gates: one gate per qubit of ``pauli``.

    Returns:
        Pauli: the transformed operator.

    Raises:
        GraphLCError: if the number of gates does not match the number of qubits.
    """
    if len(gates) != pauli.num_qubits:
        raise GraphLCError(
            f"Expected {pauli.num_qubits} gates for a {pauli.num_qubits}-qubit Pauli, "
            f"got {len(gates)}."
        )
    x_bits = z_bits = 0
    for qubit, gate in enumerate(gates):
        x, z = gate.apply(pauli.x(qubit), pauli.z(qubit))
        x_bits |= x << qubit
        z_bits |= z << qubit
    return Pauli.from_symplectic(x_bits, z_bits, pauli.num_qubits)
