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
Bit-packed symplectic representation of Pauli operators.
"""

from __future__ import annotations

from graphlc.exceptions import GraphLCError, InvalidOperatorStringError
from .binary_phase import BinaryPhase

_CHAR_BITS = {"I": (0, 0), "X": (1, 0), "Z": (0, 1), "Y": (1, 1)}
_BITS_CHAR = ("I", "X", "Z", "Y")


class Pauli:
    r"""An n-qubit Pauli operator with a phase.

    The operator is stored as two bit-fields, ``r`` for the X components and ``s`` for the Z
    components, where bit :math:`i` refers to qubit :math:`i`, together with a phase exponent.
    The bit-fields are Python integers, so the number of qubits is not limited by a register
    width.

    Internally the phase is kept with respect to the product :math:`X^r Z^s`, that is with
    :math:`Y` written as :math:`iXZ`.  The phase shown in labels is the conventional one, which
    differs by the number of :math:`Y` factors modulo 4::

        Pauli("Y").xz_phase == BinaryPhase(1)
        Pauli("Y").phase == BinaryPhase(0)

    Labels are read left to right, the first character being qubit 0, with an optional phase
    prefix ``i``, ``-i`` or ``-``::

        Pauli("XIIXZ")
        Pauli("-iZZ")

    Paulis compare and hash by value, but :meth:`set_x`, :meth:`set_z`, :meth:`increase_phase`
    and :meth:`decrease_phase` modify the operator in place.  An operator used as a set member or
    dictionary key must not be modified afterwards; store a copy made with ``Pauli(pauli)``
    instead.
    """

    __slots__ = ("_r", "_s", "_num_qubits", "_phase")

    def __init__(self, data: str | int | Pauli = 1):
        """Initialize the Pauli.

        Args:
            data: a label, a number of qubits (giving the identity) or another Pauli to copy.

        Raises:
            InvalidOperatorStringError: if the label contains invalid characters.
            GraphLCError: if ``data`` has an unsupported type or a negative size.
        """
        self._r = 0
        self._s = 0
        self._phase = BinaryPhase(0)
        if isinstance(data, Pauli):
            self._r, self._s, self._num_qubits, self._phase = (
                data._r,
                data._s,
                data._num_qubits,
                data._phase,
            )
        elif isinstance(data, str):
            self._num_qubits = 0
            self._from_label(data)
        elif isinstance(data, int) and not isinstance(data, bool):
            if data < 0:
                raise GraphLCError(f"Number of qubits must be non-negative, not {data}.")
            self._num_qubits = data
        else:
            raise GraphLCError(f"Invalid input data for Pauli: {data!r}")

    @classmethod
    def single_x(cls, num_qubits: int, qubit: int) -> Pauli:
        """Return the operator with a single X at ``qubit``, e.g. ``IIXIII``."""
        pauli = cls(num_qubits)
        pauli.set_x(qubit, 1)
        return pauli

    @classmethod
    def single_z(cls, num_qubits: int, qubit: int) -> Pauli:
        """Return the operator with a single Z at ``qubit``, e.g. ``IIZIII``."""
        pauli = cls(num_qubits)
        pauli.set_z(qubit, 1)
        return pauli

    @classmethod
    def from_symplectic(
        cls, x: int, z: int, num_qubits: int, phase: int | BinaryPhase = 0
    ) -> Pauli:
        """Construct a Pauli from its bit-fields.

        Args:
            x: X bit-field, bit :math:`i` for qubit :math:`i`.
            z: Z bit-field.
            num_qubits: number of qubits.
            phase: phase in the label convention (``-iY`` for ``XZ``).

        Returns:
            Pauli: the operator.

        Raises:
            GraphLCError: if the bit-fields have bits beyond ``num_qubits``.
        """
        pauli = cls(num_qubits)
        mask = (1 << num_qubits) - 1
        if x & ~mask or z & ~mask:
            raise GraphLCError(f"Bit-fields do not fit into {num_qubits} qubits.")
        pauli._r = x
        pauli._s = z
        pauli._phase = BinaryPhase(phase) + pauli._count_y()
        return pauli

    def _from_label(self, label: str):
        if label.startswith("i"):
            prefix, body = 1, label[1:]
        elif label.startswith("-i"):
            prefix, body = 3, label[2:]
        elif label.startswith("-"):
            prefix, body = 2, label[1:]
        else:
            prefix, body = 0, label
        self._num_qubits = len(body)
        for qubit, char in enumerate(body):
            try:
                x, z = _CHAR_BITS[char]
            except KeyError:
                raise InvalidOperatorStringError(
                    f"Pauli label must only consist of 'I', 'X', 'Y' or 'Z' after an optional "
                    f"phase prefix, but '{label}' has '{char}' at position {qubit}."
                ) from None
            self._r |= x << qubit
            self._s |= z << qubit
        self._phase = BinaryPhase(prefix) + self._count_y()

    def _count_y(self) -> int:
        # Phase accumulated by writing every Y as iXZ.
        return (self._r & self._s).bit_count()

    def _check_qubit(self, qubit: int):
        if not 0 <= qubit < self._num_qubits:
            raise IndexError(f"Qubit index {qubit} out of range for {self._num_qubits} qubits.")

    @property
    def num_qubits(self) -> int:
        """Number of qubits."""
        return self._num_qubits

    def __len__(self):
        return self._num_qubits

    def x(self, qubit: int) -> int:
        """Return 1 if the operator has an X or Y at ``qubit``, else 0."""
        self._check_qubit(qubit)
        return (self._r >> qubit) & 1

    def z(self, qubit: int) -> int:
        """Return 1 if the operator has a Z or Y at ``qubit``, else 0."""
        self._check_qubit(qubit)
        return (self._s >> qubit) & 1

    def set_x(self, qubit: int, value: int):
        """Set the X component at ``qubit``.  The behavior is unspecified if value is not 0 or 1."""
        self._check_qubit(qubit)
        self._r ^= (-value ^ self._r) & (1 << qubit)

    def set_z(self, qubit: int, value: int):
        """Set the Z component at ``qubit``.  The behavior is unspecified if value is not 0 or 1."""
        self._check_qubit(qubit)
        self._s ^= (-value ^ self._s) & (1 << qubit)

    @property
    def phase(self) -> BinaryPhase:
        """Phase of the operator when XZ is represented as -iY."""
        return self._phase - self._count_y()

    @property
    def xz_phase(self) -> BinaryPhase:
        """Phase of the operator when Y is represented as iXZ."""
        return self._phase

    def increase_phase(self, phase_inc: int):
        """Multiply the operator by :math:`i^{phase\\_inc}`."""
        self._phase += phase_inc

    def decrease_phase(self, phase_dec: int):
        """Multiply the operator by :math:`i^{-phase\\_dec}`."""
        self._phase -= phase_dec

    def pauli_weight(self) -> int:
        """Number of non-identity single-qubit factors."""
        return (self._r | self._s).bit_count()

    def identity_count(self) -> int:
        """Number of identity single-qubit factors."""
        return self._num_qubits - self.pauli_weight()

    @property
    def x_string(self) -> int:
        """X components as a bit-field, e.g. ``XYZI -> 0b0011`` (qubit 0 is bit 0)."""
        return self._r

    @property
    def z_string(self) -> int:
        """Z components as a bit-field, e.g. ``XYZI -> 0b0110``."""
        return self._s

    @property
    def identity_string(self) -> int:
        """Bit-field with a 1 for each identity factor, e.g. ``XYZI -> 0b1000``."""
        return ~(self._r | self._s) & ((1 << self._num_qubits) - 1)

    def to_label(self) -> str:
        """Return the ``IXYZ`` string of the operator without its phase."""
        return "".join(
            _BITS_CHAR[((self._r >> qubit) & 1) + 2 * ((self._s >> qubit) & 1)]
            for qubit in range(self._num_qubits)
        )

    def commutes(self, other: Pauli) -> bool:
        """Return True if the operator commutes with ``other``."""
        return commutator(self, other) == 0

    def __eq__(self, other):
        if not isinstance(other, Pauli):
            return NotImplemented
        return (
            self._r == other._r
            and self._s == other._s
            and self._num_qubits == other._num_qubits
            and self._phase == other._phase
        )

    def __hash__(self):
        return hash((self._r, self._s, self._num_qubits, self._phase.value))

    def __str__(self):
        return self.phase.to_label() + self.to_label()

    def __repr__(self):
        return f"Pauli('{self}')"


def commutator(p1: Pauli, p2: Pauli) -> int:
    """Commutator of two Pauli operators in binary form.

    Args:
        p1: first operator.
        p2: second operator.

    Returns:
        int: 0 if ``p1`` and ``p2`` commute, 1 if they anticommute.

    Raises:
        GraphLCError: if the operators act on different numbers of qubits.
    """
    if p1.num_qubits != p2.num_qubits:
        raise GraphLCError(
            f"Pauli operators act on different numbers of qubits "
            f"({p1.num_qubits} vs {p2.num_qubits})."
        )
    return ((p1.x_string & p2.z_string) ^ (p2.x_string & p1.z_string)).bit_count() & 1
