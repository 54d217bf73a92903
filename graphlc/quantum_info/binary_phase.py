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

"""Phases of Pauli operators as elements of Z/4."""

from __future__ import annotations

_LABELS = ("", "i", "-", "-i")


class BinaryPhase:
    """A phase :math:`i^k` stored as the exponent :math:`k \\in \\mathbb{Z}_4`.

    Addition and subtraction act on the exponent, so ``BinaryPhase(3) + 1 == BinaryPhase(0)``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int | BinaryPhase = 0):
        self._value = int(value) % 4

    @property
    def value(self) -> int:
        """The exponent :math:`k` in :math:`\\{0, 1, 2, 3\\}`."""
        return self._value

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __add__(self, other):
        if not isinstance(other, (int, BinaryPhase)):
            return NotImplemented
        return BinaryPhase(self._value + int(other))

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, (int, BinaryPhase)):
            return NotImplemented
        return BinaryPhase(self._value - int(other))

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return BinaryPhase(other - self._value)

    def __neg__(self):
        return BinaryPhase(-self._value)

    def __eq__(self, other):
        if isinstance(other, BinaryPhase):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other % 4
        return NotImplemented

    def __hash__(self):
        return hash(("BinaryPhase", self._value))

    def to_label(self) -> str:
        """Return the phase as a Pauli label prefix: ``""``, ``"i"``, ``"-"`` or ``"-i"``."""
        return _LABELS[self._value]

    def __str__(self):
        return self.to_label()

    def __repr__(self):
        return f"BinaryPhase({self._value})"
