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

"""Tests for single-qubit binary Clifford gates."""

import functools
import itertools
import unittest

import numpy as np
from ddt import ddt, data

from graphlc.exceptions import GraphLCError
from graphlc.quantum_info import BinaryCliffordGate, Pauli, apply_local_clifford
from test import GraphLCTestCase

ALL_MATRICES = list(itertools.product((0, 1), repeat=4))
SYMPLECTIC = [entries for entries in ALL_MATRICES if BinaryCliffordGate(*entries).is_symplectic()]
GATES = {"h": BinaryCliffordGate.hadamard(), "s": BinaryCliffordGate.phase()}


@ddt
class TestBinaryCliffordGate(GraphLCTestCase):
    """Tests for BinaryCliffordGate."""

    def test_named_gates(self):
        """Test the entries of the named gates."""
        self.assertEqual(BinaryCliffordGate().to_tuple(), (1, 0, 0, 1))
        self.assertEqual(BinaryCliffordGate.identity().to_tuple(), (1, 0, 0, 1))
        self.assertEqual(BinaryCliffordGate.hadamard().to_tuple(), (0, 1, 1, 0))
        self.assertEqual(BinaryCliffordGate.phase().to_tuple(), (1, 0, 1, 1))

    def test_matrix(self):
        """Test the matrix form."""
        matrix = BinaryCliffordGate.phase().matrix
        self.assertEqual(matrix.dtype, np.uint8)
        np.testing.assert_array_equal(matrix, [[1, 0], [1, 1]])

    def test_rounds_solver_values(self):
        """Test floating point entries are rounded."""
        gate = BinaryCliffordGate(0.9999999, 1e-9, -1e-9, 1.0)
        self.assertEqual(gate, BinaryCliffordGate.identity())

    @data(2, -1, 1.6)
    def test_invalid_entry(self, value):
        """Test entries that do not round to 0 or 1 raise."""
        with self.assertRaises(GraphLCError):
            BinaryCliffordGate(value, 0, 0, 1)

    def test_six_symplectic(self):
        """Test exactly six of the sixteen binary matrices are symplectic."""
        self.assertEqual(len(SYMPLECTIC), 6)
        self.assertFalse(BinaryCliffordGate(1, 1, 1, 1).is_symplectic())
        self.assertFalse(BinaryCliffordGate(0, 0, 0, 0).is_symplectic())

    def test_apply(self):
        """Test the action on one qubit's bits."""
        self.assertEqual(BinaryCliffordGate.hadamard().apply(1, 0), (0, 1))
        self.assertEqual(BinaryCliffordGate.hadamard().apply(0, 1), (1, 0))
        self.assertEqual(BinaryCliffordGate.phase().apply(1, 0), (1, 1))
        self.assertEqual(BinaryCliffordGate.phase().apply(1, 1), (1, 0))

    def test_compose_order(self):
        """Test compose applies self first."""
        for first, second in itertools.product(SYMPLECTIC, repeat=2):
            gate1, gate2 = BinaryCliffordGate(*first), BinaryCliffordGate(*second)
            composed = gate1.compose(gate2)
            for x, z in itertools.product((0, 1), repeat=2):
                self.assertEqual(composed.apply(x, z), gate2.apply(*gate1.apply(x, z)))

    def test_involutions(self):
        """Test H and S square to the identity up to Paulis."""
        hadamard, phase = BinaryCliffordGate.hadamard(), BinaryCliffordGate.phase()
        self.assertEqual(hadamard.compose(hadamard), BinaryCliffordGate.identity())
        self.assertEqual(phase.compose(phase), BinaryCliffordGate.identity())

    @data(*SYMPLECTIC)
    def test_gate_sequence(self, entries):
        """Test the H/S sequence realizes the matrix."""
        gate = BinaryCliffordGate(*entries)
        sequence = gate.gate_sequence()
        self.assertTrue(set(sequence) <= {"h", "s"})
        realized = functools.reduce(
            lambda acc, name: acc.compose(GATES[name]), sequence, BinaryCliffordGate.identity()
        )
        self.assertEqual(realized, gate)

    def test_gate_sequence_not_symplectic(self):
        """Test a singular matrix has no gate sequence."""
        with self.assertRaises(GraphLCError):
            BinaryCliffordGate(1, 1, 1, 1).gate_sequence()

    def test_equality(self):
        """Test equality and hashing."""
        self.assertEqual(BinaryCliffordGate(0, 1, 1, 0), BinaryCliffordGate.hadamard())
        self.assertNotEqual(BinaryCliffordGate.phase(), BinaryCliffordGate.hadamard())
        self.assertEqual(len(set(BinaryCliffordGate(*e) for e in ALL_MATRICES)), 16)

    def test_repr(self):
        """Test repr and str."""
        gate = BinaryCliffordGate.phase()
        self.assertEqual(repr(gate), "BinaryCliffordGate(axx=1, axz=0, azx=1, azz=1)")
        self.assertEqual(str(gate), "1 0\n1 1")


class TestApplyLocalClifford(GraphLCTestCase):
    """Tests for apply_local_clifford."""

    def test_apply(self):
        """Test one gate per qubit."""
        gates = [BinaryCliffordGate.hadamard(), BinaryCliffordGate.identity()]
        self.assertEqual(apply_local_clifford(Pauli("XZ"), gates), Pauli("ZZ"))
        gates = [BinaryCliffordGate.phase(), BinaryCliffordGate.phase()]
        self.assertEqual(apply_local_clifford(Pauli("XZ"), gates), Pauli("YZ"))

    def test_phase_dropped(self):
        """Test the result has phase +1."""
        result = apply_local_clifford(Pauli("-Y"), [BinaryCliffordGate.identity()])
        self.assertEqual(result.phase, 0)
        self.assertEqual(str(result), "Y")

    def test_wrong_number_of_gates(self):
        """Test one gate is needed per qubit."""
        with self.assertRaises(GraphLCError):
            apply_local_clifford(Pauli("XX"), [BinaryCliffordGate.identity()])


if __name__ == "__main__":
    unittest.main()
