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

"""Randomized tests of local Clifford synthesis."""
import itertools
import os
import unittest
from unittest import mock

from hypothesis import given, strategies, settings

from graphlc.quantum_info import BinaryCliffordGate, Graph, apply_local_clifford
from graphlc.synthesis import check_local_clifford, synth_local_clifford

SYMPLECTIC = [
    entries
    for entries in itertools.product((0, 1), repeat=4)
    if BinaryCliffordGate(*entries).is_symplectic()
]


@strategies.composite
def rotated_graph_states(draw, max_qubits=4):
    """A random graph and its canonical generators under random single-qubit Cliffords."""
    num_qubits = draw(strategies.integers(min_value=1, max_value=max_qubits))
    pairs = list(itertools.combinations(range(num_qubits), 2))
    edges = [pair for pair in pairs if draw(strategies.booleans())]
    graph = Graph.from_edges(num_qubits, edges)
    gates = [
        BinaryCliffordGate(*draw(strategies.sampled_from(SYMPLECTIC))) for _ in range(num_qubits)
    ]
    stabilizers = [apply_local_clifford(k, gates) for k in graph.stabilizer_generators()]
    return graph, stabilizers


class TestLocalCliffordSynthesis(unittest.TestCase):
    """Randomized synthesis tests"""

    def setUp(self):
        super().setUp()
        patcher = mock.patch.dict(os.environ, {"GRAPHLC_SETTINGS": os.devnull})
        patcher.start()
        self.addCleanup(patcher.stop)

    @given(rotated_graph_states(), strategies.booleans())
    @settings(deadline=None, max_examples=20)
    def test_rotated_graph_state(self, case, fixed):
        """Test every locally rotated graph state is mapped back onto its graph."""
        graph, stabilizers = case
        num_qubits = graph.num_vertices if fixed else None
        result = synth_local_clifford(graph, stabilizers, num_qubits)
        self.assertTrue(result, result.message)
        self.assertTrue(check_local_clifford(graph, stabilizers, result.gates))


if __name__ == "__main__":
    unittest.main()
