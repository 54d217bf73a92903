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

"""Local Clifford synthesis onto graph states."""

from graphlc.exceptions import GraphLCError, MissingOptionalLibraryError
from graphlc.quantum_info import BinaryCliffordGate, BinaryPhase, Graph, Pauli, commutator
from graphlc.synthesis import (
    LocalCliffordResult,
    SynthesisStatus,
    check_local_clifford,
    synth_local_clifford,
)
from .version import __version__

__all__ = [
    "GraphLCError",
    "MissingOptionalLibraryError",
    "BinaryCliffordGate",
    "BinaryPhase",
    "Graph",
    "Pauli",
    "commutator",
    "LocalCliffordResult",
    "SynthesisStatus",
    "check_local_clifford",
    "synth_local_clifford",
    "__version__",
]
