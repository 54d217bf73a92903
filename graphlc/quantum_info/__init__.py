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
=================================================
Quantum Information (:mod:`graphlc.quantum_info`)
=================================================

.. currentmodule:: graphlc.quantum_info

Operators
=========

.. autosummary::
   :toctree: ../stubs/

   BinaryPhase
   Pauli
   BinaryCliffordGate

States
======

.. autosummary::
   :toctree: ../stubs/

   Graph

Functions
=========

.. autofunction:: commutator
.. autofunction:: apply_local_clifford
"""

from .binary_phase import BinaryPhase
from .pauli import Pauli, commutator
from .graph import Graph
from .clifford_gate import BinaryCliffordGate, apply_local_clifford

__all__ = [
    "BinaryPhase",
    "Pauli",
    "commutator",
    "Graph",
    "BinaryCliffordGate",
    "apply_local_clifford",
]
