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
============================================
Circuit Synthesis (:mod:`graphlc.synthesis`)
============================================

.. currentmodule:: graphlc.synthesis

Local Clifford synthesis
========================

.. autofunction:: synth_local_clifford
.. autofunction:: build_equations
.. autofunction:: formulate_local_clifford
.. autofunction:: check_local_clifford
.. autofunction:: stabilizer_matrices

.. autosummary::
   :toctree: ../stubs/

   LocalCliffordResult
   SynthesisStatus

Solvers are described in :mod:`graphlc.synthesis.solvers`.
"""

from .local_clifford import (
    LocalCliffordResult,
    SynthesisStatus,
    build_equations,
    check_local_clifford,
    formulate_local_clifford,
    stabilizer_matrices,
    synth_local_clifford,
)

__all__ = [
    "LocalCliffordResult",
    "SynthesisStatus",
    "build_equations",
    "check_local_clifford",
    "formulate_local_clifford",
    "stabilizer_matrices",
    "synth_local_clifford",
]
