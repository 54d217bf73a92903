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
Symbolic equations (:mod:`graphlc.symbolic`)
============================================

.. currentmodule:: graphlc.symbolic

The unknown symplectic matrices are represented by :mod:`sympy` symbols.  Matrix products of
symbols and binary matrices are formed with :mod:`numpy` object arrays and then reduced to a
:class:`Term` normal form, from which the linear parts are read off.

.. autosummary::
   :toctree: ../stubs/

   Block
   Variable
   SymbolTable
   Monomial
   Term

.. autofunction:: generate_symbol_vector
.. autofunction:: diag
.. autofunction:: symbol_diag
.. autofunction:: simplified
"""

from .variable import Block, Variable
from .symbols import SymbolTable, diag, generate_symbol_vector, symbol_diag
from .term import Monomial, Term, simplified

__all__ = [
    "Block",
    "Variable",
    "SymbolTable",
    "diag",
    "generate_symbol_vector",
    "symbol_diag",
    "Monomial",
    "Term",
    "simplified",
]
