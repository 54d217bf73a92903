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
.. currentmodule:: graphlc.utils.optionals

The equation system is handed to an external combinatorial solver.  Each supported solver
library is tested for lazily, so importing :mod:`graphlc` never imports a solver.

.. list-table::
    :widths: 25 75

    * - .. py:data:: HAS_GUROBI
      - `Gurobi <https://www.gurobi.com>`__ is a commercial mixed-integer solver.  The pip
        distribution ships with a size-limited license that is enough for small graphs.

    * - .. py:data:: HAS_Z3
      - `Z3 <https://github.com/Z3Prover/z3>`__ is a theorem prover with integer arithmetic.  It
        is the default solver and is installed with graphlc.
"""

from .lazy_tester import LazyImportTester as _LazyImportTester

HAS_GUROBI = _LazyImportTester(
    {"gurobipy": ("Env", "Model", "GRB")},
    name="gurobipy",
    install="pip install 'graphlc[gurobi]'",
    msg="A Gurobi license is needed for models beyond the size limit of the pip license",
)
HAS_Z3 = _LazyImportTester(
    {"z3": ("Solver", "Int", "sat", "unsat")},
    name="z3-solver",
    install="pip install z3-solver",
)
