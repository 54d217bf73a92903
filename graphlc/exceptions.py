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
Top-level exceptions (:mod:`graphlc.exceptions`)
=================================================

Exceptions
==========

All errors raised on purpose by this package are subclasses of the base:

.. autoexception:: GraphLCError

Malformed inputs are reported with more specific subclasses, so callers can
tell a bad Pauli label from a bad adjacency matrix:

.. autoexception:: InvalidOperatorStringError
.. autoexception:: InvalidGraphError

A failure inside an external solver library is wrapped in:

.. autoexception:: SolverError

A synthesis that simply has no solution is *not* an error; it is reported through
:class:`~graphlc.synthesis.LocalCliffordResult`.  In contrast, an equation that is still
non-linear when it is handed to a solver means the equation construction itself is
wrong, and fails loudly with:

.. autoexception:: EquationError

Optional solver libraries raise the following when they are used but not installed:

.. autoexception:: MissingOptionalLibraryError

Reading an invalid settings file raises:

.. autoexception:: GraphLCUserConfigError


Warnings
========

.. autoexception:: GraphLCWarning
.. autoexception:: OptionalDependencyImportWarning
"""

from typing import Optional


class GraphLCError(Exception):
    """Base class for errors raised by graphlc."""

    def __init__(self, *message):
        """Set the error message."""
        super().__init__(" ".join(message))
        self.message = " ".join(message)

    def __str__(self):
        """Return the message."""
        return repr(self.message)


class InvalidOperatorStringError(GraphLCError, ValueError):
    """Raised when a Pauli label contains characters outside ``IXYZ`` or a bad phase prefix."""


class InvalidGraphError(GraphLCError):
    """Raised when an adjacency matrix or edge list does not describe a simple graph."""


class EquationError(GraphLCError, AssertionError):
    """Raised when a synthesis equation violates the linearity contract of the solver translation.

    This indicates a bug in how the equations were built, not a property of the input.
    """


class SolverError(GraphLCError):
    """Raised when an external solver fails while building or solving a model."""


class GraphLCUserConfigError(GraphLCError):
    """Raised when an error is encountered reading a user config file."""

    message = "User config invalid"


class MissingOptionalLibraryError(GraphLCError, ImportError):
    """Raised when an optional library is missing."""

    def __init__(
        self, libname: str, name: str, pip_install: Optional[str] = None, msg: Optional[str] = None
    ) -> None:
        """Set the error message.
        Args:
            libname: Name of missing library
            name: Name of class, function, module that uses this library
            pip_install: pip install command, if any
            msg: Descriptive message, if any
        """
        message = [f"The '{libname}' library is required to use '{name}'."]
        if pip_install:
            message.append(f"You can install it with '{pip_install}'.")
        if msg:
            message.append(f" {msg}.")

        super().__init__(" ".join(message))
        self.message = " ".join(message)

    def __str__(self) -> str:
        """Return the message."""
        return repr(self.message)


class GraphLCWarning(UserWarning):
    """Common subclass of warnings for graphlc-specific warnings being raised."""


class OptionalDependencyImportWarning(GraphLCWarning):
    """Raised when an optional library raises errors during its import."""

    # Not a subclass of `ImportWarning` because those are hidden by default.
