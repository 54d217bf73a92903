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

"""Lazy testers for optional solver libraries."""

import contextlib
import functools
import importlib
import warnings
from typing import Callable, Dict, Iterable, Optional, Union

from graphlc.exceptions import MissingOptionalLibraryError, OptionalDependencyImportWarning


class LazyImportTester:
    """A lazy tester for importable Python modules.

    Instances evaluate ``True`` in a Boolean context if every module (and every listed name
    inside it) can be imported.  The import is only attempted the first time the Boolean value
    is needed, so solver libraries that are slow to load, or that check a license on import, are
    untouched until a solver is actually requested::

        HAS_GUROBI = LazyImportTester("gurobipy", install="pip install gurobipy")

        @HAS_GUROBI.require_in_call
        def solve_with_gurobi(program):
            import gurobipy
            ...

        if HAS_GUROBI:
            ...
    """

    __slots__ = ("_bool", "_modules", "_name", "_install", "_msg")

    def __init__(
        self,
        name_map_or_modules: Union[str, Dict[str, Iterable[str]], Iterable[str]],
        *,
        name: Optional[str] = None,
        install: Optional[str] = None,
        msg: Optional[str] = None,
    ):
        """
        Args:
            name_map_or_modules: if a name map, then a dictionary where the keys are modules and
                the values are iterables of names that must be importable from that module.  If a
                string or an iterable of strings, each must be importable with ``import <module>``.
            name: the name of this optional dependency, used in error messages.
            install: how to install this optional dependency.
            msg: an extra message to include in the error raised if this is required.

        Raises:
            ValueError: if no modules are given.
        """
        if isinstance(name_map_or_modules, dict):
            self._modules = {module: tuple(names) for module, names in name_map_or_modules.items()}
        elif isinstance(name_map_or_modules, str):
            self._modules = {name_map_or_modules: ()}
        else:
            self._modules = {module: () for module in name_map_or_modules}
        if not self._modules:
            raise ValueError("no modules supplied")
        if name is None:
            name = ", ".join(self._modules)
        self._bool = None
        self._name = name
        self._install = install
        self._msg = msg

    def _is_available(self) -> bool:
        failures = []
        for module, names in self._modules.items():
            try:
                imported = importlib.import_module(module)
            except ModuleNotFoundError as exc:
                failed_parts = exc.name.split(".") if exc.name else []
                if failed_parts == module.split(".")[: len(failed_parts)]:
                    # The module itself (or a parent package) is simply not installed.
                    return False
                failures.append(f"module '{module}' failed to import with: {exc!r}")
                continue
            except ImportError as exc:
                failures.append(f"module '{module}' failed to import with: {exc!r}")
                continue
            missing = [name for name in names if not hasattr(imported, name)]
            if missing:
                failures.append(f"'{module}' imported, but {missing} couldn't be found")
        if failures:
            message = (
                f"While trying to import '{self._name}', some components were located but raised"
                " other errors during import. You might have an incompatible version installed."
                " graphlc will continue as if the optional is not available."
            )
            message += "".join(f"\n - {failure}" for failure in failures)
            warnings.warn(message, category=OptionalDependencyImportWarning)
            return False
        return True

    def __bool__(self):
        if self._bool is None:
            self._bool = self._is_available()
        return self._bool

    def require_now(self, feature: str):
        """Eagerly attempt to import the dependencies, and raise if they cannot be imported.

        Args:
            feature: the name of the feature that is requiring these dependencies.

        Raises:
            MissingOptionalLibraryError: if the dependencies cannot be imported.
        """
        if self:
            return
        raise MissingOptionalLibraryError(
            libname=self._name, name=feature, pip_install=self._install, msg=self._msg
        )

    def require_in_call(self, feature_or_callable: Union[str, Callable]):
        """Create a decorator for callables that requires the dependency when called.

        Args:
            feature_or_callable: the name of the feature that requires the dependency, or the
                callable itself when used as a bare decorator, in which case its qualified name is
                used as the feature name.

        Returns:
            Callable: the decorated callable, or a decorator.
        """
        if isinstance(feature_or_callable, str):
            feature = feature_or_callable

            def decorator(function):
                @functools.wraps(function)
                def out(*args, **kwargs):
                    self.require_now(feature)
                    return function(*args, **kwargs)

                return out

            return decorator

        function = feature_or_callable
        feature = getattr(function, "__qualname__", None) or str(function)

        @functools.wraps(function)
        def out(*args, **kwargs):
            self.require_now(feature)
            return function(*args, **kwargs)

        return out

    @contextlib.contextmanager
    def disable_locally(self):
        """Context in which the tester evaluates ``False``.  This is most useful in tests."""
        previous = self._bool
        self._bool = False
        try:
            yield
        finally:
            self._bool = previous
