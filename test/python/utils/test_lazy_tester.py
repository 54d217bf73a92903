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

"""Tests for the lazy testers of optional dependencies."""

import warnings

from graphlc.exceptions import MissingOptionalLibraryError, OptionalDependencyImportWarning
from graphlc.utils import LazyImportTester
from graphlc.utils import optionals
from test import GraphLCTestCase

# Module names that are never installed.
MISSING = "_graphlc_this_module_does_not_exist"


class TestLazyImportTester(GraphLCTestCase):
    """Tests for LazyImportTester."""

    def test_available_module(self):
        """Test an importable module evaluates True."""
        self.assertTrue(LazyImportTester("json"))
        self.assertTrue(LazyImportTester(["json", "fractions"]))
        self.assertTrue(LazyImportTester({"fractions": ("Fraction",)}))

    def test_missing_module(self):
        """Test a missing module evaluates False without warnings."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertFalse(LazyImportTester(MISSING))
            self.assertFalse(LazyImportTester(["json", MISSING]))

    def test_missing_name_warns(self):
        """Test an importable module lacking a required name warns and evaluates False."""
        tester = LazyImportTester({"fractions": ("Fraction", "NoSuchName")})
        with self.assertWarns(OptionalDependencyImportWarning):
            self.assertFalse(tester)

    def test_no_modules(self):
        """Test an empty module list is rejected."""
        with self.assertRaises(ValueError):
            LazyImportTester([])

    def test_require_now(self):
        """Test require_now raises with the install hint for missing modules."""
        LazyImportTester("json").require_now("parsing")
        tester = LazyImportTester(MISSING, name="nothing", install="pip install nothing")
        with self.assertRaises(MissingOptionalLibraryError) as cm:
            tester.require_now("the feature")
        self.assertIn("pip install nothing", str(cm.exception))
        self.assertIn("the feature", str(cm.exception))

    def test_missing_library_is_import_error(self):
        """Test the raised error can be caught as an ImportError."""
        with self.assertRaises(ImportError):
            LazyImportTester(MISSING).require_now("feature")

    def test_require_in_call_with_feature(self):
        """Test the decorator with an explicit feature name."""

        @LazyImportTester("json").require_in_call("dumping")
        def present():
            return 1

        @LazyImportTester(MISSING).require_in_call("loading")
        def absent():
            return 2

        self.assertEqual(present(), 1)
        with self.assertRaisesRegex(MissingOptionalLibraryError, "loading"):
            absent()

    def test_require_in_call_bare(self):
        """Test the bare decorator names the feature after the callable."""

        @LazyImportTester(MISSING).require_in_call
        def absent():
            return 2

        self.assertEqual(absent.__name__, "absent")
        with self.assertRaisesRegex(MissingOptionalLibraryError, "absent"):
            absent()

    def test_import_is_lazy(self):
        """Test nothing is imported before the value is needed."""
        tester = LazyImportTester(MISSING)
        self.assertIsNone(tester._bool)
        bool(tester)
        self.assertFalse(tester._bool)

    def test_disable_locally(self):
        """Test disable_locally and the restoration of the previous value."""
        tester = LazyImportTester("json")
        with tester.disable_locally():
            self.assertFalse(tester)
            with self.assertRaises(MissingOptionalLibraryError):
                tester.require_now("feature")
        self.assertTrue(tester)

    def test_z3_is_installed(self):
        """Test the default solver library is available."""
        self.assertTrue(optionals.HAS_Z3)
