# python
"""
Utilities behavioral tests.

Scope
- Validate the Unset sentinel (singleton, falsy, printable, final, unions).
- Validate coalesce(), rename() and mirror().
"""

from __future__ import annotations

import copy
import pickle
import unittest
from unittest import TestCase

from swivel.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):
    """The Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsy(self):
        self.assertFalse(Unset)
        self.assertIsNot(Unset, None)

    def testRepr(self):
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testUnion(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("x", Unset | str)
        self.assertNotIsInstance(1, str | Unset)

    def testCopyKeepsIdentity(self):
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)


class TestHelpers(TestCase):
    """coalesce(), rename() and mirror()."""

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertEqual(coalesce(0, "fallback"), 0)
        self.assertIsNone(coalesce(None, "fallback"))

    def testRenameDirect(self):
        function = rename(lambda: None, "named")
        self.assertEqual(function.__name__, "named")
        self.assertEqual(function.__qualname__, "named")

    def testRenameDecorator(self):
        @rename("named")
        def function():
            pass
        self.assertEqual(function.__name__, "named")

    def testRenameErrors(self):
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename(1, "name")
        with self.assertRaises(TypeError):
            rename(lambda: None, 1)
        with self.assertRaises(TypeError):
            rename("name")(1)

    def testMirrorCopiesContainers(self):
        class Holder:
            values = mirror("values")
            names = mirror("names")

            def __init__(self):
                self._values = [1, [2, 3]]
                self._names = ("-a", "--all")

        holder = Holder()
        values = holder.values
        values.append(4)
        values[1].append(5)
        self.assertEqual(holder.values, [1, [2, 3]])
        self.assertEqual(holder.names, ("-a", "--all"))
        with self.assertRaises(AttributeError):
            holder.values = []

    def testMirrorRequiresName(self):
        with self.assertRaises(TypeError):
            mirror(1)


if __name__ == "__main__":
    unittest.main()
