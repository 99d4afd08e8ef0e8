# python
"""
Completion hints behavioral tests.

Scope
- Validate the NONE and FILENAME hints and their use as key defaults.
- Validate VALUES pair normalization and FUNCTION names.
- Validate immutability, equality, hashing and pickling.
"""

from __future__ import annotations

import pickle
import unittest
from unittest import TestCase

from swivel import Completion, CompletionKind, Flag, Key, VariadicKey


class TestCompletion(TestCase):
    """Behavioral tests for Completion."""

    def testPresetHints(self):
        self.assertIs(Completion.NONE.kind, CompletionKind.NONE)
        self.assertIs(Completion.FILENAME.kind, CompletionKind.FILENAME)
        self.assertEqual(Completion.NONE.payload, ())
        self.assertEqual(repr(Completion.FILENAME), "Completion.FILENAME")

    def testKeyDefaults(self):
        self.assertEqual(Key("-m").completion, Completion.FILENAME)
        self.assertEqual(VariadicKey("-I").completion, Completion.FILENAME)
        self.assertIsNone(Flag("-v").completion)

    def testValuesNormalizesBareStrings(self):
        hint = Completion.values("fast", ("slow", "careful run"))
        self.assertIs(hint.kind, CompletionKind.VALUES)
        self.assertEqual(hint.payload, (("fast", ""), ("slow", "careful run")))

    def testValuesRejectsMalformedPairs(self):
        for pair in (1, ("a",), ("a", "b", "c"), ("a", 2), ["a", "b"]):
            with self.subTest(pair=pair):
                with self.assertRaises(TypeError):
                    Completion.values(pair)

    def testFunction(self):
        hint = Completion.function(" _list_targets ")
        self.assertIs(hint.kind, CompletionKind.FUNCTION)
        self.assertEqual(hint.payload, "_list_targets")

    def testFunctionRequiresName(self):
        with self.assertRaises(TypeError):
            Completion.function(None)
        with self.assertRaises(ValueError):
            Completion.function("   ")

    def testPayloadlessKindsRejectPayload(self):
        with self.assertRaises(ValueError):
            Completion(CompletionKind.FILENAME, ("x",))

    def testKindFromString(self):
        self.assertEqual(Completion("none"), Completion.NONE)
        with self.assertRaises(ValueError):
            Completion("directories")

    def testImmutable(self):
        with self.assertRaises(AttributeError):
            Completion.NONE.kind = CompletionKind.FILENAME
        with self.assertRaises(AttributeError):
            Completion.NONE._payload = ("x",)

    def testEqualityAndHash(self):
        first = Completion.values(("a", "first"))
        second = Completion.values(("a", "first"))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, Completion.values("a"))
        self.assertNotEqual(Completion.NONE, Completion.FILENAME)
        self.assertEqual(len({Completion.NONE, Completion(CompletionKind.NONE)}), 1)

    def testPickle(self):
        hint = Completion.function("_targets")
        self.assertEqual(pickle.loads(pickle.dumps(hint)), hint)

    def testKeysCarryTheirHint(self):
        hint = Completion.values("debug", "release")
        self.assertEqual(Key("-b", "--build", completion=hint).completion, hint)

    def testKeysRejectForeignHints(self):
        with self.assertRaises(TypeError):
            Key("-b", completion="filename")


if __name__ == "__main__":
    unittest.main()
