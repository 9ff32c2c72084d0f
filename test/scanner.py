"""
Scanner module behavioral tests (tokenization only, no destinations).

Scope
- Validate short/long syntax, clusters, inline values, prefixes and terminators.
- Validate the fault emitted on unknown, ambiguous and value-less options.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from flagship.faults import AmbiguousSwitchError, MissingValueError, UnknownSwitchError
from flagship.scanner import Kind, Match, Operand, OptionTable, scan


class TestScan(TestCase):

    def setUp(self):
        self.table = OptionTable()
        self.table.add(ord("c"), Kind.VALUE, "c", "count")
        self.table.add(ord("v"), Kind.SWITCH, "v", "verbose")
        self.table.add(256, Kind.SWITCH, None, "version")
        self.table.add(257, Kind.VALUE, None, "seed")

    def events(self, *args):
        return list(scan(self.table, args))

    def testOptstring(self):
        self.assertEqual(self.table.optstring, "c:v")

    def testShortForms(self):
        self.assertEqual(self.events("-c5", "-c", "6", "-v"), [
            Match(ord("c"), "5", "-c5"),
            Match(ord("c"), "6", "-c"),
            Match(ord("v"), "", "-v"),
        ])

    def testClusterEndsAtValueOption(self):
        self.assertEqual(self.events("-vvc7"), [
            Match(ord("v"), "", "-vvc7"),
            Match(ord("v"), "", "-vvc7"),
            Match(ord("c"), "7", "-vvc7"),
        ])

    def testLongForms(self):
        self.assertEqual(self.events("--count=1", "--count", "2", "--seed", "3"), [
            Match(ord("c"), "1", "--count=1"),
            Match(ord("c"), "2", "--count"),
            Match(257, "3", "--seed"),
        ])

    def testLongSwitchDoesNotConsumeNextToken(self):
        self.assertEqual(self.events("--verbose", "file"), [
            Match(ord("v"), "", "--verbose"),
            Operand("file"),
        ])

    def testLongSwitchInlineValuePassedThrough(self):
        self.assertEqual(self.events("--verbose=1"), [Match(ord("v"), "1", "--verbose=1")])

    def testUniquePrefixResolves(self):
        self.assertEqual(self.events("--cou", "4", "--versi"), [
            Match(ord("c"), "4", "--cou"),
            Match(256, "", "--versi"),
        ])

    def testExactNameWinsOverPrefix(self):
        self.table.add(258, Kind.SWITCH, None, "verb")
        self.assertEqual(self.events("--verb"), [Match(258, "", "--verb")])

    def testAmbiguousPrefix(self):
        fault, = self.events("--ver")
        self.assertIsInstance(fault, AmbiguousSwitchError)
        self.assertEqual(fault.candidates, ("verbose", "version"))

    def testUnknownStopsScanning(self):
        events = self.events("-v", "--nope", "-v")
        self.assertEqual(events[0], Match(ord("v"), "", "-v"))
        self.assertIsInstance(events[1], UnknownSwitchError)
        self.assertEqual(len(events), 2)

    def testUnknownInsideCluster(self):
        *_, fault = self.events("-vx")
        self.assertEqual(fault.flag, "-x")
        self.assertEqual(fault.token, "-vx")

    def testBareDoubleDashNameIsUnknown(self):
        fault, = self.events("--=value")
        self.assertIsInstance(fault, UnknownSwitchError)

    def testMissingValue(self):
        fault, = self.events("--seed")
        self.assertIsInstance(fault, MissingValueError)
        self.assertEqual(fault.flag, "--seed")

    def testOperandsAndTerminator(self):
        self.assertEqual(self.events("a", "-", "--", "-v", "--count"), [
            Operand("a"),
            Operand("-"),
            Operand("-v"),
            Operand("--count"),
        ])

    def testEmptyTable(self):
        table = OptionTable()
        self.assertEqual(list(scan(table, ["x"])), [Operand("x")])
        fault, = scan(table, ["-x"])
        self.assertEqual(fault.suggestions, ())


if __name__ == "__main__":
    unittest.main()
