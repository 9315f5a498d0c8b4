# Copyright 2024 TerraPower, LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for parsing table format strings."""
import unittest
from io import StringIO

from tabular import runLog
from tabular.columnSpec import (
    Alignment,
    ColumnSpec,
    FormatSpec,
    formatSpecToString,
    parseFormatSpec,
)
from tabular.exceptions import (
    BadColumnSpecError,
    FormatSpecError,
    UnclosedColumnSpecError,
    UnexpectedRightBraceError,
)
from tabular.tests import mockRunLogs


class TestParseFormatSpec(unittest.TestCase):
    def test_alignments(self):
        spec = parseFormatSpec("{:<}{:>}{:^}{:}")
        self.assertEqual(
            [c.alignment for c in spec.columns],
            [Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER, Alignment.LEFT],
        )
        self.assertEqual(spec.literalAfter, "")

    def test_literals(self):
        """Literal text lands in front of the column that follows it."""
        spec = parseFormatSpec("{:>}  {:<}{:<}  {:<}")
        self.assertEqual(
            spec,
            FormatSpec(
                (
                    ColumnSpec(Alignment.RIGHT, ""),
                    ColumnSpec(Alignment.LEFT, "  "),
                    ColumnSpec(Alignment.LEFT, ""),
                    ColumnSpec(Alignment.LEFT, "  "),
                ),
                "",
            ),
        )

    def test_trailingLiteral(self):
        spec = parseFormatSpec("[{:<}] ({:>})!")
        self.assertEqual([c.literalBefore for c in spec.columns], ["[", "] ("])
        self.assertEqual(spec.literalAfter, ")!")

    def test_noColumns(self):
        spec = parseFormatSpec("just text")
        self.assertEqual(spec.columns, ())
        self.assertEqual(spec.literalAfter, "just text")

        spec = parseFormatSpec("")
        self.assertEqual(spec, FormatSpec((), ""))

    def test_escapedBraces(self):
        spec = parseFormatSpec("{{:<}} produces '{:<}' and }}{{")
        self.assertEqual(len(spec.columns), 1)
        self.assertEqual(spec.columns[0].literalBefore, "{:<} produces '")
        self.assertEqual(spec.literalAfter, "' and }{")

    def test_idempotent(self):
        formatSpec = "{:>} | {:^} | {:<}"
        self.assertEqual(parseFormatSpec(formatSpec), parseFormatSpec(formatSpec))

    def test_unclosed(self):
        with self.assertRaises(UnclosedColumnSpecError) as cm:
            parseFormatSpec("{:<} {:>")
        self.assertEqual(cm.exception.fragment, ":>")

        with self.assertRaises(UnclosedColumnSpecError):
            parseFormatSpec("trailing {")

    def test_badAlignment(self):
        with self.assertRaises(BadColumnSpecError) as cm:
            parseFormatSpec("{:<} {:=}")
        self.assertEqual(cm.exception.fragment, ":=")
        self.assertIn("{:=}", str(cm.exception))

    def test_unknownDirectives(self):
        for bad in ("{}", "{0}", "{:<<}", "{<}", "{:>5}", "{name}"):
            with self.assertRaises(BadColumnSpecError, msg=bad):
                parseFormatSpec(bad)

    def test_unexpectedRightBrace(self):
        with self.assertRaises(UnexpectedRightBraceError):
            parseFormatSpec("{:<} } {:>}")

    def test_allErrorsAreFormatSpecErrors(self):
        for bad in ("{", "{x}", "}"):
            with self.assertRaises(FormatSpecError, msg=bad):
                parseFormatSpec(bad)

    def test_errorsAreLogged(self):
        with mockRunLogs.BufferLog() as mock:
            with self.assertRaises(BadColumnSpecError):
                parseFormatSpec("{:?}")
            self.assertIn("bad column spec", mock.getStdout())
            self.assertIn("[dbug]", mock.getStdout())

    def test_errorsQuietAtDefaultVerbosity(self):
        stream = StringIO()
        original = runLog.LOG
        runLog.LOG = runLog._RunLog(stream=stream)
        try:
            with self.assertRaises(UnexpectedRightBraceError):
                parseFormatSpec("oops }")
        finally:
            runLog.LOG = original
        self.assertEqual(stream.getvalue(), "")


class TestFormatSpecToString(unittest.TestCase):
    def test_roundTrip(self):
        for formatSpec in ("{:>}  ({:<}) {:^}", "{{literal}} {:<}", "no columns", "{:<}}}"):
            spec = parseFormatSpec(formatSpec)
            self.assertEqual(parseFormatSpec(formatSpecToString(spec)), spec)

    def test_canonicalLeft(self):
        self.assertEqual(formatSpecToString(parseFormatSpec("{:} {:<}")), "{:<} {:<}")

    def test_escapes(self):
        self.assertEqual(formatSpecToString(parseFormatSpec("{{{:>}}}")), "{{{:>}}}")
