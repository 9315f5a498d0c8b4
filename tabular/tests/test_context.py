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

"""Tests for the capability flags in tabular.context."""
import os
import unittest
from unittest import mock

from tabular import context
from tabular.tests import mockRunLogs


class TestEnvFlag(unittest.TestCase):
    def test_missingUsesDefault(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(context._envFlag("TABULAR_TEST_FLAG", True))
            self.assertFalse(context._envFlag("TABULAR_TEST_FLAG", False))

    def test_trueValues(self):
        for value in ("1", "true", "TRUE", " yes ", "On"):
            with mock.patch.dict(os.environ, {"TABULAR_TEST_FLAG": value}):
                self.assertTrue(context._envFlag("TABULAR_TEST_FLAG", False), msg=value)

    def test_falseValues(self):
        for value in ("0", "false", "No", "OFF"):
            with mock.patch.dict(os.environ, {"TABULAR_TEST_FLAG": value}):
                self.assertFalse(context._envFlag("TABULAR_TEST_FLAG", True), msg=value)

    def test_badValueWarns(self):
        with mock.patch.dict(os.environ, {"TABULAR_TEST_FLAG": "maybe"}):
            with mockRunLogs.BufferLog() as log:
                self.assertTrue(context._envFlag("TABULAR_TEST_FLAG", True))
                self.assertIn("TABULAR_TEST_FLAG", log.getStdout())
                self.assertIn("[warn]", log.getStdout())


class TestDefaults(unittest.TestCase):
    def test_flagsAreBooleans(self):
        self.assertIsInstance(context.UNICODE_WIDTH, bool)
        self.assertIsInstance(context.ANSI_CELL, bool)

    def test_defaultLineEnd(self):
        self.assertEqual(context.DEFAULT_LINE_END, "\n")
