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

"""Exceptions raised when a caller hands tabular a malformed format string or row."""


class TabularError(Exception):
    """Base class for errors caused by bad input to tabular."""


class FormatSpecError(TabularError):
    """A table format string could not be parsed.

    Parameters
    ----------
    fragment : str
        The part of the format string that could not be parsed.
    message : str
        Human readable description of the problem.
    """

    def __init__(self, fragment, message):
        self.fragment = fragment
        TabularError.__init__(self, message)


class UnclosedColumnSpecError(FormatSpecError):
    """A ``{`` was opened but never closed with ``}``."""

    def __init__(self, fragment):
        FormatSpecError.__init__(
            self,
            fragment,
            "Unclosed column spec: {!r}. Write `{{{{` for a literal `{{`.".format(
                "{" + fragment
            ),
        )


class BadColumnSpecError(FormatSpecError):
    """The text between braces is not one of the supported column placeholders."""

    def __init__(self, fragment):
        FormatSpecError.__init__(
            self,
            fragment,
            "Bad column spec: {!r}. Expected one of {{:}}, {{:<}}, {{:>}} or {{:^}}.".format(
                "{" + fragment + "}"
            ),
        )


class UnexpectedRightBraceError(FormatSpecError):
    """A ``}`` appeared outside of a column placeholder without being doubled."""

    def __init__(self, fragment="}"):
        FormatSpecError.__init__(
            self,
            fragment,
            "Unexpected `}` in format string. Write `}}` for a literal `}`.",
        )


class ArityError(TabularError):
    """A row has a different number of cells than the table has columns."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        TabularError.__init__(
            self,
            "Row has {} cell(s), but the table has {} column(s)".format(actual, expected),
        )
