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

"""
Parsing of table format strings.

A format string is literal text with column placeholders mixed in. It uses a small subset of the
``str.format`` syntax:

- ``{:<}`` (or just ``{:}``) produces a left-aligned column.
- ``{:>}`` produces a right-aligned column.
- ``{:^}`` produces a centered column. When the padding can't be split evenly, the extra space goes
  on the right.
- ``{{`` produces a literal ``{`` character and ``}}`` a literal ``}``.
- Everything else stands for itself.

For example, ``"{:>}  ({:<}) {:<}"`` has three columns. The first is right-aligned and the other two
left-aligned. Two spaces and an opening parenthesis sit in front of the second column, and
``") "`` in front of the third.
"""
import enum
from collections import namedtuple

from tabular import runLog
from tabular.exceptions import (
    BadColumnSpecError,
    UnclosedColumnSpecError,
    UnexpectedRightBraceError,
)


class Alignment(enum.Enum):
    """How a cell is placed within its column."""

    LEFT = "<"
    RIGHT = ">"
    CENTER = "^"


# a column and the literal text that precedes it in the rendered line
ColumnSpec = namedtuple("ColumnSpec", ["alignment", "literalBefore"])

# the parsed format: every column in order, plus whatever literal text trails the last one
FormatSpec = namedtuple("FormatSpec", ["columns", "literalAfter"])

_PLACEHOLDERS = {
    ":": Alignment.LEFT,
    ":<": Alignment.LEFT,
    ":>": Alignment.RIGHT,
    ":^": Alignment.CENTER,
}


def _readColumnSpec(formatSpec, start):
    """
    Read the inside of a placeholder whose ``{`` sits just before ``start``.

    Returns
    -------
    body : str
        The text between the braces.
    end : int
        Index just past the closing ``}``.
    """
    close = formatSpec.find("}", start)
    if close < 0:
        fragment = formatSpec[start:]
        runLog.debug("Format string {!r} never closes `{{{}`".format(formatSpec, fragment))
        raise UnclosedColumnSpecError(fragment)

    return formatSpec[start:close], close + 1


def parseFormatSpec(formatSpec):
    """
    Parse a table format string into its columns and literal text.

    Parameters
    ----------
    formatSpec : str
        The format string, e.g. ``"{:>}  {:<}"``.

    Returns
    -------
    FormatSpec
        One :py:class:`ColumnSpec` per placeholder, in order, and the trailing literal.

    Raises
    ------
    FormatSpecError
        If a placeholder is malformed or a brace is unbalanced.

    Examples
    --------
    >>> parseFormatSpec("{:>} | {:<}")
    FormatSpec(columns=(ColumnSpec(alignment=<Alignment.RIGHT: '>'>, literalBefore=''), \
ColumnSpec(alignment=<Alignment.LEFT: '<'>, literalBefore=' | ')), literalAfter='')
    """
    columns = []
    buf = []
    i = 0
    n = len(formatSpec)

    while i < n:
        c = formatSpec[i]

        if c == "{":
            if formatSpec.startswith("{", i + 1):
                buf.append("{")
                i += 2
                continue

            body, i = _readColumnSpec(formatSpec, i + 1)
            try:
                alignment = _PLACEHOLDERS[body]
            except KeyError:
                runLog.debug("Format string {!r} has a bad column spec".format(formatSpec))
                raise BadColumnSpecError(body)

            columns.append(ColumnSpec(alignment, "".join(buf)))
            buf = []

        elif c == "}":
            if not formatSpec.startswith("}", i + 1):
                runLog.debug(
                    "Format string {!r} has a stray `}}` at index {}".format(formatSpec, i)
                )
                raise UnexpectedRightBraceError()
            buf.append("}")
            i += 2

        else:
            buf.append(c)
            i += 1

    spec = FormatSpec(tuple(columns), "".join(buf))
    runLog.debug("Parsed format string {!r} into {} column(s)".format(formatSpec, len(columns)))
    return spec


def _escapeLiteral(literal):
    return literal.replace("{", "{{").replace("}", "}}")


def formatSpecToString(spec):
    """
    Write a parsed :py:class:`FormatSpec` back out as a format string.

    Parsing the result gives back an equal ``FormatSpec``. Left-aligned columns are always written
    as ``{:<}``, so ``"{:}"`` comes back as ``"{:<}"``.
    """
    pieces = []
    for column in spec.columns:
        pieces.append(_escapeLiteral(column.literalBefore))
        pieces.append("{:" + column.alignment.value + "}")
    pieces.append(_escapeLiteral(spec.literalAfter))
    return "".join(pieces)
