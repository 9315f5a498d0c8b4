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
Plain, automatically aligned tables of monospaced text.

This is basically what you need if you are implementing ``ls``. The number and alignment of the
columns is determined by a format string passed to :py:class:`Table`. Then rows are added to the
table with :py:meth:`Table.addRow` or :py:meth:`Table.withRow`, and headings with
:py:meth:`Table.addHeading`::

    >>> from tabular.row import makeRow
    >>> table = (
    ...     Table("{:<}  {:>}")
    ...     .withHeading("./:")
    ...     .withRow(makeRow("Cargo.lock", 433))
    ...     .withRow(makeRow("Cargo.toml", 204))
    ...     .withHeading("src/:")
    ...     .withRow(makeRow("lib.rs", 10257))
    ... )
    >>> print(table, end="")
    ./:
    Cargo.lock    433
    Cargo.toml    204
    src/:
    lib.rs      10257

Every column is as wide as its widest cell. Headings are printed as they are and play no part in
working out the column widths.
"""
from collections import namedtuple

from tabular import context, runLog
from tabular.columnSpec import Alignment, formatSpecToString, parseFormatSpec
from tabular.exceptions import ArityError
from tabular.row import Row

# the two kinds of line a table holds, in the order they were added
CellsRow = namedtuple("CellsRow", ["cells"])
HeadingRow = namedtuple("HeadingRow", ["text"])


def _padLeft(width, cell):
    """Flush right."""
    return " " * (width - cell.width) + cell.text


def _padRight(width, cell):
    """Flush left."""
    return cell.text + " " * (width - cell.width)


def _padBoth(width, cell):
    """Center, putting the odd space (if any) on the right."""
    extra = width - cell.width
    left = extra // 2
    return " " * left + cell.text + " " * (extra - left)


_PAD_FUNCTIONS = {
    Alignment.LEFT: _padRight,
    Alignment.RIGHT: _padLeft,
    Alignment.CENTER: _padBoth,
}


def padCell(cell, width, alignment):
    """
    Pad a :py:class:`~tabular.widthString.WidthString` out to ``width`` columns.

    Padding is based on ``cell.width``, not on the length of the text, so wide characters, ANSI
    escapes and custom widths all line up. A cell that is already ``width`` columns or wider is
    returned unchanged; nothing is ever cut off.
    """
    return _PAD_FUNCTIONS[alignment](width, cell)


class Table:
    """
    Builder for a formatted table.

    Parameters
    ----------
    formatSpec : str
        Describes the columns of each row, e.g. ``"{:>}  {:<}"``. See :py:mod:`tabular.columnSpec`.
    lineEnd : str, optional
        Appended after every rendered line. Defaults to ``context.DEFAULT_LINE_END``.

    Raises
    ------
    FormatSpecError
        If ``formatSpec`` can't be parsed.
    """

    def __init__(self, formatSpec, lineEnd=None):
        self._formatSpec = parseFormatSpec(formatSpec)
        self._lineEnd = context.DEFAULT_LINE_END if lineEnd is None else str(lineEnd)
        self._rows = []

    @property
    def formatSpec(self):
        """The parsed :py:class:`~tabular.columnSpec.FormatSpec` for this table."""
        return self._formatSpec

    @property
    def lineEnd(self):
        return self._lineEnd

    def columnCount(self):
        """The number of columns in the table."""
        return len(self._formatSpec.columns)

    def __len__(self):
        return len(self._rows)

    def addRow(self, row):
        """
        Add a row made up of cells.

        When rendered, each cell is padded to the width of its column, which is the maximum width
        of the cells in that column.

        Raises
        ------
        ArityError
            If ``len(row) != self.columnCount()``. The table is left unchanged.
        """
        cells = tuple(row.cells)
        if len(cells) != self.columnCount():
            runLog.debug(
                "Cannot add {!r} to a table with {} column(s)".format(row, self.columnCount())
            )
            raise ArityError(self.columnCount(), len(cells))

        self._rows.append(CellsRow(cells))
        return self

    def withRow(self, row):
        """Same as :py:meth:`addRow`; reads better at the end of a chain."""
        return self.addRow(row)

    def addHeading(self, heading):
        """
        Add a pre-formatted line that spans all columns.

        A heading does not interact with the formatting of rows made of cells. This is like
        ``\\intertext`` in LaTeX, not like ``<th>`` in HTML.
        """
        self._rows.append(HeadingRow(str(heading)))
        return self

    def withHeading(self, heading):
        """Same as :py:meth:`addHeading`."""
        return self.addHeading(heading)

    def setLineEnd(self, lineEnd):
        """Change what is appended to each line. Applies to rows that were already added, too."""
        self._lineEnd = str(lineEnd)
        return self

    def withLineEnd(self, lineEnd):
        """Same as :py:meth:`setLineEnd`."""
        return self.setLineEnd(lineEnd)

    def clear(self):
        """Remove every row and heading, keeping the format and line end."""
        self._rows = []
        return self

    def columnWidths(self):
        """The width of each column: the widest of its cells, or 0 if there are no rows."""
        widths = [0] * self.columnCount()
        for row in self._rows:
            if isinstance(row, HeadingRow):
                continue
            for i, cell in enumerate(row.cells):
                if cell.width > widths[i]:
                    widths[i] = cell.width
        return widths

    def render(self):
        """
        Lay out the table as text.

        Rendering doesn't change the table, so it can be rendered again after more rows are added.
        """
        widths = self.columnWidths()
        columns = self._formatSpec.columns
        literalAfter = self._formatSpec.literalAfter
        lineEnd = self._lineEnd

        lines = []
        for row in self._rows:
            if isinstance(row, HeadingRow):
                lines.append(row.text + lineEnd)
                continue

            pieces = []
            for column, width, cell in zip(columns, widths, row.cells):
                pieces.append(column.literalBefore)
                pieces.append(padCell(cell, width, column.alignment))
            pieces.append(literalAfter)
            pieces.append(lineEnd)
            lines.append("".join(pieces))

        runLog.extra(
            "Rendered {} line(s) with column widths {}".format(len(lines), widths),
        )
        return "".join(lines)

    def __str__(self):
        return self.render()

    def __repr__(self):
        pieces = ["Table({!r})".format(formatSpecToString(self._formatSpec))]
        for row in self._rows:
            if isinstance(row, HeadingRow):
                pieces.append(".withHeading({!r})".format(row.text))
            else:
                pieces.append(".withRow({!r})".format(Row(row.cells)))
        return "".join(pieces)


def makeTable(formatSpec, *rows, lineEnd=None):
    """
    Build a :py:class:`Table` and fill it in one go.

    Each row may be a :py:class:`~tabular.row.Row` or a plain sequence of cell values.

    >>> print(makeTable("{:>}  {:<}", (1, "one"), (10, "ten")), end="")
     1  one
    10  ten
    """
    table = Table(formatSpec, lineEnd=lineEnd)
    for row in rows:
        if not hasattr(row, "cells"):
            row = Row.fromCells(row)
        table.addRow(row)
    return table
