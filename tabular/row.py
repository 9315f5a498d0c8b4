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
Building the rows of a table.

A :py:class:`Row` is filled in left to right, one cell per column. Each cell is measured as soon as
it is added, so a table never has to look at the text again to lay it out::

    >>> row = Row().withCell(433).withCell("Cargo.lock")
    >>> row
    Row.fromCells(['433', 'Cargo.lock'])
"""
from tabular import context
from tabular.widthString import WidthString, measure, measureAnsi


class Row:
    """
    One line of a table, made up of cells.

    Make a new one with ``Row()`` and add to it with :py:meth:`addCell` or :py:meth:`withCell`, or
    make a complete one with :py:meth:`fromCells`. Rows are handed to
    :py:meth:`tabular.table.Table.addRow`, which takes a copy of the cells.
    """

    def __init__(self, cells=None):
        self._cells = list(cells) if cells is not None else []

    @classmethod
    def fromCells(cls, values):
        """Make a row with one measured cell per value."""
        return cls([measure(v) for v in values])

    @property
    def cells(self):
        """The cells of this row, as a tuple of :py:class:`~tabular.widthString.WidthString`."""
        return tuple(self._cells)

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self):
        return "Row.fromCells({!r})".format(self._cells)

    def addCell(self, value):
        """
        Add a cell to the end of this row.

        ``value`` is converted with ``str()`` and measured right away.

        Examples
        --------
        >>> def dirEntryToRow(size, isDirectory, name):
        ...     row = Row()
        ...     row.addCell(size)
        ...     row.addCell("d" if isDirectory else "")
        ...     row.addCell(name)
        ...     return row
        """
        self._cells.append(measure(value))
        return self

    def withCell(self, value):
        """Same as :py:meth:`addCell`; reads better at the end of a chain."""
        return self.addCell(value)

    def addCustomWidthCell(self, value, width):
        """
        Add a cell whose width is given rather than measured.

        The table pads the cell as though it were exactly ``width`` columns wide, whatever the text
        actually looks like. Useful for text with escapes that tabular doesn't understand, or to
        deliberately nudge a column.
        """
        self._cells.append(WidthString(str(value), width))
        return self

    def withCustomWidthCell(self, value, width):
        """Same as :py:meth:`addCustomWidthCell`."""
        return self.addCustomWidthCell(value, width)

    if context.ANSI_CELL:

        def addAnsiCell(self, value):
            """
            Add a cell that may contain ANSI escape sequences.

            The escapes stay in the rendered output, but the cell is measured as if they were not
            there, so colored text lines up with plain text.
            """
            self._cells.append(measureAnsi(value))
            return self

        def withAnsiCell(self, value):
            """Same as :py:meth:`addAnsiCell`."""
            return self.addAnsiCell(value)


def makeRow(*values):
    """
    Build a :py:class:`Row` from its cell values.

    ``makeRow(a, b, c)`` is the same as ``Row().withCell(a).withCell(b).withCell(c)``.

    >>> makeRow(34, "hello", True)
    Row.fromCells(['34', 'hello', 'True'])
    """
    row = Row()
    for value in values:
        row.addCell(value)
    return row
