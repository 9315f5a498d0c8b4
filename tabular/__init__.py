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
Builds plain, automatically aligned tables of monospaced text.

The number and alignment of the columns is determined by a format string passed to
:py:class:`~tabular.table.Table`. Then :py:class:`~tabular.row.Row` objects are added to it, and the
table is rendered with ``str(table)`` or :py:meth:`~tabular.table.Table.render`::

    >>> from tabular import Table, makeRow
    >>> table = Table("{:>}  {:<}").withRow(makeRow(5, "apple")).withRow(makeRow(120, "fig"))
    >>> str(table)
    '  5  apple\\n120  fig  \\n'
"""
from tabular.meta import __version__
from tabular.exceptions import (
    ArityError,
    BadColumnSpecError,
    FormatSpecError,
    TabularError,
    UnclosedColumnSpecError,
    UnexpectedRightBraceError,
)
from tabular.widthString import WidthString, displayWidth, measure, measureAnsi, stripAnsi
from tabular.columnSpec import (
    Alignment,
    ColumnSpec,
    FormatSpec,
    formatSpecToString,
    parseFormatSpec,
)
from tabular.row import Row, makeRow
from tabular.table import Table, makeTable

__all__ = [
    "__version__",
    "Alignment",
    "ArityError",
    "BadColumnSpecError",
    "ColumnSpec",
    "FormatSpec",
    "FormatSpecError",
    "Row",
    "Table",
    "TabularError",
    "UnclosedColumnSpecError",
    "UnexpectedRightBraceError",
    "WidthString",
    "displayWidth",
    "formatSpecToString",
    "makeRow",
    "makeTable",
    "measure",
    "measureAnsi",
    "parseFormatSpec",
    "stripAnsi",
]
