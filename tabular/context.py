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
Module containing global constants that reflect the capabilities tabular was configured with.

Tables measure and render text according to two capability flags. Both are read once from the
environment when this module is first imported, so they behave like build-time options for the
rest of the process:

``TABULAR_UNICODE_WIDTH``
    When on (the default), the display width of a cell follows the Unicode East-Asian-Width rules,
    so a wide CJK character occupies two columns. When off, every character counts as one column.

``TABULAR_ANSI_CELL``
    When on, :py:class:`tabular.row.Row` gains ``addAnsiCell`` and ``withAnsiCell``, which measure
    cells with their ANSI escape sequences stripped. Off by default; the methods do not exist at all
    unless it is switched on before :py:mod:`tabular.row` is imported.
"""
import os

from tabular import runLog

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


def _envFlag(name, default):
    """Read a boolean capability flag from the environment, falling back to ``default``."""
    raw = os.environ.get(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_STRINGS:
        return True
    elif value in _FALSE_STRINGS:
        return False

    runLog.warning(
        "Ignoring {}={!r}; expected one of {}. Using the default ({}).".format(
            name, raw, ", ".join(_TRUE_STRINGS + _FALSE_STRINGS), default
        )
    )
    return default


UNICODE_WIDTH = _envFlag("TABULAR_UNICODE_WIDTH", True)
"""Measure display width with East-Asian-Width rules rather than by counting characters."""

ANSI_CELL = _envFlag("TABULAR_ANSI_CELL", False)
"""Expose the ANSI-stripping cell constructors on Row."""

DEFAULT_LINE_END = "\n"
"""Text appended after every rendered line unless a table is given its own."""
