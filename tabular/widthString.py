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

r"""
Measuring how many terminal columns a piece of text occupies.

Everything a table lays out goes through a :py:class:`WidthString`, which pairs the text that will
be emitted with the number of columns it takes up. The width is measured once, when the cell is
created, and is never recomputed.

    >>> measure("apple")
    'apple'
    >>> measure("中文").width
    4
    >>> measureAnsi("\x1b[31mred\x1b[0m").width
    3
"""
import re

from wcwidth import wcswidth, wcwidth

from tabular import context

# Handle ANSI escape sequences for both control sequence introducer (CSI) and operating system
# command (OSC). Both of these begin with 0x1b (or octal 033), which will be shown below as ESC.
#
# CSI ANSI escape codes have the following format, defined in section 5.4 of ECMA-48:
#
# CSI: ESC followed by the '[' character (0x5b)
# Parameter Bytes: 0..n bytes in the range 0x30-0x3f
# Intermediate Bytes: 0..n bytes in the range 0x20-0x2f
# Final Byte: a single byte in the range 0x40-0x7e
#
# Also include the terminal hyperlink sequences as described here:
# https://gist.github.com/egmontkob/eb114294efbcd5adb1944c9f3cb5feda
#
# OSC 8 ; params ; uri ST display_text OSC 8 ;; ST
#
# Where:
# OSC: ESC followed by the ']' character (0x5d)
# ST: ESC followed by the '\' character (0x5c)
_esc = r"\x1b"
_csi = rf"{_esc}\["
_osc = rf"{_esc}\]"
_st = rf"{_esc}\\"

_ansiEscapePat = rf"""
    (
        # terminal colors, etc
        {_csi}        # CSI
        [\x30-\x3f]*  # parameter bytes
        [\x20-\x2f]*  # intermediate bytes
        [\x40-\x7e]   # final byte
    |
        # terminal hyperlinks
        {_osc}8;        # OSC opening
        (\w+=\w+:?)*    # key=value params list (submatch 2)
        ;               # delimiter
        ([^{_esc}]+)    # URI - anything but ESC (submatch 3)
        {_st}           # ST
        ([^{_esc}]+)    # link text - anything but ESC (submatch 4)
        {_osc}8;;{_st}  # "closing" OSC sequence
    )
"""
_ansiCodes = re.compile(_ansiEscapePat, re.VERBOSE)


class WidthString:
    """
    A piece of text together with its display width in terminal columns.

    Parameters
    ----------
    text : str
        The text that is emitted when the cell is rendered.
    width : int
        How many columns ``text`` occupies. This is trusted as given; use :py:func:`measure` to
        compute it.
    """

    __slots__ = ("_text", "_width")

    def __init__(self, text="", width=0):
        if width < 0:
            raise ValueError("Width of {!r} cannot be negative, got {}".format(text, width))
        self._text = str(text)
        self._width = int(width)

    @property
    def text(self):
        return self._text

    @property
    def width(self):
        return self._width

    def __str__(self):
        return self._text

    def __repr__(self):
        return repr(self._text)

    def __eq__(self, other):
        if not isinstance(other, WidthString):
            return NotImplemented
        return self._text == other._text and self._width == other._width

    def __hash__(self):
        return hash((self._text, self._width))


def stripAnsi(text):
    r"""Remove ANSI escape sequences, both CSI and OSC hyperlinks.

    CSI sequences are simply removed, while OSC hyperlinks are replaced with the link text.
    Anything that is not a complete, recognized sequence is left alone.

        >>> stripAnsi('\x1b[31mred\x1b[0m text')
        'red text'

        >>> stripAnsi('\x1B]8;;https://example.com\x1B\\This is a link\x1B]8;;\x1B\\')
        'This is a link'

    """
    return _ansiCodes.sub(r"\4", text)


def displayWidth(text):
    """
    Number of terminal columns ``text`` occupies.

    With ``context.UNICODE_WIDTH`` on, wide East-Asian characters count as two columns, combining
    marks as zero and East-Asian "Ambiguous" characters as one. Otherwise every character counts as
    one column.
    """
    if not context.UNICODE_WIDTH:
        return len(text)

    width = wcswidth(text)
    if width < 0:
        # wcswidth gives up on the whole string when it finds a control character
        width = sum(max(wcwidth(c), 0) for c in text)
    return width


def measure(value):
    """Build a :py:class:`WidthString` from ``str(value)``, measuring its display width."""
    text = str(value)
    return WidthString(text, displayWidth(text))


def measureAnsi(value):
    r"""
    Build a :py:class:`WidthString` that keeps its ANSI escapes but is measured without them.

        >>> ws = measureAnsi('\x1b[1mbold\x1b[0m')
        >>> ws.text == '\x1b[1mbold\x1b[0m', ws.width
        (True, 4)
    """
    text = str(value)
    return WidthString(text, displayWidth(stripAnsi(text)))
