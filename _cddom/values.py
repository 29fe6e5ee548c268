# Copyright (C) 2018-'25  Frank Sachsenheim
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

"""
Strict extraction of numbers and color values from nodes' text.

Numbers are parsed with the locale-independent syntax of C's ``strtod`` and
``strtoll``: leading whitespace is skipped, but any trailing character invalidates a
value.  A text that is empty or consists only of whitespace is read as zero.

>>> parse_float("-3.25")
-3.25
>>> parse_float("0x1.8p1")
3.0
>>> parse_int("128")
128
>>> parse_float("")
0.0
>>> parse_float("12.5abc")
Traceback (most recent call last):
...
_cddom.exceptions.InvalidNumber: '12.5abc' is not a valid number.
"""

from __future__ import annotations

import re
import sys
from typing import TYPE_CHECKING, Final, NamedTuple, TypeVar

from _cddom.exceptions import IncompleteColor, InvalidNumber

if TYPE_CHECKING:
    from _cddom.nodes import TagNode


_T = TypeVar("_T")


INT_MAX: Final = 2**31 - 1
INT_MIN: Final = -(2**31)

INVALID_FLOAT: Final = sys.float_info.max
"""The value that historically signals an invalid floating point number."""
INVALID_INT: Final = INT_MAX
"""The value that historically signals an invalid integer."""


class _NoDefault:
    def __repr__(self):
        return "<no default>"


NO_DEFAULT: Final = _NoDefault()


_match_float: Final = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<sign>[+-]?)
    (?:
        (?P<hexadecimal>
            0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
        )
        |
        (?P<decimal>
            (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
        )
        |
        (?P<infinity>inf(?:inity)?)
        |
        (?P<nan>nan(?:\([0-9a-z_]*\))?)
    )
    """,
    re.ASCII | re.IGNORECASE | re.VERBOSE,
).fullmatch

_match_int: Final = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+", re.ASCII).fullmatch

_is_blank: Final = re.compile(r"[ \t\n\v\f\r]*", re.ASCII).fullmatch


def parse_float(text: str) -> float:
    """
    Parses a floating point number.

    :param text: The literal.
    :raises InvalidNumber: If the text isn't entirely a valid literal.
    """
    if _is_blank(text):
        return 0.0

    if (match := _match_float(text)) is None:
        raise InvalidNumber(text)

    sign = match.group("sign")
    if (hexadecimal := match.group("hexadecimal")) is not None:
        try:
            return float.fromhex(sign + hexadecimal)
        except OverflowError:
            return float(sign + "inf")
    if (decimal := match.group("decimal")) is not None:
        return float(sign + decimal)
    if match.group("infinity") is not None:
        return float(sign + "inf")
    return float(sign + "nan")


def parse_int(text: str) -> int:
    """
    Parses a signed, decimal integer that must be in the range of 32 bits.

    :param text: The literal.
    :raises InvalidNumber: If the text isn't entirely a valid literal or out of range.
    """
    if _is_blank(text):
        return 0

    if _match_int(text) is None:
        raise InvalidNumber(text)

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InvalidNumber(text, "is out of the 32 bit integer range")
    return value


def node_data_as_float(node: TagNode, default: _T = NO_DEFAULT) -> float | _T:
    """
    Returns a node's text as floating point number.

    :param node: The node to read.
    :param default: A value that is returned instead of raising an exception,
                    :const:`INVALID_FLOAT` is the traditional choice.
    :raises InvalidNumber: If the text isn't a valid number and no default is given.
    """
    try:
        return parse_float(node.text)
    except InvalidNumber:
        if default is NO_DEFAULT:
            raise
        return default


def node_data_as_int(node: TagNode, default: _T = NO_DEFAULT) -> int | _T:
    """
    Returns a node's text as integer.

    :param node: The node to read.
    :param default: A value that is returned instead of raising an exception,
                    :const:`INVALID_INT` is the traditional choice.
    :raises InvalidNumber: If the text isn't a valid integer in the range of 32 bits
                           and no default is given.
    """
    try:
        return parse_int(node.text)
    except InvalidNumber:
        if default is NO_DEFAULT:
            raise
        return default


# colors


class LabColor(NamedTuple):
    L: float
    a: float
    b: float


class RGBColor(NamedTuple):
    R: float
    G: float
    B: float


class YxyColor(NamedTuple):
    Y: float
    x: float
    y: float


_ColorType = TypeVar("_ColorType", LabColor, RGBColor, YxyColor)


def _get_color(node: TagNode, color_type: type[_ColorType]) -> _ColorType:
    values = []
    for field in color_type._fields:
        if (child := node.get_child(field)) is None:
            raise IncompleteColor(color_type.__name__, field, "is missing")
        try:
            values.append(parse_float(child.text))
        except InvalidNumber as e:
            raise IncompleteColor(color_type.__name__, field, "is invalid") from e
    return color_type(*values)


def get_node_lab(node: TagNode) -> LabColor:
    """
    Extracts a Lab color from a node's child nodes ``L``, ``a`` and ``b``.

    :raises IncompleteColor: If a component is missing or not a valid number.

    >>> from _cddom.builder import parse_tree
    >>> root = parse_tree("<color><L>50</L><a>10</a><b>-5</b></color>")
    >>> get_node_lab(root.first_child)
    LabColor(L=50.0, a=10.0, b=-5.0)
    """
    return _get_color(node, LabColor)


def get_node_rgb(node: TagNode) -> RGBColor:
    """
    Extracts a RGB color from a node's child nodes ``R``, ``G`` and ``B``.

    :raises IncompleteColor: If a component is missing or not a valid number.
    """
    return _get_color(node, RGBColor)


def get_node_yxy(node: TagNode) -> YxyColor:
    """
    Extracts a Yxy color from a node's child nodes ``Y``, ``x`` and ``y``.

    :raises IncompleteColor: If a component is missing or not a valid number.
    """
    return _get_color(node, YxyColor)


__all__ = (
    "INVALID_FLOAT",
    "INVALID_INT",
    LabColor.__name__,
    RGBColor.__name__,
    YxyColor.__name__,
    get_node_lab.__name__,
    get_node_rgb.__name__,
    get_node_yxy.__name__,
    node_data_as_float.__name__,
    node_data_as_int.__name__,
    parse_float.__name__,
    parse_int.__name__,
)
