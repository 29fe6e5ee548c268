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
A plain textual representation of a tree to inspect its structure and content.  It
isn't meant to be parsed.

>>> from _cddom.builder import parse_tree
>>> print(to_string(parse_tree("<a><b>x</b><c/></a>")), end="")
 <a> []
  <b> [x]
  <c> []
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from _cddom.typing import ParentNodeType


_ESCAPES: Final = str.maketrans({"\n": "\\n", "\r": "\\r"})


def to_string(root: ParentNodeType, indentation: str = " ") -> str:
    """
    Returns one line for each descendant of the given node in document order.  Each
    line is indented per the node's depth in the tree and contains the node's name and
    its text.  Line breaks in texts are escaped.

    :param root: The node whose descendants are represented, usually a tree's root.
    :param indentation: The string that is repeated for each level of depth.
    """
    lines = []
    for node in root.iterate_descendants():
        text = node.text.translate(_ESCAPES)
        lines.append(f"{indentation * (node.depth + 1)}<{node.name}> [{text}]\n")
    return "".join(lines)


__all__ = (to_string.__name__,)
