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
Node lookups with slash-separated paths of node names, e.g. ``profile/name``.

Each step of a path selects the *first* child node with that name, later siblings
with the same name can't be reached with a path.

>>> from _cddom.builder import parse_tree
>>> root = parse_tree("<a><b>1</b><b>2<c/></b></a>")
>>> get_node(root, "a/b").text
'1'
>>> get_node(root, "a/b/c") is None
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Optional

if TYPE_CHECKING:
    from _cddom.nodes import TagNode
    from _cddom.typing import ParentNodeType


PATH_SEPARATOR: Final = "/"


def get_node(root: ParentNodeType, path: str) -> Optional[TagNode]:
    """
    Resolves a path relative to a node.

    :param root: The node that the path is relative to, usually a tree's root.
    :param path: Slash-separated node names.  An empty step never matches.
    :return: The addressed node or :obj:`None` if any step can't be resolved.
    """
    result: Optional[TagNode] = None
    node = root
    for name in path.split(PATH_SEPARATOR):
        if (result := node.get_child(name)) is None:
            return None
        node = result
    return result


__all__ = (get_node.__name__,)
