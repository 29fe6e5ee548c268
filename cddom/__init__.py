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

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from _cddom.builder import build_tree, parse_tree
from _cddom.exceptions import InvalidOperation, ParsingError
from _cddom.localization import get_node_localized
from _cddom.nodes import TagNode, _DocumentNode
from _cddom.parser import EventType, ParserOptions, TagEventData
from _cddom.queries import get_node
from _cddom.serializer import to_string
from _cddom.values import (
    INVALID_FLOAT,
    INVALID_INT,
    LabColor,
    RGBColor,
    YxyColor,
    get_node_lab,
    get_node_rgb,
    get_node_yxy,
    node_data_as_float,
    node_data_as_int,
)

if TYPE_CHECKING:
    from _cddom.typing import InputStream, ParentNodeType


# api


class Document:
    """
    This class represents a parsed XML document as a tree of :class:`TagNode` instances
    below a synthetic root node.

    :param source: The XML data.  An empty document is created if it's omitted.
    :param length: The number of bytes respectively characters of ``source`` to
                   consider.  A negative value considers the data up to a terminating
                   null character or its end.
    :param parser_options: A :class:`ParserOptions` instance to configure the used
                           parser.

    A document can be populated only once, either upon initialization or with
    :meth:`parse_data`.  Its nodes are not to be altered.

    >>> document = Document("<profile><name>sRGB</name></profile>")
    >>> node = document.get_node("profile/name")
    >>> node.text
    'sRGB'
    >>> node in document
    True

    The string coercion of a document yields a representation for debugging purposes:

    >>> print(document, end="")
     <profile> []
      <name> [sRGB]
    """

    __slots__ = ("__root", "parser_options")

    def __init__(
        self,
        source: Optional[InputStream] = None,
        /,
        length: int = -1,
        parser_options: Optional[ParserOptions] = None,
    ):
        self.parser_options = parser_options or ParserOptions()
        """The configuration that is used to parse the document's data."""
        self.__root = _DocumentNode()
        if source is not None:
            self.parse_data(source, length)

    def __contains__(self, node: TagNode) -> bool:
        """Tests whether a node is part of a document instance."""
        if not isinstance(node, TagNode):
            return False
        parent = node.parent
        while isinstance(parent, TagNode):
            parent = parent.parent
        return parent is self.__root

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({self.__root!r}) [{hex(id(self))}]>"

    def __str__(self) -> str:
        return self.to_string()

    def get_node(
        self, path: str, root: Optional[ParentNodeType] = None
    ) -> Optional[TagNode]:
        """
        Resolves a slash-separated path of node names, each step selects the first
        child node with the name.

        :param path: The path, e.g. ``profile/name``.
        :param root: The node that the path is relative to, the document's
                     :attr:`root` is used if omitted.
        :return: The addressed node or :obj:`None`.
        """
        return get_node(self.__root if root is None else root, path)

    def parse_data(self, data: InputStream, length: int = -1):
        """
        Populates an empty document with the parsed data.

        :param data: The XML data.
        :param length: The number of bytes respectively characters to consider.  A
                       negative value considers the data up to a terminating null
                       character or its end.
        :raises InvalidOperation: If the document has been populated before.
        :raises ParsingError: If the data can't be parsed.  The document remains
                              empty then.
        """
        if len(self.__root):
            raise InvalidOperation("A document can only be populated once.")
        self.__root = parse_tree(data, length, self.parser_options)

    @property
    def root(self) -> _DocumentNode:
        """The synthetic root node that contains the document's top-level element."""
        return self.__root

    def to_string(self, indentation: str = " ") -> str:
        """
        Returns a representation of the tree for debugging purposes, one line per node.

        :param indentation: The string that is repeated for each level of depth.
        """
        return to_string(self.__root, indentation=indentation)


__all__ = (
    Document.__name__,
    EventType.__name__,
    "INVALID_FLOAT",
    "INVALID_INT",
    InvalidOperation.__name__,
    LabColor.__name__,
    ParserOptions.__name__,
    ParsingError.__name__,
    RGBColor.__name__,
    TagEventData.__name__,
    TagNode.__name__,
    YxyColor.__name__,
    build_tree.__name__,
    get_node.__name__,
    get_node_lab.__name__,
    get_node_localized.__name__,
    get_node_rgb.__name__,
    get_node_yxy.__name__,
    node_data_as_float.__name__,
    node_data_as_int.__name__,
    parse_tree.__name__,
    to_string.__name__,
)
