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

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Optional, overload
from weakref import ref

if TYPE_CHECKING:
    from collections.abc import Iterator
    from weakref import ReferenceType

    from _cddom.typing import ParentNodeType


class _ParentNode:
    """
    The common base of the tree's nodes that can contain other nodes.  Child nodes are
    owned by their parent, they only refer back to it weakly.
    """

    __slots__ = ("_child_nodes", "__weakref__")

    def __init__(self):
        self._child_nodes: list[TagNode] = []

    @overload
    def __getitem__(self, index: int) -> TagNode: ...

    @overload
    def __getitem__(self, index: slice) -> list[TagNode]: ...

    def __getitem__(self, index):
        match index:
            case int() | slice():
                return self._child_nodes[index]
        raise TypeError("Argument must be an integer or a slice.")

    def __len__(self) -> int:
        return len(self._child_nodes)

    def _append_child(
        self, name: str, attributes: Optional[Mapping[str, str]] = None
    ) -> TagNode:
        node = TagNode(name, attributes)
        node._parent = ref(self)
        self._child_nodes.append(node)
        return node

    @property
    def children(self) -> tuple[TagNode, ...]:
        """The node's child nodes in document order."""
        return tuple(self._child_nodes)

    @property
    def first_child(self) -> Optional[TagNode]:
        return self._child_nodes[0] if self._child_nodes else None

    def get_child(self, name: str) -> Optional[TagNode]:
        """
        Returns the first child node with the given name or :obj:`None`.  Later
        siblings with the same name are never considered.

        :param name: The qualified name of the child node, e.g. ``xml:lang``.
        """
        for node in self._child_nodes:
            if node.name == name:
                return node
        return None

    def iterate_children(self) -> Iterator[TagNode]:
        yield from self._child_nodes

    def iterate_descendants(self) -> Iterator[TagNode]:
        """Yields all descendant nodes in document order, that is pre-order."""
        for node in self._child_nodes:
            yield node
            yield from node.iterate_descendants()

    @property
    def last_child(self) -> Optional[TagNode]:
        return self._child_nodes[-1] if self._child_nodes else None

    @property
    def parent(self) -> Optional[ParentNodeType]:
        return None


class _DocumentNode(_ParentNode):
    """
    The synthetic root of a tree.  It has no name, text or attributes and contains the
    document's top-level element.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}({len(self)}) [{hex(id(self))}]>"

    @property
    def depth(self) -> int:
        return -1

    @property
    def location_path(self) -> str:
        return ""


class TagNode(_ParentNode):
    """
    The instances of this class represent the elements of a document.

    :param name: The element's qualified name.
    :param attributes: Optional attributes of the element.

    Instances are created by a tree builder and are not supposed to be altered
    afterwards.  Hence all public properties are read-only.

    Attribute values and child nodes can be obtained with the subscript notation.

    >>> from _cddom.builder import parse_tree
    >>> root = parse_tree('<root ham="spam"><child/></root>').first_child
    >>> root["ham"]
    'spam'
    >>> root["eggs"] is None
    True
    >>> root[0].name
    'child'
    >>> "ham" in root
    True
    """

    __slots__ = ("__attributes", "__name", "_parent", "_text_fragments")

    def __init__(self, name: str, attributes: Optional[Mapping[str, str]] = None):
        if not name:
            raise ValueError("A tag node's name must not be empty.")
        self.__attributes: dict[str, str] = dict(attributes or {})
        self.__name = name
        self._parent: Optional[ReferenceType[ParentNodeType]] = None
        self._text_fragments: list[str] = []
        super().__init__()

    def __contains__(self, item: str | TagNode) -> bool:
        match item:
            case str():
                return item in self.__attributes
            case TagNode():
                return item in self._child_nodes
            case _:
                raise TypeError("Argument must be a node instance or an attribute name.")

    @overload
    def __getitem__(self, item: int) -> TagNode: ...

    @overload
    def __getitem__(self, item: slice) -> list[TagNode]: ...

    @overload
    def __getitem__(self, item: str) -> Optional[str]: ...

    def __getitem__(self, item):
        if isinstance(item, str):
            return self.get_attribute(item)
        return super().__getitem__(item)

    def __repr__(self) -> str:
        return (
            f'<{self.__class__.__name__}("{self.name}", '
            f"{self.__attributes}, {self.location_path}) [{hex(id(self))}]>"
        )

    def _append_text(self, text: str):
        self._text_fragments.append(text)

    @property
    def attributes(self) -> Mapping[str, str]:
        """A read-only view on the node's attributes."""
        return MappingProxyType(self.__attributes)

    @property
    def depth(self) -> int:
        """The number of ancestors, a document's top-level element has a depth of 0."""
        return sum(1 for _ in self.iterate_ancestors())

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Returns an attribute's value or :obj:`None` if the node has no such attribute.

        :param name: The attribute's qualified name, e.g. ``xml:lang``.
        """
        return self.__attributes.get(name)

    @property
    def index(self) -> Optional[int]:
        """The node's position among its siblings."""
        if (parent := self.parent) is None:
            return None
        for index, node in enumerate(parent._child_nodes):
            if node is self:
                return index
        return None

    def iterate_ancestors(self) -> Iterator[TagNode]:
        """Yields the node's ancestors up to the top-level element."""
        node = self.parent
        while isinstance(node, TagNode):
            yield node
            node = node.parent

    @property
    def location_path(self) -> str:
        """
        The names of the node's ancestors and itself, joined with slashes.  Resolving
        this path from a document's root yields the node itself, unless a preceding
        sibling of one of these nodes has the same name.
        """
        names = [node.name for node in self.iterate_ancestors()]
        names.reverse()
        names.append(self.name)
        return "/".join(names)

    @property
    def name(self) -> str:
        """The node's qualified name as it appears in the document."""
        return self.__name

    @property
    def parent(self) -> Optional[ParentNodeType]:
        """
        The node's parent, that is a :class:`TagNode` or the synthetic root of a tree.
        """
        if self._parent is None:
            return None
        return self._parent()

    @property
    def text(self) -> str:
        """
        The character data that is immediately contained by the node.  Runs of only
        whitespace were dropped while parsing, the others are concatenated.
        """
        return "".join(self._text_fragments)


__all__ = (TagNode.__name__,)
