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
The tree is unaware of namespaces, names are stored as they appear in a document's
source, e.g. ``xml:lang``.  These helpers reconstruct such names from a namespace
aware tokenizer's data.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing import Final


XML_NAMESPACE: Final = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE: Final = "http://www.w3.org/2000/xmlns/"

GLOBAL_NAMESPACES: Final = MappingProxyType(
    {"xml": XML_NAMESPACE, "xmlns": XMLNS_NAMESPACE}
)


def deconstruct_clark_notation(name: str) -> tuple[Optional[str], str]:
    """
    Deconstructs a name in Clark notation, that may or may not include a namespace.

    :param name: An attribute's or tag node's name.
    :return: A tuple with the extracted namespace and local name.

    >>> deconstruct_clark_notation('{http://www.w3.org/XML/1998/namespace}lang')
    ('http://www.w3.org/XML/1998/namespace', 'lang')

    >>> deconstruct_clark_notation('profile')
    (None, 'profile')
    """
    if name.startswith("{"):
        a, b = name.split("}", maxsplit=1)
        return a[1:], b
    else:
        return None, name


def qualified_name(
    namespace: Optional[str],
    local_name: str,
    namespaces: Mapping[Optional[str], str],
) -> str:
    """
    Returns the name as it is written in a document, using the prefix that is bound to
    the namespace in the node's scope.

    >>> qualified_name(XML_NAMESPACE, "lang", {})
    'xml:lang'

    >>> qualified_name("http://colord", "sample", {"cd": "http://colord"})
    'cd:sample'

    >>> qualified_name("http://colord", "sample", {None: "http://colord"})
    'sample'
    """
    if not namespace:
        return local_name

    for prefix, uri in GLOBAL_NAMESPACES.items():
        if uri == namespace:
            return f"{prefix}:{local_name}"

    for prefix, uri in namespaces.items():
        if uri == namespace and prefix:
            return f"{prefix}:{local_name}"

    return local_name


def namespace_declarations(
    namespaces: Mapping[Optional[str], str],
    inherited_namespaces: Mapping[Optional[str], str],
) -> dict[str, str]:
    """
    Returns the namespace declarations that a node adds to its scope as attributes.

    >>> namespace_declarations({None: "http://a", "b": "http://b"}, {"b": "http://b"})
    {'xmlns': 'http://a'}
    """
    return {
        f"xmlns:{prefix}" if prefix else "xmlns": namespace
        for prefix, namespace in namespaces.items()
        if inherited_namespaces.get(prefix) != namespace
    }


__all__ = (
    "GLOBAL_NAMESPACES",
    "XML_NAMESPACE",
    "XMLNS_NAMESPACE",
    deconstruct_clark_notation.__name__,
    namespace_declarations.__name__,
    qualified_name.__name__,
)
