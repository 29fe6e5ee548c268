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

from typing import TYPE_CHECKING, Final, Optional

if TYPE_CHECKING:
    from _cddom.typing import ParentNodeType


LANGUAGE_ATTRIBUTE: Final = "xml:lang"


def get_node_localized(node: ParentNodeType, key: str) -> Optional[dict[str, str]]:
    """
    Collects the texts of a node's children with the given name, mapped to their
    locale as noted with an ``xml:lang`` attribute.  The unlocalized text is mapped
    to an empty string.

    The first child's text is considered as the unlocalized one, any later localized
    text that is identical to it isn't included.  A locale that appears more than
    once is mapped to the last text.  The first child is always included, even
    if it is localized.

    :param node: The parent of the localized nodes.
    :param key: The name of the localized nodes.
    :return: A mapping of locales to texts or :obj:`None` if no such child exists.

    >>> from _cddom.builder import parse_tree
    >>> root = parse_tree(
    ...     '<p><name xml:lang="en_GB">colour</name><name>color</name></p>'
    ... )
    >>> get_node_localized(root.first_child, "name")
    {'en_GB': 'colour', '': 'color'}
    """
    if (first := node.get_child(key)) is None:
        return None
    unlocalized_text = first.text

    result: dict[str, str] = {}
    for child in node.iterate_children():
        if child.name != key:
            continue

        locale = child.get_attribute(LANGUAGE_ATTRIBUTE) or ""
        text = child.text
        if child is not first and locale and text == unlocalized_text:
            continue

        result[locale] = text

    return result


__all__ = (get_node_localized.__name__,)
