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

import logging
from typing import TYPE_CHECKING, Final, Optional

from _cddom.exceptions import InvalidCodePath, ParsingValidityError
from _cddom.nodes import TagNode, _DocumentNode
from _cddom.parser import EventType, ParserOptions, TagEventData, parse_events

if TYPE_CHECKING:
    from collections.abc import Iterable

    from _cddom.parser import Event
    from _cddom.typing import InputStream, ParentNodeType


logger = logging.getLogger(__name__)


WHITESPACE: Final = frozenset(" \t\n")


def _is_whitespace(text: str) -> bool:
    return all(character in WHITESPACE for character in text)


def build_tree(events: Iterable[Event]) -> _DocumentNode:
    """
    Builds a tree from a sequence of parser events and returns its synthetic root.

    Character data that consists only of spaces, tabs and newlines is dropped, any
    other is appended to the currently open node's text as is.

    :param events: The events in document order.
    :raises ParsingValidityError: When the events aren't properly balanced.
    """
    root = _DocumentNode()
    cursor: ParentNodeType = root
    nodes_count = 0

    for type_, data in events:
        match type_:
            case EventType.TagStart:
                assert isinstance(data, TagEventData)
                cursor = cursor._append_child(data.name, data.attributes)
                nodes_count += 1

            case EventType.TagEnd:
                if not isinstance(cursor, TagNode):
                    raise ParsingValidityError(
                        "Encountered the end of an element while none is open."
                    )
                if __debug__ and isinstance(data, TagEventData):
                    assert cursor.name == data.name
                parent = cursor.parent
                assert parent is not None
                cursor = parent

            case EventType.Text:
                assert isinstance(data, str)
                if _is_whitespace(data):
                    continue
                if not isinstance(cursor, TagNode):
                    raise ParsingValidityError(
                        "Encountered character data outside of the root element."
                    )
                cursor._append_text(data)

            case _:
                raise InvalidCodePath

    if cursor is not root:
        raise ParsingValidityError(
            f"The input ended while the element `{cursor.location_path}` is open."
        )

    logger.debug("Built a tree with %d nodes.", nodes_count)
    return root


def parse_tree(
    data: InputStream,
    length: int = -1,
    options: Optional[ParserOptions] = None,
) -> _DocumentNode:
    """
    Parses the provided input to a tree and returns its synthetic root.

    :param data: The XML data.
    :param length: The number of bytes respectively characters to consider.  A
                   negative value considers the data up to a terminating null
                   character or its end.
    :param options: The parser configuration.
    :raises ParsingError: When the data isn't well-formed XML.  A partially built
                          tree is discarded.
    """
    if options is None:
        options = ParserOptions()
    return build_tree(parse_events(data, options, length))


__all__ = (build_tree.__name__, parse_tree.__name__)
