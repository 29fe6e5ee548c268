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

import re
from typing import TYPE_CHECKING, Final

from lxml import etree

from _cddom.exceptions import ParsingError
from _cddom.names import (
    deconstruct_clark_notation,
    namespace_declarations,
    qualified_name,
)
from _cddom.parser import EventType, TagEventData
from _cddom.plugins import XMLEventParserInterface


if TYPE_CHECKING:
    from collections.abc import Iterator

    from _cddom.parser import Event, ParserOptions
    from _cddom.typing import _AttributesData


# lxml appends the position to its messages
_strip_position: Final = re.compile(r",? line \d+, column \d+$").sub


class LxmlParser(XMLEventParserInterface):
    __slots__ = ("parser",)

    name = "lxml"

    def __init__(self, options: ParserOptions):
        encoding = options.encoding
        if encoding is not None and encoding.lower().endswith(("-be", "-le")):
            encoding = encoding[:-3]

        self.parser = etree.XMLPullParser(
            dtd_validation=False,
            encoding=encoding,
            events=("end", "start"),
            load_dtd=False,
            no_network=True,
            remove_blank_text=False,
            remove_comments=True,
            remove_pis=True,
            resolve_entities=True,
            strip_cdata=False,
        )

    def emit_events(self) -> Iterator[Event]:
        for event in self.parser.read_events():
            yield from self.handle_event(event)

    def handle_element_preceding_text(self, element: etree._Element):
        if ((parent := element.getparent()) is not None) and (
            parent.index(element) == 0
        ):
            if parent.text:
                yield EventType.Text, parent.text
        elif (previous := element.getprevious()) is not None:
            if previous.tail:
                yield EventType.Text, previous.tail
            previous.clear()

    def handle_event(self, event: tuple[str, etree._Element]) -> Iterator[Event]:
        action, element = event
        assert isinstance(element, etree._Element)

        if action == "start":
            yield from self.handle_element_preceding_text(element)
            yield EventType.TagStart, self.tag_event_data_from_element(element)

        elif action == "end":
            if len(element):
                if element[-1].tail:
                    yield EventType.Text, element[-1].tail
                    element[-1].tail = None
            else:
                if element.text:
                    yield EventType.Text, element.text

            yield EventType.TagEnd, TagEventData(self.tag_name(element), None)

    def parse(self, data: bytes) -> Iterator[Event]:
        try:
            self.parser.feed(data)
            yield from self.emit_events()
            self.parser.close()
            yield from self.emit_events()
        except etree.XMLSyntaxError as e:
            raise ParsingError(
                _strip_position("", e.msg), e.lineno, e.offset
            ) from e

    def process_attributes(self, element: etree._Element) -> _AttributesData:
        namespaces = element.nsmap
        parent = element.getparent()
        result = namespace_declarations(
            namespaces, {} if parent is None else parent.nsmap
        )
        for name, value in element.attrib.items():
            assert isinstance(name, str)
            assert isinstance(value, str)
            namespace, local_name = deconstruct_clark_notation(name)
            result[qualified_name(namespace, local_name, namespaces)] = value
        return result

    def tag_event_data_from_element(self, element: etree._Element) -> TagEventData:
        return TagEventData(
            name=self.tag_name(element),
            attributes=self.process_attributes(element),
        )

    @staticmethod
    def tag_name(element: etree._Element) -> str:
        local_name = etree.QName(element).localname
        if element.prefix:
            return f"{element.prefix}:{local_name}"
        return local_name


__all__ = (LxmlParser.__name__,)
