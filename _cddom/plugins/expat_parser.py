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

from collections import deque
from typing import TYPE_CHECKING
from xml import sax

from _cddom.exceptions import ParsingError
from _cddom.parser import EventType, TagEventData
from _cddom.plugins import XMLEventParserInterface


if TYPE_CHECKING:
    from collections.abc import Iterator

    from _cddom.parser import Event, ParserOptions


class ContentHandler(sax.handler.ContentHandler):
    __slots__ = ("events",)

    def __init__(self, events: deque[Event]):
        super().__init__()
        self.events = events

    def characters(self, content: str):
        self.events.append((EventType.Text, content))

    def endElement(self, name: str):  # noqa: N802
        self.events.append((EventType.TagEnd, TagEventData(name, None)))

    def startElement(  # noqa: N802
        self, name: str, attrs: sax.xmlreader.AttributesImpl
    ):
        self.events.append(
            (EventType.TagStart, TagEventData(name, dict(attrs.items())))
        )


class ExpatParser(XMLEventParserInterface):
    """
    Employs the standard library's expat binding without namespace processing, names
    are reported as they are written in the document.
    """

    __slots__ = ("encoding", "events", "parser", "unprocessed_text")

    name = "expat"

    def __init__(self, options: ParserOptions):
        self.encoding = options.encoding
        self.events: deque[Event] = deque()
        self.parser = self.make_parser()
        self.unprocessed_text = ""

    def emit_events(self) -> Iterator[Event]:
        while self.events:
            event_type, event_data = self.events.popleft()
            if event_type is EventType.Text:
                assert isinstance(event_data, str)
                self.unprocessed_text += event_data
            else:
                if self.unprocessed_text:
                    yield EventType.Text, self.unprocessed_text
                    self.unprocessed_text = ""
                yield event_type, event_data

    def make_parser(self) -> sax.xmlreader.IncrementalParser:
        parser = sax.make_parser()
        assert isinstance(parser, sax.xmlreader.IncrementalParser)
        parser.setFeature(sax.handler.feature_namespaces, False)
        parser.setFeature(sax.handler.feature_external_ges, False)
        parser.setContentHandler(ContentHandler(self.events))
        return parser

    def parse(self, data: bytes) -> Iterator[Event]:
        try:
            if self.encoding is None:
                self.parser.feed(data)
            else:
                self.parser.feed(data.decode(self.encoding))
            yield from self.emit_events()
            self.parser.close()
        except sax.SAXParseException as e:
            raise ParsingError(
                e.getMessage(), e.getLineNumber(), e.getColumnNumber()
            ) from e
        except UnicodeDecodeError as e:
            raise ParsingError(str(e)) from e

        yield from self.emit_events()
        if self.unprocessed_text:
            yield EventType.Text, self.unprocessed_text


__all__ = (ExpatParser.__name__,)
