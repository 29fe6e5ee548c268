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
import warnings
from enum import IntEnum, auto
from typing import TYPE_CHECKING, NamedTuple, Optional, TypeAlias

from _cddom.exceptions import ParsingEmptyStream
from _cddom.plugins import plugin_manager

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from _cddom.typing import InputStream, _AttributesData


logger = logging.getLogger(__name__)


TERMINATOR = "\0"
"""Ends the input data if no explicit length is given."""


class EventType(IntEnum):
    TagStart = auto()
    TagEnd = auto()
    Text = auto()


class ParserOptions(NamedTuple):
    """
    The configuration options that define an XML parser's behaviour.

    The used parser backend is determined by their availability and the
    ``preferred_parsers`` setting.  *cddom* comes with two contributed implementations
    and further can be added to the plugin manager based on
    :class:`_cddom.plugins.XMLEventParserInterface`.

    The ``lxml`` based parser requires the *lxml* package to be present in the
    interpreter environment.  The ``expat`` parser adapter depends on the
    :mod:`xml.sax.expatreader` module from the standard library.
    """

    encoding: Optional[str] = None
    """
    This should be used for data where the encoding is not noted in an XML document
    declaration or indicated by a BOM for Unicode encodings.  It doesn't affect parsing
    of data that is passed as :class:`str`.  Default: :obj:`None`.
    """
    preferred_parsers: str | Sequence[str] = ("lxml", "expat")
    """
    A parser adapter name or a sequence of such that are preferably to be used.
    Default: ``("lxml", "expat")``.
    """


class TagEventData(NamedTuple):
    name: str
    attributes: _AttributesData | None
    """It is optional in case of a :py:enum:`EventType.TagEnd`."""


Event: TypeAlias = tuple[EventType, str | TagEventData]
"""
An XML stream event tuple consists of two values.  The first is a member of
:class:`EventType` that signals the type of event, the second carries the relevant
data: a :class:`TagEventData` for tag events and a :class:`str` for text events.
All character entities must be resolved.
"""


def _limit_input(input_: InputStream, length: int) -> InputStream:
    if length < 0:
        terminator = TERMINATOR if isinstance(input_, str) else TERMINATOR.encode()
        return input_.split(terminator, maxsplit=1)[0]

    if length > len(input_):
        warnings.warn(
            f"The given length {length} exceeds the input data's size of "
            f"{len(input_)}.",
            category=UserWarning,
        )
    return input_[:length]


def parse_events(
    input_: InputStream, options: ParserOptions, length: int = -1
) -> Iterator[Event]:
    """
    Yields the events of the preferred available parser for the given input.

    :param input_: The XML data.
    :param options: The parser configuration.
    :param length: The number of bytes respectively characters to consider.  A
                   negative value considers the data up to a terminating null
                   character or its end.
    """
    input_ = _limit_input(input_, length)

    if isinstance(input_, str):
        input_ = input_.encode("utf-8")
        options = options._replace(encoding="utf-8")

    if not input_:
        raise ParsingEmptyStream

    parser = plugin_manager.get_parser(options.preferred_parsers)
    logger.debug("Parsing %d bytes with the %s parser.", len(input_), parser.name)
    yield from parser(options).parse(input_)


__all__ = (
    "Event",
    "EventType",
    ParserOptions.__name__,
    TagEventData.__name__,
    parse_events.__name__,
)
