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
from abc import ABC, abstractmethod
from collections.abc import Sequence
from importlib.metadata import entry_points
from importlib.util import find_spec
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator

    from _cddom.parser import Event, ParserOptions


logger = logging.getLogger(__name__)


class PluginManager:
    __slots__ = ("loaded", "parsers")

    def __init__(self):
        self.loaded = False
        self.parsers: dict[str, type[XMLEventParserInterface]] = {}

    def get_parser(
        self, preferences: str | Sequence[str]
    ) -> type[XMLEventParserInterface]:
        """
        Returns the first available parser adapter from the given preferences.  If none
        of these is available, the first registered one is chosen.
        """
        if not self.loaded:
            self.load_plugins()

        if isinstance(preferences, str):
            preferences = (preferences,)

        for name in preferences:
            if (parser := self.parsers.get(name)) is not None:
                return parser

        for parser in self.parsers.values():
            logger.debug(
                "None of the preferred parsers %s is available, using %s.",
                preferences,
                parser.name,
            )
            return parser

        raise RuntimeError("No available parsers.")

    def load_plugins(self):
        """
        Imports the contributed parser adapters whose dependencies are available and
        loads all modules that are registered as entrypoint in the ``cddom`` group.
        """
        self.loaded = True

        if find_spec("lxml.etree"):
            import _cddom.plugins.lxml_parser
        if find_spec("xml.sax"):
            import _cddom.plugins.expat_parser  # noqa: F401

        for entrypoint in entry_points().select(group="cddom"):
            entrypoint.load()

        logger.debug("Available parsers: %s", ", ".join(self.parsers))


plugin_manager = PluginManager()


class XMLEventParserInterface(ABC):
    """
    This is the base class for tokenizer adapters.  After initialization their
    :meth:`parse` method is called once to iterate over the parser events of one
    input buffer.  Subclasses are registered by their :attr:`name` upon definition.

    An adapter must emit a ``Text`` event for a contiguous run of character data and
    translate the tokenizer's errors to :exc:`_cddom.exceptions.ParsingError`.

    :param options: The parsing options the user passed with the input data.
    """

    name: str
    """
    The parser can be selected by this class attribute's value as (member of) a
    :attr:`ParserOptions.preferred_parsers` setting.
    """

    def __init_subclass__(cls):
        plugin_manager.parsers[cls.name] = cls

    @abstractmethod
    def __init__(self, options: ParserOptions):
        pass

    @abstractmethod
    def parse(self, data: bytes) -> Iterator[Event]:
        """
        Parses the data and yields the parser events in document order.

        :param data: The complete input data.
        """
        pass


__all__ = (
    PluginManager.__name__,
    XMLEventParserInterface.__name__,
    "plugin_manager",
)
