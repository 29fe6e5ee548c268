import pytest

from cddom import EventType, ParserOptions, TagEventData, parse_tree
from _cddom.plugins import XMLEventParserInterface, plugin_manager
from _cddom.plugins.expat_parser import ExpatParser
from _cddom.plugins.lxml_parser import LxmlParser


def test_contributed_parsers_are_available():
    assert plugin_manager.parsers["lxml"] is LxmlParser
    assert plugin_manager.parsers["expat"] is ExpatParser


@pytest.mark.parametrize(
    ("preferences", "expected"),
    (
        ("expat", ExpatParser),
        (("expat", "lxml"), ExpatParser),
        (("unknown", "lxml"), LxmlParser),
        (("lxml", "expat"), LxmlParser),
    ),
)
def test_parser_preferences(preferences, expected):
    assert plugin_manager.get_parser(preferences) is expected


def test_unknown_preference_falls_back():
    assert plugin_manager.get_parser("unknown") in plugin_manager.parsers.values()


def test_custom_parser():
    class FixedParser(XMLEventParserInterface):
        name = "fixed"

        def __init__(self, options):
            self.options = options

        def parse(self, data):
            yield EventType.TagStart, TagEventData("fixed", {})
            yield EventType.Text, data.decode()
            yield EventType.TagEnd, TagEventData("fixed", None)

    try:
        root = parse_tree("anything", options=ParserOptions(preferred_parsers="fixed"))
        assert root[0].name == "fixed"
        assert root[0].text == "anything"
    finally:
        del plugin_manager.parsers["fixed"]
