from pathlib import Path

import pytest

from _cddom.plugins import plugin_manager
from cddom import Document, ParserOptions


FILES_PATH = Path(__file__).parent / "files"

plugin_manager.load_plugins()
AVAILABLE_PARSERS = tuple(plugin_manager.parsers)


@pytest.fixture
def files_path():
    return FILES_PATH


@pytest.fixture(params=AVAILABLE_PARSERS)
def parser_options(request):
    return ParserOptions(preferred_parsers=request.param)


@pytest.fixture
def profile_document(parser_options):
    return Document(
        (FILES_PATH / "profile.xml").read_bytes(), parser_options=parser_options
    )


@pytest.fixture
def queries_sample():
    return Document(
        """\
            <root>
                <node n="1">one</node>
                <node n="2">two</node>
                <other>
                    <node n="3"/>
                </other>
                <node/>
            </root>
        """
    )
