import pytest

from cddom import Document, ParserOptions
from cddom.exceptions import InvalidOperation, ParsingError


def test_empty_document():
    document = Document()
    assert len(document.root) == 0
    assert document.root.parent is None
    assert document.get_node("anything") is None


def test_populate_once():
    document = Document()
    document.parse_data(b"<root><a/></root>")
    assert document.get_node("root/a") is not None

    with pytest.raises(InvalidOperation):
        document.parse_data(b"<root/>")

    with pytest.raises(InvalidOperation):
        Document("<root/>").parse_data("<root/>")


def test_failed_parsing_leaves_document_empty(parser_options):
    document = Document(parser_options=parser_options)
    with pytest.raises(ParsingError):
        document.parse_data("<root><a></root>")
    assert len(document.root) == 0

    document.parse_data("<root><a/></root>")
    assert document.get_node("root/a") is not None


def test_length_argument():
    document = Document(b"<root/><trailing>", 7)
    assert document.get_node("root") is not None


def test_parser_options_are_retained(parser_options):
    document = Document("<root/>", parser_options=parser_options)
    assert document.parser_options is parser_options
    assert Document().parser_options == ParserOptions()


def test_independent_documents():
    a = Document("<root><a>1</a></root>")
    b = Document("<root><a>1</a></root>")
    node = a.get_node("root/a")
    assert node in a
    assert node not in b


def test_nodes_outlive_their_tree():
    node = Document("<root><a>x</a></root>").get_node("root/a")
    assert node.text == "x"
    assert node.name == "a"


def test_profile_document(files_path):
    document = Document((files_path / "profile.xml").read_bytes())
    profile = document.root.first_child
    assert profile.name == "profile"
    assert [n.name for n in profile.children][:3] == ["name"] * 3
    assert document.get_node("profile/swatch")["kind"] == "reference"
    assert repr(document).startswith("<Document(<_DocumentNode(1) [0x")
