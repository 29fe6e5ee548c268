import pytest

from cddom import EventType, ParserOptions, TagEventData, build_tree, parse_tree
from cddom.exceptions import ParsingEmptyStream, ParsingError, ParsingValidityError


def test_attributes(parser_options):
    node = parse_tree('<a x="1" xml:lang="de_DE"/>', options=parser_options)[0]
    assert dict(node.attributes) == {"x": "1", "xml:lang": "de_DE"}
    assert node.get_attribute("xml:lang") == "de_DE"
    assert node.get_attribute("y") is None


def test_carriage_return_is_retained(parser_options):
    node = parse_tree("<a>&#13;</a>", options=parser_options)[0]
    assert node.text == "\r"


def test_cdata(parser_options):
    node = parse_tree("<a><![CDATA[ <b/> ]]></a>", options=parser_options)[0]
    assert node.text == " <b/> "
    assert len(node) == 0


def test_comments_and_processing_instructions_are_ignored(parser_options):
    root = parse_tree("<a>x<!-- y -->z<?pi data?></a>", options=parser_options)
    assert len(root) == 1
    assert root[0].text == "xz"
    assert len(root[0]) == 0


def test_document_order(parser_options):
    root = parse_tree("<a><b><c/></b><d/><b/></a>", options=parser_options)
    assert [n.name for n in root.iterate_descendants()] == ["a", "b", "c", "d", "b"]
    a = root.first_child
    assert [n.name for n in a.children] == ["b", "d", "b"]
    assert a[0][0].parent is a[0]
    assert a.parent is root
    assert root.parent is None


def test_empty_input(parser_options):
    for data in ("", b"", b"\0<a/>"):
        with pytest.raises(ParsingEmptyStream):
            parse_tree(data, options=parser_options)

    with pytest.raises(ParsingEmptyStream):
        parse_tree("<a/>", length=0, options=parser_options)


def test_encoding_declaration(parser_options):
    data = '<?xml version="1.0" encoding="ISO-8859-1"?><a>\xe9</a>'.encode("latin-1")
    assert parse_tree(data, options=parser_options)[0].text == "é"


def test_encoding_option(parser_options):
    options = parser_options._replace(encoding="ISO-8859-1")
    assert parse_tree("<a>\xe9</a>".encode("latin-1"), options=options)[0].text == "é"


def test_entities(parser_options):
    node = parse_tree("<a>&lt;&amp;&gt;&#x263A;</a>", options=parser_options)[0]
    assert node.text == "<&>☺"


def test_explicit_length(parser_options):
    root = parse_tree(b"<a>x</a><garbage", length=8, options=parser_options)
    assert root[0].text == "x"

    root = parse_tree("<a>ü</a>garbage", length=8, options=parser_options)
    assert root[0].text == "ü"


def test_explicit_length_exceeding_input(parser_options):
    with pytest.warns(UserWarning, match="exceeds"):
        root = parse_tree(b"<a/>", length=16, options=parser_options)
    assert root[0].name == "a"


def test_malformed_input(parser_options):
    with pytest.raises(ParsingError) as excinfo:
        parse_tree("<a>\n<b></a>", options=parser_options)

    assert excinfo.value.message
    assert excinfo.value.line == 2
    assert excinfo.value.__cause__ is not None


def test_malformed_input_position_is_reported_once(parser_options):
    with pytest.raises(ParsingError) as excinfo:
        parse_tree("<a>", options=parser_options)

    error = excinfo.value
    assert error.line == 1
    assert "column" not in error.message
    assert str(error).count("column") == 1
    assert str(error).endswith(f"(line 1, column {error.column})")


@pytest.mark.parametrize(
    "data",
    (
        "<a><b></b>",
        "<a></b>",
        "<a/><b/>",
        "text",
        '<a x="1" x="2"/>',
        "<a>&undefined;</a>",
    ),
)
def test_malformed_inputs(data, parser_options):
    with pytest.raises(ParsingError):
        parse_tree(data, options=parser_options)


def test_namespaced_names(parser_options):
    root = parse_tree(
        '<cd:a xmlns:cd="http://colord" cd:x="1" y="2"><cd:b/><c/></cd:a>',
        options=parser_options,
    )
    a = root[0]
    assert a.name == "cd:a"
    assert dict(a.attributes) == {"xmlns:cd": "http://colord", "cd:x": "1", "y": "2"}
    assert a[0].name == "cd:b"
    assert dict(a[0].attributes) == {}
    assert a[1].name == "c"


def test_default_namespace(parser_options):
    root = parse_tree('<a xmlns="http://colord"><b/></a>', options=parser_options)
    assert root[0].name == "a"
    assert dict(root[0].attributes) == {"xmlns": "http://colord"}
    assert root[0][0].name == "b"


def test_terminator(parser_options):
    root = parse_tree(b"<a>x</a>\0<garbage", options=parser_options)
    assert root[0].text == "x"


def test_text_runs_are_concatenated(parser_options):
    node = parse_tree("<a>one<b/>two<c>x</c> three </a>", options=parser_options)[0]
    assert node.text == "onetwo three "
    assert node[1].text == "x"


def test_text_is_retained_verbatim(parser_options):
    node = parse_tree("<a>  padded \n</a>", options=parser_options)[0]
    assert node.text == "  padded \n"


def test_whitespace_only_text_is_dropped(parser_options):
    root = parse_tree("<a>\n  <b>x</b>\n\t<c> </c>\n</a>", options=parser_options)
    a = root[0]
    assert a.text == ""
    assert a[0].text == "x"
    assert a[1].text == ""


def test_whitespace_is_dropped_in_profile(profile_document):
    for node in profile_document.root.iterate_descendants():
        assert not node.text or node.text.strip(" \t\n")


# events


def test_build_tree_from_events():
    root = build_tree(
        (
            (EventType.TagStart, TagEventData("a", {"x": "y"})),
            (EventType.Text, "foo"),
            (EventType.TagStart, TagEventData("b", {})),
            (EventType.TagEnd, TagEventData("b", None)),
            (EventType.Text, " \t\n"),
            (EventType.Text, "bar"),
            (EventType.TagEnd, TagEventData("a", None)),
            (EventType.Text, "\n"),
        )
    )
    assert len(root) == 1
    assert root[0].text == "foobar"
    assert root[0]["x"] == "y"
    assert root[0][0].name == "b"


def test_build_tree_with_unbalanced_end():
    with pytest.raises(ParsingValidityError):
        build_tree(
            (
                (EventType.TagStart, TagEventData("a", {})),
                (EventType.TagEnd, TagEventData("a", None)),
                (EventType.TagEnd, TagEventData("a", None)),
            )
        )


def test_build_tree_with_unclosed_element():
    with pytest.raises(ParsingValidityError, match="a/b"):
        build_tree(
            (
                (EventType.TagStart, TagEventData("a", {})),
                (EventType.TagStart, TagEventData("b", {})),
                (EventType.TagEnd, TagEventData("b", None)),
                (EventType.TagStart, TagEventData("b", {})),
            )
        )


def test_build_tree_with_text_outside_root():
    with pytest.raises(ParsingValidityError):
        build_tree(((EventType.Text, "foo"),))


def test_default_parser_options():
    assert ParserOptions().preferred_parsers == ("lxml", "expat")
    assert parse_tree("<a/>")[0].name == "a"
