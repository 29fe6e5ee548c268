from cddom import Document, parse_tree, to_string


def test_format():
    document = Document('<a x="y"><b>one</b><c><d>two</d></c>three</a>')
    assert str(document) == (
        " <a> [three]\n"
        "  <b> [one]\n"
        "  <c> []\n"
        "   <d> [two]\n"
    )


def test_indentation():
    document = Document("<a><b><c/></b></a>")
    assert document.to_string(indentation="..") == "..<a> []\n....<b> []\n......<c> []\n"


def test_empty_document():
    assert str(Document()) == ""


def test_line_breaks_are_escaped():
    document = Document("<a>one\ntwo&#13;<b>\n</b></a>")
    assert str(document) == " <a> [one\\ntwo\\r]\n  <b> []\n"


def test_one_line_per_node(profile_document):
    lines = str(profile_document).splitlines()
    assert len(lines) == sum(1 for _ in profile_document.root.iterate_descendants())
    assert lines[0] == " <profile> []"
    assert lines[1] == "  <name> [Example sRGB]"


def test_subtree():
    root = parse_tree("<a><b><c>x</c></b></a>")
    assert to_string(root[0][0]) == "   <c> [x]\n"
