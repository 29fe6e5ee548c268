import pytest

from _cddom.names import XML_NAMESPACE, namespace_declarations, qualified_name


@pytest.mark.parametrize(
    ("namespace", "namespaces", "expected"),
    (
        (None, {}, "lang"),
        ("", {None: "http://a"}, "lang"),
        (XML_NAMESPACE, {}, "xml:lang"),
        ("http://a", {"a": "http://a"}, "a:lang"),
        ("http://a", {None: "http://a", "a": "http://a"}, "a:lang"),
        ("http://a", {None: "http://a"}, "lang"),
    ),
)
def test_qualified_name(namespace, namespaces, expected):
    assert qualified_name(namespace, "lang", namespaces) == expected


def test_namespace_declarations():
    assert namespace_declarations({}, {}) == {}
    assert namespace_declarations({"a": "http://a"}, {}) == {"xmlns:a": "http://a"}
    assert namespace_declarations({"a": "http://a"}, {"a": "http://a"}) == {}
    assert namespace_declarations({"a": "http://b"}, {"a": "http://a"}) == {
        "xmlns:a": "http://b"
    }
