from cddom import Document, get_node_localized


def localized(xml: str, key: str = "name"):
    return get_node_localized(Document(xml).root[0], key)


def test_distinct_translation_is_kept():
    assert localized(
        '<p><name xml:lang="en_GB">colour</name><name>color</name></p>'
    ) == {"": "color", "en_GB": "colour"}


def test_identical_translation_is_omitted():
    assert localized(
        '<p><name>color</name><name xml:lang="en_US">color</name></p>'
    ) == {"": "color"}


def test_first_child_defines_the_unlocalized_text():
    result = localized(
        '<p><name xml:lang="de_DE">Farbe</name>'
        '<name xml:lang="fr_FR">Farbe</name>'
        "<name>color</name></p>"
    )
    assert result == {"de_DE": "Farbe", "": "color"}


def test_later_duplicate_locales_overwrite():
    result = localized(
        "<p><name>color</name>"
        '<name xml:lang="en_GB">colour</name>'
        '<name xml:lang="en_GB">hue</name></p>'
    )
    assert result == {"": "color", "en_GB": "hue"}


def test_empty_locale_attribute_is_unlocalized():
    result = localized(
        '<p><name>color</name><name xml:lang="">colour</name></p>'
    )
    assert result == {"": "colour"}


def test_only_direct_children_with_the_key_are_considered():
    result = localized(
        "<p><title>Title</title><name>color</name>"
        '<other><name xml:lang="en_GB">colour</name></other></p>'
    )
    assert result == {"": "color"}


def test_missing_key():
    assert localized("<p><title>Title</title></p>") is None
    assert localized("<p/>") is None


def test_profile_names(profile_document):
    profile = profile_document.get_node("profile")
    assert get_node_localized(profile, "name") == {
        "": "Example sRGB",
        "de_DE": "Beispiel-sRGB",
    }
    assert get_node_localized(profile, "copyright") == {"": "Public Domain"}
    assert get_node_localized(profile, "Copyright") is None


def test_localized_first_child_is_kept():
    result = localized(
        '<p><name xml:lang="en_GB">colour</name>'
        '<name xml:lang="en_US">colour</name></p>'
    )
    assert result == {"en_GB": "colour"}
