from string_extractor.patterns import (CODE, CODE_LITERAL_PATTERN, MARKUP, MARKUP_LITERAL_PATTERN,
                                       is_supported, source_kind)


def test_source_kind_by_extension():
    assert source_kind('Main.java') == CODE
    assert source_kind('res/layout/main.xml') == MARKUP
    assert source_kind('notes.txt') is None
    assert not is_supported('Main.kt')


def test_code_pattern_is_non_greedy():
    text = 'call("a", "b") + "c"'
    assert CODE_LITERAL_PATTERN.findall(text) == ['"a"', '"b"', '"c"']


def test_markup_pattern_only_known_attributes():
    text = ('<View android:text="One" android:title="Two" android:hint="Three" '
            'android:summary="Four" android:description="Five" android:label="Six" '
            'android:tag="Seven" />')
    values = [m.group('value') for m in MARKUP_LITERAL_PATTERN.finditer(text)]
    assert values == ['"One"', '"Two"', '"Three"', '"Four"', '"Five"', '"Six"']


def test_markup_pattern_skips_references():
    text = '<View android:text="@string/a" android:hint="?attr/b" android:label="@custom" />'
    assert MARKUP_LITERAL_PATTERN.search(text) is None


def test_markup_attribute_is_case_insensitive():
    m = MARKUP_LITERAL_PATTERN.search('<View android:TEXT="Loud" />')
    assert m.group('value') == '"Loud"'
