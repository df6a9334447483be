import pytest

from string_extractor.errors import InvalidResourceFileError
from string_extractor.resources import (MAX_RESOURCE_FILE_SIZE, ResourceWriter, format_resources,
                                        is_resource_file)

CANONICAL = ('<?xml version="1.0" encoding="utf-8"?>\r\n'
             '<resources>\r\n'
             '    <string name="a">A</string>\r\n'
             '    <string name="b">B</string>\r\n'
             '</resources>')


def test_format_splits_and_indents():
    text = '<resources><string name="a">A</string><string name="b">B</string></resources>'
    assert format_resources(text) == CANONICAL


def test_format_drops_both_declarations_and_root_attributes():
    text = ("<?xml version='1.0' encoding='utf-8'?>\n"
            '<resources xmlns:tools="http://schemas.android.com/tools">\n'
            '  <string name="a">A</string>\n'
            '<?xml version="1.0" encoding="utf-8"?>\n'
            '\n'
            '<string name="b">B</string>\n'
            '</resources>\n')
    assert format_resources(text) == CANONICAL


def test_format_is_idempotent():
    assert format_resources(CANONICAL) == CANONICAL
    assert format_resources(format_resources(CANONICAL + '\r\n<string name="c">C</string>')) == \
        format_resources(CANONICAL + '\r\n<string name="c">C</string>')


def test_format_removes_repeated_lines():
    text = CANONICAL + '\r\n<string name="a">A</string>'
    assert format_resources(text) == CANONICAL


def test_is_resource_file(tmp_path):
    path = tmp_path / 'strings.xml'
    assert not is_resource_file(path)
    path.write_text('just some text', encoding='utf-8')
    assert not is_resource_file(path)
    path.write_text(CANONICAL, encoding='utf-8')
    assert is_resource_file(path)
    path.write_text('<resources></resources>', encoding='utf-8')
    assert not is_resource_file(path)


def test_large_files_are_not_resource_files(tmp_path):
    path = tmp_path / 'big.xml'
    path.write_bytes(CANONICAL.encode('utf-8') + b' ' * MAX_RESOURCE_FILE_SIZE)
    assert not is_resource_file(path)


def test_writer_creates_canonical_file(tmp_path):
    path = tmp_path / 'strings.xml'
    with ResourceWriter(path) as writer:
        writer.write('a', 'A')
        writer.write('b', 'B')
        writer.save()
    assert path.read_bytes() == CANONICAL.encode('utf-8')
    assert writer.written == 2


def test_writer_merges_into_existing_file(tmp_path):
    path = tmp_path / 'strings.xml'
    path.write_bytes(CANONICAL.encode('utf-8'))
    with ResourceWriter(path) as writer:
        writer.write('b', 'B')
        writer.write('c', 'C')
        writer.save()
    assert path.read_bytes().decode('utf-8') == (
        '<?xml version="1.0" encoding="utf-8"?>\r\n'
        '<resources>\r\n'
        '    <string name="a">A</string>\r\n'
        '    <string name="b">B</string>\r\n'
        '    <string name="c">C</string>\r\n'
        '</resources>')


def test_writer_keeps_values_verbatim(tmp_path):
    path = tmp_path / 'strings.xml'
    with ResourceWriter(path) as writer:
        writer.write('a', 'Tom & Jerry <3')
        writer.save()
    assert '<string name="a">Tom & Jerry <3</string>' in path.read_text(encoding='utf-8')


def test_writer_rejects_files_that_are_not_resources(tmp_path):
    path = tmp_path / 'notes.xml'
    path.write_text('keep me', encoding='utf-8')
    with pytest.raises(InvalidResourceFileError):
        ResourceWriter(path)
    assert path.read_text(encoding='utf-8') == 'keep me'


def test_writer_treats_empty_file_as_new(tmp_path):
    path = tmp_path / 'strings.xml'
    path.touch()
    with ResourceWriter(path) as writer:
        writer.write('a', 'A')
        writer.write('b', 'B')
        writer.save()
    assert path.read_bytes() == CANONICAL.encode('utf-8')


def test_writer_flushes_every_entry(tmp_path):
    path = tmp_path / 'strings.xml'
    writer = ResourceWriter(path)
    try:
        writer.write('a', 'A')
        assert path.read_bytes() == b'\r\n<string name="a">A</string>'
    finally:
        writer.close()
