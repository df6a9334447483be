"""
Writing and merging of android string resource files (``res/values/*.xml``).

Entries are appended to the target one at a time and flushed, so a crash in
the middle of a run leaves everything written so far on disk. ``save()`` then
re-reads the whole file, drops the xml prolog and ``<resources>`` wrapper lines
(from the original file and from every earlier run), removes repeated lines and
writes it back in the canonical layout:

    <?xml version="1.0" encoding="utf-8"?>
    <resources>
        <string name="extracted_string1">Hello</string>
    </resources>

Values are written as found between the quotes in the source, nothing is
escaped or decoded.
"""
import logging
import re
from pathlib import Path

from .errors import InvalidResourceFileError

logger = logging.getLogger(__name__)

NEWLINE = '\r\n'
INDENT = '    '

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
XML_DECLARATION_SINGLE = "<?xml version='1.0' encoding='utf-8'?>"
RESOURCES_OPEN = '<resources'
RESOURCES_CLOSE = '</resources>'
STRING_OPEN = '<string'

# only the head of a file is inspected when deciding whether it is a resource file
PROBE_SIZE = 2048
# anything this big is not a hand written strings.xml
MAX_RESOURCE_FILE_SIZE = 4 * 1024 * 1024

RESOURCES_OPEN_TAG = re.compile(r'<resources.*?>')
ENTRY_BOUNDARY = re.compile(r'(?<=</string>)\s*(?=<)')


def is_resource_file(path) -> bool:
    """Check whether ``path`` exists and its head looks like a string resource file."""
    path = Path(path)
    if not path.is_file():
        return False
    if path.stat().st_size >= MAX_RESOURCE_FILE_SIZE:
        return False
    with open(path, 'rb') as fh:
        head = fh.read(PROBE_SIZE).decode('latin-1')
    has_root = any(marker in head for marker in (XML_DECLARATION, XML_DECLARATION_SINGLE, RESOURCES_OPEN, RESOURCES_CLOSE))
    return has_root and STRING_OPEN in head


def format_string_entry(name, value) -> str:
    return f'<string name="{name}">{value}</string>'


def entry_lines(text):
    """Return the entry lines of ``text`` in order, stripped and without repeats."""
    text = RESOURCES_OPEN_TAG.sub('', text)
    for marker in (RESOURCES_CLOSE, XML_DECLARATION, XML_DECLARATION_SINGLE):
        text = text.replace(marker, '')
    lines = []
    seen = set()
    for raw_line in text.splitlines():
        for part in ENTRY_BOUNDARY.split(raw_line):
            line = part.strip()
            if not line or line in seen:
                continue
            seen.add(line)
            lines.append(line)
    return lines


def build_document(lines) -> str:
    parts = [XML_DECLARATION, NEWLINE, RESOURCES_OPEN, '>']
    for line in lines:
        parts.append(NEWLINE + INDENT + line)
    parts.append(NEWLINE + RESOURCES_CLOSE)
    return ''.join(parts)


def format_resources(text) -> str:
    """Reformat resource file text into the canonical layout.

    Formatting an already canonical document returns it unchanged.
    """
    return build_document(entry_lines(text))


def write_document(path, lines):
    Path(path).write_bytes(build_document(lines).encode('utf-8'))


def format_file(path):
    path = Path(path)
    text = path.read_text(encoding='utf-8')
    path.write_bytes(format_resources(text).encode('utf-8'))


class ResourceWriter:
    """Appends string entries to a resource file and merges it on ``save()``.

    A target that already exists but is not a string resource file is
    rejected with InvalidResourceFileError before anything is written.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.existed = self.path.exists() and not (self.path.is_file() and self.path.stat().st_size == 0)
        self.is_resource = is_resource_file(self.path)
        if self.existed and not self.is_resource:
            raise InvalidResourceFileError(self.path)
        self.written = 0
        self._fh = open(self.path, 'a', encoding='utf-8', newline='')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def write(self, name, value):
        self._fh.write(NEWLINE)
        self._fh.write(format_string_entry(name, value))
        self._fh.flush()
        self.written += 1

    def close(self):
        if not self._fh.closed:
            self._fh.flush()
            self._fh.close()

    def save(self):
        """Close the file and merge it into the canonical layout."""
        self.close()
        format_file(self.path)
        logger.debug('merged %d entries into %s', self.written, self.path)
