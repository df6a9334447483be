import logging
from dataclasses import dataclass, field
from typing import List

from .patterns import MARKUP, PATTERNS

logger = logging.getLogger(__name__)


@dataclass
class LiteralOccurrence:
    raw: str  # quoted literal as it appears in the source, e.g. '"Hello"'
    kind: str
    position: int

    @property
    def value(self) -> str:
        return self.raw[1:-1]


@dataclass
class ExtractedEntry:
    name: str
    raw: str
    reference: str

    @property
    def value(self) -> str:
        return self.raw[1:-1]


@dataclass
class ExtractionResult:
    kind: str
    entries: List[ExtractedEntry] = field(default_factory=list)
    found: int = 0
    skipped_duplicate: int = 0
    skipped_blank: int = 0
    count: int = 0  # counter value after the last accepted literal

    def __len__(self):
        return len(self.entries)


class LiteralScanner:
    """Regex based literal discovery for a single file's text."""

    def __init__(self, kind):
        self.kind = kind
        self.pattern = PATTERNS[kind]

    def occurrences(self, text):
        for m in self.pattern.finditer(text):
            if self.kind == MARKUP:
                # keep only the quoted value of android:attr="value"
                yield LiteralOccurrence(m.group('value'), self.kind, m.start('value'))
            else:
                yield LiteralOccurrence(m.group(), self.kind, m.start())

    def scan(self, text, names, count=0) -> ExtractionResult:
        """Collect distinct non blank literals, naming each from ``count + 1`` on."""
        result = ExtractionResult(self.kind, count=count)
        seen = set()
        for occurrence in self.occurrences(text):
            result.found += 1
            if not occurrence.value.strip():
                result.skipped_blank += 1
                continue
            if occurrence.raw in seen:
                result.skipped_duplicate += 1
                continue
            seen.add(occurrence.raw)
            count += 1
            name = names.resource_name(count)
            result.entries.append(ExtractedEntry(name, occurrence.raw, names.reference(self.kind, name)))
            logger.debug('literal %s at %d -> %s', occurrence.raw, occurrence.position, name)
        result.count = count
        return result
