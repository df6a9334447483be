import re
from pathlib import Path

CODE = 'code'
MARKUP = 'markup'

# Attributes whose values are extracted from layout/menu/manifest xml
MARKUP_ATTRIBUTES = ('text', 'title', 'hint', 'summary', 'description', 'label')

# Any double quoted substring; IGNORECASE kept for parity with the markup rule
CODE_LITERAL_PATTERN = re.compile(r'".*?"', re.IGNORECASE)

# android:text="..." and friends, skipping values that start with '@' or '?'
# (existing @string/..., ?attr/... references)
MARKUP_LITERAL_PATTERN = re.compile(
    r'android:(?:' + '|'.join(MARKUP_ATTRIBUTES) + r')=(?P<value>"(?![@?]).*?")',
    re.IGNORECASE,
)

PACKAGE_PATTERN = re.compile(r'package .*?;')

EXTENSION_KINDS = {
    '.java': CODE,
    '.xml': MARKUP,
}

PATTERNS = {
    CODE: CODE_LITERAL_PATTERN,
    MARKUP: MARKUP_LITERAL_PATTERN,
}


def source_kind(path):
    """Return CODE or MARKUP for a supported file, None for anything else."""
    return EXTENSION_KINDS.get(Path(path).suffix.lower())


def is_supported(path) -> bool:
    return source_kind(path) is not None
