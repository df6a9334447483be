import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

API_KEY_ENV = 'STRING_EXTRACTOR_API_KEY'
DEFAULT_API_KEY = 'dev-key'

BOOL_FIELDS = ('use_accessor_class', 'backup_original', 'recursive')
PATH_FIELDS = ('input_file', 'scan_dir', 'xml_file')
TEXT_FIELDS = ('prefix', 'suffix')


def api_key():
    # can be overridden by env var STRING_EXTRACTOR_API_KEY
    return os.environ.get(API_KEY_ENV, DEFAULT_API_KEY)


@dataclass
class ExtractionConfig:
    """Fully resolved options for one run, single file or recursive."""
    input_file: Optional[Path] = None
    scan_dir: Optional[Path] = None
    xml_file: Optional[Path] = None
    use_accessor_class: bool = False
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    backup_original: bool = False
    recursive: bool = False

    def resolve(self, confirm=None):
        """Settle the input_file/scan_dir/recursive combination.

        ``confirm(question)`` answers the two ambiguous cases (both inputs
        given, directory given without recursive); without it the current
        ``recursive`` flag is kept.
        """
        recursive = self.recursive
        if self.input_file is not None and self.scan_dir is not None and confirm is not None:
            recursive = confirm('Both a file and a directory were given, scan the directory?')
        elif not recursive and self.input_file is None and self.scan_dir is not None and confirm is not None:
            recursive = confirm('A directory needs recursive mode, enable it?')
        if self.scan_dir is None:
            recursive = False
        return replace(self, recursive=recursive)

    @classmethod
    def from_payload(cls, p):
        """Validate a JSON payload, returning ``(True, config)`` or ``(False, message)``."""
        if not isinstance(p, dict):
            return False, 'payload must be a JSON object'
        unknown = set(p) - set(BOOL_FIELDS + PATH_FIELDS + TEXT_FIELDS)
        if unknown:
            return False, f"unknown fields: {', '.join(sorted(unknown))}"
        if not (p.get('input_file') or p.get('scan_dir')):
            return False, 'missing input_file or scan_dir'
        values = {}
        for name in BOOL_FIELDS:
            if name in p:
                if not isinstance(p[name], bool):
                    return False, f'{name} must be a boolean'
                values[name] = p[name]
        for name in PATH_FIELDS + TEXT_FIELDS:
            if p.get(name) is None:
                continue
            if not isinstance(p[name], str) or not p[name].strip():
                return False, f'{name} must be a non empty string'
            values[name] = Path(p[name]) if name in PATH_FIELDS else p[name]
        if 'recursive' not in values:
            values['recursive'] = 'scan_dir' in values and 'input_file' not in values
        return True, cls(**values).resolve()
