"""
Recursive extraction over a project directory.

Every .java and .xml file below the scan root is extracted in turn with one
shared counter. With more than one file each writes to its own temporary
resource file (``tmp_ext_str_<n>_*``, created fresh) next to the final target;
the temporaries of the files that extracted cleanly are then concatenated,
renumbered from 1 and written as one resource file. A file that fails gives
up its temporary, so the later files reuse its names.
"""
import logging
import os
import re
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .errors import ConfigurationError, ExtractionError
from .extractor import EXTRACTED, FAILED, NO_STRINGS, ExtractionOutcome, extract_file
from .naming import NameGenerator
from .patterns import is_supported
from .resources import STRING_OPEN, entry_lines, write_document

logger = logging.getLogger(__name__)

NO_FILES = 'no-files'

DEFAULT_BATCH_TARGET = 'extracted_strings.xml'
TEMP_FILE_PREFIX = 'tmp_ext_str_%s_'

NAME_ATTRIBUTE = re.compile(r'name=".*?">', re.IGNORECASE)


@dataclass
class BatchOutcome:
    scan_dir: Path
    status: str
    files: List[Path] = field(default_factory=list)
    outcomes: List[ExtractionOutcome] = field(default_factory=list)
    entries_written: int = 0
    target: Optional[Path] = None
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.status != FAILED and all(o.ok for o in self.outcomes)

    @property
    def message(self) -> str:
        if self.status == NO_FILES:
            return f'No java or xml file found on path: {self.scan_dir}'
        if self.status == NO_STRINGS:
            return f'{len(self.files)} files was scanned and no strings found.'
        if self.status == FAILED:
            return f'Unable to extract strings on {self.scan_dir}: {self.error.__cause__ or self.error}'
        return f'{self.entries_written} strings was extracted from {len(self.files)} files and saved to {self.target}'

    def as_dict(self):
        return {
            'scan_dir': str(self.scan_dir),
            'status': self.status,
            'files': [str(f) for f in self.files],
            'entries_written': self.entries_written,
            'target': str(self.target) if self.target else None,
            'message': self.message,
            'outcomes': [o.as_dict() for o in self.outcomes],
        }


def find_files(root) -> List[Path]:
    """Depth first list of the .java/.xml files under ``root``."""
    root = Path(root)
    if root.is_file():
        logger.warning('File: %s is not a directory', root)
        return []
    if not root.exists():
        logger.warning('File: %s does not exist', root)
        return []
    found = []
    _walk(root, found)
    return found


def _walk(directory, found):
    try:
        children = sorted(directory.iterdir())
    except OSError as e:
        logger.warning('unable to read directory %s: %s', directory, e)
        return
    for child in children:
        if child.is_dir():
            _walk(child, found)
        elif is_supported(child):
            found.append(child)


def renumber(lines, names) -> List[str]:
    """Give the entries fresh sequential names, in order of appearance."""
    renamed = []
    count = 0
    for line in lines:
        count += 1
        renamed.append(NAME_ATTRIBUTE.sub(f'name="{names.resource_name(count)}">', line, count=1))
    return renamed


def make_temp_file(directory, index) -> Path:
    """Create an empty temp resource file that no earlier run can have left behind."""
    fd, name = tempfile.mkstemp(dir=directory, prefix=TEMP_FILE_PREFIX % index)
    os.close(fd)
    return Path(name)


def discard_temp_file(temp):
    try:
        temp.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning('unable to delete the temp file: %s (%s)', temp, e)


def aggregate(temp_files, target, names) -> int:
    """Merge the temporary resource files into ``target`` and remove them."""
    lines = []
    for temp in temp_files:
        if not temp.exists():
            continue
        try:
            text = temp.read_text(encoding='utf-8')
        except (OSError, UnicodeError) as e:
            logger.error('unable to read the temp file: %s (%s)', temp, e)
            continue
        lines.extend(line for line in entry_lines(text) if line.startswith(STRING_OPEN))
        try:
            temp.unlink()
        except OSError as e:
            logger.warning('unable to delete the temp file: %s (%s)', temp, e)
    lines = renumber(lines, names)
    try:
        write_document(target, lines)
    except OSError as e:
        raise ExtractionError() from e
    return len(lines)


def run_batch(scan_dir, xml_file=None, use_accessor_class=False, prefix=None, suffix=None,
              backup_original=False) -> BatchOutcome:
    scan_dir = Path(scan_dir)
    logger.info('Finding files on path: %s', scan_dir)
    files = find_files(scan_dir)
    outcome = BatchOutcome(scan_dir, NO_FILES, files)
    if not files:
        logger.info(outcome.message)
        return outcome

    if len(files) == 1:
        single = extract_file(files[0], xml_file, use_accessor_class, prefix, suffix, backup_original,
                              shared_counter=True, starting_count=0)
        outcome.outcomes.append(single)
        outcome.entries_written = single.entries_written
        outcome.target = single.target
        if single.status in (EXTRACTED, NO_STRINGS):
            outcome.status = single.status
        else:
            outcome.status = FAILED
            outcome.error = single.error
        logger.info(outcome.message)
        return outcome

    try:
        names = NameGenerator(prefix, suffix, use_accessor_class)
    except ConfigurationError as e:
        outcome.status = FAILED
        outcome.error = e
        logger.error(outcome.message)
        return outcome
    target = Path(xml_file) if xml_file is not None else files[0].parent / DEFAULT_BATCH_TARGET
    outcome.target = target
    temps = []
    try:
        for i in range(1, len(files) + 1):
            temps.append(make_temp_file(target.parent, i))
    except OSError as e:
        for temp in temps:
            discard_temp_file(temp)
        outcome.status = FAILED
        outcome.error = ExtractionError()
        outcome.error.__cause__ = e
        logger.error(outcome.message)
        return outcome

    temp_files = []
    count = 0
    for path, temp in zip(files, temps):
        logger.info('Searching strings on: %s', path)
        result = extract_file(path, temp, use_accessor_class, prefix, suffix, backup_original,
                              shared_counter=True, starting_count=count)
        outcome.outcomes.append(result)
        if result.status in (EXTRACTED, NO_STRINGS):
            temp_files.append(temp)
            count = result.count
        else:
            # the next file takes over its names
            discard_temp_file(temp)

    if count <= 0:
        for temp in temp_files:
            discard_temp_file(temp)
        outcome.status = NO_STRINGS
        logger.info(outcome.message)
        return outcome

    try:
        outcome.entries_written = aggregate(temp_files, target, names)
        outcome.status = EXTRACTED
        logger.info(outcome.message)
    except ExtractionError as e:
        outcome.status = FAILED
        outcome.error = e
        logger.error(outcome.message)
    return outcome


def _run(config):
    if config.recursive:
        return run_batch(config.scan_dir, config.xml_file, config.use_accessor_class, config.prefix,
                         config.suffix, config.backup_original)
    return extract_file(config.input_file, config.xml_file, config.use_accessor_class, config.prefix,
                        config.suffix, config.backup_original)


def run(config):
    """Run a resolved ExtractionConfig on a single worker thread and wait for it."""
    with ThreadPoolExecutor(max_workers=1) as executor:
        return executor.submit(_run, config).result()
