"""
Single file extraction: scan a .java or .xml file for string literals, write
them to a string resource file and point the source at the new resources.

    written, error = extract(Path('app/src/main/java/com/example/Main.java'),
                             Path('app/src/main/res/values/extracted.xml'))

The counter is explicit: in shared counter mode names continue from
``starting_count`` and the caller carries ``starting_count + written`` into
the next file, so names never collide across a batch.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError, ExtractionError, InvalidResourceFileError
from .naming import NameGenerator
from .patterns import CODE, source_kind
from .resources import ResourceWriter
from .rewriter import rewrite, write_accessor_class, write_source
from .scanner import ExtractionResult, LiteralScanner

logger = logging.getLogger(__name__)

EXTRACTED = 'extracted'
NO_STRINGS = 'no-strings'
MISSING_INPUT = 'missing-input'
NOT_FOUND = 'not-found'
IS_DIRECTORY = 'is-directory'
UNSUPPORTED = 'unsupported'
INVALID_TARGET = 'invalid-target'
FAILED = 'failed'

MESSAGES = {
    EXTRACTED: '{written} strings was found on: {path}',
    NO_STRINGS: 'No strings found on: {path}',
    MISSING_INPUT: 'input file is missing.',
    NOT_FOUND: 'input file does not exist: {path}',
    IS_DIRECTORY: 'input file is a directory: {path}',
    UNSUPPORTED: 'file must be a java or xml file, but got: {path}',
    INVALID_TARGET: 'target is not a string resource file, nothing extracted: {target}',
    FAILED: 'Unable to extract strings from {path}: {error}',
}

DEFAULT_TARGET_SUFFIX = '_extracted_strings.xml'


@dataclass
class ExtractionOutcome:
    path: Optional[Path]
    status: str
    entries_written: int = 0
    count: int = 0
    target: Optional[Path] = None
    error: Optional[ExtractionError] = None
    result: Optional[ExtractionResult] = None

    @property
    def ok(self) -> bool:
        return self.status in (EXTRACTED, NO_STRINGS, UNSUPPORTED)

    @property
    def message(self) -> str:
        cause = self.error.__cause__ if self.error is not None and self.error.__cause__ else self.error
        return MESSAGES[self.status].format(
            written=self.entries_written, path=self.path, target=self.target, error=cause,
        )

    def as_dict(self):
        return {
            'path': str(self.path) if self.path else None,
            'status': self.status,
            'entries_written': self.entries_written,
            'count': self.count,
            'target': str(self.target) if self.target else None,
            'message': self.message,
        }


def default_target(file_to_read) -> Path:
    file_to_read = Path(file_to_read)
    return file_to_read.with_name(file_to_read.name + DEFAULT_TARGET_SUFFIX)


def _check_input(file_to_read):
    if file_to_read is None:
        return MISSING_INPUT
    if not file_to_read.exists():
        return NOT_FOUND
    if file_to_read.is_dir():
        return IS_DIRECTORY
    if source_kind(file_to_read) is None:
        return UNSUPPORTED
    return None


def extract_file(file_to_read, xml_file=None, use_accessor_class=False, prefix=None, suffix=None,
                 backup_original=False, shared_counter=False, starting_count=0) -> ExtractionOutcome:
    """Extract the strings of one file and report what happened."""
    file_to_read = Path(file_to_read) if file_to_read is not None else None
    count = starting_count if shared_counter else 0

    status = _check_input(file_to_read)
    if status is not None:
        error = None
        if status != UNSUPPORTED:
            error = ConfigurationError(MESSAGES[status].format(path=file_to_read))
        outcome = ExtractionOutcome(file_to_read, status, count=count, error=error)
        logger.log(logging.INFO if status == UNSUPPORTED else logging.ERROR, outcome.message)
        return outcome

    kind = source_kind(file_to_read)
    target = Path(xml_file) if xml_file is not None else default_target(file_to_read)
    try:
        names = NameGenerator(prefix, suffix, use_accessor_class)
        result = _extract(file_to_read, kind, target, names, backup_original, count)
    except InvalidResourceFileError as e:
        outcome = ExtractionOutcome(file_to_read, INVALID_TARGET, count=count, target=target, error=e)
        logger.error(outcome.message)
        return outcome
    except ExtractionError as e:
        outcome = ExtractionOutcome(file_to_read, FAILED, count=count, target=target, error=e)
        logger.error(outcome.message)
        return outcome

    if not result.entries:
        outcome = ExtractionOutcome(file_to_read, NO_STRINGS, count=result.count, result=result)
    else:
        outcome = ExtractionOutcome(file_to_read, EXTRACTED, len(result.entries), result.count, target, result=result)
    logger.info(outcome.message)
    return outcome


def _extract(file_to_read, kind, target, names, backup, count) -> ExtractionResult:
    try:
        with open(file_to_read, 'r', encoding='utf-8', newline='') as fh:
            text = fh.read()
        result = LiteralScanner(kind).scan(text, names, count)
        logger.debug('%s: %d matches, %d blank, %d duplicate',
                     file_to_read, result.found, result.skipped_blank, result.skipped_duplicate)
        if not result.entries:
            return result

        previous = target.read_bytes() if target.is_file() else None
        with ResourceWriter(target) as writer:
            for entry in result.entries:
                writer.write(entry.name, entry.value)
            writer.save()

        rewritten = rewrite(text, result)
        try:
            write_source(file_to_read, rewritten, backup=backup)
        except OSError:
            _restore(target, previous)
            raise
        if kind == CODE and names.use_accessor_class:
            write_accessor_class(file_to_read.parent, rewritten)
        return result
    except ExtractionError:
        raise
    except (OSError, UnicodeError) as e:
        raise ExtractionError() from e


def _restore(target, previous):
    """Put the resource file back the way it was before this file's entries went in."""
    try:
        if previous is None:
            target.unlink()
        else:
            target.write_bytes(previous)
    except OSError as e:
        logger.warning('unable to restore %s: %s', target, e)


def extract(file_to_read, xml_file=None, use_accessor_class=False, prefix=None, suffix=None,
            backup_original=False, shared_counter=False, starting_count=0):
    """Core entry point, returns ``(entries_written, error_or_none)``."""
    outcome = extract_file(file_to_read, xml_file, use_accessor_class, prefix, suffix,
                           backup_original, shared_counter, starting_count)
    return outcome.entries_written, outcome.error
