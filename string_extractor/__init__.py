"""Extract hardcoded strings from Android java/xml sources into string resources."""
from .errors import ConfigurationError, ExtractionError, InvalidResourceFileError
from .extractor import ExtractionOutcome, extract, extract_file
from .batch import BatchOutcome, run, run_batch
from .config import ExtractionConfig

__all__ = [
    'BatchOutcome',
    'ConfigurationError',
    'ExtractionConfig',
    'ExtractionError',
    'ExtractionOutcome',
    'InvalidResourceFileError',
    'extract',
    'extract_file',
    'run',
    'run_batch',
]
