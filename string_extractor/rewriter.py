import logging
import os
from pathlib import Path

from .patterns import CODE, PACKAGE_PATTERN

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = '.backup'
ACCESSOR_FILE_NAME = 'ExtractedString.java'

ACCESSOR_CLASS = '''
import android.content.Context;

/** A helper class for retrieving the extracted strings. */

public final class ExtractedString {

    /** The Context used to look the strings up in the xml resources. */

    private static Context mContext;

    /**
     * Store the context so every class can look strings up.
     * Call this once from your Application or Activity onCreate.
     * @param context      The {@link Context} to store.
     */
    public static void setContext(Context context) {
        mContext = context;
    }

    /**
     * Look an extracted string up.
     * @param strResId the string id generated by the extractor.
     * @return the extracted string if the {@link Context} is set. "" otherwise.
     */
    public static String getString(int strResId) {
        if (mContext != null) {
            return mContext.getResources().getString(strResId);
        }
        return "";
    }
}'''


def rewrite(text, result) -> str:
    """Replace every occurrence of each extracted literal with its reference."""
    for entry in result.entries:
        if result.kind == CODE:
            text = text.replace(entry.raw, entry.reference)
        else:
            text = text.replace(entry.raw, f'"{entry.reference}"')
    return text


def backup_path(path) -> Path:
    path = Path(path)
    return path.with_name(path.name + BACKUP_SUFFIX)


def write_source(path, text, backup=False):
    """Write the rewritten source, first moving the original aside if asked."""
    path = Path(path)
    if backup:
        target = backup_path(path)
        os.replace(path, target)
        logger.info('backed up %s -> %s', path, target)
    with open(path, 'w', encoding='utf-8', newline='') as fh:
        fh.write(text)


def accessor_source(text) -> str:
    m = PACKAGE_PATTERN.search(text)
    header = m.group() + '\r\n' if m else ''
    return header + ACCESSOR_CLASS.replace('\n', '\r\n')


def write_accessor_class(directory, text) -> Path:
    """Generate ExtractedString.java next to the rewritten source."""
    out = Path(directory) / ACCESSOR_FILE_NAME
    with open(out, 'w', encoding='utf-8', newline='') as fh:
        fh.write(accessor_source(text))
    logger.info('wrote accessor class %s', out)
    return out
