#!/usr/bin/env python3
"""
Extract raw strings from the xml and java files of an android app project to
an xml resource file and link them, for example android:label="some text"
becomes android:label="@string/extracted_string1" and the resource file gets
<string name="extracted_string1">some text</string>.

Usage:
    string-extractor -i app/src/main/res/layout/main.xml -x app/src/main/res/values/extracted.xml
    string-extractor -rb -d app/src/main -p app_str -s _v1
"""
import argparse
import logging
import sys
import time
from pathlib import Path

from .batch import run
from .config import ExtractionConfig


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s [%(levelname)s] %(message)s')


def build_parser():
    parser = argparse.ArgumentParser(
        prog='string-extractor',
        description='Extract raw strings from xml and java files of an android app project '
                    'to an optional xml file and link them.',
    )
    parser.add_argument('-i', dest='input_file', type=Path, metavar='FILE',
                        help='the single xml or java file to scan. -d and -r are ignored if given.')
    parser.add_argument('-d', dest='scan_dir', type=Path, metavar='PATH',
                        help='directory to scan for xml or java files, requires -r.')
    parser.add_argument('-p', dest='prefix', metavar='TEXT',
                        help='prefix used when generating the xml string names')
    parser.add_argument('-s', dest='suffix', metavar='TEXT',
                        help='suffix used when generating the xml string names')
    parser.add_argument('-x', dest='xml_file', type=Path, metavar='FILE',
                        help='the file to write the generated xml to')
    parser.add_argument('-r', dest='recursive', action='store_true',
                        help='search -d recursively and extract the strings of every file found')
    parser.add_argument('-b', dest='backup_original', action='store_true',
                        help='backup the original file to filename.backup')
    parser.add_argument('-c', dest='use_accessor_class', action='store_true',
                        help='use the ExtractedString class in java files. ExtractedString.java is generated '
                             'next to the input file; call ExtractedString.setContext(context) from your '
                             'Application or Activity onCreate.')
    parser.add_argument('-y', '--yes', action='store_true', help='answer yes to every question')
    parser.add_argument('-v', '--verbose', action='store_true', help='debug logging')
    return parser


def make_confirm(assume_yes):
    if assume_yes:
        return lambda question: True
    if not sys.stdin.isatty():
        return None

    def confirm(question):
        return input(f'{question} [Y/n] ? : ').strip().lower() in ('', 'y', 'yes')
    return confirm


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.input_file is None and args.scan_dir is None:
        parser.error('one of -i FILE or -d PATH is required')
    configure_logging(args.verbose)

    config = ExtractionConfig(
        input_file=args.input_file,
        scan_dir=args.scan_dir,
        xml_file=args.xml_file,
        use_accessor_class=args.use_accessor_class,
        prefix=args.prefix,
        suffix=args.suffix,
        backup_original=args.backup_original,
        recursive=args.recursive,
    ).resolve(make_confirm(args.yes))
    if not config.recursive and config.input_file is None:
        print('option -d requires -r.')
        return 1

    start = time.time()
    outcome = run(config)
    print(outcome.message)
    if outcome.entries_written:
        print(f'strings saved to {outcome.target} in {int((time.time() - start) * 1000)} ms.')
    return 0 if outcome.ok else 1


if __name__ == '__main__':
    raise SystemExit(main())
