# Copyright 2026 The dotflat Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
'''
    This tool flattens nested JSON documents into a single-level
    mapping with dot-joined keys.

    Several documents can be given at once. They are flattened into
    the same result in the order given, so keys of a later document
    overwrite the same keys of an earlier one.

    Lists are kept as values and never flattened.
'''
import argparse
import logging
import sys
from json import load, JSONDecodeError

from dotflat.shared import output
from dotflat.shared.helpers import flatten, classify, ValueKind, DEFAULT_SEPARATOR
from dotflat.shared.logs import setup_logging

STDIN = '-'

log = logging.getLogger(__name__)


def read_document(path: str):
    '''
        Reads one JSON document

        Args: (str) path - file path, '-' for stdin
        Returns: parsed JSON value
    '''
    if path == STDIN:
        return load(sys.stdin)

    with open(path, 'r', encoding='utf-8') as document:
        return load(document)


def main(argv: list = None) -> None:
    '''
        Flattens the given documents and prints the result.
    '''
    description = 'This tool flattens nested JSON documents into dot-joined keys'
    parser = argparse.ArgumentParser(prog='dotflat', description=description)

    source = parser.add_argument_group("Input")
    source.add_argument('files', nargs='*', default=[STDIN], help="JSON files, '-' for stdin")

    keys = parser.add_argument_group("Keys")
    keys.add_argument('--prefix', default='', help='Path prepended to every key')
    keys.add_argument('--sep', default=DEFAULT_SEPARATOR, help='Separator in nested keys')

    out = parser.add_argument_group("Output")
    out.add_argument('--json', action='store_true', help='Output in JSON')
    out.add_argument('--title', default='Flattened', help='Table title')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only log errors')

    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging('DEBUG')
    elif args.quiet:
        setup_logging('ERROR')
    else:
        setup_logging()

    result = {}

    for path in args.files:
        try:
            document = read_document(path)
        except (OSError, UnicodeDecodeError, JSONDecodeError) as err:
            log.error(f'Failed to read {path}: {err}')
            sys.exit(1)

        if classify(document) is not ValueKind.MAPPING:
            log.warning(f'{path} is not a JSON object, nothing to flatten')

        before = len(result)
        flatten(document, args.prefix, result, sep=args.sep)
        log.debug(f'{path}: {len(result) - before} new keys, {len(result)} total')

    if args.json:
        output.output_json(result)
    else:
        output.output_table(result, args.title)
