#!/usr/bin/env python3
"""
Name: morse
Description: encode text to morse code and decode it back
License: artistic2
"""

import sys
import os
import argparse
import re

import morsecode

__version__ = "1.0"

# Constants
EX_SUCCESS = 0
EX_FAILURE = 1

# Allowed input for each mode, checked before any translation happens.
ALLOWED_INPUT = {
    'encode': re.compile(r'^[A-Za-z0-9\s]*$'),
    'decode': re.compile(r'^[·―\s]*$'),
}

TRANSLATORS = {
    'encode': morsecode.translate_to_morse,
    'decode': morsecode.translate_from_morse,
}

class ListAction(argparse.Action):
    """Prints the code table and exits, the same way --version does."""
    def __init__(self, option_strings, dest=argparse.SUPPRESS,
                 default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest,
                         default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        for line in morsecode.format_table():
            print(line)
        parser.exit()

def build_parser():
    parser = argparse.ArgumentParser(
        prog='morse',
        description="Encode text to morse code or decode morse code to text.",
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-l', '--list',
        action=ListAction,
        help='print the morse code table and exit'
    )
    parser.add_argument(
        'mode',
        choices=('encode', 'decode'),
        help='encode text into morse or decode morse into text'
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '-m', '--message',
        help='the message to translate'
    )
    source.add_argument(
        '-c', '--source-file',
        help='read the message to translate from this file'
    )
    parser.add_argument(
        '-o', '--output',
        help='write the result to this file instead of standard output'
    )
    return parser

def read_source(path):
    """Reads a whole UTF-8 text file."""
    if os.path.isdir(path):
        raise IsADirectoryError(21, 'Is a directory', path)
    with open(path, encoding='utf-8') as f:
        return f.read()

def write_result(text, path=None):
    """Writes to `path` as-is, or to stdout with a trailing newline."""
    if path is None:
        print(text)
        return
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)

def main(argv=None):
    """Parses arguments, validates the input and runs the translation."""
    args = build_parser().parse_args(argv)
    program_name = os.path.basename(sys.argv[0]) or 'morse'

    # --- 1. Gather Input ---
    if args.message is not None:
        message = args.message
    else:
        try:
            message = read_source(args.source_file)
        except UnicodeDecodeError:
            print(f"{program_name}: '{args.source_file}' is not valid UTF-8 text", file=sys.stderr)
            sys.exit(EX_FAILURE)
        except OSError as e:
            print(f"{program_name}: cannot open '{e.filename}': {e.strerror}", file=sys.stderr)
            sys.exit(EX_FAILURE)

    # --- 2. Validate ---
    if not ALLOWED_INPUT[args.mode].match(message):
        print(f"{program_name}: the given message contains unallowed characters", file=sys.stderr)
        sys.exit(EX_FAILURE)

    # --- 3. Translate and Write ---
    try:
        translated = TRANSLATORS[args.mode](message.lower().strip())
        write_result(translated.strip(), args.output)
    except morsecode.MorseError as e:
        print(f"{program_name}: {e}", file=sys.stderr)
        sys.exit(EX_FAILURE)
    except OSError as e:
        print(f"{program_name}: cannot write '{e.filename}': {e.strerror}", file=sys.stderr)
        sys.exit(EX_FAILURE)

    sys.exit(EX_SUCCESS)

if __name__ == "__main__":
    main()
