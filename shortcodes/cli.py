"""
# Shortcodes: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys

from shortcodes._version import __version__
from shortcodes.constants import COMMAND_LINE_ERROR_EXIT_CODE
from shortcodes.core import ShortcodeMaster
from shortcodes.exceptions import InvalidTagNameException

DESCRIPTION = '''
    Rewrite the shortcodes of a given tag name in canonical form.
'''
TAG_NAME_HELP = '''
    tag name of the shortcodes to be processed
'''
FILE_NAME_HELP = '''
    name of file to be processed
'''
LIST_MODE_HELP = '''
    list the occurrences (with offsets) instead of rewriting them
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every replacement applied)
'''


def parse_command_line_arguments(arguments=None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-l', '--list',
        dest='list_mode_enabled',
        action='store_true',
        help=LIST_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'tag_name',
        help=TAG_NAME_HELP,
        metavar='tag',
    )
    argument_parser.add_argument(
        'file_names',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def format_occurrences(shortcode_master: ShortcodeMaster, tag_name: str, text: str, file_name: str) -> str:
    return ''.join(
        f'{file_name}:{shortcode_match.offset}: {shortcode_match.matched_text}\n'
        for shortcode_match in shortcode_master.find_all(tag_name, text)
    )


def process_file(shortcode_master: ShortcodeMaster, tag_name: str, file_name: str, list_mode_enabled: bool):
    try:
        with open(file_name, 'r', encoding='utf-8') as file:
            text = file.read()
    except FileNotFoundError:
        print(f'error: argument `{file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if list_mode_enabled:
        sys.stdout.write(format_occurrences(shortcode_master, tag_name, text, file_name))
    else:
        sys.stdout.write(shortcode_master.canonicalise(tag_name, text))


def main(arguments=None):
    parsed_arguments = parse_command_line_arguments(arguments)
    tag_name = parsed_arguments.tag_name
    file_names = parsed_arguments.file_names
    list_mode_enabled = parsed_arguments.list_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    shortcode_master = ShortcodeMaster(verbose_mode_enabled=verbose_mode_enabled)

    try:
        shortcode_master.compile_pattern(tag_name)
    except InvalidTagNameException as invalid_tag_name_exception:
        print(f'{invalid_tag_name_exception}', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    for file_name in file_names:
        process_file(shortcode_master, tag_name, file_name, list_mode_enabled)


if __name__ == '__main__':
    main()
