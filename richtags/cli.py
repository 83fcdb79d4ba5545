"""
# Rich-Tags: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
from typing import Optional

from richtags._version import __version__
from richtags.authorities import ExpansionAuthority
from richtags.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    OUTPUT_FILE_EXTENSION,
    RICH_TAG_FILE_EXTENSION,
)
from richtags.core import build_authority, combine_tag_definitions, load_tag_definitions
from richtags.exceptions import CircularDefinitionException, InvalidDefinitionsException, InvalidTagNameException

DESCRIPTION = '''
    Expand rich tags (e.g. `<rare>text</rare>`) into rich text markup.
'''
RT_FILE_NAME_HELP = '''
    name of rich-tag file to be expanded
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    expand all rich-tag files under the working directory
'''
TAGS_FILE_NAME_HELP = '''
    JSON file of tag definitions, applied over the standard definitions
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every expansion pass)
'''


def is_rt_file(file_name: str) -> bool:
    return file_name.endswith(RICH_TAG_FILE_EXTENSION)


def extract_rt_name(rt_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a rich-tag file name argument.

    Here, rich-tag file name argument may be of the form `«rt_name».rt`, `«rt_name».`, or `«rt_name»`.
    The path is normalised by resolving `./` and `../`.
    """
    rt_file_name_argument = os.path.normpath(rt_file_name_argument)
    rt_name = re.sub(pattern=r'[.](rt)? \Z', repl='', string=rt_file_name_argument, flags=re.VERBOSE)

    return rt_name


def parse_command_line_arguments() -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-t', '--tags',
        dest='tags_file_name',
        default=None,
        help=TAGS_FILE_NAME_HELP,
        metavar='tags.json',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'rt_file_name_arguments',
        default=[],
        help=RT_FILE_NAME_HELP,
        metavar='file.rt',
        nargs='*',
    )

    return argument_parser.parse_args()


def read_tag_definitions(tags_file_name: Optional[str]) -> Optional[dict[str, dict[str, str]]]:
    if tags_file_name is None:
        return None

    try:
        with open(tags_file_name, 'r', encoding='utf-8') as tags_file:
            definitions_json = tags_file.read()
    except FileNotFoundError:
        print(f'error: tags file `{tags_file_name}` not found', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)
    except (OSError, UnicodeDecodeError) as read_error:
        print(f'error: cannot read tags file `{tags_file_name}`: {read_error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    try:
        return load_tag_definitions(definitions_json)
    except InvalidDefinitionsException as invalid_definitions_exception:
        print(f'{invalid_definitions_exception} (in `{tags_file_name}`)', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def build_command_line_authority(definition_from_tag_name: Optional[dict[str, dict[str, str]]],
                                 verbose_mode_enabled: bool) -> 'ExpansionAuthority':
    try:
        return build_authority(combine_tag_definitions(definition_from_tag_name), verbose_mode_enabled)
    except (CircularDefinitionException, InvalidTagNameException) as definition_exception:
        print(definition_exception, file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def generate_output_file(rt_file_name_argument: str, expansion_authority: 'ExpansionAuthority',
                         uses_command_line_argument: bool):
    rt_name = extract_rt_name(rt_file_name_argument)
    rt_file_name = f'{rt_name}{RICH_TAG_FILE_EXTENSION}'
    try:
        with open(rt_file_name, 'r', encoding='utf-8') as rt_file:
            tagged_text = rt_file.read()
    except FileNotFoundError as file_not_found_error:
        if uses_command_line_argument:
            print(f'error: argument `{rt_file_name_argument}`: file `{rt_file_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        else:
            raise FileNotFoundError(f'file `{rt_file_name}` not found') from file_not_found_error

    rich_text = expansion_authority.format(tagged_text)

    output_file_name = f'{rt_name}{OUTPUT_FILE_EXTENSION}'
    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(rich_text)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main():
    parsed_arguments = parse_command_line_arguments()
    rt_file_name_arguments = parsed_arguments.rt_file_name_arguments
    all_mode_enabled = parsed_arguments.all_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if all_mode_enabled and len(rt_file_name_arguments) > 0:
        print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    definition_from_tag_name = read_tag_definitions(parsed_arguments.tags_file_name)
    expansion_authority = build_command_line_authority(definition_from_tag_name, verbose_mode_enabled)

    if all_mode_enabled:
        rt_file_names = [
            os.path.join(path, file_name)
            for path, _, file_names in os.walk(os.curdir)
            for file_name in file_names
            if is_rt_file(file_name)
        ]
        for rt_file_name in sorted(rt_file_names):
            generate_output_file(rt_file_name, expansion_authority, uses_command_line_argument=False)

    else:
        for rt_file_name_argument in rt_file_name_arguments:
            generate_output_file(rt_file_name_argument, expansion_authority, uses_command_line_argument=True)


if __name__ == '__main__':
    main()
