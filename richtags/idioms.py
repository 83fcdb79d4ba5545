"""
# Rich-Tags: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms for tag delimiters.

An opening delimiter is `<«tag_name»>` and a closing delimiter is `</«tag_name»>`,
where «tag_name» is a run of one or more (ASCII) word characters.
No attributes, and no self-closing shorthand.
"""

import re

TAG_NAME_REGEX = r'[\w]+'

OPENING_DELIMITER_PATTERN_COMPILED = re.compile(
    pattern=fr'< (?P<tag_name> {TAG_NAME_REGEX} ) >',
    flags=re.ASCII | re.VERBOSE,
)
TAG_DELIMITER_PATTERN_COMPILED = re.compile(
    pattern=fr'< (?P<slash> [/]? ) (?P<tag_name> {TAG_NAME_REGEX} ) >',
    flags=re.ASCII | re.VERBOSE,
)
NUMERIC_TAG_DELIMITER_PATTERN_COMPILED = re.compile(
    pattern=r'< [/]? (?P<tag_name> [0-9] [\w]* ) >',
    flags=re.ASCII | re.VERBOSE,
)


def build_opening_delimiter(tag_name: str) -> str:
    return f'<{tag_name}>'


def build_closing_delimiter(tag_name: str) -> str:
    return f'</{tag_name}>'


def is_valid_tag_name(tag_name: str) -> bool:
    return re.fullmatch(pattern=TAG_NAME_REGEX, string=tag_name, flags=re.ASCII) is not None


def extract_numeric_tag_names(string: str) -> list[str]:
    """
    Extract the distinct tag names beginning with a digit, in order of first occurrence.

    Both opening and closing delimiters are considered.
    """
    tag_names: list[str] = []
    for match in NUMERIC_TAG_DELIMITER_PATTERN_COMPILED.finditer(string):
        tag_name = match.group('tag_name')
        if tag_name not in tag_names:
            tag_names.append(tag_name)

    return tag_names
