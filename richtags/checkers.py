"""
# Rich-Tags: checkers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Well-formedness checking of tagged text.
"""

from typing import Optional

from richtags.idioms import TAG_DELIMITER_PATTERN_COMPILED, build_closing_delimiter, build_opening_delimiter


def check_well_formedness(string: str) -> Optional[str]:
    """
    Check that the tags in a string are balanced and properly nested.

    Returns a diagnostic message for the first problem found, or None if the string is well-formed.
    The delimiters are scanned left to right, with pending opening tags kept on a stack:
    - an opening delimiter is pushed;
    - a closing delimiter must match the tag popped from the top of the stack;
    - whatever remains on the stack after the scan is unclosed.
    Every `<«tag_name»>` and `</«tag_name»>` counts, whether or not «tag_name» is defined,
    so crossing constructs such as `<a><b></a></b>` are reported as mismatches.
    """
    open_tag_names: list[str] = []

    for delimiter_match in TAG_DELIMITER_PATTERN_COMPILED.finditer(string):
        tag_name = delimiter_match.group('tag_name')

        if delimiter_match.group('slash') == '':
            open_tag_names.append(tag_name)
            continue

        closing_delimiter = build_closing_delimiter(tag_name)
        position = delimiter_match.start()

        if len(open_tag_names) == 0:
            return f'closing tag `{closing_delimiter}` without matching opening tag (at index {position})'

        expected_tag_name = open_tag_names.pop()
        if expected_tag_name != tag_name:
            return (
                f'mismatched closing tag: expected `{build_closing_delimiter(expected_tag_name)}` '
                f'but found `{closing_delimiter}` (at index {position})'
            )

    if len(open_tag_names) > 0:
        return f'unclosed tag `{build_opening_delimiter(open_tag_names[-1])}`'

    return None
