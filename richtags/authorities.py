"""
# Rich-Tags: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the expansion logic.
"""

import functools
import warnings
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple, Optional

from richtags.checkers import check_well_formedness
from richtags.constants import MAX_ITERATIONS, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from richtags.definitions import TagDefinition, TagDefinitionStore, is_pass_through_alias
from richtags.exceptions import (
    CommittedMutateException,
    TagWarning,
    UncommittedApplyException,
    UnrecognisedTagException,
)
from richtags.idioms import OPENING_DELIMITER_PATTERN_COMPILED, build_closing_delimiter, extract_numeric_tag_names


class TagMatch(NamedTuple):
    start: int
    end: int
    tag_name: str
    content: str


class ExpansionAuthority:
    """
    Object governing the expansion of tags.

    ## `legislate`

    Stages tag definitions, given as a mapping `{«tag_name»: {'open': «open», 'close': «close»}}`.

    ## `commit`

    Validates the staged definitions (see `validate_definition` in `definitions.py`)
    and builds one accessor per tag. After committing, definitions can no longer be added.

    ## `format`

    Expands the tags of a string, pass by pass, until a fixed point is reached.
    In each pass, the string is scanned left to right for `<«tag_name»>«content»</«tag_name»>`,
    where the closing delimiter is the first one following the opening delimiter.
    - A defined tag is replaced by `«open»«content»«close»`,
      and the scan resumes after the closing delimiter.
    - An undefined tag, or a pass-through alias, is left as is,
      and the scan resumes inside its content.
    All replacements in a pass are computed against the string as it was before the pass,
    so markup introduced by a definition is only expanded in a later pass.
    """
    _is_committed: bool
    _tag_definition_store: 'TagDefinitionStore'
    _accessor_from_name: dict[str, Callable[[str], str]]
    _max_iterations: int
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False, max_iterations: int = MAX_ITERATIONS):
        self._is_committed = False
        self._tag_definition_store = TagDefinitionStore()
        self._accessor_from_name = {}
        self._max_iterations = max_iterations
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    @property
    def tag_definition_store(self) -> 'TagDefinitionStore':
        return self._tag_definition_store

    @property
    def accessor_from_name(self) -> Mapping[str, Callable[[str], str]]:
        return MappingProxyType(self._accessor_from_name)

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    def legislate(self, definition_from_tag_name: Mapping[str, Mapping[str, str]]):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `legislate(...)` after `commit()`')

        for tag_name, definition in definition_from_tag_name.items():
            self._tag_definition_store.store_definition(tag_name, definition['open'], definition['close'])

    def commit(self):
        self._tag_definition_store.commit()
        self._accessor_from_name = {
            tag_name: functools.partial(self.wrap, tag_name)
            for tag_name in self._tag_definition_store.tag_names
        }
        self._is_committed = True

    def format(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `format(string)` before `commit()`')

        numeric_tag_names = extract_numeric_tag_names(string)
        if len(numeric_tag_names) > 0:
            numeric_tag_names_string = ', '.join(f'`{tag_name}`' for tag_name in numeric_tag_names)
            warnings.warn(
                f'warning: tag names beginning with a digit are discouraged: {numeric_tag_names_string}',
                TagWarning,
            )

        diagnostic = check_well_formedness(string)
        if diagnostic is not None:
            warnings.warn(f'warning: {diagnostic}; text left unformatted', TagWarning)
            return string

        for pass_number in range(1, self._max_iterations + 1):
            string_before = string
            string = self.expand_once(string)
            string_after = string

            if self._verbose_mode_enabled:
                ExpansionAuthority.print_pass(pass_number, string_before, string_after)

            if string_before == string_after:
                return string

        warnings.warn(
            f'warning: maximum iterations ({self._max_iterations}) reached '
            f'(likely deep nesting or circular references); text left partially formatted',
            TagWarning,
        )

        return string

    def wrap(self, tag_name: str, content: str) -> str:
        try:
            definition = self._tag_definition_store.load_definition(tag_name)
        except UnrecognisedTagException:
            warnings.warn(f'warning: tag `{tag_name}` not defined; content left unwrapped', TagWarning)
            return content

        return f'{definition.open}{content}{definition.close}'

    def get_raw_tag(self, tag_name: str) -> Optional['TagDefinition']:
        definition = self._tag_definition_store.lookup(tag_name)
        if definition is None:
            warnings.warn(f'warning: tag `{tag_name}` not defined', TagWarning)

        return definition

    def is_expandable(self, tag_name: str) -> bool:
        definition = self._tag_definition_store.lookup(tag_name)
        return definition is not None and not is_pass_through_alias(tag_name, definition)

    def compute_tag_matches(self, string: str) -> list['TagMatch']:
        """
        Compute the matches of expandable tags for one pass.

        Matches are non-overlapping and in left-to-right order.
        """
        tag_matches: list['TagMatch'] = []
        cursor = 0

        while True:
            opening_match = OPENING_DELIMITER_PATTERN_COMPILED.search(string, cursor)
            if opening_match is None:
                break

            tag_name = opening_match.group('tag_name')
            content_start = opening_match.end()
            closing_delimiter = build_closing_delimiter(tag_name)
            content_end = string.find(closing_delimiter, content_start)

            if content_end < 0 or not self.is_expandable(tag_name):
                cursor = content_start
                continue

            end = content_end + len(closing_delimiter)
            tag_matches.append(
                TagMatch(opening_match.start(), end, tag_name, string[content_start:content_end])
            )
            cursor = end

        return tag_matches

    def expand_once(self, string: str) -> str:
        pieces: list[str] = []
        cursor = 0

        for tag_match in self.compute_tag_matches(string):
            definition = self._tag_definition_store.load_definition(tag_match.tag_name)
            pieces.append(string[cursor:tag_match.start])
            pieces.append(f'{definition.open}{tag_match.content}{definition.close}')
            cursor = tag_match.end

        pieces.append(string[cursor:])

        return ''.join(pieces)

    @staticmethod
    def print_pass(pass_number: int, string_before: str, string_after: str):
        if string_before == string_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE pass {pass_number}')
        print(string_before)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
        print(string_after)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER pass {pass_number}')
        print('\n\n\n\n')
