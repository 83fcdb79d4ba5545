"""
# Rich-Tags: definitions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tag definitions, and validation thereof.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from richtags.exceptions import (
    CircularDefinitionException,
    CommittedMutateException,
    InvalidTagNameException,
    UnrecognisedTagException,
)
from richtags.idioms import build_closing_delimiter, build_opening_delimiter, is_valid_tag_name


class TagDefinition(NamedTuple):
    open: str
    close: str


def is_pass_through_alias(tag_name: str, definition: 'TagDefinition') -> bool:
    """
    Whether a definition exactly reproduces the delimiters of its own tag.

    Such a definition is a deliberate no-op, marking a built-in tag (e.g. `<b>`) as known but unchanged.
    """
    return (
        definition.open == build_opening_delimiter(tag_name)
        and definition.close == build_closing_delimiter(tag_name)
    )


def validate_definition(tag_name: str, definition: 'TagDefinition'):
    """
    Ensure that expanding a tag does not reintroduce the same tag.

    A pass-through alias is allowed.
    Otherwise, an opening markup containing `<«tag_name»>`, or a closing markup containing `</«tag_name»>`,
    is a circular reference that would never reach a fixed point.
    """
    if is_pass_through_alias(tag_name, definition):
        return

    if build_opening_delimiter(tag_name) in definition.open or build_closing_delimiter(tag_name) in definition.close:
        raise CircularDefinitionException(tag_name)


class TagDefinitionStore:
    """
    Object storing tag definitions.

    For a given «tag_name» (case-sensitive), a definition consists of
    - «open», the markup substituted for `<«tag_name»>`
    - «close», the markup substituted for `</«tag_name»>`

    Definitions are staged with `store_definition(...)` and validated by `commit()`,
    after which the store is read-only.
    """
    _is_committed: bool
    _definition_from_tag_name: dict[str, 'TagDefinition']

    def __init__(self):
        self._is_committed = False
        self._definition_from_tag_name = {}

    def __contains__(self, tag_name: object) -> bool:
        return tag_name in self._definition_from_tag_name

    def __len__(self) -> int:
        return len(self._definition_from_tag_name)

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    @property
    def tag_names(self) -> tuple[str, ...]:
        return tuple(self._definition_from_tag_name)

    @property
    def definition_from_tag_name(self) -> Mapping[str, 'TagDefinition']:
        return MappingProxyType(self._definition_from_tag_name)

    def store_definition(self, tag_name: str, open_markup: str, close_markup: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `store_definition(...)` after `commit()`')

        if not is_valid_tag_name(tag_name):
            raise InvalidTagNameException(tag_name)

        self._definition_from_tag_name[tag_name] = TagDefinition(open_markup, close_markup)

    def load_definition(self, tag_name: str) -> 'TagDefinition':
        try:
            return self._definition_from_tag_name[tag_name]
        except KeyError:
            raise UnrecognisedTagException(tag_name)

    def lookup(self, tag_name: str) -> Optional['TagDefinition']:
        return self._definition_from_tag_name.get(tag_name)

    def commit(self):
        for tag_name, definition in self._definition_from_tag_name.items():
            validate_definition(tag_name, definition)

        self._is_committed = True
