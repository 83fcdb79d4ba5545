"""
# Rich-Tags: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core expansion logic.

Tagged text such as
````
You found a <rare>Rare Sword</rare>! It deals <damage>85 damage</damage>.
````
is expanded into rich text according to a set of tag definitions,
by default `STANDARD_TAG_DEFINITIONS` (see `constants.py`).
Custom definitions may be loaded from a JSON file of the form
````
{
  "«tag_name»": {"open": "«open»", "close": "«close»"},
  [...]
}
````
"""

import json
import threading
from typing import Mapping, Optional

from richtags.authorities import ExpansionAuthority
from richtags.constants import STANDARD_TAG_DEFINITIONS
from richtags.definitions import TagDefinition
from richtags.exceptions import InvalidDefinitionsException

_standard_authority: Optional['ExpansionAuthority'] = None
_standard_authority_lock = threading.Lock()


def load_tag_definitions(definitions_json: str) -> dict[str, dict[str, str]]:
    """
    Load tag definitions from JSON.

    The JSON shall be an object mapping each tag name to an object
    with string members `open` and `close` (and no others).
    """
    try:
        definition_from_tag_name = json.loads(definitions_json)
    except json.JSONDecodeError as json_decode_error:
        raise InvalidDefinitionsException(f'error: invalid JSON: {json_decode_error}') from json_decode_error

    if not isinstance(definition_from_tag_name, dict):
        raise InvalidDefinitionsException('error: tag definitions must be a JSON object')

    for tag_name, definition in definition_from_tag_name.items():
        if not isinstance(definition, dict) or set(definition) != {'open', 'close'}:
            raise InvalidDefinitionsException(
                f'error: definition of tag `{tag_name}` must be an object with members `open` and `close`'
            )

        if not all(isinstance(markup, str) for markup in definition.values()):
            raise InvalidDefinitionsException(
                f'error: members `open` and `close` in definition of tag `{tag_name}` must be strings'
            )

    return definition_from_tag_name


def build_authority(definition_from_tag_name: Mapping[str, Mapping[str, str]],
                    verbose_mode_enabled: bool = False) -> 'ExpansionAuthority':
    """
    Build a committed expansion authority.

    Raises `CircularDefinitionException` or `InvalidTagNameException` for a broken set of definitions.
    """
    expansion_authority = ExpansionAuthority(verbose_mode_enabled)
    expansion_authority.legislate(definition_from_tag_name)
    expansion_authority.commit()

    return expansion_authority


def get_standard_authority() -> 'ExpansionAuthority':
    global _standard_authority

    with _standard_authority_lock:
        if _standard_authority is None:
            _standard_authority = build_authority(STANDARD_TAG_DEFINITIONS)

    return _standard_authority


def format(template: str) -> str:
    return get_standard_authority().format(template)


def wrap(tag_name: str, content: str) -> str:
    return get_standard_authority().wrap(tag_name, content)


def get_raw_tag(tag_name: str) -> Optional['TagDefinition']:
    return get_standard_authority().get_raw_tag(tag_name)


def rich_text_from_tagged_text(tagged_text: str,
                               definition_from_tag_name: Optional[Mapping[str, Mapping[str, str]]] = None,
                               verbose_mode_enabled: bool = False) -> str:
    """
    Convert tagged text to rich text.

    Custom definitions, if given, are applied over `STANDARD_TAG_DEFINITIONS`.
    """
    if definition_from_tag_name is None and not verbose_mode_enabled:
        return format(tagged_text)

    combined_definition_from_tag_name = combine_tag_definitions(definition_from_tag_name)
    expansion_authority = build_authority(combined_definition_from_tag_name, verbose_mode_enabled)

    return expansion_authority.format(tagged_text)


def combine_tag_definitions(definition_from_tag_name: Optional[Mapping[str, Mapping[str, str]]],
                            ) -> dict[str, Mapping[str, str]]:
    """
    Combine custom definitions over `STANDARD_TAG_DEFINITIONS`.
    """
    combined_definition_from_tag_name: dict[str, Mapping[str, str]] = dict(STANDARD_TAG_DEFINITIONS)
    if definition_from_tag_name is not None:
        combined_definition_from_tag_name.update(definition_from_tag_name)

    return combined_definition_from_tag_name
