"""
# Rich-Tags: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import unittest

from richtags.constants import STANDARD_TAG_DEFINITIONS
from richtags.core import (
    build_authority,
    combine_tag_definitions,
    format,
    get_raw_tag,
    get_standard_authority,
    load_tag_definitions,
    rich_text_from_tagged_text,
    wrap,
)
from richtags.definitions import TagDefinition
from richtags.exceptions import CircularDefinitionException, InvalidDefinitionsException, TagWarning

RARE_OPEN = STANDARD_TAG_DEFINITIONS['rare']['open']
RARE_CLOSE = STANDARD_TAG_DEFINITIONS['rare']['close']
DAMAGE_OPEN = STANDARD_TAG_DEFINITIONS['damage']['open']
DAMAGE_CLOSE = STANDARD_TAG_DEFINITIONS['damage']['close']


class TestCore(unittest.TestCase):
    def test_load_tag_definitions(self):
        self.assertEqual(load_tag_definitions('{}'), {})
        self.assertEqual(
            load_tag_definitions('{"gold": {"open": "<font color=\\"#FFD700\\">", "close": "</font>"}}'),
            {'gold': {'open': '<font color="#FFD700">', 'close': '</font>'}},
        )

    def test_load_tag_definitions_invalid(self):
        with self.assertRaisesRegex(InvalidDefinitionsException, 'invalid JSON'):
            load_tag_definitions('{"gold": ')

        with self.assertRaisesRegex(InvalidDefinitionsException, 'must be a JSON object'):
            load_tag_definitions('["gold"]')

        with self.assertRaisesRegex(InvalidDefinitionsException, 'tag `gold`'):
            load_tag_definitions('{"gold": {"open": "["}}')

        with self.assertRaisesRegex(InvalidDefinitionsException, 'tag `gold`'):
            load_tag_definitions('{"gold": {"open": "[", "close": "]", "colour": "gold"}}')

        with self.assertRaisesRegex(InvalidDefinitionsException, 'must be strings'):
            load_tag_definitions('{"gold": {"open": "[", "close": 1}}')

        with self.assertRaisesRegex(InvalidDefinitionsException, 'tag `gold`'):
            load_tag_definitions('{"gold": "[gold]"}')

    def test_build_authority(self):
        expansion_authority = build_authority({'x': {'open': '[', 'close': ']'}})
        self.assertTrue(expansion_authority.is_committed)
        self.assertEqual(expansion_authority.format('<x>y</x>'), '[y]')

        with self.assertRaises(CircularDefinitionException):
            build_authority({'x': {'open': '<x>!', 'close': '</x>'}})

    def test_get_standard_authority(self):
        self.assertIs(get_standard_authority(), get_standard_authority())
        self.assertTrue(get_standard_authority().is_committed)

    def test_format(self):
        self.assertEqual(
            format('You found a <rare>Rare Sword</rare>! It deals <damage>85 damage</damage>.'),
            f'You found a {RARE_OPEN}Rare Sword{RARE_CLOSE}! It deals {DAMAGE_OPEN}85 damage{DAMAGE_CLOSE}.',
        )

        with self.assertWarns(TagWarning):
            self.assertEqual(format('<rare>unclosed'), '<rare>unclosed')

    def test_wrap(self):
        self.assertEqual(wrap('damage', '100'), f'{DAMAGE_OPEN}100{DAMAGE_CLOSE}')

        with self.assertWarns(TagWarning):
            self.assertEqual(wrap('xyz', '100'), '100')

    def test_get_raw_tag(self):
        self.assertEqual(get_raw_tag('damage'), TagDefinition(DAMAGE_OPEN, DAMAGE_CLOSE))

        with self.assertWarns(TagWarning):
            self.assertIsNone(get_raw_tag('xyz'))

    def test_combine_tag_definitions(self):
        self.assertEqual(combine_tag_definitions(None), STANDARD_TAG_DEFINITIONS)

        combined_definition_from_tag_name = combine_tag_definitions({'rare': {'open': '[R]', 'close': '[/R]'}})
        self.assertEqual(combined_definition_from_tag_name['rare'], {'open': '[R]', 'close': '[/R]'})
        self.assertEqual(combined_definition_from_tag_name['damage'], STANDARD_TAG_DEFINITIONS['damage'])
        self.assertNotEqual(STANDARD_TAG_DEFINITIONS['rare'], {'open': '[R]', 'close': '[/R]'})

    def test_rich_text_from_tagged_text(self):
        self.assertEqual(rich_text_from_tagged_text('<rare>x</rare>'), f'{RARE_OPEN}x{RARE_CLOSE}')
        self.assertEqual(
            rich_text_from_tagged_text(
                '<rare>x</rare> <gold>y</gold> <damage>z</damage>',
                {
                    'rare': {'open': '[R]', 'close': '[/R]'},
                    'gold': {'open': '<legendary>', 'close': '</legendary>'},
                },
            ),
            f'[R]x[/R] {STANDARD_TAG_DEFINITIONS["legendary"]["open"]}y{STANDARD_TAG_DEFINITIONS["legendary"]["close"]}'
            f' {DAMAGE_OPEN}z{DAMAGE_CLOSE}',
        )


if __name__ == '__main__':
    unittest.main()
