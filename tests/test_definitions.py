"""
# Rich-Tags: test_definitions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `definitions.py`.
"""

import unittest

from richtags.constants import STANDARD_TAG_DEFINITIONS
from richtags.definitions import TagDefinition, TagDefinitionStore, is_pass_through_alias, validate_definition
from richtags.exceptions import (
    CircularDefinitionException,
    CommittedMutateException,
    InvalidTagNameException,
    UnrecognisedTagException,
)


class TestDefinitions(unittest.TestCase):
    def test_is_pass_through_alias(self):
        self.assertTrue(is_pass_through_alias('b', TagDefinition('<b>', '</b>')))
        self.assertFalse(is_pass_through_alias('b', TagDefinition('<i>', '</i>')))
        self.assertFalse(is_pass_through_alias('b', TagDefinition('<b>', '</b></b>')))
        self.assertFalse(is_pass_through_alias('rare', TagDefinition('<font color="#0070DD">', '</font>')))

    def test_validate_definition(self):
        validate_definition('b', TagDefinition('<b>', '</b>'))
        validate_definition('enhanced', TagDefinition('<rare><b>', '</b></rare>'))
        validate_definition('x', TagDefinition('</x>', '<x>'))

        with self.assertRaises(CircularDefinitionException) as context_manager:
            validate_definition('x', TagDefinition('prefix<x>', '</x>'))
        self.assertEqual(context_manager.exception.tag_name, 'x')
        self.assertIn('`x`', str(context_manager.exception))

        with self.assertRaises(CircularDefinitionException):
            validate_definition('x', TagDefinition('[', ']</x>'))

    def test_standard_tag_definitions_are_valid(self):
        tag_definition_store = TagDefinitionStore()
        for tag_name, definition in STANDARD_TAG_DEFINITIONS.items():
            tag_definition_store.store_definition(tag_name, definition['open'], definition['close'])

        tag_definition_store.commit()
        self.assertTrue(tag_definition_store.is_committed)
        self.assertEqual(len(tag_definition_store), len(STANDARD_TAG_DEFINITIONS))

    def test_tag_definition_store(self):
        tag_definition_store = TagDefinitionStore()
        tag_definition_store.store_definition('rare', '[R]', '[/R]')
        tag_definition_store.store_definition('b', '<b>', '</b>')
        tag_definition_store.commit()

        self.assertIn('rare', tag_definition_store)
        self.assertNotIn('RARE', tag_definition_store)
        self.assertEqual(tag_definition_store.tag_names, ('rare', 'b'))
        self.assertEqual(tag_definition_store.load_definition('rare'), TagDefinition('[R]', '[/R]'))
        self.assertEqual(tag_definition_store.lookup('b'), TagDefinition('<b>', '</b>'))
        self.assertIsNone(tag_definition_store.lookup('xyz'))

        with self.assertRaises(UnrecognisedTagException):
            tag_definition_store.load_definition('xyz')

        with self.assertRaises(TypeError):
            tag_definition_store.definition_from_tag_name['xyz'] = TagDefinition('', '')

        with self.assertRaises(CommittedMutateException):
            tag_definition_store.store_definition('xyz', '', '')

    def test_tag_definition_store_invalid_tag_name(self):
        tag_definition_store = TagDefinitionStore()

        with self.assertRaises(InvalidTagNameException) as context_manager:
            tag_definition_store.store_definition('not-a-word', '', '')
        self.assertEqual(context_manager.exception.tag_name, 'not-a-word')

    def test_tag_definition_store_circular_commit(self):
        tag_definition_store = TagDefinitionStore()
        tag_definition_store.store_definition('ok', '[', ']')
        tag_definition_store.store_definition('loop', '<b><loop>', '</loop></b>')

        with self.assertRaises(CircularDefinitionException) as context_manager:
            tag_definition_store.commit()
        self.assertEqual(context_manager.exception.tag_name, 'loop')
        self.assertFalse(tag_definition_store.is_committed)


if __name__ == '__main__':
    unittest.main()
