"""
# Rich-Tags: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

MAX_ITERATIONS = 100

RICH_TAG_FILE_EXTENSION = '.rt'
OUTPUT_FILE_EXTENSION = '.txt'

STANDARD_TAG_DEFINITIONS = {
    # Rarities
    'rare': {
        'open': '<font color="#0070DD"><stroke color="#00264D" thickness="1">',
        'close': '</stroke></font>',
    },
    'epic': {
        'open': '<font color="#A335EE"><stroke color="#3B1254" thickness="1">',
        'close': '</stroke></font>',
    },
    'legendary': {
        'open': '<font color="#FFD700"><stroke color="#5C4A00" thickness="1">',
        'close': '</stroke></font>',
    },
    'mythic': {
        'open': '<font color="#FFFFFF"><stroke color="#000000" thickness="2">',
        'close': '</stroke></font>',
    },
    'secret': {
        'open': '<font color="#FF0000"><stroke color="#4D0000" thickness="2"><b>',
        'close': '</b></stroke></font>',
    },

    # Stats
    'damage': {
        'open': '<font color="#FF4040"><b>',
        'close': '</b></font>',
    },
    'critChance': {
        'open': '<font color="#FFA500"><i>',
        'close': '</i></font>',
    },

    # Composed from other tags
    'enhanced': {
        'open': '<rare><b>',
        'close': '</b></rare>',
    },

    # Built-in rich text tags (pass-through aliases)
    'b': {'open': '<b>', 'close': '</b>'},
    'i': {'open': '<i>', 'close': '</i>'},
    'u': {'open': '<u>', 'close': '</u>'},
    's': {'open': '<s>', 'close': '</s>'},
    'sub': {'open': '<sub>', 'close': '</sub>'},
    'sup': {'open': '<sup>', 'close': '</sup>'},
    'small': {'open': '<small>', 'close': '</small>'},
    'uppercase': {'open': '<uppercase>', 'close': '</uppercase>'},
    'uc': {'open': '<uc>', 'close': '</uc>'},
    'smallcaps': {'open': '<smallcaps>', 'close': '</smallcaps>'},
    'sc': {'open': '<sc>', 'close': '</sc>'},
}
