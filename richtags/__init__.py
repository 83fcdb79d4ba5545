"""
# Rich-Tags: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Expand placeholder tags (e.g. `<rare>text</rare>`) into rich text markup.
"""

from richtags._version import __version__
from richtags.core import build_authority, format, get_raw_tag, wrap
from richtags.definitions import TagDefinition

__all__ = [
    '__version__',
    'build_authority',
    'format',
    'get_raw_tag',
    'wrap',
    'TagDefinition',
]
