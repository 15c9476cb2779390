"""
# Shortcodes

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Recognise, parse, and re-serialise `[tag attr="value"]content[/tag]` shortcodes in free-form text.
"""

from shortcodes._version import __version__
from shortcodes.attributes import Attributes, AttributesCache
from shortcodes.core import (
    ShortcodeMaster,
    canonicalise_shortcodes,
    compile_pattern,
    find_shortcodes,
    next_shortcode,
    replace_all,
    serialize,
)
from shortcodes.exceptions import InvalidTagNameException, ReplacementException
from shortcodes.patterns import PatternCache
from shortcodes.scanning import ShortcodeMatch
from shortcodes.tags import AttributeText, FlatAttributes, Shortcode, StructuralType
