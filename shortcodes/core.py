"""
# Shortcodes: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core shortcode operations.

Shortcodes are of the form
````
[«tag_name» «attribute_specifications»]
[«tag_name» «attribute_specifications» /]
[«tag_name» «attribute_specifications»]«content»[/«tag_name»]
````
and are escaped (left unrecognised) by doubling the outer brackets, as in `[[«tag_name»]]`.
"""

import re
from typing import Iterator, Optional

from shortcodes.attributes import DEFAULT_ATTRIBUTES_CACHE, AttributesCache
from shortcodes.patterns import DEFAULT_PATTERN_CACHE, PatternCache
from shortcodes.scanning import ShortcodeMatch, ShortcodeScanner
from shortcodes.substitution import Replacer, ShortcodeSubstituter
from shortcodes.tags import AttributeSource, Shortcode, StructuralType


class ShortcodeMaster:
    """
    Object bundling the shortcode operations over a pair of caches.
    """
    _pattern_cache: 'PatternCache'
    _attributes_cache: 'AttributesCache'
    _scanner: 'ShortcodeScanner'
    _substituter: 'ShortcodeSubstituter'

    def __init__(self, pattern_cache: Optional['PatternCache'] = None,
                 attributes_cache: Optional['AttributesCache'] = None, verbose_mode_enabled: bool = False):
        if pattern_cache is None:
            pattern_cache = DEFAULT_PATTERN_CACHE
        if attributes_cache is None:
            attributes_cache = DEFAULT_ATTRIBUTES_CACHE

        self._pattern_cache = pattern_cache
        self._attributes_cache = attributes_cache
        self._scanner = ShortcodeScanner(pattern_cache, attributes_cache)
        self._substituter = ShortcodeSubstituter(self._scanner, verbose_mode_enabled)

    def compile_pattern(self, tag_name: str) -> re.Pattern:
        return self._pattern_cache.compile(tag_name)

    def next(self, tag_name: str, text: str, from_index: int = 0) -> Optional[ShortcodeMatch]:
        return self._scanner.next(tag_name, text, from_index)

    def find_all(self, tag_name: str, text: str) -> Iterator[ShortcodeMatch]:
        return self._scanner.find_all(tag_name, text)

    async def replace_all(self, tag_name: str, text: str, replacer: Replacer) -> str:
        return await self._substituter.replace_all(tag_name, text, replacer)

    def build_shortcode(self, tag_name: str, attributes: AttributeSource = None,
                        structural_type: StructuralType = StructuralType.CLOSED,
                        content: Optional[str] = None) -> Shortcode:
        return Shortcode(tag_name, attributes, structural_type, content, self._attributes_cache)

    def serialize(self, tag_name: str, attributes: AttributeSource = None,
                  structural_type: StructuralType = StructuralType.CLOSED, content: Optional[str] = None) -> str:
        return self.build_shortcode(tag_name, attributes, structural_type, content).to_string()

    def canonicalise(self, tag_name: str, text: str) -> str:
        """
        Rewrite every non-escaped occurrence of `«tag_name»` in its canonical form.
        """
        return self._substituter.replace_all_synchronously(tag_name, text, Shortcode.to_string)


DEFAULT_SHORTCODE_MASTER = ShortcodeMaster()


def compile_pattern(tag_name: str) -> re.Pattern:
    return DEFAULT_SHORTCODE_MASTER.compile_pattern(tag_name)


def next_shortcode(tag_name: str, text: str, from_index: int = 0) -> Optional[ShortcodeMatch]:
    """
    Find the next shortcode `«tag_name»` in `text`, starting from `from_index`.

    Returns None if there are no further (non-escaped) occurrences.
    """
    return DEFAULT_SHORTCODE_MASTER.next(tag_name, text, from_index)


def find_shortcodes(tag_name: str, text: str) -> Iterator[ShortcodeMatch]:
    return DEFAULT_SHORTCODE_MASTER.find_all(tag_name, text)


async def replace_all(tag_name: str, text: str, replacer: Replacer) -> str:
    """
    Replace the shortcodes `«tag_name»` in `text`, one at a time in order of appearance.
    """
    return await DEFAULT_SHORTCODE_MASTER.replace_all(tag_name, text, replacer)


def serialize(tag_name: str, attributes: AttributeSource = None,
              structural_type: StructuralType = StructuralType.CLOSED, content: Optional[str] = None) -> str:
    return DEFAULT_SHORTCODE_MASTER.serialize(tag_name, attributes, structural_type, content)


def canonicalise_shortcodes(tag_name: str, text: str) -> str:
    return DEFAULT_SHORTCODE_MASTER.canonicalise(tag_name, text)
