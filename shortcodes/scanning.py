"""
# Shortcodes: scanning.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Scanning text for shortcode occurrences.
"""

import re
from typing import Iterator, NamedTuple, Optional

from shortcodes.attributes import DEFAULT_ATTRIBUTES_CACHE, AttributesCache
from shortcodes.patterns import DEFAULT_PATTERN_CACHE, PatternCache
from shortcodes.tags import Shortcode


class ShortcodeMatch(NamedTuple):
    offset: int
    matched_text: str
    shortcode: Shortcode

    @property
    def end(self) -> int:
        return self.offset + len(self.matched_text)


def is_escaped(match: re.Match) -> bool:
    """
    Whether a match is escaped with double brackets `[[...]]`.
    """
    return match.group('left_bracket') == '[' and match.group('right_bracket') == ']'


def unescape(match: re.Match) -> str:
    """
    Remove one layer of double-bracket escaping from an escaped match.
    """
    return match.group()[1:-1]


class ShortcodeScanner:
    """
    Object finding the occurrences of shortcodes in text.

    Escaped occurrences `[[...]]` are skipped.
    A lone extra bracket (a leading `[` without a trailing `]`, or vice versa)
    is not part of an escape, and is stripped from the reported match as inert punctuation.
    """
    _pattern_cache: 'PatternCache'
    _attributes_cache: 'AttributesCache'

    def __init__(self, pattern_cache: Optional['PatternCache'] = None,
                 attributes_cache: Optional['AttributesCache'] = None):
        if pattern_cache is None:
            pattern_cache = DEFAULT_PATTERN_CACHE
        if attributes_cache is None:
            attributes_cache = DEFAULT_ATTRIBUTES_CACHE

        self._pattern_cache = pattern_cache
        self._attributes_cache = attributes_cache

    def compute_matches(self, tag_name: str, text: str, from_index: int = 0) -> Iterator[re.Match]:
        """
        Generate all raw matches (escaped ones included) from `from_index` onwards.
        """
        pattern = self._pattern_cache.compile(tag_name)
        return pattern.finditer(text, from_index)

    def build_shortcode_match(self, match: re.Match) -> ShortcodeMatch:
        offset = match.start()
        matched_text = match.group()

        if match.group('left_bracket'):
            matched_text = matched_text[1:]
            offset += 1

        if match.group('right_bracket'):
            matched_text = matched_text[:-1]

        shortcode = Shortcode.from_match(match, self._attributes_cache)

        return ShortcodeMatch(offset, matched_text, shortcode)

    def next(self, tag_name: str, text: str, from_index: int = 0) -> Optional[ShortcodeMatch]:
        """
        Find the next non-escaped occurrence of `«tag_name»` at or after `from_index`.
        """
        pattern = self._pattern_cache.compile(tag_name)

        while True:
            match = pattern.search(text, from_index)

            if match is None:
                return None

            if is_escaped(match):
                from_index = match.end()
                continue

            return self.build_shortcode_match(match)

    def find_all(self, tag_name: str, text: str, from_index: int = 0) -> Iterator[ShortcodeMatch]:
        for match in self.compute_matches(tag_name, text, from_index):
            if is_escaped(match):
                continue

            yield self.build_shortcode_match(match)
