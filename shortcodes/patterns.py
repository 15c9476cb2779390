"""
# Shortcodes: patterns.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Compiled shortcode patterns.
"""

import re

from shortcodes.exceptions import InvalidTagNameException
from shortcodes.idioms import TAG_NAME_REGEX, build_shortcode_regex


def validate_tag_name(tag_name: str) -> str:
    if not isinstance(tag_name, str) or re.fullmatch(pattern=TAG_NAME_REGEX, string=tag_name) is None:
        raise InvalidTagNameException(tag_name)

    return tag_name


class PatternCache:
    """
    Object storing compiled shortcode patterns, keyed by tag name.

    Entries are written once and never evicted;
    the number of distinct tag names in use is expected to be small.
    A compiled pattern holds no scan position,
    so the same pattern may be used by any number of scans at once
    (the start position is passed to `search` or `finditer` by each caller).
    """
    _pattern_from_tag_name: dict[str, re.Pattern]

    def __init__(self):
        self._pattern_from_tag_name = {}

    def __contains__(self, tag_name: str) -> bool:
        return tag_name in self._pattern_from_tag_name

    def __len__(self) -> int:
        return len(self._pattern_from_tag_name)

    def compile(self, tag_name: str) -> re.Pattern:
        try:
            return self._pattern_from_tag_name[tag_name]
        except (KeyError, TypeError):
            pass

        validate_tag_name(tag_name)
        pattern = re.compile(pattern=build_shortcode_regex(tag_name), flags=re.VERBOSE)

        # first compile wins
        return self._pattern_from_tag_name.setdefault(tag_name, pattern)


DEFAULT_PATTERN_CACHE = PatternCache()
