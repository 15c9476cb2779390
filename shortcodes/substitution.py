"""
# Shortcodes: substitution.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Sequential substitution of shortcode occurrences.

All occurrences are located up front, then replaced one at a time from left to right:
the replacer for an occurrence is not called until the replacement for the previous occurrence has resolved.
Side effects of the replacer therefore happen in source order,
and the output is assembled in source order without any re-sorting.
"""

import inspect
from typing import Awaitable, Callable, NamedTuple, Optional, Union

from shortcodes.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from shortcodes.exceptions import ReplacementException
from shortcodes.scanning import ShortcodeMatch, ShortcodeScanner, is_escaped, unescape
from shortcodes.tags import Shortcode

ReplacerResult = Optional[str]
Replacer = Callable[[Shortcode], Union[ReplacerResult, Awaitable[ReplacerResult]]]


class LiteralSegment(NamedTuple):
    text: str


class OccurrenceSegment(NamedTuple):
    shortcode_match: ShortcodeMatch


Segment = Union[LiteralSegment, OccurrenceSegment]


class ShortcodeSubstituter:
    """
    Object replacing the occurrences of a shortcode using a (possibly asynchronous) replacer.

    The replacer receives a `Shortcode` and returns
    - a replacement string,
    - `None`, to leave the occurrence unchanged, or
    - an awaitable resolving to either of the above.
    """
    _scanner: 'ShortcodeScanner'
    _verbose_mode_enabled: bool

    def __init__(self, scanner: Optional['ShortcodeScanner'] = None, verbose_mode_enabled: bool = False):
        if scanner is None:
            scanner = ShortcodeScanner()

        self._scanner = scanner
        self._verbose_mode_enabled = verbose_mode_enabled

    def compute_segments(self, tag_name: str, text: str) -> list[Segment]:
        """
        Split text into literal segments and (non-escaped) occurrence segments.

        Escaped occurrences become literal segments with one layer of escaping removed.
        """
        segments: list[Segment] = []
        index = 0

        for match in self._scanner.compute_matches(tag_name, text):
            if is_escaped(match):
                segments.append(LiteralSegment(text[index:match.start()]))
                segments.append(LiteralSegment(unescape(match)))
                index = match.end()
                continue

            shortcode_match = self._scanner.build_shortcode_match(match)
            segments.append(LiteralSegment(text[index:shortcode_match.offset]))
            segments.append(OccurrenceSegment(shortcode_match))
            index = shortcode_match.end

        segments.append(LiteralSegment(text[index:]))

        return segments

    async def compute_replacement(self, shortcode_match: ShortcodeMatch, replacer: Replacer) -> str:
        try:
            replacement = replacer(shortcode_match.shortcode)
            if inspect.isawaitable(replacement):
                replacement = await replacement
        except Exception as exception:
            raise ReplacementException(shortcode_match.shortcode, shortcode_match.offset) from exception

        return self.check_replacement(shortcode_match, replacement)

    @staticmethod
    def check_replacement(shortcode_match: ShortcodeMatch, replacement: ReplacerResult) -> str:
        if replacement is None:
            return shortcode_match.matched_text

        if not isinstance(replacement, str):
            type_error = TypeError(f'error: replacer returned `{replacement!r}` (expected str or None)')
            raise ReplacementException(shortcode_match.shortcode, shortcode_match.offset) from type_error

        return replacement

    def replace_all_synchronously(self, tag_name: str, text: str,
                                  replacer: Callable[[Shortcode], ReplacerResult]) -> str:
        """
        Replace every non-escaped occurrence of `«tag_name»` in order, with a replacer that never suspends.
        """
        pieces: list[str] = []

        for segment in self.compute_segments(tag_name, text):
            if isinstance(segment, LiteralSegment):
                pieces.append(segment.text)
                continue

            shortcode_match = segment.shortcode_match
            try:
                replacement = replacer(shortcode_match.shortcode)
            except Exception as exception:
                raise ReplacementException(shortcode_match.shortcode, shortcode_match.offset) from exception

            replacement = self.check_replacement(shortcode_match, replacement)
            pieces.append(replacement)

            if self._verbose_mode_enabled:
                self.print_replacement(shortcode_match, replacement)

        return ''.join(pieces)

    async def replace_all(self, tag_name: str, text: str, replacer: Replacer) -> str:
        """
        Replace every non-escaped occurrence of `«tag_name»` in order.

        Raises `ReplacementException` on the first failure of the replacer, in which case no text is returned.
        """
        pieces: list[str] = []

        for segment in self.compute_segments(tag_name, text):
            if isinstance(segment, LiteralSegment):
                pieces.append(segment.text)
                continue

            shortcode_match = segment.shortcode_match
            replacement = await self.compute_replacement(shortcode_match, replacer)
            pieces.append(replacement)

            if self._verbose_mode_enabled:
                self.print_replacement(shortcode_match, replacement)

        return ''.join(pieces)

    @staticmethod
    def print_replacement(shortcode_match: ShortcodeMatch, replacement: str):
        tag_name = shortcode_match.shortcode.tag_name
        offset = shortcode_match.offset

        if shortcode_match.matched_text == replacement:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE [{tag_name}] at offset {offset}')
        print(shortcode_match.matched_text)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
        print(replacement)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER [{tag_name}] at offset {offset}')
        print('\n\n\n\n')
