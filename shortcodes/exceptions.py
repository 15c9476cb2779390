"""
# Shortcodes: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class InvalidTagNameException(Exception):
    _tag_name: str

    def __init__(self, tag_name: str):
        super().__init__(f'error: invalid tag name `{tag_name}` (must be a non-empty run of word characters and `-`)')
        self._tag_name = tag_name

    @property
    def tag_name(self) -> str:
        return self._tag_name


class ReplacementException(Exception):
    _shortcode: 'Shortcode'
    _offset: int

    def __init__(self, shortcode: 'Shortcode', offset: int):
        super().__init__(f'error: replacement failed for `{shortcode.tag_name}` shortcode at offset {offset}')
        self._shortcode = shortcode
        self._offset = offset

    @property
    def shortcode(self) -> 'Shortcode':
        return self._shortcode

    @property
    def offset(self) -> int:
        return self._offset
