"""
# Shortcodes: idioms.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common idioms.
"""

import re


TAG_NAME_REGEX = r'[\w-]+'


def build_tag_name_regex(tag_name: str) -> str:
    """
    Build the tag name regex.

    The negative lookahead prevents `tag` from matching the start of `tagextra` or `tag-extra`.
    """
    return fr'(?P<tag_name> {re.escape(tag_name)} ) (?! [\w-] )'


def build_attribute_specifications_regex() -> str:
    """
    Build the attribute specifications regex.

    Slashes are permitted, provided they are not immediately followed by the closing bracket
    (in which case the slash is the self-closing slash).
    """
    return r'(?P<attribute_specifications> [^\]/]* (?: / (?! \] ) [^\]/]* )*? )'


def build_content_regex() -> str:
    """
    Build the content regex.

    Content runs up to (but not including) the first `[/«tag_name»]`.
    Any other opening bracket is consumed as part of the content.
    """
    return r'(?P<content> [^\[]* (?: \[ (?! / (?P=tag_name) \] ) [^\[]* )* )'


def build_closing_tag_regex() -> str:
    return r'(?P<closing_tag> \[ / (?P=tag_name) \] )'


def build_shortcode_regex(tag_name: str) -> str:
    """
    Build the regex for occurrences of the shortcode `«tag_name»`.

    Named groups:
    1. `left_bracket`: an extra `[` to allow for escaping shortcodes with double `[[]]`
    2. `tag_name`: the shortcode name
    3. `attribute_specifications`: the shortcode attribute list
    4. `self_closing_slash`: the self-closing `/`
    5. `content`: the content of a shortcode when it wraps some content
    6. `closing_tag`: the closing tag
    7. `right_bracket`: an extra `]` to allow for escaping shortcodes with double `[[]]`
    """
    tag_name_regex = build_tag_name_regex(tag_name)
    attribute_specifications_regex = build_attribute_specifications_regex()
    content_regex = build_content_regex()
    closing_tag_regex = build_closing_tag_regex()

    return (
        r'\[ (?P<left_bracket> \[? )'
        + tag_name_regex
        + attribute_specifications_regex
        + r'(?: (?P<self_closing_slash> / ) \]'
        + r' | \] (?: ' + content_regex + closing_tag_regex + r' )? )'
        + r'(?P<right_bracket> \]? )'
    )
