"""
# Shortcodes: attributes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Shortcode attributes.
"""

import re
from typing import Iterable, NamedTuple, Optional

from shortcodes.utilities import normalise_spaces


class Attributes:
    """
    Named and numeric attributes of a shortcode.

    Named attributes are assigned on a key/value basis (keys lower-cased),
    while numeric attributes are treated as a list in order of appearance.
    """
    _named: dict[str, str]
    _numeric: list[str]

    def __init__(self, named: Optional[dict[str, str]] = None, numeric: Optional[Iterable[str]] = None):
        self._named = {}
        self._numeric = []

        if named is not None:
            for name, value in named.items():
                self._named[name.lower()] = value

        if numeric is not None:
            self._numeric.extend(numeric)

    @property
    def named(self) -> dict[str, str]:
        return self._named

    @property
    def numeric(self) -> list[str]:
        return self._numeric

    def copy(self) -> 'Attributes':
        return Attributes(self._named, self._numeric)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attributes):
            return NotImplemented

        return self._named == other._named and self._numeric == other._numeric

    def __repr__(self) -> str:
        return f'Attributes(named={self._named!r}, numeric={self._numeric!r})'


class ParsedAttributes(NamedTuple):
    named_items: tuple[tuple[str, str], ...]
    numeric_values: tuple[str, ...]

    def to_attributes(self) -> Attributes:
        return Attributes(dict(self.named_items), self.numeric_values)


ATTRIBUTE_SPECIFICATION_PATTERN_COMPILED = re.compile(
    pattern=r'''
        (?P<double_quoted_name> [\w]+ ) [\s]* = [\s]* "(?P<double_quoted_value> [^"]* )" (?: [\s] | \Z )
            |
        (?P<single_quoted_name> [\w]+ ) [\s]* = [\s]* '(?P<single_quoted_value> [^']* )' (?: [\s] | \Z )
            |
        (?P<bare_name> [\w]+ ) [\s]* = [\s]* (?P<bare_value> [^\s'"]+ ) (?: [\s] | \Z )
            |
        "(?P<quoted_numeric_value> [^"]* )" (?: [\s] | \Z )
            |
        (?P<bare_numeric_value> [\S]+ ) (?: [\s] | \Z )
    ''',
    flags=re.VERBOSE,
)


def compute_attribute_specification_matches(attribute_specifications: str) -> Iterable[re.Match]:
    return ATTRIBUTE_SPECIFICATION_PATTERN_COMPILED.finditer(normalise_spaces(attribute_specifications))


def parse_attribute_specifications(attribute_specifications: str) -> ParsedAttributes:
    """
    Parse shortcode attribute specifications.

    Attribute specifications are of the following forms, tried in order:
    ````
    «name»="«value»"
    «name»='«value»'
    «name»=«bare_value»
    "«numeric_value»"
    «numeric_value»
    ````
    The first three are named attributes (with «name» lower-cased),
    the last two are numeric attributes.
    Malformed specifications are never an error; they are sorted into the buckets on a best-effort basis.
    An empty quoted numeric value `""` is dropped.
    """
    value_from_name: dict[str, str] = {}
    numeric_values: list[str] = []

    for match in compute_attribute_specification_matches(attribute_specifications):
        double_quoted_name = match.group('double_quoted_name')
        if double_quoted_name is not None:
            value_from_name[double_quoted_name.lower()] = match.group('double_quoted_value')
            continue

        single_quoted_name = match.group('single_quoted_name')
        if single_quoted_name is not None:
            value_from_name[single_quoted_name.lower()] = match.group('single_quoted_value')
            continue

        bare_name = match.group('bare_name')
        if bare_name is not None:
            value_from_name[bare_name.lower()] = match.group('bare_value')
            continue

        quoted_numeric_value = match.group('quoted_numeric_value')
        if quoted_numeric_value:
            numeric_values.append(quoted_numeric_value)
            continue

        bare_numeric_value = match.group('bare_numeric_value')
        if bare_numeric_value is not None:
            numeric_values.append(bare_numeric_value)

    return ParsedAttributes(tuple(value_from_name.items()), tuple(numeric_values))


class AttributesCache:
    """
    Object storing parsed attribute specifications, keyed by the specification text.

    Parse results are stored immutably and never evicted.
    Each call to `parse` returns a fresh `Attributes`,
    so that mutating one shortcode's attributes leaves the cache intact.
    """
    _parsed_from_text: dict[str, 'ParsedAttributes']

    def __init__(self):
        self._parsed_from_text = {}

    def __contains__(self, text: str) -> bool:
        return text in self._parsed_from_text

    def __len__(self) -> int:
        return len(self._parsed_from_text)

    def parse(self, text: Optional[str]) -> Attributes:
        if not text:
            return Attributes()

        try:
            parsed_attributes = self._parsed_from_text[text]
        except KeyError:
            parsed_attributes = self._parsed_from_text.setdefault(text, parse_attribute_specifications(text))

        return parsed_attributes.to_attributes()


DEFAULT_ATTRIBUTES_CACHE = AttributesCache()
