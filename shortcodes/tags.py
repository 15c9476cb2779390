"""
# Shortcodes: tags.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Shortcode objects.
"""

import enum
import numbers
import re
import warnings
from typing import Any, NamedTuple, Optional, Union

from shortcodes.attributes import DEFAULT_ATTRIBUTES_CACHE, Attributes, AttributesCache
from shortcodes.utilities import contains_whitespace


class StructuralType(enum.Enum):
    SINGLE = 'single'
    SELF_CLOSING = 'self-closing'
    CLOSED = 'closed'


class AttributeText(NamedTuple):
    """
    Raw attribute specifications, e.g. `src="a.png" 3`, to be parsed.
    """
    text: str


class FlatAttributes(NamedTuple):
    """
    A flat mapping of attributes, each entry of which is routed through `Shortcode.set`.

    Integer keys are numeric attributes, all other keys are named attributes.
    """
    value_from_key: dict[Any, str]


AttributeSource = Union[AttributeText, FlatAttributes, Attributes, None]


def is_numeric_key(attribute: Union[int, str]) -> bool:
    return isinstance(attribute, numbers.Integral) and not isinstance(attribute, bool)


class Shortcode:
    """
    A shortcode, either matched in some text or constructed directly.

    Consists of
    - «tag_name»
    - «attributes» (named and numeric)
    - «structural_type» (single `[tag]`, self-closing `[tag /]`, or closed `[tag]content[/tag]`)
    - «content» (only for closed shortcodes)
    """
    _tag_name: str
    _attributes: 'Attributes'
    _structural_type: 'StructuralType'
    _content: Optional[str]

    def __init__(self, tag_name: str, attributes: AttributeSource = None,
                 structural_type: 'StructuralType' = StructuralType.CLOSED, content: Optional[str] = None,
                 attributes_cache: Optional['AttributesCache'] = None):
        if attributes_cache is None:
            attributes_cache = DEFAULT_ATTRIBUTES_CACHE

        self._tag_name = tag_name
        self._attributes = Attributes()
        self._structural_type = StructuralType(structural_type)

        if self._structural_type is StructuralType.CLOSED:
            self._content = content
        else:
            self._content = None

        if attributes is None:
            pass
        elif isinstance(attributes, AttributeText):
            self._attributes = attributes_cache.parse(attributes.text)
        elif isinstance(attributes, Attributes):
            self._attributes = attributes.copy()
        elif isinstance(attributes, FlatAttributes):
            for key, value in attributes.value_from_key.items():
                self.set(key, value)
        else:
            raise TypeError(
                f'error: unrecognised attributes `{attributes!r}` '
                f'(expected AttributeText, FlatAttributes, or Attributes)'
            )

    @classmethod
    def from_match(cls, match: re.Match, attributes_cache: Optional['AttributesCache'] = None) -> 'Shortcode':
        """
        Generate a shortcode from a match of a pattern compiled by `PatternCache`.
        """
        if match.group('self_closing_slash') is not None:
            structural_type = StructuralType.SELF_CLOSING
        elif match.group('closing_tag') is not None:
            structural_type = StructuralType.CLOSED
        else:
            structural_type = StructuralType.SINGLE

        return cls(
            tag_name=match.group('tag_name'),
            attributes=AttributeText(match.group('attribute_specifications')),
            structural_type=structural_type,
            content=match.group('content'),
            attributes_cache=attributes_cache,
        )

    @property
    def tag_name(self) -> str:
        return self._tag_name

    @property
    def attributes(self) -> 'Attributes':
        return self._attributes

    @property
    def structural_type(self) -> 'StructuralType':
        return self._structural_type

    @property
    def content(self) -> Optional[str]:
        return self._content

    def get(self, attribute: Union[int, str]) -> Optional[str]:
        """
        Get an attribute, routed to the numeric attributes if `attribute` is an integer.
        """
        if is_numeric_key(attribute):
            if 0 <= attribute < len(self._attributes.numeric):
                return self._attributes.numeric[attribute]

            return None

        return self._attributes.named.get(str(attribute).lower())

    def set(self, attribute: Union[int, str], value: str) -> 'Shortcode':
        """
        Set an attribute, routed to the numeric attributes if `attribute` is an integer.

        A numeric attribute may be set at an existing position or appended at the end;
        negative positions are out of range.
        """
        if is_numeric_key(attribute):
            numeric = self._attributes.numeric
            if attribute == len(numeric):
                numeric.append(value)
            elif 0 <= attribute < len(numeric):
                numeric[attribute] = value
            else:
                raise IndexError(
                    f'error: cannot set numeric attribute {attribute} '
                    f'of a shortcode with {len(numeric)} numeric attributes'
                )
        else:
            self._attributes.named[str(attribute).lower()] = value

        return self

    def to_string(self) -> str:
        string = f'[{self._tag_name}'

        for value in self._attributes.numeric:
            if contains_whitespace(value):
                string += f' "{value}"'
            else:
                string += f' {value}'

        for name, value in self._attributes.named.items():
            if '"' in value:
                warnings.warn(
                    f'warning: value of attribute `{name}` of `{self._tag_name}` shortcode contains `"`; '
                    f'the serialised shortcode will not parse back to the same value'
                )
            string += f' {name}="{value}"'

        if self._structural_type is StructuralType.SINGLE:
            return string + ']'
        elif self._structural_type is StructuralType.SELF_CLOSING:
            return string + ' /]'

        string += ']'

        if self._content:
            string += self._content

        return string + f'[/{self._tag_name}]'

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Shortcode):
            return NotImplemented

        return (
            self._tag_name == other._tag_name
            and self._attributes == other._attributes
            and self._structural_type is other._structural_type
            and self._content == other._content
        )

    def __repr__(self) -> str:
        return (
            f'Shortcode(tag_name={self._tag_name!r}, attributes={self._attributes!r}, '
            f'structural_type={self._structural_type}, content={self._content!r})'
        )
