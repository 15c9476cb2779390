"""
# Shortcodes: test_tags.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `tags.py`.
"""

import unittest
import warnings

from shortcodes.attributes import Attributes, AttributesCache
from shortcodes.patterns import PatternCache
from shortcodes.tags import AttributeText, FlatAttributes, Shortcode, StructuralType


class TestTags(unittest.TestCase):
    def test_shortcode_from_attribute_text(self):
        shortcode = Shortcode('img', AttributeText('SRC="a.png" 320 "two words"'), StructuralType.SINGLE)
        self.assertEqual(shortcode.tag_name, 'img')
        self.assertEqual(shortcode.attributes, Attributes({'src': 'a.png'}, ['320', 'two words']))
        self.assertIs(shortcode.structural_type, StructuralType.SINGLE)
        self.assertIsNone(shortcode.content)

    def test_shortcode_from_attributes(self):
        attributes = Attributes({'src': 'a.png'}, ['320'])
        shortcode = Shortcode('img', attributes, StructuralType.SELF_CLOSING)
        self.assertEqual(shortcode.attributes, attributes)

        shortcode.set('alt', 'text')
        self.assertEqual(attributes, Attributes({'src': 'a.png'}, ['320']))

    def test_shortcode_from_flat_attributes(self):
        shortcode = Shortcode('img', FlatAttributes({'SRC': 'a.png', 0: '320', 1: '240'}))
        self.assertEqual(shortcode.attributes, Attributes({'src': 'a.png'}, ['320', '240']))

    def test_shortcode_attribute_sources_agree(self):
        attribute_text_shortcode = Shortcode('x', AttributeText('a="1" b=2 "three" 4'))
        attributes_shortcode = Shortcode('x', Attributes({'a': '1', 'b': '2'}, ['three', '4']))
        flat_attributes_shortcode = Shortcode('x', FlatAttributes({'a': '1', 'b': '2', 0: 'three', 1: '4'}))

        self.assertEqual(attribute_text_shortcode, attributes_shortcode)
        self.assertEqual(attributes_shortcode, flat_attributes_shortcode)
        self.assertEqual(attribute_text_shortcode.to_string(), flat_attributes_shortcode.to_string())

    def test_shortcode_unrecognised_attributes(self):
        with self.assertRaises(TypeError):
            Shortcode('x', 'a="1"')
        with self.assertRaises(TypeError):
            Shortcode('x', {'a': '1'})

    def test_shortcode_uses_attributes_cache(self):
        attributes_cache = AttributesCache()
        Shortcode('x', AttributeText('a=1'), attributes_cache=attributes_cache)
        self.assertIn('a=1', attributes_cache)

    def test_shortcode_content_only_when_closed(self):
        self.assertEqual(Shortcode('x', content='inner').content, 'inner')
        self.assertIsNone(Shortcode('x', structural_type=StructuralType.SINGLE, content='inner').content)
        self.assertIsNone(Shortcode('x', structural_type=StructuralType.SELF_CLOSING, content='inner').content)

    def test_shortcode_structural_type_from_value(self):
        self.assertIs(Shortcode('x', structural_type='self-closing').structural_type, StructuralType.SELF_CLOSING)
        with self.assertRaises(ValueError):
            Shortcode('x', structural_type='open')

    def test_shortcode_get(self):
        shortcode = Shortcode('x', AttributeText('Name=value first second'))
        self.assertEqual(shortcode.get('name'), 'value')
        self.assertEqual(shortcode.get('NAME'), 'value')
        self.assertEqual(shortcode.get(0), 'first')
        self.assertEqual(shortcode.get(1), 'second')
        self.assertIsNone(shortcode.get(2))
        self.assertIsNone(shortcode.get('missing'))

    def test_shortcode_set(self):
        shortcode = Shortcode('x')
        self.assertIs(shortcode.set('a', '1'), shortcode)

        shortcode.set('B', '2').set(0, 'zero').set(1, 'one').set(0, 'ZERO').set('a', 'overwritten')
        self.assertEqual(shortcode.attributes, Attributes({'a': 'overwritten', 'b': '2'}, ['ZERO', 'one']))

        with self.assertRaises(IndexError):
            shortcode.set(5, 'too far')

    def test_shortcode_negative_numeric_attribute(self):
        shortcode = Shortcode('x', AttributeText('a b'))
        self.assertIsNone(shortcode.get(-1))
        self.assertIsNone(shortcode.get(-5))

        for attribute in [-1, -5]:
            with self.assertRaises(IndexError) as context:
                shortcode.set(attribute, 'z')
            self.assertTrue(str(context.exception).startswith('error: '))

        self.assertEqual(shortcode.to_string(), '[x a b][/x]')

    def test_shortcode_non_string_named_attribute(self):
        shortcode = Shortcode('x', structural_type=StructuralType.SINGLE)
        shortcode.set(1.5, 'v')
        self.assertEqual(shortcode.get(1.5), 'v')
        self.assertEqual(shortcode.attributes, Attributes({'1.5': 'v'}))

    def test_shortcode_to_string(self):
        self.assertEqual(Shortcode('x', structural_type=StructuralType.SINGLE).to_string(), '[x]')
        self.assertEqual(Shortcode('x', structural_type=StructuralType.SELF_CLOSING).to_string(), '[x /]')
        self.assertEqual(Shortcode('x').to_string(), '[x][/x]')
        self.assertEqual(Shortcode('x', content='').to_string(), '[x][/x]')
        self.assertEqual(Shortcode('x', content='inner').to_string(), '[x]inner[/x]')
        self.assertEqual(
            Shortcode(
                'img',
                FlatAttributes({'src': 'a.png'}),
                StructuralType.SELF_CLOSING,
            ).to_string(),
            '[img src="a.png" /]',
        )
        self.assertEqual(
            Shortcode(
                'caption',
                Attributes({'align': 'left', 'width': '300'}, ['two words', 'bare']),
                content='A caption',
            ).to_string(),
            '[caption "two words" bare align="left" width="300"]A caption[/caption]',
        )
        self.assertEqual(str(Shortcode('x', structural_type=StructuralType.SINGLE)), '[x]')

    def test_shortcode_to_string_warns_on_double_quote(self):
        shortcode = Shortcode('x', FlatAttributes({'title': 'say "hi"'}), StructuralType.SINGLE)
        with warnings.catch_warnings(record=True) as caught_warnings:
            warnings.simplefilter('always')
            self.assertEqual(shortcode.to_string(), '[x title="say "hi""]')

        self.assertEqual(len(caught_warnings), 1)

    def test_shortcode_from_match(self):
        pattern = PatternCache().compile('x')

        shortcode = Shortcode.from_match(pattern.search('[x a=1]inner[/x]'))
        self.assertEqual(shortcode, Shortcode('x', FlatAttributes({'a': '1'}), StructuralType.CLOSED, 'inner'))

        shortcode = Shortcode.from_match(pattern.search('[x]'))
        self.assertIs(shortcode.structural_type, StructuralType.SINGLE)

        shortcode = Shortcode.from_match(pattern.search('[x /]'))
        self.assertIs(shortcode.structural_type, StructuralType.SELF_CLOSING)
        self.assertEqual(shortcode.attributes, Attributes())

        shortcode = Shortcode.from_match(pattern.search('[x][/x]'))
        self.assertIs(shortcode.structural_type, StructuralType.CLOSED)
        self.assertEqual(shortcode.content, '')

    def test_shortcode_round_trip(self):
        pattern = PatternCache().compile('quote')
        shortcodes = [
            Shortcode('quote', content='Some [b]bold[/b] text'),
            Shortcode('quote', Attributes({'cite': 'Someone', 'year': '1999'}, ['left', 'two words']), content='x'),
            Shortcode('quote', Attributes({}, ['a', 'b', 'a']), content=''),
        ]

        for shortcode in shortcodes:
            string = shortcode.to_string()
            self.assertEqual(Shortcode.from_match(pattern.search(string)).to_string(), string)

    def test_shortcode_repr(self):
        self.assertEqual(
            repr(Shortcode('x', structural_type=StructuralType.SINGLE)),
            "Shortcode(tag_name='x', attributes=Attributes(named={}, numeric=[]), "
            "structural_type=StructuralType.SINGLE, content=None)",
        )


if __name__ == '__main__':
    unittest.main()
