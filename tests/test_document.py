"""
yaffont test suite
font document normalisation tests
"""

import unittest

from yaffont import FontValidationError, NO_INK, normalise
from yaffont.base import to_number, to_str, to_number_or_str
from yaffont.core.labels import Char, Tag, Default
from yaffont.core.properties import (
    FontProperties, GlyphProperties, Spacing, DefaultChar, get_converters,
)
from .base import (
    BaseTester, glyph_entry, property_entry, char, unicode, codepoint, tag,
)


class TestProperties(BaseTester):
    """Test font property normalisation."""

    def test_dpi_number(self):
        doc = normalise([property_entry('dpi', '96')])
        assert doc.properties.dpi == 96
        assert isinstance(doc.properties.dpi, int)

    def test_dpi_string(self):
        doc = normalise([property_entry('dpi', '96x72')])
        assert doc.properties.dpi == '96x72'

    def test_spacing_enum(self):
        doc = normalise([property_entry('spacing', 'character-cell')])
        assert doc.properties.spacing == 'character-cell'

    def test_spacing_outside_enum_is_fatal(self):
        with self.assertRaises(FontValidationError) as cm:
            normalise([property_entry('spacing', 'wide')])
        assert cm.exception.location == ('properties', 'spacing')

    def test_non_numeric_shift_up_is_fatal(self):
        with self.assertRaises(FontValidationError):
            normalise([property_entry('shift-up', 'high')])

    def test_key_normalisation(self):
        doc = normalise([
            property_entry('cell-size', '8x16'),
            property_entry('SHIFT_UP', '-2'),
            property_entry('Point-Size', '12'),
        ])
        assert doc.properties.cell_size == '8x16'
        assert doc.properties.shift_up == -2
        assert doc.properties.point_size == 12

    def test_string_properties(self):
        doc = normalise([
            property_entry('name', '1234'),
            property_entry('family', 'Fixed'),
        ])
        assert doc.properties.name == '1234'
        assert doc.properties.family == 'Fixed'

    def test_unset_property_is_none(self):
        doc = normalise([])
        assert doc.properties.name is None
        assert doc.properties.default_char is None
        assert doc.glyphs == ()

    def test_later_duplicates_overwrite(self):
        doc = normalise([
            property_entry('name', 'first'),
            property_entry('name', 'second'),
        ])
        assert doc.properties.name == 'second'

    def test_unrecognised_keys_dropped(self):
        doc = normalise([
            property_entry('foundry', 'Acme'),
            property_entry('bad key', 'x'),
            property_entry('name', 'kept'),
        ])
        assert vars(doc.properties) == {'name': 'kept'}, vars(doc.properties)

    def test_malformed_property_entries_dropped(self):
        doc = normalise([
            {'type': 'property', 'key': 'name'},
            {'type': 'property', 'key': None, 'val': 'x'},
            {'type': 'property', 'key': 'family', 'val': 'ok'},
        ])
        assert vars(doc.properties) == {'family': 'ok'}

    def test_default_char_forms(self):
        for value, expected in (
                ('0x41', 0x41), ('65', 65), ('0o101', 65),
                ('u+0041', 0x41), ('"U+0041"', 0x41),
                ('default', 'default'), ('missing', 'missing'),
            ):
            doc = normalise([property_entry('default-char', value)])
            assert doc.properties.default_char == expected, (value, doc.properties.default_char)

    def test_default_char_invalid_is_fatal(self):
        with self.assertRaises(FontValidationError):
            normalise([property_entry('default-char', 'bogus')])

    def test_default_cell_size(self):
        doc = normalise([
            property_entry('cell-size', 'abc'),
            property_entry('bounding-box', '5 7'),
            property_entry('raster-size', '3x3'),
        ])
        assert doc.properties.default_cell_size() == (5, 7)

    def test_converters(self):
        converters = get_converters(FontProperties)
        assert converters['name'] is to_str
        assert converters['shift_up'] is to_number
        assert converters['spacing'] is Spacing
        assert converters['dpi'] is to_number_or_str
        assert converters['default_char'] == DefaultChar.create
        assert set(get_converters(GlyphProperties).values()) == {to_number}

    def test_properties_as_text(self):
        doc = normalise([
            property_entry('name', 'Sample'),
            property_entry('cell-size', '4x6'),
            property_entry('dpi', '96'),
        ])
        assert str(doc.properties) == 'name: Sample\ncell-size: 4x6\ndpi: 96'

    def test_no_default_cell_size(self):
        doc = normalise([property_entry('cell-size', 'big')])
        assert doc.properties.default_cell_size() is None


class TestGlyphEntries(BaseTester):
    """Test glyph entry normalisation."""

    def test_glyph(self):
        doc = normalise([glyph_entry([char('a')], ['.@', '@.'])])
        glyph, = doc.glyphs
        assert glyph.labels == (Char('a'),)
        assert glyph.ink.width == 2
        assert glyph.ink.height == 2

    def test_no_ink_sentinel(self):
        doc = normalise([glyph_entry([tag('empty')], '-')])
        assert doc.glyphs[0].ink is NO_INK

    def test_irregular_raster_is_fatal(self):
        tree = [
            glyph_entry([char('a')], ['..', '@@']),
            glyph_entry([char('b')], ['...', '@@']),
        ]
        with self.assertRaises(FontValidationError) as cm:
            normalise(tree)
        assert cm.exception.location == ('entries', 1, 'ink'), cm.exception.location

    def test_uniform_raster_loads(self):
        doc = normalise([glyph_entry([char('a')], ['...', '@@@', '.@.'])])
        assert len(doc.glyphs) == 1

    def test_bad_ink_is_fatal(self):
        for ink in ([], ['.x.'], 'abc', None, [1, 2]):
            with self.assertRaises(FontValidationError, msg=repr(ink)):
                normalise([glyph_entry([char('a')], ink)])

    def test_error_location_includes_line(self):
        entry = glyph_entry([char('a')], ['.', '..'])
        entry['line'] = 12
        with self.assertRaises(FontValidationError) as cm:
            normalise([entry])
        assert 'line 12' in str(cm.exception), str(cm.exception)

    def test_unparsable_label_does_not_void_font(self):
        tree = [
            glyph_entry([char('a')], ['@']),
            glyph_entry([codepoint('0xZZ')], ['@@']),
            glyph_entry([char('c')], ['@@@']),
        ]
        doc = normalise(tree)
        assert [_g.labels for _g in doc.glyphs] == [(Char('a'),), (Char('c'),)]

    def test_invalid_label_dropped_glyph_kept(self):
        doc = normalise([glyph_entry([codepoint('nope'), tag('kept')], ['@'])])
        assert doc.glyphs[0].labels == (Tag('kept'),)

    def test_missing_only_glyph_dropped(self):
        doc = normalise([
            glyph_entry([{'type': 'missing'}], ['@']),
            glyph_entry([{'type': 'default'}], ['@']),
        ])
        assert len(doc.glyphs) == 1
        assert doc.glyphs[0].labels == (Default(),)

    def test_null_and_malformed_entries_filtered(self):
        doc = normalise([
            None, 42, 'text', {'type': 'comment'},
            glyph_entry([char('a')], ['@']),
            None,
        ])
        assert len(doc.glyphs) == 1

    def test_glyph_properties(self):
        doc = normalise([glyph_entry([char('a')], ['@'], props=[
            property_entry('left-bearing', '1'),
            property_entry('right_bearing', '2'),
            property_entry('shift-up', '-3'),
            property_entry('colour', 'red'),
        ])])
        props = doc.glyphs[0].props
        assert props.left_bearing == 1
        assert props.right_bearing == 2
        assert props.shift_up == -3
        assert vars(props) == {'left_bearing': 1, 'right_bearing': 2, 'shift_up': -3}

    def test_deprecated_glyph_properties(self):
        doc = normalise([glyph_entry([char('a')], ['@'], props=[
            property_entry('tracking', '1'),
            property_entry('offset', '2 -1'),
        ])])
        props = doc.glyphs[0].props
        assert props.right_bearing == 1
        assert props.left_bearing == 2
        assert props.shift_up == -1

    def test_non_numeric_bearing_drops_glyph(self):
        doc = normalise([
            glyph_entry([char('a')], ['@'], props=[property_entry('left-bearing', 'x')]),
            glyph_entry([char('b')], ['@']),
        ])
        assert [_g.labels for _g in doc.glyphs] == [(Char('b'),)]

    def test_missing_props_default_empty(self):
        entry = glyph_entry([char('a')], ['@'])
        del entry['props']
        doc = normalise([entry])
        assert doc.glyphs[0].props.left_bearing is None

    def test_tree_must_be_sequence(self):
        with self.assertRaises(FontValidationError):
            normalise('name: x')
        with self.assertRaises(FontValidationError):
            normalise(None)

    def test_partition_keeps_order(self):
        doc = normalise([
            glyph_entry([char('a')], ['@']),
            property_entry('name', 'x'),
            glyph_entry([unicode('u+0062')], ['@']),
        ])
        assert len(doc.glyphs) == 2
        assert doc.properties.name == 'x'


if __name__ == '__main__':
    unittest.main()
