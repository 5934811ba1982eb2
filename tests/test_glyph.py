"""
yaffont test suite
glyph compilation tests
"""

import unittest

from yaffont import GlyphSource, RasterInk, NO_INK, compile_glyph
from yaffont.core import GlyphProperties
from yaffont.core.labels import Char, Tag
from .base import BaseTester, assert_text_eq


class TestGlyph(BaseTester):
    """Test glyph compiler."""

    def test_compile(self):
        source = GlyphSource(
            labels=(Char('a'),),
            ink=RasterInk(('.@.', '@.@')),
            props=GlyphProperties(left_bearing=1, right_bearing=2),
        )
        glyph = compile_glyph(source)
        assert glyph.raster_width == 3
        assert glyph.raster_height == 2
        assert glyph.bounding_width == 6
        assert glyph.bounding_height == 2
        assert glyph.labels == (Char('a'),)
        assert not glyph.blank
        assert glyph.image.mode == 'RGBA'
        assert glyph.image.size == (3, 2)

    def test_pixels(self):
        glyph = compile_glyph(GlyphSource(labels=(Char('a'),), ink=RasterInk(('.@',))))
        assert glyph.image.getpixel((0, 0)) == (0, 0, 0, 0)
        assert glyph.image.getpixel((1, 0)) == (255, 255, 255, 255)

    def test_as_text(self):
        glyph = compile_glyph(GlyphSource(
            labels=(Char('A'),),
            ink=RasterInk(self.sample_A.splitlines()),
        ))
        assert_text_eq(glyph.as_text(), self.sample_A)

    def test_bearing_defaults(self):
        glyph = compile_glyph(GlyphSource(labels=(Char('a'),), ink=RasterInk(('@@',))))
        assert glyph.left_bearing == 0
        assert glyph.right_bearing == 0
        assert glyph.shift_up == 0
        assert glyph.bounding_width == 2

    def test_global_shift_up(self):
        source = GlyphSource(labels=(Char('a'),), ink=RasterInk(('@', '@')))
        glyph = compile_glyph(source, global_shift_up=-2)
        assert glyph.shift_up == -2
        assert glyph.bounding_height == 4

    def test_shift_up_override(self):
        source = GlyphSource(
            labels=(Char('a'),), ink=RasterInk(('@',)),
            props=GlyphProperties(shift_up=0),
        )
        glyph = compile_glyph(source, global_shift_up=-2)
        assert glyph.shift_up == 0

    def test_blank_glyph(self):
        source = GlyphSource(
            labels=(Tag('empty'),), ink=NO_INK,
            props=GlyphProperties(shift_up=-3, right_bearing=4),
        )
        glyph = compile_glyph(source, global_shift_up=-1)
        assert glyph.blank
        assert glyph.raster_width == 0
        assert glyph.raster_height == 0
        assert glyph.bounding_height == 3
        assert glyph.bounding_width == 4
        assert glyph.as_text() == ''

    def test_blank_glyph_global_shift(self):
        glyph = compile_glyph(GlyphSource(labels=(Tag('empty'),)), global_shift_up=-5)
        assert glyph.raster_width == glyph.raster_height == 0
        assert glyph.bounding_height == 5

    def test_raster_invariants(self):
        with self.assertRaises(ValueError):
            RasterInk(('..', '...'))
        with self.assertRaises(ValueError):
            RasterInk(())
        with self.assertRaises(ValueError):
            RasterInk(('.#.',))

    def test_blank_raster(self):
        ink = RasterInk.blank(8, 16)
        assert (ink.width, ink.height) == (8, 16)
        assert ink.as_rgba() == bytes(8 * 16 * 4)


if __name__ == '__main__':
    unittest.main()
