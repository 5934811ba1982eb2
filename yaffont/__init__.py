"""
yaffont - load yaff bitmap fonts and render text with them

licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from .base import FontFormatError, FontSyntaxError, FontValidationError, Props
from .core import (
    Font, Glyph, FontProperties, GlyphSource, FontDocument, RasterInk, NO_INK,
    Label, Codepoint, Char, UnicodeChar, Tag, Default,
    normalise, compile_glyph,
)
from .formats import parse_yaff
from .render import Surface, ImageSurface, TextBounds, RenderResult


__version__ = '0.4.0'


def loads(text, *, character_spacing=0, workers=None):
    """
    Load font from yaff source text.

    character_spacing: pixels added between glyphs when rendering (default: 0)
    workers: number of threads to compile glyphs on (default: no threads)
    """
    return Font.from_tree(
        parse_yaff(text),
        character_spacing=character_spacing, workers=workers,
    )


def load(infile, *, character_spacing=0, workers=None):
    """
    Load font from a yaff file.

    infile: path or text stream
    """
    if isinstance(infile, (str, Path)):
        logging.debug('Loading font from %s', infile)
        with open(infile, 'r', encoding='utf-8-sig') as instream:
            return loads(
                instream.read(),
                character_spacing=character_spacing, workers=workers,
            )
    return loads(
        infile.read(), character_spacing=character_spacing, workers=workers,
    )
