"""
yaffont.core - font, glyph and label classes

licence: https://opensource.org/licenses/MIT
"""

from .labels import Label, Codepoint, Char, UnicodeChar, Tag, Default, to_label
from .raster import RasterInk, NO_INK
from .properties import FontProperties, GlyphProperties
from .document import FontDocument, GlyphSource, normalise
from .glyph import Glyph, compile_glyph
from .resolver import GlyphResolver
from .font import Font
