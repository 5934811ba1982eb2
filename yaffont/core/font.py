"""
yaffont.core.font - assembled bitmap font

licence: https://opensource.org/licenses/MIT
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from ..render import ImageSurface, RenderResult, get_bounds, composite
from .labels import Char, UnicodeChar, Tag, to_label
from .raster import RasterInk
from .properties import FontProperties, GlyphProperties
from .document import GlyphSource, normalise
from .glyph import compile_glyph
from .resolver import GlyphResolver


class Font:
    """Read-only bitmap font: glyphs, lookup and text rendering."""

    def __init__(self, glyphs=(), properties=None, *, character_spacing=0):
        """Assemble font from compiled glyphs in document order."""
        if properties is None:
            properties = FontProperties()
        self._properties = properties
        self._character_spacing = character_spacing
        self._resolver = GlyphResolver()
        glyphs = list(glyphs)
        for index, glyph in enumerate(glyphs):
            self._resolver.register(index, glyph.labels)
        self._resolve_default_char()
        space = self._synthesize_space()
        if space is not None:
            self._resolver.register(len(glyphs), space.labels)
            glyphs.append(space)
        self._glyphs = tuple(glyphs)

    def __repr__(self):
        return (
            f'{type(self).__name__}('
            f'name={self._properties.name!r}, glyphs={len(self._glyphs)})'
        )

    ##########################################################################
    # construction

    @classmethod
    def from_document(cls, document, *, character_spacing=0, workers=None):
        """
        Compile and assemble a normalised FontDocument.

        workers: number of threads to compile glyphs on (default: compile in sequence)
        """
        global_shift_up = document.properties.shift_up or 0
        if workers and workers > 1 and len(document.glyphs) > 1:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # map preserves document order
                glyphs = tuple(executor.map(
                    lambda _src: compile_glyph(_src, global_shift_up),
                    document.glyphs,
                ))
        else:
            glyphs = tuple(
                compile_glyph(_src, global_shift_up) for _src in document.glyphs
            )
        logging.debug('Compiled %d glyphs', len(glyphs))
        return cls(
            glyphs, document.properties, character_spacing=character_spacing
        )

    @classmethod
    def from_tree(cls, tree, *, character_spacing=0, workers=None):
        """Build font from an untyped parse tree."""
        return cls.from_document(
            normalise(tree),
            character_spacing=character_spacing, workers=workers,
        )

    def _resolve_default_char(self):
        """Point the default glyph according to the default-char property."""
        default_char = self._properties.default_char
        if default_char == 'missing':
            index = self._resolver.find_label(Tag('missing'))
            if index is not None:
                self._resolver.set_default(index)
        elif isinstance(default_char, int):
            try:
                character = chr(default_char)
            except (ValueError, OverflowError):
                logging.warning('default-char %#x is not a valid character', default_char)
                return
            # falls back on any default-labelled glyph
            index = self._resolver.find_character(character)
            if index is not None:
                self._resolver.set_default(index)

    def _synthesize_space(self):
        """Create a transparent cell-sized space glyph if none is defined."""
        if self._resolver.has_space():
            return None
        size = self.default_cell_size
        if not size or not size.x or not size.y:
            return None
        logging.debug('Synthesizing %s space glyph', size)
        source = GlyphSource(
            labels=(Char(' '), UnicodeChar(0x20), Tag(' ')),
            ink=RasterInk.blank(size.x, size.y),
            props=GlyphProperties(),
        )
        return compile_glyph(source, self._properties.shift_up or 0)

    ##########################################################################
    # properties

    @property
    def properties(self):
        return self._properties

    @property
    def name(self):
        return self._properties.name

    @property
    def glyphs(self):
        """Glyphs in document order."""
        return self._glyphs

    @property
    def character_spacing(self):
        """Pixels added between consecutive glyphs."""
        return self._character_spacing

    @property
    def default_cell_size(self):
        """First well-formed size among cell-size, bounding-box, raster-size."""
        return self._properties.default_cell_size()

    @property
    def default_glyph(self):
        """Glyph used for characters not found; None if not defined."""
        return self._get(self._resolver.default)

    ##########################################################################
    # glyph access

    def _get(self, index):
        if index is None:
            return None
        return self._glyphs[index]

    def get_glyph_for_character(self, character):
        """
        Get glyph for a character or tag string.

        Looks in characters, Unicode, code points and tags, in that order,
        then falls back on the default glyph; None if not found.
        """
        return self._get(self._resolver.find_character(character))

    def get_glyph_for_charcode(self, code):
        """Get glyph for a numeric code, by code point then Unicode; None if not found."""
        return self._get(self._resolver.find_charcode(code))

    def get_glyph(self, label):
        """Get glyph registered under a label, without default; None if not found."""
        return self._get(self._resolver.find_label(to_label(label)))

    def get_chars(self):
        """Characters with a glyph in the character map."""
        return self._resolver.get_chars()

    def get_unicode(self):
        """Unicode scalars with a glyph in the Unicode map."""
        return self._resolver.get_unicode()

    def get_codepoints(self):
        """Code points with a glyph in the code point map."""
        return self._resolver.get_codepoints()

    def get_tags(self):
        """Tags with a glyph in the tag map."""
        return self._resolver.get_tags()

    ##########################################################################
    # text

    def get_text_glyphs(self, text):
        """
        Resolve text to glyphs, skipping unresolved elements.
        Elements of str are characters, other elements are numeric codes.
        """
        glyphs = (
            self.get_glyph_for_character(_e) if isinstance(_e, str)
            else self.get_glyph_for_charcode(_e)
            for _e in text
        )
        return tuple(_g for _g in glyphs if _g is not None)

    def _spacing(self, spacing):
        if spacing is None:
            return self._character_spacing
        return spacing

    def bounding_box(self, text, *, spacing=None):
        """Bounding box and baseline of a text run, as TextBounds."""
        return get_bounds(self.get_text_glyphs(text), self._spacing(spacing))

    def render(self, text, fill=(255, 255, 255), *, surface=None, spacing=None):
        """
        Draw text in a given colour.

        fill: RGB tuple or colour string (default: white)
        surface: Surface to draw on, resized to fit (default: new ImageSurface)
        spacing: pixels between glyphs (default: the font's character spacing)
        Returns RenderResult(surface, baseline).
        """
        if surface is None:
            surface = ImageSurface()
        bounds = composite(
            self.get_text_glyphs(text), surface, fill, self._spacing(spacing)
        )
        return RenderResult(surface, bounds.baseline)
