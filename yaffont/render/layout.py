"""
yaffont.render.layout - text extents and compositing

licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import namedtuple


class TextBounds(namedtuple('TextBounds', 'width height baseline')):
    """
    Extent of a run of glyphs.

    baseline: highest ink-top extent among the glyphs,
              used to align glyphs of differing shift-up
    """


class RenderResult(namedtuple('RenderResult', 'surface baseline')):
    """Surface holding rendered text, and the baseline of the run."""


def get_bounds(glyphs, spacing=0):
    """Compute bounding box and baseline for a sequence of resolved glyphs."""
    if not glyphs:
        return TextBounds(0, 0, 0)
    width = sum(_g.bounding_width for _g in glyphs) + spacing * (len(glyphs) - 1)
    height = max(_g.bounding_height for _g in glyphs)
    baseline = max(_g.raster_height + _g.shift_up for _g in glyphs)
    return TextBounds(width, height, baseline)


def get_placements(glyphs, bounds, spacing=0):
    """Generate (glyph, x, y) for each glyph, in order."""
    x = 0
    for count, glyph in enumerate(glyphs):
        # spacing goes between glyphs, not before the first
        if count:
            x += spacing
        y = bounds.baseline - glyph.raster_height - glyph.shift_up
        yield glyph, x + glyph.left_bearing, y
        x += glyph.bounding_width


def composite(glyphs, surface, fill, spacing=0):
    """Draw glyphs to surface and recolour the ink. Returns the bounds."""
    bounds = get_bounds(glyphs, spacing)
    surface.resize(max(0, int(bounds.width)), max(0, int(bounds.height)))
    surface.clear()
    for glyph, x, y in get_placements(glyphs, bounds, spacing):
        # blank glyphs only advance
        if glyph.blank:
            continue
        logging.debug('Drawing %r at (%s, %s)', glyph, x, y)
        surface.draw(glyph.image, x, y)
    surface.stencil_fill(fill)
    return bounds
