"""
yaffont.render - render text to surfaces

licence: https://opensource.org/licenses/MIT
"""

from .surface import Surface, ImageSurface, to_rgb
from .layout import TextBounds, RenderResult, get_bounds, get_placements, composite
