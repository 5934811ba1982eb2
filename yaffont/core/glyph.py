"""
yaffont.core.glyph - compiled glyphs

licence: https://opensource.org/licenses/MIT
"""

from ..base import require, safe_import
from .raster import NO_INK
Image = safe_import('PIL.Image')


class Glyph:
    """Immutable, renderable glyph."""

    __slots__ = (
        '_image', '_raster_width', '_raster_height',
        '_left_bearing', '_right_bearing', '_shift_up',
        '_labels', '_blank',
    )

    def __init__(
            self, image, *, labels=(),
            left_bearing=0, right_bearing=0, shift_up=0, blank=False,
        ):
        """Create glyph from decoded RGBA image."""
        self._image = image
        self._blank = bool(blank)
        # a blank glyph has no visual payload, whatever its placeholder image
        if self._blank:
            self._raster_width, self._raster_height = 0, 0
        else:
            self._raster_width, self._raster_height = image.size
        self._left_bearing = left_bearing
        self._right_bearing = right_bearing
        self._shift_up = shift_up
        self._labels = tuple(labels)

    def __repr__(self):
        """Text representation."""
        return (
            f'{type(self).__name__}('
            f'labels={self._labels!r}, '
            f'raster_size={self._raster_width}x{self._raster_height}, '
            f'left_bearing={self._left_bearing}, '
            f'right_bearing={self._right_bearing}, '
            f'shift_up={self._shift_up}, blank={self._blank})'
        )

    @property
    def image(self):
        """RGBA image of the glyph raster."""
        return self._image

    @property
    def raster_width(self):
        return self._raster_width

    @property
    def raster_height(self):
        return self._raster_height

    @property
    def left_bearing(self):
        return self._left_bearing

    @property
    def right_bearing(self):
        return self._right_bearing

    @property
    def shift_up(self):
        return self._shift_up

    @property
    def labels(self):
        return self._labels

    @property
    def blank(self):
        return self._blank

    @property
    def bounding_width(self):
        """Advance width: raster plus bearings."""
        return self._left_bearing + self._raster_width + self._right_bearing

    @property
    def bounding_height(self):
        """Raster height plus the magnitude of the shift."""
        return self._raster_height + abs(self._shift_up)

    def as_text(self, *, ink='@', paper='.', start='', end='\n'):
        """Represent the raster as text."""
        if self._blank:
            return ''
        alpha = self._image.getchannel('A').tobytes()
        width = self._raster_width
        return ''.join(
            start
            + ''.join(ink if _a else paper for _a in alpha[_offset:_offset+width])
            + end
            for _offset in range(0, len(alpha), width)
        )


def compile_glyph(source, global_shift_up=0):
    """Compile a normalised GlyphSource into a Glyph."""
    require(Image, 'Compiling glyphs', 'Pillow')
    blank = source.ink is NO_INK
    if blank:
        image = Image.new('RGBA', (1, 1), (0, 0, 0, 0))
    else:
        image = source.ink.as_image()
    props = source.props
    shift_up = props.shift_up
    if shift_up is None:
        shift_up = global_shift_up
    return Glyph(
        image,
        labels=source.labels,
        left_bearing=props.left_bearing or 0,
        right_bearing=props.right_bearing or 0,
        shift_up=shift_up,
        blank=blank,
    )
