"""
yaffont.core.raster - glyph ink rasters

licence: https://opensource.org/licenses/MIT
"""

from ..base import require, safe_import
Image = safe_import('PIL.Image')


INK = '@'
PAPER = '.'

# rgba values for the ink alphabet
_RGBA = {
    INK: b'\xff\xff\xff\xff',
    PAPER: b'\0\0\0\0',
}


class _NoInk:
    """Sentinel for a glyph without visual payload."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return 'NO_INK'

    def __bool__(self):
        return False

NO_INK = _NoInk()

# how the sentinel appears in the parse tree
NO_INK_MARKER = '-'


class RasterInk:
    """Rectangular on/off pixel pattern."""

    def __init__(self, rows):
        """Create raster from sequence of equal-length rows over the ink alphabet."""
        rows = tuple(rows)
        if not rows:
            raise ValueError('Raster must have at least one row.')
        if any(not isinstance(_row, str) for _row in rows):
            raise ValueError('Raster rows must be strings.')
        if len(set(len(_r) for _r in rows)) > 1:
            raise ValueError(
                'All rows in raster must be of the same width: '
                f'found widths {sorted(set(len(_r) for _r in rows))}'
            )
        invalid = set(''.join(rows)) - set(_RGBA)
        if invalid or not rows[0]:
            raise ValueError(
                f"Raster rows may only contain `{PAPER}` and `{INK}`; "
                f"found {''.join(sorted(invalid)) or 'empty row'!r}"
            )
        self._rows = rows

    def __repr__(self):
        """Text representation."""
        return '{}(({}))'.format(
            type(self).__name__,
            ''.join(f"\n  '{_row}'," for _row in self._rows)
        )

    @property
    def width(self):
        """Raster width."""
        return len(self._rows[0])

    @property
    def height(self):
        """Raster height."""
        return len(self._rows)

    @property
    def rows(self):
        return self._rows

    @classmethod
    def blank(cls, width, height):
        """Create uninked raster."""
        return cls((PAPER * width,) * height)

    def as_rgba(self):
        """Return RGBA bytes, row-major: ink opaque white, paper fully transparent."""
        return b''.join(_RGBA[_pix] for _row in self._rows for _pix in _row)

    def as_image(self):
        """Decode to an RGBA image."""
        require(Image, 'Decoding glyphs', 'Pillow')
        return Image.frombytes('RGBA', (self.width, self.height), self.as_rgba())
