"""
yaffont.render.surface - output surfaces for rendered text

licence: https://opensource.org/licenses/MIT
"""

from ..base import RGB, require, safe_import
Image = safe_import('PIL.Image')
ImageColor = safe_import('PIL.ImageColor')


def to_rgb(colour):
    """Convert colour name, '#rrggbb' string or tuple to RGB."""
    if isinstance(colour, str):
        try:
            return RGB.create(colour)
        except ValueError:
            pass
        require(ImageColor, 'Colour names', 'Pillow')
        return RGB(*ImageColor.getrgb(colour)[:3])
    return RGB.create(tuple(colour)[:3])


class Surface:
    """
    Resizable two-dimensional RGBA pixel surface.

    Drawing replaces destination pixels; there is no blending.
    """

    def resize(self, width, height):
        """Set the surface size; contents are undefined until cleared."""
        raise NotImplementedError()

    def clear(self):
        """Set all pixels to fully transparent."""
        raise NotImplementedError()

    def draw(self, image, x, y):
        """Draw an RGBA image at (x, y), replacing destination pixels."""
        raise NotImplementedError()

    def stencil_fill(self, colour):
        """Replace the RGB of every non-transparent pixel, preserving alpha."""
        raise NotImplementedError()

    def get_pixels(self):
        """Final pixel buffer as RGBA bytes, row-major."""
        raise NotImplementedError()


class ImageSurface(Surface):
    """Surface backed by a Pillow RGBA image."""

    def __init__(self, width=0, height=0):
        require(Image, 'Rendering to image', 'Pillow')
        self._image = Image.new('RGBA', (width, height), (0, 0, 0, 0))

    def __repr__(self):
        return f'{type(self).__name__}({self.width}, {self.height})'

    @property
    def width(self):
        return self._image.width

    @property
    def height(self):
        return self._image.height

    @property
    def image(self):
        """The underlying image."""
        return self._image

    def resize(self, width, height):
        if (width, height) != self._image.size:
            self._image = Image.new('RGBA', (width, height), (0, 0, 0, 0))

    def clear(self):
        self._image = Image.new('RGBA', self._image.size, (0, 0, 0, 0))

    def draw(self, image, x, y):
        # paste without mask replaces pixels, clipped to the surface
        self._image.paste(image, (int(x), int(y)))

    def stencil_fill(self, colour):
        if not self.width or not self.height:
            return
        colour = to_rgb(colour)
        alpha = self._image.getchannel('A')
        filled = Image.new('RGBA', self._image.size, (*colour, 0))
        filled.putalpha(alpha)
        mask = alpha.point(lambda _a: 255 if _a else 0)
        self._image = Image.composite(filled, self._image, mask)

    def get_pixels(self):
        return self._image.tobytes()

    def get_pixel(self, x, y):
        """RGBA tuple at (x, y)."""
        return self._image.getpixel((x, y))

    def as_text(self, *, ink='@', paper='.', start='', end='\n'):
        """Represent the surface as text; non-transparent pixels are ink."""
        width = self.width
        if not width:
            return ''
        alpha = self._image.getchannel('A').tobytes()
        return ''.join(
            start
            + ''.join(ink if _a else paper for _a in alpha[_offset:_offset+width])
            + end
            for _offset in range(0, len(alpha), width)
        )
