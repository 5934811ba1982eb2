"""
yaffont.core.properties - recognised font and glyph properties

licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from numbers import Real

from ..base import (
    Props, Coord, CONVERTERS, to_codepoint_value, to_number_or_str,
    to_size,
)
from .labels import decode_unicode_escape


# property keys in the source may use dashes, underscores and any case
_VALID_KEY = re.compile(r'[0-9A-Za-z_.\-]+')

def normalise_property(key):
    """Normalise property key to python identifier form, e.g. cell-size -> cell_size."""
    if not isinstance(key, str) or not _VALID_KEY.fullmatch(key):
        raise ValueError(f'Invalid property key {key!r}')
    return key.replace('-', '_').lower()


##############################################################################
# value types

class Spacing(str):
    """Spacing class of the font."""

    values = ('character-cell', 'monospace', 'proportional', 'multi-cell')

    def __new__(cls, value):
        value = CONVERTERS[str](value)
        if value not in cls.values:
            raise ValueError(
                f'spacing must be one of {", ".join(cls.values)}; not {value!r}'
            )
        return super().__new__(cls, value)


class DefaultChar:
    """Reference to the default glyph: code point, `default` or `missing`."""

    keywords = ('default', 'missing')

    @classmethod
    def create(cls, value):
        if isinstance(value, Real) and not isinstance(value, bool):
            if value != int(value):
                raise ValueError(f'default-char must be integral, not {value!r}')
            return to_codepoint_value(int(value))
        if not isinstance(value, str):
            raise ValueError(f'Invalid default-char {value!r}')
        value = value.strip()
        if value in cls.keywords:
            return value
        try:
            return to_codepoint_value(value)
        except ValueError:
            pass
        try:
            return decode_unicode_escape(value)
        except ValueError:
            pass
        raise ValueError(
            'default-char must be a code point, a u+ escape, `default` or `missing`;'
            f' not {value!r}'
        )


CONVERTERS[Spacing] = Spacing
CONVERTERS[DefaultChar] = DefaultChar.create


##############################################################################
# property schemas

class FontProperties(Props):
    """Recognised font-wide properties; unset keys read as None."""

    # annotations define the recognised keys and their converters
    name: str
    spacing: Spacing
    encoding: str
    converter: str
    source_format: str
    cell_size: str
    bounding_box: str
    raster_size: str
    source_name: str
    shift_up: Real
    point_size: Real
    ascent: Real
    family: str
    dpi: to_number_or_str
    default_char: DefaultChar

    def __getattr__(self, field):
        if field in type(self).__annotations__:
            return None
        raise AttributeError(field)

    def get_size(self, field):
        """Size property as Coord; None if unset or not well-formed."""
        value = getattr(self, field)
        if value is None:
            return None
        try:
            return to_size(value)
        except ValueError:
            logging.debug('Ignoring malformed %s %r', field, value)
            return None

    def default_cell_size(self):
        """First well-formed size among cell-size, bounding-box and raster-size."""
        for field in ('cell_size', 'bounding_box', 'raster_size'):
            size = self.get_size(field)
            if size is not None:
                return size
        return None


class GlyphProperties(Props):
    """Recognised per-glyph properties; unset keys read as None."""

    left_bearing: Real
    right_bearing: Real
    shift_up: Real

    def __getattr__(self, field):
        if field in type(self).__annotations__:
            return None
        raise AttributeError(field)


def get_converters(typeclass):
    """Converters for the recognised properties of a property class."""
    return {
        _field: CONVERTERS.get(_type, _type)
        for _field, _type in typeclass.__annotations__.items()
    }


# deprecated compatibility synonyms for glyph properties
_DEPRECATED_SYNONYMS = {
    'tracking': 'right_bearing',
    'offset': ('left_bearing', 'shift_up'),
}

def apply_synonyms(propsdict):
    """Replace deprecated glyph property keys in place."""
    for old, new in _DEPRECATED_SYNONYMS.items():
        if old not in propsdict:
            continue
        value = propsdict.pop(old)
        if isinstance(new, tuple):
            for key, element in zip(new, Coord.create(value)):
                propsdict.setdefault(key, element)
        else:
            propsdict.setdefault(new, value)
    return propsdict
