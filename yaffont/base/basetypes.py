"""
yaffont.base.basetypes - base data types and converters

licence: https://opensource.org/licenses/MIT
"""

import re
from collections import namedtuple
from numbers import Real


_DECIMAL = re.compile(r'[0-9]+')
_HEX = re.compile(r'0[xX][0-9a-fA-F]+')
_OCTAL = re.compile(r'0[oO][0-7]+')

def to_codepoint_value(int_str):
    """
    Convert code point notation to int.
    Accepts '99' (decimal), '0xFF' (hex) and '0o77' (octal) only.
    """
    if isinstance(int_str, bool) or not isinstance(int_str, (int, str)):
        raise ValueError(f'Cannot convert {int_str!r} to code point value.')
    if isinstance(int_str, int):
        if int_str < 0:
            raise ValueError(f'Negative code point value {int_str}.')
        return int_str
    int_str = int_str.strip()
    if _DECIMAL.fullmatch(int_str):
        # '099' is decimal, unlike python int literals
        return int(int_str, 10)
    if _HEX.fullmatch(int_str):
        return int(int_str[2:], 16)
    if _OCTAL.fullmatch(int_str):
        return int(int_str[2:], 8)
    raise ValueError(f'Cannot convert {int_str!r} to code point value.')


def to_number(value=0):
    """Convert to int or float."""
    if isinstance(value, str):
        value = float(value)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError("Can't convert `{}` to number.".format(value))
    if value != value or value in (float('inf'), float('-inf')):
        raise ValueError("Can't convert `{}` to finite number.".format(value))
    if value == int(value):
        value = int(value)
    return value


def to_str(value):
    """Convert to str; integral numbers lose their decimal point."""
    if isinstance(value, str):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return str(to_number(value))
    raise ValueError(f"Can't convert {value!r} to string.")


def to_number_or_str(value):
    """Convert to number where possible, keep as string otherwise."""
    try:
        return to_number(value)
    except ValueError:
        return to_str(value)


class _VectorMixin:
    """String and truth value of tuple."""

    def __str__(self):
        return ' '.join(f'{_e}' for _e in self)

    def __bool__(self):
        return any(self)


class Coord(_VectorMixin, namedtuple('Coord', 'x y')):
    """Coordinate tuple."""

    def __str__(self):
        return 'x'.join(str(_x) for _x in self)

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=2)
        return cls(*coord)


class RGB(_VectorMixin, namedtuple('RGB', 'r g b')):
    """Colour tuple."""

    @classmethod
    def create(cls, coord=0):
        coord = to_tuple(coord, length=3)
        if len(coord) != 3 or any(not 0 <= _c <= 255 for _c in coord):
            raise ValueError(f"Can't convert {coord!r} to RGB.")
        return cls(*(int(_c) for _c in coord))


def _str_to_tuple(value):
    """Convert various string representations to tuple."""
    value = value.strip().replace(',', ' ').replace('x', ' ')
    return tuple(to_number(_s) for _s in value.split())

def to_tuple(value=0, *, length=2):
    if isinstance(value, tuple):
        return tuple(to_number(_i) for _i in value)
    if isinstance(value, Real):
        return (value,) * length
    if isinstance(value, str):
        value = _str_to_tuple(value)
        if len(value) == 1:
            return value * length
        return value
    if not value:
        return (0,) * length
    try:
        return tuple(value)
    except TypeError:
        pass
    raise ValueError(f"Can't convert {value!r} to tuple.")


_SIZE = re.compile(r'\s*([0-9]+)\s*(?:x|X|\s)\s*([0-9]+)\s*')

def to_size(value):
    """Convert 'WxH' or 'W H' string to Coord."""
    if not isinstance(value, str):
        raise ValueError(f"Can't convert {value!r} to size.")
    match = _SIZE.fullmatch(value)
    if not match:
        raise ValueError(f"Can't convert {value!r} to size.")
    return Coord(int(match.group(1)), int(match.group(2)))


# type converters
CONVERTERS = {
    Real: to_number,
    str: to_str,
}
