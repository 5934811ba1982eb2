"""
yaffont.core.labels - representation of labels

licence: https://opensource.org/licenses/MIT
"""

import re
import string
import logging
from collections.abc import Mapping

from ..base import to_codepoint_value


_UNICODE_ESCAPE = re.compile(r'[uU]\+([0-9a-fA-F]+)')


def is_enclosed(from_str, char):
    """Check if a char occurs on both sides of a string."""
    return len(from_str) >= 2 and from_str[0] == char and from_str[-1] == char

def strip_matching(from_str, char, allow_no_match=True):
    """Strip a char from either side of the string if it occurs on both."""
    if is_enclosed(from_str, char):
        return from_str[1:-1]
    elif not allow_no_match:
        raise ValueError(
            f'No matching delimiters `{char}` found in string `{from_str}`.'
        )
    return from_str


def match_unicode_escape(value):
    """Canonical uppercase hex of a `u+XXXX` escape, or None."""
    match = _UNICODE_ESCAPE.fullmatch(value)
    if not match:
        return None
    return match.group(1).upper()

def decode_unicode_escape(value):
    """Decode a `u+XXXX` escape, optionally in double quotes, to int."""
    hexstr = match_unicode_escape(strip_matching(value.strip(), '"'))
    if hexstr is None:
        raise ValueError(f'Not a Unicode escape: {value!r}')
    return int(hexstr, 16)


##############################################################################
# label types

class Label:
    """Label."""

    __slots__ = ()

    def __repr__(self):
        """Represent label."""
        return f'{type(self).__name__}({self.value!r})'

    def __eq__(self, other):
        return type(self) == type(other) and self.value == other.value

    def __hash__(self):
        # make sure labels of different type don't collide
        return hash((type(self), self.value))


class Codepoint(Label):
    """Code point label; only the first value is used as a key."""

    __slots__ = ('_value',)

    def __init__(self, values):
        if isinstance(values, (int, str)):
            values = (values,)
        values = tuple(to_codepoint_value(_v) for _v in values)
        if not values:
            raise ValueError('Code point label must have at least one value.')
        self._value = values

    @property
    def value(self):
        """Tuple of int values."""
        return self._value

    def __int__(self):
        return self._value[0]

    def __str__(self):
        return ', '.join(f'0x{_v:02x}' for _v in self._value)


class Char(Label):
    """Literal character label."""

    __slots__ = ('_value',)

    def __init__(self, value):
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f'Character label must be a single character: {value!r}')
        self._value = value

    @property
    def value(self):
        """Character as str."""
        return self._value

    def __str__(self):
        return f"'{self._value}'"


class UnicodeChar(Label):
    """Unicode scalar label, held as canonical uppercase hex without prefix."""

    __slots__ = ('_value',)

    def __init__(self, value):
        if isinstance(value, int):
            value = f'{value:04X}'
        hexstr = match_unicode_escape(value) or match_unicode_escape(f'u+{value}')
        if not hexstr:
            raise ValueError(f'Not a Unicode label: {value!r}')
        self._value = hexstr

    @property
    def value(self):
        """Uppercase hex str."""
        return self._value

    def __int__(self):
        return int(self._value, 16)

    def __str__(self):
        return f'u+{self._value.lower()}'


class Tag(Label):
    """Tag label."""

    __slots__ = ('_value',)

    def __init__(self, value):
        if not isinstance(value, str):
            raise ValueError(
                f'Cannot convert value {value!r} of type {type(value)} to tag.'
            )
        self._value = value

    @property
    def value(self):
        """Tag contents as str."""
        return self._value

    @property
    def unicode_value(self):
        """Decoded scalar if the tag has the form `u+XXXX`, or None."""
        hexstr = match_unicode_escape(self._value)
        if hexstr is None:
            return None
        return int(hexstr, 16)

    def __str__(self):
        return f'"{self._value}"'


class Default(Label):
    """Marks the default glyph."""

    __slots__ = ()

    @property
    def value(self):
        return None

    def __repr__(self):
        return f'{type(self).__name__}()'

    def __str__(self):
        return 'default'


def to_label(value):
    """Convert user-supplied label notation to Label."""
    if isinstance(value, Label):
        return value
    if not isinstance(value, str):
        # only Codepoint can have non-str argument
        return Codepoint(value)
    if is_enclosed(value, '"'):
        return Tag(value[1:-1])
    if is_enclosed(value, "'"):
        return Char(value[1:-1])
    if value[:1] and value[0] in string.digits:
        return Codepoint(value.split(','))
    if match_unicode_escape(value):
        return UnicodeChar(value)
    if value == 'default':
        return Default()
    if len(value) == 1:
        return Char(value)
    return Tag(value)


##############################################################################
# conversion from parse tree

def _convert_codepoint(raw):
    values = raw.get('label')
    if not isinstance(values, (list, tuple)) or not values:
        raise ValueError(f'Code point label needs a list of values: {values!r}')
    return Codepoint(values)

def _convert_character(raw):
    label = raw.get('label')
    if isinstance(label, (list, tuple)):
        # unicode subtype takes exactly one escape
        if len(label) != 1 or not isinstance(label[0], str):
            raise ValueError(f'Unicode label needs exactly one escape: {label!r}')
        return UnicodeChar(label[0])
    if not isinstance(label, str):
        raise ValueError(f'Character label must be a string: {label!r}')
    return Char(strip_matching(label, "'", allow_no_match=False))

def _convert_tag(raw):
    return Tag(raw.get('label'))


_CONVERTERS = {
    'codePoint': _convert_codepoint,
    'character': _convert_character,
    'tag': _convert_tag,
    'default': lambda _raw: Default(),
    'missing': lambda _raw: None,
}


def convert_label(raw):
    """Convert raw label from parse tree to Label; None if it is to be dropped."""
    if not isinstance(raw, Mapping):
        logging.debug('Dropping malformed label %r', raw)
        return None
    try:
        converter = _CONVERTERS[raw.get('type')]
    except (KeyError, TypeError):
        logging.debug('Dropping label of unknown type %r', raw)
        return None
    try:
        return converter(raw)
    except (TypeError, ValueError) as e:
        logging.debug('Dropping invalid label %r: %s', raw, e)
        return None


def convert_labels(raw_labels):
    """Convert sequence of raw labels, keeping only valid ones."""
    if isinstance(raw_labels, (str, bytes, Mapping)):
        return ()
    try:
        labels = (convert_label(_raw) for _raw in raw_labels)
        return tuple(_l for _l in labels if _l is not None)
    except TypeError:
        return ()
