"""
yaffont.core.resolver - map labels, characters and codes to glyph indices

licence: https://opensource.org/licenses/MIT
"""

import logging

from .labels import Codepoint, Char, UnicodeChar, Tag, Default


class GlyphResolver:
    """Four lookup maps and a default pointer, holding indices into a glyph sequence."""

    def __init__(self):
        self._codepoints = {}
        self._unicode = {}
        self._chars = {}
        self._tags = {}
        self._default = None

    def __repr__(self):
        return (
            f'{type(self).__name__}('
            f'codepoints={len(self._codepoints)}, unicode={len(self._unicode)}, '
            f'chars={len(self._chars)}, tags={len(self._tags)}, '
            f'default={self._default})'
        )

    ##########################################################################
    # population

    def register(self, index, labels):
        """Register glyph index under its labels; later registrations win."""
        for label in labels:
            if isinstance(label, Default):
                self._default = index
            elif isinstance(label, UnicodeChar):
                self._unicode[int(label)] = index
            elif isinstance(label, Char):
                self._chars[label.value] = index
            elif isinstance(label, Codepoint):
                # only the first value of a multi-value code point is a key
                self._codepoints[int(label)] = index
            elif isinstance(label, Tag):
                scalar = label.unicode_value
                if scalar is not None:
                    self._unicode[scalar] = index
                self._tags[label.value] = index
            else:
                logging.debug('Not registering label %r', label)

    def set_default(self, index):
        """Point the default glyph at index."""
        self._default = index

    ##########################################################################
    # lookup

    @property
    def default(self):
        """Index of the default glyph, or None."""
        return self._default

    def find_character(self, character, use_default=True):
        """Index of glyph for a character or tag string; None if absent."""
        first = character[:1]
        scalar = ord(first) if first else None
        for index in (
                self._chars.get(first),
                self._unicode.get(scalar),
                self._codepoints.get(scalar),
                self._tags.get(character),
            ):
            if index is not None:
                return index
        return self._default if use_default else None

    def find_charcode(self, code, use_default=True):
        """Index of glyph for a numeric code; tags are never consulted."""
        index = self._codepoints.get(code)
        if index is None:
            index = self._unicode.get(code)
        if index is None and use_default:
            index = self._default
        return index

    def find_label(self, label):
        """Index of glyph registered under a specific label; None if absent."""
        if isinstance(label, Default):
            return self._default
        if isinstance(label, UnicodeChar):
            return self._unicode.get(int(label))
        if isinstance(label, Char):
            return self._chars.get(label.value)
        if isinstance(label, Codepoint):
            return self._codepoints.get(int(label))
        if isinstance(label, Tag):
            return self._tags.get(label.value)
        return None

    def has_space(self):
        """Check if the space character, scalar, code point or tag is mapped."""
        return (
            ' ' in self._chars
            or 0x20 in self._unicode
            or 0x20 in self._codepoints
            or ' ' in self._tags
        )

    ##########################################################################
    # keys

    def get_chars(self):
        return tuple(self._chars)

    def get_unicode(self):
        return tuple(self._unicode)

    def get_codepoints(self):
        return tuple(self._codepoints)

    def get_tags(self):
        return tuple(self._tags)
