"""
yaffont.formats.yaff - read yaff text into a parse tree

licence: https://opensource.org/licenses/MIT
"""

import string
import logging

from ..base import FontSyntaxError


class YaffParams:
    """Parameters for .yaff format."""

    separator = ':'
    comment = '#'
    # tuple of individual chars, need to be separate for startswith
    whitespace = tuple(' \t')

    ink = '@'
    paper = '.'
    empty = '-'

    # bare labels with special meaning
    default = 'default'
    missing = 'missing'


##############################################################################
# parse tree entries

def property_entry(key, value, line=None):
    entry = {'type': 'property', 'key': key, 'val': value}
    if line is not None:
        entry['line'] = line
    return entry


def glyph_entry(labels, ink, props, line=None):
    entry = {'type': 'glyph', 'labels': labels, 'ink': ink, 'props': props}
    if line is not None:
        entry['line'] = line
    return entry


def _strip_quotes(value):
    value = value.strip()
    if len(value) > 1 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def _convert_value(key, value):
    # default-char takes a label value; quotes must not be stripped
    if key.replace('_', '-').lower() == 'default-char':
        return value.strip()
    return _strip_quotes(value)


def convert_label(label):
    """Convert label text, without the separator, to a raw label."""
    label = label.strip()
    if len(label) >= 2 and label[0] == label[-1] == '"':
        return {'type': 'tag', 'label': label[1:-1]}
    if label[:1] == "'":
        # validated downstream: must be exactly one quoted character
        return {'type': 'character', 'label': label}
    if label[:1] and label[0] in string.digits:
        return {
            'type': 'codePoint',
            'label': [_elem.strip() for _elem in label.split(',')],
        }
    if label[:2].lower() == 'u+':
        return {
            'type': 'character',
            'label': [_elem.strip() for _elem in label.split(',')],
        }
    if label == YaffParams.default:
        return {'type': 'default'}
    if label == YaffParams.missing:
        return {'type': 'missing'}
    return {'type': 'tag', 'label': label}


##############################################################################
# blocks

class YaffBlock(YaffParams):
    """Keys followed by an indented body."""

    def __init__(self, line_number):
        self.line = line_number
        self.keys = []
        self.body = []

    def is_glyph(self):
        if len(self.keys) > 1:
            return True
        # single key may be a multiline property or a glyph;
        # a property value whose first line looks like a raster row reads as a glyph
        first = self.body[0][1]
        return self._is_raster_row(first)

    def _is_raster_row(self, text):
        return text[:1] in (self.ink, self.paper) or set(text) == set(self.empty)

    def emit(self):
        if not self.body:
            raise FontSyntaxError(
                f'no definition follows `{self.keys[-1]}{self.separator}`',
                self.line,
            )
        if self.is_glyph():
            return self._emit_glyph()
        key = self.keys[0]
        value = '\n'.join(_convert_value(key, _text) for _, _text in self.body)
        return property_entry(key, value, self.line)

    def _emit_glyph(self):
        labels = [convert_label(_key) for _key in self.keys]
        raster = []
        props = []
        body = iter(self.body)
        for number, text in body:
            if not self._is_raster_row(text):
                props.append(self._glyph_property(number, text))
                break
            raster.append(text)
        for number, text in body:
            props.append(self._glyph_property(number, text))
        if not raster:
            raise FontSyntaxError('glyph has no raster', self.line)
        if all(set(_row) == set(self.empty) for _row in raster):
            ink = self.empty
        else:
            ink = raster
        return glyph_entry(labels, ink, props, self.line)

    def _glyph_property(self, number, text):
        key, sep, value = text.partition(self.separator)
        if not sep or not key.strip():
            raise FontSyntaxError(f'expected glyph property, found `{text}`', number)
        key = key.strip()
        return property_entry(key, _convert_value(key, value), number)


def parse_yaff(text):
    """
    Parse yaff text into a list of property and glyph entries.
    Raises FontSyntaxError if the text does not follow the grammar.
    """
    if isinstance(text, str):
        lines = text.splitlines()
    else:
        lines = (_line.rstrip('\r\n') for _line in text)
    entries = []
    block = None
    for number, line in enumerate(lines, start=1):
        line = line.rstrip()
        if not line:
            continue
        if line[:1] in YaffParams.whitespace:
            if block is None:
                raise FontSyntaxError(
                    f'indented line outside glyph or property: `{line.strip()}`',
                    number
                )
            block.body.append((number, line.strip()))
            continue
        if line[:1] == YaffParams.comment:
            continue
        if line[-1:] == YaffParams.separator:
            if block is not None and block.body:
                entries.append(block.emit())
                block = None
            if block is None:
                block = YaffBlock(number)
            block.keys.append(line[:-1])
            continue
        if block is not None:
            entries.append(block.emit())
            block = None
        key, sep, value = line.partition(YaffParams.separator)
        if not sep:
            raise FontSyntaxError(f'expected label or property, found `{line}`', number)
        key = key.strip()
        entries.append(property_entry(key, _convert_value(key, value), number))
    if block is not None:
        entries.append(block.emit())
    logging.debug('Parsed %d entries', len(entries))
    return entries
