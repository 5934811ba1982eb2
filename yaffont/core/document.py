"""
yaffont.core.document - normalise untyped parse trees into font documents

licence: https://opensource.org/licenses/MIT
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from ..base import FontValidationError
from .labels import convert_labels
from .raster import RasterInk, NO_INK, NO_INK_MARKER
from .properties import (
    FontProperties, GlyphProperties, get_converters, normalise_property,
    apply_synonyms,
)


@dataclass(frozen=True)
class PropertyEntry:
    """Key-value pair from the parse tree, with normalised key."""
    key: str
    value: str


@dataclass(frozen=True)
class GlyphSource:
    """Validated glyph definition, ready for compilation."""
    labels: tuple
    ink: object = NO_INK
    props: GlyphProperties = field(default_factory=GlyphProperties)


@dataclass(frozen=True)
class FontDocument:
    """Normalised font document."""
    properties: FontProperties
    glyphs: tuple


def normalise(tree):
    """
    Validate and restructure a parse tree into a FontDocument.

    Malformed entries, labels and unrecognised properties are dropped.
    Raises FontValidationError if the document cannot be loaded at all.
    """
    if isinstance(tree, (str, bytes, Mapping)):
        raise FontValidationError('parse tree must be a sequence of entries')
    try:
        entries = tuple(enumerate(tree))
    except TypeError:
        raise FontValidationError('parse tree must be a sequence of entries') from None
    property_entries = []
    glyphs = []
    for index, entry in entries:
        if entry is None:
            continue
        if not isinstance(entry, Mapping):
            logging.debug('Dropping malformed entry %d: %r', index, entry)
        elif 'ink' in entry:
            glyph = _normalise_glyph(entry, _locate(index, entry))
            if glyph is not None:
                glyphs.append(glyph)
        elif entry.get('type') == 'property':
            prop = _convert_property(entry)
            if prop is not None:
                property_entries.append(prop)
        else:
            logging.debug('Dropping unrecognised entry %d: %r', index, entry)
    properties = _fold_properties(
        property_entries, FontProperties, location=('properties',),
    )
    return FontDocument(properties=properties, glyphs=tuple(glyphs))


def _locate(index, entry):
    """Location of an entry for error messages."""
    line = entry.get('line')
    if isinstance(line, int):
        return ('entries', index, f'(line {line})')
    return ('entries', index)


##############################################################################
# properties

def _convert_property(entry):
    """Convert property entry from parse tree; None if malformed."""
    key, value = entry.get('key'), entry.get('val')
    if entry.get('type') != 'property' or not isinstance(value, str):
        logging.debug('Dropping malformed property %r', entry)
        return None
    try:
        key = normalise_property(key)
    except ValueError as e:
        logging.debug('Dropping property: %s', e)
        return None
    return PropertyEntry(key, value)


def _fold_properties(entries, typeclass, location):
    """
    Fold property entries into a property object; later keys override earlier.
    Raises FontValidationError if a recognised value can't be converted.
    """
    folded = {_e.key: _e.value for _e in entries}
    if typeclass is GlyphProperties:
        try:
            apply_synonyms(folded)
        except ValueError as e:
            raise FontValidationError(str(e), location) from e
    converters = get_converters(typeclass)
    props = {}
    for key, value in folded.items():
        try:
            converter = converters[key]
        except KeyError:
            logging.debug('Dropping unrecognised property %s: %r', key, value)
            continue
        try:
            props[key] = converter(value)
        except ValueError as e:
            raise FontValidationError(str(e), (*location, key)) from e
    return typeclass(**props)


##############################################################################
# glyphs

def _normalise_glyph(entry, location):
    """Validate glyph entry; None if it is to be dropped."""
    labels = convert_labels(entry.get('labels', ()))
    ink = _convert_ink(entry.get('ink'), (*location, 'ink'))
    if not labels:
        logging.warning(
            'Dropping glyph at %s: no valid labels in %r',
            ' '.join(str(_l) for _l in location), entry.get('labels'),
        )
        return None
    raw_props = entry.get('props') or ()
    if isinstance(raw_props, (str, bytes, Mapping)):
        raw_props = ()
    prop_entries = (
        _convert_property(_p) if isinstance(_p, Mapping) else None
        for _p in raw_props
    )
    try:
        props = _fold_properties(
            (_p for _p in prop_entries if _p is not None),
            GlyphProperties, location=(*location, 'props'),
        )
    except FontValidationError as e:
        logging.warning('Dropping glyph with labels %s: %s', labels, e)
        return None
    return GlyphSource(labels=labels, ink=ink, props=props)


def _convert_ink(ink, location):
    """Convert ink to RasterInk or NO_INK; raises FontValidationError if invalid."""
    if ink == NO_INK_MARKER:
        return NO_INK
    if isinstance(ink, (str, bytes, Mapping)) or ink is None:
        raise FontValidationError(
            f'ink must be a list of raster rows or `{NO_INK_MARKER}`', location
        )
    try:
        return RasterInk(ink)
    except (TypeError, ValueError) as e:
        raise FontValidationError(f"ink isn't a rectangular raster: {e}", location) from e
