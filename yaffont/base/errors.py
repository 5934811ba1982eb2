"""
yaffont.base.errors - fatal font loading errors

licence: https://opensource.org/licenses/MIT
"""


class FontFormatError(ValueError):
    """Font source cannot be loaded."""


class FontSyntaxError(FontFormatError):
    """Font source text does not follow the grammar."""

    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        if line is not None:
            message = f'line {line}: {message}'
        super().__init__(message)


class FontValidationError(FontFormatError):
    """Parsed font document violates a structural constraint."""

    def __init__(self, constraint, location=()):
        self.constraint = constraint
        self.location = tuple(location)
        super().__init__(f'{format_location(self.location)}: {constraint}')


def format_location(location):
    """Represent a path into the parse tree, e.g. `entries[3] (line 12).ink`."""
    if not location:
        return '<document>'
    parts = []
    for element in location:
        if isinstance(element, int):
            parts.append(f'[{element}]')
        elif isinstance(element, str) and element.startswith('('):
            parts.append(f' {element}')
        elif parts:
            parts.append(f'.{element}')
        else:
            parts.append(str(element))
    return ''.join(parts)
