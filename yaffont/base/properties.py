"""
yaffont.base.properties - property structures

licence: https://opensource.org/licenses/MIT
"""

from types import SimpleNamespace
from textwrap import indent


class Props(SimpleNamespace):
    """SimpleNamespace of set properties, represented in yaff style."""

    def __str__(self):
        strs = tuple(
            (str(_k).replace('_', '-'), str(_v))
            for _k, _v in vars(self).items()
        )
        return '\n'.join(
            f'{_k}: ' + (indent('\n' + _v, '    ') if '\n' in _v else _v)
            for _k, _v in strs
        )

    def __repr__(self):
        if not vars(self):
            return f'{type(self).__name__}()'
        return (
            type(self).__name__
            + '(\n' +
            indent(
                '\n'.join(f'{_k}={_v!r},' for _k, _v in vars(self).items()),
                '    '
            )
            + '\n)'
        )
