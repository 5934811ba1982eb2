"""
yaffont.formats - font source readers

licence: https://opensource.org/licenses/MIT
"""

from .yaff import parse_yaff
