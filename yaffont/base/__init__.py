"""
yaffont.base - supporting classes

licence: https://opensource.org/licenses/MIT
"""

from .basetypes import *
from .properties import Props
from .imports import safe_import, require
from .errors import FontFormatError, FontSyntaxError, FontValidationError
