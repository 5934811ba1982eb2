"""
yaffont test suite
"""

import unittest

from tests.test_labels import *
from tests.test_document import *
from tests.test_glyph import *
from tests.test_font import *
from tests.test_render import *
from tests.test_yaff import *
from tests.test_banner import *


if __name__ == '__main__':
    unittest.main()
