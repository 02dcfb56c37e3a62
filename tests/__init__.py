# -*- coding: ascii -*-
"""Test package for mixedscripts."""

import os
import shutil
import tempfile
import unittest


class TempDirTestCase(unittest.TestCase):
    """Base test case providing a scratch directory for input files."""

    def setUp(self):
        super().setUp()
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        if os.path.exists(self.test_dir):
            shutil.rmtree(self.test_dir)
        super().tearDown()

    def write(self, name, text=None, data=None):
        """Create a file under the scratch directory; text is written as UTF-8."""
        path = os.path.join(self.test_dir, name)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if data is None:
            data = text.encode('utf-8')
        with open(path, 'wb') as f:
            f.write(data)
        return path
