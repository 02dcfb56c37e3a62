"""
Test configuration for mixedscripts test suite.

Adds the src directory to sys.path so the tests run without installing
the package.
"""
import os
import sys

test_dir = os.path.dirname(__file__)
src_dir = os.path.join(test_dir, '..', 'src')
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)
