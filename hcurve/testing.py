"""
Helpers for the test suite.
"""

import sys
import inspect

import pytest


raises = pytest.raises


def run_tests_if_main():
    """ Run tests in a given file if it is run as a script.
    """
    local_vars = inspect.currentframe().f_back.f_locals
    if not local_vars.get('__name__', '') == '__main__':
        return
    # Get caller's filename and run pytest on it
    fname = str(local_vars['__file__'])
    sys.exit(pytest.main(['-v', '-x', fname]))
