"""
Stack inspection for warnings raised deep inside the package.
"""

import inspect
import os


_PKG_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep
_TEST_DIR = os.path.join(_PKG_DIR, 'tests') + os.sep


def find_stack_level():
    """
    Stack level of the first frame outside nanoprism.

    Passed as ``stacklevel`` to warnings.warn so that the warning is
    attributed to user code however many package frames lie between.
    Frames of the package test suite count as user code.
    """
    frame = inspect.currentframe()
    n = 0
    try:
        while frame is not None:
            fname = os.path.abspath(inspect.getfile(frame))
            if fname.startswith(_PKG_DIR) and not fname.startswith(_TEST_DIR):
                frame = frame.f_back
                n += 1
            else:
                break
    finally:
        del frame
    return n
