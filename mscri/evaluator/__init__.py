"""Evaluator package for Mscri.

This package splits the evaluator into multiple modules to keep the code
organized: the token cursor lives in ``evaluator``, the precedence levels in
``expressions`` and the statement forms in ``statements``. The
:class:`Evaluator` class is exposed at the package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""

from .evaluator import Evaluator

__all__ = ["Evaluator"]
