"""Mscri: a small scripting language evaluated directly from its tokens.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""

__version__ = "1.0"
