"""Errors.

Mscri diagnostics are soft: none of them stop a script. They are still
modelled as exceptions so that the statement executor can raise out of a
half-parsed statement and the interpreter can catch, report and move on.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""


class MscriException(Exception):
    """
    Base class for Mscri diagnostics.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UndefinedVariableException(MscriException):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Variable '{varname}' not defined", line, file)


class MalformedStatementException(MscriException):
    """
    Error for statements missing a required part, such as the ``=`` of a
    ``let`` or the ``then`` of an ``if``.
    """
    def __init__(self, statement, expected, line=None, file=None):
        self.statement = statement
        self.expected = expected
        super().__init__(f"Expected {expected} in '{statement}' statement", line, file)
