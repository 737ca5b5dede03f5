"""Runtime values.

Every Mscri expression evaluates to a :class:`Value`, a tagged union that is
either a Number (a 64-bit float) or a String. The tag decides which
operations and coercions apply:

- Arithmetic and comparison treat a String as a Number when it looks like
  one (``-12``, ``3.5``) and as ``0`` otherwise.
- ``+`` concatenates as soon as one side is a String.
- Numbers print without a fractional part when they are integral and in
  C ``%g`` style otherwise.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""

import math
import re
from dataclasses import dataclass
from enum import Enum

_NUMERIC = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)


class ValueKind(str, Enum):
    """
    Discriminator for the two value variants.
    """

    NUMBER = "number"
    STRING = "string"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


@dataclass(frozen=True)
class Value:
    """A Number or String value."""

    kind: ValueKind
    data: float | str

    @classmethod
    def number(cls, num: float) -> "Value":
        """
        Create a Number value.
        """
        return cls(ValueKind.NUMBER, float(num))

    @classmethod
    def string(cls, text: str) -> "Value":
        """
        Create a String value.
        """
        return cls(ValueKind.STRING, text)

    @classmethod
    def boolean(cls, flag: bool) -> "Value":
        """
        Create the Number 1 or 0 from a Python truth value.
        """
        return cls.number(1 if flag else 0)

    @property
    def is_number(self) -> bool:
        return self.kind == ValueKind.NUMBER

    @property
    def is_string(self) -> bool:
        return self.kind == ValueKind.STRING

    def is_truthy(self) -> bool:
        """
        Return True if the value coerces to a nonzero Number.
        """
        return to_number(self) != 0


def is_numeric(text: str) -> bool:
    """
    Return True if ``text`` looks like a number: an optional leading ``-``,
    digits, and optionally a ``.`` followed by more digits.
    """
    return _NUMERIC.fullmatch(text) is not None


def to_number(value: Value) -> float:
    """
    Coerce a value to a float.

    Numbers are returned as is, numeric-looking strings are parsed and any
    other string becomes ``0``. This never raises.
    """
    if value.is_number:
        return value.data
    if is_numeric(value.data):
        return float(value.data)
    return 0.0


def format_number(num: float) -> str:
    """
    Format a float the way ``print`` shows it.
    """
    if math.isfinite(num) and num.is_integer():
        return f"{num:.0f}"
    return "%g" % num


def format_value(value: Value) -> str:
    """
    Render a value as text: Strings verbatim, Numbers via :func:`format_number`.
    """
    if value.is_string:
        return value.data
    return format_number(value.data)
