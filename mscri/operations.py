"""Operator definitions and semantics.

This module centralizes the operator lexemes recognised by the evaluator and
the arithmetic behind each of them, so that the precedence levels in
``mscri.evaluator.expressions`` only decide *when* an operator applies and
never *what* it computes.

Float edge cases follow C rather than Python: dividing by zero gives
``inf``/``nan`` instead of raising, ``%`` is ``fmod`` (the sign follows the
dividend) and ``^`` overflows to ``inf``.
"""

import math
from enum import Enum

from mscri.values import Value, format_value, to_number


class Op(str, Enum):
    """
    Enumeration of supported operators, valued by their source lexeme.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    # Comparison
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="

    # Boolean
    AND = "and"
    OR = "or"
    NOT = "not"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


def divide(lhs: float, rhs: float) -> float:
    """IEEE 754 division."""
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def modulo(lhs: float, rhs: float) -> float:
    """C ``fmod``: ``nan`` for a zero divisor or an infinite dividend."""
    if rhs == 0 or math.isinf(lhs) or math.isnan(lhs) or math.isnan(rhs):
        return math.nan
    return math.fmod(lhs, rhs)


def power(lhs: float, rhs: float) -> float:
    """C ``pow``: overflow gives ``inf``, a negative base with a fractional
    exponent gives ``nan``."""
    try:
        return math.pow(lhs, rhs)
    except OverflowError:
        if lhs < 0 and float(rhs).is_integer() and rhs % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if lhs == 0:
            # 0 raised to a negative power
            return math.inf
        return math.nan


def apply_binary(op: Op, lhs: Value, rhs: Value) -> Value:
    """
    Apply a binary operator to two evaluated operands.

    ``+`` concatenates when either side is a String. Every other operator
    coerces both sides with :func:`to_number`; comparisons and logical
    operators yield ``1`` or ``0``.
    """
    if op == Op.ADD and (lhs.is_string or rhs.is_string):
        return Value.string(format_value(lhs) + format_value(rhs))

    left = to_number(lhs)
    right = to_number(rhs)
    match op:
        # Arithmetic
        case Op.ADD:
            return Value.number(left + right)
        case Op.SUB:
            return Value.number(left - right)
        case Op.MUL:
            return Value.number(left * right)
        case Op.DIV:
            return Value.number(divide(left, right))
        case Op.MOD:
            return Value.number(modulo(left, right))
        case Op.POW:
            return Value.number(power(left, right))
        # Comparison
        case Op.EQ:
            return Value.boolean(left == right)
        case Op.NE:
            return Value.boolean(left != right)
        case Op.LT:
            return Value.boolean(left < right)
        case Op.GT:
            return Value.boolean(left > right)
        case Op.LE:
            return Value.boolean(left <= right)
        case Op.GE:
            return Value.boolean(left >= right)
        # Boolean
        case Op.AND:
            return Value.boolean(left != 0 and right != 0)
        case Op.OR:
            return Value.boolean(left != 0 or right != 0)
    return Value.number(0)


def apply_unary(op: Op, operand: Value) -> Value:
    """
    Apply ``-``, ``+`` or ``not`` to an evaluated operand.
    """
    num = to_number(operand)
    match op:
        case Op.SUB:
            return Value.number(-num)
        case Op.ADD:
            return Value.number(num)
        case Op.NOT:
            return Value.boolean(num == 0)
    return Value.number(0)
