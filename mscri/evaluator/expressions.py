"""
Expression evaluation routines for Mscri.

These functions operate on a `mscri.evaluator.Evaluator` instance and
implement the recursive descent over the eight precedence levels, computing
each value inline as its operands are consumed. All binary levels are left
associative, including ``^``: ``2^3^2`` folds as ``(2^3)^2``.
"""

from typing import TYPE_CHECKING

from mscri.exceptions import UndefinedVariableException
from mscri.lexer import TokenKind
from mscri.operations import Op, apply_binary, apply_unary
from mscri.values import Value

if TYPE_CHECKING:
    from mscri.evaluator import Evaluator


# ---- Highest precedence ----

def parse_primary(evaluator: 'Evaluator') -> Value:
    """Evaluate a number, string, boolean, variable, or parenthesized expression.

    A token that cannot start a primary is left in place and the result is 0.
    """
    tok = evaluator.curr_token

    if tok.kind == TokenKind.NUMBER:
        evaluator.advance()
        return Value.number(tok.number)

    if tok.kind == TokenKind.STRING:
        evaluator.advance()
        return Value.string(tok.lexeme)

    if tok.is_keyword('true', 'false'):
        evaluator.advance()
        return Value.boolean(tok.lexeme == 'true')

    if tok.kind == TokenKind.IDENTIFIER:
        evaluator.advance()
        try:
            return evaluator.environment.lookup(tok.lexeme, tok.line, evaluator.source_file)
        except UndefinedVariableException as e:
            evaluator.report(e)
            return Value.number(0)

    if tok.is_delimiter('('):
        evaluator.advance()
        value = evaluator.expr()
        # An unclosed group simply ends where the tokens run out
        if evaluator.curr_token.is_delimiter(')'):
            evaluator.advance()
        return value

    return Value.number(0)


def parse_unary(evaluator: 'Evaluator') -> Value:
    """Evaluate prefix minus, plus and ``not``."""
    tok = evaluator.curr_token
    if tok.is_operator('-', '+') or tok.is_keyword('not'):
        evaluator.advance()
        operand = evaluator.unary()
        return apply_unary(Op(tok.lexeme), operand)
    return evaluator.primary()


def parse_power(evaluator: 'Evaluator') -> Value:
    """Evaluate exponentiation as a left fold over repeated ``^``."""
    result = evaluator.unary()
    while evaluator.curr_token.is_operator('^'):
        evaluator.advance()
        result = apply_binary(Op.POW, result, evaluator.unary())
    return result


def parse_multiplicative(evaluator: 'Evaluator') -> Value:
    """Evaluate multiplication, division, and modulus."""
    result = evaluator.power()
    while evaluator.curr_token.is_operator('*', '/', '%'):
        op_tok = evaluator.advance()
        result = apply_binary(Op(op_tok.lexeme), result, evaluator.power())
    return result


def parse_additive(evaluator: 'Evaluator') -> Value:
    """Evaluate addition (or concatenation) and subtraction."""
    result = evaluator.multiplicative()
    while evaluator.curr_token.is_operator('+', '-'):
        op_tok = evaluator.advance()
        result = apply_binary(Op(op_tok.lexeme), result, evaluator.multiplicative())
    return result


def parse_comparison(evaluator: 'Evaluator') -> Value:
    """Evaluate ordering comparisons (<, >, <=, >=)."""
    result = evaluator.additive()
    while evaluator.curr_token.is_operator('<', '>', '<=', '>='):
        op_tok = evaluator.advance()
        result = apply_binary(Op(op_tok.lexeme), result, evaluator.additive())
    return result


def parse_equality(evaluator: 'Evaluator') -> Value:
    """Evaluate equality comparisons (==, !=)."""
    result = evaluator.comparison()
    while evaluator.curr_token.is_operator('==', '!='):
        op_tok = evaluator.advance()
        result = apply_binary(Op(op_tok.lexeme), result, evaluator.comparison())
    return result


def parse_logical_and(evaluator: 'Evaluator') -> Value:
    """Evaluate logical AND expressions using the 'and' keyword.

    Both sides are always evaluated since the right operand's tokens have to
    be consumed either way.
    """
    result = evaluator.equality()
    while evaluator.curr_token.is_keyword('and'):
        evaluator.advance()
        result = apply_binary(Op.AND, result, evaluator.equality())
    return result


def parse_logical_or(evaluator: 'Evaluator') -> Value:
    """Evaluate logical OR expressions using the 'or' keyword."""
    result = evaluator.logical_and()
    while evaluator.curr_token.is_keyword('or'):
        evaluator.advance()
        result = apply_binary(Op.OR, result, evaluator.logical_and())
    return result


# ---- Entry point ----

def parse_expr(evaluator: 'Evaluator') -> Value:
    """Evaluate an expression starting from the lowest-precedence operator."""
    return evaluator.logical_or()
