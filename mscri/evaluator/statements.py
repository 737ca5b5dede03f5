"""
Statement execution routines for Mscri.

These functions operate on a `mscri.evaluator.Evaluator` instance and
handle the statement forms of the language: ``let``, ``print``,
``if … then … endif`` and bare expression statements. Each call executes
exactly one statement, consuming its tokens as it goes.
"""

from typing import TYPE_CHECKING

from mscri.exceptions import MalformedStatementException
from mscri.lexer import TokenKind
from mscri.values import format_value

if TYPE_CHECKING:
    from mscri.evaluator import Evaluator


def parse_statement(evaluator: 'Evaluator') -> None:
    """
    Execute a single statement.

    Leading newlines are skipped. A bare ``endif`` or the end of input is a
    no-op. Keywords without statement semantics (``while``, ``for``,
    ``function`` …) fall through to expression statements.

    Args:
        evaluator: The evaluator instance.

    Raises:
        MalformedStatementException: If a ``let`` or ``if`` is missing a
            required part.
    """
    evaluator.skip_newlines()
    tok = evaluator.curr_token
    if tok.kind == TokenKind.EOF:
        return
    if tok.is_keyword('let'):
        evaluator.parse_let()
    elif tok.is_keyword('print'):
        evaluator.parse_print()
    elif tok.is_keyword('if'):
        evaluator.parse_if()
    elif tok.is_keyword('endif'):
        evaluator.advance()
    else:
        evaluator.parse_expr_stmt()


def parse_let(evaluator: 'Evaluator') -> None:
    """
    Execute a 'let' statement.

    Syntax:
        let <identifier> = <expression>

    Args:
        evaluator: The evaluator instance.

    Raises:
        MalformedStatementException: If the identifier or ``=`` is missing.
            Nothing is bound in that case.
    """
    let_tok = evaluator.advance()
    name_tok = evaluator.curr_token
    if name_tok.kind != TokenKind.IDENTIFIER:
        raise MalformedStatementException(
            'let', 'identifier', let_tok.line, evaluator.source_file
        )
    evaluator.advance()

    if not evaluator.curr_token.is_operator('='):
        raise MalformedStatementException(
            'let', "'='", name_tok.line, evaluator.source_file
        )
    evaluator.advance()

    value = evaluator.expr()
    evaluator.environment.bind(name_tok.lexeme, value)


def parse_print(evaluator: 'Evaluator') -> None:
    """
    Execute a 'print' statement.

    Syntax:
        print <expression>

    Args:
        evaluator: The evaluator instance.
    """
    evaluator.advance()
    value = evaluator.expr()
    print(format_value(value))


def parse_if(evaluator: 'Evaluator') -> None:
    """
    Execute an 'if' statement.

    Syntax:
        if <expression> then <statement> endif

    The ``then`` arm is a single statement. Whether or not it ran, every
    token up to the matching ``endif`` is then discarded. Nested ``if``
    keywords inside the discarded region each claim their own ``endif``.

    Args:
        evaluator: The evaluator instance.

    Raises:
        MalformedStatementException: If ``then`` is missing.
    """
    if_tok = evaluator.advance()
    condition = evaluator.expr()

    if not evaluator.curr_token.is_keyword('then'):
        raise MalformedStatementException(
            'if', "'then'", if_tok.line, evaluator.source_file
        )
    evaluator.advance()

    if condition.is_truthy():
        evaluator.skip_newlines()
        if not evaluator.curr_token.is_keyword('endif'):
            try:
                evaluator.statement()
            except MalformedStatementException as e:
                evaluator.report(e)

    skip_to_endif(evaluator)


def skip_to_endif(evaluator: 'Evaluator') -> None:
    """
    Discard tokens up to and including the ``endif`` that closes the
    current ``if``, or up to the end of input.
    """
    depth = 0
    while not evaluator.at_end():
        tok = evaluator.advance()
        if tok.is_keyword('if'):
            depth += 1
        elif tok.is_keyword('endif'):
            if depth == 0:
                return
            depth -= 1


def parse_expr_stmt(evaluator: 'Evaluator') -> None:
    """
    Evaluate an expression and discard its value.

    If the leading token cannot start an expression nothing is consumed by
    the evaluation, so that token is dropped to guarantee progress.

    Args:
        evaluator: The evaluator instance.
    """
    before = evaluator.consumed
    evaluator.expr()
    if evaluator.consumed == before:
        evaluator.advance()
