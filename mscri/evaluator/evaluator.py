"""
Evaluator entry point for Mscri.

This module defines the `Evaluator` class, which coordinates the
recursive descent over the token stream. Unlike a parser it never builds a
tree: every rule computes its value as soon as its tokens are consumed. The
actual routines are split across `mscri.evaluator.expressions` and
`mscri.evaluator.statements`.
"""

from typing import Callable

from mscri.environment import Environment
from mscri.exceptions import MscriException
from mscri.lexer import Lexer, Token, TokenKind
from mscri.values import Value

from . import expressions as _expr
from . import statements as _stmt


class Evaluator:
    """Mscri token cursor and evaluator."""

    def __init__(
        self,
        lexer: Lexer,
        environment: Environment,
        file: str,
        report: Callable[[MscriException], None],
    ):
        """
        Initialize the evaluator and pull the first token.

        Parameters:
            lexer (Lexer): Source of tokens.
            environment (Environment): Variable store read by identifiers
                and written by ``let``.
            file (str): The name of the script, for diagnostics.
            report (Callable): Receives soft diagnostics that do not abort
                evaluation.
        """
        self.lexer = lexer
        self.environment = environment
        self.source_file = file
        self.report = report
        self.consumed = 0
        self.curr_token: Token = self.lexer.next()

    def advance(self) -> Token:
        """
        Consume the current token and return it.
        """
        token = self.curr_token
        if token.kind != TokenKind.EOF:
            self.consumed += 1
            self.curr_token = self.lexer.next()
        return token

    def at_end(self) -> bool:
        """
        Return True once the token stream is exhausted.
        """
        return self.curr_token.kind == TokenKind.EOF

    def skip_newlines(self) -> None:
        while self.curr_token.kind == TokenKind.NEWLINE:
            self.advance()


    # Expression wrappers
    def primary(self) -> Value:
        """
        Evaluate a literal, variable reference or parenthesized group.
        """
        return _expr.parse_primary(self)

    def unary(self) -> Value:
        """
        Evaluate a prefix ``-``, ``+`` or ``not`` expression.
        """
        return _expr.parse_unary(self)

    def power(self) -> Value:
        """
        Evaluate an exponentiation chain.
        """
        return _expr.parse_power(self)

    def multiplicative(self) -> Value:
        """
        Evaluate multiplication, division and modulus.
        """
        return _expr.parse_multiplicative(self)

    def additive(self) -> Value:
        """
        Evaluate addition, concatenation and subtraction.
        """
        return _expr.parse_additive(self)

    def comparison(self) -> Value:
        """
        Evaluate an ordering comparison.
        """
        return _expr.parse_comparison(self)

    def equality(self) -> Value:
        """
        Evaluate an equality comparison.
        """
        return _expr.parse_equality(self)

    def logical_and(self) -> Value:
        """
        Evaluate a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def logical_or(self) -> Value:
        """
        Evaluate a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def expr(self) -> Value:
        """
        Evaluate a full expression.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def statement(self) -> None:
        """
        Execute a single statement.
        """
        _stmt.parse_statement(self)

    def parse_let(self) -> None:
        """
        Execute a ``let`` binding.
        """
        _stmt.parse_let(self)

    def parse_print(self) -> None:
        """
        Execute a ``print`` statement.
        """
        _stmt.parse_print(self)

    def parse_if(self) -> None:
        """
        Execute an ``if … then … endif`` statement.
        """
        _stmt.parse_if(self)

    def parse_expr_stmt(self) -> None:
        """
        Evaluate an expression statement and discard its value.
        """
        _stmt.parse_expr_stmt(self)
