"""Lexer for Mscri.

The lexer walks the source text with a single cursor and hands out one
:class:`Token` per call to :meth:`Lexer.next`. Nothing is materialized up
front: the evaluator pulls tokens as it descends, so a statement only ever
sees as much of the source as it consumes.

Tokens cover literals (numbers, strings), identifiers, the reserved keyword
set (``let``, ``if``, ``print`` …), operators and delimiters. Line comments
(``// …``) and block comments (``/* … */``) are skipped. The lexer never
raises: malformed numbers are read permissively, unterminated strings and
comments run to the end of input, and unknown characters are dropped.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""

import re
import string
from enum import Enum


class TokenKind(str, Enum):
    """
    Enumeration of token classes produced by the lexer.
    """

    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    DELIMITER = "delimiter"
    NEWLINE = "newline"
    EOF = "eof"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


KEYWORDS = frozenset({
    "let", "if", "then", "else", "endif", "while", "do", "endwhile",
    "for", "to", "step", "endfor", "function", "endfunction", "return",
    "print", "and", "or", "not", "true", "false",
})

TWO_CHAR_OPERATORS = ("==", "!=", "<=", ">=")
SINGLE_CHAR_OPERATORS = "+-*/%^=<>"
DELIMITERS = "(),"

ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}

# Leading part of a number lexeme that float() accepts; "1.2.3" reads as 1.2
_NUMBER_PREFIX = re.compile(r"\d+(?:\.\d*)?", re.ASCII)

WORD_START = string.ascii_letters + "_"
WORD_CHARS = WORD_START + string.digits


class Token:
    """
    Represents a lexical token with a kind, lexeme and source position.
    """
    def __init__(self, kind, lexeme, line, column, number=None):
        """
        Initialize a new token.

        Parameters:
            kind (TokenKind): The token class.
            lexeme (str): The raw text (unescaped contents for strings).
            line (int): 1-based source line.
            column (int): 1-based source column.
            number (float | None): Numeric payload for number tokens.
        """
        self.kind = kind
        self.lexeme = lexeme
        self.line = line
        self.column = column
        self.number = number

    def is_keyword(self, *words: str) -> bool:
        """
        Return True if this is a keyword token matching one of ``words``.
        """
        return self.kind == TokenKind.KEYWORD and self.lexeme in words

    def is_operator(self, *ops: str) -> bool:
        """
        Return True if this is an operator token matching one of ``ops``.
        """
        return self.kind == TokenKind.OPERATOR and self.lexeme in ops

    def is_delimiter(self, char: str) -> bool:
        """
        Return True if this is the delimiter ``char``.
        """
        return self.kind == TokenKind.DELIMITER and self.lexeme == char

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.value}, {self.lexeme!r}, line={self.line}, col={self.column})"


def parse_number(lexeme: str) -> float:
    """
    Read the numeric value of a number lexeme.

    The scanner accepts any run of digits and dots, so the lexeme may hold
    more than one decimal point. Only the longest valid leading part is
    converted and the rest is ignored.
    """
    match = _NUMBER_PREFIX.match(lexeme)
    if match is None:
        return 0.0
    return float(match.group())


class Lexer:
    """Pull-based tokenizer over a source string."""

    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.position = 0
        self.line = 1
        self.column = 1

    def current_char(self) -> str:
        """
        Return the character under the cursor, or '' at end of input.
        """
        if self.position >= self.length:
            return ""
        return self.source[self.position]

    def peek_char(self) -> str:
        """
        Return the character after the cursor, or '' past end of input.
        """
        if self.position + 1 >= self.length:
            return ""
        return self.source[self.position + 1]

    def advance(self) -> None:
        """
        Move the cursor one character forward, tracking line and column.
        """
        if self.position < self.length:
            if self.source[self.position] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.position += 1

    def skip_whitespace(self) -> None:
        while self.current_char() in (" ", "\t", "\r"):
            self.advance()

    def skip_comment(self) -> None:
        """
        Skip a ``//`` or ``/* */`` comment starting at the cursor.

        An unterminated block comment runs to the end of input.
        """
        if self.peek_char() == "/":
            while self.current_char() not in ("\n", ""):
                self.advance()
            return

        self.advance()
        self.advance()
        while self.current_char() and not (self.current_char() == "*" and self.peek_char() == "/"):
            self.advance()
        if self.current_char() == "*":
            self.advance()
            self.advance()

    def next(self) -> Token:
        """
        Return the next token and advance past it.

        Once the source is exhausted every call returns an EOF token.
        """
        while self.current_char():
            self.skip_whitespace()
            char = self.current_char()
            if not char:
                break

            if char == "/" and self.peek_char() in ("/", "*"):
                self.skip_comment()
                continue

            line, column = self.line, self.column

            if char == "\n":
                self.advance()
                return Token(TokenKind.NEWLINE, "\\n", line, column)

            if char in ('"', "'"):
                return Token(TokenKind.STRING, self._read_string(char), line, column)

            if char in string.digits:
                lexeme = self._read_number()
                return Token(TokenKind.NUMBER, lexeme, line, column, parse_number(lexeme))

            if char in WORD_START:
                word = self._read_word()
                kind = TokenKind.KEYWORD if word in KEYWORDS else TokenKind.IDENTIFIER
                return Token(kind, word, line, column)

            pair = char + self.peek_char()
            if pair in TWO_CHAR_OPERATORS:
                self.advance()
                self.advance()
                return Token(TokenKind.OPERATOR, pair, line, column)

            if char in SINGLE_CHAR_OPERATORS:
                self.advance()
                return Token(TokenKind.OPERATOR, char, line, column)

            if char in DELIMITERS:
                self.advance()
                return Token(TokenKind.DELIMITER, char, line, column)

            # Unknown characters are dropped
            self.advance()

        return Token(TokenKind.EOF, "EOF", self.line, self.column)

    def _read_string(self, quote: str) -> str:
        self.advance()
        chars = []
        while self.current_char() and self.current_char() != quote:
            if self.current_char() == "\\":
                self.advance()
                escaped = self.current_char()
                if not escaped:
                    break
                chars.append(ESCAPES.get(escaped, escaped))
            else:
                chars.append(self.current_char())
            self.advance()
        if self.current_char() == quote:
            self.advance()
        return "".join(chars)

    def _read_number(self) -> str:
        start = self.position
        while self.current_char() and self.current_char() in string.digits + ".":
            self.advance()
        return self.source[start:self.position]

    def _read_word(self) -> str:
        start = self.position
        while self.current_char() and self.current_char() in WORD_CHARS:
            self.advance()
        return self.source[start:self.position]

    def __iter__(self):
        """
        Yield tokens until (and excluding) the EOF token.
        """
        while True:
            token = self.next()
            if token.kind == TokenKind.EOF:
                return
            yield token


def tokenize(source: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    The evaluator never needs this; it exists for debugging dumps.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: All tokens, terminated by an EOF token.
    """
    lexer = Lexer(source)
    tokens = list(lexer)
    tokens.append(lexer.next())
    return tokens
