"""
Utility functions shared across Mscri tests.
"""
from mscri.interpreter import Interpreter
from mscri.lexer import Lexer, TokenKind


def run_source(source: str) -> Interpreter:
    """
    Execute source code and return the interpreter instance after execution.
    """
    interpreter = Interpreter('<test>')
    interpreter.execute(source)
    return interpreter


def evaluate(source: str):
    """
    Evaluate an expression in a fresh interpreter and return its value.
    """
    return Interpreter('<test>').evaluate(source)


def kinds_and_lexemes(source: str) -> list[tuple[TokenKind, str]]:
    """
    Tokenize source and return (kind, lexeme) pairs, excluding EOF.
    """
    return [(tok.kind, tok.lexeme) for tok in Lexer(source)]
