"""Interpreter.

This is the entry point to the Mscri core: it turns source text into side
effects (printed output, updated variables) without ever building a syntax
tree.

1. Execution Model
`execute()` opens a lexer over the source and runs statements one at a
time until the input is exhausted. Each statement is evaluated during the
descent: tokens are pulled from the lexer, values are computed on the spot
and nothing survives once the statement completes.

2. Environment
The interpreter owns a single flat `Environment`. It is handed explicitly
to the evaluator for every call, so several interpreters can coexist, and a
REPL session keeps its variables across lines by reusing one interpreter.

3. Error Handling
All diagnostics are soft. Undefined variables are reported and read as 0.
Malformed `let`/`if` statements raise `MalformedStatementException` out of
the evaluator, which is reported here before execution carries on with the
next statement. Reported diagnostics are printed and kept in `diagnostics`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""

from mscri.environment import Environment
from mscri.evaluator import Evaluator
from mscri.exceptions import MalformedStatementException, MscriException
from mscri.lexer import Lexer
from mscri.values import Value

EXIT_COMMAND = "exit"


def is_exit_command(line: str) -> bool:
    """
    Return True if a REPL line asks to leave the session.
    """
    return line == EXIT_COMMAND


class Interpreter:
    """Direct-execution interpreter for Mscri."""

    def __init__(self, file: str = "<stdin>", environment: Environment | None = None):
        """Initialize the interpreter."""
        self.environment = environment if environment is not None else Environment()
        self.file = file
        self.diagnostics: list[MscriException] = []

    @property
    def vars(self) -> dict[str, Value]:
        """
        Current variable bindings.
        """
        return self.environment.vars

    def report(self, error: MscriException) -> None:
        """
        Record a diagnostic and print it.
        """
        self.diagnostics.append(error)
        print(f"Error: {error}")

    def evaluator(self, source: str) -> Evaluator:
        """
        Create an evaluator over ``source`` bound to this interpreter's
        environment.
        """
        return Evaluator(Lexer(source), self.environment, self.file, self.report)

    def execute_statement(self, evaluator: Evaluator) -> None:
        """
        Execute exactly one statement from ``evaluator``'s token stream.

        A malformed statement is reported and abandoned where it stopped.
        """
        try:
            evaluator.statement()
        except MalformedStatementException as e:
            self.report(e)

    def execute(self, source: str) -> None:
        """
        Execute every statement in ``source``.

        Parameters:
            source (str): A REPL line or a whole script.
        """
        evaluator = self.evaluator(source)
        while not evaluator.at_end():
            self.execute_statement(evaluator)

    def evaluate(self, source: str) -> Value:
        """
        Evaluate a single expression and return its value.

        Parameters:
            source (str): Expression source text.

        Returns:
            Value: The computed value.
        """
        return self.evaluator(source).expr()
