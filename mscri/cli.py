"""
Mscri Language Interpreter

This is the command line entry point for the Mscri interpreter.

Workflow:
1. With no arguments an interactive session (REPL) is started. Each line is
   executed against one shared interpreter until ``exit`` or end of input.
2. With a script path the whole file is read and executed statement by
   statement until the end of input.
3. Setting the ``MSCRIDEBUG`` environment variable dumps the script's token
   stream before it runs.


File: cli.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 1.0
License: MIT
"""
import os
import sys

from mscri import __version__
from mscri.interpreter import Interpreter, is_exit_command
from mscri.lexer import tokenize

PROMPT = "mscri> "


def print_usage():
    """
    Print usage.
    """
    print()
    print("Mscri Language Interpreter")
    print()
    print("Usage:")
    print("    mscri <script.mscri>")
    print()
    print("Arguments:")
    print("    <script.mscri>")
    print("        Path to an Mscri source file to execute.")
    print()
    print("Example:")
    print("    mscri hello.mscri")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens(tokens):
    """
    Print tokenized source
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run an Mscri script.

    Returns:
        int: 0 on success, 1 if the file cannot be opened.
    """
    try:
        with open(script_name, "r", encoding="utf-8", errors="replace") as f:
            code = f.read()
    except OSError:
        print(f"Error: Cannot open file '{script_name}'")
        return 1

    if os.environ.get('MSCRIDEBUG'):
        debug_print_tokens(tokenize(code))

    interpreter = Interpreter(script_name)
    interpreter.execute(code)
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print(f"Mscri Interpreter v{__version__} (Python)")
    print("Type 'exit' to quit")
    print()
    interpreter = Interpreter("<stdin>")
    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        if is_exit_command(line):
            break
        if not line:
            continue
        interpreter.execute(line)
    print("Goodbye!")


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def run():
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))
