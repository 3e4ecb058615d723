"""
TinyBASIC Translator

This is the main entry point for the TinyBASIC to C translator.

Workflow:
1. The source script is read from the file named on the command line.
2. The Lexer scans the whole script into a list of tokens.
3. The Translator walks the tokens once, checking them against the grammar
   and emitting C as each statement is recognized.
4. The C program is written to stdout or to the file given with ``-o``.
"""
import sys

from tinybasic.cli import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
