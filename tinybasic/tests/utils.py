"""
Utility functions shared across TinyBASIC tests.
"""
from pathlib import Path

from tinybasic.lexer import TokenKind, tokenize
from tinybasic.parser import Translator

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def kinds(source: str) -> list[TokenKind]:
    """
    Scan source code and return the kind of every token.
    """
    return [t.kind for t in tokenize(source)]


def translate_text(source: str) -> str:
    """
    Scan and translate source code, returning the C program.
    """
    return Translator(tokenize(source), file="<test>").translate()


def body_lines(source: str) -> list[str]:
    """
    Translate source code and return only the lines inside ``main``,
    excluding the final ``return 0;``.
    """
    return translate_text(source).splitlines()[4:-2]
