"""TinyBASIC to C translator.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from tinybasic.compiler import scan_file, translate_file, translate_source
from tinybasic.exceptions import LexError, ParseError, SourceError, TinyBasicError
from tinybasic.lexer import Token, TokenKind, tokenize
from tinybasic.parser import Translator, translate

__version__ = "0.1.0"

__all__ = [
    "LexError",
    "ParseError",
    "SourceError",
    "TinyBasicError",
    "Token",
    "TokenKind",
    "Translator",
    "scan_file",
    "tokenize",
    "translate",
    "translate_file",
    "translate_source",
]
