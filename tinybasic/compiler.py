"""TinyBASIC to C compiler pipeline.

Scanning always finishes before translation starts: the translator only
ever sees a complete token stream.


File: compiler.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from tinybasic.lexer import Token, tokenize
from tinybasic.listing import enumerate_tokens
from tinybasic.log import get_logger
from tinybasic.parser import Translator
from tinybasic.source import load_source


logger = get_logger(__name__)


def scan_source(source: str, file: str = "<input>") -> list[Token]:
    """
    Scan TinyBASIC source text into a complete token stream.

    Raises:
        LexError: If scanning fails.
    """
    tokens = tokenize(source, file)
    logger.debug("scanned %d tokens from %s", len(tokens), file)
    return tokens


def scan_file(src: str) -> list[Token]:
    """
    Load and scan a TinyBASIC file.

    Raises:
        SourceError: If the file cannot be loaded.
        LexError: If scanning fails.
    """
    return scan_source(load_source(src), src)


def translate_source(source: str, file: str = "<input>", indent: str = "\t") -> str:
    """
    Translate TinyBASIC source text into a C program.

    Raises:
        LexError: If scanning fails.
        ParseError: If the token stream does not match the grammar.
    """
    return Translator(scan_source(source, file), indent=indent, file=file).translate()


def translate_file(src: str, out: str | None = None, listing: TextIO | None = None) -> str:
    """
    Translate a TinyBASIC file, writing the C program to ``out`` when given.

    Parameters:
        src (str): The script to translate.
        out (str): Where to write the C program, if anywhere.
        listing (TextIO): Stream that receives the token listing before
            translation starts, if any.

    Returns:
        str: The emitted C program.

    Raises:
        SourceError: If the file cannot be loaded.
        LexError: If scanning fails.
        ParseError: If the token stream does not match the grammar.
    """
    tokens = scan_file(src)
    if listing is not None:
        listing.write(enumerate_tokens(tokens))
    c_code = Translator(tokens, file=src).translate()
    if out is not None:
        Path(out).write_text(c_code, encoding="utf-8")
        logger.debug("wrote %s", out)
    return c_code
