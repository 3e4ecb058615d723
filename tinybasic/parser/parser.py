"""
Main translator entry point for TinyBASIC.

This module defines the `Translator` class, which drives a single-pass
recursive descent over the token stream and emits C as each production is
recognized. The production routines themselves are split across
`tinybasic.parser.statements` and `tinybasic.parser.expressions`.


File: parser.py
Version: 0.1.0
License: MIT
"""

from typing import NoReturn

from tinybasic.exceptions import ParseError
from tinybasic.lexer import Token, TokenKind
from tinybasic.log import get_logger

from . import expressions as _expr
from . import statements as _stmt


logger = get_logger(__name__)

PROLOGUE = [
    "#include <stdio.h>",
    "",
    "int main(void)",
    "{",
]

EPILOGUE = [
    "return 0;",
]


class Translator:
    """TinyBASIC to C translator."""

    def __init__(self, tokens: list[Token], indent: str = "\t", file: str = "<input>"):
        """
        Initialize the translator with a fully scanned token stream.

        Parameters:
            tokens (list): Token instances ending with an EOF token.
            indent (str): One level of indentation in the emitted C.
            file (str): The name of the script, used in error messages.
        """
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token stream must end with an EOF token")
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[0]
        self.indent = indent
        self.level = 0
        self.declared: set[str] = set()
        self.declarations: list[str] = []
        self.lines: list[str] = []
        self.source_file = file


    def advance(self) -> None:
        """
        Move to the next token. The cursor never moves past EOF.
        """
        if self.curr_token.kind is not TokenKind.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]

    def peek(self) -> Token:
        """
        Return the token after the current one without consuming anything.
        """
        return self.tokens[min(self.position + 1, len(self.tokens) - 1)]

    def eat(self, kind: TokenKind, expected: str | None = None) -> Token:
        """
        Consume the current token if it has the expected kind.

        Parameters:
            kind (TokenKind): The expected token kind.
            expected (str): Message used when the token does not match.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match the expected kind.
        """
        tok = self.curr_token
        if tok.kind is not kind:
            self.abort(expected or f"expected {kind.name}")
        self.advance()
        return tok

    def abort(self, expected: str) -> NoReturn:
        """
        Raise a parse error for the current token.

        Raises:
            ParseError: Always.
        """
        raise ParseError(self.curr_token, self.position, expected, file=self.source_file)


    # Emission
    def emit(self, line: str) -> None:
        """Append a line of C at the current indentation level."""
        self.lines.append(self.indent * self.level + line)

    def declare(self, name: str) -> bool:
        """
        Record ``name`` as declared. Every declared name gets one
        ``float`` declaration at the top of ``main``, whatever block it
        was first seen in.

        Returns:
            bool: True if this is the first time ``name`` has been seen.
        """
        if name in self.declared:
            return False
        self.declared.add(name)
        self.declarations.append(name)
        logger.debug("declared %s", name)
        return True


    # Expression wrappers
    def primary(self) -> str:
        """
        Translate a number or identifier.
        """
        return _expr.parse_primary(self)

    def unary(self) -> str:
        """
        Translate a primary with an optional sign.
        """
        return _expr.parse_unary(self)

    def term(self) -> str:
        """
        Translate a multiplication or division chain.
        """
        return _expr.parse_term(self)

    def expression(self) -> str:
        """
        Translate an addition or subtraction chain.
        """
        return _expr.parse_expression(self)

    def comparison(self) -> str:
        """
        Translate a comparison between expressions.
        """
        return _expr.parse_comparison(self)


    # Statement wrappers
    def statement(self) -> None:
        """
        Translate a single statement.
        """
        _stmt.parse_statement(self)

    def block(self, terminator: TokenKind) -> None:
        """
        Translate statements up to and including ``terminator``.
        """
        _stmt.parse_block(self, terminator)

    def newline(self) -> None:
        """
        Consume one or more statement-terminating newlines.
        """
        _stmt.parse_newline(self)

    def parse_print(self) -> None:
        """
        Translate a 'PRINT' statement.
        """
        _stmt.parse_print(self)

    def parse_input(self) -> None:
        """
        Translate an 'INPUT' statement.
        """
        _stmt.parse_input(self)

    def parse_let(self) -> None:
        """
        Translate a 'LET' assignment.
        """
        _stmt.parse_let(self)

    def parse_if(self) -> None:
        """
        Translate an 'IF' block.
        """
        _stmt.parse_if(self)

    def parse_while(self) -> None:
        """
        Translate a 'WHILE' loop.
        """
        _stmt.parse_while(self)


    def translate(self) -> str:
        """
        Translate the full token stream into a C program.

        Returns:
            str: The C source, ending with a newline.

        Raises:
            ParseError: On the first token the grammar does not accept.
        """
        logger.debug("translating %d tokens from %s", len(self.tokens), self.source_file)
        self.lines.extend(PROLOGUE)
        self.level += 1
        body_start = len(self.lines)
        while self.curr_token.kind is not TokenKind.EOF:
            self.statement()
        self.lines[body_start:body_start] = [
            self.indent * self.level + f"float {name} = 0;" for name in self.declarations
        ]
        for line in EPILOGUE:
            self.emit(line)
        self.level -= 1
        self.lines.append("}")
        logger.debug("translated %s into %d lines", self.source_file, len(self.lines))
        return "\n".join(self.lines) + "\n"


def translate(tokens: list[Token], indent: str = "\t", file: str = "<input>") -> str:
    """
    Translate a token stream into C source.

    Parameters:
        tokens (list[Token]): Tokens produced by ``tokenize``.
        indent (str): One level of indentation in the emitted C.
        file (str): The name of the script, used in error messages.

    Returns:
        str: The emitted C program.

    Raises:
        ParseError: On the first token the grammar does not accept.
    """
    return Translator(tokens, indent=indent, file=file).translate()
