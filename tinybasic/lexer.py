"""Lexer for TinyBASIC.

The scanner walks the source one character at a time and yields a
:class:`Token` for every lexeme it recognizes. Keywords are scanned as a
maximal run of letters and looked up in :data:`KEYWORDS`; anything that is
not a keyword becomes an identifier.

Whitespace other than newlines is skipped. Newlines are significant and
become ``NEWLINE`` tokens because the grammar uses them as statement
terminators. Comments start with ``#`` and run to the end of the line.

The first malformed lexeme stops the scan with a :class:`LexError` naming
the reason together with the line and column where it was found.


File: lexer.py
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import NoReturn

from tinybasic.exceptions import LexError


class TokenKind(IntEnum):
    """
    Closed set of token kinds. The numeric value is the token id shown in
    token listings.
    """

    EOF = -1
    NEWLINE = 0
    NUMBER = 1
    IDENTIFIER = 2
    STRING = 3

    # Keywords
    WHILE = 101
    ENDWHILE = 102
    REPEAT = 103
    LET = 104
    PRINT = 105
    INPUT = 106
    IF = 107
    THEN = 108
    ENDIF = 109

    # Operators
    ASSIGN = 201
    EQUAL = 202
    NOT_EQUAL = 203
    LESS = 204
    LESS_EQUAL = 205
    GREATER = 206
    GREATER_EQUAL = 207
    ADD = 208
    SUBTRACT = 209
    MULTIPLY = 210
    DIVIDE = 211

    UNKNOWN = 999


KEYWORDS: dict[str, TokenKind] = {
    'WHILE': TokenKind.WHILE,
    'ENDWHILE': TokenKind.ENDWHILE,
    'REPEAT': TokenKind.REPEAT,
    'LET': TokenKind.LET,
    'PRINT': TokenKind.PRINT,
    'INPUT': TokenKind.INPUT,
    'IF': TokenKind.IF,
    'THEN': TokenKind.THEN,
    'ENDIF': TokenKind.ENDIF,
}

COMPARISON_OPERATORS = frozenset({
    TokenKind.EQUAL,
    TokenKind.NOT_EQUAL,
    TokenKind.LESS,
    TokenKind.LESS_EQUAL,
    TokenKind.GREATER,
    TokenKind.GREATER_EQUAL,
})

SINGLE_CHAR_OPERATORS: dict[str, TokenKind] = {
    '=': TokenKind.ASSIGN,
    '<': TokenKind.LESS,
    '>': TokenKind.GREATER,
    '+': TokenKind.ADD,
    '-': TokenKind.SUBTRACT,
    '*': TokenKind.MULTIPLY,
    '/': TokenKind.DIVIDE,
}

# First character -> {second character: kind}. Each of these needs one
# character of lookahead.
TWO_CHAR_OPERATORS: dict[str, dict[str, TokenKind]] = {
    '=': {'=': TokenKind.EQUAL},
    '<': {'=': TokenKind.LESS_EQUAL, '>': TokenKind.NOT_EQUAL},
    '>': {'=': TokenKind.GREATER_EQUAL},
    '!': {'=': TokenKind.NOT_EQUAL},
}

# Characters that may not appear between the quotes of a string literal.
STRING_FORBIDDEN = frozenset('\\%\r\n\t')

# Sentinel for "no current character".
EOF_CHAR = ''


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


class StopReason(str, Enum):
    """
    Why the scanner stopped before reaching the end of input.
    """

    NONE = "None"
    UNKNOWN_TOKEN = "Unknown token"
    INVALID_NUMBER = "Invalid number"
    INVALID_STRING = "Invalid string"
    PEEK_EOF = "Peek EOF"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """
    A classified lexeme. ``text`` is the exact source text, minus the quotes
    for string literals.
    """
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, line={self.line})"


class Scanner:
    """
    Single-use scanner over one source buffer.

    The cursor (``pos``, ``c``, ``line``, ``column``) always describes the
    character being examined. Once ``stop`` is anything other than
    ``StopReason.NONE`` the cursor no longer moves.
    """

    def __init__(self, source: str, file: str | None = None):
        """
        Parameters:
            source (str): The complete program text.
            file (str): The name of the script, used in error messages.
        """
        self.source = source
        self.size = len(source)
        self.pos = 0
        self.c = source[0] if source else EOF_CHAR
        self.line = 1
        self.column = 1
        self.stop = StopReason.NONE
        self.tokens: list[Token] = []
        self.source_file = file

    def abort(self, reason: StopReason, detail: str) -> NoReturn:
        """
        Record the stop reason and raise.

        Raises:
            LexError: Always.
        """
        self.stop = reason
        raise LexError(reason, detail, self.line, self.column, file=self.source_file)

    def advance(self) -> None:
        """
        Move the cursor to the next character, tracking line and column.
        """
        if self.stop is not StopReason.NONE or self.pos >= self.size:
            return
        if self.c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        self.c = self.source[self.pos] if self.pos < self.size else EOF_CHAR

    def peek(self) -> str:
        """
        Return the character after the current one.

        Raises:
            LexError: If the current character is the last one.
        """
        if self.pos + 1 >= self.size:
            self.abort(StopReason.PEEK_EOF, self.c)
        return self.source[self.pos + 1]

    def skip_whitespace(self) -> None:
        while self.c != EOF_CHAR and self.c.isspace() and self.c != '\n':
            self.advance()

    def skip_comment(self) -> None:
        while self.c != EOF_CHAR and self.c != '\n':
            self.advance()

    def scan_word(self) -> TokenKind:
        start = self.pos
        while _is_letter(self.c):
            self.advance()
        return KEYWORDS.get(self.source[start:self.pos], TokenKind.IDENTIFIER)

    def scan_string(self) -> None:
        """
        Consume a string literal, opening quote through closing quote.

        Raises:
            LexError: On a forbidden character or a missing closing quote.
        """
        self.advance()
        while self.c != '"':
            if self.c == EOF_CHAR:
                self.abort(StopReason.INVALID_STRING, "Unterminated string.")
            if self.c in STRING_FORBIDDEN:
                self.abort(StopReason.INVALID_STRING, repr(self.c)[1:-1])
            self.advance()
        self.advance()

    def scan_number(self) -> None:
        """
        Consume ``digit+ ('.' digit+)?``.

        Raises:
            LexError: On a second decimal point or a point with no digit
                after it.
        """
        have_point = False
        have_digit_after_point = False
        while True:
            self.advance()
            if _is_digit(self.c):
                if have_point:
                    have_digit_after_point = True
            elif self.c == '.':
                if have_point:
                    self.abort(StopReason.INVALID_NUMBER, "Multiple decimal points.")
                have_point = True
            elif have_point and not have_digit_after_point:
                self.abort(StopReason.INVALID_NUMBER, "A digit must follow a decimal point.")
            else:
                break

    def scan_operator(self) -> TokenKind:
        """
        Consume a one- or two-character operator starting at the cursor.

        Raises:
            LexError: If the cursor is not on an operator.
        """
        c = self.c
        if c in TWO_CHAR_OPERATORS:
            pairs = TWO_CHAR_OPERATORS[c]
            nxt = self.peek()
            if nxt in pairs:
                kind = pairs[nxt]
                self.advance()
            elif c in SINGLE_CHAR_OPERATORS:
                kind = SINGLE_CHAR_OPERATORS[c]
            else:
                self.abort(StopReason.UNKNOWN_TOKEN, c)
        elif c in SINGLE_CHAR_OPERATORS:
            kind = SINGLE_CHAR_OPERATORS[c]
        else:
            self.abort(StopReason.UNKNOWN_TOKEN, c)
        self.advance()
        return kind

    def next_token(self) -> Token | None:
        """
        Scan one lexeme. Returns ``None`` for input that yields no token
        (whitespace and comments).

        Raises:
            LexError: On any malformed lexeme.
        """
        start = self.pos
        line, column = self.line, self.column
        c = self.c

        if c == EOF_CHAR:
            return Token(TokenKind.EOF, '', line, column)
        if c == '\n':
            self.advance()
            return Token(TokenKind.NEWLINE, '\n', line, column)
        if c.isspace():
            self.skip_whitespace()
            return None
        if c == '#':
            self.skip_comment()
            return None

        if _is_letter(c):
            kind = self.scan_word()
        elif _is_digit(c):
            self.scan_number()
            kind = TokenKind.NUMBER
        elif c == '"':
            self.scan_string()
            return Token(TokenKind.STRING, self.source[start + 1:self.pos - 1], line, column)
        else:
            kind = self.scan_operator()

        return Token(kind, self.source[start:self.pos], line, column)

    def run(self) -> list[Token]:
        """
        Scan the whole buffer. The returned list always ends with exactly
        one ``EOF`` token.

        Raises:
            LexError: On the first malformed lexeme.
        """
        while self.stop is StopReason.NONE:
            token = self.next_token()
            if token is None:
                continue
            self.tokens.append(token)
            if token.kind is TokenKind.EOF:
                break
        return self.tokens


def tokenize(source: str, file: str | None = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.
        file (str): The name of the script, used in error messages.

    Returns:
        list[Token]: The tokens, terminated by a single ``EOF`` token.

    Raises:
        LexError: If the source contains a malformed lexeme.
    """
    return Scanner(source, file).run()
