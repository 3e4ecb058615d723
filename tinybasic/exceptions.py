"""Errors.

Every failure the translator can report derives from
:class:`TinyBasicError`, which carries enough position detail for a caller
to print a precise diagnostic.


File: exceptions.py
Version: 0.1.0
License: MIT
"""


class TinyBasicError(Exception):
    """
    Base error for scanning, parsing and source loading.
    """
    category = "error"

    def __init__(self, message, line=None, column=None, position=None, file=None):
        self.message = message
        self.line = line
        self.column = column
        self.position = position
        self.file = file
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexError(TinyBasicError):
    """
    Error for malformed lexemes.
    """
    category = "lexical"

    def __init__(self, reason, detail, line, column, file=None):
        self.reason = reason
        self.detail = detail
        message = f"{reason!s}: line {line} column {column}: '{detail}'"
        super().__init__(message, line=line, column=column, file=file)


class ParseError(TinyBasicError):
    """
    Error for a token the grammar does not accept where it was found.
    """
    category = "syntactic"

    def __init__(self, token, position, expected, file=None):
        self.token = token
        self.kind = token.kind
        self.expected = expected
        message = (
            f"Parser aborted on token {token.kind.name} "
            f"at position {position} (line {token.line}): {expected}"
        )
        super().__init__(
            message, line=token.line, column=token.column, position=position, file=file
        )


class SourceError(TinyBasicError):
    """
    Error for a source file that cannot be loaded.
    """
    category = "source"
