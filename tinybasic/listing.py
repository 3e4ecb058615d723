"""Token listing.

Renders a token stream as a JSON array for debugging. Each entry holds the
kind name, its numeric id and the lexeme text. ``EOF`` and ``NEWLINE``
tokens show the ``<eof>`` and ``<newline>`` labels in place of their text.


File: listing.py
Version: 0.1.0
License: MIT
"""

import json
from typing import Iterable

from tinybasic.lexer import Token, TokenKind


SENTINEL_TEXT = {
    TokenKind.EOF: "<eof>",
    TokenKind.NEWLINE: "<newline>",
}


def token_entry(token: Token) -> dict:
    """Return the listing entry for one token."""
    return {
        "type": token.kind.name,
        "id": int(token.kind),
        "text": SENTINEL_TEXT.get(token.kind, token.text),
    }


def enumerate_tokens(tokens: Iterable[Token]) -> str:
    """
    Render tokens as a tab-indented JSON array, ending with a newline.
    """
    return json.dumps([token_entry(t) for t in tokens], indent="\t") + "\n"
