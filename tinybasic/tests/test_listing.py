"""Tests for the token listing."""
import json

from tinybasic.lexer import TokenKind, tokenize
from tinybasic.listing import enumerate_tokens, token_entry


def test_listing_entries():
    listing = json.loads(enumerate_tokens(tokenize('PRINT "hi"\nLET A = 1.5\n')))
    assert listing[0] == {"type": "PRINT", "id": int(TokenKind.PRINT), "text": "PRINT"}
    assert listing[1] == {"type": "STRING", "id": int(TokenKind.STRING), "text": "hi"}
    assert listing[2] == {"type": "NEWLINE", "id": int(TokenKind.NEWLINE), "text": "<newline>"}
    assert listing[6]["text"] == "1.5"
    assert listing[-1] == {"type": "EOF", "id": int(TokenKind.EOF), "text": "<eof>"}
    assert len(listing) == 9


def test_listing_is_tab_indented():
    text = enumerate_tokens(tokenize(""))
    assert text.startswith("[\n\t{\n\t\t\"type\": \"EOF\"")
    assert text.endswith("]\n")


def test_token_entry_for_operator():
    token = tokenize("<> 1")[0]
    assert token_entry(token) == {"type": "NOT_EQUAL", "id": 203, "text": "<>"}
