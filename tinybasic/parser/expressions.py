"""
Expression translation for TinyBASIC.

These functions operate on a `tinybasic.parser.parser.Translator` instance
and return the C text of the expression they recognize. Precedence comes
from the shape of the recursion alone: comparison binds loosest, then
``+``/``-``, then ``*``/``/``, then a unary sign, then numbers and names.
Operands and operators are emitted in the order they are read.


File: expressions.py
Version: 0.1.0
License: MIT
"""

import re
from typing import TYPE_CHECKING

from tinybasic.lexer import COMPARISON_OPERATORS, TokenKind

if TYPE_CHECKING:
    from tinybasic.parser import Translator


# Source operator spellings that differ in C.
C_OPERATORS = {
    '<>': '!=',
}


def _c_operator(text: str) -> str:
    return C_OPERATORS.get(text, text)


INTEGER_LITERAL = re.compile(r"[+-]?\d+")


def _float_divisor(text: str) -> str:
    """Give an integer literal divisor a fractional part so C divides as float."""
    if INTEGER_LITERAL.fullmatch(text):
        return text + ".0"
    return text


# ---- Highest precedence ----

def parse_primary(parser: 'Translator') -> str:
    """
    Translate a number or an identifier.

    An identifier read before it has ever been declared is declared here;
    the declaration itself is emitted at the top of ``main``.

    Syntax:
        NUMBER | IDENTIFIER
    """
    tok = parser.curr_token
    if tok.kind is TokenKind.NUMBER:
        parser.advance()
        return tok.text
    if tok.kind is TokenKind.IDENTIFIER:
        parser.declare(tok.text)
        parser.advance()
        return tok.text
    parser.abort("expected a number or identifier")


def parse_unary(parser: 'Translator') -> str:
    """
    Syntax:
        [ "+" | "-" ] primary
    """
    tok = parser.curr_token
    if tok.kind in (TokenKind.ADD, TokenKind.SUBTRACT):
        parser.advance()
        return tok.text + parser.primary()
    return parser.primary()


def parse_term(parser: 'Translator') -> str:
    """
    Syntax:
        unary { ("*" | "/") unary }
    """
    result = parser.unary()
    while parser.curr_token.kind in (TokenKind.MULTIPLY, TokenKind.DIVIDE):
        op_tok = parser.curr_token
        parser.advance()
        operand = parser.unary()
        if op_tok.kind is TokenKind.DIVIDE:
            operand = _float_divisor(operand)
        result = f"{result} {op_tok.text} {operand}"
    return result


def parse_expression(parser: 'Translator') -> str:
    """
    Syntax:
        term { ("+" | "-") term }
    """
    result = parser.term()
    while parser.curr_token.kind in (TokenKind.ADD, TokenKind.SUBTRACT):
        op_tok = parser.curr_token
        parser.advance()
        result = f"{result} {op_tok.text} {parser.term()}"
    return result


# ---- Lowest precedence ----

def parse_comparison(parser: 'Translator') -> str:
    """
    Translate a comparison. At least one comparison operator is required;
    further operator/expression pairs chain left to right.

    Syntax:
        expression comparison_op expression { comparison_op expression }
    """
    result = parser.expression()
    if parser.curr_token.kind not in COMPARISON_OPERATORS:
        parser.abort("expected comparison operator")
    while parser.curr_token.kind in COMPARISON_OPERATORS:
        op_tok = parser.curr_token
        parser.advance()
        result = f"{result} {_c_operator(op_tok.text)} {parser.expression()}"
    return result
