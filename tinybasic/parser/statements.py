"""Statement translation for TinyBASIC.

These functions operate on a `tinybasic.parser.parser.Translator` instance
and handle the statement forms of the language: output, input, assignment,
conditionals and loops. Each one emits its C lines as soon as the statement
has been recognized.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from tinybasic.lexer import TokenKind

if TYPE_CHECKING:
    from tinybasic.parser import Translator


def parse_newline(parser: 'Translator') -> None:
    """
    Syntax:
        NEWLINE { NEWLINE }
    """
    parser.eat(TokenKind.NEWLINE, "expected newline")
    while parser.curr_token.kind is TokenKind.NEWLINE:
        parser.advance()


def parse_block(parser: 'Translator', terminator: TokenKind) -> None:
    """
    Translate a nested statement list one level deeper, then consume its
    terminating keyword and close the C block.

    Syntax:
        { <statement> } <terminator>

    Raises:
        ParseError: If the input ends before ``terminator``.
    """
    parser.level += 1
    while parser.curr_token.kind is not terminator:
        if parser.curr_token.kind is TokenKind.EOF:
            parser.abort(f"expected {terminator.name} before end of input")
        parser.statement()
    parser.advance()
    parser.level -= 1
    parser.emit("}")


def parse_statement(parser: 'Translator') -> None:
    """
    Translate a single statement. A blank line emits nothing.

    Raises:
        ParseError: If the current token cannot start a statement.
    """
    kind = parser.curr_token.kind
    if kind is TokenKind.PRINT:
        parser.parse_print()
    elif kind is TokenKind.INPUT:
        parser.parse_input()
    elif kind is TokenKind.LET:
        parser.parse_let()
    elif kind is TokenKind.IF:
        parser.parse_if()
    elif kind is TokenKind.WHILE:
        parser.parse_while()
    elif kind is TokenKind.NEWLINE:
        parser.advance()
    else:
        parser.abort("expected a statement")


def parse_print(parser: 'Translator') -> None:
    """
    Syntax:
        PRINT ( <string> | <expression> ) nl
    """
    parser.eat(TokenKind.PRINT)
    tok = parser.curr_token
    if tok.kind is TokenKind.STRING:
        parser.advance()
        parser.emit(f'printf("{tok.text}\\n");')
    else:
        expr = parser.expression()
        parser.emit(f'printf("%f\\n", (float)({expr}));')
    parser.newline()


def parse_input(parser: 'Translator') -> None:
    """
    Syntax:
        INPUT <identifier> nl
    """
    if parser.peek().kind is not TokenKind.IDENTIFIER:
        parser.advance()
        parser.abort("expected identifier after INPUT")
    parser.eat(TokenKind.INPUT)
    name = parser.curr_token.text
    parser.declare(name)
    parser.advance()
    parser.emit(f'scanf("%f", &{name});')
    parser.newline()


def parse_let(parser: 'Translator') -> None:
    """
    Syntax:
        LET <identifier> = <expression> nl
    """
    parser.eat(TokenKind.LET)
    name = parser.eat(TokenKind.IDENTIFIER, "expected identifier after LET").text
    parser.declare(name)
    parser.eat(TokenKind.ASSIGN, "expected '='")
    expr = parser.expression()
    parser.emit(f"{name} = {expr};")
    parser.newline()


def parse_if(parser: 'Translator') -> None:
    """
    Syntax:
        IF <comparison> THEN nl { <statement> } ENDIF
    """
    parser.eat(TokenKind.IF)
    condition = parser.comparison()
    parser.eat(TokenKind.THEN, "expected THEN")
    parser.newline()
    parser.emit(f"if ({condition}) {{")
    parser.block(TokenKind.ENDIF)


def parse_while(parser: 'Translator') -> None:
    """
    Syntax:
        WHILE <comparison> REPEAT nl { <statement> } ENDWHILE
    """
    parser.eat(TokenKind.WHILE)
    condition = parser.comparison()
    parser.eat(TokenKind.REPEAT, "expected REPEAT")
    parser.newline()
    parser.emit(f"while ({condition}) {{")
    parser.block(TokenKind.ENDWHILE)
