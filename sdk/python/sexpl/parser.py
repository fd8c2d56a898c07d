"""Recursive-descent parser for SEXPL token streams."""

from .expr import ErrorNode, Expr, Identifier, List, NumberLiteral, StringLiteral
from .lexer import scan
from .log import ConsoleLogger, Logger
from .token import Token, TokenType

EXPECTED_EXPRESSION = "expected left parenthesis, string, number, or identifier"
UNTERMINATED_LIST = "unterminated list"
MISSING_LPAREN = "left parenthesis not found"
TOO_DEEP = "nesting too deep"

MAX_DEPTH = 100


def parse(tokens: list[Token], log: Logger | None = None) -> Expr:
    """Parse a token sequence into a single root expression.

    The program is one parenthesized form. Syntax errors do not abort the
    parse; they are returned as ErrorNode values where the bad subtree was.
    Tokens after the closing parenthesis of the top-level form are ignored.
    Lists nested more than MAX_DEPTH deep are replaced by a single ErrorNode.
    """
    if log is None:
        log = ConsoleLogger()
    if not tokens or tokens[-1].type is not TokenType.EOF:
        tokens = [*tokens, Token(TokenType.EOF, line=tokens[-1].line if tokens else 1)]
    pos = [0]  # mutable index

    def _peek() -> Token:
        return tokens[pos[0]]

    def _advance() -> Token:
        tok = tokens[pos[0]]
        if tok.type is not TokenType.EOF:
            pos[0] += 1
        return tok

    def _skip_form() -> None:
        # drop tokens up to the matching RPAREN without recursing
        level = 1
        while level and _peek().type is not TokenType.EOF:
            tok = _advance()
            if tok.type is TokenType.LPAREN:
                level += 1
            elif tok.type is TokenType.RPAREN:
                level -= 1

    def _expression(depth: int) -> Expr:
        tok = _peek()
        if tok.type is TokenType.LPAREN:
            _advance()
            if depth >= MAX_DEPTH:
                _skip_form()
                return ErrorNode(TOO_DEEP)
            return _list_body(depth + 1)
        if tok.type is TokenType.STRING:
            _advance()
            return StringLiteral(tok.value)
        if tok.type is TokenType.NUMBER:
            _advance()
            return NumberLiteral(tok.value)
        if tok.type is TokenType.IDENTIFIER:
            _advance()
            return Identifier(tok.value)
        return ErrorNode(EXPECTED_EXPRESSION)

    def _list_body(depth: int) -> Expr:
        elements: list[Expr] = []
        while _peek().type not in (TokenType.RPAREN, TokenType.EOF):
            elements.append(_expression(depth))
        if _peek().type is TokenType.EOF:
            return ErrorNode(UNTERMINATED_LIST)
        _advance()
        return List(tuple(elements))

    if _peek().type is TokenType.LPAREN:
        _advance()
    else:
        log.error(MISSING_LPAREN)
    return _list_body(1)


def parse_source(src: str, log: Logger | None = None) -> Expr:
    """Scan and parse source text in one step."""
    if log is None:
        log = ConsoleLogger()
    return parse(scan(src, log), log)
