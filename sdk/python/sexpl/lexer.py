"""Lexer for SEXPL source text."""

import logging

from .log import ConsoleLogger, Logger
from .token import Token, TokenType

logger = logging.getLogger(__name__)

WHITESPACE = " \r\t"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def scan(src: str, log: Logger | None = None) -> list[Token]:
    """Turn source text into tokens, always ending with an EOF token.

    Bad input never stops the scan: an unknown character or an unterminated
    string is reported through `log.error` and produces no token.
    """
    if log is None:
        log = ConsoleLogger()
    tokens: list[Token] = []
    line = 1
    i = 0
    n = len(src)

    while i < n:
        ch = src[i]

        if ch == "(":
            tokens.append(Token(TokenType.LPAREN, line=line))
            i += 1
            continue

        if ch == ")":
            tokens.append(Token(TokenType.RPAREN, line=line))
            i += 1
            continue

        if ch in WHITESPACE:
            i += 1
            continue

        if ch == "\n":
            line += 1
            i += 1
            continue

        if ch == '"':
            start_line = line
            end = i + 1
            while end < n and src[end] != '"':
                if src[end] == "\n":
                    line += 1
                end += 1
            if end >= n:
                log.error(f"line {start_line}: unterminated string")
                i = n
                continue
            tokens.append(Token(TokenType.STRING, src[i + 1:end], start_line))
            i = end + 1
            continue

        if _is_digit(ch):
            end = i
            while end < n and _is_digit(src[end]):
                end += 1
            try:
                value = int(src[i:end])
            except ValueError:
                # past the interpreter's int/str conversion digit limit
                log.error(f"line {line}: number too long")
            else:
                tokens.append(Token(TokenType.NUMBER, value, line))
            i = end
            continue

        if _is_alpha(ch):
            end = i
            while end < n and (_is_alpha(src[end]) or _is_digit(src[end])):
                end += 1
            tokens.append(Token(TokenType.IDENTIFIER, src[i:end], line))
            i = end
            continue

        log.error(f"line {line}: unknown character '{ch}'")
        i += 1

    tokens.append(Token(TokenType.EOF, line=line))
    logger.debug("scanned %d tokens over %d lines", len(tokens), line)
    return tokens


def paren_depth(src: str) -> int:
    """Net count of open parentheses in `src`, ignoring string contents.

    An unterminated string counts as open for as long as it runs.
    """
    depth = 0
    in_str = False
    for ch in src:
        if in_str:
            if ch == '"':
                in_str = False
            continue
        if ch == '"':
            in_str = True
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
    return depth
