"""Token kinds and the token record produced by the lexer."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenType(Enum):
    LPAREN = "("
    RPAREN = ")"
    NUMBER = "NUMBER"
    STRING = "STRING"
    IDENTIFIER = "IDENTIFIER"
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A single lexeme. `value` is set for NUMBER, STRING and IDENTIFIER only."""
    type: TokenType
    value: Optional[Union[int, str]] = None
    line: int = 1

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.name}, line={self.line})"
        return f"Token({self.type.name}, {self.value!r}, line={self.line})"
