"""Expression tree produced by the parser and walked by the evaluator.

The node set is closed: NumberLiteral, StringLiteral, Identifier, List and
ErrorNode. Nodes are immutable; a malformed subtree is represented by an
ErrorNode in its place.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberLiteral:
    value: int


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class Identifier:
    name: str


@dataclass(frozen=True)
class List:
    elements: tuple["Expr", ...] = ()


@dataclass(frozen=True)
class ErrorNode:
    message: str


Expr = Union[NumberLiteral, StringLiteral, Identifier, List, ErrorNode]


def format_expr(expr: Expr) -> str:
    """Render a tree back to S-expression text."""
    if isinstance(expr, NumberLiteral):
        return str(expr.value)
    if isinstance(expr, StringLiteral):
        return f'"{expr.value}"'
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, List):
        return "(" + " ".join(format_expr(e) for e in expr.elements) + ")"
    if isinstance(expr, ErrorNode):
        return f"<error: {expr.message}>"
    raise TypeError(f"not an expression: {expr!r}")
