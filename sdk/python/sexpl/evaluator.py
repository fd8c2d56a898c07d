"""Tree-walk evaluator for SEXPL expression trees.

Nothing here raises on bad programs. Type errors, bad argument counts and
unknown commands are reported through the logger and replaced by an empty
result (or `[1]` for an unknown command), so evaluation always completes.
"""

import logging
from typing import Any, Callable

from .expr import ErrorNode, Expr, Identifier, List, NumberLiteral, StringLiteral
from .log import Logger, format_value
from .types import Environment, Value

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_RESULT = 1


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_scalar(v: Any) -> bool:
    return _is_number(v) or isinstance(v, str)


def _unwrap(v: Value) -> Value:
    if isinstance(v, list) and len(v) == 1:
        return v[0]
    return v


def _literal_text(node: Expr) -> str | None:
    if isinstance(node, Identifier):
        return node.name
    if isinstance(node, StringLiteral):
        return node.value
    if isinstance(node, NumberLiteral):
        return str(node.value)
    return None


def _plus(acc: Value, v: Value) -> Value:
    if isinstance(acc, str) or isinstance(v, str):
        return format_value(acc) + format_value(v)
    return acc + v


class Evaluator:
    """Evaluates trees against one environment, reporting through `log`."""

    def __init__(self, log: Logger, env: Environment | None = None):
        self.log = log
        self.env: Environment = env if env is not None else {}

    def evaluate(self, node: Expr) -> Value:
        if isinstance(node, (NumberLiteral, StringLiteral)):
            return node.value
        # Bare identifiers are not variable reads; use (get name).
        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, ErrorNode):
            self.log.error(node.message)
            return node.message
        if isinstance(node, List):
            return self._eval_list(node)
        raise TypeError(f"not an expression: {node!r}")

    def _eval_list(self, node: List) -> list:
        if not node.elements:
            return []
        head = node.elements[0]
        if not isinstance(head, Identifier):
            return [self.evaluate(e) for e in node.elements]

        op = head.name
        args = node.elements[1:]
        logger.debug("command %s with %d args", op, len(args))

        if op == "print":
            out = []
            for a in args:
                v = self._arg(a)
                self.log.log(v)
                out.append(v)
            return out

        if op == "add":
            return self._fold(args, _plus, _is_scalar, "invalid addition")

        if op in ("sub", "subtract"):
            return self._fold(args, lambda a, b: a - b, _is_number, "invalid subtraction")

        if op in ("mult", "multiply"):
            return self._fold(args, lambda a, b: a * b, _is_number, "invalid multiplication")

        if op in ("div", "divide"):
            return self._fold(args, lambda a, b: a / b, _is_number, "invalid division", check_zero=True)

        if op == "set":
            if len(args) < 2:
                self.log.error("insufficient amount of parameters")
                return []
            name = self._var_name(args[0])
            if name is None:
                return []
            values = [self._arg(a) for a in args[1:]]
            self.env[name] = values[0] if len(values) == 1 else values
            return list(values)

        if op == "get":
            if len(args) < 1:
                self.log.error("insufficient amount of parameters")
                return []
            name = _literal_text(args[0])
            if name is None or name not in self.env:
                return []
            stored = self.env[name]
            return list(stored) if isinstance(stored, list) else [stored]

        self.log.error(f"unknown command '{op}'")
        return [UNKNOWN_COMMAND_RESULT]

    def _arg(self, node: Expr) -> Value:
        return _unwrap(self.evaluate(node))

    def _var_name(self, node: Expr) -> str | None:
        if isinstance(node, Identifier):
            return node.name
        if isinstance(node, StringLiteral):
            return node.value
        self.log.error("variable name must be string or identifier")
        return None

    def _fold(
        self,
        args: tuple[Expr, ...],
        op: Callable[[Value, Value], Value],
        accepts: Callable[[Any], bool],
        message: str,
        check_zero: bool = False,
    ) -> list:
        acc: Value | None = None
        for a in args:
            v = self._arg(a)
            if not accepts(v):
                self.log.error(message)
                continue
            if acc is None:
                acc = v
                continue
            if check_zero and v == 0:
                self.log.error("division by zero")
                continue
            try:
                acc = op(acc, v)
            except OverflowError:
                self.log.error("numeric overflow")
        return [] if acc is None else [acc]


def evaluate(node: Expr, log: Logger, env: Environment | None = None) -> Value:
    """Evaluate a single tree with a throwaway evaluator."""
    return Evaluator(log, env).evaluate(node)
