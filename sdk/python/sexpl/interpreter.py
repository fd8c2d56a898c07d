"""Top-level run API: source text in, value out, output through a logger."""

from typing import Optional

from .evaluator import Evaluator
from .expr import format_expr
from .lexer import scan
from .log import ConsoleLogger, Logger
from .parser import parse
from .types import Environment, Options, Value


class Session:
    """One evaluator and its environment, reused across `run` calls.

    With `show_tokens` / `show_ast` set, the token list and the parsed tree
    are sent to the logger before evaluation.
    """

    def __init__(self, log: Optional[Logger] = None, options: Optional[Options] = None,
                 env: Optional[Environment] = None):
        self.options = options or Options()
        self.log = log if log is not None else ConsoleLogger(color=self.options.color)
        self.evaluator = Evaluator(self.log, env)

    @property
    def env(self) -> Environment:
        return self.evaluator.env

    def run(self, src: str) -> Value:
        tokens = scan(src, self.log)
        if self.options.show_tokens:
            self.log.log([repr(t) for t in tokens])
        tree = parse(tokens, self.log)
        if self.options.show_ast:
            self.log.log(format_expr(tree))
        return self.evaluator.evaluate(tree)


def run(src: str, log: Optional[Logger] = None, env: Optional[Environment] = None) -> Value:
    """Run a program in a fresh session.

    Args:
        src: Program source, a single parenthesized form
        log: Output sink (defaults to the console)
        env: Variables to start from; mutated by `set`

    Returns:
        The value of the top-level form
    """
    return Session(log, env=env).run(src)
