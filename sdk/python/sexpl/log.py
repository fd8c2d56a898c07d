"""Output sinks for lexer, parser and evaluator diagnostics and program output.

Every stage takes a `Logger`: anything with `log(value)` and `error(message)`.
Colored console output requires the `termcolor` package.
"""

import logging
import sys
from typing import Any, Protocol, TextIO

from termcolor import colored


class Logger(Protocol):
    def log(self, value: Any) -> None: ...

    def error(self, message: str) -> None: ...


def format_value(value: Any, nested: bool = False) -> str:
    """Display form of a runtime value.

    Multi-values are space-joined; a multi-value inside another one is
    wrapped in parentheses. Integral floats drop their fractional part.
    Integers too long for decimal conversion display as their bit length.
    """
    if isinstance(value, list):
        text = " ".join(format_value(v, nested=True) for v in value)
        return f"({text})" if nested else text
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            return f"<{value.bit_length()}-bit integer>"
    return str(value)


class ConsoleLogger:
    """Writes program output to `out` and diagnostics to `err`."""
    ERROR = "red"

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None, color: bool = True):
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.color = color

    def log(self, value: Any) -> None:
        print(format_value(value), file=self.out)

    def error(self, message: str) -> None:
        prefix = "error: "
        if self.color:
            prefix = colored(prefix, ConsoleLogger.ERROR, attrs=["bold"])
        print(prefix + message, file=self.err)


class CaptureLogger:
    """Keeps everything it is given. Used by tests and by hosts that render elsewhere."""

    def __init__(self):
        self.values: list[Any] = []
        self.errors: list[str] = []

    @property
    def output(self) -> list[str]:
        return [format_value(v) for v in self.values]

    def log(self, value: Any) -> None:
        self.values.append(value)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def clear(self) -> None:
        self.values.clear()
        self.errors.clear()


class StdlibLogger:
    """Forwards to a `logging.Logger`: output at INFO, diagnostics at ERROR."""

    def __init__(self, name: str = "sexpl.program"):
        self.logger = logging.getLogger(name)

    def log(self, value: Any) -> None:
        self.logger.info("%s", format_value(value))

    def error(self, message: str) -> None:
        self.logger.error("%s", message)
