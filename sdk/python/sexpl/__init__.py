from .lexer import scan
from .parser import parse, parse_source
from .evaluator import Evaluator, evaluate
from .interpreter import Session, run
from .log import CaptureLogger, ConsoleLogger, StdlibLogger, format_value

__all__ = [
    "scan", "parse", "parse_source", "Evaluator", "evaluate", "Session", "run",
    "CaptureLogger", "ConsoleLogger", "StdlibLogger", "format_value",
]
