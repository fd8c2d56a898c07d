from dataclasses import dataclass
from typing import Union

# Runtime values: int, float (from div), str, or a multi-value list.
Value = Union[int, float, str, list]

# One flat namespace per session, name -> last bound value.
Environment = dict[str, Value]


@dataclass
class Options:
    color: bool = True
    show_tokens: bool = False
    show_ast: bool = False
    echo_results: bool = True
