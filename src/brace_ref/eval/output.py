from __future__ import annotations

from typing import Callable, Iterable, List, TextIO

from ..runtime import BraceValue
from ..tree import Expr
from .common import stringify

EvalFunc = Callable[[Expr], BraceValue]

def eval_print(values: Iterable[Expr], out: TextIO, eval_func: EvalFunc) -> None:
    # The whole line is evaluated before the first write.
    rendered: List[str] = []

    for expr in values:
        rendered.append(stringify(eval_func(expr)))

    out.write("".join(rendered) + "\n")
