from __future__ import annotations

from typing import Callable

from ..runtime import BraceValue, ScopeStack
from ..tree import Assign, Expr

EvalFunc = Callable[[Expr], BraceValue]

def eval_assign(node: Assign, stack: ScopeStack, eval_func: EvalFunc) -> None:
    """Bind in the innermost frame only; outer bindings are shadowed, not touched."""
    value = eval_func(node.value)
    stack.bind(node.name, value)
