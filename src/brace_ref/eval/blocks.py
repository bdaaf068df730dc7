from __future__ import annotations

from typing import Callable, Iterable

from ..runtime import ScopeStack
from ..tree import Block, Stmt

ExecFunc = Callable[[Stmt], None]

def eval_program(statements: Iterable[Stmt], stack: ScopeStack, exec_func: ExecFunc) -> None:
    """Run a statement list under a fresh scope."""
    with stack.scope():
        eval_statements(statements, exec_func)

def eval_block(node: Block, stack: ScopeStack, exec_func: ExecFunc) -> None:
    # An empty body still pushes and pops its frame.
    with stack.scope():
        eval_statements(node.body, exec_func)

def eval_statements(statements: Iterable[Stmt], exec_func: ExecFunc) -> None:
    for stmt in statements:
        exec_func(stmt)
