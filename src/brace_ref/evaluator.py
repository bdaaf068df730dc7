from __future__ import annotations

import sys
from typing import Callable, Dict, Iterable, Optional, TextIO, Union

from .runtime import (
    BraceRuntimeError,
    BraceValue,
    EvalState,
    ScopeError,
    ScopeStack,
)
from .tree import (
    Assign,
    Block,
    Expr,
    IntegerLiteral,
    Print,
    Program,
    Stmt,
    StringLiteral,
    VariableReference,
    as_program,
)
from .eval.bind import eval_assign
from .eval.blocks import eval_block, eval_program
from .eval.common import attach_location
from .eval.output import eval_print


class Interpreter:
    """Tree-walking evaluator over an explicit stack of binding frames.

    One instance runs one program at a time. ``run`` pushes the root frame,
    executes the top-level statements and pops the root frame again; every
    block in between gets its own frame, released on every exit path.
    """

    def __init__(self, out: Optional[TextIO]=None):
        self.out: TextIO = out if out is not None else sys.stdout
        self.stack = ScopeStack()
        self.state = EvalState.IDLE

    # ---------------- Public API ----------------

    def run(self, program: Union[Program, Iterable[Stmt]]) -> None:
        if self.state is EvalState.RUNNING:
            raise ScopeError("Interpreter is already running a program")

        if self.stack.depth != 0:
            raise ScopeError(f"Stale scopes on entry (depth {self.stack.depth})")

        ast = as_program(program)
        self.state = EvalState.RUNNING

        try:
            eval_program(ast.statements, self.stack, self.execute_statement)
        except BaseException:
            self.state = EvalState.ABORTED
            raise

        self.state = EvalState.COMPLETED

    def execute_statement(self, stmt: Stmt) -> None:
        handler = _STMT_DISPATCH.get(type(stmt))
        if handler is None:
            raise BraceRuntimeError(f"Unknown statement: {stmt!r}")

        try:
            handler(self, stmt)
        except BraceRuntimeError as e:
            attach_location(e, stmt)
            raise

    def evaluate(self, expr: Expr) -> BraceValue:
        match expr:
            case StringLiteral() | IntegerLiteral():
                return expr
            case VariableReference(name=name):
                try:
                    return self.resolve(name)
                except BraceRuntimeError as e:
                    attach_location(e, expr)
                    raise
            case _:
                raise BraceRuntimeError(f"Unknown expression: {expr!r}")

    def resolve(self, name: str) -> BraceValue:
        return self.stack.resolve(name)

    def bind(self, name: str, value: BraceValue) -> None:
        self.stack.bind(name, value)

    def print(self, values: Iterable[Expr]) -> None:
        eval_print(values, self.out, self.evaluate)

    @property
    def depth(self) -> int:
        return self.stack.depth

# ---------------- Dispatch ----------------

def _exec_assign(interp: Interpreter, node: Assign) -> None:
    eval_assign(node, interp.stack, interp.evaluate)

def _exec_print(interp: Interpreter, node: Print) -> None:
    interp.print(node.values)

def _exec_block(interp: Interpreter, node: Block) -> None:
    eval_block(node, interp.stack, interp.execute_statement)

_STMT_DISPATCH: Dict[type, Callable[[Interpreter, Stmt], None]] = {
    Assign: _exec_assign,
    Print: _exec_print,
    Block: _exec_block,
}


def run_program(program: Union[Program, Iterable[Stmt]], out: Optional[TextIO]=None) -> Interpreter:
    """Run *program* on a fresh interpreter and return it for inspection."""
    interp = Interpreter(out)
    interp.run(program)
    return interp
