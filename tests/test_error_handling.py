from __future__ import annotations

import io
from textwrap import dedent

import pytest

from tests.support.harness import (
    BraceRuntimeError,
    EvalState,
    Interpreter,
    Print,
    ScopeError,
    UnboundVariable,
    assign,
    block,
    out,
    run_program,
    string,
    var,
)


def test_unbound_reference_raises_with_name() -> None:
    interp = Interpreter(io.StringIO())

    with pytest.raises(UnboundVariable) as exc_info:
        interp.run([out(var("z"))])

    assert exc_info.value.name == "z"
    assert isinstance(exc_info.value, BraceRuntimeError)
    assert interp.out.getvalue() == ""  # type: ignore[attr-defined]


def test_output_before_failure_is_kept() -> None:
    sink = io.StringIO()
    interp = Interpreter(sink)

    with pytest.raises(UnboundVariable):
        interp.run([
            out("first"),
            block(out("second"), out("partial ", var("nope"))),
            out("never"),
        ])

    assert sink.getvalue() == "first\nsecond\n"


def test_failed_print_writes_nothing() -> None:
    sink = io.StringIO()

    with pytest.raises(UnboundVariable):
        Interpreter(sink).run([out("a", var("b"), "c")])

    assert sink.getvalue() == ""


def test_unbound_in_assignment_value() -> None:
    interp = Interpreter(io.StringIO())

    with pytest.raises(UnboundVariable) as exc_info:
        interp.run([block(assign("x", var("y")))])

    assert exc_info.value.name == "y"
    assert interp.depth == 0


def test_abort_unwinds_every_frame() -> None:
    interp = Interpreter(io.StringIO())
    deep = block(block(block(block(out(var("gone"))))))

    with pytest.raises(UnboundVariable):
        interp.run([deep])

    assert interp.depth == 0
    assert interp.state is EvalState.ABORTED


def test_state_transitions() -> None:
    interp = Interpreter(io.StringIO())
    assert interp.state is EvalState.IDLE

    interp.run([out("ok")])
    assert interp.state is EvalState.COMPLETED

    with pytest.raises(UnboundVariable):
        interp.run([out(var("x"))])
    assert interp.state is EvalState.ABORTED


def test_each_run_is_a_fresh_lifecycle() -> None:
    sink = io.StringIO()
    interp = Interpreter(sink)

    interp.run([assign("x", "kept?")])

    with pytest.raises(UnboundVariable):
        interp.run([out(var("x"))])

    interp.run([assign("x", "again"), out(var("x"))])
    assert sink.getvalue() == "again\n"
    assert interp.state is EvalState.COMPLETED


def test_reentrant_run_is_rejected() -> None:
    class Reentrant(Interpreter):
        def execute_statement(self, stmt) -> None:
            self.run([out("inner")])

    interp = Reentrant(io.StringIO())

    with pytest.raises(ScopeError):
        interp.run([out("outer")])

    assert interp.depth == 0
    assert interp.state is EvalState.ABORTED


def test_unknown_statement_is_runtime_error() -> None:
    with pytest.raises(BraceRuntimeError):
        Interpreter(io.StringIO()).run([string("not a statement")])  # type: ignore[list-item]


def test_unknown_expression_is_runtime_error() -> None:
    with pytest.raises(BraceRuntimeError):
        Interpreter(io.StringIO()).run([Print([object()])])  # type: ignore[list-item]


def test_error_message_carries_location() -> None:
    source = dedent(
        """\
        x = 1
        {
            println("x = ", missing)
        }
        """
    )

    with pytest.raises(UnboundVariable) as exc_info:
        run_program(source)

    err = exc_info.value
    assert err.meta is not None
    assert (err.meta.line, err.meta.column) == (3, 21)
    assert str(err) == "Reference to unknown variable 'missing' (line 3, col 21)"


def test_error_without_location_is_plain() -> None:
    with pytest.raises(UnboundVariable) as exc_info:
        Interpreter(io.StringIO()).run([out(var("q"))])

    assert str(exc_info.value) == "Reference to unknown variable 'q'"
