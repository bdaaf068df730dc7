from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import List, Optional, TextIO

from .evaluator import Interpreter
from .parser import ParseError, parse_source
from .runtime import BraceRuntimeError
from .tree import pretty
from .utils import debug_py_trace_enabled

def run(src: str, out: Optional[TextIO]=None) -> Interpreter:
    """Parse *src* and execute it on a fresh interpreter."""
    program = parse_source(src)
    interp = Interpreter(out)
    interp.run(program)
    return interp

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing path => read file contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    try:
        is_file = candidate.is_file()
    except OSError:
        is_file = False

    if is_file:
        return candidate.read_text(encoding="utf-8")

    return arg

def _report(exc: Exception) -> None:
    print(f"Error: {exc}", file=sys.stderr)

    if debug_py_trace_enabled():
        print("\nPython traceback:", file=sys.stderr)
        print("".join(traceback.format_tb(exc.__traceback__)), file=sys.stderr, end="")

def main(argv: Optional[List[str]]=None) -> int:
    dump_ast = False
    arg = None
    args = sys.argv[1:] if argv is None else argv

    for token in args:
        if token == "--ast":
            dump_ast = True
            continue

        if token.startswith("--"):
            raise SystemExit(f"Unknown flag: {token}")

        if arg is None:
            arg = token
        else:
            raise SystemExit(f"Unexpected argument: {token}")

    try:
        source = _load_source(arg if arg is not None else "-")
    except (OSError, UnicodeDecodeError) as exc:
        _report(exc)
        return 1

    try:
        if dump_ast:
            print(pretty(parse_source(source)), end="")
        else:
            run(source)
    except (ParseError, BraceRuntimeError) as exc:
        sys.stdout.flush()
        _report(exc)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
