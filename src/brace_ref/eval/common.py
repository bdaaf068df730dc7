from __future__ import annotations

from typing import Any

from ..runtime import BraceRuntimeError, BraceValue
from ..tree import IntegerLiteral, StringLiteral, node_meta

def stringify(value: BraceValue) -> str:
    """Natural textual form: strings verbatim, integers in base 10."""
    match value:
        case StringLiteral(value=s):
            return s
        case IntegerLiteral(value=i):
            return str(i)
        case _:
            raise BraceRuntimeError(f"Cannot render value {value!r}")

def attach_location(exc: BraceRuntimeError, node: Any) -> None:
    exc.attach_location(node_meta(node))
