from __future__ import annotations

from enum import Enum
from typing import Dict, Optional
from typing_extensions import TypeAlias

from .tree import Literal, SourceMeta

# ---------- Value Model ----------

# Bound values are evaluated literals; the evaluator has no other value kinds.
BraceValue: TypeAlias = Literal

class Frame:
    """One lexical scope: the root program or a single block."""

    def __init__(self) -> None:
        self.vars: Dict[str, BraceValue] = {}

    def define(self, name: str, val: BraceValue) -> None:
        self.vars[name] = val

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k}: {v!r}" for k, v in self.vars.items())
        return "Frame{" + pairs + "}"

class EvalState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ABORTED = "aborted"
    COMPLETED = "completed"

# ---------- Exceptions ----------

class BraceRuntimeError(Exception):
    meta: Optional[SourceMeta]

    def __init__(self, message: str):
        super().__init__(message)
        self.meta = None

    def attach_location(self, meta: Optional[SourceMeta]) -> None:
        """Record *meta* unless an inner node already did."""
        if self.meta is None and meta is not None:
            self.meta = meta

    def __str__(self) -> str:
        msg = super().__str__()

        if self.meta is None:
            return msg

        return f"{msg} (line {self.meta.line}, col {self.meta.column})"

class UnboundVariable(BraceRuntimeError):
    def __init__(self, name: str):
        super().__init__(f"Reference to unknown variable '{name}'")
        self.name = name

class ScopeError(BraceRuntimeError):
    pass
