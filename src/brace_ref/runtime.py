from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List

from .types import (
    BraceRuntimeError, BraceValue, EvalState, Frame, ScopeError, UnboundVariable,
)
from .utils import trace_scope, trace_scopes_enabled

__all__ = [
    "BraceRuntimeError",
    "BraceValue",
    "EvalState",
    "Frame",
    "ScopeError",
    "ScopeStack",
    "UnboundVariable",
]

class ScopeStack:
    """Ordered stack of binding frames; index 0 is the root frame."""

    def __init__(self) -> None:
        self._frames: List[Frame] = []
        self._trace = trace_scopes_enabled()

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def current(self) -> Frame:
        if not self._frames:
            raise ScopeError("No active scope")

        return self._frames[-1]

    def push(self) -> Frame:
        frame = Frame()
        self._frames.append(frame)

        if self._trace:
            trace_scope("push", len(self._frames))

        return frame

    def pop(self) -> Frame:
        if not self._frames:
            raise ScopeError("Cannot pop scope: stack is empty")

        frame = self._frames.pop()

        if self._trace:
            trace_scope("pop", len(self._frames))

        return frame

    @contextmanager
    def scope(self) -> Iterator[Frame]:
        """Push a fresh frame for the duration of the ``with`` body."""
        frame = self.push()

        try:
            yield frame
        finally:
            self.pop()

    def bind(self, name: str, value: BraceValue) -> None:
        self.current.define(name, value)

    def resolve(self, name: str) -> BraceValue:
        for frame in reversed(self._frames):
            if name in frame:
                return frame.vars[name]

        raise UnboundVariable(name)
