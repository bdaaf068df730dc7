"""AST node classes for Brace programs.

Nodes are plain frozen dataclasses. They are built by the parser or by hand
and are never mutated by the evaluator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple, Union
from typing_extensions import TypeAlias


@dataclass(frozen=True)
class SourceMeta:
    line: int
    column: int


def _meta_field() -> Any:
    return field(default=None, compare=False, repr=False)


# ---------- Expressions ----------

@dataclass(frozen=True)
class StringLiteral:
    value: str
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class VariableReference:
    name: str
    meta: Optional[SourceMeta] = _meta_field()


Literal: TypeAlias = Union[StringLiteral, IntegerLiteral]
Expr: TypeAlias = Union[StringLiteral, IntegerLiteral, VariableReference]

# ---------- Statements ----------

@dataclass(frozen=True)
class Assign:
    name: str
    value: Expr
    meta: Optional[SourceMeta] = _meta_field()


@dataclass(frozen=True)
class Print:
    values: Tuple[Expr, ...]
    meta: Optional[SourceMeta] = _meta_field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", tuple(self.values))


@dataclass(frozen=True)
class Block:
    body: Tuple[Stmt, ...]
    meta: Optional[SourceMeta] = _meta_field()

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


Stmt: TypeAlias = Union[Assign, Print, Block]


@dataclass(frozen=True)
class Program:
    statements: Tuple[Stmt, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", tuple(self.statements))

    def __iter__(self):
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)


Node: TypeAlias = Union[Program, Stmt, Expr]


def program(*statements: Stmt) -> Program:
    return Program(statements)


def as_program(source: Union[Program, Iterable[Stmt]]) -> Program:
    if isinstance(source, Program):
        return source

    return Program(tuple(source))


def is_literal(node: Node) -> bool:
    return isinstance(node, (StringLiteral, IntegerLiteral))


def node_meta(node: object) -> Optional[SourceMeta]:
    return getattr(node, "meta", None)


def pretty(node: Node, indent: str = '  ') -> str:
    """Return an indented, one-node-per-line dump of *node*."""
    def _pretty(n: Node, level: int) -> List[str]:
        pad = indent * level

        match n:
            case Program(statements=stmts):
                lines = [f'{pad}program\n']
                for stmt in stmts:
                    lines.extend(_pretty(stmt, level + 1))
                return lines
            case Assign(name=name, value=value):
                return [f'{pad}assign\t{name}\n', *_pretty(value, level + 1)]
            case Print(values=values):
                lines = [f'{pad}print\n']
                for value in values:
                    lines.extend(_pretty(value, level + 1))
                return lines
            case Block(body=body):
                lines = [f'{pad}block\n']
                for stmt in body:
                    lines.extend(_pretty(stmt, level + 1))
                return lines
            case StringLiteral(value=s):
                return [f'{pad}STRING\t{s!r}\n']
            case IntegerLiteral(value=i):
                return [f'{pad}INT\t{i!r}\n']
            case VariableReference(name=name):
                return [f'{pad}IDENT\t{name!r}\n']
            case _:
                raise TypeError(f"Not a Brace AST node: {n!r}")

    return ''.join(_pretty(node, 0))
