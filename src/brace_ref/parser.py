"""Lark front end: Brace source text -> AST (see tree.py)."""
from __future__ import annotations

from typing import Dict, List, Optional

from lark import Lark, Token, Transformer, UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken, v_args
from lark.exceptions import VisitError

from .tree import (
    Assign,
    Block,
    Expr,
    IntegerLiteral,
    Print,
    Program,
    SourceMeta,
    Stmt,
    StringLiteral,
    VariableReference,
)

GRAMMAR = r"""
    start: _item*

    _item: _stmt ";"?

    _stmt: assign_stmt
         | print_stmt
         | block_stmt

    assign_stmt: NAME "=" _expr
    print_stmt: "println" "(" _args? ")"
    block_stmt: "{" _item* "}"

    _args: _expr ("," _expr)* ","?

    _expr: string
         | integer
         | var

    string: STRING
    integer: SIGNED_INT
    var: NAME

    COMMENT: /\/\/[^\n]*/

    %import common.CNAME -> NAME
    %import common.ESCAPED_STRING -> STRING
    %import common.SIGNED_INT
    %import common.WS

    %ignore WS
    %ignore COMMENT
"""

class ParseError(Exception):
    """Parse error with position info"""
    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(
            f"{message} at line {line}, col {column}" if line is not None else message
        )

def _meta(meta) -> Optional[SourceMeta]:
    if getattr(meta, "empty", True):
        return None

    return SourceMeta(line=meta.line, column=meta.column)

_ESCAPES: Dict[str, str] = {
    '"': '"',
    '\\': '\\',
    '/': '/',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

def unescape_string(raw: str) -> str:
    """Decode a quoted STRING token; unknown escapes raise ValueError."""
    body = raw[1:-1]
    out: List[str] = []
    i = 0

    while i < len(body):
        ch = body[i]

        if ch != '\\':
            out.append(ch)
            i += 1
            continue

        code = body[i + 1] if i + 1 < len(body) else ''

        if code == 'u':
            digits = body[i + 2:i + 6]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"invalid escape sequence '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            i += 6
            continue

        if code not in _ESCAPES:
            raise ValueError(f"invalid escape sequence '\\{code}'")

        out.append(_ESCAPES[code])
        i += 2

    return "".join(out)

class ToAst(Transformer):
    """Build tree.py nodes from the lark parse tree."""

    def start(self, children: List[Stmt]) -> Program:
        return Program(children)

    @v_args(meta=True, inline=True)
    def assign_stmt(self, meta, name: Token, value: Expr) -> Assign:
        return Assign(str(name), value, meta=_meta(meta))

    @v_args(meta=True)
    def print_stmt(self, meta, values: List[Expr]) -> Print:
        return Print(values, meta=_meta(meta))

    @v_args(meta=True)
    def block_stmt(self, meta, body: List[Stmt]) -> Block:
        return Block(body, meta=_meta(meta))

    @v_args(meta=True, inline=True)
    def string(self, meta, tok: Token) -> StringLiteral:
        return StringLiteral(unescape_string(str(tok)), meta=_meta(meta))

    @v_args(meta=True, inline=True)
    def integer(self, meta, tok: Token) -> IntegerLiteral:
        return IntegerLiteral(int(tok), meta=_meta(meta))

    @v_args(meta=True, inline=True)
    def var(self, meta, tok: Token) -> VariableReference:
        return VariableReference(str(tok), meta=_meta(meta))

_PARSER: Optional[Lark] = None

def make_parser() -> Lark:
    global _PARSER

    if _PARSER is None:
        _PARSER = Lark(GRAMMAR, parser="lalr", propagate_positions=True)

    return _PARSER

def _describe(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedEOF):
        return "Unexpected end of input"

    if isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            return "Unexpected end of input"
        return f"Unexpected token {exc.token.value!r}"

    if isinstance(exc, UnexpectedCharacters):
        return f"Unexpected character {exc.char!r}"

    return "Syntax error"

def parse_source(source: str) -> Program:
    """Parse Brace source code to a Program."""
    try:
        tree = make_parser().parse(source)
    except UnexpectedInput as exc:
        line = exc.line if isinstance(exc.line, int) and exc.line > 0 else None
        column = exc.column if isinstance(exc.column, int) and exc.column > 0 else None
        raise ParseError(_describe(exc), line, column) from exc

    try:
        return ToAst().transform(tree)
    except VisitError as exc:
        meta = _meta(getattr(exc.obj, "meta", None))
        line = meta.line if meta else None
        column = meta.column if meta else None
        raise ParseError(f"Invalid literal: {exc.orig_exc}", line, column) from exc
