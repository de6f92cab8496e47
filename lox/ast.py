"""Abstract Syntax Tree (AST) definitions for the Lox language.

Expressions derive from `Expr` and statements from `Stmt`. The parser
builds these nodes once and nothing mutates them afterwards; each node
owns its children.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .token import Token
from .types import LiteralValue


@dataclass(frozen=True)
class Expr:
    """Base class for all expression nodes."""
    pass


@dataclass(frozen=True)
class Literal(Expr):
    value: LiteralValue


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Logical(Expr):
    left: Expr
    operator: Token  # '&&' / 'and' or '||' / 'or'
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Stmt:
    """Base class for all statement nodes."""
    pass


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr]


@dataclass(frozen=True)
class Block(Stmt):
    statements: List[Stmt]


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Block
    else_branch: Optional[Block]


@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Block
    increment: Optional[Expr] = None  # set by `for` desugaring


@dataclass(frozen=True)
class Function(Stmt):
    name: Token
    params: List[Token]
    body: List[Stmt]


@dataclass(frozen=True)
class Return(Stmt):
    keyword: Token
    value: Optional[Expr]


@dataclass(frozen=True)
class Class(Stmt):
    name: Token
    superclass: Optional[Variable]
    methods: List[Function] = field(default_factory=list)


@dataclass(frozen=True)
class Break(Stmt):
    keyword: Token


@dataclass(frozen=True)
class Continue(Stmt):
    keyword: Token


@dataclass(frozen=True)
class Empty(Stmt):
    pass


@dataclass(frozen=True)
class Error(Stmt):
    """Placeholder for a statement that failed to parse."""
    token: Token
    message: str
