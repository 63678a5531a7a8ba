"""Abstract Syntax Tree (AST) definitions for Eldiro.

Expressions and statements are closed sets of dataclasses. The parser in
`eldiro.parser` builds them and the interpreter walks them with a single
isinstance dispatch, so no node carries behaviour of its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Union


class Op(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'


@dataclass
class Number:
    value: int


@dataclass
class BinaryOp:
    # Operands are literals only; the grammar has no nested arithmetic.
    lhs: Number
    rhs: Number
    op: Op


@dataclass
class BindingUsage:
    name: str


@dataclass
class Block:
    statements: List['Stmt']


@dataclass
class FuncCall:
    callee: str
    args: List['Expr']


Expr = Union[Number, BinaryOp, BindingUsage, Block, FuncCall]


@dataclass
class BindingDef:
    name: str
    value: Expr


@dataclass
class FuncDef:
    name: str
    params: List[str]
    body: Expr


@dataclass
class ExprStmt:
    expr: Expr


Stmt = Union[BindingDef, FuncDef, ExprStmt]


@dataclass
class Program:
    body: List[Stmt]
