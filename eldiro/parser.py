"""Parser for the Eldiro language.

The grammar is small enough that every rule is a plain function taking
the remaining input and returning `(remainder, node)`. Rules are built
only from the primitives in `eldiro.scanner`; a rule that does not match
raises `ParseError` without having changed anything, so alternatives are
tried in order against the same input and the first one that succeeds
wins:

    statement  := binding_def | func_def | expr
    binding_def:= "let" WS+ IDENT WS* "=" WS* expr
    func_def   := "fn" WS+ IDENT WS* (IDENT WS*)* "=>" WS* expr
    expr       := operation | number | func_call | binding_usage | block
    operation  := number WS* op WS* number
    func_call  := IDENT " "* expr (" "* expr)*
    block      := "{" WS* (statement WS*)* "}"
"""

from __future__ import annotations

from typing import Callable, List, Sequence, Tuple, TypeVar

from .ast import (
    Op, Number, BinaryOp, BindingUsage, Block, FuncCall, Expr,
    BindingDef, FuncDef, ExprStmt, Stmt,
)
from .errors import ParseError, LimitError
from .scanner import (
    tag, extract_digits, extract_whitespace, extract_whitespace_required,
    extract_spaces, extract_identifier, sequence, sequence_required,
)

T = TypeVar('T')

OPERATORS = {op.value: op for op in Op}

# Default int/str conversion limit of CPython 3.11+.
MAX_NUMBER_DIGITS = 4300


def first_of(alternatives: Sequence[Callable[[str], Tuple[str, T]]], s: str) -> Tuple[str, T]:
    """Return the result of the first alternative that parses `s`.

    If none match, the error of the last alternative is raised.
    """
    error = ParseError('no alternatives to try')
    for alternative in alternatives:
        try:
            return alternative(s)
        except ParseError as e:
            error = e
    raise error


def parse_number(s: str) -> Tuple[str, Number]:
    s, digits = extract_digits(s)
    if len(digits) > MAX_NUMBER_DIGITS:
        raise LimitError('number literal too long')
    try:
        value = int(digits)
    except ValueError:
        # The interpreter's own int/str conversion limit may be lower.
        raise LimitError('number literal too long') from None
    return s, Number(value)


def parse_op(s: str) -> Tuple[str, Op]:
    def symbol(literal: str) -> Callable[[str], Tuple[str, Op]]:
        return lambda s: (tag(literal, s), OPERATORS[literal])
    return first_of([symbol(literal) for literal in OPERATORS], s)


def parse_operation(s: str) -> Tuple[str, BinaryOp]:
    s, lhs = parse_number(s)
    s, _ = extract_whitespace(s)
    s, op = parse_op(s)
    s, _ = extract_whitespace(s)
    s, rhs = parse_number(s)
    return s, BinaryOp(lhs, rhs, op)


def parse_binding_usage(s: str) -> Tuple[str, BindingUsage]:
    s, name = extract_identifier(s)
    return s, BindingUsage(name)


def parse_func_call(s: str) -> Tuple[str, FuncCall]:
    s, callee = extract_identifier(s)
    s, _ = extract_spaces(s)
    s, args = sequence_required(parse_expr, extract_spaces, s)
    return s, FuncCall(callee, args)


def parse_block(s: str) -> Tuple[str, Block]:
    s = tag('{', s)
    s, _ = extract_whitespace(s)
    s, statements = sequence(parse_statement, extract_whitespace, s)
    s, _ = extract_whitespace(s)
    s = tag('}', s)
    return s, Block(statements)


def parse_expr(s: str) -> Tuple[str, Expr]:
    return first_of([
        parse_operation,
        parse_number,
        parse_func_call,
        parse_binding_usage,
        parse_block,
    ], s)


def parse_binding_def(s: str) -> Tuple[str, BindingDef]:
    s = tag('let', s)
    s, _ = extract_whitespace_required(s)
    s, name = extract_identifier(s)
    s, _ = extract_whitespace(s)
    s = tag('=', s)
    s, _ = extract_whitespace(s)
    s, value = parse_expr(s)
    return s, BindingDef(name, value)


def parse_func_def(s: str) -> Tuple[str, FuncDef]:
    s = tag('fn', s)
    s, _ = extract_whitespace_required(s)
    s, name = extract_identifier(s)
    s, _ = extract_whitespace(s)
    s, params = sequence(extract_identifier, extract_whitespace, s)
    s = tag('=>', s)
    s, _ = extract_whitespace(s)
    s, body = parse_expr(s)
    return s, FuncDef(name, params, body)


def parse_expr_stmt(s: str) -> Tuple[str, ExprStmt]:
    s, expr = parse_expr(s)
    return s, ExprStmt(expr)


def parse_statement(s: str) -> Tuple[str, Stmt]:
    return first_of([parse_binding_def, parse_func_def, parse_expr_stmt], s)


def parse_statements(s: str) -> Tuple[str, List[Stmt]]:
    """Parse whitespace-separated statements until one fails to match."""
    s, _ = extract_whitespace(s)
    return sequence(parse_statement, extract_whitespace, s)
