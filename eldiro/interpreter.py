"""Evaluator and top-level driver for the Eldiro language.

`parse` turns one line of source into a `ParsedStatement`, insisting that
the whole input is used up; `parse_program` does the same for a file of
statements. Both results are evaluated by an `Interpreter` against an
`Environment` the caller owns, so a host can keep bindings alive across
many calls.

The interpreter walks the tree with one isinstance dispatch per node kind.
Blocks and function calls get a fresh child environment that is dropped
as soon as their evaluation finishes; `let` and `fn` always write into the
environment they are evaluated in.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from .ast import (
    Op, Number, BinaryOp, BindingUsage, Block, FuncCall, Expr,
    BindingDef, FuncDef, ExprStmt, Stmt, Program,
)
from .environment import Environment
from .errors import ParseError, EvalError, LimitError
from .parser import parse_statement, parse_statements
from .scanner import extract_whitespace
from .types import NumberVal, UnitVal, Value, truncating_div, type_name


class Interpreter:
    """Tree-walking evaluator for Eldiro statements and expressions."""
    def __init__(self, debug_level: int = 0, debug_file: Optional[str] = None):
        self.debug_level = debug_level
        self.debug_fp: Optional[TextIO] = None
        if debug_level > 0 and debug_file:
            self.debug_fp = open(debug_file, 'w', encoding='utf-8')

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg, file=sys.stderr)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def run(self, program: Program, env: Optional[Environment] = None) -> Value:
        """Evaluate every statement of `program` directly in `env`.

        Unlike a block, a program does not open a child scope: its
        bindings land in `env` and stay there afterwards.
        """
        if env is None:
            env = Environment()
        result: Value = UnitVal()
        for stmt in program.body:
            result = self.execute_toplevel(stmt, env)
        return result

    def execute_toplevel(self, stmt: Stmt, env: Environment) -> Value:
        if self.debug_level >= 1:
            self.debug(f"eval {type(stmt).__name__}")
        try:
            result = self.execute(stmt, env)
        except RecursionError:
            # Runaway recursion unwinds to here, where the stack is shallow again.
            raise EvalError('maximum call depth exceeded') from None
        if self.debug_level >= 1:
            self.debug(f"  -> {type_name(result)} {result!r}")
        return result

    def execute(self, node: Stmt, env: Environment) -> Value:
        if isinstance(node, BindingDef):
            value = self.evaluate(node.value, env)
            env.store_binding(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"let {node.name} = {value!r} (depth {env.depth})")
            return UnitVal()
        if isinstance(node, FuncDef):
            env.store_func(node.name, node.params, node.body)
            if self.debug_level >= 2:
                self.debug(f"define function {node.name}/{len(node.params)} (depth {env.depth})")
            return UnitVal()
        if isinstance(node, ExprStmt):
            return self.evaluate(node.expr, env)
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr, env: Environment) -> Value:
        if isinstance(node, Number):
            return NumberVal(node.value)
        if isinstance(node, BinaryOp):
            return NumberVal(self.apply_binary_op(node.op, node.lhs.value, node.rhs.value))
        if isinstance(node, BindingUsage):
            value = env.get_binding(node.name)
            if self.debug_level >= 3:
                self.debug(f"lookup {node.name} -> {value!r}")
            return value
        if isinstance(node, Block):
            return self.execute_block(node.statements, env)
        if isinstance(node, FuncCall):
            return self.call_function(node, env)
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def execute_block(self, statements: List[Stmt], env: Environment) -> Value:
        if not statements:
            return UnitVal()
        block_env = env.create_child()
        if self.debug_level >= 3:
            self.debug(f"enter block scope (depth {block_env.depth})")
        result: Value = UnitVal()
        for stmt in statements:
            result = self.execute(stmt, block_env)
        return result

    def call_function(self, call: FuncCall, env: Environment) -> Value:
        call_env = env.create_child()
        params, body = env.get_func(call.callee)
        if len(params) != len(call.args):
            raise EvalError(f"expected {len(params)} parameters, got {len(call.args)}")
        if self.debug_level >= 2:
            self.debug(f"call {call.callee} with {len(call.args)} argument(s) (depth {call_env.depth})")
        # Arguments see the call scope, so later ones can read earlier parameters.
        for name, arg in zip(params, call.args):
            call_env.store_binding(name, self.evaluate(arg, call_env))
        return self.evaluate(body, call_env)

    def apply_binary_op(self, op: Op, a: int, b: int) -> int:
        if op is Op.ADD:
            return a + b
        if op is Op.SUB:
            return a - b
        if op is Op.MUL:
            return a * b
        if op is Op.DIV:
            return truncating_div(a, b)
        raise NotImplementedError(f"apply_binary_op: unexpected operator {op}")


@dataclass
class ParsedStatement:
    """A single statement that consumed all of its source text."""
    statement: Stmt

    def eval(self, env: Environment, interpreter: Optional[Interpreter] = None) -> Value:
        if interpreter is None:
            interpreter = Interpreter()
        return interpreter.execute_toplevel(self.statement, env)


def _ensure_consumed(remainder: str):
    remainder, _ = extract_whitespace(remainder)
    if remainder:
        raise ParseError('input was not consumed fully')


def parse(source: str) -> ParsedStatement:
    """Parse exactly one statement from `source`.

    Surrounding whitespace is allowed; anything else left over after the
    statement is an error.
    """
    s, _ = extract_whitespace(source)
    try:
        s, stmt = parse_statement(s)
    except RecursionError:
        raise LimitError('input is nested too deeply') from None
    _ensure_consumed(s)
    return ParsedStatement(stmt)


def parse_program(source: str) -> Program:
    try:
        s, statements = parse_statements(source)
        if s and not statements:
            # Surface the real syntax error instead of the generic one.
            parse_statement(s)
    except RecursionError:
        raise LimitError('input is nested too deeply') from None
    _ensure_consumed(s)
    return Program(statements)


def run_program(source: str, env: Optional[Environment] = None, debug_level: int = 0) -> Value:
    """Convenience function to parse and evaluate a whole program from source."""
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.run(parse_program(source), env)
    finally:
        interpreter.close()
