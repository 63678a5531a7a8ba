"""JSON serialization/deserialization for the Eldiro AST.

This module converts between AST dataclasses and plain Python dict/list
structures suitable for JSON encoding. Each node becomes a dict tagged
with its class name under "type"; operators are stored by symbol.
"""

from __future__ import annotations

from typing import Any, Dict

from .ast import (
    Op,
    Number,
    BinaryOp,
    BindingUsage,
    Block,
    FuncCall,
    BindingDef,
    FuncDef,
    ExprStmt,
    Program,
)


def ast_to_obj(node: Any) -> Any:
    if isinstance(node, Program):
        return {"type": "Program", "body": [ast_to_obj(n) for n in node.body]}
    if isinstance(node, BindingDef):
        return {"type": "BindingDef", "name": node.name, "value": ast_to_obj(node.value)}
    if isinstance(node, FuncDef):
        return {
            "type": "FuncDef",
            "name": node.name,
            "params": list(node.params),
            "body": ast_to_obj(node.body),
        }
    if isinstance(node, ExprStmt):
        return {"type": "ExprStmt", "expr": ast_to_obj(node.expr)}
    if isinstance(node, Number):
        return {"type": "Number", "value": node.value}
    if isinstance(node, BinaryOp):
        return {
            "type": "BinaryOp",
            "op": node.op.value,
            "lhs": ast_to_obj(node.lhs),
            "rhs": ast_to_obj(node.rhs),
        }
    if isinstance(node, BindingUsage):
        return {"type": "BindingUsage", "name": node.name}
    if isinstance(node, Block):
        return {"type": "Block", "statements": [ast_to_obj(s) for s in node.statements]}
    if isinstance(node, FuncCall):
        return {"type": "FuncCall", "callee": node.callee, "args": [ast_to_obj(a) for a in node.args]}
    raise TypeError(f"Unsupported AST node for serialization: {type(node).__name__}")


STATEMENT_TYPES = (BindingDef, FuncDef, ExprStmt)
EXPRESSION_TYPES = (Number, BinaryOp, BindingUsage, Block, FuncCall)


def _stmt_from_obj(obj: Any) -> Any:
    node = ast_from_obj(obj)
    if not isinstance(node, STATEMENT_TYPES):
        raise ValueError(f"expected a statement, got {type(node).__name__}")
    return node


def _expr_from_obj(obj: Any) -> Any:
    node = ast_from_obj(obj)
    if not isinstance(node, EXPRESSION_TYPES):
        raise ValueError(f"expected an expression, got {type(node).__name__}")
    return node


def _number_from_obj(obj: Any) -> Number:
    node = ast_from_obj(obj)
    if not isinstance(node, Number):
        raise ValueError(f"expected a Number operand, got {type(node).__name__}")
    return node


def program_from_obj(obj: Any) -> Program:
    node = ast_from_obj(obj)
    if not isinstance(node, Program):
        raise ValueError(f"expected a Program, got {type(node).__name__}")
    return node


def ast_from_obj(obj: Dict[str, Any]) -> Any:
    if not isinstance(obj, dict):
        raise ValueError(f"expected an AST object, got {type(obj).__name__}")
    t = obj.get("type")
    if t == "Program":
        return Program([_stmt_from_obj(n) for n in obj["body"]])
    if t == "BindingDef":
        return BindingDef(obj["name"], _expr_from_obj(obj["value"]))
    if t == "FuncDef":
        return FuncDef(obj["name"], list(obj.get("params", [])), _expr_from_obj(obj["body"]))
    if t == "ExprStmt":
        return ExprStmt(_expr_from_obj(obj["expr"]))
    if t == "Number":
        return Number(int(obj["value"]))
    if t == "BinaryOp":
        return BinaryOp(_number_from_obj(obj["lhs"]), _number_from_obj(obj["rhs"]), Op(obj["op"]))
    if t == "BindingUsage":
        return BindingUsage(obj["name"])
    if t == "Block":
        return Block([_stmt_from_obj(s) for s in obj.get("statements", [])])
    if t == "FuncCall":
        return FuncCall(obj["callee"], [_expr_from_obj(a) for a in obj.get("args", [])])
    raise ValueError(f"Unknown AST object type: {t}")
