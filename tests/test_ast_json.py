import json

import pytest

from eldiro.ast import Op, Number, BinaryOp, BindingUsage, FuncCall
from eldiro.ast_json import ast_to_obj, ast_from_obj, program_from_obj
from eldiro.interpreter import parse_program


def test_program_survives_json_round_trip():
    program = parse_program("""
let a = 10 / 2
fn second x y => { y }
second 1 a
""")
    restored = ast_from_obj(json.loads(json.dumps(ast_to_obj(program))))
    assert restored == program


def test_operators_are_stored_by_symbol():
    obj = ast_to_obj(BinaryOp(Number(1), Number(2), Op.SUB))
    assert obj == {
        "type": "BinaryOp",
        "op": "-",
        "lhs": {"type": "Number", "value": 1},
        "rhs": {"type": "Number", "value": 2},
    }


def test_func_call_to_obj():
    obj = ast_to_obj(FuncCall('f', [BindingUsage('x')]))
    assert obj == {"type": "FuncCall", "callee": "f", "args": [{"type": "BindingUsage", "name": "x"}]}


def test_unknown_type_is_rejected():
    with pytest.raises(ValueError):
        ast_from_obj({"type": "WhileStmt"})


def test_non_node_is_rejected():
    with pytest.raises(TypeError):
        ast_to_obj(3.5)


def test_expression_in_program_body_is_rejected():
    with pytest.raises(ValueError) as exc:
        ast_from_obj({"type": "Program", "body": [{"type": "Number", "value": 1}]})
    assert str(exc.value) == 'expected a statement, got Number'


def test_operation_operands_must_be_numbers():
    obj = {
        "type": "BinaryOp",
        "op": "+",
        "lhs": {"type": "BindingUsage", "name": "x"},
        "rhs": {"type": "Number", "value": 1},
    }
    with pytest.raises(ValueError):
        ast_from_obj(obj)


def test_program_from_obj_requires_program():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Number", "value": 1})


def test_non_object_is_rejected():
    with pytest.raises(ValueError):
        ast_from_obj([1, 2])
