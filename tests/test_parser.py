import pytest

from eldiro.ast import (
    Op, Number, BinaryOp, BindingUsage, Block, FuncCall, BindingDef, FuncDef, ExprStmt,
)
from eldiro.errors import ParseError, LimitError
from eldiro.parser import (
    parse_number, parse_op, parse_expr, parse_binding_def, parse_func_def,
    parse_func_call, parse_block, parse_statement, parse_statements,
)


def test_parse_number():
    assert parse_number('123') == ('', Number(123))


def test_parse_number_as_expression():
    assert parse_expr('456') == ('', Number(456))


@pytest.mark.parametrize('symbol, op', [('+', Op.ADD), ('-', Op.SUB), ('*', Op.MUL), ('/', Op.DIV)])
def test_parse_operator(symbol, op):
    assert parse_op(symbol) == ('', op)


def test_parse_unknown_operator():
    with pytest.raises(ParseError):
        parse_op('%')


def test_parse_one_plus_two():
    assert parse_expr('1+2') == ('', BinaryOp(Number(1), Number(2), Op.ADD))


def test_parse_expression_with_whitespaces():
    assert parse_expr('1 + 2') == ('', BinaryOp(Number(1), Number(2), Op.ADD))


def test_operation_without_right_operand_falls_back_to_number():
    assert parse_expr('1 + x') == (' + x', Number(1))


def test_parse_binding_usage():
    assert parse_expr('bar') == ('', BindingUsage('bar'))


def test_parse_block():
    assert parse_expr('{ 200 }') == ('', Block([ExprStmt(Number(200))]))


def test_parse_empty_block():
    assert parse_block('{}') == ('', Block([]))


def test_parse_block_with_multiple_statements():
    source = """{
    let a = 10
    let b = a
    b
}"""
    assert parse_block(source) == (
        '',
        Block([
            BindingDef('a', Number(10)),
            BindingDef('b', BindingUsage('a')),
            ExprStmt(BindingUsage('b')),
        ]),
    )


def test_unterminated_block():
    with pytest.raises(ParseError) as exc:
        parse_block('{ 1')
    assert str(exc.value) == 'expected }'


def test_parse_func_call_with_one_parameter():
    assert parse_func_call('factorial 10') == ('', FuncCall('factorial', [Number(10)]))


def test_parse_func_call_with_several_parameters():
    assert parse_expr('add 1 2') == ('', FuncCall('add', [Number(1), Number(2)]))


def test_func_call_arguments_nest_to_the_right():
    assert parse_expr('f g 1') == ('', FuncCall('f', [FuncCall('g', [Number(1)])]))


def test_func_call_needs_at_least_one_argument():
    with pytest.raises(ParseError) as exc:
        parse_func_call('foo')
    assert str(exc.value) == 'expected a sequence with more than one item'


def test_parse_binding_def():
    assert parse_binding_def('let x = 10 / 2') == (
        '',
        BindingDef('x', BinaryOp(Number(10), Number(2), Op.DIV)),
    )


def test_cannot_parse_binding_def_without_space_after_let():
    with pytest.raises(ParseError) as exc:
        parse_binding_def('letaaa=1+2')
    assert str(exc.value) == 'expected a whitespace'


def test_parse_func_def():
    assert parse_func_def('fn second x y => y') == ('', FuncDef('second', ['x', 'y'], BindingUsage('y')))


def test_parse_func_def_without_params():
    assert parse_func_def('fn ten => { 10 }') == ('', FuncDef('ten', [], Block([ExprStmt(Number(10))])))


def test_statement_prefers_binding_def():
    assert parse_statement('let a = 1') == ('', BindingDef('a', Number(1)))


def test_statement_falls_back_to_expression():
    assert parse_statement('1 * 3') == ('', ExprStmt(BinaryOp(Number(1), Number(3), Op.MUL)))


def test_identifier_starting_with_keyword_is_a_binding_usage():
    assert parse_statement('letter') == ('', ExprStmt(BindingUsage('letter')))
    assert parse_statement('fnord') == ('', ExprStmt(BindingUsage('fnord')))


def test_expression_error_comes_from_last_alternative():
    with pytest.raises(ParseError) as exc:
        parse_expr('+')
    assert str(exc.value) == 'expected {'


def test_parse_statements_stops_at_first_failure():
    assert parse_statements('  let a = 1\n a ) rest') == (
        ') rest',
        [BindingDef('a', Number(1)), ExprStmt(BindingUsage('a'))],
    )


def test_longest_accepted_number_literal():
    assert parse_number('7' * 4300) == ('', Number(int('7' * 4300)))


def test_number_literal_too_long_is_not_swallowed_by_alternation():
    with pytest.raises(LimitError) as exc:
        parse_expr('9' * 5000)
    assert str(exc.value) == 'number literal too long'
