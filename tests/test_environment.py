import pytest

from eldiro.ast import Number
from eldiro.environment import Environment
from eldiro.errors import EvalError
from eldiro.types import NumberVal


def test_store_and_get_binding():
    env = Environment()
    env.store_binding('foo', NumberVal(10))
    assert env.get_binding('foo') == NumberVal(10)


def test_store_overwrites_in_same_scope():
    env = Environment()
    env.store_binding('foo', NumberVal(1))
    env.store_binding('foo', NumberVal(2))
    assert env.get_binding('foo') == NumberVal(2)


def test_child_reads_through_parent_chain():
    root = Environment()
    root.store_binding('a', NumberVal(1))
    grandchild = root.create_child().create_child()
    assert grandchild.get_binding('a') == NumberVal(1)
    assert grandchild.depth == 2


def test_child_store_does_not_touch_parent():
    root = Environment()
    root.store_binding('a', NumberVal(1))
    child = root.create_child()
    child.store_binding('a', NumberVal(2))
    assert child.get_binding('a') == NumberVal(2)
    assert root.get_binding('a') == NumberVal(1)


def test_missing_binding():
    with pytest.raises(EvalError) as exc:
        Environment().create_child().get_binding('missing')
    assert str(exc.value) == "binding with name 'missing' does not exist"


def test_functions_are_looked_up_through_parents():
    root = Environment()
    root.store_func('ten', [], Number(10))
    params, body = root.create_child().get_func('ten')
    assert params == []
    assert body == Number(10)


def test_missing_function():
    with pytest.raises(EvalError) as exc:
        Environment().get_func('nope')
    assert str(exc.value) == "function with name 'nope' does not exist"
