import pytest

from mscri.environment import Environment
from mscri.exceptions import UndefinedVariableException
from mscri.values import Value


def test_bind_and_lookup():
    env = Environment()
    env.bind('x', Value.number(5))
    assert env.lookup('x') == Value.number(5)
    assert env.vars == {'x': Value.number(5)}


def test_rebinding_replaces_value_and_type():
    env = Environment()
    env.bind('x', Value.string('old'))
    env.bind('x', Value.number(1))
    assert env.lookup('x') == Value.number(1)
    assert list(env.vars) == ['x']


def test_names_are_case_sensitive():
    env = Environment()
    env.bind('Name', Value.number(1))
    with pytest.raises(UndefinedVariableException):
        env.lookup('name')


def test_lookup_unbound_raises_with_context():
    env = Environment()
    with pytest.raises(UndefinedVariableException) as excinfo:
        env.lookup('missing', 3, '<test>')
    assert excinfo.value.varname == 'missing'
    assert str(excinfo.value) == "Variable 'missing' not defined on line 3 in <test>"
