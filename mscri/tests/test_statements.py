from mscri.environment import Environment
from mscri.exceptions import MalformedStatementException
from mscri.interpreter import Interpreter, is_exit_command
from mscri.values import Value
from mscri.tests.utils import run_source


def test_let_binds_and_rebinds():
    interpreter = run_source("let x = 5\nlet x = x + 1\nlet s = 'hi'")
    assert interpreter.vars['x'] == Value.number(6)
    assert interpreter.vars['s'] == Value.string('hi')
    assert interpreter.diagnostics == []


def test_let_may_change_value_type():
    interpreter = run_source("let v = 'text'\nlet v = 3")
    assert interpreter.vars['v'] == Value.number(3)


def test_print_formats_values(capsys):
    run_source("print 1+1\nprint 'a'+1\nprint 1/4\nprint 7/2\nprint 10/3")
    assert capsys.readouterr().out.splitlines() == ['2', 'a1', '0.25', '3.5', '3.33333']


def test_let_without_identifier_is_reported(capsys):
    interpreter = run_source("let 5 = 3")
    assert len(interpreter.vars) == 0
    assert len(interpreter.diagnostics) == 1
    assert isinstance(interpreter.diagnostics[0], MalformedStatementException)
    assert capsys.readouterr().out == (
        "Error: Expected identifier in 'let' statement on line 1 in <test>\n"
    )


def test_let_without_equals_is_reported():
    interpreter = run_source("let x 5\nprint 'still running'")
    assert 'x' not in interpreter.vars
    assert len(interpreter.diagnostics) == 1
    assert interpreter.diagnostics[0].expected == "'='"


def test_malformed_statement_only_aborts_itself(capsys):
    run_source("let = 1\nprint 2")
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == '2'


def test_multiple_statements_on_one_line(capsys):
    run_source("let a = 1 print a + 1 print 'done'")
    assert capsys.readouterr().out.splitlines() == ['2', 'done']


def test_expression_statement_value_is_discarded(capsys):
    interpreter = run_source("1 + 2\n'text'")
    assert capsys.readouterr().out == ''
    assert interpreter.diagnostics == []


def test_reserved_keywords_do_not_loop(capsys):
    interpreter = run_source("while 1\nprint 'after'")
    assert capsys.readouterr().out.splitlines() == ['after']
    assert interpreter.diagnostics == []


def test_reserved_keywords_are_inert():
    source = (
        "let i = 0\n"
        "for i = 1 to 3 step 1\n"
        "endfor\n"
        "function f\n"
        "return 5\n"
        "endfunction\n"
    )
    interpreter = run_source(source)
    assert interpreter.vars == {'i': Value.number(0)}
    assert [e.varname for e in interpreter.diagnostics] == ['f']


def test_stray_tokens_are_skipped(capsys):
    run_source(") , = endif\nprint 'ok'")
    assert capsys.readouterr().out.splitlines() == ['ok']


def test_empty_source_is_a_no_op(capsys):
    interpreter = run_source("\n\n// nothing here\n")
    assert capsys.readouterr().out == ''
    assert interpreter.diagnostics == []


def test_variables_persist_across_executions():
    interpreter = Interpreter('<stdin>')
    interpreter.execute('let count = 1')
    interpreter.execute('let count = count + 1')
    assert interpreter.vars['count'] == Value.number(2)


def test_shared_environment_between_interpreters():
    env = Environment()
    Interpreter('a', env).execute('let shared = "yes"')
    assert Interpreter('b', env).evaluate('shared') == Value.string('yes')


def test_is_exit_command():
    assert is_exit_command('exit')
    assert not is_exit_command('exit ')
    assert not is_exit_command('EXIT')
    assert not is_exit_command('')
