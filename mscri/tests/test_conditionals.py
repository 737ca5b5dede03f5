from mscri.interpreter import Interpreter
from mscri.tests.utils import run_source


def test_false_guard_skips_to_endif(capsys):
    run_source("if 0 then print 1 endif\nprint 2")
    assert capsys.readouterr().out.splitlines() == ['2']


def test_true_guard_runs_then_statement_once(capsys):
    run_source("if 1 then print 1 endif")
    assert capsys.readouterr().out.splitlines() == ['1']


def test_then_arm_is_a_single_statement(capsys):
    run_source("if 1 then print 'a' print 'b' endif\nprint 'c'")
    assert capsys.readouterr().out.splitlines() == ['a', 'c']


def test_multiline_if(capsys):
    source = (
        "let a = 6\n"
        "let b = 7\n"
        "if a < b then\n"
        "    print 'smaller'\n"
        "endif\n"
        "if a > b then\n"
        "    print 'larger'\n"
        "endif\n"
        "print 'end'\n"
    )
    run_source(source)
    assert capsys.readouterr().out.splitlines() == ['smaller', 'end']


def test_empty_then_arm(capsys):
    interpreter = run_source("if 1 then endif\nprint 'next'")
    assert capsys.readouterr().out.splitlines() == ['next']
    assert interpreter.diagnostics == []


def test_let_inside_then_arm():
    interpreter = run_source("if 2 > 1 then let x = 'set' endif")
    assert interpreter.evaluate('x').data == 'set'


def test_string_guards_coerce_to_numbers(capsys):
    run_source("if '5' then print 'numeric' endif\nif 'five' then print 'text' endif")
    assert capsys.readouterr().out.splitlines() == ['numeric']


def test_missing_endif_consumes_rest_of_input(capsys):
    run_source("if 0 then print 1\nprint 2\nprint 3")
    assert capsys.readouterr().out == ''


def test_missing_then_is_reported(capsys):
    interpreter = Interpreter('<test>')
    interpreter.execute("if 1 print 'x'")
    assert len(interpreter.diagnostics) == 1
    assert interpreter.diagnostics[0].statement == 'if'
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Error: Expected 'then' in 'if' statement on line 1 in <test>"


def test_nested_if_in_skipped_region_claims_its_own_endif(capsys):
    run_source("if 0 then if 1 then print 1 endif print 2 endif\nprint 3")
    assert capsys.readouterr().out.splitlines() == ['3']


def test_nested_if_in_taken_branch(capsys):
    run_source("if 1 then if 1 then print 'inner' endif endif\nprint 'outer'")
    assert capsys.readouterr().out.splitlines() == ['inner', 'outer']


def test_malformed_statement_in_then_arm_still_skips_to_endif(capsys):
    interpreter = run_source("if 1 then let 5 = 3 endif\nprint 'after'")
    assert len(interpreter.diagnostics) == 1
    assert capsys.readouterr().out.splitlines()[-1] == 'after'
    assert len(interpreter.vars) == 0
