import io

import pytest

from montyvm.interpreter import Interpreter, MontyError, tokenize


def run(lines):
    out = io.StringIO()
    interpreter = Interpreter(out)
    interpreter.run(lines)
    return interpreter, out.getvalue()


def run_error(lines):
    with pytest.raises(MontyError) as info:
        run(lines)
    return str(info.value)


def test_tokenize_splits_on_spaces_and_newlines():
    assert tokenize("  push   12\n") == ["push", "12"]


def test_tokenize_blank_line():
    assert tokenize("   \n") == []


def test_tokenize_tab_is_not_a_delimiter():
    assert tokenize("push\t1\n") == ["push\t1"]


def test_pall_prints_top_first():
    _, output = run(["push 1\n", "push 2\n", "push 3\n", "pall\n"])
    assert output == "3\n2\n1\n"


def test_queue_mode_pushes_to_bottom():
    _, output = run(["queue\n", "push 1\n", "push 2\n", "push 3\n", "pall\n"])
    assert output == "1\n2\n3\n"


def test_stack_mode_restored():
    interpreter, _ = run(["queue", "push 1", "push 2", "stack", "push 3"])
    assert list(interpreter.stack) == [3, 1, 2]


def test_pall_empty_prints_nothing():
    _, output = run(["pall"])
    assert output == ""


def test_push_negative():
    interpreter, _ = run(["push -5"])
    assert list(interpreter.stack) == [-5]


@pytest.mark.parametrize("line", ["push", "push 12a", "push -", "push 1.5"])
def test_push_usage_error(line):
    assert run_error([line]) == "L1: usage: push integer"


def test_unknown_instruction():
    assert run_error(["push 1", "foo 3"]) == "L2: unknown instruction foo"


def test_error_carries_line_number():
    with pytest.raises(MontyError) as info:
        run(["nop", "nop", "pop"])
    assert info.value.line_number == 3


def test_comments_and_blank_lines_ignored():
    interpreter, output = run(["#push 5", "   # note", "", "\n", "nop"])
    assert output == ""
    assert len(interpreter.stack) == 0


def test_pint_prints_top():
    _, output = run(["push 4", "push 9", "pint"])
    assert output == "9\n"


def test_pint_empty():
    assert run_error(["pint"]) == "L1: can't pint, stack empty"


def test_pop_empty():
    assert run_error(["push 1", "pop", "pop"]) == "L3: can't pop an empty stack"


def test_pop_removes_top():
    interpreter, _ = run(["push 1", "push 2", "pop"])
    assert list(interpreter.stack) == [1]


def test_swap():
    interpreter, _ = run(["push 1", "push 2", "swap"])
    assert list(interpreter.stack) == [1, 2]


@pytest.mark.parametrize("opcode", ["add", "sub", "mul", "div", "mod", "swap"])
def test_too_short(opcode):
    assert run_error(["push 1", opcode]) == f"L2: can't {opcode}, stack too short"


@pytest.mark.parametrize("opcode", ["div", "mod"])
def test_division_by_zero(opcode):
    assert run_error(["push 5", "push 0", opcode]) == "L3: division by zero"


def test_add():
    _, output = run(["push 1", "push 2", "add", "pint"])
    assert output == "3\n"


def test_binary_op_shrinks_stack():
    interpreter, _ = run(["push 7", "push 3", "push 2", "mul"])
    assert len(interpreter.stack) == 2


def test_rotl_and_rotr_are_inverse():
    interpreter, _ = run(["push 1", "push 2", "push 3", "rotl", "rotr"])
    assert list(interpreter.stack) == [3, 2, 1]


def test_rotl_moves_top_to_bottom():
    _, output = run(["push 1", "push 2", "push 3", "rotl", "pall"])
    assert output == "2\n1\n3\n"


def test_pchar():
    _, output = run(["push 72", "pchar"])
    assert output == "H\n"


def test_pchar_empty():
    assert run_error(["pchar"]) == "L1: can't pchar, stack empty"


@pytest.mark.parametrize("value", ["128", "-1"])
def test_pchar_out_of_range(value):
    assert run_error([f"push {value}", "pchar"]) == "L2: can't pchar, value out of range"


def test_pstr_stops_at_zero():
    _, output = run(["push 72", "push 0", "push 105", "push 72", "pstr"])
    assert output == "Hi\n"


def test_pstr_empty_stack():
    _, output = run(["pstr"])
    assert output == "\n"


def test_output_before_error_is_kept():
    out = io.StringIO()
    interpreter = Interpreter(out)
    with pytest.raises(MontyError):
        interpreter.run(["push 8", "pint", "bogus"])
    assert out.getvalue() == "8\n"