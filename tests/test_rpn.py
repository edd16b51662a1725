import pytest

from minitools.rpn import RPNError, evaluate, main


@pytest.mark.parametrize("digit", list("0123456789"))
def test_single_digit(digit):
    assert evaluate(digit) == int(digit)


def test_worked_examples():
    assert evaluate("8 9 * 9 - 9 - 9 - 4 - 1 +") == 42
    assert evaluate("7 7 * 7 -") == 42
    assert evaluate("1 2 * 2 / 2 * 2 4 - +") == 0


def test_commutative_operators():
    assert evaluate("3 4 +") == evaluate("4 3 +")
    assert evaluate("3 4 *") == evaluate("4 3 *")


def test_subtraction_order():
    assert evaluate("3 4 -") == -evaluate("4 3 -")


def test_division_truncates_toward_zero():
    assert evaluate("0 7 - 2 /") == -evaluate("7 2 /")


def test_whitespace_is_flexible():
    assert evaluate("  5   3\t+ ") == evaluate("5 3 +")


@pytest.mark.parametrize(
    ("expression", "message"),
    [
        ("(1 + 1)", "Error: invalid token: (1"),
        ("12 3 +", "Error: invalid token: 12"),
        ("1 +", "Error: not enough operands."),
        ("1 0 /", "Error: division by zero."),
        ("1 2", "Error: invalid expression."),
        ("", "Error: invalid expression."),
    ],
)
def test_errors(expression, message):
    with pytest.raises(RPNError) as info:
        evaluate(expression)
    assert str(info.value) == message


def test_main_prints_result(capsys):
    assert main(["7 7 * 7 -"]) == 0
    assert capsys.readouterr().out == "42\n"


def test_main_reports_error(capsys):
    assert main(["1 0 /"]) == 1
    assert capsys.readouterr().err == "Error: division by zero.\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err