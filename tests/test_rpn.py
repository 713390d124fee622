import pytest

from ninetools.console import Style, colorize
from ninetools.rpn import NotationError, evaluate, main, validate_notation


def test_simple_addition():
    assert evaluate("1 1 +") == 2


def test_division_truncates():
    assert evaluate("9 2 /") == 4


def test_negative_division_truncates_toward_zero():
    assert evaluate("0 7 - 2 /") == -3


@pytest.mark.parametrize("a,b", [(3, 4), (9, 8), (0, 5)])
def test_addition_and_multiplication_commute(a, b):
    assert evaluate(f"{a} {b} +") == evaluate(f"{b} {a} +")
    assert evaluate(f"{a} {b} *") == evaluate(f"{b} {a} *")


def test_subtraction_is_antisymmetric():
    assert evaluate("7 3 -") == -evaluate("3 7 -")


def test_trailing_space_is_accepted():
    assert evaluate("4 5 + ") == evaluate("4 5 +")


def test_multichar_operator_token_is_skipped_in_evaluation():
    assert evaluate("1 2 ++") == 2


@pytest.mark.parametrize(
    "expr",
    ["(1 + 1)", "", "   ", "1 2", "+ -", "1 a +", "1.5 2 +"],
)
def test_bad_characters_rejected(expr):
    with pytest.raises(NotationError, match="Must be only a combination"):
        validate_notation(expr)


def test_number_too_large():
    with pytest.raises(NotationError, match="Ints must be less than 10."):
        validate_notation("12 3 +")


@pytest.mark.parametrize("expr", ["1 +", "1 2 + +", "1 2 3 +", "1+ 2", "1  1 +"])
def test_invalid_notation(expr):
    with pytest.raises(NotationError, match="Invalid notation."):
        evaluate(expr)


def test_division_by_zero():
    with pytest.raises(NotationError, match="Division by zero"):
        evaluate("5 0 /")


def test_main_prints_result(capsys):
    assert main(["3 4 *"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == colorize(str(evaluate("3 4 *")), Style.GREEN)


def test_main_usage(capsys):
    assert main([]) == 1
    err = capsys.readouterr().err
    assert "Usage: ./RPN [Reverse Polish Notation]" in err


def test_main_reports_error(capsys):
    assert main(["5 0 /"]) == 1
    assert "Division by zero is not allowed." in capsys.readouterr().err