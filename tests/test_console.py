import io

import pytest

from ninetools.console import Style, colorize, format_heading, print_error


def test_colorize_single_style():
    assert colorize("x", Style.RED) == "\x1b[31mx\x1b[m"


def test_colorize_without_styles_only_resets():
    assert colorize("plain") == "plain\x1b[m"


def test_colorize_multiple_styles_in_order():
    result = colorize("hi", Style.BOLD, Style.GREEN)
    assert result == Style.BOLD.value + Style.GREEN.value + "hi" + Style.NORMAL.value


@pytest.mark.parametrize(
    "style, code",
    [
        (Style.BLACK, "\x1b[30m"),
        (Style.YELLOW, "\x1b[33m"),
        (Style.CYAN, "\x1b[36m"),
        (Style.ITALIC, "\x1b[3m"),
    ],
)
def test_colorize_uses_escape_codes(style, code):
    assert colorize("t", style).startswith(code)


def test_print_error_writes_red_line():
    buffer = io.StringIO()
    print_error("boom", buffer)
    assert buffer.getvalue() == "\x1b[31mboom\x1b[m\n"


def test_print_error_defaults_to_stderr(capsys):
    print_error("oops")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "\x1b[31moops\x1b[m\n"


def test_format_heading():
    assert format_heading("VECTOR") == "\x1b[1m\x1b[3m[ VECTOR ]\x1b[m"