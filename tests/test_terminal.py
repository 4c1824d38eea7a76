import io

import pytest

from palletload.terminal import Color, clear_screen, read_line, set_screen_color


def test_clear_screen():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J\033[1;1H"


@pytest.mark.parametrize(
    "color, code",
    [
        (Color.CLEAR, "\033[0m"),
        (Color.RED, "\033[31m"),
        (Color.CYAN, "\033[36m"),
        (Color.GREEN, "\033[32m"),
        (Color.GREY, "\033[90m"),
        (Color.YELLOW, "\033[33m"),
    ],
)
def test_set_screen_color(color, code):
    out = io.StringIO()
    set_screen_color(color, out)
    assert out.getvalue() == code


def test_colors_accumulate():
    out = io.StringIO()
    set_screen_color(Color.RED, out)
    set_screen_color(Color.CLEAR, out)
    assert out.getvalue() == Color.RED.value + Color.CLEAR.value


def test_read_line_strips_newline_only():
    stream = io.StringIO("  first \nsecond\n")
    assert read_line(stream) == "  first "
    assert read_line(stream) == "second"


def test_read_line_without_trailing_newline():
    assert read_line(io.StringIO("last")) == "last"


def test_read_line_empty_line():
    stream = io.StringIO("\nnext\n")
    assert read_line(stream) == ""
    assert read_line(stream) == "next"


def test_read_line_eof_exits():
    with pytest.raises(SystemExit) as info:
        read_line(io.StringIO(""))
    assert info.value.code == 0