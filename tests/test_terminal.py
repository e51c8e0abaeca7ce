import io

import pytest

from sellarity.terminal import Key, Terminal


def make(text="", width=20, keys=None):
    out = io.StringIO()
    return Terminal(stdin=io.StringIO(text), stdout=out, width=width, keys=keys), out


def test_center_text_pads_evenly():
    term, out = make(width=20)
    term.center_text("abcd")
    written = out.getvalue()
    pad = len(written) - len(written.lstrip(" "))
    assert written.lstrip(" ") == "abcd"
    assert 2 * pad + 4 in (20, 19)


def test_center_text_longer_than_screen_has_no_padding():
    term, out = make(width=3)
    term.center_text("abcdef")
    assert out.getvalue() == "abcdef"


def test_draw_border_full_width():
    term, out = make(width=15)
    term.draw_border()
    assert out.getvalue() == "\033[96m" + "*" * 15 + "\033[0m\n"


def test_draw_border_zero_width_fallback():
    term, out = make(width=0)
    term.draw_border()
    assert out.getvalue() == "\033[96m****************************\033[0m\n"


def test_draw_lines_share_padding():
    term, out = make(width=30)
    term.draw_lines(["a", "abcdef", "abc"])
    lines = out.getvalue().splitlines()
    pads = {len(line) - len(line.lstrip(" ")) for line in lines}
    assert len(pads) == 1
    assert [line.strip() for line in lines] == ["a", "abcdef", "abc"]


def test_read_line_strips_newline_and_shows_prompt():
    term, out = make("hello world\n")
    assert term.read_line("Name: ") == "hello world"
    assert "Name: " in out.getvalue()


def test_read_line_at_end_raises():
    term, _ = make("")
    with pytest.raises(EOFError):
        term.read_line("x")


def test_read_word_skips_blank_lines_and_splits():
    term, _ = make("\n  alpha beta\n")
    assert term.read_word("") == "alpha"
    assert term.read_word("") == "beta"


def test_read_number_retries_on_invalid():
    term, out = make("abc\n12.5\n")
    assert term.read_number("n: ") == 12.5
    assert "Invalid input. Please try again." in out.getvalue()


@pytest.mark.parametrize("answer, expected", [("y\n", True), ("Yes\n", True), ("n\n", False), ("q\n", False)])
def test_confirm(answer, expected):
    term, _ = make(answer)
    assert term.confirm("Again? ") is expected


def test_read_key_from_fixed_keys():
    term, _ = make(keys=[Key.DOWN, Key.ENTER])
    assert term.read_key() is Key.DOWN
    assert term.read_key() is Key.ENTER
    with pytest.raises(EOFError):
        term.read_key()


def test_read_key_decodes_stream():
    term, _ = make("\r e\x1b[A\x1b[B\xe0H\x00Px")
    keys = [term.read_key() for _ in range(8)]
    assert keys == [
        Key.ENTER,
        Key.SPACE,
        Key.LETTER_E,
        Key.UP,
        Key.DOWN,
        Key.UP,
        Key.DOWN,
        Key.OTHER,
    ]
    with pytest.raises(EOFError):
        term.read_key()


def test_pause_consumes_a_key():
    term, out = make(keys=[Key.OTHER, Key.ENTER])
    term.pause()
    assert "Press any key to continue" in out.getvalue()
    assert term.read_key() is Key.ENTER


def test_clear_writes_escape():
    term, out = make()
    term.clear()
    assert out.getvalue().startswith("\033[2J")