import pytest

from sellarity.menu import render_option, step_selection

OPTIONS = ["Enter Username", "Enter Password", "", "Log In", "Back"]


def test_step_down_skips_blank():
    assert step_selection(OPTIONS, 1, 1) == 3


def test_step_up_skips_blank():
    assert step_selection(OPTIONS, 3, -1) == 1


def test_step_wraps_both_ways():
    assert step_selection(OPTIONS, 4, 1) == 0
    assert step_selection(OPTIONS, 0, -1) == 4


def test_step_never_lands_on_blank():
    position = 0
    for _ in range(20):
        position = step_selection(OPTIONS, position, 1)
        assert OPTIONS[position]


def test_step_without_selectable_options_raises():
    with pytest.raises(ValueError):
        step_selection(["", ""], 0, 1)
    with pytest.raises(ValueError):
        step_selection([], 0, 1)


def test_render_narrow():
    assert render_option("Log In", True, False) == ">Log In<"
    assert render_option("Log In", False, False) == " Log In"
    assert render_option("", False, False) == ""


def test_render_wide():
    assert render_option("Exit", True, True) == ">   Exit   <"
    assert render_option("Exit", False, True) == " Exit"
    assert render_option("", False, True) == " "