"""Menu selection movement and option labels."""

from __future__ import annotations

from typing import Sequence


def step_selection(options: Sequence[str], selected: int, step: int) -> int:
    """Move the selection by ``step`` with wrap-around, skipping blank options."""
    if not any(options):
        raise ValueError("menu has no selectable options")
    count = len(options)
    position = (selected + step) % count
    while not options[position]:
        position = (position + step) % count
    return position


def render_option(label: str, is_selected: bool, wide: bool) -> str:
    """The text shown for one option.

    Wide menus frame the selection with spaced arrows; narrow menus frame it
    tightly and show a blank option as an empty line.
    """
    if wide:
        return f">   {label}   <" if is_selected else f" {label}"
    if not label:
        return ""
    return f">{label}<" if is_selected else f" {label}"