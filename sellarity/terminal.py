"""Console input and output: centred text, borders and key reading."""

from __future__ import annotations

import os
import shutil
import sys
from collections import deque
from enum import Enum, auto
from typing import Iterable, TextIO

CYAN = "\033[96m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"
DEFAULT_WIDTH = 80
FALLBACK_BORDER = "*" * 28
PAUSE_MESSAGE = "Press any key to continue . . . "
INVALID_INPUT = "Invalid input. Please try again.\n"


class Key(Enum):
    """Keys the menus react to."""

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    SPACE = auto()
    LETTER_E = auto()
    OTHER = auto()


_KEY_SEQUENCES = {
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    " ": Key.SPACE,
    "e": Key.LETTER_E,
    "\x1b[A": Key.UP,
    "\x00H": Key.UP,
    "\xe0H": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x00P": Key.DOWN,
    "\xe0P": Key.DOWN,
}


def _decode_key(sequence: str) -> Key:
    if sequence == "\x03":
        raise KeyboardInterrupt
    return _KEY_SEQUENCES.get(sequence, Key.OTHER)


class Terminal:
    """Reads keys and lines from an input stream and draws on an output stream.

    ``keys`` replaces interactive key reading with a fixed sequence of keys;
    ``width`` fixes the screen width instead of asking the console.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        width: int | None = None,
        keys: Iterable[Key] | None = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._width = width
        self._keys = iter(keys) if keys is not None else None
        self._tokens: deque[str] = deque()

    def width(self) -> int:
        """Number of columns on the screen."""
        if self._width is not None:
            return self._width
        return shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns

    def write(self, text: str) -> None:
        """Write text as it is."""
        self._out.write(text)
        self._out.flush()

    def center_text(self, text: str) -> None:
        """Write text preceded by enough spaces to centre it."""
        padding = max(0, (self.width() - len(text)) // 2)
        self.write(" " * padding + text)

    def draw_border(self) -> None:
        """Draw a full-width line of stars."""
        width = self.width()
        stars = "*" * width if width > 0 else FALLBACK_BORDER
        self.write(f"{CYAN}{stars}{RESET}\n")

    def draw_lines(self, lines: Iterable[str]) -> None:
        """Write lines as one block centred on its longest line."""
        block = list(lines)
        longest = max((len(line) for line in block), default=0)
        padding = " " * max(0, (self.width() - longest) // 2)
        for line in block:
            self.write(f"{padding}{line}\n")

    def clear(self) -> None:
        """Clear the screen."""
        self.write(CLEAR_SCREEN)

    def read_key(self) -> Key:
        """Wait for one key press."""
        if self._keys is not None:
            try:
                return next(self._keys)
            except StopIteration:
                raise EOFError("no more keys") from None
        if self._in.isatty():
            return _decode_key(self._console_key())
        return _decode_key(self._stream_key())

    def _stream_key(self) -> str:
        first = self._in.read(1)
        if not first:
            raise EOFError("end of input")
        if first == "\x1b":
            return first + self._in.read(2)
        if first in ("\x00", "\xe0"):
            return first + self._in.read(1)
        return first

    def _console_key(self) -> str:
        if os.name == "nt":
            import msvcrt

            first = msvcrt.getwch()
            if first in ("\x00", "\xe0"):
                return first + msvcrt.getwch()
            return first
        import termios
        import tty

        fd = self._in.fileno()
        saved = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            sequence = os.read(fd, 1).decode(errors="replace")
            if sequence == "\x1b":
                sequence += os.read(fd, 2).decode(errors="replace")
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        return sequence

    def _next_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError("end of input")
        return line

    def read_line(self, prompt: str) -> str:
        """Show a centred prompt and read a whole line."""
        self.center_text(prompt)
        self._tokens.clear()
        return self._next_line().rstrip("\r\n")

    def read_word(self, prompt: str) -> str:
        """Show a centred prompt and read one whitespace-separated word."""
        self.center_text(prompt)
        while not self._tokens:
            self._tokens.extend(self._next_line().split())
        return self._tokens.popleft()

    def read_number(self, prompt: str) -> float:
        """Read a number, asking again until one is given."""
        while True:
            word = self.read_word(prompt)
            try:
                return float(word)
            except ValueError:
                self._tokens.clear()
                self.write(INVALID_INPUT)

    def pause(self) -> None:
        """Wait for any key."""
        self.write(PAUSE_MESSAGE)
        self.read_key()
        self.write("\n")

    def confirm(self, prompt: str) -> bool:
        """Ask a yes/no question; only an answer starting with Y means yes."""
        return self.read_word(prompt)[:1].upper() == "Y"