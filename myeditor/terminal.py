"""Raw-mode terminal access and decoding of key presses."""

from __future__ import annotations

import os
import termios
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import IntEnum

ESCAPE = 0x1B
STDIN_FILENO = 0
STDOUT_FILENO = 1
DEFAULT_WINDOW_SIZE = (24, 80)


class Key(IntEnum):
    """Logical keys decoded from terminal escape sequences."""

    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    HOME_KEY = 1004
    END_KEY = 1005
    PAGE_UP = 1006
    PAGE_DOWN = 1007
    DEL_KEY = 1008


_LETTER_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}

_TILDE_KEYS = {
    ord("1"): Key.HOME_KEY,
    ord("4"): Key.END_KEY,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME_KEY,
    ord("8"): Key.END_KEY,
}


def decode_key(read_byte: Callable[[], int | None], delete_key: bool = False) -> int:
    """Read one key press through ``read_byte``.

    ``read_byte`` returns the next byte value, or None when no more input is
    available. Ordinary bytes are returned as they are, recognised escape
    sequences as a :class:`Key`, and anything else starting with ESC as ESC.
    With ``delete_key`` set, ``ESC [ 3 ~`` is decoded as ``Key.DEL_KEY``.
    """
    first = read_byte()
    if first is None:
        raise EOFError("no input available")
    if first != ESCAPE:
        return first

    introducer = read_byte()
    if introducer is None:
        return ESCAPE
    code = read_byte()
    if code is None:
        return ESCAPE
    if introducer != ord("["):
        return ESCAPE

    if ord("0") <= code <= ord("9"):
        terminator = read_byte()
        if terminator != ord("~"):
            return ESCAPE
        if delete_key and code == ord("3"):
            return Key.DEL_KEY
        return _TILDE_KEYS.get(code, ESCAPE)
    return _LETTER_KEYS.get(code, ESCAPE)


def get_window_size(fd: int = STDOUT_FILENO) -> tuple[int, int]:
    """Return ``(rows, cols)`` of the terminal on ``fd``, or 24x80 if unknown."""
    try:
        size = os.get_terminal_size(fd)
    except OSError:
        return DEFAULT_WINDOW_SIZE
    if size.columns == 0:
        return DEFAULT_WINDOW_SIZE
    return size.lines, size.columns


class Terminal:
    """A terminal reached through a pair of file descriptors."""

    def __init__(self, stdin: int = STDIN_FILENO, stdout: int = STDOUT_FILENO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self._saved: list | None = None

    @contextmanager
    def raw_mode(self) -> Iterator[Terminal]:
        """Keep the terminal in raw mode for the duration of the block."""
        self.enable_raw_mode()
        try:
            yield self
        finally:
            self.disable_raw_mode()

    def enable_raw_mode(self) -> None:
        """Switch input to raw, unechoed, byte-at-a-time mode."""
        saved = termios.tcgetattr(self.stdin)
        raw = [*saved[:6], list(saved[6])]
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self.stdin, termios.TCSAFLUSH, raw)
        self._saved = saved

    def disable_raw_mode(self) -> None:
        """Restore the settings saved by :meth:`enable_raw_mode`."""
        if self._saved is None:
            return
        termios.tcsetattr(self.stdin, termios.TCSAFLUSH, self._saved)
        self._saved = None

    def write(self, data: str | bytes) -> None:
        """Write all of ``data``; text is encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        view = memoryview(data)
        while view:
            written = os.write(self.stdout, view)
            view = view[written:]

    def read_byte(self) -> int | None:
        """Read one byte, or return None at end of input."""
        chunk = os.read(self.stdin, 1)
        return chunk[0] if chunk else None

    def read_key(self) -> int:
        """Read and decode one key press."""
        return decode_key(self.read_byte)

    def window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)`` of the output terminal."""
        return get_window_size(self.stdout)