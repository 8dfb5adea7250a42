import io
import os
from contextlib import contextmanager
from unittest import mock

from myeditor.terminal import Key
from myeditor.tildes import CLEAR, TildeScreen, main


class FakeTerminal:
    def __init__(self, data):
        self.data = iter(data)
        self.output = []
        self.in_raw_mode = False

    @contextmanager
    def raw_mode(self):
        self.in_raw_mode = True
        try:
            yield self
        finally:
            self.in_raw_mode = False

    def write(self, data):
        self.output.append(data)

    def read_byte(self):
        return next(self.data, None)


def test_refresh_draws_every_row():
    screen = TildeScreen(5, 20)
    frame = screen.refresh_screen()
    assert frame.startswith("\x1b[?25l\x1b[H")
    assert frame.count("~\x1b[K") == screen.screenrows
    assert frame.count("\r\n") == screen.screenrows - 1
    assert frame.endswith("\x1b[1;1H\x1b[?25h")


def test_cursor_stays_on_screen():
    screen = TildeScreen(3, 4)
    for _ in range(10):
        screen.move_cursor(Key.ARROW_RIGHT)
        screen.move_cursor(Key.ARROW_DOWN)
    assert (screen.cx, screen.cy) == (screen.screencols - 1, screen.screenrows - 1)
    for _ in range(10):
        screen.move_cursor(Key.ARROW_LEFT)
        screen.move_cursor(Key.ARROW_UP)
    assert (screen.cx, screen.cy) == (0, 0)


def test_other_keys_are_ignored():
    screen = TildeScreen(3, 4)
    screen.process_key(Key.PAGE_DOWN)
    screen.process_key(ord("x"))
    assert (screen.cx, screen.cy, screen.quit) == (0, 0, False)


def test_run_moves_then_clears_on_quit():
    screen = TildeScreen(4, 10)
    term = FakeTerminal(b"\x1b[B\x1b[C\x1b[3~q")
    screen.run(term)
    assert screen.quit is True
    assert (screen.cx, screen.cy) == (1, 1)
    assert term.output[-1] == CLEAR
    assert term.output[-2].endswith("\x1b[2;2H\x1b[?25h")
    assert term.in_raw_mode is False


def test_main_without_window_size_fails():
    with mock.patch("os.get_terminal_size", side_effect=OSError("no terminal")):
        assert main([]) == 1