"""A bare screen of tildes with a movable cursor."""

from __future__ import annotations

import os
import sys
import termios

from myeditor.terminal import Key, Terminal, decode_key

CLEAR = "\x1b[2J\x1b[H"


class TildeScreen:
    """Cursor state on a screen drawn entirely with ``~`` lines."""

    def __init__(self, screenrows: int, screencols: int) -> None:
        self.screenrows = screenrows
        self.screencols = screencols
        self.cx = 0
        self.cy = 0
        self.quit = False

    def refresh_screen(self) -> str:
        """Return one frame with the cursor placed at its position."""
        lines = [
            "~\x1b[K" + ("\r\n" if y < self.screenrows - 1 else "")
            for y in range(self.screenrows)
        ]
        return (
            "\x1b[?25l\x1b[H"
            + "".join(lines)
            + f"\x1b[{self.cy + 1};{self.cx + 1}H"
            + "\x1b[?25h"
        )

    def move_cursor(self, key: int) -> None:
        """Move one step for an arrow key, staying on screen."""
        if key == Key.ARROW_LEFT:
            if self.cx > 0:
                self.cx -= 1
        elif key == Key.ARROW_RIGHT:
            if self.cx < self.screencols - 1:
                self.cx += 1
        elif key == Key.ARROW_UP:
            if self.cy > 0:
                self.cy -= 1
        elif key == Key.ARROW_DOWN:
            if self.cy < self.screenrows - 1:
                self.cy += 1

    def process_key(self, key: int) -> None:
        """Handle one key press: arrows move, ``q`` quits."""
        if key == ord("q"):
            self.quit = True
        elif key in (Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT):
            self.move_cursor(key)

    def run(self, terminal) -> None:
        """Draw and read keys on ``terminal`` until ``q``, then clear it."""
        with terminal.raw_mode():
            while not self.quit:
                terminal.write(self.refresh_screen())
                self.process_key(decode_key(terminal.read_byte, delete_key=True))
            terminal.write(CLEAR)


def main(argv: list[str] | None = None) -> int:
    """Run the tilde screen on the controlling terminal."""
    terminal = Terminal()
    try:
        size = os.get_terminal_size(terminal.stdout)
    except OSError:
        return 1
    if size.columns == 0:
        return 1
    screen = TildeScreen(size.lines, size.columns)
    try:
        screen.run(terminal)
    except (OSError, termios.error) as exc:
        print(f"tildes: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())