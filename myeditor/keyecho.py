"""Show the byte value of each key pressed in raw mode until ``q``."""

from __future__ import annotations

import sys
import termios
from collections.abc import Callable

from myeditor.terminal import Terminal

INTRO = "进入原始模式，按'q'退出。按键的ASCII值如下：\n"


def describe_byte(code: int) -> str:
    """Describe one input byte; non-printable bytes are shown as ``?``."""
    shown = chr(code) if 32 <= code <= 126 else "?"
    signed = code - 256 if code > 127 else code
    return f"你按下了字符: '{shown}' (ASCII: {signed})"


def echo_keys(read_byte: Callable[[], int | None], write: Callable[[str], object]) -> int:
    """Describe bytes from ``read_byte`` until ``q`` or end of input.

    Returns the number of bytes described.
    """
    count = 0
    while (code := read_byte()) is not None:
        write(describe_byte(code) + "\n")
        count += 1
        if code == ord("q"):
            break
    return count


def main(argv: list[str] | None = None) -> int:
    """Run the key echo loop on the controlling terminal."""
    terminal = Terminal()
    try:
        with terminal.raw_mode():
            terminal.write(INTRO)
            echo_keys(terminal.read_byte, terminal.write)
    except (OSError, termios.error) as exc:
        print(f"keyecho: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())