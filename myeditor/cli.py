"""Command-line entry point of the viewer."""

from __future__ import annotations

import sys
import termios

from myeditor.editor import Editor
from myeditor.terminal import Terminal


def main(argv: list[str] | None = None) -> int:
    """Open the file named in ``argv`` (if any) and run the viewer."""
    if argv is None:
        argv = sys.argv[1:]
    filename = argv[0] if argv else None
    terminal = Terminal()
    rows, cols = terminal.window_size()
    editor = Editor(rows, cols)
    editor.open(filename)
    try:
        editor.run(terminal)
    except termios.error as exc:
        print(f"terminal: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())