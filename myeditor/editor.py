"""A read-only text viewer with a scrolling cursor and a status bar."""

from __future__ import annotations

from myeditor.terminal import STDOUT_FILENO, Key, get_window_size

MAX_ROWS = 1024
MAX_ROW_LENGTH = 255
MAX_FILENAME = 255
TAB_WIDTH = 4
STATUS_NAME_WIDTH = 20
PLACEHOLDER = "Hello,World!"
NO_NAME = "No Name"
MESSAGE = "Ctrl-F 搜索..."

_ARROWS = frozenset({Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT})


def render_x(row: str, cx: int) -> int:
    """Return the screen column of character index ``cx`` with tabs expanded."""
    rx = 0
    for ch in row[:max(cx, 0)]:
        rx += TAB_WIDTH - rx % TAB_WIDTH if ch == "\t" else 1
    return rx


def render_row(row: str, width: int) -> str:
    """Render ``row`` with tabs expanded, cut to at most ``width`` columns."""
    out: list[str] = []
    col = 0
    for ch in row:
        if col >= width:
            break
        if ch == "\t":
            spaces = min(TAB_WIDTH - col % TAB_WIDTH, width - col)
            out.append(" " * spaces)
            col += spaces
        else:
            out.append(ch)
            col += 1
    return "".join(out)


def load_rows(path) -> list[str]:
    """Read up to MAX_ROWS rows from ``path``.

    Lines longer than MAX_ROW_LENGTH are split over several rows, and each
    row is cut at its first carriage return or newline.
    """
    rows: list[str] = []
    with open(path, encoding="utf-8", errors="replace", newline="\n") as fh:
        for line in fh:
            for start in range(0, len(line), MAX_ROW_LENGTH):
                chunk = line[start:start + MAX_ROW_LENGTH]
                rows.append(chunk.split("\r", 1)[0].split("\n", 1)[0])
                if len(rows) >= MAX_ROWS:
                    return rows
    return rows


def _padded_bar(text: str, width: int) -> str:
    used = len(text.encode("utf-8"))
    return "\x1b[7m" + text + " " * max(width - used, 0) + "\x1b[m\r\n"


class Editor:
    """Viewer state: text rows, cursor, scroll offset and screen size."""

    def __init__(self, screenrows: int | None = None, screencols: int | None = None) -> None:
        if screenrows is None or screencols is None:
            rows, cols = get_window_size(STDOUT_FILENO)
            screenrows = rows if screenrows is None else screenrows
            screencols = cols if screencols is None else screencols
        # Three lines are kept back for the status and message bars.
        self.screenrows = screenrows - 3
        self.screencols = screencols
        self.cx = 0
        self.cy = 0
        self.rowoff = 0
        self.rows: list[str] = []
        self.quit = False
        self.filename = ""

    def open(self, filename: str | None = None) -> None:
        """Load ``filename``, or a placeholder row when none is given."""
        if filename:
            try:
                rows = load_rows(filename)
            except OSError:
                rows = []
            self.rows = rows or [PLACEHOLDER]
            self.filename = filename[:MAX_FILENAME]
        else:
            self.rows = [PLACEHOLDER]
            self.filename = NO_NAME
        self.cx = self.cy = self.rowoff = 0

    def draw_rows(self) -> str:
        """Return the text area, one screen line per row, ``~`` past the end."""
        lines = []
        for y in range(self.screenrows):
            filerow = y + self.rowoff
            if filerow >= len(self.rows):
                lines.append("~\r\n")
            else:
                lines.append(render_row(self.rows[filerow], self.screencols) + "\r\n")
        return "".join(lines)

    def draw_status_bar(self) -> str:
        """Return the reverse-video status line."""
        if self.filename and self.filename != NO_NAME:
            name = self.filename[:STATUS_NAME_WIDTH]
        else:
            name = NO_NAME
        status = (
            f"文件: {name:<{STATUS_NAME_WIDTH}}  行: {self.cy + 1}/{len(self.rows)}  "
            f"列：{self.cx + 1}/{len(self.rows[self.cy]) + 1}  按q退出"
        )
        return _padded_bar(status, self.screencols)

    def draw_message_bar(self) -> str:
        """Return the reverse-video message line below the status bar."""
        return "\x1b[K" + _padded_bar(MESSAGE, self.screencols)

    def refresh_screen(self) -> str:
        """Return a whole frame: clear, text, bars and cursor placement."""
        rx = render_x(self.rows[self.cy], self.cx) if 0 <= self.cy < len(self.rows) else 0
        return (
            "\x1b[2J\x1b[H\x1b[?25l"
            + self.draw_rows()
            + self.draw_status_bar()
            + self.draw_message_bar()
            + f"\x1b[{self.cy - self.rowoff + 1};{rx + 1}H"
            + "\x1b[?25h"
        )

    def process_key(self, key: int) -> None:
        """Apply one key press, then keep the cursor valid and visible."""
        numrows = len(self.rows)
        if key == ord("q"):
            self.quit = True
        elif key in _ARROWS:
            self.move_cursor(key)
        elif key == Key.HOME_KEY:
            self.cx = 0
        elif key == Key.END_KEY:
            if self.cy < numrows:
                self.cx = len(self.rows[self.cy])
        elif key == Key.PAGE_UP:
            if self.cy > 0:
                self.cy = max(self.cy - self.screenrows, 0)
            self.rowoff = max(self.rowoff - self.screenrows, 0)
        elif key == Key.PAGE_DOWN:
            if self.cy < numrows - 1:
                self.cy = min(self.cy + self.screenrows, numrows - 1)
            self.rowoff = max(min(self.rowoff + self.screenrows, numrows - self.screenrows), 0)
        elif key == ord("\t"):
            if 0 <= self.cy < numrows:
                self._advance_to_tab_stop(self.rows[self.cy])

        self.cy = max(self.cy, 0)
        if self.cy >= numrows:
            self.cy = numrows - 1
        rowlen = len(self.rows[self.cy]) if 0 <= self.cy < numrows else 0
        self.cx = min(max(self.cx, 0), rowlen)
        if self.cy < self.rowoff:
            self.rowoff = self.cy
        if self.cy >= self.rowoff + self.screenrows:
            self.rowoff = self.cy - self.screenrows + 1
        self.rowoff = max(self.rowoff, 0)

    def _advance_to_tab_stop(self, row: str) -> None:
        rx = render_x(row, self.cx)
        nexttab = rx + TAB_WIDTH - rx % TAB_WIDTH
        cx, cur = self.cx, rx
        while cx < len(row) and cur < nexttab:
            cur += TAB_WIDTH - cur % TAB_WIDTH if row[cx] == "\t" else 1
            cx += 1
        self.cx = cx

    def move_cursor(self, key: int) -> None:
        """Move the cursor one step for an arrow key."""
        if key == Key.ARROW_LEFT:
            if self.cx > 0:
                self.cx -= 1
        elif key == Key.ARROW_RIGHT:
            if self.cy < len(self.rows) and self.cx < len(self.rows[self.cy]):
                self.cx += 1
        elif key == Key.ARROW_UP:
            if self.cy > 0:
                self.cy -= 1
                self.cx = min(self.cx, len(self.rows[self.cy]))
        elif key == Key.ARROW_DOWN:
            if self.cy < len(self.rows) - 1:
                self.cy += 1
                self.cx = min(self.cx, len(self.rows[self.cy]))

    def run(self, terminal) -> None:
        """Draw and handle keys on ``terminal`` until ``q`` is pressed."""
        with terminal.raw_mode():
            while not self.quit:
                terminal.write(self.refresh_screen())
                self.process_key(terminal.read_key())