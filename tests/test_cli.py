import io
import os
import termios
from unittest import mock

from myeditor.cli import main


def fake_attrs():
    return [0, 0, 0, 0, 0, 0, [0] * 32]


def test_main_shows_file_and_quits(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("alpha\nbeta\n", encoding="utf-8")
    keys = io.BytesIO(b"\x1b[Bq")
    written = []

    def fake_write(fd, data):
        written.append(bytes(data))
        return len(data)

    with mock.patch("termios.tcgetattr", return_value=fake_attrs()), mock.patch(
        "termios.tcsetattr"
    ) as setattr_mock, mock.patch("os.read", lambda fd, n: keys.read(n)), mock.patch(
        "os.write", fake_write
    ), mock.patch(
        "os.get_terminal_size", return_value=os.terminal_size((24, 80))
    ):
        result = main([str(path)])

    assert result == 0
    assert setattr_mock.call_count == 2
    output = b"".join(written).decode("utf-8")
    assert "alpha\r\n" in output
    assert "beta\r\n" in output
    assert output.count("\x1b[2J") == 2
    assert output.endswith("\x1b[2;1H\x1b[?25h")


def test_main_fails_without_terminal():
    with mock.patch("termios.tcgetattr", side_effect=termios.error(25, "not a tty")), mock.patch(
        "os.get_terminal_size", return_value=os.terminal_size((24, 80))
    ):
        assert main([]) == 1