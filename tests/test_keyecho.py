import io
import termios
from unittest import mock

from myeditor.keyecho import INTRO, describe_byte, echo_keys, main


def reader(data):
    it = iter(data)
    return lambda: next(it, None)


def test_describe_printable():
    assert describe_byte(ord("a")) == "你按下了字符: 'a' (ASCII: 97)"


def test_describe_non_printable():
    text = describe_byte(1)
    assert "'?'" in text
    assert text.endswith("(ASCII: 1)")


def test_describe_high_byte_is_signed():
    assert describe_byte(0xFF).endswith("(ASCII: -1)")


def test_echo_stops_at_q():
    lines = []
    count = echo_keys(reader(b"abqz"), lines.append)
    assert count == 3
    assert lines == [describe_byte(b) + "\n" for b in b"abq"]


def test_echo_stops_at_end_of_input():
    lines = []
    assert echo_keys(reader(b"xy"), lines.append) == 2
    assert len(lines) == 2


def test_main_echoes_until_q():
    keys = io.BytesIO(b"zq")
    written = []

    def fake_write(fd, data):
        written.append(bytes(data))
        return len(data)

    with mock.patch("termios.tcgetattr", return_value=[0, 0, 0, 0, 0, 0, [0] * 32]), mock.patch(
        "termios.tcsetattr"
    ) as setattr_mock, mock.patch("os.read", lambda fd, n: keys.read(n)), mock.patch(
        "os.write", fake_write
    ):
        assert main([]) == 0
    output = b"".join(written).decode("utf-8")
    assert output.startswith(INTRO)
    assert describe_byte(ord("q")) in output
    assert setattr_mock.call_count == 2


def test_main_reports_missing_terminal():
    with mock.patch("termios.tcgetattr", side_effect=termios.error(25, "not a tty")):
        assert main([]) == 1