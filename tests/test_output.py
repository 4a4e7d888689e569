import os

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str


def _capture(action):
    """Run ``action(fd)`` against a pipe and return what it wrote."""
    read_fd, write_fd = os.pipe()
    try:
        action(write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        return reader.read()


def test_put_char_string():
    assert _capture(lambda fd: put_char("a", fd)) == b"a"


def test_put_char_int_is_single_byte():
    assert _capture(lambda fd: put_char(65, fd)) == b"A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_str_writes_whole_string():
    assert _capture(lambda fd: put_str("hello world", fd)) == b"hello world"


def test_put_str_empty_writes_nothing():
    assert _capture(lambda fd: put_str("", fd)) == b""


def test_put_str_stops_at_nul():
    assert _capture(lambda fd: put_str("abc\0def", fd)) == b"abc"


def test_put_endl_appends_newline():
    assert _capture(lambda fd: put_endl("hello", fd)) == b"hello\n"


def test_put_endl_empty_is_just_newline():
    assert _capture(lambda fd: put_endl("", fd)) == b"\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    assert int(_capture(lambda fd: put_nbr(n, fd))) == n


def test_put_nbr_negative_has_minus_sign():
    out = _capture(lambda fd: put_nbr(-2147483648, fd))
    assert out == b"-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", 1)


def test_writes_accumulate_in_order():
    read_fd, write_fd = os.pipe()
    try:
        put_str("n=", write_fd)
        put_nbr(5, write_fd)
        put_char("!", write_fd)
        put_endl("", write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        written = reader.read()
    assert written == b"n=5!\n"