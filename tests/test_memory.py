import pytest

from ftkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("*"), 5)
    assert result is buf
    assert buf[:5] == b"*" * 5
    assert buf[5:] == b" world"


def test_memset_truncates_value_to_a_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_length_leaves_buffer():
    buf = bytearray(b"abc")
    memset(buf, ord("z"), 0)
    assert buf == b"abc"


def test_memset_too_long_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    assert bzero(buf, 3) is None
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"xxx"


def test_memcpy_same_buffer_is_noop():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) == b"same"


def test_memcpy_rejects_overlong_copy():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 2, 0, 4) == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 0, 2, 4) == b"cdefef"


def test_memmove_zero_length_returns_buffer_unchanged():
    buf = bytearray(b"abc")
    assert memmove(buf, 1, 0, 0) is buf
    assert buf == b"abc"


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcd"), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(b"abcd"), -1, 0, 1)


def test_memchr_finds_first_occurrence():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_limit():
    data = b"banana"
    assert memchr(data, ord("n"), 2) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_matches_byte_modulo_256():
    data = bytes([0, 1, 2, 0xFF])
    assert memchr(data, -1, len(data)) == data.index(0xFF)


def test_memcmp_equal_prefixes():
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x00", b"\x80", 1) == -128
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcmp_too_long_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == len(calloc(4, 3))
    assert buf == bytearray(len(buf))
    assert memchr(buf, 1, len(buf)) is None


def test_calloc_empty():
    assert calloc(0, 5) == bytearray()


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)