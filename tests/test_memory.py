import pytest

from ftkit.memory import INT_MAX, bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, 0x41, 3)
    assert result is buf
    assert buf[:3] == bytes([0x41] * 3)
    assert buf[3:] == b"def"


def test_memset_truncates_value_to_byte():
    first = memset(bytearray(4), 0x141, 4)
    second = memset(bytearray(4), 0x41, 4)
    assert first == second


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, 3)
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"xyzw")
    bzero(buf, 2)
    assert buf == bytearray(2) + b"zw"


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"hello!", 5)
    assert result is dest
    assert dest[:5] == b"hello"
    assert dest[5:] == b"."


def test_memcpy_zero_bytes_is_noop():
    dest = bytearray(b"keep")
    memcpy(dest, b"", 0)
    assert dest == b"keep"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first_match():
    data = b"banana"
    index = memchr(data, ord("n"), len(data))
    assert data[index] == ord("n")
    assert ord("n") not in data[:index]


def test_memchr_respects_limit_and_misses():
    assert memchr(b"banana", ord("n"), 2) is None
    assert memchr(b"abc", ord("z"), 3) is None


def test_memchr_truncates_value():
    assert memchr(b"\x00\x41", 0x141, 2) == memchr(b"\x00\x41", 0x41, 2)


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abx", b"aby", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x10\xff", b"\x10\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)
    assert memcmp(a, b, 2) == a[1] - b[1]


def test_calloc_zero_request_gives_one_byte():
    assert calloc(0, 5) == bytearray(1)
    assert calloc(5, 0) == bytearray(1)


def test_calloc_is_zeroed_with_right_size():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_limits():
    with pytest.raises(MemoryError):
        calloc(INT_MAX + 1, 1)
    with pytest.raises(MemoryError):
        calloc(65536, 65536)
    with pytest.raises(ValueError):
        calloc(-1, 2)