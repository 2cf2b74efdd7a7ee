import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftprintf.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytearray(b"\x00\x00\x00def")


def test_bzero_zero_count_leaves_buffer():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == bytearray(b"xyz")


def test_bzero_too_long_raises():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


@given(st.integers(0, 20), st.integers(0, 20))
def test_calloc_is_zero_filled(count, size):
    buf = calloc(count, size)
    assert len(buf) == count * size
    assert all(b == 0 for b in buf)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_size():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_truncates_to_byte():
    data = b"\x00\x01\xff"
    assert memchr(data, 0x1FF, 3) == 2


def test_memchr_size_past_end_raises():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_equal_and_same_object():
    data = b"abc"
    assert memcmp(data, data, 3) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\x80", b"\x01", 1) > 0
    assert memcmp(b"\x01", b"\x80", 1) < 0


@given(st.binary(min_size=0, max_size=16), st.binary(min_size=0, max_size=16))
def test_memcmp_sign_matches_bytes_order(a, b):
    n = min(len(a), len(b))
    result = memcmp(a, b, n)
    pa, pb = a[:n], b[:n]
    assert (result > 0) == (pa > pb)
    assert (result < 0) == (pa < pb)
    assert (result == 0) == (pa == pb)


def test_memcpy_copies_and_returns_dst():
    dst = bytearray(b"......")
    out = memcpy(dst, b"abcd", 4)
    assert out is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_none_source_leaves_dst():
    dst = bytearray(b"keep")
    assert memcpy(dst, None, 4) == bytearray(b"keep")


def test_memcpy_too_long_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


@given(st.binary(min_size=0, max_size=32))
def test_memcpy_round_trip(data):
    dst = bytearray(len(data))
    memcpy(dst, data, len(data))
    assert bytes(dst) == data


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


@given(st.binary(min_size=1, max_size=32), st.data())
def test_memmove_moves_original_content(data, draw):
    size = len(data)
    dst = draw.draw(st.integers(0, size))
    src = draw.draw(st.integers(0, size))
    length = draw.draw(st.integers(0, size - max(dst, src)))
    buf = bytearray(data)
    memmove(buf, dst, src, length)
    assert len(buf) == size
    assert bytes(buf[dst:dst + length]) == data[src:src + length]


def test_memmove_out_of_range_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    out = memset(buf, ord("z"), 4)
    assert out is buf
    assert buf == bytearray(b"zzzzef")


@given(st.integers(-1000, 1000), st.integers(0, 16))
def test_memset_truncates_value(value, length):
    buf = bytearray(16)
    memset(buf, value, length)
    assert set(buf[:length]) <= {value & 0xFF}
    assert all(b == 0 for b in buf[length:])


def test_memset_negative_length_raises():
    with pytest.raises(ValueError):
        memset(bytearray(4), 0, -1)