import pytest

from cborview.binary.codecs.cursor import Cursor
from cborview.binary.codecs.header import decode_header, is_break
from cborview.binary.constants import INDEFINITE
from cborview.binary.errors import CborError, ErrorCode


def test_cursor_end_bound_is_exclusive():
    cur = Cursor(b"\x01\x02\x03\x04", pos=1, end=3)
    assert cur.remaining() == 2
    assert cur.take(2) == b"\x02\x03"
    assert cur.at_end()
    with pytest.raises(CborError) as ei:
        cur.u8()
    assert ei.value.code == ErrorCode.MALFORMED_VALUE
    assert cur.tell() == 3


def test_cursor_copy_is_independent():
    cur = Cursor(b"\x00\x01")
    probe = cur.copy()
    probe.skip(2)
    assert cur.tell() == 0 and probe.tell() == 2


@pytest.mark.parametrize("data, major, value, used", [
    (b"\x00", 0, 0, 1),
    (b"\x17", 0, 23, 1),
    (b"\x18\x18", 0, 24, 2),
    (b"\x19\x01\x00", 0, 256, 3),
    (b"\x1a\x00\x01\x00\x00", 0, 65536, 5),
    (b"\x1b\x00\x00\x00\x01\x00\x00\x00\x00", 0, 2**32, 9),
    (b"\x20", 1, 0, 1),
    (b"\x9f", 4, INDEFINITE, 1),
    (b"\x5f", 2, INDEFINITE, 1),
    (b"\xff", 7, INDEFINITE, 1),
])
def test_decode_header(data, major, value, used):
    cur = Cursor(data)
    assert decode_header(cur) == (major, value)
    assert cur.tell() == used


@pytest.mark.parametrize("data", [
    b"",
    b"\x18",
    b"\x19\x01",
    b"\x1a\x00\x00\x00",
    b"\x1b\x00\x00\x00\x00\x00\x00\x00",
    b"\x1c",      # reserved additional info 28
    b"\x1f",      # indefinite unsigned integer
    b"\x3f",      # indefinite negative integer
    b"\xdf",      # indefinite tag
])
def test_decode_header_rejects(data):
    with pytest.raises(CborError) as ei:
        decode_header(Cursor(data))
    assert ei.value.code == ErrorCode.MALFORMED_VALUE


def test_is_break_at_end_does_not_read():
    cur = Cursor(b"\xff", pos=1)
    assert not is_break(cur)
    assert is_break(Cursor(b"\xff"))
