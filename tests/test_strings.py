import pytest
from pydantic import ValidationError

from cborview.binary.codecs.cursor import Cursor
from cborview.binary.codecs.strings import parse_text, read_string
from cborview.binary.errors import CborError, ErrorCode
from cborview.models.common import MajorType
from cborview.models.strings import CborBytes, CborText


def test_text_hi():
    cur = Cursor(b"\x62\x68\x69")
    t = CborText.from_cursor(cur)
    assert t.length == 2
    assert t.value == b"hi"
    assert t.c_str == b"hi\x00"
    assert str(t) == "hi"
    assert cur.tell() == 3


def test_bytes_definite_and_indefinite():
    assert CborBytes.from_cursor(Cursor(b"\x43\x01\x02\x03")).value == b"\x01\x02\x03"
    b = CborBytes.from_cursor(Cursor(b"\x5f\x42\x01\x02\x40\x41\x03\xff"))
    assert b.value == b"\x01\x02\x03"
    assert b.length == 3


def test_wrong_major_type():
    with pytest.raises(CborError) as ei:
        CborBytes.from_cursor(Cursor(b"\x62hi"))
    assert ei.value.code == ErrorCode.MALFORMED_VALUE


def test_truncated_payload():
    with pytest.raises(CborError) as ei:
        CborText.from_cursor(Cursor(b"\x65abc"))
    assert ei.value.code == ErrorCode.MALFORMED_VALUE


def test_payload_stops_at_cursor_end():
    # the bytes exist in the buffer but lie beyond the cursor's end
    with pytest.raises(CborError):
        read_string(Cursor(b"\x43abc", end=3), MajorType.BYTES)


def test_clone_is_deep_and_independent():
    src = CborText.from_cursor(Cursor(b"\x63abc"))
    dup = src.clone()
    assert dup == src
    src.parse(Cursor(b"\x61z"))
    assert dup.value == b"abc" and dup.length == 3
    assert src.value == b"z" and src.length == 1


def test_owned_copy_outlives_buffer():
    buf = bytearray(b"\x42xy")
    b = CborBytes.from_cursor(Cursor(buf))
    buf[1] = 0x3F
    buf[2] = 0x3F
    assert b.value == b"xy"


def test_length_must_match():
    with pytest.raises(ValidationError):
        CborBytes(value=b"ab", length=3)


def test_parse_text_rejects_bad_utf8():
    with pytest.raises(CborError) as ei:
        parse_text(Cursor(b"\x62\xc3\x28"))
    assert ei.value.code == ErrorCode.MALFORMED_VALUE
