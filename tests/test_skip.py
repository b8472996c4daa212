import pytest

from cborview.binary.codecs.containers import parse_array
from cborview.binary.codecs.cursor import Cursor
from cborview.binary.codecs.primitives import parse_boolean, parse_int64
from cborview.binary.codecs.skip import item_end, skip_item
from cborview.binary.codecs.strings import parse_bytes, parse_text
from cborview.binary.constants import MAX_DEPTH
from cborview.binary.errors import CborError, ErrorCode

SAMPLES = [
    b"\x00",
    b"\x39\x01\x00",
    b"\x43abc",
    b"\x5f\x42ab\x41c\xff",
    b"\x7f\x61a\x62bc\xff",
    b"\x83\x01\x82\x02\x03\x9f\x04\xff",
    b"\xa2\x01\x02\x20\x9f\xff",
    b"\xbf\x01\xbf\x02\x03\xff\xff",
    b"\xc1\x1a\x5f\x00\x00\x00",
    b"\xf9\x3c\x00",
    b"\xfa\x3f\xc0\x00\x00",
    b"\xfb\x3f\xf8\x00\x00\x00\x00\x00\x00",
    b"\xf6",
    b"\xf8\xff",
]


@pytest.mark.parametrize("data", SAMPLES)
def test_skip_consumes_whole_item(data):
    cur = Cursor(data + b"\x00")
    skip_item(cur)
    assert cur.tell() == len(data)


def test_skip_leaves_enclosing_break():
    # [_ [_ 1], 2] : inner break must not end the outer array
    data = b"\x9f\x9f\x01\xff\x02\xff"
    cur = Cursor(data)
    skip_item(cur)
    assert cur.tell() == len(data)


@pytest.mark.parametrize("data", [
    b"\x82\x01",            # array short one element
    b"\x82\x01\xff",        # break inside definite array
    b"\x9f\x01",            # indefinite array with no break
    b"\x43ab",              # byte string short
    b"\x5f\x61a\xff",       # text chunk inside byte string
    b"\x5f\x5f\xff\xff",    # nested indefinite chunk
    b"\xbf\x01\xff",        # indefinite map: key without value
    b"\xff",                # lone break
    b"\xc1",                # tag with no content
    b"\xf9\x3c",            # half float cut short
    b"\x1c",                # reserved additional info
])
def test_skip_rejects_malformed(data):
    with pytest.raises(CborError) as ei:
        skip_item(Cursor(data))
    assert ei.value.code == ErrorCode.MALFORMED_VALUE


def test_skip_depth_limit():
    data = b"\x81" * (MAX_DEPTH + 2) + b"\x00"
    with pytest.raises(CborError) as ei:
        skip_item(Cursor(data))
    assert ei.value.code == ErrorCode.ILLEGAL_VALUE


@pytest.mark.parametrize("data, parse", [
    (b"\x1b\x00\x00\x00\x00\x00\x00\x01\x00", parse_int64),
    (b"\xf5", parse_boolean),
    (b"\x5f\x42ab\x41c\xff", parse_bytes),
    (b"\x7f\x61a\x62bc\xff", parse_text),
    (b"\x9f\x01\x18\x20\xff", lambda c: parse_array(c, parse_int64)),
])
def test_skip_agrees_with_typed_parse(data, parse):
    cur = Cursor(data + b"\xf6")
    end = item_end(cur)
    parse(cur)
    assert cur.tell() == end == len(data)
