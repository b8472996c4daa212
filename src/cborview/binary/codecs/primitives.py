from __future__ import annotations

from .cursor import Cursor
from .header import decode_header
from ..errors import illegal, malformed
from cborview.models.common import MajorType, Simple

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
UINT32_MAX = 2**32 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
UINT64_MAX = 2**64 - 1


def _parse_integer(cur: Cursor, signed: bool, lo: int, hi: int) -> int:
    start = cur.tell()
    major, val = decode_header(cur)
    if major == MajorType.UINT:
        pass
    elif major == MajorType.NINT and signed:
        val = -(val + 1)
    else:
        raise malformed(f"expected {'integer' if signed else 'unsigned integer'}, got major type {major}", start)
    if not (lo <= val <= hi):
        raise illegal(f"integer {val} out of range [{lo}, {hi}]", start)
    return val


def parse_int(cur: Cursor, signed: bool = False) -> int:
    """32-bit integer. Unsigned parsing rejects NINT items."""
    if signed:
        return _parse_integer(cur, True, INT32_MIN, INT32_MAX)
    return _parse_integer(cur, False, 0, UINT32_MAX)


def parse_int64(cur: Cursor, signed: bool = False) -> int:
    if signed:
        return _parse_integer(cur, True, INT64_MIN, INT64_MAX)
    return _parse_integer(cur, False, 0, UINT64_MAX)


def parse_signed_int(cur: Cursor) -> int:
    return parse_int(cur, signed=True)


def parse_signed_int64(cur: Cursor) -> int:
    return parse_int64(cur, signed=True)


def parse_boolean(cur: Cursor) -> bool:
    # Only the one-byte forms 0xf4 / 0xf5 are accepted.
    start = cur.tell()
    ib = cur.peek_u8()
    major, val = decode_header(cur)
    if major != MajorType.FLOAT or (ib & 0x1F) not in (Simple.FALSE, Simple.TRUE):
        raise malformed(f"expected boolean, got 0x{ib:02x}", start)
    return val == Simple.TRUE
