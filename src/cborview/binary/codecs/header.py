from __future__ import annotations

from .cursor import Cursor
from ..constants import (
    AI_INDEFINITE,
    AI_UINT8,
    AI_UINT16,
    AI_UINT32,
    AI_UINT64,
    BREAK,
    INDEFINITE,
)
from ..errors import malformed
from cborview.models.common import MajorType, major_of

# Major types allowed to carry additional info 31. For FLOAT it is the break stop code.
_INDEFINITE_OK = frozenset({
    MajorType.BYTES, MajorType.TEXT, MajorType.ARRAY, MajorType.MAP, MajorType.FLOAT,
})


def decode_header(cur: Cursor) -> tuple[int, int]:
    """
    Initial byte + length field.
    Returns (major_type, magnitude); magnitude is INDEFINITE for additional info 31.
    For major type 7 the magnitude is the raw payload (simple value or float bits).
    """
    start = cur.tell()
    ib = cur.u8()
    major = major_of(ib)
    ai = ib & 0x1F

    if ai < AI_UINT8:
        return major, ai
    if ai == AI_UINT8:
        return major, cur.u8()
    if ai == AI_UINT16:
        return major, cur.u16()
    if ai == AI_UINT32:
        return major, cur.u32()
    if ai == AI_UINT64:
        return major, cur.u64()
    if ai == AI_INDEFINITE and major in _INDEFINITE_OK:
        return major, INDEFINITE
    raise malformed(f"reserved additional info {ai} for major type {major} (0x{ib:02x})", start)


def is_break(cur: Cursor) -> bool:
    """True when the next byte is the break stop code. Never reads past the end."""
    return not cur.at_end() and cur.peek_u8() == BREAK


def peek_major(cur: Cursor) -> int:
    return major_of(cur.peek_u8())
