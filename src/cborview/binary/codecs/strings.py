from __future__ import annotations

from .cursor import Cursor
from .header import decode_header, is_break
from ..constants import INDEFINITE
from ..errors import malformed
from cborview.models.common import MajorType


def read_string(cur: Cursor, major: int) -> bytes:
    """
    Payload of a BYTES or TEXT item. Indefinite strings are a sequence of
    definite chunks of the same major type closed by a break; the chunks are
    returned concatenated.
    """
    start = cur.tell()
    got, n = decode_header(cur)
    if got != major:
        raise malformed(f"expected {MajorType(major).name}, got major type {got}", start)
    return read_payload(cur, major, n)


def read_payload(cur: Cursor, major: int, n: int) -> bytes:
    """String payload once its header has been decoded; `n` may be INDEFINITE."""
    if n != INDEFINITE:
        return cur.take(n)

    parts = []
    while not is_break(cur):
        chunk_at = cur.tell()
        chunk_major, n = decode_header(cur)
        if chunk_major != major or n == INDEFINITE:
            raise malformed(f"bad chunk in indefinite string at {chunk_at}", chunk_at)
        parts.append(cur.take(n))
    cur.skip(1)
    return b"".join(parts)


def parse_bytes(cur: Cursor) -> bytes:
    return read_string(cur, MajorType.BYTES)


def parse_text(cur: Cursor) -> str:
    start = cur.tell()
    raw = read_string(cur, MajorType.TEXT)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise malformed(f"invalid utf-8 in text string at {start}", start) from e
