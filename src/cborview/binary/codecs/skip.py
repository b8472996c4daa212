from __future__ import annotations

from .cursor import Cursor
from .header import decode_header, is_break
from ..constants import BREAK, INDEFINITE, MAX_DEPTH
from ..errors import illegal, malformed
from cborview.models.common import MajorType


def skip_item(cur: Cursor, depth: int = 0) -> None:
    """
    Advance `cur` past exactly one complete item, nested to any depth up to
    MAX_DEPTH, without building its value. Raises CborError(MALFORMED_VALUE)
    on any structural problem; the cursor position is then unspecified.
    """
    if depth > MAX_DEPTH:
        raise illegal(f"nesting deeper than {MAX_DEPTH}", cur.tell())
    start = cur.tell()
    major, val = decode_header(cur)

    if major in (MajorType.UINT, MajorType.NINT):
        return

    if major in (MajorType.BYTES, MajorType.TEXT):
        if val != INDEFINITE:
            cur.skip(val)
        else:
            skip_chunks(cur, major)
        return

    if major in (MajorType.ARRAY, MajorType.MAP):
        per_entry = 2 if major == MajorType.MAP else 1
        if val != INDEFINITE:
            for _ in range(val * per_entry):
                skip_item(cur, depth + 1)
            return
        while not is_break(cur):
            for _ in range(per_entry):
                skip_item(cur, depth + 1)
        cur.skip(1)
        return

    if major == MajorType.TAGGED:
        skip_item(cur, depth + 1)
        return

    # FLOAT / simple: the header already covered the payload; a lone break is not an item.
    if val == INDEFINITE:
        raise malformed(f"unexpected break (0x{BREAK:02x}) at {start}", start)


def skip_chunks(cur: Cursor, major: int) -> None:
    """Skip the definite-length chunks of an indefinite string, then its break."""
    while not is_break(cur):
        chunk_at = cur.tell()
        chunk_major, n = decode_header(cur)
        if chunk_major != major or n == INDEFINITE:
            raise malformed(f"bad chunk in indefinite string at {chunk_at}", chunk_at)
        cur.skip(n)
    cur.skip(1)


def item_end(cur: Cursor) -> int:
    """Offset just past the item at `cur`; `cur` itself does not move."""
    probe = cur.copy()
    skip_item(probe)
    return probe.tell()
