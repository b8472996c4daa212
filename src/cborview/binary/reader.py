from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from .codecs.cursor import Cursor
from .codecs.header import peek_major
from .codecs.skip import skip_item
from .codecs.text import to_text
from .constants import DEFAULT_TEXT_LIMIT
from .errors import CborError

from cborview.models.common import MajorType
from cborview.models.summary import ItemSummary

LOG = logging.getLogger(__name__)

BytesLike = Union[str, Path, bytes, bytearray, memoryview]


class ParseError(CborError):
    """CborError raised while walking a buffer of concatenated items."""

    @classmethod
    def wrap(cls, err: CborError, item_offset: int) -> "ParseError":
        at = err.offset if err.offset is not None else item_offset
        return cls(err.code, f"item at {item_offset}: {err}", at)


# -----------------------------
# Helpers
# -----------------------------

def load_bytes(inp: BytesLike) -> bytes:
    if isinstance(inp, (bytes, bytearray, memoryview)):
        return bytes(inp)
    p = Path(str(inp))
    return p.read_bytes()


def load_hex(text: str) -> bytes:
    """Hex dump to bytes; whitespace and a leading 0x are ignored."""
    s = "".join(text.split())
    if s[:2].lower() == "0x":
        s = s[2:]
    return bytes.fromhex(s)


# -----------------------------
# Walking top-level items
# -----------------------------

def iter_items(data: BytesLike, max_items: Optional[int] = None) -> Iterator[Tuple[int, int]]:
    """
    Yield (offset, length) for each top-level item of a buffer holding
    concatenated items. Stops on the first malformed item with ParseError.
    """
    raw = load_bytes(data)
    cur = Cursor(raw)
    seen = 0
    while not cur.at_end():
        if max_items is not None and seen >= max_items:
            return
        start = cur.tell()
        try:
            skip_item(cur)
        except CborError as e:
            raise ParseError.wrap(e, start) from e
        LOG.debug("item %d at %d, %d bytes", seen, start, cur.tell() - start)
        seen += 1
        yield start, cur.tell() - start


def render_all(data: BytesLike, max_chars: int = DEFAULT_TEXT_LIMIT) -> List[str]:
    """Text form of every top-level item, in order."""
    raw = load_bytes(data)
    out = []
    for off, n in iter_items(raw):
        try:
            out.append(to_text(Cursor(raw, off, off + n), max_chars=max_chars))
        except CborError as e:
            raise ParseError.wrap(e, off) from e
    return out


def summarize(
    data: BytesLike,
    *,
    max_items: Optional[int] = None,
    max_chars: int = DEFAULT_TEXT_LIMIT,
    with_text: bool = True,
) -> List[ItemSummary]:
    raw = load_bytes(data)
    out: List[ItemSummary] = []
    for off, n in iter_items(raw, max_items=max_items):
        cur = Cursor(raw, off, off + n)
        major = MajorType(peek_major(cur))
        text = None
        if with_text:
            try:
                text = to_text(cur, max_chars=max_chars)
            except CborError as e:
                raise ParseError.wrap(e, off) from e
        out.append(ItemSummary(offset=off, length=n, major_type=major, text=text))
    return out


def decode_first(data: BytesLike, max_chars: int = DEFAULT_TEXT_LIMIT) -> Tuple[str, int]:
    """
    Render only the first item. Returns (text, bytes consumed); trailing bytes
    after it are left alone and reported at WARNING level.
    """
    raw = load_bytes(data)
    cur = Cursor(raw)
    try:
        text = to_text(cur, max_chars=max_chars)
    except CborError as e:
        raise ParseError.wrap(e, 0) from e
    if not cur.at_end():
        LOG.warning("%d trailing bytes after first item", cur.remaining())
    return text, cur.tell()
