from __future__ import annotations
import math
import struct

from .containers import iter_entries
from .cursor import Cursor
from .header import decode_header
from .skip import item_end
from .strings import read_payload
from ..constants import AI_UINT8, AI_UINT16, AI_UINT32, AI_UINT64, DEFAULT_TEXT_LIMIT, INDEFINITE, MAX_DEPTH
from ..errors import CborError, ErrorCode, illegal, malformed
from cborview.models.common import MajorType, Simple

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}

_SIMPLE_NAMES = {
    Simple.FALSE: "false",
    Simple.TRUE: "true",
    Simple.NULL: "null",
    Simple.UNDEFINED: "undefined",
}

_FLOAT_FORMATS = {AI_UINT16: (">H", ">e"), AI_UINT32: (">I", ">f"), AI_UINT64: (">Q", ">d")}


class TextOut:
    """Output buffer that refuses to grow past `max_chars`."""
    __slots__ = ("parts", "size", "max_chars")

    def __init__(self, max_chars: int = DEFAULT_TEXT_LIMIT):
        self.parts: list[str] = []
        self.size = 0
        self.max_chars = max_chars

    def write(self, s: str) -> None:
        if self.size + len(s) > self.max_chars:
            raise CborError(ErrorCode.MEMORY,
                            f"text output exceeds {self.max_chars} characters")
        self.parts.append(s)
        self.size += len(s)

    def getvalue(self) -> str:
        return "".join(self.parts)


def format_int(val: int, is_negative: bool) -> str:
    return str(-(val + 1) if is_negative else val)


def format_text_part(data: bytes) -> str:
    """Quoted text; bytes that are not valid UTF-8 come out as \\xNN."""
    out = []
    for ch in data.decode("utf-8", errors="surrogateescape"):
        o = ord(ch)
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif 0xDC80 <= o <= 0xDCFF:
            out.append(f"\\x{o - 0xDC00:02x}")
        elif o < 0x20 or o == 0x7F:
            out.append(f"\\u{o:04x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def format_bytes_part(data: bytes) -> str:
    return "h'" + data.hex() + "'"


def format_float(val: float) -> str:
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "-Infinity" if val < 0 else "Infinity"
    return repr(val)


def _simple_or_float(ai: int, val: int) -> str:
    if ai in _FLOAT_FORMATS:
        raw_fmt, float_fmt = _FLOAT_FORMATS[ai]
        return format_float(struct.unpack(float_fmt, struct.pack(raw_fmt, val))[0])
    if ai < AI_UINT8 and val in _SIMPLE_NAMES:
        return _SIMPLE_NAMES[val]
    return f"simple({val})"


def render_item(cur: Cursor, out: TextOut, depth: int = 0) -> None:
    """
    Append the text form of the item at `cur` to `out`, advancing `cur` past it.
    Dispatch mirrors skip_item, so both stop at the same offset.
    """
    if depth > MAX_DEPTH:
        raise illegal(f"nesting deeper than {MAX_DEPTH}", cur.tell())
    start = cur.tell()
    ib = cur.peek_u8()
    major, val = decode_header(cur)

    if major in (MajorType.UINT, MajorType.NINT):
        out.write(format_int(val, major == MajorType.NINT))
        return

    if major in (MajorType.BYTES, MajorType.TEXT):
        data = read_payload(cur, major, val)
        out.write(format_bytes_part(data) if major == MajorType.BYTES else format_text_part(data))
        return

    if major in (MajorType.ARRAY, MajorType.MAP):
        is_map = major == MajorType.MAP
        out.write("{" if is_map else "[")
        for rank, _ in enumerate(iter_entries(cur, val)):
            if rank:
                out.write(", ")
            render_item(cur, out, depth + 1)
            if is_map:
                out.write(": ")
                render_item(cur, out, depth + 1)
        out.write("}" if is_map else "]")
        return

    if major == MajorType.TAGGED:
        out.write(f"{val}(")
        render_item(cur, out, depth + 1)
        out.write(")")
        return

    if val == INDEFINITE:
        raise malformed(f"unexpected break at {start}", start)
    out.write(_simple_or_float(ib & 0x1F, val))


def to_text(cur: Cursor, max_chars: int = DEFAULT_TEXT_LIMIT) -> str:
    """
    Render one item as text, advancing `cur` past it.
    The item is checked with the skipper first, so malformed input fails
    before any output is produced.
    """
    end = item_end(cur)
    out = TextOut(max_chars)
    render_item(cur, out)
    if cur.tell() != end:
        raise CborError(ErrorCode.UNEXPECTED,
                        f"render stopped at {cur.tell()}, skip at {end}", cur.tell())
    return out.getvalue()
