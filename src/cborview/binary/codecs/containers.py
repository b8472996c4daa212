from __future__ import annotations
from typing import Callable, List, Optional, Protocol, Type, TypeVar

from .cursor import Cursor
from .header import decode_header, is_break
from ..constants import INDEFINITE
from ..errors import malformed
from cborview.models.common import MajorType

T = TypeVar("T")
C = TypeVar("C")


class Parseable(Protocol):
    """Element type built with no arguments, then filled by parse()."""
    def parse(self, cur: Cursor) -> None: ...


class CtxParseable(Protocol[C]):
    def parse(self, cur: Cursor, ctx: C) -> None: ...


class MapReceiver(Protocol):
    def parse_map_item(self, cur: Cursor, index: int) -> None:
        """Consume exactly the value stored under integer key `index`."""
        ...


P = TypeVar("P", bound=Parseable)
Q = TypeVar("Q", bound=CtxParseable)


def object_parser(cls: Type[P]) -> Callable[[Cursor], P]:
    """Adapt a Parseable class into an element callable for parse_array."""
    def _parse(cur: Cursor) -> P:
        obj = cls()
        obj.parse(cur)
        return obj
    return _parse


def ctx_object_parser(cls: Type[Q]) -> Callable[[Cursor, C], Q]:
    def _parse(cur: Cursor, ctx: C) -> Q:
        obj = cls()
        obj.parse(cur, ctx)
        return obj
    return _parse


def _open(cur: Cursor, want: MajorType) -> int:
    start = cur.tell()
    major, val = decode_header(cur)
    if major != want:
        raise malformed(f"expected {want.name}, got major type {major} at {start}", start)
    return val


def iter_entries(cur: Cursor, count: int):
    """
    Yield once per entry. Definite: exactly `count` times; a break byte where
    an entry should start is malformed. Indefinite: until the break, which is
    consumed. Each entry must be fully consumed before asking for the next, so
    a nested container's break is never seen here.
    """
    if count == INDEFINITE:
        while True:
            if cur.at_end():
                raise malformed(f"missing break at {cur.tell()}", cur.tell())
            if is_break(cur):
                cur.skip(1)
                return
            yield
    else:
        for rank in range(count):
            if is_break(cur):
                raise malformed(f"break after {rank} of {count} entries at {cur.tell()}", cur.tell())
            yield


def parse_array(
    cur: Cursor,
    element: Callable[[Cursor], T],
    out: Optional[List[T]] = None,
) -> List[T]:
    """
    Decode an ARRAY, handing each element to `element`. The result list grows
    by one per element; on failure the error propagates and `out` keeps
    whatever was appended so far.
    """
    if out is None:
        out = []
    count = _open(cur, MajorType.ARRAY)
    for _ in iter_entries(cur, count):
        out.append(element(cur))
    return out


def parse_ctx_array(
    cur: Cursor,
    element: Callable[[Cursor, C], T],
    ctx: C,
    out: Optional[List[T]] = None,
) -> List[T]:
    """Like parse_array, with the same `ctx` object passed to every element."""
    if out is None:
        out = []
    count = _open(cur, MajorType.ARRAY)
    for _ in iter_entries(cur, count):
        out.append(element(cur, ctx))
    return out


def parse_map(cur: Cursor, receiver: MapReceiver) -> int:
    """
    Decode a MAP whose keys are integers. For each entry the key is turned
    into a signed index (NINT n -> -(n+1)) and the receiver consumes the value.
    Returns the number of entries delivered.
    """
    count = _open(cur, MajorType.MAP)
    delivered = 0
    for _ in iter_entries(cur, count):
        key_at = cur.tell()
        major, key = decode_header(cur)
        if major == MajorType.NINT:
            key = -(key + 1)
        elif major != MajorType.UINT:
            raise malformed(f"map key at {key_at} is major type {major}, expected integer", key_at)
        receiver.parse_map_item(cur, key)
        delivered += 1
    return delivered
