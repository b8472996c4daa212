from __future__ import annotations
import struct

from ..errors import malformed


class Cursor:
    """Read position plus exclusive end bound over a borrowed buffer."""
    __slots__ = ("buf", "pos", "end")

    def __init__(self, data: bytes | bytearray | memoryview, pos: int = 0, end: int | None = None):
        self.buf = memoryview(data)
        if end is None:
            end = len(self.buf)
        if not (0 <= pos <= end <= len(self.buf)):
            raise ValueError(f"bad cursor bounds: pos={pos} end={end} size={len(self.buf)}")
        self.pos = pos
        self.end = end

    def remaining(self) -> int: return self.end - self.pos
    def tell(self) -> int: return self.pos
    def at_end(self) -> bool: return self.pos >= self.end

    def copy(self) -> "Cursor":
        return Cursor(self.buf, self.pos, self.end)

    def seek(self, pos: int) -> None:
        if not (0 <= pos <= self.end):
            raise malformed(f"seek out of bounds: {pos} (end {self.end})", self.pos)
        self.pos = pos

    def skip(self, n: int) -> None:
        if n < 0 or n > self.remaining():
            raise malformed(f"underrun: skip {n} at {self.pos}, {self.remaining()} left", self.pos)
        self.pos += n

    def take(self, n: int) -> bytes:
        if n < 0 or n > self.remaining():
            raise malformed(f"underrun: need {n} at {self.pos}, {self.remaining()} left", self.pos)
        end = self.pos + n
        out = self.buf[self.pos:end].tobytes()
        self.pos = end
        return out

    def peek(self, n: int) -> bytes:
        if n < 0 or n > self.remaining():
            raise malformed(f"peek underrun: need {n} at {self.pos}", self.pos)
        return self.buf[self.pos:self.pos + n].tobytes()

    def peek_u8(self) -> int:
        if self.pos >= self.end:
            raise malformed(f"peek underrun at {self.pos}", self.pos)
        return self.buf[self.pos]

    # big-endian reads
    def _unpack(self, fmt: str, n: int):
        return struct.unpack(fmt, self.take(n))[0]
    def u8(self) -> int:  return self._unpack(">B", 1)
    def u16(self) -> int: return self._unpack(">H", 2)
    def u32(self) -> int: return self._unpack(">I", 4)
    def u64(self) -> int: return self._unpack(">Q", 8)
